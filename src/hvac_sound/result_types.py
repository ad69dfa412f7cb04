"""
Standardized result types for sound conversions
Every public conversion reports how much its value can be trusted
"""

import math
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional


@total_ordering
class Confidence(Enum):
    """Ordered confidence levels: EXACT > APPROXIMATE > ESTIMATED"""
    EXACT = "exact"
    APPROXIMATE = "approximate"
    ESTIMATED = "estimated"

    @property
    def rank(self) -> int:
        """Higher rank means more trustworthy (members are declared best first)"""
        members = list(type(self))
        return len(members) - 1 - members.index(self)

    def __lt__(self, other):
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank < other.rank

    def degrade(self) -> 'Confidence':
        """One level less trustworthy; ESTIMATED is the floor"""
        if self is Confidence.EXACT:
            return Confidence.APPROXIMATE
        return Confidence.ESTIMATED

    @classmethod
    def compose(cls, *steps: 'Confidence') -> 'Confidence':
        """
        Confidence of a value derived through a chain of conversion steps

        A single step keeps its own confidence. A chain of two or more steps
        takes its weakest step and, unless every step is exact, drops one
        further level. The result is never better than any step.

        Args:
            steps: Confidence of each hop, in order

        Returns:
            Confidence of the chained result
        """
        if not steps:
            raise ValueError("At least one conversion step is required")
        weakest = min(steps)
        if len(steps) == 1 or weakest is cls.EXACT:
            return weakest
        return weakest.degrade()


@dataclass(frozen=True)
class ConversionResult:
    """Numeric conversion output with its confidence and an optional caveat"""
    value: float
    confidence: Confidence
    notes: Optional[str] = None

    @classmethod
    def exact_zero(cls) -> 'ConversionResult':
        """Result used when a non-positive input short-circuits a conversion"""
        return cls(value=0.0, confidence=Confidence.EXACT)

    def to_dict(self) -> dict:
        data = {'value': self.value, 'confidence': self.confidence.value}
        if self.notes:
            data['notes'] = self.notes
        return data


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to `decimals` places with halves going up (2.5 -> 3, -2.5 -> -2)"""
    if not math.isfinite(value):
        return value
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor
