"""
Sound measurement types

A SoundMeasurement holds every representation of one noise level. Inputs to
the aggregator are tagged variants so exactly one authoritative source is
represented; PartialMeasurement keeps the loose all-optional shape produced
by document extraction and resolves it to a variant by fixed priority.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd

from .octave_bands import OctaveBandData
from .result_types import Confidence

SOURCE_INPUT = "input"
SOURCE_CALCULATED = "calculated"

# Priority order used to pick the authoritative field
FIELD_PRIORITY: Tuple[str, ...] = ("octave_bands", "nc", "dba", "sones")


@dataclass(frozen=True)
class OctaveBandInput:
    octave_bands: OctaveBandData

    def __post_init__(self):
        object.__setattr__(self, 'octave_bands', OctaveBandData.coerce(self.octave_bands))


@dataclass(frozen=True)
class NCInput:
    nc: float


@dataclass(frozen=True)
class DBAInput:
    dba: float


@dataclass(frozen=True)
class SonesInput:
    sones: float


SoundInput = Union[OctaveBandInput, NCInput, DBAInput, SonesInput]


@dataclass
class PartialMeasurement:
    """Measurement where any subset of the fields may be set"""
    octave_bands: Optional[OctaveBandData] = None
    nc: Optional[float] = None
    dba: Optional[float] = None
    sones: Optional[float] = None

    def present_fields(self) -> List[str]:
        """Names of the populated fields, in priority order"""
        return [name for name in FIELD_PRIORITY if getattr(self, name) is not None]

    def authoritative_input(self) -> Optional[SoundInput]:
        """
        The single input that will be treated as ground truth

        Priority: octave_bands > nc > dba > sones. Returns None when no
        field is set.
        """
        if self.octave_bands is not None:
            return OctaveBandInput(self.octave_bands)
        if self.nc is not None:
            return NCInput(self.nc)
        if self.dba is not None:
            return DBAInput(self.dba)
        if self.sones is not None:
            return SonesInput(self.sones)
        return None

    def ignored_fields(self) -> List[str]:
        """Populated fields that lose to a higher-priority field"""
        return self.present_fields()[1:]


@dataclass
class SoundMeasurement:
    """Complete sound measurement holding all derivable representations"""
    sones: Optional[float] = None
    nc: Optional[float] = None
    dba: Optional[float] = None
    octave_bands: Optional[OctaveBandData] = None
    source: str = SOURCE_INPUT
    confidence: Dict[str, Confidence] = field(default_factory=dict)
    synthetic_octave_bands: bool = False
    notes: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in FIELD_PRIORITY)

    def to_dict(self) -> dict:
        """Serializable dictionary (octave band keys are int Hz)"""
        return {
            'sones': self.sones,
            'nc': self.nc,
            'dba': self.dba,
            'octave_bands': self.octave_bands.to_dict() if self.octave_bands is not None else None,
            'source': self.source,
            'confidence': {name: level.value for name, level in self.confidence.items()},
            'synthetic_octave_bands': self.synthetic_octave_bands,
            'notes': list(self.notes),
        }

    def to_dataframe(self) -> pd.DataFrame:
        """
        Table with one row per quantity: nc, dba, sones, then one row per
        octave band when a spectrum is present
        """
        rows = []
        for name in ("nc", "dba", "sones"):
            rows.append({
                'quantity': name,
                'value': getattr(self, name),
                'confidence': self.confidence[name].value if name in self.confidence else None,
            })
        if self.octave_bands is not None:
            level = self.confidence.get('octave_bands')
            for freq, value in self.octave_bands.items():
                rows.append({
                    'quantity': f"{freq} Hz",
                    'value': value,
                    'confidence': level.value if level else None,
                })
        return pd.DataFrame(rows, columns=['quantity', 'value', 'confidence'])
