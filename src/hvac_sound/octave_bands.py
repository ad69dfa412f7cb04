"""
Octave band spectrum data - the 8 standard bands from 63 Hz to 8 kHz
"""

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Sequence, Union

import numpy as np

from .acoustic_constants import OCTAVE_BAND_FREQUENCIES, NUM_OCTAVE_BANDS


# Accepts 63, "63", "63Hz", "63 Hz", "63_Hz", "hz63", "Hz_63"
_BAND_KEY_PATTERN = re.compile(r'^\s*(?:hz[\s_]*)?(\d+)\s*(?:[\s_]*hz)?\s*$', re.IGNORECASE)


@dataclass(frozen=True)
class OctaveBandData:
    """Octave band sound pressure levels (dB)"""
    freq_63: float = 0.0
    freq_125: float = 0.0
    freq_250: float = 0.0
    freq_500: float = 0.0
    freq_1000: float = 0.0
    freq_2000: float = 0.0
    freq_4000: float = 0.0
    freq_8000: float = 0.0

    def __getitem__(self, frequency: int) -> float:
        if frequency not in OCTAVE_BAND_FREQUENCIES:
            raise KeyError(frequency)
        return getattr(self, f"freq_{frequency}")

    def __iter__(self):
        return iter(OCTAVE_BAND_FREQUENCIES)

    def __len__(self) -> int:
        return NUM_OCTAVE_BANDS

    def items(self):
        return [(freq, self[freq]) for freq in OCTAVE_BAND_FREQUENCIES]

    def to_list(self) -> List[float]:
        """Convert to list for processing"""
        return [getattr(self, f.name) for f in fields(self)]

    def to_dict(self) -> Dict[int, float]:
        """Frequency-keyed dictionary (int Hz keys)"""
        return dict(zip(OCTAVE_BAND_FREQUENCIES, self.to_list()))

    def as_array(self) -> np.ndarray:
        return np.array(self.to_list(), dtype=float)

    @classmethod
    def from_list(cls, values: Sequence[float]) -> 'OctaveBandData':
        """
        Create from an ordered sequence of 8 levels (63 Hz first)

        Raises:
            ValueError: if the sequence does not hold exactly 8 levels
        """
        values = list(values)
        if len(values) != NUM_OCTAVE_BANDS:
            raise ValueError(
                f"Octave band spectrum needs {NUM_OCTAVE_BANDS} levels, got {len(values)}"
            )
        return cls(*(float(v) for v in values))

    @classmethod
    def from_mapping(cls, spectrum: Mapping[Union[str, int], Any]) -> 'OctaveBandData':
        """
        Create from a frequency-keyed mapping

        Keys may be ints or strings such as "63", "63Hz", "63_Hz" or "hz63",
        the shapes produced by document extraction.

        Raises:
            ValueError: on unknown, duplicate or missing bands
        """
        levels: Dict[int, float] = {}
        for key, value in spectrum.items():
            frequency = normalize_frequency_key(key)
            if frequency in levels:
                raise ValueError(f"Duplicate octave band {frequency} Hz")
            levels[frequency] = float(value)

        missing = [f for f in OCTAVE_BAND_FREQUENCIES if f not in levels]
        if missing:
            raise ValueError(f"Missing octave bands: {', '.join(str(f) for f in missing)} Hz")

        return cls.from_list([levels[f] for f in OCTAVE_BAND_FREQUENCIES])

    @classmethod
    def coerce(cls, spectrum: Union['OctaveBandData', Mapping, Sequence[float], np.ndarray]) -> 'OctaveBandData':
        """Accept any supported spectrum shape and return OctaveBandData"""
        if isinstance(spectrum, OctaveBandData):
            return spectrum
        if isinstance(spectrum, Mapping):
            return cls.from_mapping(spectrum)
        return cls.from_list(spectrum)


def normalize_frequency_key(key: Union[str, int, float]) -> int:
    """
    Normalize a band key to its integer center frequency

    Raises:
        ValueError: if the key is not one of the 8 standard bands
    """
    if isinstance(key, str):
        match = _BAND_KEY_PATTERN.match(key)
        if not match:
            raise ValueError(f"Unrecognized octave band key: {key!r}")
        frequency = int(match.group(1))
    else:
        frequency = int(key)
        if frequency != key:
            raise ValueError(f"Unrecognized octave band key: {key!r}")

    if frequency not in OCTAVE_BAND_FREQUENCIES:
        raise ValueError(f"{frequency} Hz is not a standard octave band")
    return frequency
