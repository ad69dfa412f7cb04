"""
NC (Noise Criteria) Curves

Standard NC curves define the maximum acceptable sound pressure level at each
octave band for a given NC rating. The table is built once at import time and
is read-only afterwards.

Source: ASHRAE Handbook - HVAC Applications
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd

from .acoustic_constants import NC_CURVE_DATA, OCTAVE_BAND_FREQUENCIES
from .octave_bands import OctaveBandData
from .result_types import round_half_up


@dataclass(frozen=True)
class NCCurve:
    """A standard NC rating and its threshold level at each octave band"""
    rating: int
    values: OctaveBandData


class NCCurveTable:
    """Immutable table of the standard NC curves with lookup, interpolation and classification"""

    def __init__(self, curve_data: Dict[int, Tuple[int, ...]]):
        curves = [
            NCCurve(rating=rating, values=OctaveBandData.from_list(levels))
            for rating, levels in sorted(curve_data.items())
        ]
        self._curves: Tuple[NCCurve, ...] = tuple(curves)
        self._by_rating: Dict[int, NCCurve] = {c.rating: c for c in curves}
        self._matrix = np.array([c.values.to_list() for c in curves], dtype=float)
        self._matrix.setflags(write=False)

    def __iter__(self) -> Iterator[NCCurve]:
        return iter(self._curves)

    def __len__(self) -> int:
        return len(self._curves)

    def ratings(self) -> List[int]:
        """Standard ratings in ascending order"""
        return [c.rating for c in self._curves]

    @property
    def min_rating(self) -> int:
        return self._curves[0].rating

    @property
    def max_rating(self) -> int:
        return self._curves[-1].rating

    def get_curve(self, rating: int) -> Optional[NCCurve]:
        """Exact lookup; None for any rating that is not a standard curve"""
        return self._by_rating.get(rating)

    def interpolate(self, rating: float) -> OctaveBandData:
        """
        Interpolate NC curve values for non-standard ratings (e.g. NC-32)

        The rating is clamped into the table range first. Between two standard
        curves each band is linearly interpolated and rounded to whole dB; at a
        standard rating the curve is returned unchanged.

        Args:
            rating: Target NC rating

        Returns:
            OctaveBandData with the interpolated threshold levels
        """
        target = max(float(self.min_rating), min(float(self.max_rating), float(rating)))

        lower = None
        upper = None
        for curve in self._curves:
            if curve.rating <= target:
                lower = curve
            if upper is None and curve.rating >= target:
                upper = curve

        if lower is None or upper is None:
            # Fallback to the closest standard curve
            closest = min(self._curves, key=lambda c: abs(c.rating - target))
            return closest.values

        if lower.rating == upper.rating:
            return lower.values

        t = (target - lower.rating) / (upper.rating - lower.rating)
        lower_levels = lower.values.as_array()
        upper_levels = upper.values.as_array()
        levels = lower_levels + t * (upper_levels - lower_levels)

        return OctaveBandData.from_list([round_half_up(float(level)) for level in levels])

    def classify(self, spectrum: OctaveBandData) -> int:
        """
        Determine NC rating from octave band levels

        The NC rating is the LOWEST curve that contains every band of the
        spectrum (no band above the curve). A spectrum above every curve
        saturates at the top rating; use ScaleGuard to tell the two apart.

        Args:
            spectrum: Measured octave band levels

        Returns:
            NC rating (15-70)
        """
        levels = OctaveBandData.coerce(spectrum).as_array()
        for curve, limits in zip(self._curves, self._matrix):
            if np.all(levels <= limits):
                return curve.rating

        # If every curve is exceeded, return the highest rating
        return self.max_rating

    def exceedances(self, spectrum: OctaveBandData, rating: int) -> List[Tuple[int, float]]:
        """
        Bands where the spectrum is above a standard curve

        Returns:
            List of (frequency, dB over limit); empty when contained
            or when the rating is not a standard curve
        """
        curve = self.get_curve(rating)
        if curve is None:
            return []
        spectrum = OctaveBandData.coerce(spectrum)
        return [
            (freq, spectrum[freq] - curve.values[freq])
            for freq in OCTAVE_BAND_FREQUENCIES
            if spectrum[freq] > curve.values[freq]
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """NC table with one row per rating and one column per frequency"""
        frame = pd.DataFrame(
            self._matrix.astype(int),
            index=pd.Index(self.ratings(), name="NC"),
            columns=list(OCTAVE_BAND_FREQUENCIES),
        )
        frame.columns.name = "Hz"
        return frame


# Process-wide standard table
NC_CURVE_TABLE = NCCurveTable(NC_CURVE_DATA)


def get_nc_curve(rating: int) -> Optional[NCCurve]:
    """Convenience function for standard curve lookup"""
    return NC_CURVE_TABLE.get_curve(rating)


def interpolate_nc_curve(rating: float) -> OctaveBandData:
    """Convenience function for NC curve interpolation"""
    return NC_CURVE_TABLE.interpolate(rating)


def calculate_nc_rating(spectrum: OctaveBandData) -> int:
    """Convenience function for NC rating calculation"""
    return NC_CURVE_TABLE.classify(spectrum)
