"""
Unit Conversion Engine - conversions between HVAC sound measurement units

Supported representations:
- Sones (perceived loudness)
- Phons (loudness level, used as an intermediate step)
- dBA (A-weighted sound level)
- NC (Noise Criteria rating)
- Octave band spectrum (dB at each of the 8 standard bands)

Most of these conversions are industry rules of thumb, not psychoacoustic
models. Every public conversion returns a ConversionResult whose confidence
says how far the value can be trusted. Out-of-range numbers never raise:
non-positive sones/dBA short-circuit to an exact zero and NC ratings are
clamped before interpolation.
"""

import math
from typing import Optional

import numpy as np

from .acoustic_constants import (
    A_WEIGHTING, OCTAVE_BAND_FREQUENCIES, REFERENCE_PHONS, PHONS_PER_DOUBLING,
    LOW_LEVEL_SONE_EXPONENT, NC_TO_DBA_OFFSET, DBA_DECIMALS, SONES_DECIMALS
)
from .nc_curves import NCCurveTable, NC_CURVE_TABLE
from .octave_bands import OctaveBandData
from .result_types import Confidence, ConversionResult, round_half_up


_A_WEIGHTING_VECTOR = np.array([A_WEIGHTING[f] for f in OCTAVE_BAND_FREQUENCIES], dtype=float)


def sones_to_phons(sones: float) -> float:
    """
    Convert sones to phons (loudness level)

    phons = 40 + 10 * log2(sones); non-positive sones give 0
    """
    if sones <= 0:
        return 0.0
    return REFERENCE_PHONS + PHONS_PER_DOUBLING * math.log2(sones)


def phons_to_sones(phons: float) -> float:
    """
    Convert phons to sones

    At or above 40 phons sones = 2^((phons - 40) / 10). Below 40 phons a
    power law (phons / 40)^2.642 is used instead, so sones_to_phons only
    inverts this for phons >= 40. Non-positive phons give 0.
    """
    if phons <= 0:
        return 0.0
    if phons < REFERENCE_PHONS:
        return (phons / REFERENCE_PHONS) ** LOW_LEVEL_SONE_EXPONENT
    return 2 ** ((phons - REFERENCE_PHONS) / PHONS_PER_DOUBLING)


def combine_levels(*levels: float) -> float:
    """
    Combine noise levels using logarithmic addition

    Non-positive levels are ignored; returns 0.0 when nothing remains.
    """
    positive = np.array([level for level in levels if level > 0], dtype=float)
    if positive.size == 0:
        return 0.0
    return _energy_sum_db(positive)


def _energy_sum_db(levels: np.ndarray) -> float:
    """
    10 * log10(sum(10^(L/10))) computed relative to the loudest level

    Shifting by the peak keeps every power term in [0, 1], so extreme levels
    neither overflow nor underflow. Returns -inf when every level is -inf.
    """
    peak = float(np.max(levels))
    if not math.isfinite(peak):
        return peak
    return peak + 10 * math.log10(float(np.sum(10 ** ((levels - peak) / 10.0))))


class UnitConversionEngine:
    """Pure conversion functions among sones, dBA, NC and octave band spectra"""

    def __init__(self, nc_table: Optional[NCCurveTable] = None):
        self.nc_table = nc_table or NC_CURVE_TABLE

    # ------------------------------------------------------------------
    # Loudness
    # ------------------------------------------------------------------

    def sones_to_dba(self, sones: float) -> ConversionResult:
        """
        Convert sones to approximate dBA

        Phons are treated as numerically equal to dBA, which only holds for
        a 1 kHz reference tone.
        """
        if sones <= 0:
            return ConversionResult.exact_zero()

        phons = sones_to_phons(sones)
        return ConversionResult(
            value=round_half_up(phons, DBA_DECIMALS),
            confidence=Confidence.APPROXIMATE,
            notes="dBA approximated from sones via phons. Accuracy depends on frequency content.",
        )

    def dba_to_sones(self, dba: float) -> ConversionResult:
        """Convert dBA to approximate sones, treating dBA as phons"""
        if dba <= 0:
            return ConversionResult.exact_zero()

        sones = phons_to_sones(dba)
        return ConversionResult(
            value=round_half_up(sones, SONES_DECIMALS),
            confidence=Confidence.APPROXIMATE,
            notes="Sones approximated from dBA. Actual loudness depends on frequency content.",
        )

    # ------------------------------------------------------------------
    # Spectrum
    # ------------------------------------------------------------------

    def octave_bands_to_dba(self, spectrum: OctaveBandData) -> ConversionResult:
        """
        Calculate overall dBA from octave band levels

        Applies the A-weighting correction to every band, sums the band
        energies and converts back to dB.
        """
        levels = OctaveBandData.coerce(spectrum).as_array()
        weighted = levels + _A_WEIGHTING_VECTOR
        overall_dba = _energy_sum_db(weighted)
        if overall_dba == -math.inf:
            return ConversionResult.exact_zero()

        return ConversionResult(
            value=round_half_up(overall_dba, DBA_DECIMALS),
            confidence=Confidence.EXACT,
            notes="Calculated using A-weighting factors and logarithmic addition.",
        )

    def octave_bands_to_nc(self, spectrum: OctaveBandData) -> ConversionResult:
        """NC rating of a spectrum: the lowest standard curve containing it"""
        return ConversionResult(
            value=self.nc_table.classify(spectrum),
            confidence=Confidence.EXACT,
            notes="NC determined by comparing octave band levels to standard NC curves.",
        )

    def nc_to_octave_bands(self, nc: float) -> OctaveBandData:
        """Representative spectrum for an NC rating (the interpolated NC curve)"""
        return self.nc_table.interpolate(nc)

    # ------------------------------------------------------------------
    # NC <-> dBA rule of thumb
    # ------------------------------------------------------------------

    def nc_to_dba(self, nc: float) -> ConversionResult:
        """Convert NC rating to approximate dBA (NC + 6)"""
        return ConversionResult(
            value=nc + NC_TO_DBA_OFFSET,
            confidence=Confidence.APPROXIMATE,
            notes="NC to dBA approximation (NC + 6). Actual difference varies with spectrum shape.",
        )

    def dba_to_nc(self, dba: float) -> ConversionResult:
        """Convert dBA to approximate NC rating (dBA - 6, rounded)"""
        return ConversionResult(
            value=round_half_up(dba - NC_TO_DBA_OFFSET),
            confidence=Confidence.APPROXIMATE,
            notes="dBA to NC approximation (dBA - 6). Actual NC requires octave band analysis.",
        )

    # ------------------------------------------------------------------
    # Chained conversions (through an intermediate dBA value)
    # ------------------------------------------------------------------

    def nc_to_sones(self, nc: float) -> ConversionResult:
        """Estimate sones via NC -> dBA -> sones"""
        dba_result = self.nc_to_dba(nc)
        sones_result = self.dba_to_sones(dba_result.value)
        return ConversionResult(
            value=sones_result.value,
            confidence=Confidence.compose(dba_result.confidence, sones_result.confidence),
            notes="Estimated via NC -> dBA -> sones. Significant uncertainty.",
        )

    def sones_to_nc(self, sones: float) -> ConversionResult:
        """Estimate NC rating via sones -> dBA -> NC"""
        dba_result = self.sones_to_dba(sones)
        nc_result = self.dba_to_nc(dba_result.value)
        return ConversionResult(
            value=nc_result.value,
            confidence=Confidence.compose(dba_result.confidence, nc_result.confidence),
            notes="Estimated via sones -> dBA -> NC. Significant uncertainty.",
        )

    def octave_bands_to_sones(self, spectrum: OctaveBandData) -> ConversionResult:
        """Estimate sones via octave bands -> dBA -> sones"""
        dba_result = self.octave_bands_to_dba(spectrum)
        sones_result = self.dba_to_sones(dba_result.value)
        return ConversionResult(
            value=sones_result.value,
            confidence=Confidence.compose(dba_result.confidence, sones_result.confidence),
            notes="Calculated via octave bands -> dBA -> sones.",
        )


# Shared engine over the standard NC table
default_engine = UnitConversionEngine()


# Convenience functions
def sones_to_dba(sones: float) -> ConversionResult:
    return default_engine.sones_to_dba(sones)


def dba_to_sones(dba: float) -> ConversionResult:
    return default_engine.dba_to_sones(dba)


def octave_bands_to_dba(spectrum: OctaveBandData) -> ConversionResult:
    return default_engine.octave_bands_to_dba(spectrum)


def octave_bands_to_nc(spectrum: OctaveBandData) -> ConversionResult:
    return default_engine.octave_bands_to_nc(spectrum)


def nc_to_octave_bands(nc: float) -> OctaveBandData:
    return default_engine.nc_to_octave_bands(nc)


def nc_to_dba(nc: float) -> ConversionResult:
    return default_engine.nc_to_dba(nc)


def dba_to_nc(dba: float) -> ConversionResult:
    return default_engine.dba_to_nc(dba)


def nc_to_sones(nc: float) -> ConversionResult:
    return default_engine.nc_to_sones(nc)


def sones_to_nc(sones: float) -> ConversionResult:
    return default_engine.sones_to_nc(sones)


def octave_bands_to_sones(spectrum: OctaveBandData) -> ConversionResult:
    return default_engine.octave_bands_to_sones(spectrum)
