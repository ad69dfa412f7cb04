"""
Scale Guard - flags spectra that run above the top of the NC table

NC classification saturates at NC-70, so a spectrum that barely touches the
NC-70 curve and one that is 20 dB above it both classify as 70. The usual
cause of the latter is Sound Power Level (LW) data, which runs 10-20 dB
hotter than room Sound Pressure Level (LP), fed in where LP was expected.
This check runs alongside classification, never inside it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .acoustic_constants import MAX_NC_RATING, OCTAVE_BAND_FREQUENCIES, SOUND_POWER_EXCESS_DB
from .debug_logger import debug_logger
from .nc_curves import NCCurveTable, NC_CURVE_TABLE
from .octave_bands import OctaveBandData

COMPONENT = "ScaleGuard"


@dataclass(frozen=True)
class ScaleCheckResult:
    """Outcome of checking a spectrum against the top NC curve"""
    exceeds: bool
    max_excess: float
    bands: List[Tuple[int, float]] = field(default_factory=list)  # (frequency, dB over NC-70)
    message: Optional[str] = None


class ScaleGuard:
    """Detects spectra louder than the highest standard NC curve"""

    def __init__(self, nc_table: Optional[NCCurveTable] = None):
        table = nc_table or NC_CURVE_TABLE
        top_curve = table.get_curve(MAX_NC_RATING)
        if top_curve is None:
            raise ValueError(f"NC table has no NC-{MAX_NC_RATING} curve")
        self._limits = top_curve.values.as_array()

    def _excess(self, spectrum: OctaveBandData) -> np.ndarray:
        return OctaveBandData.coerce(spectrum).as_array() - self._limits

    def exceeds_nc70(self, spectrum: OctaveBandData) -> bool:
        """True if any band is above the NC-70 curve"""
        return bool(np.any(self._excess(spectrum) > 0))

    def max_nc70_excess(self, spectrum: OctaveBandData) -> float:
        """Largest dB amount by which any band exceeds NC-70; 0 when none does"""
        return max(0.0, float(np.max(self._excess(spectrum))))

    def check(self, spectrum: OctaveBandData) -> ScaleCheckResult:
        """
        Full exceedance report for a spectrum

        Returns:
            ScaleCheckResult listing the offending bands and a message that
            points at a Sound Power Level mix-up when the excess is large
        """
        excess = self._excess(spectrum)
        bands = [
            (freq, float(amount))
            for freq, amount in zip(OCTAVE_BAND_FREQUENCIES, excess)
            if amount > 0
        ]
        if not bands:
            return ScaleCheckResult(exceeds=False, max_excess=0.0)

        max_excess = max(amount for _, amount in bands)
        freq_list = ", ".join(str(freq) for freq, _ in bands)
        message = (
            f"Spectrum exceeds NC-{MAX_NC_RATING} by up to {max_excess:.1f} dB "
            f"at {freq_list} Hz; NC rating is capped at {MAX_NC_RATING}."
        )
        if max_excess >= SOUND_POWER_EXCESS_DB:
            message += " Levels this high usually indicate Sound Power Level (LW) data, not Sound Pressure Level (LP)."

        debug_logger.warning(COMPONENT, "Spectrum above NC table range", {
            'spectrum': spectrum,
            'max_excess': max_excess,
        })
        return ScaleCheckResult(exceeds=True, max_excess=max_excess, bands=bands, message=message)


# Shared guard over the standard NC table
default_guard = ScaleGuard()


def exceeds_nc70(spectrum: OctaveBandData) -> bool:
    """Convenience function for the NC-70 exceedance test"""
    return default_guard.exceeds_nc70(spectrum)


def max_nc70_excess(spectrum: OctaveBandData) -> float:
    """Convenience function for the NC-70 overshoot"""
    return default_guard.max_nc70_excess(spectrum)
