"""
Acoustic Constants - Centralized definition of all reference data and magic numbers
used by the sound conversion engine
"""

from typing import Dict, List, Tuple

# =============================================================================
# ACOUSTIC FREQUENCY CONSTANTS
# =============================================================================

# Standard 1/1 octave band center frequencies (Hz)
OCTAVE_BAND_FREQUENCIES: Tuple[int, ...] = (63, 125, 250, 500, 1000, 2000, 4000, 8000)

# Number of octave bands in standard analysis
NUM_OCTAVE_BANDS: int = 8

# Frequency band labels for JSON/dict storage
FREQUENCY_BAND_LABELS: List[str] = [str(f) for f in OCTAVE_BAND_FREQUENCIES]

# A-weighting adjustments for each octave band (dB)
A_WEIGHTING: Dict[int, float] = {
    63: -26.2,
    125: -16.1,
    250: -8.6,
    500: -3.2,
    1000: 0.0,
    2000: 1.2,
    4000: 1.0,
    8000: -1.1,
}

# =============================================================================
# NOISE CRITERIA (NC) CONSTANTS
# =============================================================================

# NC rating range limits
MIN_NC_RATING: int = 15
MAX_NC_RATING: int = 70
NC_RATING_STEP: int = 5

# NC curve data (dB levels at each frequency for each NC rating)
# Format: NC_rating -> [63Hz, 125Hz, 250Hz, 500Hz, 1000Hz, 2000Hz, 4000Hz, 8000Hz]
# Source: ASHRAE Handbook - HVAC Applications
NC_CURVE_DATA: Dict[int, Tuple[int, ...]] = {
    15: (47, 36, 29, 22, 17, 14, 12, 11),
    20: (51, 40, 33, 26, 22, 19, 17, 16),
    25: (54, 44, 37, 31, 27, 24, 22, 21),
    30: (57, 48, 41, 35, 31, 29, 28, 27),
    35: (60, 52, 45, 40, 36, 34, 33, 32),
    40: (64, 56, 50, 45, 41, 39, 38, 37),
    45: (67, 60, 54, 49, 46, 44, 43, 42),
    50: (71, 64, 58, 54, 51, 49, 48, 47),
    55: (74, 67, 62, 58, 56, 54, 53, 52),
    60: (77, 71, 67, 63, 61, 59, 58, 57),
    65: (80, 75, 71, 68, 66, 64, 63, 62),
    70: (83, 79, 75, 72, 71, 70, 69, 68),
}

# =============================================================================
# LOUDNESS / RULE-OF-THUMB CONSTANTS
# =============================================================================

# 1 sone is defined as the loudness of a 40 phon tone
REFERENCE_PHONS: float = 40.0

# Each +10 phons doubles the loudness in sones
PHONS_PER_DOUBLING: float = 10.0

# Exponent of the power law used below 40 phons
LOW_LEVEL_SONE_EXPONENT: float = 2.642

# HVAC rule of thumb: dBA runs about 6 dB above the NC rating
NC_TO_DBA_OFFSET: float = 6.0

# Typical amount by which Sound Power Level exceeds Sound Pressure Level in a room
SOUND_POWER_EXCESS_DB: float = 10.0

# =============================================================================
# ROUNDING
# =============================================================================

DBA_DECIMALS: int = 1
SONES_DECIMALS: int = 2
