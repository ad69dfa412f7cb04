"""
HVAC sound conversion engine: sones, NC, dBA and octave band spectra
"""

__version__ = "1.0.0"

# Common constants and result types (imported first for use by other modules)
from .acoustic_constants import (
    OCTAVE_BAND_FREQUENCIES, A_WEIGHTING, NC_CURVE_DATA, MIN_NC_RATING, MAX_NC_RATING
)
from .result_types import Confidence, ConversionResult
from .octave_bands import OctaveBandData
from .nc_curves import (
    NCCurve, NCCurveTable, NC_CURVE_TABLE, get_nc_curve, interpolate_nc_curve, calculate_nc_rating
)
from .unit_conversions import (
    UnitConversionEngine, sones_to_phons, phons_to_sones, combine_levels,
    sones_to_dba, dba_to_sones, octave_bands_to_dba, octave_bands_to_nc, nc_to_octave_bands,
    nc_to_dba, dba_to_nc, nc_to_sones, sones_to_nc, octave_bands_to_sones
)
from .measurement import (
    SoundMeasurement, PartialMeasurement, OctaveBandInput, NCInput, DBAInput, SonesInput, SoundInput
)
from .measurement_aggregator import MeasurementAggregator, convert_sound_measurement
from .scale_guard import ScaleGuard, ScaleCheckResult, exceeds_nc70, max_nc70_excess
from .formatting import format_sound_value, get_nc_description

__all__ = [
    '__version__',
    # Reference data
    'OCTAVE_BAND_FREQUENCIES',
    'A_WEIGHTING',
    'NC_CURVE_DATA',
    'MIN_NC_RATING',
    'MAX_NC_RATING',
    'NCCurve',
    'NCCurveTable',
    'NC_CURVE_TABLE',
    'get_nc_curve',
    'interpolate_nc_curve',
    'calculate_nc_rating',
    # Data types
    'Confidence',
    'ConversionResult',
    'OctaveBandData',
    'SoundMeasurement',
    'PartialMeasurement',
    'OctaveBandInput',
    'NCInput',
    'DBAInput',
    'SonesInput',
    'SoundInput',
    # Conversions
    'UnitConversionEngine',
    'sones_to_phons',
    'phons_to_sones',
    'combine_levels',
    'sones_to_dba',
    'dba_to_sones',
    'octave_bands_to_dba',
    'octave_bands_to_nc',
    'nc_to_octave_bands',
    'nc_to_dba',
    'dba_to_nc',
    'nc_to_sones',
    'sones_to_nc',
    'octave_bands_to_sones',
    # Aggregation and range checks
    'MeasurementAggregator',
    'convert_sound_measurement',
    'ScaleGuard',
    'ScaleCheckResult',
    'exceeds_nc70',
    'max_nc70_excess',
    # Display
    'format_sound_value',
    'get_nc_description',
]
