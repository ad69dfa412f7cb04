"""
Measurement Aggregator - completes a sound measurement from one authoritative input

Takes whichever representation was supplied (a spectrum, an NC rating, a dBA
level or a loudness in sones) and derives all the others through the
conversion engine. When a PartialMeasurement carries several fields the
highest-priority one wins: octave bands > NC > dBA > sones.
"""

from typing import Optional, Union

from .debug_logger import debug_logger
from .measurement import (
    DBAInput, NCInput, OctaveBandInput, PartialMeasurement, SonesInput,
    SoundInput, SoundMeasurement, SOURCE_CALCULATED
)
from .result_types import Confidence
from .unit_conversions import UnitConversionEngine, default_engine

COMPONENT = "MeasurementAggregator"


class MeasurementAggregator:
    """Selects the authoritative input and derives every other representation"""

    def __init__(self, engine: Optional[UnitConversionEngine] = None):
        self.engine = engine or default_engine

    def aggregate(self, measurement: Union[SoundInput, PartialMeasurement, None]) -> SoundMeasurement:
        """
        Complete a measurement

        Args:
            measurement: A tagged input variant, or a PartialMeasurement whose
                highest-priority field is used

        Returns:
            SoundMeasurement tagged source="calculated". It is empty when no
            input field was set.
        """
        if isinstance(measurement, PartialMeasurement):
            ignored = measurement.ignored_fields()
            if ignored:
                debug_logger.warning(COMPONENT, "Ignoring lower-priority fields", {
                    'used': measurement.present_fields()[0],
                    'ignored': ignored,
                })
            measurement = measurement.authoritative_input()

        if measurement is None:
            debug_logger.debug(COMPONENT, "No input field set; nothing to derive")
            return SoundMeasurement(source=SOURCE_CALCULATED)

        if isinstance(measurement, OctaveBandInput):
            result = self._from_octave_bands(measurement)
        elif isinstance(measurement, NCInput):
            result = self._from_nc(measurement)
        elif isinstance(measurement, DBAInput):
            result = self._from_dba(measurement)
        elif isinstance(measurement, SonesInput):
            result = self._from_sones(measurement)
        else:
            raise TypeError(f"Unsupported measurement input: {type(measurement).__name__}")

        debug_logger.info(COMPONENT, "Measurement completed", {
            'input': type(measurement).__name__,
            'nc': result.nc,
            'dba': result.dba,
            'sones': result.sones,
        })
        return result

    def _from_octave_bands(self, measurement: OctaveBandInput) -> SoundMeasurement:
        spectrum = measurement.octave_bands
        nc_result = self.engine.octave_bands_to_nc(spectrum)
        dba_result = self.engine.octave_bands_to_dba(spectrum)
        sones_result = self.engine.dba_to_sones(dba_result.value)

        return SoundMeasurement(
            octave_bands=spectrum,
            nc=nc_result.value,
            dba=dba_result.value,
            sones=sones_result.value,
            source=SOURCE_CALCULATED,
            confidence={
                'octave_bands': Confidence.EXACT,
                'nc': nc_result.confidence,
                'dba': dba_result.confidence,
                'sones': Confidence.compose(dba_result.confidence, sones_result.confidence),
            },
        )

    def _from_nc(self, measurement: NCInput) -> SoundMeasurement:
        nc = measurement.nc
        dba_result = self.engine.nc_to_dba(nc)
        sones_result = self.engine.nc_to_sones(nc)
        spectrum = self.engine.nc_to_octave_bands(nc)

        return SoundMeasurement(
            nc=nc,
            dba=dba_result.value,
            sones=sones_result.value,
            octave_bands=spectrum,
            source=SOURCE_CALCULATED,
            confidence={
                'nc': Confidence.EXACT,
                'dba': dba_result.confidence,
                'sones': sones_result.confidence,
                'octave_bands': Confidence.APPROXIMATE,
            },
            synthetic_octave_bands=True,
            notes=["Octave bands are the representative NC curve, not a measured spectrum."],
        )

    def _from_dba(self, measurement: DBAInput) -> SoundMeasurement:
        dba = measurement.dba
        nc_result = self.engine.dba_to_nc(dba)
        sones_result = self.engine.dba_to_sones(dba)

        return SoundMeasurement(
            dba=dba,
            nc=nc_result.value,
            sones=sones_result.value,
            source=SOURCE_CALCULATED,
            confidence={
                'dba': Confidence.EXACT,
                'nc': nc_result.confidence,
                'sones': sones_result.confidence,
            },
            notes=["Octave bands cannot be derived from a single dBA value."],
        )

    def _from_sones(self, measurement: SonesInput) -> SoundMeasurement:
        sones = measurement.sones
        dba_result = self.engine.sones_to_dba(sones)
        nc_result = self.engine.sones_to_nc(sones)

        return SoundMeasurement(
            sones=sones,
            dba=dba_result.value,
            nc=nc_result.value,
            source=SOURCE_CALCULATED,
            confidence={
                'sones': Confidence.EXACT,
                'dba': dba_result.confidence,
                'nc': nc_result.confidence,
            },
            notes=["Octave bands cannot be derived from a loudness value."],
        )


def convert_sound_measurement(measurement: Union[SoundInput, PartialMeasurement, None]) -> SoundMeasurement:
    """Convenience function using the standard conversion engine"""
    return MeasurementAggregator().aggregate(measurement)
