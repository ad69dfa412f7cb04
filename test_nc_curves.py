#!/usr/bin/env python3
"""
Tests for the standard NC curve table: lookup, interpolation and classification
"""

import os
import sys

# Add src directory to path
CURRENT_DIR = os.path.dirname(__file__)
SRC_DIR = os.path.join(CURRENT_DIR, 'src')
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import pytest

from hvac_sound.acoustic_constants import OCTAVE_BAND_FREQUENCIES
from hvac_sound.nc_curves import NC_CURVE_TABLE, NCCurveTable, calculate_nc_rating
from hvac_sound.octave_bands import OctaveBandData

STANDARD_RATINGS = list(range(15, 71, 5))


def test_table_has_twelve_ascending_curves():
    assert NC_CURVE_TABLE.ratings() == STANDARD_RATINGS
    assert len(NC_CURVE_TABLE) == 12


def test_get_curve_exact_lookup():
    curve = NC_CURVE_TABLE.get_curve(70)
    assert curve.rating == 70
    assert curve.values.to_list() == [83, 79, 75, 72, 71, 70, 69, 68]
    assert NC_CURVE_TABLE.get_curve(35).values[63] == 60


@pytest.mark.parametrize("rating", [0, 10, 32, 75, 35.5])
def test_get_curve_unknown_rating_is_not_found(rating):
    assert NC_CURVE_TABLE.get_curve(rating) is None


def test_curves_are_non_increasing_with_frequency():
    for curve in NC_CURVE_TABLE:
        levels = curve.values.to_list()
        assert all(a >= b for a, b in zip(levels, levels[1:])), curve.rating


def test_curves_are_non_decreasing_with_rating():
    curves = list(NC_CURVE_TABLE)
    for lower, upper in zip(curves, curves[1:]):
        for freq in OCTAVE_BAND_FREQUENCIES:
            assert lower.values[freq] <= upper.values[freq]


@pytest.mark.parametrize("rating", STANDARD_RATINGS)
def test_interpolate_is_identity_at_table_knots(rating):
    assert NC_CURVE_TABLE.interpolate(rating) == NC_CURVE_TABLE.get_curve(rating).values


def test_interpolate_between_curves_rounds_each_band():
    # NC-32 sits 40% of the way from NC-30 to NC-35
    assert NC_CURVE_TABLE.interpolate(32).to_list() == [58, 50, 43, 37, 33, 31, 30, 29]


def test_interpolate_clamps_out_of_range_ratings():
    assert NC_CURVE_TABLE.interpolate(5) == NC_CURVE_TABLE.get_curve(15).values
    assert NC_CURVE_TABLE.interpolate(-20) == NC_CURVE_TABLE.get_curve(15).values
    assert NC_CURVE_TABLE.interpolate(90) == NC_CURVE_TABLE.get_curve(70).values


def test_interpolate_is_monotonic_in_rating():
    ratings = [15 + 0.5 * i for i in range(111)]
    spectra = [NC_CURVE_TABLE.interpolate(r) for r in ratings]
    for lower, upper in zip(spectra, spectra[1:]):
        for freq in OCTAVE_BAND_FREQUENCIES:
            assert lower[freq] <= upper[freq]


def test_interpolate_on_single_curve_table():
    # Clamping pins every target to the only rating
    table = NCCurveTable({20: (51, 40, 33, 26, 22, 19, 17, 16)})
    assert table.interpolate(15) == table.get_curve(20).values


@pytest.mark.parametrize("rating", STANDARD_RATINGS)
def test_classify_curve_is_its_own_rating(rating):
    assert NC_CURVE_TABLE.classify(NC_CURVE_TABLE.get_curve(rating).values) == rating


def test_classify_quiet_and_saturating_spectra():
    assert NC_CURVE_TABLE.classify(OctaveBandData()) == 15
    assert NC_CURVE_TABLE.classify(OctaveBandData.from_list([120] * 8)) == 70


def test_classify_single_band_exceedance_moves_up_one_curve():
    levels = NC_CURVE_TABLE.get_curve(35).values.to_list()
    levels[0] += 1  # 61 dB at 63 Hz is above NC-35
    assert NC_CURVE_TABLE.classify(OctaveBandData.from_list(levels)) == 40


def test_classify_accepts_frequency_mapping():
    spectrum = {63: 60, 125: 52, 250: 45, 500: 40, 1000: 36, 2000: 34, 4000: 33, 8000: 32}
    assert calculate_nc_rating(spectrum) == 35


def test_exceedances_against_target_curve():
    spectrum = OctaveBandData.from_list([62, 52, 45, 42, 36, 34, 33, 32])
    assert NC_CURVE_TABLE.exceedances(spectrum, 35) == [(63, 2.0), (500, 2.0)]
    assert NC_CURVE_TABLE.exceedances(spectrum, 45) == []
    assert NC_CURVE_TABLE.exceedances(spectrum, 33) == []


def test_to_dataframe_layout():
    frame = NC_CURVE_TABLE.to_dataframe()
    assert list(frame.index) == STANDARD_RATINGS
    assert list(frame.columns) == list(OCTAVE_BAND_FREQUENCIES)
    assert frame.loc[70, 63] == 83
    assert frame.loc[15, 8000] == 11
