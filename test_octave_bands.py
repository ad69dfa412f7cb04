#!/usr/bin/env python3
"""
Tests for octave band spectrum handling and display helpers
"""

import os
import sys

# Add src directory to path
CURRENT_DIR = os.path.dirname(__file__)
SRC_DIR = os.path.join(CURRENT_DIR, 'src')
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import pytest

from hvac_sound.formatting import format_sound_value, get_nc_description
from hvac_sound.octave_bands import OctaveBandData, normalize_frequency_key

LEVELS = [60, 52, 45, 40, 36, 34, 33, 32]


def test_from_list_and_accessors():
    spectrum = OctaveBandData.from_list(LEVELS)
    assert spectrum.to_list() == LEVELS
    assert spectrum[63] == 60
    assert spectrum[8000] == 32
    assert list(spectrum) == [63, 125, 250, 500, 1000, 2000, 4000, 8000]
    assert len(spectrum) == 8
    assert spectrum.as_array().tolist() == LEVELS


@pytest.mark.parametrize("values", [[], LEVELS[:7], LEVELS + [30]])
def test_from_list_requires_eight_levels(values):
    with pytest.raises(ValueError):
        OctaveBandData.from_list(values)


def test_unknown_band_lookup_raises_key_error():
    with pytest.raises(KeyError):
        OctaveBandData()[31]


@pytest.mark.parametrize("key, expected", [
    (63, 63),
    ("125", 125),
    ("250Hz", 250),
    ("500 Hz", 500),
    ("1000_Hz", 1000),
    ("hz2000", 2000),
    ("Hz_4000", 4000),
    (8000.0, 8000),
])
def test_normalize_frequency_key(key, expected):
    assert normalize_frequency_key(key) == expected


@pytest.mark.parametrize("key", ["31.5", "16000", "low", 100, 62.5])
def test_normalize_frequency_key_rejects_non_standard_bands(key):
    with pytest.raises(ValueError):
        normalize_frequency_key(key)


def test_from_mapping_with_extraction_keys():
    extracted = {
        "hz63": 60, "hz125": 52, "hz250": 45, "hz500": 40,
        "hz1000": 36, "hz2000": 34, "hz4000": 33, "hz8000": 32,
    }
    assert OctaveBandData.from_mapping(extracted).to_list() == LEVELS


def test_from_mapping_missing_band_raises():
    partial = {63: 60, 125: 52, 250: 45}
    with pytest.raises(ValueError, match="Missing octave bands"):
        OctaveBandData.from_mapping(partial)


def test_from_mapping_duplicate_band_raises():
    spectrum = dict(zip([63, 125, 250, 500, 1000, 2000, 4000, 8000], LEVELS))
    spectrum["63Hz"] = 61
    with pytest.raises(ValueError, match="Duplicate"):
        OctaveBandData.from_mapping(spectrum)


def test_to_dict_round_trip():
    spectrum = OctaveBandData.from_list(LEVELS)
    assert OctaveBandData.from_mapping(spectrum.to_dict()) == spectrum
    assert OctaveBandData.coerce(spectrum) is spectrum


def test_format_sound_value():
    assert format_sound_value(2.456, "sones", 2) == "2.46 sones"
    assert format_sound_value(35.4, "nc") == "NC-35"
    assert format_sound_value(32.5, "NC") == "NC-33"
    assert format_sound_value(44.2, "dBA") == "44.2 dBA"
    assert format_sound_value(3, "phons", 0) == "3 phons"


def test_get_nc_description():
    assert get_nc_description(35).startswith("NC-35: ")
    assert get_nc_description(70).startswith("NC-70: ")
    assert "Between NC-30" in get_nc_description(32)
