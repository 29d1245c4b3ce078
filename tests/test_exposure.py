from __future__ import annotations

import dataclasses

import pytest

from mixdesign.exposure import EXPOSURE_CLASSES, exposure_keys, resolve_exposure


def test_catalog_has_exactly_five_classes():
    assert exposure_keys() == ["mild", "moderate", "severe", "verySevere", "extreme"]


@pytest.mark.parametrize(
    "key, max_wc, min_cement, min_grade",
    [
        ("mild", 0.55, 300, 20),
        ("moderate", 0.50, 300, 25),
        ("severe", 0.45, 320, 30),
        ("verySevere", 0.45, 340, 35),
        ("extreme", 0.40, 360, 40),
    ],
)
def test_known_keys_resolve_to_their_limits(key, max_wc, min_cement, min_grade):
    e = resolve_exposure(key)
    assert e.key == key
    assert e.max_water_cement_ratio == max_wc
    assert e.min_cement_content == min_cement
    assert e.min_grade_fck == min_grade


@pytest.mark.parametrize("identifier", [None, "", "unknownXYZ", "Severe", "very severe", 3, ["severe"]])
def test_unknown_identifiers_fall_back_to_mild(identifier):
    assert resolve_exposure(identifier) is EXPOSURE_CLASSES["mild"]


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        EXPOSURE_CLASSES["custom"] = EXPOSURE_CLASSES["mild"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        EXPOSURE_CLASSES["mild"].max_water_cement_ratio = 0.9


def test_wire_form_uses_camel_case_limit_keys():
    assert resolve_exposure("severe").to_dict() == {
        "key": "severe",
        "label": "Severe (RCC)",
        "maxWc": 0.45,
        "minCement": 320.0,
        "minGradeFck": 30.0,
    }
