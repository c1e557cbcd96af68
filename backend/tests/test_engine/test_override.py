"""Tests for descriptor overrides."""

import logging

import pytest
from pydantic import ValidationError

from portrait.engine.override import apply_overrides
from portrait.models.face import Face
from tests.conftest import make_face


def test_none_and_empty_are_no_ops():
    face = make_face()
    before = face.model_copy(deep=True)
    assert apply_overrides(face, None) is face
    apply_overrides(face, {})
    assert face == before


def test_feature_fields_merge():
    face = make_face()
    apply_overrides(face, {"hair": {"id": "short"}})
    assert face.hair.id == "short"
    assert face.hair.color == "#272421"


def test_camel_case_layer_names():
    face = make_face()
    apply_overrides(face, {"hairBg": {"id": "none"}, "eyeLine": {"id": "line2"}})
    assert face.hair_bg.id == "none"
    assert face.eye_line.id == "line2"


def test_missing_feature_is_created():
    face = Face()
    apply_overrides(face, {"glasses": {"id": "glasses1", "flip": True}})
    assert face.glasses.id == "glasses1"
    assert face.glasses.flip is True


def test_scalars_and_lists_replace():
    face = make_face()
    apply_overrides(face, {"fatness": 0.9, "teamColors": ["#a", "#b", "#c"]})
    assert face.fatness == 0.9
    assert face.team_colors == ["#a", "#b", "#c"]


def test_aging_merges_and_is_created():
    face = make_face()
    apply_overrides(face, {"aging": {"enabled": True, "age": 40}})
    assert face.aging.enabled is True
    assert face.aging.age == 40
    apply_overrides(face, {"aging": {"maturity": 5}})
    assert face.aging.age == 40
    assert face.aging.maturity == 5


def test_unknown_keys_are_skipped(caplog):
    face = make_face()
    with caplog.at_level(logging.WARNING):
        apply_overrides(face, {"cape": {"id": "red"}, "hair": {"sparkle": True}})
    assert "unknown field" in caplog.text
    assert not hasattr(face, "cape")
    assert face.hair.id == "afro"


@pytest.mark.parametrize(
    "overrides",
    [
        {"hair": "afro"},
        {"fatness": "fat"},
        {"teamColors": ["#a", "#b"]},
        {"aging": {"age": "old"}},
    ],
)
def test_malformed_values_are_rejected(overrides):
    face = make_face()
    with pytest.raises(ValidationError):
        apply_overrides(face, overrides)
    assert face.hair.id == "afro"
    assert face.fatness == 0.5


def test_replaced_values_are_coerced():
    face = make_face()
    apply_overrides(face, {"fatness": "0.25", "hair": {"size": "2"}})
    assert face.fatness == 0.25
    assert face.hair.size == 2.0
