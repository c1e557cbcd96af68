"""Shared test fixtures."""

from __future__ import annotations

import pytest

from portrait.engine.templates import TemplateRegistry
from portrait.models.face import Aging, Face, Feature


# Rect-based templates so bounding boxes (and therefore transforms) are exact.

TEMPLATES = {
    "hairBg": {
        "long": '<rect x="100" y="100" width="200" height="300" fill="$[hairColor]"/>',
        "none": "",
    },
    "body": {
        "body": '<rect x="0" y="450" width="400" height="150" fill="$[skinColor]"/>',
    },
    "jersey": {
        "jersey": '<rect x="0" y="500" width="400" height="100" fill="$[primary]" stroke="$[secondary]" color="$[accent]"/>',
    },
    "ear": {
        "ear1": '<rect x="0" y="0" width="20" height="40" stroke-width="4"/>',
    },
    "head": {
        "head1": '<rect x="60" y="100" width="280" height="400" fill="$[skinColor]" stroke="$[headShave]" stroke-width="6"/>',
    },
    "eyeLine": {
        "line1": '<line x1="100" y1="330" x2="300" y2="330" stroke-width="2"/>',
    },
    "smileLine": {
        "line1": '<line x1="0" y1="0" x2="0" y2="30" stroke-width="2"/>',
    },
    "miscLine": {
        "freckles1": '<circle cx="150" cy="360" r="2"/>',
        "chin-scar": '<line x1="190" y1="480" x2="210" y2="480" stroke-width="2"/>',
        "forehead1": '<line x1="150" y1="180" x2="250" y2="180" stroke-width="2"/>',
    },
    "facialHair": {
        "beard": '<rect x="120" y="380" width="160" height="110" fill="$[faceShave]" stroke="$[hairColor]"/>',
    },
    "eye": {
        "eye1": '<rect x="0" y="0" width="40" height="20" stroke-width="4"/>',
    },
    "eyebrow": {
        "eyebrow1": '<rect x="0" y="0" width="50" height="10" stroke-width="4"/>',
    },
    "mouth": {
        "mouth": '<g stroke-width="4"><rect x="0" y="0" width="80" height="20" stroke-width="4"/></g>',
    },
    "nose": {
        "nose1": '<rect x="0" y="0" width="20" height="40"/>',
        "pinocchio": '<rect x="0" y="0" width="90" height="20"/>',
    },
    "hair": {
        "afro": '<rect id="hair-afro" x="50" y="50" width="300" height="250" fill="$[hairColor]"/>',
        "short": '<rect id="hair-short" x="60" y="80" width="280" height="150" fill="$[hairColor]"/>',
        "short-fade": '<rect id="hair-short-fade" x="62" y="90" width="276" height="140" fill="$[hairColor]"/>',
    },
    "glasses": {
        "none": "",
    },
    "accessories": {
        "none": "",
    },
}


def make_registry() -> TemplateRegistry:
    return TemplateRegistry.from_mapping(TEMPLATES)


def make_face(**kwargs) -> Face:
    """A face with every layer set to a template that exists in TEMPLATES."""
    fields = dict(
        fatness=0.5,
        team_colors=["#111111", "#222222", "#333333"],
        hair_bg=Feature(id="long"),
        body=Feature(id="body", color="#f2d6cb"),
        jersey=Feature(id="jersey"),
        ear=Feature(id="ear1", size=1),
        head=Feature(id="head1", shave="rgba(0,0,0,0.1)"),
        eye_line=Feature(id="line1"),
        smile_line=Feature(id="line1"),
        misc_line=Feature(id="chin-scar"),
        facial_hair=Feature(id="beard", shave="rgba(0,0,0,0.2)"),
        eye=Feature(id="eye1", angle=0),
        eyebrow=Feature(id="eyebrow1", angle=10),
        mouth=Feature(id="mouth"),
        nose=Feature(id="nose1"),
        hair=Feature(id="afro", color="#272421"),
        glasses=Feature(id="none"),
        accessories=Feature(id="none"),
    )
    fields.update(kwargs)
    return Face(**fields)


def aged(age: float, maturity: float = 0.0) -> Aging:
    return Aging(enabled=True, age=age, maturity=maturity)


# Variation values worked out by hand from the 31*h + c string hash:
#   hash("a")=97, "b"=98, "c"=99, "d"=100, "e"=101, "1"=49,
#   hash("0.5")=47607, hash("afro")=2991394
def hashed_face(hair_id: str = "d", fatness: float = 0.5, **kwargs) -> Face:
    return Face(
        fatness=fatness,
        body=Feature(id="a", color="b"),
        head=Feature(id="c"),
        hair=Feature(id=hair_id, color="e"),
        **kwargs,
    )


@pytest.fixture
def registry() -> TemplateRegistry:
    return make_registry()


@pytest.fixture
def face() -> Face:
    return make_face()
