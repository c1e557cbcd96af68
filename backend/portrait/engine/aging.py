"""Aging rules — per-layer suppression and id substitution driven by age/maturity.

Rules only apply when ``face.aging.enabled`` is true. Thresholds compare
``age + maturity`` (or ``age + maturity / 2`` for hair) against fixed values;
the hair rules additionally flip a deterministic coin from
``deterministic_random`` so only a share of older faces change hairstyle.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from types import MappingProxyType

from portrait.engine.variation import deterministic_random
from portrait.models.face import Face, Feature

logger = logging.getLogger(__name__)

# Hairstyle → the style it regresses to with age. Unmapped ids use the default.
HAIR_AGING_MAP = MappingProxyType({
    "afro": "short",
    "afro2": "short",
    "blowoutFade": "cropFade2",
    "cornrows": "short-fade",
    "curly3": "short3",
    "dreads": "short-fade",
    "emo": "short2",
    "faux-hawk": "short3",
    "fauxhawk-fade": "short-fade",
    "high": "short",
    "juice": "short2",
    "longHair": "short-fade",
    "shaggy2": "shaggy1",
    "short-bald": "short-bald",
    "shortBangs": "short-bald",
    "spike2": "short2",
    "spike3": "short2",
    "spike4": "short2",
    "tall-fade": "crop-fade",
})
DEFAULT_AGED_HAIR = "short-fade"

HAIR_AGE_THRESHOLD = 30
HAIR_AGE_SHARE = 0.5
HAIR_BG_AGE_THRESHOLD = 27
HAIR_BG_AGE_SHARE = 0.75

SHAVE_MATURITY = 23
TRANSPARENT = "rgba(0,0,0,0)"


class AgingAction(enum.Enum):
    UNCHANGED = "unchanged"
    SUPPRESSED = "suppressed"
    SUBSTITUTE = "substitute"


@dataclass(frozen=True)
class AgingDecision:
    action: AgingAction
    new_id: str | None = None

    @property
    def suppressed(self) -> bool:
        return self.action is AgingAction.SUPPRESSED


UNCHANGED = AgingDecision(AgingAction.UNCHANGED)
SUPPRESSED = AgingDecision(AgingAction.SUPPRESSED)


def substitute(new_id: str) -> AgingDecision:
    return AgingDecision(AgingAction.SUBSTITUTE, new_id)


@dataclass(frozen=True)
class SuppressionRule:
    """Suppress ``layer`` (optionally only ids with ``prefix``) when the maturity test passes."""

    layer: str
    prefix: str | None
    suppress_below: float | None = None  # suppressed when m < value
    suppress_from: float | None = None  # suppressed when m >= value

    def applies(self, feature_id: str, m: float) -> bool:
        if self.prefix is not None and not feature_id.startswith(self.prefix):
            return False
        if self.suppress_below is not None and m < self.suppress_below:
            return True
        if self.suppress_from is not None and m >= self.suppress_from:
            return True
        return False


SUPPRESSION_RULES: tuple[SuppressionRule, ...] = (
    SuppressionRule("miscLine", "freckles", suppress_from=22),
    SuppressionRule("miscLine", "chin", suppress_below=25),
    SuppressionRule("smileLine", None, suppress_below=27),
    SuppressionRule("eyeLine", None, suppress_below=30),
    SuppressionRule("miscLine", "forehead", suppress_below=34),
)


def age_hair(hair_id: str) -> str:
    return HAIR_AGING_MAP.get(hair_id, DEFAULT_AGED_HAIR)


def maturity_score(face: Face) -> float:
    return face.aging.age + face.aging.maturity


def evaluate(layer: str, face: Face, feature: Feature | None) -> AgingDecision:
    """Decide whether ``layer`` is drawn as-is, skipped, or drawn with another id."""
    if not face.aging_enabled or feature is None:
        return UNCHANGED

    m = maturity_score(face)
    for rule in SUPPRESSION_RULES:
        if rule.layer == layer and rule.applies(feature.id, m):
            logger.debug("Aging suppresses %s (%s) at maturity %s", layer, feature.id, m)
            return SUPPRESSED

    half = face.aging.age + face.aging.maturity / 2
    if layer == "hair":
        if half >= HAIR_AGE_THRESHOLD and deterministic_random(face) < HAIR_AGE_SHARE:
            return substitute(age_hair(feature.id))
    elif layer == "hairBg":
        if half >= HAIR_BG_AGE_THRESHOLD and deterministic_random(face) < HAIR_BG_AGE_SHARE:
            return substitute("none")

    return UNCHANGED


def resolve_shave(face: Face, feature: Feature) -> str | None:
    """Shave color for a feature: its own color once mature enough, else transparent."""
    if not feature.shave:
        return None
    if face.aging_enabled:
        return feature.shave if maturity_score(face) > SHAVE_MATURITY else TRANSPARENT
    return feature.shave
