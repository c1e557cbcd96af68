"""Layer compositor — draws every face layer onto a surface, back to front.

Per layer: aging decision → template instantiation → one node per position,
each placed with translate → rotate → scale (mirror) → fatness spread.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from portrait.engine.aging import AgingAction, evaluate
from portrait.engine.templates import TemplateRegistry, instantiate
from portrait.models.face import Face, Feature
from portrait.svg.surface import SvgSurface
from portrait.svg.transforms import rotate_centered, scale_centered, translate

logger = logging.getLogger(__name__)

Position = tuple[float, float]

# Head edge distance: 78px each side at fatness 0, 47px at fatness 1.
SKINNY_EDGE = 78
FAT_EDGE = 47

# Noses that stick out sideways are aligned by an edge, not centered.
EDGE_ALIGNED_NOSES = frozenset({"nose4", "pinocchio"})


@dataclass(frozen=True)
class LayerSpec:
    name: str
    # (None,) = draw once, unpositioned; two entries = mirrored pair
    positions: tuple[Position | None, ...] = (None,)
    scale_fatness: bool = False

    @property
    def unpositioned(self) -> bool:
        return len(self.positions) == 1 and self.positions[0] is None


# Paint order. Reordering changes which layers occlude which.
LAYERS: tuple[LayerSpec, ...] = (
    LayerSpec("hairBg", scale_fatness=True),
    LayerSpec("body"),
    LayerSpec("jersey"),
    LayerSpec("ear", ((55, 325), (345, 325)), scale_fatness=True),
    LayerSpec("head", scale_fatness=True),
    LayerSpec("eyeLine"),
    LayerSpec("smileLine", ((150, 435), (250, 435))),
    LayerSpec("miscLine"),
    LayerSpec("facialHair", scale_fatness=True),
    LayerSpec("eye", ((140, 310), (260, 310))),
    LayerSpec("eyebrow", ((140, 270), (260, 270))),
    LayerSpec("mouth", ((200, 440),)),
    LayerSpec("nose", ((200, 370),)),
    LayerSpec("hair", scale_fatness=True),
    LayerSpec("glasses", scale_fatness=True),
    LayerSpec("accessories", scale_fatness=True),
)


def fat_scale(fatness: float) -> float:
    """Horizontal head scale relative to the default head width."""
    return 0.8 + 0.2 * fatness


def fatness_spread(fatness: float) -> float:
    """Horizontal offset applied to side features such as ears."""
    return (SKINNY_EDGE - FAT_EDGE) * (1 - fatness)


def draw_feature(surface: SvgSurface, face: Face, spec: LayerSpec, registry: TemplateRegistry) -> int:
    """Draw one layer. Returns the number of nodes appended (0 when skipped)."""
    original = face.feature(spec.name)
    if original is None or spec.name not in registry:
        return 0

    decision = evaluate(spec.name, face, original)
    if decision.suppressed:
        return 0

    feature: Feature = original.model_copy()
    if decision.action is AgingAction.SUBSTITUTE:
        logger.debug("Aging swaps %s: %s -> %s", spec.name, feature.id, decision.new_id)
        feature.id = decision.new_id

    markup = instantiate(spec.name, feature, face, registry)
    if markup is None:
        return 0

    for i, position in enumerate(spec.positions):
        node = surface.append_markup(markup, layer=spec.name)

        if position is not None:
            if feature.id in EDGE_ALIGNED_NOSES:
                x_align = "right" if feature.flip else "left"
            else:
                x_align = "center"
            translate(node, position[0], position[1], x_align)

        if feature.angle is not None:
            rotate_centered(node, (1 if i == 0 else -1) * feature.angle)

        # Second of a pair is always mirrored
        scale = feature.size if feature.size is not None else 1
        if feature.flip or i == 1:
            scale_centered(node, -scale, scale)
        elif scale != 1:
            scale_centered(node, scale, scale)

        if spec.scale_fatness and spec.positions[0] is not None:
            translate(node, fatness_spread(face.fatness), 0, "left", "top")

    if spec.scale_fatness and spec.unpositioned:
        scale_centered(surface.last_child, fat_scale(face.fatness), 1)

    return len(spec.positions)


def composite(surface: SvgSurface, face: Face, registry: TemplateRegistry) -> None:
    """Draw every layer of ``face`` onto ``surface`` in paint order."""
    drawn = 0
    for spec in LAYERS:
        drawn += draw_feature(surface, face, spec, registry)
    logger.info("Composited face: %d nodes across %d layers", drawn, len(set(surface.layers())))
