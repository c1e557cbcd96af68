"""Portrait compositing engine."""

from portrait.engine.compositor import LAYERS, LayerSpec, composite
from portrait.engine.display import display
from portrait.engine.override import apply_overrides
from portrait.engine.templates import TemplateRegistry, instantiate

__all__ = [
    "LAYERS",
    "LayerSpec",
    "composite",
    "display",
    "apply_overrides",
    "TemplateRegistry",
    "instantiate",
]
