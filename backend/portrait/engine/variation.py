"""Deterministic per-face variation.

Aging decisions need a coin flip that is stable for a given face, so the
value is derived from the descriptor itself rather than from an RNG.
"""

from __future__ import annotations

from portrait.models.face import Face
from portrait.utils.math_helpers import format_number

_INT32 = 1 << 32
_INT32_MAX = (1 << 31) - 1


def hash_code(text: str | None) -> int:
    """Absolute value of the 32-bit ``h = 31*h + c`` string hash over UTF-16 code units."""
    if not text:
        return 0
    data = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = ((h << 5) - h + unit) % _INT32
    if h > _INT32_MAX:
        h -= _INT32
    return abs(h)


def deterministic_random(face: Face) -> float:
    """Reproducible value in [0, 0.999] derived from body, head, fatness and hair."""
    body_id = face.body.id if face.body else None
    body_color = face.body.color if face.body else None
    hair_id = face.hair.id if face.hair else None
    hair_color = face.hair.color if face.hair else None
    head_id = face.head.id if face.head else None

    total = (
        hash_code(body_id)
        + hash_code(body_color)
        + hash_code(head_id)
        + hash_code(format_number(face.fatness))
        + hash_code(hair_id)
        + hash_code(hair_color)
    )
    return (total % 1000) / 1000
