"""Math helpers — number formatting, float parsing. No engine imports."""

from __future__ import annotations

import re

import numpy as np

# JavaScript switches Number -> String to exponent notation below this magnitude.
_JS_EXPONENT_BELOW = 1e-6

_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def format_number(value: float) -> str:
    """Format a number the way JavaScript's String(n) does.

    0.5 → "0.5", 1.0 → "1", -12.0 → "-12", 0.1 + 0.2 → "0.30000000000000004".
    Used for transform strings and for hashing the fatness scalar, so both
    stay stable across runtimes.
    """
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if abs(value) < _JS_EXPONENT_BELOW:
        return np.format_float_scientific(value, trim="-", exp_digits=1)
    return np.format_float_positional(value, trim="-")


def js_divide(numerator: float, denominator: float) -> float:
    """IEEE division: x / 0 → ±inf, 0 / 0 → nan, never raises."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def parse_leading_float(text: str) -> float | None:
    """parseFloat-style parse: "2px" → 2.0, "abc" → None."""
    m = _LEADING_FLOAT_RE.match(text)
    if not m:
        return None
    return float(m.group(1))
