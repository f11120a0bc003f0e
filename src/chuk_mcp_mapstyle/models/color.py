"""
Color primitives - normalize the color notations styles accept.

A color is either a CSS-like string ("#3399CC", "rgba(255,255,255,0.4)")
or a sequence of 3 or 4 numbers [r, g, b, a]. Channels are 0-255,
alpha is 0-1.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Union

from chuk_mcp_mapstyle.constants import ErrorMessages

Color = Union[str, Sequence[float]]

_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_RGB_RE = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _normalize(r: float, g: float, b: float, a: float) -> list[float]:
    """Round and clamp channels into their valid ranges."""
    return [
        int(_clamp(round(r), 0, 255)),
        int(_clamp(round(g), 0, 255)),
        int(_clamp(round(b), 0, 255)),
        _clamp(float(a), 0.0, 1.0),
    ]


def _from_hex(digits: str) -> list[float]:
    if len(digits) <= 4:
        # Short form: each digit doubles (#39c -> #3399cc)
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return _normalize(r, g, b, a)


def _from_rgb(body: str, original: str) -> list[float]:
    parts = [p.strip() for p in body.split(",")]
    if len(parts) not in (3, 4):
        raise ValueError(ErrorMessages.INVALID_COLOR.format(color=original))
    try:
        values = [float(p) for p in parts]
    except ValueError as e:
        raise ValueError(ErrorMessages.INVALID_COLOR.format(color=original)) from e
    if len(values) == 3:
        values.append(1.0)
    return _normalize(*values)


def as_array(color: Color) -> list[float]:
    """
    Convert a color to [r, g, b, a].

    Args:
        color: Color string or 3/4-element sequence

    Returns:
        New list with integer channels and a float alpha

    Raises:
        ValueError: If the color cannot be parsed
    """
    if isinstance(color, str):
        text = color.strip()
        match = _HEX_RE.match(text)
        if match:
            return _from_hex(match.group(1))
        match = _RGB_RE.match(text)
        if match:
            return _from_rgb(match.group(1), color)
        raise ValueError(ErrorMessages.INVALID_COLOR.format(color=color))

    if isinstance(color, Sequence) and len(color) in (3, 4):
        values = [float(c) for c in color]
        if len(values) == 3:
            values.append(1.0)
        return _normalize(*values)

    raise ValueError(ErrorMessages.INVALID_COLOR.format(color=color))


def as_string(color: Color) -> str:
    """Render a color as an ``rgba(r,g,b,a)`` string."""
    r, g, b, a = as_array(color)
    return f"rgba({r},{g},{b},{a:g})"
