"""Tint colour parsing for noise textures."""

import math
import re

from ..errors import InvalidColor

_HEX3 = re.compile(r"^#([0-9a-f]{3})$", re.IGNORECASE)
_HEX6 = re.compile(r"^#([0-9a-f]{6})$", re.IGNORECASE)
_RGB_FUNC = re.compile(r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(,\s*[\d.]+%?\s*)?\)$", re.IGNORECASE)


def parse_color(value) -> tuple:
    """
    Parse a tint colour into an (r, g, b) triple of ints in [0, 255].

    Accepts ``#rgb``, ``#rrggbb``, ``rgb(r, g, b)``, ``rgba(r, g, b, a)``
    (alpha is ignored) or any sequence of three finite numbers. Channel values from
    ``rgb()`` and sequences are clamped to [0, 255].

    Raises:
        InvalidColor: If the value matches none of the accepted forms
    """
    if isinstance(value, str):
        text = value.strip()
        match = _HEX3.match(text)
        if match:
            return tuple(int(c * 2, 16) for c in match.group(1))
        match = _HEX6.match(text)
        if match:
            digits = match.group(1)
            return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
        match = _RGB_FUNC.match(text)
        if match:
            return tuple(_clamp_channel(int(match.group(i))) for i in (1, 2, 3))
        raise InvalidColor(f"Cannot parse tint colour '{value}'")

    try:
        channels = [float(c) for c in value]
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidColor(f"Cannot parse tint colour {value!r}") from e
    if len(channels) != 3 or not all(math.isfinite(c) for c in channels):
        raise InvalidColor(f"Tint colour needs exactly three finite numeric channels, got {value!r}")
    return tuple(_clamp_channel(int(round(c))) for c in channels)


def _clamp_channel(c: int) -> int:
    return min(255, max(0, c))


def to_hex(rgb) -> str:
    """Format an (r, g, b) triple as ``#rrggbb``."""
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"
