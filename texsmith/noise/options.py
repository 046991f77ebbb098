"""
Generation options for noise textures.

``GenerationOptions`` is the single configuration record of the texture
engine. Construction normalises every field: numeric ranges clamp silently,
while values that are not numbers at all, unknown variants and unreadable
colours raise immediately. A constructed instance always carries a concrete
seed, so it fully determines the generated pixels.

Author: B.G.
"""

from __future__ import annotations

import math
import numbers
import dataclasses
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Optional

from .. import constants as cte
from ..errors import (
    GenerationError,
    InvalidDimensions,
    InvalidNumericParameter,
    InvalidVariant,
)
from ..rng import random_seed, string_to_seed
from .color import parse_color, to_hex


class NoiseVariant(str, Enum):
    """The five noise looks the engine can synthesise."""

    FILM = "film"
    GRAIN = "grain"
    SPECKLE = "speckle"
    DUST = "dust"
    LINES = "lines"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_sparse(self) -> bool:
        """Sparse variants leave non-speck cells fully transparent."""
        return self in (NoiseVariant.SPECKLE, NoiseVariant.DUST)

    @classmethod
    def parse(cls, value) -> "NoiseVariant":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(v.value for v in cls)
        raise InvalidVariant(f"Variant must be one of {valid}, got {value!r}")


_DESCRIPTIONS = {
    NoiseVariant.FILM: "Classic film grain with random luminance",
    NoiseVariant.GRAIN: "Soft multi-sample grain with smoother specks",
    NoiseVariant.SPECKLE: "High contrast speckles for retro posters",
    NoiseVariant.DUST: "Sparse dust specks for aged photography",
    NoiseVariant.LINES: "Horizontal scan lines for CRT vibes",
}

# camelCase keys used by the browser tool
_ALIASES = {"tintStrength": "tint_strength"}


def _to_number(value, name, error_cls):
    if isinstance(value, bool) or value is None:
        raise error_cls(f"{name} must be a number, got {value!r}")
    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            # integers beyond float range clamp like any other out-of-range number
            number = math.inf if value > 0 else -math.inf
    else:
        try:
            number = float(str(value).strip())
        except ValueError as e:
            raise error_cls(f"{name} must be a number, got {value!r}") from e
    if math.isnan(number):
        raise error_cls(f"{name} must be a number, got NaN")
    return number


def _clamp(value, lo, hi):
    return min(hi, max(lo, value))


def _dimension(value, name):
    number = _to_number(value, name, InvalidDimensions)
    return int(math.floor(_clamp(number, cte.MIN_DIMENSION, cte.MAX_DIMENSION)))


def _unit(value, name):
    return _clamp(_to_number(value, name, InvalidNumericParameter), 0.0, 1.0)


def _seed(value):
    if value is None:
        return random_seed()
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text, 10) & cte.UINT32_MASK
        except ValueError:
            return string_to_seed(text)
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value) & cte.UINT32_MASK
    number = _to_number(value, "seed", InvalidNumericParameter)
    if math.isinf(number):
        raise InvalidNumericParameter("seed must be finite")
    return int(math.floor(number)) & cte.UINT32_MASK


@dataclass(frozen=True)
class GenerationOptions:
    """
    Immutable option record for one texture generation.

    Args:
        width, height: Output size in pixels, clamped to [32, 4096]
        variant: Noise look, a ``NoiseVariant`` or its name
        intensity: Raw noise amplitude (speck density for sparse variants), [0, 1]
        alpha: Final opacity multiplier, [0, 1]
        contrast: Midtone spread, [0, 1]
        scale: Grain block size in pixels, >= 1
        seed: Integer seed (wrapped to 32 bits), seed string, or None for a
              random seed drawn once at construction
        tint: Tint colour (hex string, ``rgb()`` string or RGB triple)
        tint_strength: Blend weight toward the tint, [0, 1]
    """

    width: int = cte.DEFAULT_WIDTH
    height: int = cte.DEFAULT_HEIGHT
    variant: NoiseVariant = NoiseVariant(cte.DEFAULT_VARIANT)
    intensity: float = cte.DEFAULT_INTENSITY
    alpha: float = cte.DEFAULT_ALPHA
    contrast: float = cte.DEFAULT_CONTRAST
    scale: int = cte.DEFAULT_SCALE
    seed: Optional[int] = None
    tint: tuple = cte.DEFAULT_TINT
    tint_strength: float = cte.DEFAULT_TINT_STRENGTH

    def __post_init__(self):
        set_ = object.__setattr__
        set_(self, "width", _dimension(self.width, "width"))
        set_(self, "height", _dimension(self.height, "height"))
        set_(self, "variant", NoiseVariant.parse(self.variant))
        set_(self, "intensity", _unit(self.intensity, "intensity"))
        set_(self, "alpha", _unit(self.alpha, "alpha"))
        set_(self, "contrast", _unit(self.contrast, "contrast"))
        scale = _to_number(self.scale, "scale", InvalidNumericParameter)
        set_(self, "scale", int(math.floor(_clamp(scale, cte.MIN_SCALE, cte.MAX_DIMENSION))))
        set_(self, "seed", _seed(self.seed))
        set_(self, "tint", parse_color(self.tint))
        set_(self, "tint_strength", _unit(self.tint_strength, "tint_strength"))

    @classmethod
    def from_dict(cls, mapping) -> "GenerationOptions":
        """
        Build options from a mapping with snake_case or camelCase keys.

        Raises:
            GenerationError: If the mapping holds an unknown key
        """
        names = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _ALIASES.get(key, key)
            if name not in names:
                raise GenerationError(f"Unknown generation option '{key}'")
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Return a JSON-ready dict; feeding it to ``from_dict`` reproduces these options."""
        data = asdict(self)
        data["variant"] = self.variant.value
        data["tint"] = to_hex(self.tint)
        return data

    def replace(self, **changes) -> "GenerationOptions":
        return dataclasses.replace(self, **{_ALIASES.get(k, k): v for k, v in changes.items()})

    @property
    def cell_grid(self) -> tuple:
        """(rows, cols) of sampled cells for cell-based variants."""
        return (-(-self.height // self.scale), -(-self.width // self.scale))
