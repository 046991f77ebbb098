"""
Texture generation entry point.

``generate`` runs the full pipeline (options, noise field, compositor) and
returns an immutable ``PixelBuffer``. Generation is synchronous, single
threaded and keeps no state between calls: identical options always produce
byte-identical buffers.

Author: B.G.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from .compositor import composite
from .field import noise_field
from .options import GenerationOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PixelBuffer:
    """
    RGBA8 pixels of a generated texture.

    ``data`` holds ``width * height`` RGBA quadruplets, row-major from the top
    left corner, with no row padding.
    """

    width: int
    height: int
    data: bytes
    options: GenerationOptions

    def __post_init__(self):
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"Pixel data has {len(self.data)} bytes, expected {expected} for "
                f"{self.width}x{self.height} RGBA"
            )

    def __len__(self):
        return len(self.data)

    def to_numpy(self) -> np.ndarray:
        """Read-only uint8 view of shape (height, width, 4)."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 4)

    def pixel(self, x: int, y: int) -> tuple:
        """RGBA tuple of the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        i = (y * self.width + x) * 4
        return tuple(self.data[i:i + 4])


def resolve_options(options=None, **overrides) -> GenerationOptions:
    """
    Normalise anything ``generate`` accepts into ``GenerationOptions``.

    Args:
        options: ``GenerationOptions``, a mapping of option values, or None
        **overrides: Option values applied on top (snake_case or camelCase)
    """
    if options is None:
        return GenerationOptions.from_dict(overrides)
    if isinstance(options, GenerationOptions):
        return options.replace(**overrides) if overrides else options
    if isinstance(options, Mapping):
        merged = dict(options)
        merged.update(overrides)
        return GenerationOptions.from_dict(merged)
    raise TypeError(
        f"options must be GenerationOptions, a mapping or None, got {type(options).__name__}"
    )


def generate(options=None, **overrides) -> PixelBuffer:
    """
    Generate a noise texture.

    Args:
        options: ``GenerationOptions``, a mapping of option values, or None
                 for the defaults (with a random seed)
        **overrides: Option values applied on top of ``options``

    Returns:
        PixelBuffer: The full RGBA8 texture

    Raises:
        GenerationError: If the options cannot be normalised

    Example:
        buf = generate(width=256, height=256, variant="grain", seed=7)
        assert len(buf) == 256 * 256 * 4
    """
    opts = resolve_options(options, **overrides)
    field = noise_field(opts)
    image = composite(field, opts)
    logger.debug(
        "Generated %s texture %dx%d (scale=%d, seed=%d, draws=%d)",
        opts.variant.value,
        opts.width,
        opts.height,
        opts.scale,
        opts.seed,
        field.draws,
    )
    return PixelBuffer(opts.width, opts.height, image.tobytes(), opts)
