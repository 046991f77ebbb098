"""Matplotlib previews of generated textures.

Textures are mostly transparent, so previews composite them over a
checkerboard or a solid colour before display.

Author: B.G.
"""

from __future__ import annotations

import numpy as np
import matplotlib.pyplot as plt

from ..noise.color import parse_color


def checkerboard(height: int, width: int, tile: int = 8, light: float = 0.85, dark: float = 0.65) -> np.ndarray:
    """Return a grey checkerboard as float32 RGB of shape (height, width, 3)."""
    yy, xx = np.indices((height, width))
    mask = ((yy // tile) + (xx // tile)) % 2 == 0
    grey = np.where(mask, light, dark).astype(np.float32)
    return np.repeat(grey[..., None], 3, axis=2)


def composite_over(buffer, background=None) -> np.ndarray:
    """Alpha-composite a pixel buffer over a background.

    Args:
        buffer: ``PixelBuffer`` to show
        background: Colour accepted by ``parse_color``, or None for a checkerboard

    Returns:
        numpy.ndarray: float32 RGB in [0, 1] of shape (height, width, 3)
    """
    rgba = buffer.to_numpy().astype(np.float32) / 255.0
    if background is None:
        base = checkerboard(buffer.height, buffer.width)
    else:
        colour = np.asarray(parse_color(background), dtype=np.float32) / 255.0
        base = np.broadcast_to(colour, (buffer.height, buffer.width, 3))
    a = rgba[..., 3:4]
    return rgba[..., :3] * a + base * (1.0 - a)


def show_texture(buffer, background=None, ax=None, title=None):
    """Draw a texture on a matplotlib axis and return the axis."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6 * buffer.height / buffer.width))
    ax.imshow(composite_over(buffer, background), interpolation="nearest")
    if title is None:
        opts = buffer.options
        title = f"{opts.variant.value} {buffer.width}x{buffer.height} seed={opts.seed}"
    ax.set_title(title)
    ax.set_axis_off()
    return ax
