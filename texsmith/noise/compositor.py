"""
Compositor for noise textures.

Maps raw samples to RGBA8 through contrast remapping, amplitude scaling, tint
blending and alpha scaling, one colour per sampled cell, then broadcasts each
cell to the output pixels it covers with nearest-neighbour repetition.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def apply_contrast(values, contrast, gain=cte.CONTRAST_GAIN):
    """
    Spread values away from the midpoint.

    ``v' = clamp(0.5 + (v - 0.5) * (1 + contrast * gain), 0, 1)``
    """
    factor = 1.0 + contrast * gain
    return np.clip(cte.NEUTRAL_LEVEL + (values - cte.NEUTRAL_LEVEL) * factor, 0.0, 1.0)


def composite_cells(field, options):
    """
    Convert a raw noise field to per-cell RGBA8 colours.

    Dense variants scale their deviation from mid-grey by ``intensity`` and
    derive opacity from brightness. Sparse variants use their speck coverage
    as opacity weight, so cells without a speck are fully transparent.

    Args:
        field: ``NoiseField`` from the noise field generator
        options: The ``GenerationOptions`` the field was generated with

    Returns:
        numpy.ndarray: uint8 array of shape (rows, cols, 4)
    """
    level = apply_contrast(field.values, options.contrast)

    if options.variant.is_sparse:
        weight = field.coverage
    else:
        level = cte.NEUTRAL_LEVEL + (level - cte.NEUTRAL_LEVEL) * options.intensity
        weight = cte.ALPHA_FLOOR + (1.0 - cte.ALPHA_FLOOR) * level

    strength = options.tint_strength
    grey = level * 255.0
    tint = np.asarray(options.tint, dtype=np.float64)
    rgb = grey[..., None] * (1.0 - strength) + tint * strength

    alpha = np.clip(weight * options.alpha, 0.0, 1.0) * 255.0

    cells = np.empty(field.values.shape + (4,), dtype=np.uint8)
    cells[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    cells[..., 3] = np.clip(np.rint(alpha), 0, 255).astype(np.uint8)
    return cells


def broadcast_cells(cells, cell_height, cell_width, height, width):
    """
    Upsample per-cell colours to a (height, width, 4) image.

    Every pixel of a cell receives the cell's colour unchanged; partial cells
    on the right and bottom edges are cropped.
    """
    image = np.repeat(np.repeat(cells, cell_height, axis=0), cell_width, axis=1)
    return np.ascontiguousarray(image[:height, :width])


def composite(field, options):
    """
    Composite a raw field into a full (height, width, 4) uint8 image.

    Cells are composited and broadcast in bands of whole cell rows written
    straight into the output, so float temporaries never span the full image.
    """
    height, width = options.height, options.width
    cell_h, cell_w = field.cell_height, field.cell_width
    rows, cols = field.values.shape
    image = np.empty((height, width, 4), dtype=np.uint8)

    step = max(1, cte.BAND_SAMPLES // max(1, cols * cell_h * cell_w))
    for r0 in range(0, rows, step):
        r1 = min(rows, r0 + step)
        band = field._replace(
            values=field.values[r0:r1],
            coverage=None if field.coverage is None else field.coverage[r0:r1],
        )
        y0, y1 = r0 * cell_h, min(height, r1 * cell_h)
        image[y0:y1] = broadcast_cells(
            composite_cells(band, options), cell_h, cell_w, y1 - y0, width
        )
    return image
