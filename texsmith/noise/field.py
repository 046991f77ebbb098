"""
Noise field generator.

Turns generation options into a grid of raw samples by walking the sampled
cells in raster order and drawing from a single seeded stream. Cell-based
variants take one sample per ``scale x scale`` block; the lines variant takes
one sample per output row and ignores ``scale``.

Author: B.G.
"""

from collections import namedtuple

import numpy as np

from .. import constants as cte
from ..rng import init_state
from .options import NoiseVariant
from .variants import DRAWS_PER_SAMPLE, sample_variant

NoiseField = namedtuple(
    "NoiseField", ["values", "coverage", "cell_height", "cell_width", "draws"]
)
NoiseField.__doc__ = """
Raw sampled field.

Attributes:
    values: float64 array (rows, cols) of raw samples in [0, 1)
    coverage: float64 array (rows, cols) of speck coverage, or None for dense variants
    cell_height, cell_width: Output pixels covered by one sample
    draws: Number of stream draws consumed
"""


def sample_grid(options):
    """
    Return (rows, cols, cell_height, cell_width) of the sampling grid.

    For cell variants the grid is ``ceil(height/scale) x ceil(width/scale)``;
    for lines it is ``height x 1`` with each sample spanning the full row.
    """
    if options.variant is NoiseVariant.LINES:
        return options.height, 1, 1, options.width
    rows, cols = options.cell_grid
    return rows, cols, options.scale, options.scale


def _band_rows(cols):
    """Sample rows per band so a band holds about ``BAND_SAMPLES`` samples."""
    return max(1, cte.BAND_SAMPLES // max(1, cols))


def noise_field(options):
    """
    Generate the raw noise field for a set of options.

    Samples are drawn in bands of whole sample rows, each band continuing the
    stream where the previous one stopped, so the result is identical to a
    single pass while the per-draw temporaries stay bounded.

    Args:
        options: Normalised ``GenerationOptions``

    Returns:
        NoiseField: Raw samples, coverage and cell geometry
    """
    rows, cols, cell_h, cell_w = sample_grid(options)
    state = init_state(options.seed)

    values = np.empty((rows, cols), dtype=np.float64)
    coverage = None
    step = _band_rows(cols)
    for r0 in range(0, rows, step):
        r1 = min(rows, r0 + step)
        sample = sample_variant(options.variant, state, (r1 - r0) * cols, options.intensity)
        state = sample.state
        values[r0:r1] = sample.values.reshape(r1 - r0, cols)
        if sample.coverage is not None:
            if coverage is None:
                coverage = np.empty((rows, cols), dtype=np.float64)
            coverage[r0:r1] = sample.coverage.reshape(r1 - r0, cols)

    draws = rows * cols * DRAWS_PER_SAMPLE[options.variant]
    return NoiseField(values, coverage, cell_h, cell_w, draws)
