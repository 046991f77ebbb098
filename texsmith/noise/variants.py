"""
Per-variant samplers for the noise field generator.

Each sampler is a pure function ``(state, count, intensity) -> Sample``: it
takes ``count`` samples from the seeded stream starting at ``state`` and
returns the raw values in [0, 1), the speck coverage (``None`` for dense
variants) and the stream state after the last draw.

Every variant consumes a fixed number of draws per sample, and sample ``i``
always uses the draws immediately after those of sample ``i - 1``. Raster
order is therefore preserved and no later sample can alter an earlier one.

Author: B.G.
"""

from collections import namedtuple

import numpy as np

from .. import constants as cte
from ..rng import draw_block
from .options import NoiseVariant

Sample = namedtuple("Sample", ["values", "coverage", "state"])


def _draws(state, count, per_sample):
    values, state = draw_block(state, count * per_sample)
    return values.reshape(count, per_sample), state


def sample_film(state, count, intensity):
    """Uniform grain: one draw per sample, used as is."""
    values, state = draw_block(state, count)
    return Sample(values, None, state)


def sample_grain(state, count, intensity):
    """Soft grain: mean of three draws per sample."""
    draws, state = _draws(state, count, 3)
    return Sample(draws.mean(axis=1), None, state)


def sample_speckle(state, count, intensity):
    """
    Sparse high-contrast specks.

    A sample becomes a speck when its first draw exceeds a threshold that
    drops as intensity rises; the second draw picks a near-white or near-black
    speck. Every other sample is neutral grey with zero coverage.
    """
    draws, state = _draws(state, count, 2)
    threshold = cte.SPECKLE_BASE + cte.SPECKLE_SPAN * (1.0 - intensity)
    speck = draws[:, 0] > threshold
    extreme = np.where(draws[:, 1] >= 0.5, cte.SPECKLE_HIGH, cte.SPECKLE_LOW)
    values = np.where(speck, extreme, cte.NEUTRAL_LEVEL)
    return Sample(values, speck.astype(np.float64), state)


def sample_dust(state, count, intensity):
    """
    Very sparse bright dust.

    A speck occurs with probability ``DUST_DENSITY * intensity``, so zero
    intensity never produces one; the second draw sets its brightness.
    """
    draws, state = _draws(state, count, 2)
    speck = draws[:, 0] < cte.DUST_DENSITY * intensity
    brightness = cte.DUST_MIN_BRIGHTNESS + cte.DUST_BRIGHTNESS_SPAN * draws[:, 1]
    values = np.where(speck, brightness, cte.NEUTRAL_LEVEL)
    return Sample(values, speck.astype(np.float64), state)


def sample_lines(state, count, intensity):
    """Scan lines: one draw per output row, ``count`` is the row count."""
    values, state = draw_block(state, count)
    return Sample(values, None, state)


SAMPLERS = {
    NoiseVariant.FILM: sample_film,
    NoiseVariant.GRAIN: sample_grain,
    NoiseVariant.SPECKLE: sample_speckle,
    NoiseVariant.DUST: sample_dust,
    NoiseVariant.LINES: sample_lines,
}

DRAWS_PER_SAMPLE = {
    NoiseVariant.FILM: 1,
    NoiseVariant.GRAIN: 3,
    NoiseVariant.SPECKLE: 2,
    NoiseVariant.DUST: 2,
    NoiseVariant.LINES: 1,
}

_missing = set(NoiseVariant) - set(SAMPLERS)
if _missing:
    raise RuntimeError(f"No sampler registered for {sorted(v.value for v in _missing)}")


def sample_variant(variant, state, count, intensity):
    """Dispatch to the sampler registered for ``variant``."""
    return SAMPLERS[NoiseVariant.parse(variant)](state, count, intensity)
