"""
Noise texture module for texsmith.

Deterministic procedural texture synthesis: a seed and a handful of numeric
parameters fully determine an RGBA8 raster in one of five looks.

Noise Variants:
- film: uniform luminance grain, one draw per cell
- grain: softer grain, mean of three draws per cell
- speckle: sparse near-black / near-white specks on a transparent background
- dust: very sparse bright specks, density proportional to intensity
- lines: horizontal scan lines, one draw per output row

Pipeline:
    GenerationOptions -> noise_field (seeded stream) -> composite -> PixelBuffer

Usage:
    import texsmith as ts

    buf = ts.noise.generate(width=512, height=512, variant="film", seed=1234)
    pixels = buf.to_numpy()          # (512, 512, 4) uint8

    opts = ts.noise.GenerationOptions(variant="dust", intensity=0.8, seed=9)
    dusty = ts.noise.generate(opts, scale=3)

Author: B.G.
"""

from .color import parse_color, to_hex
from .compositor import apply_contrast, broadcast_cells, composite, composite_cells
from .engine import PixelBuffer, generate, resolve_options
from .field import NoiseField, noise_field, sample_grid
from .options import GenerationOptions, NoiseVariant
from .variants import SAMPLERS, sample_variant

__all__ = [
    "GenerationOptions",
    "NoiseVariant",
    "NoiseField",
    "PixelBuffer",
    "generate",
    "resolve_options",
    "noise_field",
    "sample_grid",
    "sample_variant",
    "SAMPLERS",
    "apply_contrast",
    "composite",
    "composite_cells",
    "broadcast_cells",
    "parse_color",
    "to_hex",
]
