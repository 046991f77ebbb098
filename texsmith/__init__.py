"""
texsmith: deterministic procedural noise textures.

A seed and a handful of numeric parameters fully determine an RGBA8 texture
in one of five looks (film, grain, speckle, dust, lines). Textures can be
exported as Pillow images, encoded bytes, data URLs or files.

Subpackages:
- rng: seeded pseudo-random stream shared by all generators
- noise: options, noise field generator, compositor, ``generate``
- export: Pillow-backed export adapters
- visu: matplotlib previews
- cli: command line tools

Usage:
    import texsmith as ts

    buf = ts.generate(width=256, height=256, variant="speckle", seed=42)
    ts.export.save(buf, "speckle.png")

Author: B.G.
"""

__version__ = "0.0.1"

from . import constants
from . import errors
from . import rng
from . import noise
from . import export
from .errors import (
    EncodingFailure,
    GenerationError,
    InvalidColor,
    InvalidDimensions,
    InvalidNumericParameter,
    InvalidVariant,
    TexsmithError,
)
from .noise import GenerationOptions, NoiseVariant, PixelBuffer, generate


def __getattr__(name):
    # matplotlib and click are only imported when these are first touched
    if name in ("visu", "cli"):
        import importlib
        mod = importlib.import_module(f".{name}", __name__)
        globals()[name] = mod
        return mod
    raise AttributeError(name)


__all__ = [
    "__version__",
    "constants",
    "errors",
    "rng",
    "noise",
    "export",
    "visu",
    "cli",
    "generate",
    "GenerationOptions",
    "NoiseVariant",
    "PixelBuffer",
    "TexsmithError",
    "GenerationError",
    "InvalidDimensions",
    "InvalidVariant",
    "InvalidNumericParameter",
    "InvalidColor",
    "EncodingFailure",
]
