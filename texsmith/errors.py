"""
Exception types raised by texsmith.

Parameter problems derive from ``ValueError`` and encoder problems from
``RuntimeError`` so callers catching the builtin types keep working, while
``GenerationError`` and ``EncodingFailure`` let a caller tell bad parameters
apart from an encoder that could not produce bytes.

Author: B.G.
"""


class TexsmithError(Exception):
    """Base class for every error raised by texsmith."""


class GenerationError(TexsmithError, ValueError):
    """Options could not be turned into a texture; nothing was generated."""


class InvalidDimensions(GenerationError):
    """Width or height is not a number."""


class InvalidVariant(GenerationError):
    """Unknown noise variant tag."""


class InvalidNumericParameter(GenerationError):
    """A continuous parameter, scale or seed is not a number."""


class InvalidColor(GenerationError):
    """Tint colour could not be parsed."""


class EncodingFailure(TexsmithError, RuntimeError):
    """The image encoder could not produce bytes for a pixel buffer."""
