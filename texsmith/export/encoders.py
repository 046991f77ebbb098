"""
Export adapters for generated textures.

Hands pixel buffers to Pillow for display surfaces and encoded bytes. The
texture engine only guarantees the RGBA8 layout; every encoding decision is
Pillow's, and any encoder failure surfaces as ``EncodingFailure`` carrying
the encoder's reason.

Author: B.G.
"""

import base64
import io
import logging
from pathlib import Path

from PIL import Image

from ..errors import EncodingFailure

logger = logging.getLogger(__name__)

# name -> (Pillow format, MIME type, keeps alpha)
_FORMATS = {
    "png": ("PNG", "image/png", True),
    "webp": ("WEBP", "image/webp", True),
    "jpeg": ("JPEG", "image/jpeg", False),
}
_FORMAT_ALIASES = {"jpg": "jpeg"}


def _resolve_format(fmt):
    key = str(fmt).lower().lstrip(".")
    key = _FORMAT_ALIASES.get(key, key)
    if key not in _FORMATS:
        raise EncodingFailure(
            f"Unsupported image format '{fmt}'. Use one of {sorted(_FORMATS)}"
        )
    return key


def mime_type(fmt="png") -> str:
    """MIME type for an export format name."""
    return _FORMATS[_resolve_format(fmt)][1]


def to_image(buffer) -> Image.Image:
    """
    Copy a pixel buffer into an RGBA Pillow image.

    Args:
        buffer: ``PixelBuffer`` from ``texsmith.generate``

    Returns:
        PIL.Image.Image: RGBA image of the buffer's size
    """
    return Image.frombytes("RGBA", (buffer.width, buffer.height), buffer.data)


def encode(buffer, fmt="png", quality=None) -> bytes:
    """
    Encode a pixel buffer to image file bytes.

    Args:
        buffer: ``PixelBuffer`` to encode
        fmt: ``png``, ``webp`` or ``jpeg``/``jpg`` (jpeg drops alpha)
        quality: Optional lossy quality (1-100) for webp and jpeg

    Returns:
        bytes: Encoded image

    Raises:
        EncodingFailure: If the format is unsupported or Pillow fails
    """
    key = _resolve_format(fmt)
    pil_format, _, keeps_alpha = _FORMATS[key]

    image = to_image(buffer)
    if not keeps_alpha:
        image = image.convert("RGB")

    save_kwargs = {}
    if quality is not None and key != "png":
        try:
            save_kwargs["quality"] = int(quality)
        except (TypeError, ValueError, OverflowError) as e:
            raise EncodingFailure(f"Invalid {pil_format} quality {quality!r}") from e

    out = io.BytesIO()
    try:
        image.save(out, format=pil_format, **save_kwargs)
    except (OSError, ValueError, KeyError) as e:
        raise EncodingFailure(f"{pil_format} encoder failed: {e}") from e

    data = out.getvalue()
    if not data:
        raise EncodingFailure(f"{pil_format} encoder produced no bytes")
    logger.debug("Encoded %dx%d texture as %s (%d bytes)", buffer.width, buffer.height, pil_format, len(data))
    return data


def to_data_url(buffer, fmt="png", quality=None) -> str:
    """Encode a pixel buffer as a ``data:<mime>;base64,...`` URI."""
    key = _resolve_format(fmt)
    payload = base64.b64encode(encode(buffer, key, quality)).decode("ascii")
    return f"data:{_FORMATS[key][1]};base64,{payload}"


def default_filename(options, fmt="png") -> str:
    """Download name for a texture, e.g. ``noise-film-512x512.png``."""
    key = _resolve_format(fmt)
    return f"noise-{options.variant.value}-{options.width}x{options.height}.{key}"


def save(buffer, path, fmt=None, quality=None) -> Path:
    """
    Encode a pixel buffer and write it to ``path``.

    The format is taken from ``fmt`` or, when omitted, from the file suffix
    (PNG if there is none).

    Raises:
        EncodingFailure: If encoding fails
        OSError: If the file cannot be written
    """
    path = Path(path)
    if fmt is None:
        fmt = path.suffix or "png"
    data = encode(buffer, fmt, quality)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise OSError(f"Failed to write texture to '{path}': {e}") from e
    return path
