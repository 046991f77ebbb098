"""
Export module for texsmith.

Boundary adapters that turn a ``PixelBuffer`` into a Pillow surface, encoded
image bytes, a data URI or a file on disk. Encoding is delegated to Pillow.

Usage:
    import texsmith as ts

    buf = ts.generate(seed=1234)
    img = ts.export.to_image(buf)          # PIL.Image, mode RGBA
    png = ts.export.encode(buf)            # PNG bytes
    uri = ts.export.to_data_url(buf)       # "data:image/png;base64,..."
    ts.export.save(buf, "grain.webp")

Author: B.G.
"""

from .encoders import default_filename, encode, mime_type, save, to_data_url, to_image

__all__ = [
    "default_filename",
    "encode",
    "mime_type",
    "save",
    "to_data_url",
    "to_image",
]
