"""
Visualisation helpers for texsmith textures (matplotlib).

Author: B.G.
"""

from .preview import checkerboard, composite_over, show_texture

__all__ = ["checkerboard", "composite_over", "show_texture"]
