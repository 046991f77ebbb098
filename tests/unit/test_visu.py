"""
Unit tests for matplotlib previews.

Author: B.G.
"""

import numpy as np
import pytest

import texsmith as ts
from texsmith.visu import checkerboard, composite_over, show_texture


class TestPreview:

    @pytest.mark.unit
    def test_checkerboard(self):
        board = checkerboard(16, 24, tile=8)
        assert board.shape == (16, 24, 3)
        assert board[0, 0, 0] != board[0, 8, 0]
        assert board[0, 0, 0] == board[8, 8, 0]

    @pytest.mark.unit
    def test_transparent_shows_background(self):
        buf = ts.generate(width=32, height=32, variant="dust", intensity=0.0, seed=1)
        out = composite_over(buf, background="#000000")
        assert out.shape == (32, 32, 3)
        assert np.all(out == 0.0)

    @pytest.mark.unit
    def test_opaque_hides_background(self):
        buf = ts.generate(width=32, height=32, alpha=1.0, intensity=1.0, contrast=1.0,
                          tint="#ff0000", tint_strength=1.0, seed=1)
        out = composite_over(buf, background="#0000ff")
        alpha = buf.to_numpy()[..., 3] / 255.0
        np.testing.assert_allclose(out[..., 0], alpha, atol=1e-6)

    @pytest.mark.unit
    def test_show_texture(self, small_options):
        buf = ts.generate(small_options)
        ax = show_texture(buf)
        assert len(ax.images) == 1
        assert "film" in ax.get_title()
        assert str(small_options.seed) in ax.get_title()
