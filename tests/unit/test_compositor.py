"""
Unit tests for the compositor.

Author: B.G.
"""

import numpy as np
import pytest

from texsmith.noise import (
    GenerationOptions,
    NoiseField,
    apply_contrast,
    broadcast_cells,
    composite,
    composite_cells,
)


def _options(**kwargs):
    base = dict(
        width=32, height=32, variant="film", intensity=1.0, alpha=1.0,
        contrast=0.0, scale=16, seed=1, tint="#ffffff", tint_strength=0.0,
    )
    base.update(kwargs)
    return GenerationOptions(**base)


def _field(values, coverage=None, cell=16):
    values = np.asarray(values, dtype=np.float64)
    if coverage is not None:
        coverage = np.asarray(coverage, dtype=np.float64)
    return NoiseField(values, coverage, cell, cell, values.size)


class TestContrast:

    @pytest.mark.unit
    def test_zero_contrast_is_identity(self):
        values = np.linspace(0.0, 0.999, 50)
        np.testing.assert_allclose(apply_contrast(values, 0.0), values)

    @pytest.mark.unit
    def test_full_contrast_gain(self):
        np.testing.assert_allclose(apply_contrast(np.array([0.6, 0.4]), 1.0), [0.9, 0.1])

    @pytest.mark.unit
    def test_contrast_clamps(self):
        out = apply_contrast(np.array([0.0, 0.8, 0.99]), 1.0)
        np.testing.assert_allclose(out, [0.0, 1.0, 1.0])

    @pytest.mark.unit
    def test_midpoint_fixed(self):
        for c in (0.0, 0.3, 1.0):
            assert apply_contrast(np.array([0.5]), c)[0] == 0.5


class TestCompositeCells:

    @pytest.mark.unit
    def test_dense_grey_and_alpha(self):
        cells = composite_cells(_field([[0.0, 0.999999]]), _options())
        assert tuple(cells[0, 0]) == (0, 0, 0, 115)
        assert tuple(cells[0, 1]) == (255, 255, 255, 255)

    @pytest.mark.unit
    def test_intensity_pulls_toward_mid_grey(self):
        cells = composite_cells(_field([[0.0, 0.999999]]), _options(intensity=0.0))
        assert tuple(cells[0, 0, :3]) == (128, 128, 128)
        assert tuple(cells[0, 1, :3]) == (128, 128, 128)

    @pytest.mark.unit
    def test_alpha_scales_opacity(self):
        cells = composite_cells(_field([[1.0]]), _options(alpha=0.5))
        assert cells[0, 0, 3] == 128

    @pytest.mark.unit
    def test_full_tint_replaces_colour(self):
        cells = composite_cells(
            _field([[0.1, 0.5], [0.7, 0.9]]), _options(tint="#3366cc", tint_strength=1.0)
        )
        assert np.all(cells[..., 0] == 0x33)
        assert np.all(cells[..., 1] == 0x66)
        assert np.all(cells[..., 2] == 0xCC)

    @pytest.mark.unit
    def test_half_tint_blends(self):
        cells = composite_cells(_field([[0.0]]), _options(tint="#ff0000", tint_strength=0.5))
        assert tuple(cells[0, 0, :3]) == (128, 0, 0)

    @pytest.mark.unit
    def test_sparse_uncovered_cells_transparent(self):
        field = _field([[0.5, 0.97]], coverage=[[0.0, 1.0]])
        cells = composite_cells(field, _options(variant="speckle", alpha=0.8))
        assert cells[0, 0, 3] == 0
        assert cells[0, 1, 3] == 204


class TestBroadcast:

    @pytest.mark.unit
    def test_nearest_neighbour_blocks(self):
        cells = np.arange(2 * 2 * 4, dtype=np.uint8).reshape(2, 2, 4)
        image = broadcast_cells(cells, 3, 3, 5, 4)
        assert image.shape == (5, 4, 4)
        np.testing.assert_array_equal(image[0, 0], cells[0, 0])
        np.testing.assert_array_equal(image[2, 2], cells[0, 0])
        np.testing.assert_array_equal(image[4, 3], cells[1, 1])
        np.testing.assert_array_equal(image[3, 0], cells[1, 0])
        assert image.flags["C_CONTIGUOUS"]

    @pytest.mark.unit
    def test_row_broadcast(self):
        cells = np.arange(3 * 4, dtype=np.uint8).reshape(3, 1, 4)
        image = broadcast_cells(cells, 1, 7, 3, 7)
        assert image.shape == (3, 7, 4)
        for r in range(3):
            assert np.all(image[r] == cells[r, 0])

    @pytest.mark.unit
    def test_composite_full_size(self):
        opts = _options(width=40, height=33, scale=16)
        field = _field(np.zeros((3, 3)))
        assert composite(field, opts).shape == (33, 40, 4)
