"""
Pytest configuration and fixtures for texsmith test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys

import matplotlib
import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    # No display during tests
    matplotlib.use("Agg")

    for marker in ("unit", "integration", "importtest", "slow"):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


ALL_VARIANTS = ["film", "grain", "speckle", "dust", "lines"]


@pytest.fixture(params=ALL_VARIANTS)
def variant(request):
    """Parametrise a test over every noise variant."""
    return request.param


@pytest.fixture
def small_options():
    """Small fully specified options for quick tests."""
    from texsmith.noise import GenerationOptions

    return GenerationOptions(
        width=64,
        height=48,
        variant="film",
        intensity=0.8,
        alpha=0.6,
        contrast=0.2,
        scale=2,
        seed=1234,
        tint="#ffffff",
        tint_strength=0.0,
    )


class TextureChecks:
    """Helper assertions on generated pixel arrays."""

    @staticmethod
    def blocks_uniform(pixels, scale):
        """True if every complete scale x scale block holds one RGBA value."""
        h, w = pixels.shape[:2]
        h, w = h - h % scale, w - w % scale
        cropped = pixels[:h, :w]
        corners = cropped[::scale, ::scale]
        expanded = np.repeat(np.repeat(corners, scale, axis=0), scale, axis=1)
        return bool(np.array_equal(cropped, expanded))

    @staticmethod
    def grey_variance(pixels):
        return float(np.var(pixels[..., 0].astype(np.float64)))


@pytest.fixture
def texture_checks():
    """Provide access to texture assertion helpers."""
    return TextureChecks()


@pytest.fixture(autouse=True)
def close_figures():
    """Close matplotlib figures opened by a test."""
    yield
    import matplotlib.pyplot as plt

    plt.close("all")
