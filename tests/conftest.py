"""
Pytest configuration and fixtures for PyFastResize test suite.

This file contains shared fixtures, marker registration and helpers for
building RGBA test images.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker, doc in (
        ("unit", "fast unit tests"),
        ("integration", "end-to-end workflows"),
        ("importtest", "import checks"),
        ("slow", "slow tests"),
        ("taichi", "tests requiring the Taichi backend"),
    ):
        config.addinivalue_line("markers", f"{marker}: {doc}")


def pytest_collection_modifyitems(config, items):
    """Add markers from test names and locations."""
    for item in items:
        if "taichi" in item.name.lower():
            item.add_marker("taichi")
            item.add_marker("slow")

        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def random_rgba():
    """Reproducible random 23x17 RGBA image as (height, width, 4) uint8."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(17, 23, 4), dtype=np.uint8)


@pytest.fixture
def taichi_backend():
    """Taichi backend on CPU, skipped when Taichi is not installed."""
    pytest.importorskip("taichi")
    from pyfastresize.backends import get_backend

    try:
        return get_backend("taichi", arch="cpu")
    except Exception as e:
        pytest.skip(f"Taichi initialization failed: {e}")


class ImageFactory:
    """Helpers for creating test images."""

    @staticmethod
    def uniform(width, height, rgba):
        """Flat buffer of a single color."""
        return np.tile(np.array(rgba, dtype=np.uint8), width * height)

    @staticmethod
    def gradient(width, height):
        """Horizontal red ramp, vertical green ramp, constant blue, opaque."""
        x = np.linspace(0, 255, width).round().astype(np.uint8)
        y = np.linspace(0, 255, height).round().astype(np.uint8)
        img = np.zeros((height, width, 4), dtype=np.uint8)
        img[..., 0] = x[None, :]
        img[..., 1] = y[:, None]
        img[..., 2] = 128
        img[..., 3] = 255
        return img

    @staticmethod
    def checkerboard(width, height, cell=1):
        """Black and white checkerboard, opaque."""
        yy, xx = np.mgrid[0:height, 0:width]
        on = ((xx // cell + yy // cell) % 2).astype(np.uint8) * 255
        img = np.empty((height, width, 4), dtype=np.uint8)
        img[..., 0] = on
        img[..., 1] = on
        img[..., 2] = on
        img[..., 3] = 255
        return img


@pytest.fixture
def images():
    """Provide access to test image creation utilities."""
    return ImageFactory()
