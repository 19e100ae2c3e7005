"""
Pixel buffer validation for PyFastResize.

A pixel buffer is a flat sequence of interleaved 8-bit RGBA samples,
width * height * 4 long. Any uint8 NumPy array of that size is accepted
(for instance an (H, W, 4) image) and handled through a flat view.

Author: B.G.
"""

import numpy as np

from . import constants as cte


def check_dimensions(**dims):
    """Raise ValueError unless every keyword is a positive integer."""
    for name, value in dims.items():
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"{name} must be > 0, got {value}")


def as_pixel_buffer(buffer, width, height, name="buffer", writable=False):
    """
    Return a flat uint8 view of an RGBA buffer after checking its size.

    Args:
        buffer: NumPy uint8 array (any shape) or bytes-like object
        width: Declared width in pixels
        height: Declared height in pixels
        name: Argument name used in error messages
        writable: Require a writable, C-contiguous NumPy array so that the
                  returned view aliases the caller's memory

    Returns:
        numpy.ndarray: Flat uint8 array of width * height * 4 samples

    Raises:
        TypeError: If the buffer is not uint8 data
        ValueError: If its length does not match width * height * 4
    """
    if writable:
        if not isinstance(buffer, np.ndarray):
            raise TypeError(f"{name} must be a numpy array to be modified in place")
        if not buffer.flags.c_contiguous or not buffer.flags.writeable:
            raise ValueError(f"{name} must be a writable C-contiguous array")
        flat = buffer.reshape(-1)
    elif isinstance(buffer, np.ndarray):
        flat = buffer.reshape(-1)
    elif isinstance(buffer, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(buffer, dtype=np.uint8)
    else:
        raise TypeError(f"{name} must be a numpy uint8 array or bytes-like object")

    if flat.dtype != np.uint8:
        raise TypeError(f"{name} must have dtype uint8, got {flat.dtype}")

    expected = width * height * cte.CHANNELS
    if flat.size != expected:
        raise ValueError(
            f"{name} has {flat.size} samples, expected {width}x{height}x{cte.CHANNELS}"
            f" = {expected}"
        )
    return flat


__all__ = ["as_pixel_buffer", "check_dimensions"]
