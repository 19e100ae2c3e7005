"""
Image file helpers for PyFastResize.

Converts between image files and the (H, W, 4) uint8 RGBA arrays the
resampler works on, using Pillow for decoding and encoding.

Author: B.G.
"""

from pathlib import Path

import numpy as np
from PIL import Image

# Pillow formats that cannot store an alpha channel
_NO_ALPHA_SUFFIXES = {".jpg", ".jpeg", ".bmp"}


def load_rgba(path):
    """
    Load an image file as an RGBA array.

    Args:
        path: Path to any image format Pillow can read

    Returns:
        numpy.ndarray: uint8 array of shape (height, width, 4)
    """
    with Image.open(path) as img:
        return np.array(img.convert("RGBA"), dtype=np.uint8)


def save_rgba(path, image):
    """
    Save an (H, W, 4) RGBA array to an image file.

    The alpha channel is dropped for formats without alpha support (JPEG, BMP).

    Args:
        path: Output path, format chosen from its extension
        image: uint8 array of shape (height, width, 4)
    """
    image = np.asarray(image)
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[2] != 4:
        raise ValueError(f"Expected uint8 image (H, W, 4), got {image.dtype} {image.shape}")

    path = Path(path)
    img = Image.fromarray(np.ascontiguousarray(image))
    if path.suffix.lower() in _NO_ALPHA_SUFFIXES:
        img = img.convert("RGB")
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path)
