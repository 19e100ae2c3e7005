"""
Miscellaneous Utilities for PyFastResize

Helpers that sit around the resampling engine rather than inside it.

Available Functions:
- load_rgba: Read an image file into an (H, W, 4) uint8 array
- save_rgba: Write an (H, W, 4) uint8 array to an image file

Author: B.G.
"""

from .image_io import load_rgba, save_rgba

# Export public API
__all__ = [
    "load_rgba",
    "save_rgba",
]
