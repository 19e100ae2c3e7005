"""
Unsharp mask module for PyFastResize.

Brightness-only sharpening for resized RGBA images. The low-pass step is a
pluggable operator; the default is a SciPy Gaussian filter on the 16-bit
brightness channel.

Author: B.G.
"""

from .blur import gaussian_blur_mono16
from .mask import brightness_channel, unsharp_image, unsharp_mask

__all__ = [
    "gaussian_blur_mono16",
    "brightness_channel",
    "unsharp_image",
    "unsharp_mask",
]
