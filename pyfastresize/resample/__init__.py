"""
Resampling module for PyFastResize.

Two-pass separable resizing of 8-bit RGBA pixel buffers with fixed-point
kernels. The horizontal pass writes its output transposed so the vertical
pass can reuse the same convolution routine.

Author: B.G.
"""

from .convolve import convolve_transpose
from .resize import reset_alpha, resize, resize_image
from .sizing import fit_within, resize_to_max_dim

__all__ = [
    "convolve_transpose",
    "reset_alpha",
    "resize",
    "resize_image",
    "fit_within",
    "resize_to_max_dim",
]
