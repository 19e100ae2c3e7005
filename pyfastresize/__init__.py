"""
PyFastResize - high quality raster image resizing.

Resamples 8-bit RGBA pixel buffers with band-limited filters (box, hamming,
lanczos 2/3/4) using fixed-point separable convolution, and optionally
sharpens the result with a brightness-only unsharp mask.

Modules:
- filters: Filter catalog and per-axis kernel tables
- resample: Convolution passes, resize entry point, size helpers
- unsharp: Brightness channel and unsharp mask
- backends: Reference (NumPy) and Taichi convolution backends
- misc: Image file helpers
- cli: Command line tools

Usage:
    import pyfastresize as pfr

    out = pfr.resize(pixels, 640, 480, 320, 240, quality=3, opaque=True)
    pfr.unsharp_mask(out, 320, 240, amount=80, radius=0.6, threshold=2)

Author: B.G.
"""

__version__ = "0.1.0"

from . import backends, constants, filters, misc, resample, unsharp
from .filters import FilterVariant, KernelTable, build_kernel_table
from .resample import fit_within, reset_alpha, resize, resize_image
from .unsharp import brightness_channel, unsharp_image, unsharp_mask

__all__ = [
    "__version__",
    "backends",
    "constants",
    "filters",
    "misc",
    "resample",
    "unsharp",
    "FilterVariant",
    "KernelTable",
    "build_kernel_table",
    "fit_within",
    "reset_alpha",
    "resize",
    "resize_image",
    "brightness_channel",
    "unsharp_image",
    "unsharp_mask",
]
