"""
Filter module for PyFastResize.

Continuous reconstruction filters and the fixed-point kernel tables sampled
from them.

Filters:
- Box (radius 0.5): nearest neighbour / area average
- Hamming (radius 1): Hamming-windowed sinc
- Lanczos2, Lanczos3, Lanczos4: Lanczos-windowed sinc of radius 2, 3, 4

Usage:
    import pyfastresize as pfr

    table = pfr.filters.build_kernel_table("lanczos3", 640, 200, 200 / 640)
    for entry in table:
        print(entry.shift, entry.length, entry.taps.sum())  # sums to 16384

Author: B.G.
"""

from .catalog import FilterVariant
from .kernels import KernelEntry, KernelTable, build_kernel_row, build_kernel_table

__all__ = [
    "FilterVariant",
    "KernelEntry",
    "KernelTable",
    "build_kernel_row",
    "build_kernel_table",
]
