"""
Reference backend for PyFastResize.

Pure NumPy integer implementation of the convolution pass. It is the
definition of correct output that accelerated backends are tested against.

Author: B.G.
"""

from ..resample.convolve import convolve_transpose
from .base import ResizeBackend


class ReferenceBackend(ResizeBackend):
    """Synchronous NumPy convolution."""

    name = "reference"

    def convolve(self, src, dest, src_w, src_h, table):
        return convolve_transpose(src, dest, src_w, src_h, table)


__all__ = ["ReferenceBackend"]
