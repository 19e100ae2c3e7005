"""
Taichi backend for PyFastResize.

Runs the convolution pass as a Taichi kernel parallelized over output
pixels. Kernel tables are handed over as flat ndarrays (shift, length and tap
offset per destination sample, plus the concatenated taps); accumulation is
32-bit. Kernel rows are built with an absolute tap sum of about 2^15 at
most, so 255 times that stays far below 2^31.

Author: B.G.
"""

import logging

import numpy as np
import taichi as ti

from .. import constants as cte
from ..resample.convolve import check_pass_buffers
from .base import ResizeBackend

log = logging.getLogger(__name__)

_initialized_arch = None


def init_taichi(arch: str = "cpu"):
    """
    Initialize the Taichi runtime once per architecture.

    Args:
        arch: Taichi architecture name ('cpu', 'gpu', 'cuda', 'vulkan', 'metal')
    """
    global _initialized_arch
    if _initialized_arch == arch:
        return
    if not hasattr(ti, arch):
        raise ValueError(f"Unknown Taichi architecture '{arch}'")
    ti.init(arch=getattr(ti, arch), offline_cache=False)
    _initialized_arch = arch
    log.debug("taichi initialized on %s", arch)


@ti.func
def _round_to_u8(acc: ti.i32) -> ti.u8:
    value = (acc + cte.FIXED_HALF) >> cte.FIXED_FRAC_BITS
    return ti.cast(ti.min(ti.max(value, 0), 255), ti.u8)


@ti.kernel
def convolve_transpose_kernel(
    src: ti.types.ndarray(dtype=ti.u8, ndim=1),
    dest: ti.types.ndarray(dtype=ti.u8, ndim=1),
    shifts: ti.types.ndarray(dtype=ti.i32, ndim=1),
    lengths: ti.types.ndarray(dtype=ti.i32, ndim=1),
    offsets: ti.types.ndarray(dtype=ti.i32, ndim=1),
    taps: ti.types.ndarray(dtype=ti.i32, ndim=1),
    src_w: ti.i32,
    src_h: ti.i32,
    dest_w: ti.i32,
):
    """
    Filter every source row and store the result transposed.

    Args:
        src: Source RGBA samples (src_w * src_h * 4)
        dest: Destination samples (dest_w * src_h * 4)
        shifts: First source pixel of each kernel (dest_w)
        lengths: Tap count of each kernel (dest_w)
        offsets: Start of each kernel in taps (dest_w)
        taps: Concatenated Q14 taps
        src_w: Source row length in pixels
        src_h: Number of source rows
        dest_w: Number of kernels
    """
    for src_y, dest_x in ti.ndrange(src_h, dest_w):
        src_ptr = (src_y * src_w + shifts[dest_x]) * 4
        tap_ptr = offsets[dest_x]

        r = 0
        g = 0
        b = 0
        a = 0
        for t in range(lengths[dest_x]):
            w = taps[tap_ptr + t]
            px = src_ptr + t * 4
            r += w * ti.cast(src[px], ti.i32)
            g += w * ti.cast(src[px + 1], ti.i32)
            b += w * ti.cast(src[px + 2], ti.i32)
            a += w * ti.cast(src[px + 3], ti.i32)

        dest_ptr = (dest_x * src_h + src_y) * 4
        dest[dest_ptr] = _round_to_u8(r)
        dest[dest_ptr + 1] = _round_to_u8(g)
        dest[dest_ptr + 2] = _round_to_u8(b)
        dest[dest_ptr + 3] = _round_to_u8(a)


class TaichiBackend(ResizeBackend):
    """Taichi-accelerated convolution, bit-exact with the reference backend."""

    name = "taichi"

    def __init__(self, arch: str = "cpu"):
        self.arch = arch
        init_taichi(arch)

    def convolve(self, src, dest, src_w, src_h, table):
        check_pass_buffers(src, dest, src_w, src_h, table)

        src_flat = np.ascontiguousarray(src, dtype=np.uint8).reshape(-1)
        taps = table.taps.astype(np.int32)
        if len(taps) == 0:
            # Zero-sized ndarrays cannot be passed to a kernel
            taps = np.zeros(1, dtype=np.int32)

        convolve_transpose_kernel(
            src_flat,
            dest.reshape(-1),
            np.ascontiguousarray(table.shifts, dtype=np.int32),
            np.ascontiguousarray(table.lengths, dtype=np.int32),
            np.ascontiguousarray(table.offsets, dtype=np.int32),
            taps,
            src_w,
            src_h,
            table.dest_size,
        )
        return dest


__all__ = ["TaichiBackend", "convolve_transpose_kernel", "init_taichi"]
