"""
Kernel table construction for PyFastResize.

Builds, for one image axis, the fixed-point convolution kernel of every
destination sample. Kernels are normalized to unity gain, quantized to Q14,
corrected for rounding drift and trimmed to their nonzero support.

The construction per destination sample d:
1. Map d to the continuous source coordinate p = (d + 0.5) / scale + offset
2. Evaluate the filter on every source sample in [p - window, p + window]
3. Normalize, round to Q14 and push the rounding error into one tap
4. Strip zero taps from both ends and record the shift into the source

Samples far enough past the source edge only see the tail lobes of the
filter. Those kernels are replaced by the nearest edge pixel, so every tap
fits in int16 and the absolute tap sum of a row stays within about 2^15.

Author: B.G.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np

from .. import constants as cte
from .catalog import FilterVariant

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class KernelEntry:
    """Kernel of a single destination sample."""

    shift: int
    length: int
    taps: np.ndarray


@dataclass(frozen=True)
class KernelTable:
    """
    Packed kernels for every destination sample of one axis.

    Attributes:
        src_size: Number of source samples along the axis
        shifts: First source index used by each kernel (int32, dest_size)
        lengths: Number of taps of each kernel (int32, dest_size)
        offsets: Start of each kernel inside `taps` (int32, dest_size)
        taps: Concatenated Q14 taps of all kernels (int16)
    """

    src_size: int
    shifts: np.ndarray
    lengths: np.ndarray
    offsets: np.ndarray
    taps: np.ndarray

    def __len__(self):
        return len(self.shifts)

    def __getitem__(self, d):
        start = int(self.offsets[d])
        length = int(self.lengths[d])
        return KernelEntry(
            shift=int(self.shifts[d]),
            length=length,
            taps=self.taps[start:start + length],
        )

    def __iter__(self):
        for d in range(len(self)):
            yield self[d]

    @property
    def dest_size(self) -> int:
        return len(self.shifts)

    @property
    def max_length(self) -> int:
        return int(self.lengths.max()) if len(self.lengths) else 0

    def to_packed(self) -> np.ndarray:
        """
        Serialize as one flat array of [shift, length, tap0, tap1, ...] records.

        Returns:
            numpy.ndarray: int32 packed table
        """
        packed = np.empty(2 * len(self) + len(self.taps), dtype=np.int32)
        ptr = 0
        for entry in self:
            packed[ptr] = entry.shift
            packed[ptr + 1] = entry.length
            packed[ptr + 2:ptr + 2 + entry.length] = entry.taps
            ptr += 2 + entry.length
        return packed

    def gather(self):
        """
        Expand to rectangular index/weight matrices for vectorized convolution.

        Rows shorter than the longest kernel are padded with weight 0 pointing
        at a valid source index, so padded positions contribute nothing.

        Returns:
            tuple: (indices, weights), both shaped (dest_size, max_length);
                   indices int64, weights int64
        """
        width = max(self.max_length, 1)
        cols = np.arange(width)
        valid = cols[None, :] < self.lengths[:, None]

        indices = self.shifts[:, None].astype(np.int64) + cols[None, :]
        indices = np.where(valid, indices, 0)

        tap_pos = self.offsets[:, None].astype(np.int64) + cols[None, :]
        tap_pos = np.where(valid, tap_pos, 0)
        if len(self.taps):
            weights = np.where(valid, self.taps[tap_pos].astype(np.int64), 0)
        else:
            weights = np.zeros(valid.shape, dtype=np.int64)
        return indices, weights


def _to_fixed_point(values):
    # Round half up, matching Q14 conversion of the accumulation path
    return np.floor(np.asarray(values) * cte.FIXED_ONE + 0.5).astype(np.int64)


_TAP_MIN = int(np.iinfo(np.int16).min)
_TAP_MAX = int(np.iinfo(np.int16).max)


def _edge_row(src_pixel, src_size):
    index = min(max(math.floor(src_pixel), 0), src_size - 1)
    return index, np.array([cte.FIXED_ONE], dtype=np.int16)


def _validate_axis(src_size, dest_size, scale, offset):
    if int(src_size) != src_size or src_size <= 0:
        raise ValueError(f"src_size must be a positive integer, got {src_size}")
    if int(dest_size) != dest_size or dest_size <= 0:
        raise ValueError(f"dest_size must be a positive integer, got {dest_size}")
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError(f"scale must be finite and > 0, got {scale}")
    if not math.isfinite(offset):
        raise ValueError(f"offset must be finite, got {offset}")


def build_kernel_row(variant, src_size, dest_size, dest_pixel, scale, offset=0.0):
    """
    Build the kernel of one destination sample.

    Args:
        variant: FilterVariant to sample
        src_size: Number of source samples along the axis
        dest_size: Number of destination samples along the axis
        dest_pixel: Destination index d
        scale: dest / src scale factor
        offset: Sub-pixel offset added to the source coordinate

    Returns:
        tuple: (shift, taps) with taps a trimmed int16 array, empty when the
               kernel has no nonzero tap, and a single full tap on the
               nearest edge pixel when the in-range weights cancel out
    """
    scale_clamped = min(1.0, scale)
    src_window = variant.radius / scale_clamped

    src_pixel = (dest_pixel + 0.5) / scale + offset
    src_first = max(0, math.floor(src_pixel - src_window))
    src_last = min(src_size - 1, math.ceil(src_pixel + src_window))

    empty = np.zeros(0, dtype=np.int16)
    if src_last < src_first:
        return 0, empty

    positions = np.arange(src_first, src_last + 1, dtype=np.float64)
    float_filter = variant.weights((positions + 0.5 - src_pixel) * scale_clamped)
    total = float(float_filter.sum())
    # Support entirely on zero crossings (sample just outside the source)
    if abs(total) < cte.FILTER_EPSILON:
        return 0, empty

    # Only the tail lobes are in range and they largely cancel: normalizing
    # would blow the taps up, so sample the nearest edge pixel instead
    if abs(total) < cte.MIN_KERNEL_GAIN * float(np.abs(float_filter).sum()):
        return _edge_row(src_pixel, src_size)

    fxp_filter = _to_fixed_point(float_filter / total)

    # Compensate normalization error at a fixed slot of the working array.
    # The slot is D >> 1 rather than the kernel centre; kernels shorter than
    # that take the correction on their last tap.
    drift = cte.FIXED_ONE - int(fxp_filter.sum())
    slot = min(dest_size >> 1, len(fxp_filter) - 1)
    fxp_filter[slot] += drift

    if fxp_filter.min() < _TAP_MIN or fxp_filter.max() > _TAP_MAX:
        return _edge_row(src_pixel, src_size)

    nonzero = np.flatnonzero(fxp_filter)
    if len(nonzero) == 0:
        return 0, empty

    left, right = int(nonzero[0]), int(nonzero[-1])
    return src_first + left, fxp_filter[left:right + 1].astype(np.int16)


def build_kernel_table(quality, src_size, dest_size, scale, offset=0.0):
    """
    Build the kernel table of one axis.

    Args:
        quality: Filter selector (FilterVariant, 0..4 or filter name)
        src_size: Number of source samples along the axis (> 0)
        dest_size: Number of destination samples along the axis (> 0)
        scale: dest / src scale factor (> 0), < 1 downscales, > 1 upscales
        offset: Sub-pixel offset in source pixels (default: 0.0)

    Returns:
        KernelTable: One kernel per destination sample

    Raises:
        ValueError: If sizes, scale, offset or quality are invalid

    Example:
        # Horizontal kernels for a 640 -> 200 px Lanczos3 downscale
        table = build_kernel_table(3, 640, 200, 200 / 640)
    """
    variant = FilterVariant.resolve(quality)
    _validate_axis(src_size, dest_size, scale, offset)
    src_size = int(src_size)
    dest_size = int(dest_size)

    shifts = np.zeros(dest_size, dtype=np.int32)
    lengths = np.zeros(dest_size, dtype=np.int32)
    offsets = np.zeros(dest_size, dtype=np.int32)
    rows = []
    ptr = 0

    for dest_pixel in range(dest_size):
        shift, taps = build_kernel_row(
            variant, src_size, dest_size, dest_pixel, scale, offset
        )
        shifts[dest_pixel] = shift
        lengths[dest_pixel] = len(taps)
        offsets[dest_pixel] = ptr
        ptr += len(taps)
        rows.append(taps)

    taps = np.concatenate(rows) if ptr else np.zeros(0, dtype=np.int16)

    log.debug(
        "kernel table %s: %d -> %d (scale=%.4f, offset=%.4f), %d taps",
        variant.name, src_size, dest_size, scale, offset, len(taps),
    )

    return KernelTable(
        src_size=src_size,
        shifts=shifts,
        lengths=lengths,
        offsets=offsets,
        taps=taps.astype(np.int16),
    )


__all__ = ["KernelEntry", "KernelTable", "build_kernel_row", "build_kernel_table"]
