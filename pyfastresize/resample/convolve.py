"""
Separable convolution pass for PyFastResize.

One routine serves both axes: it filters every row of an RGBA buffer with a
kernel table and writes the result transposed, so the second pass over the
intermediate buffer with the other axis's table completes the 2D resize.

Layout of a pass:
    src:  src_h rows of src_w RGBA pixels, row-major
    dest: table.dest_size rows of src_h RGBA pixels, i.e. the output pixel
          (x, y) lives at dest[(x * src_h + y) * 4]

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def check_pass_buffers(src, dest, src_w, src_h, table):
    if table.src_size != src_w:
        raise ValueError(
            f"kernel table expects {table.src_size} source samples, row has {src_w}"
        )
    size = np.asarray(src).size
    if size != src_w * src_h * cte.CHANNELS:
        raise ValueError(
            f"source has {size} samples, expected {src_w}x{src_h}x{cte.CHANNELS}"
        )
    if not isinstance(dest, np.ndarray) or dest.dtype != np.uint8:
        raise TypeError("destination must be a uint8 numpy array")
    if not dest.flags.c_contiguous:
        raise ValueError("destination must be C-contiguous")
    expected = table.dest_size * src_h * cte.CHANNELS
    if dest.size != expected:
        raise ValueError(f"destination has {dest.size} samples, expected {expected}")


def convolve_transpose(src, dest, src_w, src_h, table):
    """
    Convolve rows of an RGBA buffer with a kernel table, writing transposed.

    Each output channel is sum(tap * sample) over the kernel support,
    accumulated in 64-bit integers, rounded as (acc + 2^13) >> 14 and
    saturated to [0, 255].

    Args:
        src: Source samples (uint8, src_w * src_h * 4, any shape)
        dest: Destination samples (uint8, C-contiguous, dest_size * src_h * 4),
              overwritten in place
        src_w: Row length of the source in pixels
        src_h: Number of source rows
        table: KernelTable built for src_w -> dest_size

    Returns:
        numpy.ndarray: dest
    """
    check_pass_buffers(src, dest, src_w, src_h, table)

    rows = np.asarray(src).reshape(src_h, src_w, cte.CHANNELS).astype(np.int64)
    indices, weights = table.gather()

    acc = np.zeros((src_h, table.dest_size, cte.CHANNELS), dtype=np.int64)
    for col in range(indices.shape[1]):
        acc += rows[:, indices[:, col], :] * weights[None, :, col, None]

    out = np.clip((acc + cte.FIXED_HALF) >> cte.FIXED_FRAC_BITS, 0, 255)

    dest_view = dest.reshape(table.dest_size, src_h, cte.CHANNELS)
    dest_view[...] = out.transpose(1, 0, 2)
    return dest


def convolve_transpose_loop(src, dest, src_w, src_h, table):
    """
    Scalar version of convolve_transpose, one pixel at a time.

    Slow, kept as the readable statement of the pass; produces the same
    output as the vectorized routine.
    """
    check_pass_buffers(src, dest, src_w, src_h, table)

    src_flat = np.asarray(src).reshape(-1)
    dest_flat = dest.reshape(-1)

    for src_y in range(src_h):
        src_offset = src_y * src_w * cte.CHANNELS
        for dest_x, entry in enumerate(table):
            src_ptr = src_offset + entry.shift * cte.CHANNELS
            r = g = b = a = 0
            for tap in entry.taps.tolist():
                r += tap * int(src_flat[src_ptr])
                g += tap * int(src_flat[src_ptr + 1])
                b += tap * int(src_flat[src_ptr + 2])
                a += tap * int(src_flat[src_ptr + 3])
                src_ptr += cte.CHANNELS

            dest_ptr = (dest_x * src_h + src_y) * cte.CHANNELS
            for c, acc in enumerate((r, g, b, a)):
                value = (acc + cte.FIXED_HALF) >> cte.FIXED_FRAC_BITS
                dest_flat[dest_ptr + c] = min(max(value, 0), 255)
    return dest


__all__ = ["check_pass_buffers", "convolve_transpose"]
