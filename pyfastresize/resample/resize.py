"""
Resize entry point for PyFastResize.

Chains kernel construction, the two convolution passes and the alpha policy:

    source --(X kernels)--> intermediate (dest_w x src_h, transposed)
           --(Y kernels)--> destination (dest_w x dest_h)

Canvas-style pixel data is not premultiplied, so no alpha correction is needed
beyond optionally forcing it opaque.

Author: B.G.
"""

import logging
import math

import numpy as np

from .. import constants as cte
from ..backends import get_backend
from ..filters.kernels import build_kernel_table
from ..pixels import as_pixel_buffer, check_dimensions

log = logging.getLogger(__name__)


def reset_alpha(buffer, width, height):
    """
    Set every alpha sample of an RGBA buffer to 255, in place.

    Args:
        buffer: Writable C-contiguous uint8 array of width * height * 4
        width: Width in pixels
        height: Height in pixels

    Returns:
        numpy.ndarray: buffer
    """
    flat = as_pixel_buffer(buffer, width, height, writable=True)
    flat[3::cte.CHANNELS] = 0xFF
    return buffer


def _axis_scale(scale, src_size, dest_size, name):
    if scale is None:
        return dest_size / src_size
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError(f"{name} must be finite and > 0, got {scale}")
    return float(scale)


def resize(
    source,
    width: int,
    height: int,
    target_width: int,
    target_height: int,
    scale_x: float | None = None,
    scale_y: float | None = None,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
    quality=cte.DEFAULT_QUALITY,
    opaque: bool = False,
    destination=None,
    backend=None,
):
    """
    Resize an RGBA pixel buffer with a band-limited filter.

    Args:
        source: Source pixels, uint8 with width * height * 4 samples
        width: Source width in pixels
        height: Source height in pixels
        target_width: Output width in pixels
        target_height: Output height in pixels
        scale_x: Horizontal scale factor (default: target_width / width)
        scale_y: Vertical scale factor (default: target_height / height)
        offset_x: Horizontal sub-pixel offset in source pixels (default: 0.0)
        offset_y: Vertical sub-pixel offset in source pixels (default: 0.0)
        quality: Filter selector, 0=box, 1=hamming, 2..4=lanczos2..4
                 (default: 3)
        opaque: If True, force every output alpha sample to 255
        destination: Optional writable uint8 array of
                     target_width * target_height * 4 samples to fill
        backend: Backend name or instance for the convolution passes
                 (default: 'reference')

    Returns:
        numpy.ndarray: destination if supplied, otherwise a new flat uint8
                       array of target_width * target_height * 4 samples

    Raises:
        ValueError: If dimensions, scales, offsets, quality or buffer sizes
                    are invalid
        TypeError: If buffers are not uint8 arrays

    Example:
        # Downscale a 640x480 canvas to 320x240 with Lanczos3
        out = resize(pixels, 640, 480, 320, 240, quality=3)
    """
    check_dimensions(
        width=width, height=height, target_width=target_width, target_height=target_height
    )
    src = as_pixel_buffer(source, width, height, name="source")

    if destination is None:
        destination = np.zeros(target_width * target_height * cte.CHANNELS, dtype=np.uint8)
        dest = destination
    else:
        dest = as_pixel_buffer(
            destination, target_width, target_height, name="destination", writable=True
        )

    scale_x = _axis_scale(scale_x, width, target_width, "scale_x")
    scale_y = _axis_scale(scale_y, height, target_height, "scale_y")

    filters_x = build_kernel_table(quality, width, target_width, scale_x, offset_x)
    filters_y = build_kernel_table(quality, height, target_height, scale_y, offset_y)

    engine = get_backend(backend)
    log.debug(
        "resize %dx%d -> %dx%d (quality=%s, backend=%s)",
        width, height, target_width, target_height, quality, engine.name,
    )

    tmp = np.zeros(target_width * height * cte.CHANNELS, dtype=np.uint8)
    engine.convolve(src, tmp, width, height, filters_x)
    engine.convolve(tmp, dest, height, target_width, filters_y)

    if opaque:
        reset_alpha(dest, target_width, target_height)

    return destination


def resize_image(image, target_width: int, target_height: int, **kwargs):
    """
    Resize an (H, W, 4) uint8 image array.

    Args:
        image: RGBA image of shape (height, width, 4)
        target_width: Output width in pixels
        target_height: Output height in pixels
        **kwargs: Forwarded to resize (quality, opaque, scale/offset, backend)

    Returns:
        numpy.ndarray: Resized image of shape (target_height, target_width, 4)
    """
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != cte.CHANNELS:
        raise ValueError(f"Expected image (H, W, 4), got shape {image.shape}")
    height, width = image.shape[:2]
    out = resize(image, width, height, target_width, target_height, **kwargs)
    return out.reshape(target_height, target_width, cte.CHANNELS)


__all__ = ["reset_alpha", "resize", "resize_image"]
