"""
Unsharp mask for PyFastResize.

Sharpens only the brightness of an RGBA image: the HSV value channel
V = max(R, G, B) is compared to a blurred copy, the amplified difference
gives a new brightness, and R, G, B are scaled by the ratio new / old.
Scaling all three components by one factor scales V by that factor and
leaves hue and saturation alone.

Fixed point:
- brightness is 16-bit, V << 8 (0x0000..0xFF00)
- amount and the brightness ratio are Q12

Author: B.G.
"""

import logging
import math

import numpy as np

from .. import constants as cte
from ..pixels import as_pixel_buffer, check_dimensions
from .blur import gaussian_blur_mono16

log = logging.getLogger(__name__)


def brightness_channel(buffer, width: int, height: int):
    """
    Compute the 16-bit brightness channel max(R, G, B) << 8 of an RGBA buffer.

    Args:
        buffer: uint8 RGBA samples, width * height * 4
        width: Width in pixels
        height: Height in pixels

    Returns:
        numpy.ndarray: uint16 array of width * height samples
    """
    check_dimensions(width=width, height=height)
    pixels = as_pixel_buffer(buffer, width, height).reshape(-1, cte.CHANNELS)
    value = pixels[:, :3].max(axis=1).astype(np.uint16)
    return value << cte.BRIGHTNESS_SHIFT


def _amount_to_fixed(amount):
    # Round half up, also for negative (softening) amounts
    return int(math.floor(amount / 100 * cte.UNSHARP_ONE + 0.5))


def unsharp_mask(
    buffer,
    width: int,
    height: int,
    amount: float,
    radius: float,
    threshold: int,
    blur=None,
):
    """
    Sharpen an RGBA buffer in place with an unsharp mask on its brightness.

    Args:
        buffer: Writable C-contiguous uint8 array of width * height * 4 samples
        width: Width in pixels
        height: Height in pixels
        amount: Sharpening strength in percent (0 disables)
        radius: Blur radius in pixels; below 0.5 disables, above 2.0 is clamped
        threshold: Minimum brightness difference (0-255) to sharpen a pixel
        blur: Low-pass operator blur(channel, width, height, radius) acting in
              place on a uint16 channel (default: gaussian_blur_mono16)

    Raises:
        ValueError: If sizes, amount, radius or threshold are invalid
        TypeError: If the buffer is not a writable uint8 numpy array

    Example:
        # Typical post-resize sharpening
        unsharp_mask(pixels, 320, 240, amount=80, radius=0.6, threshold=2)
    """
    check_dimensions(width=width, height=height)
    flat = as_pixel_buffer(buffer, width, height, writable=True)
    if not math.isfinite(amount):
        raise ValueError(f"amount must be finite, got {amount}")
    if not math.isfinite(radius):
        raise ValueError(f"radius must be finite, got {radius}")
    if isinstance(threshold, bool) or not isinstance(threshold, (int, np.integer)):
        raise ValueError(f"threshold must be an integer, got {threshold!r}")
    if not 0 <= threshold <= 255:
        raise ValueError(f"threshold must be between 0 and 255, got {threshold}")

    if amount == 0 or radius < cte.MIN_UNSHARP_RADIUS:
        return
    radius = min(radius, cte.MAX_UNSHARP_RADIUS)
    if blur is None:
        blur = gaussian_blur_mono16

    brightness = brightness_channel(flat, width, height)
    blurred = brightness.copy()
    blur(blurred, width, height, radius)

    amount_fx = _amount_to_fixed(amount)
    threshold_fx = int(threshold) << cte.BRIGHTNESS_SHIFT

    v1 = brightness.astype(np.int64)
    diff = 2 * (v1 - blurred.astype(np.int64))
    sharpen = np.abs(diff) >= threshold_fx
    if not sharpen.any():
        return

    v1 = v1[sharpen]
    diff = diff[sharpen]

    # Both brightness values stay within 0x0000..0xFF00, so the ratio below
    # maps every channel c <= v1 >> 8 to at most 255.5, which rounds to 255
    v2 = v1 + ((amount_fx * diff + cte.UNSHARP_HALF) >> cte.UNSHARP_FRAC_BITS)
    v2 = np.clip(v2, 0, cte.BRIGHTNESS_MAX)

    # V = 0 is black, which no ratio can change
    v1 = np.where(v1 != 0, v1, 1)
    vmul = (v2 << cte.UNSHARP_FRAC_BITS) // v1

    pixels = flat.reshape(-1, cte.CHANNELS)
    rgb = pixels[sharpen, :3].astype(np.int64)
    rgb = (rgb * vmul[:, None] + cte.UNSHARP_HALF) >> cte.UNSHARP_FRAC_BITS
    pixels[sharpen, :3] = rgb.astype(np.uint8)

    log.debug(
        "unsharp %dx%d: amount=%s radius=%s threshold=%s, %d pixels changed",
        width, height, amount, radius, threshold, int(sharpen.sum()),
    )


def unsharp_image(image, amount: float, radius: float, threshold: int, blur=None):
    """
    Apply unsharp_mask to an (H, W, 4) uint8 image array in place.

    Returns:
        numpy.ndarray: image
    """
    if not isinstance(image, np.ndarray) or image.ndim != 3 or image.shape[2] != cte.CHANNELS:
        raise ValueError("Expected image as numpy array of shape (H, W, 4)")
    height, width = image.shape[:2]
    unsharp_mask(image, width, height, amount, radius, threshold, blur=blur)
    return image


__all__ = ["brightness_channel", "unsharp_mask", "unsharp_image"]
