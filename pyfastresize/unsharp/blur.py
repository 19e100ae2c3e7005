"""
Default low-pass operator for the unsharp mask.

Any callable with the signature blur(channel, width, height, radius) that
smooths a uint16 channel in place can replace it; the unsharp mask only
relies on it being approximately Gaussian with smoothing that grows with
radius.

Author: B.G.
"""

import numpy as np
from scipy import ndimage


def gaussian_blur_mono16(channel, width: int, height: int, radius: float):
    """
    Gaussian blur of a single 16-bit channel, in place.

    Args:
        channel: C-contiguous uint16 array of width * height samples
        width: Width in pixels
        height: Height in pixels
        radius: Gaussian standard deviation in pixels

    Returns:
        numpy.ndarray: channel
    """
    if not isinstance(channel, np.ndarray) or channel.dtype != np.uint16:
        raise TypeError("channel must be a uint16 numpy array")
    if channel.size != width * height:
        raise ValueError(
            f"channel has {channel.size} samples, expected {width}x{height}"
        )

    view = channel.reshape(height, width)
    blurred = ndimage.gaussian_filter(
        view.astype(np.float64), sigma=float(radius), mode="nearest"
    )
    view[...] = np.clip(np.floor(blurred + 0.5), 0, 0xFFFF).astype(np.uint16)
    return channel


__all__ = ["gaussian_blur_mono16"]
