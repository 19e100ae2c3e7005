"""
Target size helpers for PyFastResize.

Author: B.G.
"""

from ..pixels import check_dimensions


def fit_within(
    width: int,
    height: int,
    max_width: int | None = None,
    max_height: int | None = None,
    upscale: bool = False,
):
    """
    Compute the largest size with the same aspect ratio inside a bounding box.

    Args:
        width: Source width in pixels
        height: Source height in pixels
        max_width: Bounding box width, None for unbounded
        max_height: Bounding box height, None for unbounded
        upscale: If False, sources already inside the box keep their size

    Returns:
        tuple: (target_width, target_height), each at least 1

    Example:
        fit_within(1920, 1080, max_width=640)  # (640, 360)
    """
    check_dimensions(width=width, height=height)
    if max_width is None and max_height is None:
        raise ValueError("At least one of max_width or max_height must be given")

    factors = []
    if max_width is not None:
        check_dimensions(max_width=max_width)
        factors.append(max_width / width)
    if max_height is not None:
        check_dimensions(max_height=max_height)
        factors.append(max_height / height)

    factor = min(factors)
    if factor >= 1.0 and not upscale:
        return width, height

    target_width = max(1, int(round(width * factor)))
    target_height = max(1, int(round(height * factor)))
    if max_width is not None:
        target_width = min(target_width, max_width)
    if max_height is not None:
        target_height = min(target_height, max_height)
    return target_width, target_height


def resize_to_max_dim(width: int, height: int, max_dim: int, upscale: bool = False):
    """Target size whose longer side equals max_dim (see fit_within)."""
    return fit_within(width, height, max_dim, max_dim, upscale=upscale)


__all__ = ["fit_within", "resize_to_max_dim"]
