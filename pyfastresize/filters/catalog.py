"""
Continuous reconstruction filters for PyFastResize.

Each filter is a symmetric function of the offset (in source pixels, already
scaled for downsampling) that is zero outside its support radius. The
quality index used throughout the package is the enum value.

Author: B.G.
"""

from enum import IntEnum

import numpy as np

from .. import constants as cte


class FilterVariant(IntEnum):
    """Supported filter families, valued by their quality index."""

    BOX = 0
    HAMMING = 1
    LANCZOS2 = 2
    LANCZOS3 = 3
    LANCZOS4 = 4

    @property
    def radius(self) -> float:
        """Half-width of the filter support."""
        return _RADII[self]

    @classmethod
    def resolve(cls, quality):
        """
        Turn a quality selector into a FilterVariant.

        Args:
            quality: FilterVariant, integer index 0..4 or filter name
                     ('box', 'hamming', 'lanczos2', 'lanczos3', 'lanczos4')

        Returns:
            FilterVariant: Matching member

        Raises:
            ValueError: If the selector does not name a supported filter
        """
        if isinstance(quality, cls):
            return quality
        if isinstance(quality, str):
            try:
                return cls[quality.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"Unknown filter '{quality}', expected one of "
                    f"{[m.name.lower() for m in cls]}"
                ) from None
        if isinstance(quality, (int, np.integer)) and not isinstance(quality, bool):
            try:
                return cls(int(quality))
            except ValueError:
                raise ValueError(
                    f"quality must be between 0 and {len(cls) - 1}, got {quality}"
                ) from None
        raise ValueError(f"Invalid quality selector: {quality!r}")

    def weights(self, x):
        """
        Evaluate the filter on an array of offsets.

        Args:
            x: Offsets (array-like), in filter units

        Returns:
            numpy.ndarray: float64 weights, same shape as x
        """
        x = np.asarray(x, dtype=np.float64)

        if self is FilterVariant.BOX:
            return np.where((x >= -0.5) & (x < 0.5), 1.0, 0.0)

        win = self.radius
        near_zero = (x > -cte.FILTER_EPSILON) & (x < cte.FILTER_EPSILON)
        # Keep the division defined, near-zero entries are overwritten below
        xpi = np.where(near_zero, 1.0, x) * np.pi
        sinc = np.sin(xpi) / xpi

        if self is FilterVariant.HAMMING:
            window = 0.54 + 0.46 * np.cos(xpi / win)
        else:
            window = np.sin(xpi / win) / (xpi / win)

        out = np.where(near_zero, 1.0, sinc * window)
        return np.where((x <= -win) | (x >= win), 0.0, out)

    def evaluate(self, x: float) -> float:
        """Evaluate the filter at a single offset."""
        return float(self.weights(x))


_RADII = {
    FilterVariant.BOX: 0.5,
    FilterVariant.HAMMING: 1.0,
    FilterVariant.LANCZOS2: 2.0,
    FilterVariant.LANCZOS3: 3.0,
    FilterVariant.LANCZOS4: 4.0,
}


__all__ = ["FilterVariant"]
