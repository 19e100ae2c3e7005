"""
Backend interface for PyFastResize.

A backend performs the convolution passes of a resize. Kernel construction,
alpha handling and the unsharp mask stay in the backend-agnostic core, so
every backend must reproduce the reference output exactly.

Author: B.G.
"""


class ResizeBackend:
    """Strategy for running a separable convolution pass."""

    name = "base"

    def convolve(self, src, dest, src_w, src_h, table):
        """
        Convolve rows of src with table, writing the transposed result to dest.

        Args:
            src: Source RGBA samples (uint8, src_w * src_h * 4)
            dest: Destination samples (uint8, C-contiguous,
                  table.dest_size * src_h * 4), overwritten in place
            src_w: Row length of the source in pixels
            src_h: Number of source rows
            table: KernelTable for src_w -> table.dest_size

        Returns:
            numpy.ndarray: dest
        """
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__} '{self.name}'>"


__all__ = ["ResizeBackend"]
