"""
Constants for PyFastResize.

Fixed-point precision, filter evaluation tolerances and defaults shared by
the kernel builder, the convolution passes and the unsharp mask.

Author: B.G.
"""

# Q14 fixed point used for kernel taps and channel accumulation
FIXED_FRAC_BITS = 14
FIXED_ONE = 1 << FIXED_FRAC_BITS
FIXED_HALF = 1 << (FIXED_FRAC_BITS - 1)

# Q12 fixed point used by the unsharp mask (amount and brightness ratio)
UNSHARP_FRAC_BITS = 12
UNSHARP_ONE = 1 << UNSHARP_FRAC_BITS
UNSHARP_HALF = 1 << (UNSHARP_FRAC_BITS - 1)

# Brightness channel: 8-bit value shifted into the high byte of 16 bits
BRIGHTNESS_SHIFT = 8
BRIGHTNESS_MAX = 0xFF00

# float32 machine epsilon, sinc filters return 1.0 inside (-eps, eps)
FILTER_EPSILON = 1.1920929e-7

# Kernels whose net gain is below this share of their absolute gain are
# replaced by the nearest edge sample
MIN_KERNEL_GAIN = 0.5

CHANNELS = 4

MIN_UNSHARP_RADIUS = 0.5
MAX_UNSHARP_RADIUS = 2.0

DEFAULT_QUALITY = 3
DEFAULT_BACKEND = "reference"
