"""
Order, dimension and tolerance limits for the curve algebra.
"""

# Orders with named fixed-order classes (linear through sextic)
MIN_ORDER = 1
MAX_FIXED_ORDER = 6

# Highest order whose binomial coefficients all fit in an unsigned 64-bit
# integer: C(67, 33) < 2**64 <= C(68, 34)
MAX_DYNAMIC_ORDER = 67
COEFFICIENT_LIMIT = 2**64 - 1

# Point/vector dimensions with named axis accessors
MIN_DIMENSION = 2
MAX_DIMENSION = 4
AXIS_NAMES = "xyzw"

# Default comparison tolerance for double precision
DEFAULT_TOLERANCE = 1e-9
