"""Numerical constants shared by the kernel generators."""

# Saturation range of the maximum approximation error.
MAXIMUM_ERROR_MIN = 0.00001
MAXIMUM_ERROR_MAX = 1.0 - MAXIMUM_ERROR_MIN

# |x| at which the I0/I1 approximations switch from the power series to the
# asymptotic expansion.
BESSEL_SERIES_THRESHOLD = 3.75

# Controls the starting order of the downward recurrence for I_k, k >= 2.
BESSEL_RECURRENCE_ACCURACY = 40.0

# Renormalization bounds of the downward recurrence.
BESSEL_BIG = 1.0e10
BESSEL_SMALL = 1.0e-10

# Below this |x|, I_k (k >= 2) is its leading power series term; the
# recurrence would overflow in 2 / x.
BESSEL_SMALL_ARGUMENT = 1.0e-8

# I_k(x) uses the large argument expansion once x > RATIO * (k**2 + 1).
BESSEL_ASYMPTOTIC_RATIO = 1.0e4
