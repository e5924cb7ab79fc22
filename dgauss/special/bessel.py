""" Modified Bessel functions of the first kind for real arguments.

The discrete analogue of the Gaussian kernel is built from the sequence
``exp(-t) I_k(t)``, k = 0, 1, 2, ... [Lindeberg90]. This module evaluates
I_0 and I_1 with the classical two-branch polynomial approximations
[Abramowitz64] and higher integer orders with Miller's downward recurrence
[Press92], switching to the leading series term for tiny arguments and to
the Hankel expansion for large ones, so every evaluation takes a number of
steps bounded by the order. All come in plain and exponentially scaled
form.

All functions accept any real ``x`` and any integer order and never raise;
they operate on Python scalars.

References
----------
[Lindeberg90] T. Lindeberg. Scale-space for discrete signals. IEEE
              Transactions on Pattern Analysis and Machine Intelligence,
              12(3), 234-254, 1990.
[Abramowitz64] M. Abramowitz and I. A. Stegun. Handbook of Mathematical
               Functions, 9.7.1 and 9.8.1-9.8.4. 1964.
[Press92] W. H. Press et al. Numerical Recipes in C, 2nd edition,
          section 6.6. 1992.

"""
import math
import sys

from dgauss.constants import (
    BESSEL_ASYMPTOTIC_RATIO,
    BESSEL_BIG,
    BESSEL_RECURRENCE_ACCURACY,
    BESSEL_SERIES_THRESHOLD,
    BESSEL_SMALL,
    BESSEL_SMALL_ARGUMENT,
)

__all__ = [
    'bessel_i0',
    'bessel_i0e',
    'bessel_i1',
    'bessel_i1e',
    'bessel_i',
    'bessel_ie',
]

# polynomial coefficients, lowest degree first
_I0_SERIES = (1.0, 3.5156229, 3.0899424, 1.2067492, 0.2659732, 0.360768e-1,
              0.45813e-2)
_I0_ASYMPTOTIC = (0.39894228, 0.1328592e-1, 0.225319e-2, -0.157565e-2,
                  0.916281e-2, -0.2057706e-1, 0.2635537e-1, -0.1647633e-1,
                  0.392377e-2)
_I1_SERIES = (0.5, 0.87890594, 0.51498869, 0.15084934, 0.2658733e-1,
              0.301532e-2, 0.32411e-3)
_I1_ASYMPTOTIC = (0.39894228, -0.3988024e-1, -0.362018e-2, 0.163801e-2,
                  -0.1031555e-1, 0.2282967e-1, -0.2895312e-1, 0.1787654e-1,
                  -0.420059e-2)

# largest argument for which exp() is finite
_MAX_EXP_ARG = math.log(sys.float_info.max)


def _horner(coefs, y):
    out = 0.0
    for c in reversed(coefs):
        out = out * y + c
    return out


def _i0_parts(ax):
    """Return (value, scaled) for |x| = ax.

    ``scaled`` tells whether ``value`` already carries the exp(-ax) factor.
    """
    if ax <= BESSEL_SERIES_THRESHOLD:
        y = ax / BESSEL_SERIES_THRESHOLD
        return _horner(_I0_SERIES, y * y), False
    y = BESSEL_SERIES_THRESHOLD / ax
    return _horner(_I0_ASYMPTOTIC, y) / math.sqrt(ax), True


def _i1_parts(ax):
    if ax <= BESSEL_SERIES_THRESHOLD:
        y = ax / BESSEL_SERIES_THRESHOLD
        return ax * _horner(_I1_SERIES, y * y), False
    y = BESSEL_SERIES_THRESHOLD / ax
    return _horner(_I1_ASYMPTOTIC, y) / math.sqrt(ax), True


def _unscaled(parts, ax):
    value, scaled = parts
    if not scaled:
        return value
    if ax > _MAX_EXP_ARG:
        return math.inf
    return value * math.exp(ax)


def _scaled(parts, ax):
    value, scaled = parts
    return value if scaled else value * math.exp(-ax)


def bessel_i0(x):
    """Modified Bessel function of order 0, I0(x)."""
    ax = abs(x)
    return _unscaled(_i0_parts(ax), ax)


def bessel_i0e(x):
    """Exponentially scaled I0: ``exp(-|x|) * I0(x)``."""
    ax = abs(x)
    return _scaled(_i0_parts(ax), ax)


def bessel_i1(x):
    """Modified Bessel function of order 1, I1(x). Odd in x."""
    ax = abs(x)
    ans = _unscaled(_i1_parts(ax), ax)
    return -ans if x < 0 else ans


def bessel_i1e(x):
    """Exponentially scaled I1: ``exp(-|x|) * I1(x)``. Odd in x."""
    ax = abs(x)
    ans = _scaled(_i1_parts(ax), ax)
    return -ans if x < 0 else ans


def _ratio_to_i0(k, ax):
    """I_k(ax) / I_0(ax) for k >= 2 and ax > 0 by downward recurrence.

    The recurrence ``I_{j-1} = I_{j+1} + (2 j / x) I_j`` is started well
    above ``k`` with arbitrary values; its result is proportional to the
    true sequence, so dividing by the value reached at j = 0 gives the
    ratio. Values are rescaled whenever they grow past BESSEL_BIG.

    The relative error of the start behaves like exp(-(j0**2 - k**2) / ax)
    for ax >> j0, so the starting order also grows with ``ax``.
    """
    tox = 2.0 / ax
    bip = 0.0
    bi = 1.0
    ans = 0.0
    j = max(2 * (k + int(math.sqrt(BESSEL_RECURRENCE_ACCURACY * k))),
            int(math.sqrt(k * k + BESSEL_RECURRENCE_ACCURACY * ax)) + 1)
    while j > 0:
        bim = bip + j * tox * bi
        bip = bi
        bi = bim
        if abs(bi) > BESSEL_BIG:
            ans *= BESSEL_SMALL
            bi *= BESSEL_SMALL
            bip *= BESSEL_SMALL
        if j == k:
            ans = bip
        j -= 1
    return ans / bi


def _hankel_scaled(k, ax):
    """exp(-ax) I_k(ax) from the large argument expansion [Abramowitz64
    9.7.1], for ax >> k**2."""
    mu = 4.0 * k * k
    term = 1.0
    total = 1.0
    for m in range(1, 30):
        term *= -(mu - (2 * m - 1) ** 2) / (8.0 * m * ax)
        total += term
        if abs(term) < 1e-17 * abs(total):
            break
    return total / math.sqrt(2.0 * math.pi * ax)


def _ik_parts(k, ax):
    """(value, scaled) for k >= 2 and ax > 0, in a number of steps that
    depends on k only."""
    if ax < BESSEL_SMALL_ARGUMENT:
        # leading term of the power series, (ax/2)**k / k!
        return math.exp(k * math.log(0.5 * ax) - math.lgamma(k + 1)), False
    if ax > BESSEL_ASYMPTOTIC_RATIO * (k * k + 1):
        return _hankel_scaled(k, ax), True
    value, scaled = _i0_parts(ax)
    return _ratio_to_i0(k, ax) * value, scaled


def _bessel_order(k, x, scaled):
    k = abs(int(k))
    if math.isnan(x):
        return math.nan
    ax = abs(x)
    if k == 0:
        parts = _i0_parts(ax)
    elif k == 1:
        parts = _i1_parts(ax)
    elif x == 0:
        return 0.0
    else:
        parts = _ik_parts(k, ax)
    ans = _scaled(parts, ax) if scaled else _unscaled(parts, ax)
    return -ans if (x < 0 and k % 2) else ans


def bessel_i(k, x):
    """Modified Bessel function of integer order k, I_k(x).

    Parameters
    ----------
    k : int
        Order. Negative orders are folded with ``I_{-k} = I_k``.
    x : float
        Argument.

    Returns
    -------
    float
        I_k(x). Zero for ``x == 0`` and ``k != 0``.
    """
    return _bessel_order(k, x, False)


def bessel_ie(k, x):
    """Exponentially scaled I_k: ``exp(-|x|) * I_k(x)``.

    Unlike ``bessel_i`` this stays finite for large ``x``; it is the form
    used to build discrete Gaussian kernels of large variance.
    """
    return _bessel_order(k, x, True)
