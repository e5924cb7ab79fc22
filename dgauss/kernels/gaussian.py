""" Discrete analogue of the Gaussian kernel.

The kernel of variance ``t`` (in samples) is ``T(k; t) = exp(-t) I_k(t)``
[Lindeberg90]. Unlike a sampled Gaussian it is the solution of the discrete
diffusion equation, so it obeys the semigroup property and tends to the
unit impulse as ``t`` goes to 0. The coefficients sum to one over all
integers; the kernel is truncated where the mass left in both tails falls
below the requested maximum error.

References
----------
[Lindeberg90] T. Lindeberg. Scale-space for discrete signals. IEEE
              Transactions on Pattern Analysis and Machine Intelligence,
              12(3), 234-254, 1990.

"""
from collections import namedtuple
import math

import numpy as np

from dgauss.kernels.parameters import InvalidParameterError
from dgauss.special.bessel import bessel_ie

KernelSizeResult = namedtuple('KernelSizeResult', ['half_width', 'truncated'])
KernelSizeResult.__doc__ = """Half-width of a 0-order kernel.

``truncated`` is True only when the width needed for the requested error
exceeded ``maximum_kernel_width`` and the kernel was cut there.
"""


def one_sided_gaussian(pixel_variance, maximum_error, maximum_kernel_width=0):
    """Coefficients T(0; t), T(1; t), ... of the discrete Gaussian.

    Parameters
    ----------
    pixel_variance : float
        Variance ``t`` of the kernel in samples. Must be positive.
    maximum_error : float
        Generation stops once ``T(0) + 2 * sum(T(k))`` reaches
        ``1 - maximum_error``.
    maximum_kernel_width : int
        Largest half-width allowed, 0 for no limit.

    Returns
    -------
    coeff : list of float
        The ``half_width + 1`` coefficients from the center outward.
    size : KernelSizeResult

    Raises
    ------
    InvalidParameterError
        If the coefficients vanish before the requested mass is reached,
        i.e. the truncation error can not be met at any width.
    """
    cap = 1.0 - maximum_error
    coeff = [bessel_ie(0, pixel_variance)]
    total = coeff[0]
    truncated = False
    k = 0
    while total < cap:
        if maximum_kernel_width and k >= maximum_kernel_width:
            truncated = True
            break
        k += 1
        value = bessel_ie(k, pixel_variance)
        if not (math.isfinite(value) and value > 0):
            raise InvalidParameterError(
                "discrete Gaussian of variance {0!r} does not reach a mass "
                "of {1!r} (stopped at half-width {2}, mass {3!r})".format(
                    pixel_variance, cap, k, total))
        coeff.append(value)
        total += 2.0 * value
    return coeff, KernelSizeResult(k, truncated)


def kernel_size(params):
    """Half-width of the 0-order kernel described by ``params``.

    Larger variances or smaller errors give wider kernels; the width is
    clamped to ``params.maximum_kernel_width`` when that is non-zero.

    Parameters
    ----------
    params : KernelParameters

    Returns
    -------
    KernelSizeResult
    """
    params.validate()
    _, size = one_sided_gaussian(params.pixel_variance, params.maximum_error,
                                 params.maximum_kernel_width)
    return size


def gaussian_coefficients(params):
    """ Symmetric 0-order discrete Gaussian kernel.

    Parameters
    ----------
    params : KernelParameters
        Only variance, spacing, maximum_error and maximum_kernel_width are
        used.

    Returns
    -------
    coeff : ndarray, shape (2 * half_width + 1,)
        Kernel normalized to unit sum, centered at ``half_width``.
    size : KernelSizeResult
    """
    params.validate()
    half, size = one_sided_gaussian(params.pixel_variance,
                                    params.maximum_error,
                                    params.maximum_kernel_width)
    half = np.asarray(half, dtype=np.float64)

    # the tails hold many tiny terms; sum them without rounding loss
    total = 2.0 * math.fsum(half[1:]) + half[0]
    half /= total

    return np.concatenate((half[:0:-1], half)), size
