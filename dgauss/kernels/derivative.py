""" Derivatives of the discrete Gaussian kernel.

The kernel of order N is obtained by applying a finite difference operator
of order N to the 0-order discrete Gaussian. Since differences commute with
the discrete diffusion, the result is the exact discrete counterpart of the
N-th derivative of the Gaussian, with the same truncation error as the
smoothing kernel.

"""
import numpy as np

_SECOND_DIFFERENCE = np.array([1.0, -2.0, 1.0])
_CENTRAL_DIFFERENCE = np.array([-0.5, 0.0, 0.5])


def derivative_stencil(order):
    """Finite difference operator of the given order.

    Built from ``order // 2`` second differences and, for odd orders, one
    central difference, so its radius is ``(order + 1) // 2``.

    Parameters
    ----------
    order : int
        Order of the derivative, >= 0.

    Returns
    -------
    stencil : ndarray, shape (2 * ((order + 1) // 2) + 1,)
        Weights to correlate with: ``stencil[j]`` multiplies the sample
        ``j - radius`` positions away. ``order=0`` gives the identity
        ``[1.0]``.

    Examples
    --------
    >>> derivative_stencil(1)
    array([-0.5,  0. ,  0.5])
    >>> derivative_stencil(2)
    array([ 1., -2.,  1.])
    """
    stencil = np.ones(1)
    for _ in range(order // 2):
        stencil = np.convolve(stencil, _SECOND_DIFFERENCE)
    if order % 2:
        stencil = np.convolve(stencil, _CENTRAL_DIFFERENCE)
    return stencil


def differentiate(coeff, order):
    """ Apply the derivative operator of ``order`` to a 0-order kernel.

    Parameters
    ----------
    coeff : ndarray
        Symmetric 0-order kernel of odd length.
    order : int
        Order of the derivative.

    Returns
    -------
    out : ndarray
        For ``order == 0``, ``coeff`` itself. Otherwise a kernel of length
        ``len(coeff) + 2 * (radius - 1)`` where ``radius`` is the radius of
        ``derivative_stencil(order)``; orders 1 and 2 keep the input length.
        The result is symmetric for even orders and antisymmetric for odd
        ones, with an exact zero at the center.

    Notes
    -----
    The input is extended with its border values (clamped boundary) before
    the stencil is applied, which keeps the tails of the derivative kernel
    well behaved when the 0-order kernel was truncated.
    """
    if order == 0:
        return coeff
    stencil = derivative_stencil(order)
    radius = (stencil.size - 1) // 2
    padded = np.pad(coeff, 2 * radius - 1, mode='edge')
    out = np.correlate(padded, stencil, mode='valid')

    # enforce exact (anti)symmetry, rounding differs between mirrored taps
    if order % 2:
        out = 0.5 * (out - out[::-1])
    else:
        out = 0.5 * (out + out[::-1])
    return out


def scale_normalization_factor(variance, spacing, order,
                               normalize_across_scale=False, gamma=1.0):
    r""" Factor applied to an order ``order`` derivative kernel.

    Parameters
    ----------
    variance : float
        Variance of the Gaussian in physical units.
    spacing : float
        Sample spacing along the kernel.
    order : int
        Order of the derivative.
    normalize_across_scale : bool
        Whether to return gamma-normalized derivatives.
    gamma : float
        Normalization exponent.

    Returns
    -------
    float
        $t^{\gamma N / 2} / s^N$ with $t$ the variance, $N$ the order and
        $s$ the spacing when normalizing, $1 / s^N$ otherwise.

    Notes
    -----
    The derivative kernels are computed per sample; dividing by $s^N$
    converts them to physical units. The gamma-normalized derivative
    $t^{\gamma N / 2} \partial^N$ [Lindeberg98] blends the plain derivative
    ($\gamma = 0$) and the classical scale-normalized one ($\gamma = 1$,
    factor $\sigma^N$).

    References
    ----------
    .. [Lindeberg98] T. Lindeberg. Edge detection and ridge detection with
       automatic scale selection. International Journal of Computer Vision,
       30(2), 117-154, 1998.
    """
    if order == 0:
        return 1.0
    norm = 1.0
    if normalize_across_scale:
        norm = variance ** (gamma * order / 2.0)
    return norm * (1.0 / spacing) ** order
