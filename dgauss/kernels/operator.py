""" One dimensional Gaussian derivative kernels.

The kernels produced here are directional: convolving an image with the
kernel of order N along one axis, and with the 0-order kernel along the
remaining axes, gives a separable N-th derivative of the Gaussian smoothed
image. The convolution itself is left to the caller, e.g.
``scipy.ndimage.convolve1d`` or ``cupyx.scipy.ndimage.convolve1d``.

The kernel contained in this module was described by Tony Lindeberg
(Discrete Scale-Space Theory and the Scale-Space Primal Sketch.
Dissertation. Royal Institute of Technology, Stockholm, Sweden. May 1991).

"""
from warnings import warn

from dgauss._utils import asarray
from dgauss.kernels.derivative import differentiate, scale_normalization_factor
from dgauss.kernels.gaussian import gaussian_coefficients
from dgauss.kernels.parameters import InvalidParameterError, KernelParameters


class KernelTruncationWarning(UserWarning):
    pass


def generate_coefficients(params):
    """ Coefficients of the Gaussian derivative kernel.

    Parameters
    ----------
    params : KernelParameters

    Returns
    -------
    coeff : ndarray
        Kernel of odd length, centered. Symmetric for even orders and
        antisymmetric for odd orders. Meant to be applied by convolution:
        ``coeff[center + i]`` approximates the N-th derivative of the
        Gaussian at ``i * spacing``. Orders 0 to 2 have
        ``2 * size.half_width + 1`` taps. An order N >= 3 adds
        ``(N + 1) // 2 - 1`` taps on each side, so a kernel truncated at
        ``maximum_kernel_width`` is then longer than
        ``2 * maximum_kernel_width + 1``.
    size : KernelSizeResult
        Half-width of the underlying 0-order kernel and whether it was cut
        at ``params.maximum_kernel_width``.

    Raises
    ------
    InvalidParameterError
        If the parameters do not define a kernel. Nothing is computed in
        that case.
    """
    params.validate()
    try:
        norm = scale_normalization_factor(
            params.variance, params.spacing, params.order,
            params.normalize_across_scale, params.gamma)
    except OverflowError as e:
        raise InvalidParameterError(
            "normalization factor overflows for {0!r}".format(params)) from e

    coeff, size = gaussian_coefficients(params)
    if params.order == 0:
        return coeff, size

    coeff = differentiate(coeff, params.order)
    coeff *= norm
    return coeff, size


def gaussian_derivative_kernel(variance, order=1, spacing=1.0,
                               maximum_error=0.005, maximum_kernel_width=30,
                               normalize_across_scale=False, gamma=1.0, *,
                               xp=None):
    """ Discrete Gaussian derivative kernel as an array.

    Parameters
    ----------
    variance : float
        Variance of the Gaussian in physical units.
    order : int, optional
        Order of the derivative, 0 for smoothing only.
    spacing : float, optional
        Sample spacing along the kernel direction.
    maximum_error : float, optional
        Difference allowed between the areas under the discrete and the
        continuous Gaussian; clamped to [0.00001, 0.99999].
    maximum_kernel_width : int, optional
        Cap on the half-width of the 0-order kernel, 0 for none.
    normalize_across_scale : bool, optional
        Return gamma-normalized derivatives.
    gamma : float, optional
        Normalization exponent.
    xp : module, optional
        Array module of the output (``numpy`` by default, ``cupy`` for a
        device array).

    Returns
    -------
    coeff : ndarray
        See ``generate_coefficients``.

    Warns
    -----
    KernelTruncationWarning
        When ``maximum_kernel_width`` is too small for ``maximum_error``.
    """
    params = KernelParameters(
        variance=variance, spacing=spacing, order=order,
        maximum_error=maximum_error,
        maximum_kernel_width=maximum_kernel_width,
        normalize_across_scale=normalize_across_scale, gamma=gamma)
    coeff, size = generate_coefficients(params)
    if size.truncated:
        warn("Kernel size has exceeded the specified maximum width of {0} "
             "and has been truncated to {1} elements. You can raise the "
             "maximum width with the maximum_kernel_width argument."
             .format(params.maximum_kernel_width, coeff.size),
             KernelTruncationWarning, stacklevel=2)
    return asarray(coeff, xp=xp)
