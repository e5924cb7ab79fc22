import math
import numbers

from dgauss.constants import MAXIMUM_ERROR_MAX, MAXIMUM_ERROR_MIN


class InvalidParameterError(ValueError):
    pass


def _is_count(value):
    return (isinstance(value, numbers.Integral)
            and not isinstance(value, bool) and value >= 0)


class KernelParameters(object):
    """ Parameters of a one dimensional Gaussian derivative kernel.

    Parameters
    ----------
    variance : float
        Variance of the Gaussian, in physical units (squared spacing units).
    spacing : float
        Distance between samples along the kernel direction.
    order : int
        Order of the derivative. Zero means smoothing only.
    maximum_error : float
        Allowed difference between the area under the discrete and the
        continuous Gaussian. It controls the kernel size and is clamped to
        [0.00001, 0.99999].
    maximum_kernel_width : int
        Upper bound on the half-width of the 0-order kernel. Small errors
        combined with large variances give very wide kernels; this value
        truncates them. 0 disables the bound.
    normalize_across_scale : bool
        If True, derivatives are multiplied by ``variance**(gamma*order/2)``
        so that their magnitude does not depend on the size of the structure
        that produces them. This is what scale selection (blob or ridge
        detection) needs.
    gamma : float
        Exponent of the gamma-normalized derivatives, typically in [0, 1].
        ``gamma=1`` gives the classical scale-normalized derivatives,
        ``gamma=0`` the unnormalized ones.

    Notes
    -----
    Parameters are only checked by ``validate``, so they can be assigned one
    at a time in any order.
    """

    def __init__(self, variance=1.0, spacing=1.0, order=1,
                 maximum_error=0.005, maximum_kernel_width=30,
                 normalize_across_scale=False, gamma=1.0):
        self.variance = variance
        self.spacing = spacing
        self.order = order
        self.maximum_error = maximum_error
        self.maximum_kernel_width = maximum_kernel_width
        self.normalize_across_scale = normalize_across_scale
        self.gamma = gamma

    @property
    def maximum_error(self):
        return self._maximum_error

    @maximum_error.setter
    def maximum_error(self, value):
        self._maximum_error = max(MAXIMUM_ERROR_MIN,
                                  min(MAXIMUM_ERROR_MAX, float(value)))

    @property
    def pixel_variance(self):
        """Variance measured in samples rather than physical units."""
        return self.variance / self.spacing / self.spacing

    def validate(self):
        """Raise InvalidParameterError unless a kernel is well defined."""
        if not (math.isfinite(self.variance) and self.variance > 0):
            raise InvalidParameterError(
                "variance must be positive and finite, got "
                "{0!r}".format(self.variance))
        if not (math.isfinite(self.spacing) and self.spacing > 0):
            raise InvalidParameterError(
                "spacing must be positive and finite, got "
                "{0!r}".format(self.spacing))
        if not _is_count(self.order):
            raise InvalidParameterError(
                "order must be a non-negative integer, got "
                "{0!r}".format(self.order))
        if not _is_count(self.maximum_kernel_width):
            raise InvalidParameterError(
                "maximum_kernel_width must be a non-negative integer, got "
                "{0!r}".format(self.maximum_kernel_width))
        if not math.isfinite(self.gamma):
            raise InvalidParameterError(
                "gamma must be finite, got {0!r}".format(self.gamma))
        if not math.isfinite(self.pixel_variance):
            raise InvalidParameterError(
                "variance / spacing**2 overflows for variance={0!r}, "
                "spacing={1!r}".format(self.variance, self.spacing))

    def _fields(self):
        return (self.variance, self.spacing, self.order, self.maximum_error,
                self.maximum_kernel_width, self.normalize_across_scale,
                self.gamma)

    def copy(self):
        return KernelParameters(*self._fields())

    def __eq__(self, other):
        if not isinstance(other, KernelParameters):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None

    def __repr__(self):
        return ("KernelParameters(variance={0!r}, spacing={1!r}, order={2!r}, "
                "maximum_error={3!r}, maximum_kernel_width={4!r}, "
                "normalize_across_scale={5!r}, gamma={6!r})"
                .format(*self._fields()))
