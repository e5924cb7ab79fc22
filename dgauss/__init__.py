"""Discrete Gaussian derivative kernels for scale-space image analysis.

The main entry points are ``gaussian_derivative_kernel`` and, for callers
that want the truncation signal as a value, ``generate_coefficients``.
"""
from .info import __version__   # noqa
from .kernels import (          # noqa
    InvalidParameterError,
    KernelParameters,
    KernelSizeResult,
    KernelTruncationWarning,
    gaussian_derivative_kernel,
    generate_coefficients,
)
