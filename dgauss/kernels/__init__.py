from .parameters import InvalidParameterError, KernelParameters   # noqa
from .gaussian import (          # noqa
    KernelSizeResult,
    gaussian_coefficients,
    kernel_size,
    one_sided_gaussian,
)
from .derivative import (          # noqa
    derivative_stencil,
    differentiate,
    scale_normalization_factor,
)
from .operator import (          # noqa
    KernelTruncationWarning,
    gaussian_derivative_kernel,
    generate_coefficients,
)
