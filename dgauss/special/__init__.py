from .bessel import (          # noqa
    bessel_i,
    bessel_i0,
    bessel_i0e,
    bessel_i1,
    bessel_i1e,
    bessel_ie,
)
