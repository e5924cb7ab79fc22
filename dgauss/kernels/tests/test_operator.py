import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal, assert_equal

from dgauss.kernels.gaussian import KernelSizeResult, gaussian_coefficients
from dgauss.kernels.operator import (
    KernelTruncationWarning,
    gaussian_derivative_kernel,
    generate_coefficients,
)
from dgauss.kernels.parameters import InvalidParameterError, KernelParameters


def test_order_zero_equals_smoothing_kernel():
    params = KernelParameters(variance=3.0, order=0,
                              normalize_across_scale=True, gamma=0.7)
    coeff, size = generate_coefficients(params)
    expected, expected_size = gaussian_coefficients(params)
    assert_array_equal(coeff, expected)
    assert_equal(size, expected_size)


@pytest.mark.parametrize("order", [1, 2, 3, 4])
@pytest.mark.parametrize("normalize", [False, True])
def test_parity(order, normalize):
    params = KernelParameters(variance=2.5, spacing=0.8, order=order,
                              normalize_across_scale=normalize, gamma=0.75)
    coeff, _ = generate_coefficients(params)
    assert_equal(coeff.size % 2, 1)
    sign = -1 if order % 2 else 1
    assert_array_equal(coeff, sign * coeff[::-1])


def test_normalized_first_derivative():
    params = KernelParameters(variance=4.0, spacing=1.0, order=1, gamma=1.0,
                              normalize_across_scale=True)
    coeff, size = generate_coefficients(params)
    assert not size.truncated
    center = coeff.size // 2
    assert_equal(coeff[center], 0.0)
    assert_array_equal(coeff, -coeff[::-1])
    assert coeff[center + 1] < 0 < coeff[center - 1]

    params.normalize_across_scale = False
    plain, _ = generate_coefficients(params)
    assert_allclose(coeff, 2.0 * plain)


def test_gamma_blends_normalization():
    params = KernelParameters(variance=9.0, order=2,
                              normalize_across_scale=True)
    params.gamma = 0.0
    unnormalized, _ = generate_coefficients(params)
    params.gamma = 0.5
    half, _ = generate_coefficients(params)
    params.gamma = 1.0
    full, _ = generate_coefficients(params)
    assert_allclose(half, 3.0 * unnormalized)
    assert_allclose(full, 9.0 * unnormalized)


def test_spacing():
    # same kernel in samples, derivative rescaled to physical units
    fine, _ = generate_coefficients(
        KernelParameters(variance=1.0, spacing=0.5, order=2))
    unit, _ = generate_coefficients(
        KernelParameters(variance=4.0, spacing=1.0, order=2))
    assert_allclose(fine, 4.0 * unit)


def test_scale_normalized_response_is_scale_invariant():
    # a step edge gives the same peak normalized gradient at every scale
    step = np.r_[np.zeros(200), np.ones(200)]
    responses = []
    for variance in [8.0, 32.0, 128.0]:
        coeff, _ = generate_coefficients(
            KernelParameters(variance=variance, order=1,
                             normalize_across_scale=True,
                             maximum_error=0.0001, maximum_kernel_width=0))
        responses.append(np.convolve(step, coeff, mode='valid').max())
    expected = 1 / np.sqrt(2 * np.pi)
    assert_allclose(responses, expected, rtol=0.03)


def test_truncation_signal():
    params = KernelParameters(variance=100.0, order=0, maximum_error=0.00001,
                              maximum_kernel_width=5)
    coeff, size = generate_coefficients(params)
    assert_equal(size, KernelSizeResult(5, True))
    assert_equal(coeff.size, 11)

    for order in [1, 2]:
        params.order = order
        coeff, size = generate_coefficients(params)
        assert size.truncated
        assert_equal(coeff.size, 11)


def test_invalid_parameters():
    for params in [KernelParameters(variance=-1.0),
                   KernelParameters(variance=0.0),
                   KernelParameters(spacing=0.0),
                   KernelParameters(order=-1),
                   KernelParameters(order=1.5),
                   KernelParameters(spacing=1e-200, variance=1e200, order=3)]:
        with pytest.raises(InvalidParameterError):
            generate_coefficients(params)


def test_overflowing_normalization():
    params = KernelParameters(variance=1.0, spacing=1e-120, order=3,
                              maximum_kernel_width=3)
    with pytest.raises(InvalidParameterError):
        generate_coefficients(params)


def test_deterministic():
    params = KernelParameters(variance=5.3, spacing=0.7, order=3,
                              normalize_across_scale=True, gamma=0.6)
    a, size_a = generate_coefficients(params)
    b, size_b = generate_coefficients(params.copy())
    assert_array_equal(a, b)
    assert_equal(size_a, size_b)


def test_kernel_warns_on_truncation():
    with pytest.warns(KernelTruncationWarning, match="maximum width of 5"):
        coeff = gaussian_derivative_kernel(100.0, order=0,
                                           maximum_error=0.00001,
                                           maximum_kernel_width=5)
    assert_equal(coeff.size, 11)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        coeff = gaussian_derivative_kernel(1.0, order=0, maximum_error=0.01,
                                           maximum_kernel_width=0)
    assert_equal(coeff.size, 7)
    assert isinstance(coeff, np.ndarray)


def test_kernel_matches_generate_coefficients():
    coeff = gaussian_derivative_kernel(3.0, order=2, spacing=0.5,
                                       normalize_across_scale=True, gamma=0.8)
    expected, _ = generate_coefficients(
        KernelParameters(variance=3.0, order=2, spacing=0.5,
                         normalize_across_scale=True, gamma=0.8))
    assert_array_equal(coeff, expected)


def test_kernel_rejects_negative_variance():
    with pytest.raises(InvalidParameterError):
        gaussian_derivative_kernel(-1.0)


def test_kernel_on_device():
    cp = pytest.importorskip("cupy")
    coeff = gaussian_derivative_kernel(2.0, order=1, xp=cp)
    assert isinstance(coeff, cp.ndarray)
    assert_allclose(cp.asnumpy(coeff), gaussian_derivative_kernel(2.0))


@pytest.mark.parametrize("order, extra", [(0, 0), (2, 0), (3, 1), (5, 2)])
def test_truncated_length_by_order(order, extra):
    params = KernelParameters(variance=100.0, order=order,
                              maximum_error=0.00001, maximum_kernel_width=5)
    coeff, size = generate_coefficients(params)
    assert size.truncated
    assert_equal(coeff.size, 2 * 5 + 1 + 2 * extra)
