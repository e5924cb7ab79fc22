"""Demo of scale selection with scale-normalized Gaussian derivatives

A bright Gaussian blob of known size is filtered with the scale-normalized
Laplacian at a range of scales. The magnitude of the response at the blob
center peaks at variance t = s**2, where s is the standard deviation of the
blob, which is how blob detectors pick the scale of a structure.
"""

import numpy as np
import matplotlib.pyplot as plt
from scipy import ndimage as ndi
from time import time

from dgauss import gaussian_derivative_kernel


def convolve_separable(x, w, axes=None, **kwargs):
    """n-dimensional convolution via separable application of convolve1d"""
    if axes is None:
        axes = range(x.ndim)
    for ax, w0 in zip(axes, w):
        x = ndi.convolve1d(x, w0, axis=ax, **kwargs)
    return x


blob_sigma = 6.0
shape = (129, 129)
yy, xx = np.mgrid[:shape[0], :shape[1]] - 64.0
image = np.exp(-(xx * xx + yy * yy) / (2 * blob_sigma ** 2))

variances = np.linspace(4, 100, 25)
responses = []
tstart = time()
for t in variances:
    kwargs = dict(normalize_across_scale=True, gamma=1.0,
                  maximum_error=0.001, maximum_kernel_width=0)
    smooth = gaussian_derivative_kernel(t, order=0, **kwargs)
    second = gaussian_derivative_kernel(t, order=2, **kwargs)
    lxx = convolve_separable(image, (smooth, second), mode='nearest')
    lyy = convolve_separable(image, (second, smooth), mode='nearest')
    responses.append(abs((lxx + lyy)[64, 64]))
duration = time() - tstart
print(f"duration = {duration} s")

best = variances[int(np.argmax(responses))]
print(f"selected variance {best:.1f}, blob variance {blob_sigma ** 2:.1f}")

plt.plot(variances, responses)
plt.axvline(blob_sigma ** 2, color='k', linestyle='--')
plt.xlabel('variance')
plt.ylabel('|normalized Laplacian| at blob center')
plt.show()
