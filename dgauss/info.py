""" This file contains defines parameters for dgauss that we use to fill
settings in setup.py and the dgauss top-level docstring.  In setup.py in
particular, we exec this file, so it cannot import dgauss
"""

# dgauss version information.  An empty _version_extra corresponds to a
# full release.  '.dev' as a _version_extra string means this is a development
# version
_version_major = 0
_version_minor = 1
_version_micro = 0
_version_extra = 'dev'
# _version_extra = ''

# Format expected by setup.py: string of form "X.Y.Z"
__version__ = "%s.%s.%s%s" % (_version_major,
                              _version_minor,
                              _version_micro,
                              _version_extra)

CLASSIFIERS = ["Development Status :: 3 - Alpha",
               "Environment :: Console",
               "Intended Audience :: Science/Research",
               "License :: OSI Approved :: BSD License",
               "Operating System :: OS Independent",
               "Programming Language :: Python",
               "Topic :: Scientific/Engineering :: Image Recognition"]

description = 'Discrete Gaussian derivative kernels for scale-space analysis'

# Note: this long_description is shown on PyPI.
long_description = """
======
dgauss
======

dgauss computes one dimensional convolution kernels approximating the
derivatives of a Gaussian, for separable N-dimensional derivative-of-Gaussian
filtering (edge, blob and ridge detection).

The kernels are built on Lindeberg's discrete analogue of the Gaussian,
expressed with modified Bessel functions, rather than on a sampled Gaussian.
Derivative kernels can be scale-normalized or gamma-normalized for automatic
scale selection.

Applying the kernels to images is left to ``scipy.ndimage`` or
``cupyx.scipy.ndimage``.

License
=======

dgauss is licensed under the terms of the BSD license.
"""

# versions for dependencies
NUMPY_MIN_VERSION = '1.17.0'
SCIPY_MIN_VERSION = '1.0'
CUPY_MIN_VERSION = '7.8.0'

# Main setup parameters
NAME                = 'dgauss'
MAINTAINER          = "dgauss developers"
MAINTAINER_EMAIL    = "dgauss@example.org"
DESCRIPTION         = description
LONG_DESCRIPTION    = long_description
URL                 = "https://github.com/dgauss/dgauss"
DOWNLOAD_URL        = "https://github.com/dgauss/dgauss/archive/master.zip"
LICENSE             = "BSD license"
CLASSIFIERS         = CLASSIFIERS
AUTHOR              = "dgauss developers"
AUTHOR_EMAIL        = "dgauss@example.org"
PLATFORMS           = "OS Independent"
MAJOR               = _version_major
MINOR               = _version_minor
MICRO               = _version_micro
ISRELEASE           = _version_extra == ''
VERSION             = __version__
PROVIDES            = ["dgauss"]
REQUIRES            = ["numpy>=%s" % NUMPY_MIN_VERSION]
EXTRAS_REQUIRE = {
    "test": [
        "pytest",
        "scipy>=%s" % SCIPY_MIN_VERSION,
    ],
    "doc": [
        "numpy",
        "scipy>=%s" % SCIPY_MIN_VERSION,
        "matplotlib",
    ],
    "gpu": [
        "cupy>=%s" % CUPY_MIN_VERSION,
    ],
}

EXTRAS_REQUIRE["all"] = list(set([a[i] for a in list(EXTRAS_REQUIRE.values())
                                  for i in range(len(a))]))
