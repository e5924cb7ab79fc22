import numpy as np


def asarray(values, dtype=np.float64, *, xp=None):
    """Convert ``values`` to an array of the array module ``xp``.

    ``xp`` is any module exposing the NumPy array API (``numpy`` itself,
    ``cupy`` for device arrays). NumPy is used when it is None.
    """
    if xp is None:
        xp = np
    return xp.asarray(values, dtype=dtype)


__all__ = ['asarray']
