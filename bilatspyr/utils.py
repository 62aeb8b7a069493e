"""Useful utilities for working with volumes and for testing the bilateral
pyramid with synthetic scenes.

"""

__all__ = (
    'asfarray', 'appropriate_complex_type_for', 'as_pair', 'layered_scene',
)

import numpy as np

def asfarray(X):
    """Similar to :py:func:`numpy.asarray` with a floating point dtype except
    that this function preserves the original datatype of *X* if it is already
    a floating point or complex type and passes such arrays through directly
    without copying.

    """
    X = np.asanyarray(X)
    if np.issubdtype(X.dtype, np.inexact):
        return X
    return X.astype(np.float64)

def appropriate_complex_type_for(X):
    """Return an appropriate complex data type depending on the type of X. If X
    is already complex, return that, if it is floating point return a complex
    type of the appropriate size and if it is integer, choose an complex
    floating point type depending on the result of :py:func:`numpy.asarray`.

    """
    X = asfarray(X)
    return np.result_type(X.dtype, np.complex64).type

def as_pair(value, name='value'):
    """Interpret *value* as a (row, column) pair of integers. A scalar is
    repeated for both axes.

    :raises ValueError: if *value* has neither one nor two elements.

    """
    pair = tuple(int(v) for v in np.atleast_1d(value))
    if len(pair) == 1:
        pair = pair * 2
    if len(pair) != 2:
        raise ValueError('{0} must be a scalar or a pair, got {1}'.format(name, value))
    return pair

def layered_scene(N, radius=None, near=1.0, far=4.0, period=8.0):
    """Generate an N * N pel test scene made of two depth layers: a bright
    disc of radius *radius* pels centred in the image at depth *near* in front
    of a vertical sinusoidal grating with a *period* pel period at depth
    *far*. The disc has a hard edge in both intensity and depth, which is
    the situation the bilateral pyramid is designed for.

    :returns: a tuple ``(image, depth)`` of N * N float64 arrays.

    """
    if radius is None:
        radius = N / 4.0

    ys, xs = np.mgrid[:N, :N] - (N - 1) / 2.0
    inside = (xs*xs + ys*ys) <= radius*radius

    image = 0.25 + 0.25 * np.sin(2 * np.pi * np.arange(N) / period)
    image = np.tile(image, (N, 1))
    image[inside] = 0.9

    depth = np.where(inside, near, far).astype(np.float64)

    return image, depth

# vim:sw=4:sts=4:et
