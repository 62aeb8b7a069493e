"""Low-level filtering primitives shared by the volume pipeline.

The correlate-and-downsample primitive follows the conventions of the
matlabPyrTools ``corrDn`` function: the filter is correlated (not convolved)
with the image, the image border is extended according to an edge handling
mode and the result is sampled at ``start:stop:step`` along each axis.

"""

__all__ = (
    'EDGE_MODES',
    'corr_dn', 'corr_dn_batch', 'subsample',
    'tdist_kernel', 'tdist_conv', 'gauss_conv',
    'depth_kernel', 'depth_conv',
)

import numpy as np
from scipy import ndimage, signal

from bilatspyr.utils import asfarray, as_pair

# Map from edge handling mode to the arguments for numpy.pad which extend an
# image in the corresponding way.
EDGE_MODES = {
    'reflect1': ('reflect', {}),                        # reflect about the edge pixels
    'reflect2': ('symmetric', {}),                      # reflect, doubling the edge pixels
    'repeat': ('edge', {}),                             # repeat the edge pixels
    'zero': ('constant', {'constant_values': 0}),       # zero outside the image
    'circular': ('wrap', {}),                           # circular convolution
    'extend': ('reflect', {'reflect_type': 'odd'}),     # reflect and invert
}

def _pad_mode(edges):
    try:
        return EDGE_MODES[edges]
    except KeyError:
        raise ValueError('Unknown edge handling mode: {0}'.format(edges))

def corr_dn(image, filt, edges='reflect1', step=(1, 1), start=(0, 0), stop=None):
    """Correlate *image* with *filt* and sample the result at
    ``start:stop:step``.

    :param image: 2D real or complex array
    :param filt: 2D real filter. A 1D filter is treated as a column vector.
    :param edges: edge handling mode, one of the keys of :py:data:`EDGE_MODES`
    :param step: (row, column) sampling step
    :param start: (row, column) index of the first sample (zero-based)
    :param stop: (row, column) index one past the last sample. Defaults to the
        image shape.

    :returns: the filtered and subsampled image. Its shape is
        ``ceil((stop - start) / step)`` along each axis.

    :raises ValueError: if *image* is not 2D or *edges* is not a known mode.

    The filter origin is at index ``(size - 1) // 2`` along each axis so odd
    length filters are centred on each output sample.

    """
    image = asfarray(image)
    filt = np.asarray(filt)
    if filt.ndim == 1:
        filt = filt[:, np.newaxis]

    if image.ndim != 2:
        raise ValueError('Image must be 2D, got shape {0}'.format(
            'x'.join(str(s) for s in image.shape)))

    mode, kwargs = _pad_mode(edges)
    step, start = as_pair(step, 'step'), as_pair(start, 'start')
    stop = image.shape if stop is None else as_pair(stop, 'stop')

    pad = tuple(((n - 1) // 2, n - 1 - (n - 1) // 2) for n in filt.shape)
    extended = np.pad(image, pad, mode=mode, **kwargs)
    filtered = signal.correlate2d(extended, filt, mode='valid')

    return filtered[start[0]:stop[0]:step[0], start[1]:stop[1]:step[1]]

def corr_dn_batch(X, filt, edges='reflect1', step=(1, 1), start=(0, 0), stop=None):
    """Apply :py:func:`corr_dn` independently to every slice ``X[:,:,k]`` of
    a 3D array and stack the results along the third axis. A 2D *X* is
    treated as a single slice.

    """
    X = np.atleast_3d(asfarray(X))
    slices = [corr_dn(X[:, :, k], filt, edges, step, start, stop) for k in range(X.shape[2])]
    return np.stack(slices, axis=2)

def subsample(X, step=(1, 1), start=(0, 0)):
    """Sample the first two axes of *X* at ``start::step`` without filtering.
    The output shape matches :py:func:`corr_dn` for the same *step* and
    *start*.

    """
    step, start = as_pair(step, 'step'), as_pair(start, 'start')
    return X[start[0]::step[0], start[1]::step[1], ...]

def tdist_kernel(sigma, radius, dof=1.0):
    """Return a (2*radius+1) square kernel with the profile of a Student's
    t-distribution with *dof* degrees of freedom and scale *sigma*. The
    kernel is normalised to unit sum.

    With a small *sigma* the kernel behaves like inverse-power distance
    weighting: nearby samples dominate but far samples still contribute.

    """
    if sigma <= 0:
        raise ValueError('Kernel scale must be positive, got {0}'.format(sigma))

    ys, xs = np.mgrid[-radius:radius+1, -radius:radius+1]
    r2 = (xs*xs + ys*ys) / (dof * sigma * sigma)
    kernel = np.power(1.0 + r2, -0.5 * (dof + 1.0))
    return kernel / kernel.sum()

def tdist_conv(X, sigma, radius, dof=1.0):
    """Convolve each slice ``X[:,:,k]`` with a :py:func:`tdist_kernel`.
    Values outside the volume are taken to be zero so that zero weight
    regions stay exactly zero when they have no support within *radius*.

    """
    X = asfarray(X)
    kernel = tdist_kernel(sigma, radius, dof)
    if X.ndim == 3:
        kernel = kernel[:, :, np.newaxis]
    return ndimage.convolve(X, kernel, mode='constant', cval=0.0)

def gauss_conv(X, sigma):
    """Convolve each slice ``X[:,:,k]`` with an isotropic Gaussian of
    standard deviation *sigma* pels. Values outside the volume are taken to
    be zero.

    """
    X = asfarray(X)
    sigmas = (sigma, sigma, 0)[:X.ndim]
    return ndimage.gaussian_filter(X, sigmas, mode='constant', cval=0.0)

def depth_kernel(d_sigma, bin_width):
    """Return the 1D Gaussian kernel used to smooth along the depth axis.

    The kernel bandwidth in bins is ``derived = d_sigma / bin_width``. It has
    ``floor((4*derived + 1) / 2)`` taps either side of the centre with values
    ``exp(-0.5 * z**2 / derived)``. The kernel is not normalised.

    """
    derived = float(d_sigma) / bin_width
    half = int(np.floor((4 * derived + 1) / 2.0))
    z = np.arange(-half, half + 1)
    return np.exp(-0.5 * z * z / derived)

def depth_conv(X, kernel):
    """Convolve *X* with *kernel* along its third (depth) axis, keeping the
    same size and treating values beyond the first and last bins as zero.

    """
    X = np.atleast_3d(asfarray(X))
    return ndimage.convolve1d(X, kernel, axis=2, mode='constant', cval=0.0)

# vim:sw=4:sts=4:et
