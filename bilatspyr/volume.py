"""Depth-extended volumes and the operations which build and filter them.

A :py:class:`Volume` stores an image scattered into depth bins. Every stage
of the bilateral pyramid consumes one volume and returns a new one; volumes
are never modified in place once handed on.

"""

__all__ = (
    'Volume',
    'scatter_build',
    'spatial_smooth', 'depth_smooth', 'normalize', 'densify',
    'corr_dn_volume', 'corr_gridonly',
)

import logging

import numpy as np

from bilatspyr.defaults import (
    DEFAULT_EDGES, DEFAULT_SMOOTHING, DEFAULT_SPATIAL_SIGMA,
    DEFAULT_SPATIAL_RADIUS, DEFAULT_TDIST_DOF,
)
from bilatspyr.lowlevel import (
    corr_dn_batch, subsample, tdist_conv, gauss_conv, depth_conv,
)
from bilatspyr.utils import asfarray

logger = logging.getLogger(__name__)

# Filters whose coefficient sum is below this fraction of their absolute sum
# are treated as zero-response.
ZERO_RESPONSE_RTOL = 1e-4

class Volume(object):
    """An image extended along a synthetic depth axis.

    .. py:attribute:: data

        (rows, cols, D) array of samples. Real until filtered with a complex
        filter.

    .. py:attribute:: weights

        Non-negative accumulation weights with the same spatial extent as
        :py:attr:`data`. A zero weight marks a voxel with no observation.

    .. py:attribute:: row_index

        (rows, cols) integer array of the full resolution row each cell was
        sampled from.

    .. py:attribute:: col_index

        (rows, cols) integer array of the full resolution column each cell
        was sampled from.

    .. py:attribute:: depth_map

        (rows, cols) array of the fractional, zero-based depth bin coordinate
        of each cell.

    """
    def __init__(self, data, weights, row_index, col_index, depth_map):
        self.data = data
        self.weights = weights
        self.row_index = row_index
        self.col_index = col_index
        self.depth_map = depth_map

        if data.shape[:2] != weights.shape[:2]:
            raise ValueError('Data and weights must share their spatial shape ({0} vs {1})'.format(
                data.shape[:2], weights.shape[:2]))

    @property
    def shape2d(self):
        """The current (rows, cols) resolution."""
        return self.data.shape[:2]

    @property
    def ndepth(self):
        """The number of depth bins."""
        return self.data.shape[2]

    def copy(self):
        return Volume(self.data.copy(), self.weights.copy(), self.row_index.copy(),
                      self.col_index.copy(), self.depth_map.copy())

    def with_grids(self, data=None, weights=None):
        """Return a new volume with *data* and/or *weights* replaced, sharing
        the bookkeeping arrays of this one."""
        return Volume(
            self.data if data is None else data,
            self.weights if weights is None else weights,
            self.row_index, self.col_index, self.depth_map)

def scatter_build(image, bin_coords, ndepth):
    """Scatter *image* into a volume with *ndepth* depth bins.

    :param image: 2D real array. NaN values are treated as missing.
    :param bin_coords: array the same shape as *image* giving the fractional
        zero-based depth bin coordinate of every pixel
    :param ndepth: number of depth bins

    :returns: a :py:class:`Volume` of shape (rows, cols, *ndepth*)

    Each coordinate is rounded to the nearest bin and clamped to
    ``[0, ndepth-1]``. Every pixel with a valid value and bin adds its value
    to ``data`` and one to ``weights`` at its voxel. Pixels with a NaN value
    or NaN bin coordinate are skipped.

    :raises ValueError: if *image* is not 2D or the shapes differ.

    """
    image = asfarray(image)
    bin_coords = asfarray(bin_coords)

    if image.ndim != 2:
        raise ValueError('Image must be 2D, got shape {0}'.format(image.shape))
    if image.shape != bin_coords.shape:
        raise ValueError('Image and depth map must have identical shape ({0} vs {1})'.format(
            image.shape, bin_coords.shape))

    rows, cols = image.shape
    data = np.zeros((rows, cols, ndepth), dtype=image.dtype)
    weights = np.zeros((rows, cols, ndepth), dtype=image.dtype)

    bins = np.clip(np.round(bin_coords), 0, ndepth - 1)
    valid = np.logical_and(~np.isnan(bins), ~np.isnan(image))

    ii, jj = np.nonzero(valid)
    kk = bins[valid].astype(np.intp)
    np.add.at(data, (ii, jj, kk), image[valid])
    np.add.at(weights, (ii, jj, kk), 1)

    logger.debug('Scattered %d of %d pixels into %d depth bins',
                 ii.size, image.size, ndepth)

    row_index, col_index = np.mgrid[:rows, :cols]
    return Volume(data, weights, row_index, col_index, bin_coords.copy())

def spatial_smooth(volume, method=DEFAULT_SMOOTHING, sigma=DEFAULT_SPATIAL_SIGMA,
                   radius=DEFAULT_SPATIAL_RADIUS, dof=DEFAULT_TDIST_DOF):
    """Smooth every depth slice of both channels of *volume* spatially.

    :param method: ``'tdist'`` for a heavy tailed t-distribution kernel of
        scale *sigma* truncated at *radius* pels, or ``'gauss'`` for a
        Gaussian of standard deviation *sigma* pels.

    :raises ValueError: if *method* is unknown.

    """
    if method == 'tdist':
        smooth = lambda X: tdist_conv(X, sigma, radius, dof)
    elif method == 'gauss':
        smooth = lambda X: gauss_conv(X, sigma)
    else:
        raise ValueError('Unknown smoothing method: {0}'.format(method))

    return volume.with_grids(smooth(volume.data), smooth(volume.weights))

def depth_smooth(volume, kernel):
    """Convolve both channels of *volume* with *kernel* along depth."""
    return volume.with_grids(depth_conv(volume.data, kernel), depth_conv(volume.weights, kernel))

def normalize(volume):
    """Divide data by weight. Voxels whose weight is not positive read as 0
    and the returned weights are a binary mask of the positive-weight voxels.

    """
    mask = volume.weights <= 0
    with np.errstate(divide='ignore', invalid='ignore'):
        data = volume.data / volume.weights
    data[mask] = 0

    weights = np.logical_not(mask).astype(volume.weights.dtype)
    return volume.with_grids(data, weights)

def densify(volume, kernel, method=DEFAULT_SMOOTHING, sigma=DEFAULT_SPATIAL_SIGMA,
            radius=DEFAULT_SPATIAL_RADIUS, dof=DEFAULT_TDIST_DOF):
    """Fill the unobserved voxels of a freshly scattered *volume*.

    Both channels are smoothed spatially (see :py:func:`spatial_smooth`) and
    along depth with *kernel*, then normalised (see :py:func:`normalize`).
    Finally every voxel which had a non-zero weight before smoothing gets its
    original data and weight back so observed voxels are never altered.

    """
    # Computed once, before smoothing perturbs the zero weight voxels
    observed = volume.weights != 0
    orig_data = volume.data.copy()
    orig_weights = volume.weights.copy()

    smoothed = spatial_smooth(volume, method, sigma, radius, dof)
    smoothed = depth_smooth(smoothed, kernel)
    dense = normalize(smoothed)

    dense.data[observed] = orig_data[observed]
    dense.weights[observed] = orig_weights[observed]

    logger.debug('Filled %d unobserved voxels of %d', np.count_nonzero(dense.weights[~observed]),
                 observed.size - np.count_nonzero(observed))

    return dense

def _correlate(X, filt, edges, step, start):
    if np.iscomplexobj(filt):
        # correlate2d would conjugate a complex filter
        return (corr_dn_batch(X, filt.real, edges, step, start) +
                1j * corr_dn_batch(X, filt.imag, edges, step, start))
    return corr_dn_batch(X, filt, edges, step, start)

def _resampled(volume, data, weights, step, start):
    return Volume(data, weights,
                  subsample(volume.row_index, step, start),
                  subsample(volume.col_index, step, start),
                  subsample(volume.depth_map, step, start))

def corr_dn_volume(volume, filt, edges=DEFAULT_EDGES, step=(1, 1), start=(0, 0)):
    """Correlate-and-downsample both channels of *volume* with *filt*.

    The data channel is filtered with *filt*. The weight channel is filtered
    with ``filt / filt.sum()`` so that a uniform unit weight field stays at
    one. Filters with no DC response (e.g. highpass filters) or complex
    filters cannot be normalised this way; for those the weight channel is
    resampled at *step* and *start* without filtering.

    """
    filt = np.asarray(filt)
    data = _correlate(volume.data, filt, edges, step, start)

    response = filt.sum()
    if np.iscomplexobj(filt) or np.abs(response) <= ZERO_RESPONSE_RTOL * np.abs(filt).sum():
        weights = subsample(volume.weights, step, start)
    else:
        weights = corr_dn_batch(volume.weights, filt / response, edges, step, start)

    return _resampled(volume, data, weights, step, start)

def corr_gridonly(volume, filt, edges=DEFAULT_EDGES, step=(1, 1), start=(0, 0)):
    """Correlate-and-downsample only the data channel of *volume*. The
    weights are resampled at *step* and *start* without filtering since by
    this stage they only track resolution.

    Complex filters are applied as separate real and imaginary correlations
    recombined as ``real + 1j*imag``.

    """
    filt = np.asarray(filt)
    data = _correlate(volume.data, filt, edges, step, start)
    weights = subsample(volume.weights, step, start)
    return _resampled(volume, data, weights, step, start)

# vim:sw=4:sts=4:et
