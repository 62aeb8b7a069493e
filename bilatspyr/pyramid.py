"""The flattened representation of a bilateral pyramid.

"""

__all__ = ('Pyramid', 'pack_bands')

import numpy as np

from bilatspyr.filters import steer_weights
from bilatspyr.sampling import sample_band

class Pyramid(object):
    """A bilateral steerable pyramid flattened into one buffer. The layout is
    compatible with the matlabPyrTools ``(pyr, pind)`` convention extended by
    a trailing depth axis.

    .. py:attribute:: coeffs

        (N, D) array holding every band in turn, finest to coarsest: the
        highpass residual, then the oriented bands of each level in filter
        order, then the lowpass residual. Each band occupies ``rows*cols``
        consecutive rows.

    .. py:attribute:: band_sizes

        (nbands, 3) integer array of the (rows, cols, D) shape of each band.

    .. py:attribute:: band_levels

        1D integer array giving the level of each band. Level 0 is the
        highpass residual and the last level is the lowpass residual.

    .. py:attribute:: depth_centers

        1D array of the depth value at the centre of each depth bin.

    .. py:attribute:: level_depth_maps

        A tuple with one float32 depth bin coordinate map per level, at that
        level's resolution.

    .. py:attribute:: harmonics

        *(optional)* The angular harmonics of the filter bank used.

    .. py:attribute:: steermtx

        *(optional)* The steering matrix of the filter bank used.

    """
    def __init__(self, coeffs, band_sizes, band_levels, depth_centers, level_depth_maps,
                 harmonics=None, steermtx=None):
        self.coeffs = coeffs
        self.band_sizes = np.asarray(band_sizes, dtype=np.intp)
        self.band_levels = np.asarray(band_levels, dtype=np.intp)
        self.depth_centers = np.asarray(depth_centers)
        self.level_depth_maps = tuple(level_depth_maps)
        self.harmonics = harmonics
        self.steermtx = steermtx

    @property
    def nbands(self):
        return self.band_sizes.shape[0]

    @property
    def nlevels(self):
        return len(self.level_depth_maps)

    @property
    def band_ranges(self):
        """(nbands, 2) array of the [start, stop) row range of each band in
        :py:attr:`coeffs`."""
        lengths = self.band_sizes[:, 0] * self.band_sizes[:, 1]
        stops = np.cumsum(lengths)
        return np.column_stack((stops - lengths, stops))

    def band(self, index):
        """Return band *index* reshaped to (rows, cols, D)."""
        start, stop = self.band_ranges[index]
        return self.coeffs[start:stop, :].reshape(tuple(self.band_sizes[index]))

    def bands(self):
        """Iterate over every band in order, reshaped to (rows, cols, D)."""
        for index in range(self.nbands):
            yield self.band(index)

    def level_bands(self, level):
        """Return the indices of the bands belonging to *level*."""
        return np.flatnonzero(self.band_levels == level)

    def sample(self, index):
        """Collapse band *index* to a 2D image using its level's depth map.
        See :py:func:`bilatspyr.sampling.sample_band`."""
        return sample_band(self.band(index), self.level_depth_maps[self.band_levels[index]])

    def steer(self, level, angle):
        """Combine the oriented bands of *level* into the response of the
        bank's oriented filter rotated to *angle* radians.

        :returns: a (rows, cols, D) array

        :raises ValueError: if the pyramid has no steering information or
            *level* does not hold one band per steerable component.

        """
        if self.steermtx is None or self.harmonics is None:
            raise ValueError('Pyramid was built without steering information')

        indices = self.level_bands(level)
        weights = steer_weights(angle, self.harmonics, self.steermtx)
        if len(indices) != len(weights):
            raise ValueError('Level {0} has {1} bands but the bank steers {2}'.format(
                level, len(indices), len(weights)))

        return sum(w * self.band(i) for w, i in zip(weights, indices))

def pack_bands(levels, depth_centers, harmonics=None, steermtx=None):
    """Flatten per-level lists of band volumes into a :py:class:`Pyramid`.

    :param levels: sequence of levels, finest first, each a sequence of
        :py:class:`bilatspyr.volume.Volume` objects
    :param depth_centers: the depth value of each bin

    The last band of each level provides that level's depth map.

    :raises ValueError: if there are no bands or the bands disagree on the
        number of depth bins.

    """
    bands, band_levels, depth_maps = [], [], []
    for level, level_volumes in enumerate(levels):
        for volume in level_volumes:
            bands.append(volume)
            band_levels.append(level)
        depth_maps.append(np.asarray(level_volumes[-1].depth_map, dtype=np.float32))

    if len(bands) == 0:
        raise ValueError('Cannot pack a pyramid with no bands')

    sizes = []
    for volume in bands:
        shape = volume.data.shape
        sizes.append(shape if len(shape) == 3 else shape[:2] + (1,))
    band_sizes = np.array(sizes, dtype=np.intp)

    ndepth = band_sizes[0, 2]
    if np.any(band_sizes[:, 2] != ndepth):
        raise ValueError('All bands must have the same number of depth bins')

    pyr = Pyramid(None, band_sizes, band_levels, depth_centers, depth_maps, harmonics, steermtx)
    ranges = pyr.band_ranges

    dtype = np.result_type(*[volume.data.dtype for volume in bands])
    pyr.coeffs = np.zeros((ranges[-1, 1], ndepth), dtype=dtype)
    for volume, (start, stop) in zip(bands, ranges):
        pyr.coeffs[start:stop, :] = volume.data.reshape(-1, ndepth)

    return pyr

# vim:sw=4:sts=4:et
