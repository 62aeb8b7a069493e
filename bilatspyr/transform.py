import logging

import numpy as np

from bilatspyr.defaults import (
    DEFAULT_FILTERS, DEFAULT_EDGES, DEFAULT_SMOOTHING, DEFAULT_SPATIAL_SIGMA,
    DEFAULT_SPATIAL_RADIUS, DEFAULT_TDIST_DOF,
)
from bilatspyr.filters import steerable_filters, max_pyr_height
from bilatspyr.lowlevel import EDGE_MODES, depth_kernel
from bilatspyr.pyramid import pack_bands
from bilatspyr.utils import appropriate_complex_type_for, asfarray
from bilatspyr.volume import scatter_build, densify, corr_dn_volume, corr_gridonly

logger = logging.getLogger(__name__)

_SMOOTHING_METHODS = ('tdist', 'gauss')

class BilateralTransform(object):
    """
    A bilateral steerable pyramid: a steerable pyramid computed on an image
    scattered into depth bins according to a per-pixel depth map.

    :param filters: the filter bank. Either the name of a bank accepted by
        :py:func:`bilatspyr.filters.steerable_filters` or a
        :py:class:`bilatspyr.filters.FilterBank`.
    :param edges: edge handling mode. See :py:data:`bilatspyr.lowlevel.EDGE_MODES`.
    :param smoothing: spatial gap filling method, ``'tdist'`` or ``'gauss'``
    :param spatial_sigma: scale of the spatial smoothing kernel
    :param spatial_radius: truncation radius of the ``'tdist'`` kernel
    :param tdist_dof: degrees of freedom of the ``'tdist'`` kernel

    :raises ValueError: if *edges* or *smoothing* are unknown.

    """
    def __init__(self, filters=DEFAULT_FILTERS, edges=DEFAULT_EDGES, smoothing=DEFAULT_SMOOTHING,
                 spatial_sigma=DEFAULT_SPATIAL_SIGMA, spatial_radius=DEFAULT_SPATIAL_RADIUS,
                 tdist_dof=DEFAULT_TDIST_DOF):
        # Load filters if given a bank name
        if isinstance(filters, str):
            self.filters = steerable_filters(filters)
        else:
            self.filters = filters

        if edges not in EDGE_MODES:
            raise ValueError('Unknown edge handling mode: {0}'.format(edges))
        if smoothing not in _SMOOTHING_METHODS:
            raise ValueError('Unknown smoothing method: {0}'.format(smoothing))

        self.edges = edges
        self.smoothing = smoothing
        self.spatial_sigma = spatial_sigma
        self.spatial_radius = spatial_radius
        self.tdist_dof = tdist_dof

    def forward(self, image, depth_map, d_min, d_max, d_sigma, height='auto', bin_width=None):
        """Build a bilateral pyramid of *image* with depth taken from
        *depth_map*.

        :param image: 2D real array. NaN values are treated as missing.
        :param depth_map: 2D real array of the same shape giving the raw depth
            (or disparity) of each pixel. NaN values are treated as missing.
        :param d_min: depth of the first bin
        :param d_max: largest depth covered by the bins
        :param d_sigma: depth smoothing bandwidth
        :param height: number of pyramid levels, or ``'auto'`` for the
            maximum supported by the image and filter sizes
        :param bin_width: depth covered by each bin. Defaults to *d_sigma*.

        :returns: a :py:class:`bilatspyr.pyramid.Pyramid`

        The pyramid has ``D = floor((d_max - d_min) / bin_width) + 1`` depth
        bins. It holds the highpass residual at level 0, the oriented bands
        of levels 1 to *height* and the lowpass residual at level
        *height* + 1.

        :raises ValueError: if the shapes of *image* and *depth_map* differ,
            the depth range is invalid or *height* exceeds the maximum.

        """
        image = asfarray(image)
        depth_map = asfarray(depth_map)

        if image.ndim != 2:
            raise ValueError('The entered image is {0}, please enter a 2D image.'.format(
                'x'.join(str(s) for s in image.shape)))
        if image.shape != depth_map.shape:
            raise ValueError('Image and depth map must have identical shape ({0} vs {1})'.format(
                image.shape, depth_map.shape))

        if bin_width is None:
            bin_width = d_sigma
        if d_sigma <= 0 or bin_width <= 0:
            raise ValueError('Depth bandwidth and bin width must be positive')
        if d_max < d_min:
            raise ValueError('Depth range is empty ({0} > {1})'.format(d_min, d_max))

        height = self._check_height(image.shape, height)

        ndepth = int(np.floor((d_max - d_min) / float(bin_width))) + 1
        depth_centers = np.arange(ndepth) * bin_width + d_min

        logger.debug('Building %d level bilateral pyramid of %dx%d image with %d depth bins',
                     height, image.shape[0], image.shape[1], ndepth)

        # Build the 3D extended representation and fill its gaps
        vol = scatter_build(image, (depth_map - d_min) / bin_width, ndepth)
        vol = densify(vol, depth_kernel(d_sigma, bin_width), self.smoothing,
                      self.spatial_sigma, self.spatial_radius, self.tdist_dof)

        # Initial highpass/lowpass split
        hi0 = corr_dn_volume(vol, self.filters.hi0filt, self.edges)
        lo0 = corr_dn_volume(vol, self.filters.lo0filt, self.edges)

        levels = [[hi0]] + self._build_levels(lo0, height)

        return pack_bands(levels, depth_centers, self.filters.harmonics, self.filters.steermtx)

    def _check_height(self, imsz, height):
        max_ht = max_pyr_height(imsz, self.filters.lofilt.shape[0])
        if height is None or (isinstance(height, str) and height == 'auto'):
            return max_ht
        if isinstance(height, str):
            raise ValueError('Height must be an integer or "auto", got {0}'.format(height))
        if height < 0:
            raise ValueError('Height must be non-negative, got {0}'.format(height))
        if height > max_ht:
            raise ValueError('Cannot build pyramid higher than {0} levels.'.format(max_ht))
        return int(height)

    def _build_levels(self, lowpass, height):
        """Return a list of levels, finest first, for *lowpass*. Each level is
        a list of band volumes; the last level holds only the lowpass
        residual.

        """
        if height <= 0:
            return [[self._promote_lowpass(lowpass)]]

        bands = [corr_gridonly(lowpass, filt, self.edges) for filt in self.filters.bfilts]
        logger.debug('Level with %d bands of size %dx%d', len(bands), *lowpass.shape2d)

        next_lowpass = corr_gridonly(lowpass, self.filters.lofilt, self.edges, step=(2, 2))

        return [bands] + self._build_levels(next_lowpass, height - 1)

    def _promote_lowpass(self, lowpass):
        # A complex bank makes every band complex. The real lowpass residual
        # is duplicated into both parts, matching the result of joining
        # separate real and imaginary pyramids.
        if not self.filters.is_complex:
            return lowpass

        data = lowpass.data + 1j * lowpass.data
        return lowpass.with_grids(data.astype(appropriate_complex_type_for(lowpass.data)))

# vim:sw=4:sts=4:et
