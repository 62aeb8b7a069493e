"""Sampling band volumes back onto the image plane.

"""

__all__ = ('sample_band',)

import numpy as np

from bilatspyr.utils import asfarray

def sample_band(band, depth_map):
    """Collapse a (rows, cols, D) *band* to a 2D image by sampling each
    pixel at its fractional depth bin coordinate in *depth_map*.

    Samples between two bins are linearly interpolated. Coordinates outside
    ``[0, D-1]`` read the first or last bin. Pixels whose coordinate is NaN
    are NaN in the output.

    :param band: 3D array (a 2D array is treated as having one depth bin)
    :param depth_map: 2D array with the same spatial shape as *band*
    :returns: 2D array with the same dtype as *band*

    :raises ValueError: if the spatial shapes of *band* and *depth_map*
        differ.

    """
    band = np.atleast_3d(np.asanyarray(band))
    depth_map = asfarray(depth_map)

    if band.shape[:2] != depth_map.shape:
        raise ValueError('Shape of band {0} and depth map {1} must match'.format(
            band.shape[:2], depth_map.shape))

    missing = np.isnan(depth_map)
    coords = np.where(missing, 0, depth_map)

    lower = np.floor(coords)
    alpha = coords - lower

    ndepth = band.shape[2]
    lower_idx = np.clip(lower, 0, ndepth - 1).astype(np.intp)
    upper_idx = np.clip(np.ceil(coords), 0, ndepth - 1).astype(np.intp)

    ii, jj = np.indices(depth_map.shape)
    out = band[ii, jj, lower_idx] * (1 - alpha) + band[ii, jj, upper_idx] * alpha
    out = out.astype(np.result_type(band.dtype, np.float32))

    out[missing] = np.nan
    return out

# vim:sw=4:sts=4:et
