"""Functions for compatibility with MATLAB scripts. These functions are
intentionally similar in name and behaviour to the ``build_bilatspyr``
function of the MATLAB bilateral pyramid code. They are included in the
library to ease the porting of MATLAB scripts but shouldn't be used in new
projects.

"""

__all__ = ['build_bilatspyr']

from bilatspyr.defaults import DEFAULT_FILTERS, DEFAULT_EDGES
from bilatspyr.transform import BilateralTransform

def build_bilatspyr(im, ht, filtfile, edges, dmap, dmin, dmax, dsigma):
    """Construct a bilateral steerable pyramid on matrix *im*.

    :param im: 2D real image
    :param ht: number of pyramid levels, or ``'auto'`` (or *None*) for the
        maximum supported by the image and filter sizes
    :param filtfile: name of a steerable filter bank (e.g. ``'sp1_filters'``)
        or a :py:class:`bilatspyr.filters.FilterBank`. *None* selects the
        default bank.
    :param edges: edge handling mode, *None* for ``'reflect1'``
    :param dmap: per-pixel depth map of the same shape as *im*
    :param dmin: depth of the first bin
    :param dmax: largest depth covered by the bins
    :param dsigma: depth bin width and smoothing bandwidth

    :returns pyr: a :py:class:`bilatspyr.pyramid.Pyramid`. ``pyr.coeffs``
        holds the subbands, ``pyr.depth_centers`` the bin centres and
        ``pyr.level_depth_maps`` the per-level depth maps.
    :returns pind: (nbands, 3) array of band sizes
    :returns filters: the :py:class:`bilatspyr.filters.FilterBank` used

    Example::

        # Build a 3-level pyramid with first derivative filters over depths
        # 0 to 10 in steps of 0.5.
        pyr, pind, filters = build_bilatspyr(im, 3, 'sp1_filters', 'reflect1', dmap, 0, 10, 0.5)

    """
    if filtfile is None:
        filtfile = DEFAULT_FILTERS
    if edges is None:
        edges = DEFAULT_EDGES

    trans = BilateralTransform(filtfile, edges)
    pyr = trans.forward(im, dmap, dmin, dmax, dsigma, height=ht)

    return pyr, pyr.band_sizes, trans.filters

# vim:sw=4:sts=4:et
