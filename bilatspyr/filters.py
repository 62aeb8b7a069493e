"""Steerable pyramid filter banks.

A filter bank is loaded once per pyramid build and never modified. The
built-in banks are the Simoncelli steerable pyramid filters; custom banks,
including ones with complex oriented filters, can be built directly with
:py:class:`FilterBank`.

"""

__all__ = (
    'FilterBank',
    'steerable_filters',
    'max_pyr_height',
    'steer_weights',
)

import numpy as np

from bilatspyr import filterdata

_LOADERS = {
    'sp0_filters': filterdata.sp0_filters,
    'sp1_filters': filterdata.sp1_filters,
}

FILTER_CACHE = {}

def _as_filter(filt):
    filt = np.asarray(filt)
    if not np.iscomplexobj(filt):
        filt = filt.astype(np.float64)
    return np.atleast_2d(filt)

class FilterBank(object):
    """The filters parameterising a steerable pyramid.

    .. py:attribute:: lo0filt

        2D lowpass filter applied once to split off the highpass residual.

    .. py:attribute:: hi0filt

        2D highpass filter giving the finest, non-recursive band.

    .. py:attribute:: lofilt

        2D lowpass filter applied before each factor-of-two downsampling.

    .. py:attribute:: bfilts

        A tuple of square 2D oriented band filters of identical size. These
        may be complex.

    .. py:attribute:: steermtx

        Matrix mapping angular Fourier components onto the oriented bands.
        See :py:func:`steer_weights`.

    .. py:attribute:: harmonics

        1D integer array of the angular harmonics in the oriented bands.

    :raises ValueError: if any oriented filter is not square or the filters
        differ in size.

    """
    def __init__(self, lo0filt, hi0filt, lofilt, bfilts, steermtx=None, harmonics=None):
        self.lo0filt = _as_filter(lo0filt)
        self.hi0filt = _as_filter(hi0filt)
        self.lofilt = _as_filter(lofilt)
        self.bfilts = tuple(_as_filter(f) for f in bfilts)
        self.steermtx = np.atleast_2d(steermtx) if steermtx is not None else None
        self.harmonics = np.atleast_1d(harmonics).astype(int) if harmonics is not None else None

        if len(self.bfilts) == 0:
            raise ValueError('Filter bank must have at least one oriented filter')

        for filt in self.bfilts:
            if filt.shape[0] != filt.shape[1]:
                raise ValueError('Oriented filters must be square, got {0}x{1}'.format(*filt.shape))
            if filt.shape != self.bfilts[0].shape:
                raise ValueError('Oriented filters must all have the same size')

    @classmethod
    def from_columns(cls, lo0filt, hi0filt, lofilt, bfilts, steermtx=None, harmonics=None):
        """Construct a bank where *bfilts* is a matrix with one column-major
        vectorised square filter per column, as used by matlabPyrTools.

        """
        bfilts = np.asarray(bfilts)
        if bfilts.ndim == 1:
            bfilts = bfilts[:, np.newaxis]
        size = int(round(np.sqrt(bfilts.shape[0])))
        if size * size != bfilts.shape[0]:
            raise ValueError('Oriented filter columns of length {0} are not square filters'.format(
                bfilts.shape[0]))
        filts = [bfilts[:, b].reshape((size, size), order='F') for b in range(bfilts.shape[1])]
        return cls(lo0filt, hi0filt, lofilt, filts, steermtx, harmonics)

    @property
    def nbands(self):
        """Number of oriented bands per level."""
        return len(self.bfilts)

    @property
    def is_complex(self):
        """True if any oriented filter is complex. Every band of a pyramid
        built with a complex bank has a complex sample type."""
        return any(np.iscomplexobj(f) for f in self.bfilts)

def steerable_filters(name):
    """Load a steerable pyramid filter bank by name.

    :param name: a string specifying the filter set
    :returns: a :py:class:`FilterBank`

    ============ ============================================
    Name         Filters
    ============ ============================================
    sp0_filters  Zeroth order, one non-oriented band.
    sp1_filters  First derivative, two oriented bands.
    ============ ============================================

    :raises ValueError: if name does not correspond to a known filter bank.

    """
    try:
        return FILTER_CACHE[name]
    except KeyError:
        pass

    try:
        loader = _LOADERS[name]
    except KeyError:
        raise ValueError('Unknown steerable filter bank: {0}'.format(name))

    coeffs = loader()
    bank = FilterBank.from_columns(
        coeffs['lo0filt'], coeffs['hi0filt'], coeffs['lofilt'], coeffs['bfilts'],
        coeffs['steermtx'], coeffs['harmonics'])
    FILTER_CACHE[name] = bank
    return bank

def max_pyr_height(imsz, filtsz):
    """Compute the maximum pyramid height for given image and filter sizes,
    i.e. the number of factor-of-two corr_dn operations which can be
    performed before the image becomes smaller than the filter.

    :param imsz: image shape, an integer or tuple
    :param filtsz: filter shape, an integer or tuple

    A 2D image with a singleton dimension is treated as 1D.

    """
    imsz = tuple(int(s) for s in np.atleast_1d(imsz))
    filtsz = tuple(int(s) for s in np.atleast_1d(filtsz))

    if len(imsz) > 1 and 1 in imsz:
        imsz = (int(np.prod(imsz)),)
        filtsz = (int(np.prod(filtsz)),)

    height = 0
    while min(imsz) >= max(filtsz):
        height += 1
        imsz = tuple(s // 2 for s in imsz)
    return height

def steer_weights(angle, harmonics, steermtx):
    """Return the weights which combine a set of steerable bands into the
    response of the same filter rotated to *angle* radians.

    :param angle: angle to steer to
    :param harmonics: the angular harmonics of the bank
    :param steermtx: the bank's steering matrix, mapping Fourier components
        ordered [cos0 cos1 sin1 cos2 sin2 ...] onto the bands
    :returns: a 1D array with one weight per band

    :raises ValueError: if *harmonics* and *steermtx* disagree on the number
        of bands.

    """
    harmonics = np.atleast_1d(harmonics)
    steermtx = np.atleast_2d(steermtx)
    num = 2 * harmonics.size - np.count_nonzero(harmonics == 0)
    if steermtx.shape[0] != num:
        raise ValueError('Harmonics list is incompatible with a {0}x{1} steering matrix'.format(
            *steermtx.shape))

    components = []
    for h in harmonics:
        if h == 0:
            components.append(1.0)
        else:
            components.extend((np.cos(h * angle), np.sin(h * angle)))

    return np.dot(np.asarray(components), steermtx)

# vim:sw=4:sts=4:et
