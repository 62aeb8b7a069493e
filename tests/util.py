import numpy as np

TOLERANCE = 1e-6

def assert_almost_equal(a, b, tolerance=TOLERANCE):
    md = np.abs(np.asarray(a) - np.asarray(b)).max()
    if md <= tolerance:
        return

    raise AssertionError(
            'Arrays differ by a maximum of {0} which is greater than the tolerance of {1}'.
            format(md, tolerance))

def identity_bank(nbands=1):
    """A filter bank of 1x1 unit filters which leaves every band unchanged."""
    from bilatspyr.filters import FilterBank
    one = np.ones((1, 1))
    return FilterBank(one, one, one, [one] * nbands, np.eye(1), [0])
