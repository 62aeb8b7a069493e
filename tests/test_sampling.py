import numpy as np
from pytest import raises

from bilatspyr.sampling import *

from .util import assert_almost_equal

def setup_module():
    global band
    # Every slice k of the band holds the value 10*k
    band = np.tile(10.0 * np.arange(3), (2, 2, 1))

def test_on_bin():
    out = sample_band(band, np.array([[0.0, 1.0], [2.0, 1.0]]))
    assert_almost_equal(out, [[0, 10], [20, 10]])

def test_between_bins():
    out = sample_band(band, np.array([[0.25, 0.5], [1.5, 1.9]]))
    assert_almost_equal(out, [[2.5, 5], [15, 19]])

def test_clipped():
    out = sample_band(band, np.array([[-1.0, -0.5], [5.0, 2.5]]))
    assert_almost_equal(out, [[0, 0], [20, 20]])

def test_missing():
    out = sample_band(band, np.array([[np.nan, 0.5], [1.0, np.nan]]))
    assert np.isnan(out[0, 0])
    assert np.isnan(out[1, 1])
    assert_almost_equal(out[0, 1], 5)
    assert_almost_equal(out[1, 0], 10)

def test_2d_band():
    out = sample_band(np.ones((2, 2)), np.array([[0.0, 0.5], [3.0, np.nan]]))
    assert out.shape == (2, 2)
    assert_almost_equal(out[:1, :], 1)
    assert out[1, 0] == 1
    assert np.isnan(out[1, 1])

def test_complex_band():
    out = sample_band(band * 1j, np.full((2, 2), 0.5))
    assert np.iscomplexobj(out)
    assert_almost_equal(out, 5j)

def test_float32_band():
    out = sample_band(band.astype(np.float32), np.zeros((2, 2)))
    assert out.dtype == np.float32

def test_shape_mismatch():
    with raises(ValueError):
        sample_band(band, np.zeros((3, 2)))
