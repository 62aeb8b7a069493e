import numpy as np
from pytest import raises

from bilatspyr.filters import *

from .util import assert_almost_equal

def test_sp1_filters():
    bank = steerable_filters('sp1_filters')
    assert bank.nbands == 2
    assert not bank.is_complex
    assert bank.lo0filt.shape == (9, 9)
    assert bank.hi0filt.shape == (9, 9)
    assert bank.lofilt.shape == (17, 17)
    for filt in bank.bfilts:
        assert filt.shape == (9, 9)
    assert np.all(bank.harmonics == [1])
    assert np.all(bank.steermtx == np.eye(2))

def test_sp1_bands_are_rotations():
    # The second first-derivative filter is the first one transposed
    b0, b1 = steerable_filters('sp1_filters').bfilts
    assert_almost_equal(np.abs(b0), np.abs(b1.T), 1e-12)
    assert_almost_equal(b0.sum(), 0.0, 1e-6)

def test_sp0_filters():
    bank = steerable_filters('sp0_filters')
    assert bank.nbands == 1
    assert bank.lofilt.shape == (13, 13)
    assert bank.steermtx.shape == (1, 1)

def test_filters_are_cached():
    assert steerable_filters('sp1_filters') is steerable_filters('sp1_filters')

def test_unknown_bank():
    with raises(ValueError):
        steerable_filters('does-not-exist')

def test_from_columns_is_column_major():
    one = np.ones((1, 1))
    bank = FilterBank.from_columns(one, one, one, np.arange(9.0))
    assert bank.nbands == 1
    assert bank.bfilts[0][1, 0] == 1
    assert bank.bfilts[0][0, 1] == 3

def test_from_columns_non_square():
    one = np.ones((1, 1))
    with raises(ValueError):
        FilterBank.from_columns(one, one, one, np.ones((8, 2)))

def test_non_square_band_filter():
    one = np.ones((1, 1))
    with raises(ValueError):
        FilterBank(one, one, one, [np.ones((3, 5))])

def test_unequal_band_filters():
    one = np.ones((1, 1))
    with raises(ValueError):
        FilterBank(one, one, one, [np.ones((3, 3)), np.ones((5, 5))])

def test_no_band_filters():
    one = np.ones((1, 1))
    with raises(ValueError):
        FilterBank(one, one, one, [])

def test_complex_bank():
    one = np.ones((1, 1))
    bank = FilterBank(one, one, one, [np.ones((3, 3)), 1j * np.ones((3, 3))])
    assert bank.is_complex
    assert np.iscomplexobj(bank.bfilts[1])

def test_max_pyr_height():
    assert max_pyr_height((64, 64), 17) == 2
    assert max_pyr_height((4, 4), 1) == 3
    assert max_pyr_height((16, 16), (17, 17)) == 0
    assert max_pyr_height((512, 256), 9) == 5

def test_max_pyr_height_1d():
    assert max_pyr_height((10, 1), 3) == 2
    assert max_pyr_height(10, 3) == 2

def test_steer_weights_sp1():
    bank = steerable_filters('sp1_filters')
    assert_almost_equal(steer_weights(0, bank.harmonics, bank.steermtx), [1, 0], 1e-12)
    assert_almost_equal(steer_weights(np.pi / 2, bank.harmonics, bank.steermtx), [0, 1], 1e-12)
    w = steer_weights(np.pi / 4, bank.harmonics, bank.steermtx)
    assert_almost_equal(w, [np.sqrt(0.5), np.sqrt(0.5)], 1e-12)

def test_steer_weights_zero_harmonic():
    w = steer_weights(1.234, [0], [1.0])
    assert_almost_equal(w, [1.0], 1e-12)

def test_steer_weights_mismatch():
    with raises(ValueError):
        steer_weights(0, [1, 3], np.eye(2))
