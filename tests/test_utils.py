import numpy as np
from pytest import raises

from bilatspyr.utils import *

def test_asfarray_converts_integers():
    X = asfarray(np.arange(6).reshape(2, 3))
    assert X.dtype == np.float64

def test_asfarray_passes_floats_through():
    X = np.zeros((2, 3), np.float32)
    assert asfarray(X) is X

def test_asfarray_non_array_input():
    X = asfarray([[1, 2], [3, 4]])
    assert X.shape == (2, 2)
    assert np.issubdtype(X.dtype, np.floating)

def test_complex_type_for_complex():
    assert appropriate_complex_type_for(np.zeros((2,3), np.complex64)) is np.complex64
    assert appropriate_complex_type_for(np.zeros((2,3), np.complex128)) is np.complex128

def test_complex_type_for_float():
    assert appropriate_complex_type_for(np.zeros((2,3), np.float32)) is np.complex64
    assert appropriate_complex_type_for(np.zeros((2,3), np.float64)) is np.complex128

def test_as_pair():
    assert as_pair(2) == (2, 2)
    assert as_pair((1, 3)) == (1, 3)
    assert as_pair([4]) == (4, 4)

def test_as_pair_too_long():
    with raises(ValueError):
        as_pair((1, 2, 3))

def test_layered_scene():
    image, depth = layered_scene(32, near=2.0, far=5.0)
    assert image.shape == (32, 32)
    assert depth.shape == (32, 32)
    assert set(np.unique(depth)) == set([2.0, 5.0])
    assert depth[16, 16] == 2.0
    assert depth[0, 0] == 5.0
    assert image[16, 16] == 0.9
