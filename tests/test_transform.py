import numpy as np
from pytest import raises

from bilatspyr.filters import FilterBank
from bilatspyr.transform import BilateralTransform
from bilatspyr.utils import layered_scene

from .util import assert_almost_equal, identity_bank

def setup_module():
    global scene, scene_depth, pyr
    scene, scene_depth = layered_scene(64)
    # Depths 1 to 4 in unit bins give four depth slices
    pyr = BilateralTransform().forward(scene, scene_depth, 1.0, 4.0, 1.0, height=2)

def test_simple():
    vol = np.ones((4, 4))
    pyr = BilateralTransform(identity_bank()).forward(vol, np.zeros((4, 4)), 0.0, 0.0, 1.0, height=0)
    assert pyr.nbands == 2
    assert np.all(pyr.band_sizes == [[4, 4, 1], [4, 4, 1]])
    assert np.all(pyr.band(1) == 1)
    assert np.all(pyr.band(0) == 1)

def test_band_layout():
    assert pyr.nbands == 6
    assert np.all(pyr.band_sizes == [
        [64, 64, 4],
        [64, 64, 4], [64, 64, 4],
        [32, 32, 4], [32, 32, 4],
        [16, 16, 4],
    ])
    assert np.all(pyr.band_levels == [0, 1, 1, 2, 2, 3])
    assert pyr.coeffs.shape == (64*64*3 + 32*32*2 + 16*16, 4)

def test_coeffs_are_finite():
    assert np.all(np.isfinite(pyr.coeffs))
    assert not np.iscomplexobj(pyr.coeffs)

def test_depth_centers():
    assert_almost_equal(pyr.depth_centers, [1, 2, 3, 4])

def test_bin_width_defaults_to_sigma():
    t = BilateralTransform(identity_bank())
    a = t.forward(scene, scene_depth, 0.5, 2.0, 0.5, height=0)
    b = t.forward(scene, scene_depth, 0.5, 2.0, 1.0, height=0, bin_width=0.5)
    assert_almost_equal(a.depth_centers, [0.5, 1.0, 1.5, 2.0])
    assert_almost_equal(b.depth_centers, [0.5, 1.0, 1.5, 2.0])
    assert a.coeffs.shape == b.coeffs.shape

def test_level_depth_maps():
    assert pyr.nlevels == 4
    shapes = [(64, 64), (64, 64), (32, 32), (16, 16)]
    for depth_map, shape in zip(pyr.level_depth_maps, shapes):
        assert depth_map.shape == shape
        assert depth_map.dtype == np.float32

    # Depth maps hold zero-based bin coordinates
    assert_almost_equal(pyr.level_depth_maps[0], scene_depth - 1.0)
    assert_almost_equal(pyr.level_depth_maps[2], scene_depth[::2, ::2] - 1.0)

def test_auto_height():
    p = BilateralTransform().forward(scene, scene_depth, 1.0, 4.0, 1.0)
    assert p.nbands == pyr.nbands
    assert np.all(p.band_sizes == pyr.band_sizes)
    p = BilateralTransform().forward(scene, scene_depth, 1.0, 4.0, 1.0, height=None)
    assert p.nbands == pyr.nbands

def test_zero_height():
    p = BilateralTransform().forward(scene, scene_depth, 1.0, 4.0, 1.0, height=0)
    assert p.nbands == 2
    assert np.all(p.band_levels == [0, 1])

def test_too_high():
    with raises(ValueError):
        BilateralTransform().forward(scene, scene_depth, 1.0, 4.0, 1.0, height=3)

def test_negative_height():
    with raises(ValueError):
        BilateralTransform().forward(scene, scene_depth, 1.0, 4.0, 1.0, height=-1)

def test_bad_height_string():
    with raises(ValueError):
        BilateralTransform().forward(scene, scene_depth, 1.0, 4.0, 1.0, height='max')

def test_shape_mismatch():
    with raises(ValueError):
        BilateralTransform().forward(scene, scene_depth[:32, :], 1.0, 4.0, 1.0)

def test_non_2d_image():
    with raises(ValueError):
        BilateralTransform().forward(np.ones((8, 8, 2)), np.ones((8, 8, 2)), 1.0, 4.0, 1.0)

def test_bad_depth_range():
    t = BilateralTransform(identity_bank())
    with raises(ValueError):
        t.forward(scene, scene_depth, 4.0, 1.0, 1.0)
    with raises(ValueError):
        t.forward(scene, scene_depth, 1.0, 4.0, 0.0)
    with raises(ValueError):
        t.forward(scene, scene_depth, 1.0, 4.0, 1.0, bin_width=-1.0)

def test_bad_edges():
    with raises(ValueError):
        BilateralTransform(edges='does-not-exist')

def test_bad_smoothing():
    with raises(ValueError):
        BilateralTransform(smoothing='does-not-exist')

def test_bad_filter_name():
    with raises(ValueError):
        BilateralTransform('does-not-exist')

def test_other_edges_and_smoothing():
    for edges in ('reflect2', 'repeat', 'zero', 'circular', 'extend'):
        p = BilateralTransform(edges=edges, smoothing='gauss', spatial_sigma=1.0).forward(
            scene, scene_depth, 1.0, 4.0, 1.0, height=1)
        assert p.nbands == 4
        assert np.all(np.isfinite(p.coeffs))

def test_observed_voxels_are_preserved():
    rng = np.random.RandomState(1)
    image = rng.rand(16, 16)
    depth = rng.rand(16, 16) * 3
    p = BilateralTransform(identity_bank()).forward(image, depth, 0.0, 3.0, 1.0, height=0)

    band = p.band(0)
    bins = np.round(depth).astype(int)
    for i in range(16):
        for j in range(16):
            assert band[i, j, bins[i, j]] == image[i, j]

def test_missing_depth_is_filled():
    depth = np.zeros((8, 8))
    depth[4, 5] = np.nan
    p = BilateralTransform(identity_bank()).forward(np.ones((8, 8)), depth, 0.0, 0.0, 1.0, height=0)
    assert np.all(np.isfinite(p.coeffs))
    assert_almost_equal(p.band(0), 1.0, 1e-12)
    assert_almost_equal(p.band(1), 1.0, 1e-12)
    assert np.isnan(p.level_depth_maps[0][4, 5])

def test_complex_bank():
    one = np.ones((1, 1))
    bank = FilterBank(one, one, one, [one + 1j * one], np.eye(1), [0])
    assert bank.is_complex

    p = BilateralTransform(bank).forward(np.ones((4, 4)), np.zeros((4, 4)), 0.0, 0.0, 1.0, height=1)
    assert np.iscomplexobj(p.coeffs)
    assert np.all(p.band_sizes == [[4, 4, 1], [4, 4, 1], [2, 2, 1]])

    lowpass = p.band(2)
    assert_almost_equal(lowpass.real, 1.0, 1e-12)
    assert_almost_equal(lowpass.imag, lowpass.real, 1e-12)
    assert_almost_equal(p.band(1), 1 + 1j, 1e-12)

def test_float32_input():
    p = BilateralTransform().forward(scene.astype(np.float32), scene_depth.astype(np.float32),
                                     1.0, 4.0, 1.0, height=1)
    assert p.nbands == 4
    assert np.all(np.isfinite(p.coeffs))
