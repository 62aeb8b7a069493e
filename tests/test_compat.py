import numpy as np

from bilatspyr.compat import build_bilatspyr
from bilatspyr.filters import FilterBank
from bilatspyr.utils import layered_scene

def setup_module():
    global im, dmap
    im, dmap = layered_scene(32)

def test_build():
    pyr, pind, filters = build_bilatspyr(im, 1, 'sp1_filters', 'reflect1', dmap, 1, 4, 1)
    assert isinstance(filters, FilterBank)
    assert filters.nbands == 2
    assert np.all(pind == [[32, 32, 4], [32, 32, 4], [32, 32, 4], [16, 16, 4]])
    assert pyr.coeffs.shape == (32*32*3 + 16*16, 4)
    assert np.all(pyr.depth_centers == [1, 2, 3, 4])
    assert len(pyr.level_depth_maps) == 3

def test_defaults():
    pyr, pind, filters = build_bilatspyr(im, None, None, None, dmap, 1, 4, 1)
    ref, ref_pind, _ = build_bilatspyr(im, 1, 'sp1_filters', 'reflect1', dmap, 1, 4, 1)
    assert np.all(pind == ref_pind)
    assert np.all(pyr.coeffs == ref.coeffs)

def test_zeroth_order_filters():
    pyr, pind, filters = build_bilatspyr(im, 'auto', 'sp0_filters', 'repeat', dmap, 1, 4, 1)
    assert filters.nbands == 1
    # 32 pels with a 13 tap filter allow two levels
    assert pind.shape == (4, 3)
    assert np.all(pind[:, 2] == 4)
    assert np.all(np.isfinite(pyr.coeffs))
