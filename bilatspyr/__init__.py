__all__ = [
    '__version__',

    'BilateralTransform',
    'Pyramid',
    'Volume',
    'FilterBank',

    'steerable_filters',
    'max_pyr_height',
    'build_bilatspyr',
]

from bilatspyr._version import __version__

from bilatspyr.compat import build_bilatspyr
from bilatspyr.filters import FilterBank, steerable_filters, max_pyr_height
from bilatspyr.pyramid import Pyramid
from bilatspyr.transform import BilateralTransform
from bilatspyr.volume import Volume
