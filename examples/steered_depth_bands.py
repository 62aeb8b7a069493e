#!/usr/bin/env python
"""Show the oriented bands of a bilateral pyramid of a layered scene, steered
to a range of angles and sampled back onto the image plane.

"""
import logging

import bilatspyr
import bilatspyr.sampling
from bilatspyr.utils import layered_scene

# Use an off-screen backend for matplotlib
import matplotlib
matplotlib.use('agg')

# Import numpy and matplotlib's pyplot interface
import numpy as np
from matplotlib.pyplot import *

logging.basicConfig(level=logging.DEBUG)

# A bright disc at depth 1 in front of a grating at depth 4. The edge of the
# disc is a discontinuity in both intensity and depth.
image, depth = layered_scene(128, near=1.0, far=4.0)

# Depth bins from 1 to 4 in unit steps
trans = bilatspyr.BilateralTransform('sp1_filters', 'reflect1')
pyr = trans.forward(image, depth, 1.0, 4.0, 1.0, height=3)

angles = np.linspace(0, np.pi, 4, endpoint=False)

figure(figsize=(12, 9))

subplot(pyr.nlevels - 2, len(angles) + 1, 1)
imshow(image, cmap=cm.gray, interpolation='none')
title('Input')
axis('off')

for level in range(1, pyr.nlevels - 1):
    # All bands of a level share its depth map
    depth_map = pyr.level_depth_maps[level]

    for col, angle in enumerate(angles):
        steered = pyr.steer(level, angle)
        sampled = bilatspyr.sampling.sample_band(steered, depth_map)

        subplot(pyr.nlevels - 2, len(angles) + 1, (level - 1) * (len(angles) + 1) + col + 2)
        imshow(sampled, cmap=cm.RdBu, interpolation='none',
               clim=np.abs(sampled).max() * np.array([-1, 1]))
        title('Level {0}, {1:.0f} deg'.format(level, np.rad2deg(angle)))
        axis('off')

tight_layout()
savefig('steered-depth-bands.png')
