DEFAULT_FILTERS = 'sp1_filters'
DEFAULT_EDGES = 'reflect1'

# Spatial gap filling applied before the depth-axis smoothing
DEFAULT_SMOOTHING = 'tdist'
DEFAULT_SPATIAL_SIGMA = 0.1
DEFAULT_SPATIAL_RADIUS = 8
DEFAULT_TDIST_DOF = 1.0
