"""
Constants used throughout MagViz

Defaults for the ellipsoid solver, the sample file format and the
display normalization.
"""

import numpy as np

# Sample file format
DEFAULT_DELIMITER = ";"
COMMENT_PREFIX = "#"

# Ellipsoid fit
MIN_FIT_SAMPLES = 9  # 9 quadric coefficients
DEFAULT_MAX_CONDITION_NUMBER = 1.0e10  # on the R factor of the design matrix
DEFAULT_TOLERANCE_SCALE = 1.0e4  # multiples of machine epsilon
DEFAULT_COPLANARITY_TOLERANCE = 1.0e-6  # smallest / largest singular value
MACHINE_EPSILON = float(np.finfo(np.float64).eps)

# Outlier filter
FILTER_SPACE_RAW = "raw"
FILTER_SPACE_CORRECTED = "corrected"
FILTER_SPACES = (FILTER_SPACE_RAW, FILTER_SPACE_CORRECTED)

# Display
DEFAULT_TARGET_RADIUS = 100.0  # farthest point lands here when rendering

ORIGIN = (0.0, 0.0, 0.0)
