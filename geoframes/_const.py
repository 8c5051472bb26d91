"""
Constants declarations for geoframes
"""

import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A  # Semi-minor axis (meters)
WGS84_E2 = 1 - (1 - WGS84_F) ** 2  # First eccentricity, squared
WGS84_EP2 = WGS84_E2 / (1 - WGS84_E2)  # Second eccentricity, squared

DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi

# Below this cross-product length the local up rotation is treated as identity
ROTATION_AXIS_EPSILON = 1e-5
