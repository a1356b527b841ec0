"""
Constants declarations for geodetics
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_B = 6356752.314245  # Minor axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Geodetic <-> cartesian iteration
CARTESIAN_EPSILON = 1e-12  # radians
CARTESIAN_MAX_ITERATIONS = 10

# Vincenty
VINCENTY_EPSILON = 1e-12
VINCENTY_DIRECT_MAX_ITERATIONS = 100
VINCENTY_INVERSE_MAX_ITERATIONS = 1000
VINCENTY_COINCIDENT_SIN_SQ_SIGMA = 1e-24

# Transverse Mercator / UTM
TM_TAU_EPSILON = 1e-12
TM_MAX_ITERATIONS = 100
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500e3
UTM_FALSE_NORTHING = 10000e3
UTM_MIN_LATITUDE = -80
UTM_MAX_LATITUDE = 84

# Valid northing ranges cover 84N (northern) and 80S (southern) at the zone edges
UTM_MAX_EASTING = 1000e3
UTM_MAX_NORTHING_NORTH = 9329006
UTM_MIN_NORTHING_SOUTH = 1116914

# MGRS
MGRS_LATITUDE_BANDS = 'CDEFGHJKLMNPQRSTUVWXX'  # X is repeated for 80-84N
MGRS_E100K_LETTERS = ('ABCDEFGH', 'JKLMNPQR', 'STUVWXYZ')
MGRS_N100K_LETTERS = ('ABCDEFGHJKLMNPQRSTUV', 'FGHJKLMNPQRSTUVABCDE')
MGRS_PRECISIONS = (2, 4, 6, 8, 10)
