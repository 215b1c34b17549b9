"""Fixed physical constants and unit factors used across the engine."""

EARTH_RADIUS_NM = 3440.065  # Earth radius in nm
NM_TO_KM = 1.852  # International nautical mile, exact
MINUTES_PER_DEGREE = 60.0  # 1 nm = 1' of latitude

# Isometric-latitude ratio below which a rhumb line is treated as due E/W
RHUMB_EPSILON = 1e-10

# Floor for cos(latitude) divisors near the poles
POLE_EPSILON = 1e-12

# Latitudes are pulled this far (radians) inside the poles before tan()
POLE_LAT_MARGIN_RAD = 1e-12
