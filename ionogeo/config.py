"""
Configuration and constants for the ionogeo package.

This module centralizes all magic numbers, configuration values, and constants
used throughout the package.
"""

import numpy as np
import astropy.units as u
import astropy.constants as const

# ============================================================================
# Earth Model
# ============================================================================

# Mean Earth radius of the spherical model (exact in the model)
EARTH_RADIUS = 6371 * u.km

# Placeholder scale factor for future unit changes (e.g. km -> m).
# Applied to the radius in both the forward and inverse transforms so the
# two remain mutual inverses.
UNIT_SCALE = 1

# Haversine term below which two points are treated as coincident.
# 1e-24 corresponds to roughly 10 micrometres on the surface.
COINCIDENT_HAVERSINE = 1e-24

# ============================================================================
# Coordinate Tokens
# ============================================================================

# Sign carried by each hemisphere letter
HEMISPHERE_SIGN = {
    "N": 1,
    "E": 1,
    "S": -1,
    "W": -1,
}

# Hemisphere letters allowed per axis, (positive, negative)
AXIS_HEMISPHERES = {
    "lat": ("N", "S"),
    "lon": ("E", "W"),
}

# Largest magnitude in degrees per axis
AXIS_LIMITS = {
    "lat": 90,
    "lon": 180,
}

# ============================================================================
# Input File Formats
# ============================================================================

# Field delimiter of the geom_dist data line (comma + single space)
FIELD_DELIMITER = ", "

# Number of fields on the geom_dist data line
GEOM_FIELDS = 4

# Rows to discard at the top of an ionosonde export (header + blank row)
IONO_HEADER_ROWS = 2

# Leading non-numeric columns of an ionosonde row: date, symbol, time, index
IONO_LEADING_COLUMNS = 4

# Number of floating-point channels per ionosonde row
NUM_CHANNELS = 11

# Channel names of the ionosonde export, by column index
CHANNEL_NAMES = {
    0: "foF2",
    5: "hmF2",
}

# ============================================================================
# Median Filter
# ============================================================================

# Default median window width (odd)
MEDIAN_WINDOW = 3

# Channels fed to the median filter by default (foF2, hmF2)
FILTER_CHANNELS = (0, 5)

# ============================================================================
# Plotting
# ============================================================================

# External plotting program, launched with stdin as the command stream
GNUPLOT_COMMAND = ("gnuplot", "-persistent")

# Format of one "x y" pair in an inline gnuplot data block
GNUPLOT_PAIR_FORMAT = "{:f} {:f}"

# Default title of the plasma frequency profile plot
PROFILE_TITLE = "Plasma frequency"

# ============================================================================
# Plasma Physics
# ============================================================================

# f_p^2 = PLASMA_COEFFICIENT * Ne, i.e. e^2 / (4 pi^2 eps0 m_e) ~ 80.6 m^3/s^2
PLASMA_COEFFICIENT = (
    const.e.si**2 / (4 * np.pi**2 * const.eps0 * const.m_e)
).to(u.m**3 / u.s**2)


def get_earth_radius_km() -> float:
    """
    Return the model Earth radius in kilometres, scaled by UNIT_SCALE.

    Returns
    -------
    float
        Sphere radius used by every great-circle transform
    """
    return EARTH_RADIUS.to_value(u.km) * UNIT_SCALE


def channel_name(index: int) -> str:
    """
    Name of an ionosonde channel, falling back to ``channel <index>``.

    Parameters
    ----------
    index : int
        Column index among the floating-point channels

    Returns
    -------
    str
        Human readable channel label

    Raises
    ------
    ValueError
        If index is outside the channel range
    """
    if not 0 <= index < NUM_CHANNELS:
        raise ValueError(f"Unknown channel: {index}")
    return CHANNEL_NAMES.get(index, f"channel {index}")
