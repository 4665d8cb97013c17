"""
Great-circle transforms on a spherical Earth.

This module converts between geographic coordinates (latitude, longitude)
and radar coordinates (range, bearing) on a sphere of radius EARTH_RADIUS.

All functions are numpy-vectorised and broadcast over array inputs. They are
total: degenerate inputs (coincident or antipodal points) give finite
numbers rather than errors.

Formulas follow https://www.movable-type.co.uk/scripts/latlong.html
"""

from typing import NamedTuple

import numpy as np
import astropy.units as u

from ionogeo.config import COINCIDENT_HAVERSINE, get_earth_radius_km


class GeoPoint(NamedTuple):
    """Geographic coordinates in signed decimal degrees."""

    lat: float
    """Latitude in degrees, north positive"""
    lon: float
    """Longitude in degrees, east positive, in (-180, 180]"""


class RadarVector(NamedTuple):
    """Polar coordinates relative to a starting point."""

    range_km: float
    """Great-circle distance in km"""
    bearing_deg: float
    """Initial bearing in degrees clockwise from true north, in [0, 360)"""


def _to_radians(angle) -> np.ndarray:
    """Convert degrees (plain numbers or angle Quantity) to radians."""
    return u.Quantity(angle, u.deg).to_value(u.rad)


def _to_degrees(angle) -> np.ndarray:
    """Convert plain radians to degrees."""
    return u.Quantity(angle, u.rad).to_value(u.deg)


def _to_km(distance) -> np.ndarray:
    """Convert a distance (plain km or length Quantity) to km."""
    return u.Quantity(distance, u.km).to_value(u.km)


def _haversine_term(lat1, lon1, lat2, lon2) -> np.ndarray:
    """
    Haversine of the central angle, clamped to [0, 1].

    a = sin²(Δφ/2) + cos φ1 ⋅ cos φ2 ⋅ sin²(Δλ/2)
    """
    a = (
        np.sin((lat2 - lat1) / 2.0) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2.0) ** 2
    )
    return np.clip(a, 0.0, 1.0)


def normalize_longitude(lon_deg):
    """
    Wrap longitudes into (-180, 180].

    Parameters
    ----------
    lon_deg : float or np.ndarray
        Longitude in degrees, any value

    Returns
    -------
    float or np.ndarray
        ((lon + 540) mod 360) - 180, with -180 mapped to +180

    Examples
    --------
    >>> normalize_longitude(190.0)
    -170.0
    >>> normalize_longitude(-180.0)
    180.0
    """
    lon = np.mod(np.asarray(lon_deg, dtype=float) + 540.0, 360.0) - 180.0
    return np.where(lon == -180.0, 180.0, lon)[()]


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Great-circle distance between two points.

    Parameters
    ----------
    lat1, lon1 : float or np.ndarray
        Starting coordinates in radians
    lat2, lon2 : float or np.ndarray
        Destination coordinates in radians

    Returns
    -------
    float or np.ndarray
        Distance in km, in [0, pi * R]

    Notes
    -----
    c = 2 ⋅ atan2(√a, √(1−a)) is used instead of 2 ⋅ asin(√a), which loses
    precision for nearly antipodal points.
    """
    a = _haversine_term(lat1, lon1, lat2, lon2)
    return 2.0 * get_earth_radius_km() * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))


def initial_bearing(lat1, lon1, lat2, lon2):
    """
    Initial bearing of the great circle from start to destination.

    Parameters
    ----------
    lat1, lon1 : float or np.ndarray
        Starting coordinates in radians
    lat2, lon2 : float or np.ndarray
        Destination coordinates in radians

    Returns
    -------
    float or np.ndarray
        Bearing in degrees clockwise from true north, in [0, 360)

    Notes
    -----
    θ = atan2(sin Δλ ⋅ cos φ2, cos φ1 ⋅ sin φ2 − sin φ1 ⋅ cos φ2 ⋅ cos Δλ)

    Coincident points return 0. For antipodal points every direction is a
    great circle and the result is whatever atan2 gives for the round-off.
    """
    dlon = lon2 - lon1
    y = np.sin(dlon) * np.cos(lat2)
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)
    bearing = np.mod(_to_degrees(np.arctan2(y, x)) + 360.0, 360.0)

    # atan2(±0, -eps) would give 180 for coincident points
    coincident = _haversine_term(lat1, lon1, lat2, lon2) <= COINCIDENT_HAVERSINE
    return np.where(coincident, 0.0, bearing)[()]


def destination_point(lat, lon, range_km, bearing):
    """
    Point reached by travelling along a great circle.

    Parameters
    ----------
    lat, lon : float or np.ndarray
        Starting coordinates in radians
    range_km : float or np.ndarray
        Distance travelled in km
    bearing : float or np.ndarray
        Initial bearing in radians, clockwise from true north

    Returns
    -------
    tuple
        (latitude, longitude) in degrees, longitude normalized to (-180, 180]

    Notes
    -----
    φ2 = asin(sin φ1 ⋅ cos δ + cos φ1 ⋅ sin δ ⋅ cos θ)
    λ2 = λ1 + atan2(sin θ ⋅ sin δ ⋅ cos φ1, cos δ − sin φ1 ⋅ sin φ2)

    where δ = range / R is the angular distance.
    """
    delta = range_km / get_earth_radius_km()
    sin_lat2 = np.clip(
        np.sin(lat) * np.cos(delta) + np.cos(lat) * np.sin(delta) * np.cos(bearing),
        -1.0,
        1.0,
    )
    lat2 = np.arcsin(sin_lat2)
    lon2 = lon + np.arctan2(
        np.sin(bearing) * np.sin(delta) * np.cos(lat),
        np.cos(delta) - np.sin(lat) * sin_lat2,
    )
    return _to_degrees(lat2), normalize_longitude(_to_degrees(lon2))


def gis_to_radar(start, end) -> RadarVector:
    """
    Convert two geographic points to range and bearing.

    Parameters
    ----------
    start : GeoPoint or tuple
        Starting (lat, lon) in degrees (plain numbers or angle Quantity)
    end : GeoPoint or tuple
        Destination (lat, lon) in degrees

    Returns
    -------
    RadarVector
        Range in km and initial bearing in degrees

    Examples
    --------
    >>> radar = gis_to_radar(GeoPoint(37, -75), GeoPoint(18, -66))
    >>> print(f"{radar.range_km:.2f} km, {radar.bearing_deg:.2f} deg")
    2288.66 km, 154.96 deg
    """
    lat1, lon1 = (_to_radians(value) for value in start)
    lat2, lon2 = (_to_radians(value) for value in end)
    return RadarVector(
        range_km=haversine_distance(lat1, lon1, lat2, lon2),
        bearing_deg=initial_bearing(lat1, lon1, lat2, lon2),
    )


def radar_to_gis(start, radar) -> GeoPoint:
    """
    Convert a starting point plus range and bearing to a geographic point.

    Parameters
    ----------
    start : GeoPoint or tuple
        Starting (lat, lon) in degrees (plain numbers or angle Quantity)
    radar : RadarVector or tuple
        (range, bearing); range in km or a length Quantity, bearing in degrees

    Returns
    -------
    GeoPoint
        Destination in degrees, longitude normalized to (-180, 180]

    Examples
    --------
    >>> end = radar_to_gis(GeoPoint(37, -75), RadarVector(2288.66, 154.96))
    >>> print(f"{end.lat:.0f}, {end.lon:.0f}")
    18, -66
    """
    lat, lon = (_to_radians(value) for value in start)
    range_km, bearing = radar
    lat2, lon2 = destination_point(lat, lon, _to_km(range_km), _to_radians(bearing))
    return GeoPoint(lat=lat2, lon=lon2)
