"""
Tests for ionogeo.spherical module.

Tests the great-circle kernel on known cases and on random inputs.
"""

import pytest
import numpy as np
import astropy.units as u

from ionogeo.config import EARTH_RADIUS
from ionogeo.spherical import (
    GeoPoint,
    RadarVector,
    gis_to_radar,
    radar_to_gis,
    haversine_distance,
    initial_bearing,
    destination_point,
    normalize_longitude,
)


def _random_points(rng, n, lat_limit=90.0):
    lat = rng.uniform(-lat_limit, lat_limit, n)
    lon = normalize_longitude(rng.uniform(-180.0, 180.0, n))
    return lat, lon


def _bearing_difference(a, b):
    """Smallest angle between two bearings in degrees."""
    diff = np.abs(np.mod(a - b, 360.0))
    return np.minimum(diff, 360.0 - diff)


class TestKnownCases:
    """Test conversions against worked examples."""

    def test_gis_to_radar_reference(self):
        """Test 37N 75W -> 18N 66W."""
        radar = gis_to_radar(GeoPoint(37, -75), GeoPoint(18, -66))

        assert np.isclose(radar.range_km, 2288.66, atol=0.01)
        assert np.isclose(radar.bearing_deg, 154.96, atol=0.01)

    def test_radar_to_gis_reference(self):
        """Test 37N 75W + 2288.66 km at 154.96 deg lands on 18N 66W."""
        end = radar_to_gis(GeoPoint(37, -75), RadarVector(2288.66, 154.96))

        assert np.isclose(end.lat, 18.0, atol=0.01)
        assert np.isclose(end.lon, -66.0, atol=0.01)

    def test_half_circumference(self):
        """Test distance along the equator to the antimeridian is pi * R."""
        radar = gis_to_radar(GeoPoint(0, 0), GeoPoint(0, 180))

        assert np.isclose(radar.range_km, np.pi * 6371.0, atol=1e-6)
        assert np.isclose(radar.range_km, 20015.09, atol=0.01)

    def test_due_north(self):
        """Test one degree of latitude along a meridian."""
        radar = gis_to_radar(GeoPoint(10, 20), GeoPoint(11, 20))

        assert np.isclose(radar.range_km, 6371.0 * np.pi / 180.0)
        assert np.isclose(radar.bearing_deg, 0.0, atol=1e-9)

    def test_due_east_on_equator(self):
        """Test bearing along the equator."""
        radar = gis_to_radar(GeoPoint(0, 0), GeoPoint(0, 10))
        assert np.isclose(radar.bearing_deg, 90.0)

    def test_due_west_on_equator(self):
        """Test westward bearing is reported in [0, 360)."""
        radar = gis_to_radar(GeoPoint(0, 0), GeoPoint(0, -10))
        assert np.isclose(radar.bearing_deg, 270.0)

    def test_radius_constant(self):
        """Test Earth radius is 6371 km."""
        assert EARTH_RADIUS.to_value(u.km) == 6371


class TestDegenerateCases:
    """Test the kernel stays total on degenerate inputs."""

    @pytest.mark.parametrize("point", [(0, 0), (37, -75), (-89, 179), (90, 0)])
    def test_identical_points(self, point):
        """Test identical points give zero range and zero bearing."""
        radar = gis_to_radar(point, point)

        assert radar.range_km == 0.0
        assert radar.bearing_deg == 0.0

    def test_same_point_across_antimeridian(self):
        """Test 180E and 180W are the same place."""
        radar = gis_to_radar(GeoPoint(45, 180), GeoPoint(45, -180))

        assert np.isclose(radar.range_km, 0.0, atol=1e-6)
        assert radar.bearing_deg == 0.0

    def test_antipodal_points_are_finite(self):
        """Test antipodal points give finite bearing and maximal range."""
        radar = gis_to_radar(GeoPoint(30, 40), GeoPoint(-30, -140))

        assert np.isclose(radar.range_km, np.pi * 6371.0, atol=1e-3)
        assert np.isfinite(radar.bearing_deg)
        assert 0.0 <= radar.bearing_deg < 360.0

    def test_zero_range(self):
        """Test zero range returns the starting point."""
        end = radar_to_gis(GeoPoint(37, -75), RadarVector(0.0, 123.0))

        assert np.isclose(end.lat, 37.0)
        assert np.isclose(end.lon, -75.0)

    def test_haversine_clamped(self):
        """Test haversine of exactly opposite points does not produce NaN."""
        d = haversine_distance(np.pi / 2, 0.0, -np.pi / 2, 0.0)
        assert np.isclose(d, np.pi * 6371.0)


class TestLongitudeNormalization:
    """Test longitude wrapping into (-180, 180]."""

    @pytest.mark.parametrize(
        "lon, expected",
        [
            (0.0, 0.0),
            (180.0, 180.0),
            (-180.0, 180.0),
            (190.0, -170.0),
            (-190.0, 170.0),
            (540.0, 180.0),
            (359.0, -1.0),
            (-75.0, -75.0),
        ],
    )
    def test_known_values(self, lon, expected):
        """Test normalization of selected longitudes."""
        assert np.isclose(normalize_longitude(lon), expected)

    def test_array_range(self, rng):
        """Test every normalized longitude lies in (-180, 180]."""
        lon = normalize_longitude(rng.uniform(-1000, 1000, 10000))

        assert np.all(lon > -180.0)
        assert np.all(lon <= 180.0)

    def test_crossing_antimeridian(self):
        """Test travelling east across 180 wraps to the western hemisphere."""
        end = radar_to_gis(GeoPoint(0, 179), RadarVector(6371.0 * np.radians(2.0), 90.0))

        assert np.isclose(end.lat, 0.0, atol=1e-9)
        assert np.isclose(end.lon, -179.0)


class TestProperties:
    """Test round-trip and range properties over random inputs."""

    def test_range_non_negative(self, rng):
        """Test range is never negative."""
        lat1, lon1 = _random_points(rng, 2000)
        lat2, lon2 = _random_points(rng, 2000)

        radar = gis_to_radar((lat1, lon1), (lat2, lon2))

        assert np.all(radar.range_km >= 0)
        assert np.all(radar.range_km <= np.pi * 6371.0 + 1e-9)

    def test_range_symmetry(self, rng):
        """Test range from A to B equals range from B to A."""
        lat1, lon1 = _random_points(rng, 2000)
        lat2, lon2 = _random_points(rng, 2000)

        forward = gis_to_radar((lat1, lon1), (lat2, lon2))
        backward = gis_to_radar((lat2, lon2), (lat1, lon1))

        assert np.all(np.abs(forward.range_km - backward.range_km) < 1e-3)

    def test_bearing_range(self, rng):
        """Test bearing lies in [0, 360) for distinct points."""
        lat1, lon1 = _random_points(rng, 2000)
        lat2, lon2 = _random_points(rng, 2000)

        radar = gis_to_radar((lat1, lon1), (lat2, lon2))

        assert np.all(radar.bearing_deg >= 0.0)
        assert np.all(radar.bearing_deg < 360.0)

    def test_forward_inverse_round_trip(self, rng):
        """Test radar_to_gis followed by gis_to_radar recovers range and bearing."""
        n = 5000
        lat1, lon1 = _random_points(rng, n, lat_limit=89.0)
        distance = rng.uniform(1.0, 10000.0, n)
        bearing = rng.uniform(0.0, 360.0, n)

        end = radar_to_gis((lat1, lon1), (distance, bearing))
        radar = gis_to_radar((lat1, lon1), end)

        assert np.all(np.abs(radar.range_km - distance) < 0.5)
        assert np.all(_bearing_difference(radar.bearing_deg, bearing) < 0.5)

    def test_round_trip_zero_range(self, rng):
        """Test zero range round trip gives zero range."""
        lat1, lon1 = _random_points(rng, 100)

        end = radar_to_gis((lat1, lon1), (np.zeros(100), rng.uniform(0, 360, 100)))
        radar = gis_to_radar((lat1, lon1), end)

        assert np.all(radar.range_km < 0.5)

    def test_produced_longitudes_normalized(self, rng):
        """Test radar_to_gis longitudes lie in (-180, 180]."""
        n = 5000
        lat1, lon1 = _random_points(rng, n)

        end = radar_to_gis(
            (lat1, lon1), (rng.uniform(0, 20000, n), rng.uniform(0, 360, n))
        )

        assert np.all(end.lon > -180.0)
        assert np.all(end.lon <= 180.0)
        assert np.all(np.abs(end.lat) <= 90.0)


class TestUnits:
    """Test astropy Quantity inputs."""

    def test_radian_quantities(self):
        """Test points given in radians match points given in degrees."""
        start = GeoPoint(np.radians(37) * u.rad, np.radians(-75) * u.rad)
        radar = gis_to_radar(start, GeoPoint(18 * u.deg, -66 * u.deg))

        assert np.isclose(radar.range_km, 2288.66, atol=0.01)

    def test_range_in_metres(self):
        """Test a range given in metres."""
        end = radar_to_gis(GeoPoint(37, -75), (2288660 * u.m, 154.96 * u.deg))

        assert np.isclose(end.lat, 18.0, atol=0.01)
        assert np.isclose(end.lon, -66.0, atol=0.01)


class TestPrimitives:
    """Test the radian-level primitives directly."""

    def test_destination_returns_degrees(self):
        """Test destination_point returns degrees."""
        lat2, lon2 = destination_point(0.0, 0.0, 6371.0 * np.pi / 2, 0.0)

        assert np.isclose(lat2, 90.0)

    def test_bearing_scalar_output(self):
        """Test scalar inputs give a scalar bearing."""
        bearing = initial_bearing(0.0, 0.0, 0.0, 0.1)

        assert np.ndim(bearing) == 0
        assert np.isclose(bearing, 90.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
