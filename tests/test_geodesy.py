"""Tests for the geodetic / geocentric / parallax conversions."""

import numpy as np
import pytest

from telescope_lookup.core.geodesy import (
    EPS,
    EQUATORIAL_RADIUS,
    E,
    POLAR_RADIUS,
    geocentric_to_geodetic,
    geocentric_to_parallax,
    geodetic_to_geocentric,
    parallax_to_geocentric,
)


class TestEllipsoid:
    """Test the Earth model constants."""

    def test_eccentricity(self):
        """Eccentricity is the published value and agrees with the axis ratio."""
        assert EPS == 0.081819221
        assert np.sqrt(1.0 - E * E) == pytest.approx(EPS, abs=1e-7)

    def test_polar_radius(self):
        assert POLAR_RADIUS == pytest.approx(EQUATORIAL_RADIUS * E)


class TestGeodeticToGeocentric:
    """Test the forward geodetic conversion."""

    def test_equator_at_sea_level(self):
        geoc_lat, geoc_dist = geodetic_to_geocentric(0.0, 0.0)
        assert geoc_lat == pytest.approx(0.0, abs=1e-15)
        assert geoc_dist == pytest.approx(EQUATORIAL_RADIUS)

    def test_pole_at_sea_level(self):
        """At the pole the site sits at the polar radius."""
        geoc_lat, geoc_dist = geodetic_to_geocentric(np.pi / 2, 0.0)
        assert geoc_lat == pytest.approx(np.pi / 2, abs=1e-12)
        assert geoc_dist == pytest.approx(POLAR_RADIUS, abs=1e-6)

    def test_altitude_adds_to_distance(self):
        _, low = geodetic_to_geocentric(0.0, 0.0)
        _, high = geodetic_to_geocentric(0.0, 1000.0)
        assert high - low == pytest.approx(1000.0)

    def test_geocentric_latitude_closer_to_equator(self):
        """Geocentric latitude is smaller in magnitude in both hemispheres."""
        for lat in (0.3, 0.8, -0.3, -0.8):
            geoc_lat, _ = geodetic_to_geocentric(lat, 0.0)
            assert abs(geoc_lat) < abs(lat)
            assert np.sign(geoc_lat) == np.sign(lat)

    def test_unset_input(self):
        assert geodetic_to_geocentric(None, 100.0) == (None, None)
        assert geodetic_to_geocentric(0.5, None) == (None, None)


class TestGeocentricToGeodetic:
    """Test the inverse geodetic conversion."""

    def test_round_trip(self):
        """Geodetic -> geocentric -> geodetic reproduces the input."""
        lat = np.radians(np.linspace(-89.9, 89.9, 721))
        alt = np.array([-400.0, 0.0, 100.0, 4111.0, 8000.0])
        lat_grid, alt_grid = np.meshgrid(lat, alt)

        geoc_lat, geoc_dist = geodetic_to_geocentric(lat_grid, alt_grid)
        lat_back, alt_back = geocentric_to_geodetic(geoc_lat, geoc_dist)

        np.testing.assert_allclose(lat_back, lat_grid, rtol=0, atol=1e-9)
        np.testing.assert_allclose(alt_back, alt_grid, rtol=0, atol=1e-6)

    def test_scalar_round_trip(self):
        lat, alt = 0.3459664, 4198.5
        lat_back, alt_back = geocentric_to_geodetic(*geodetic_to_geocentric(lat, alt))
        assert lat_back == pytest.approx(lat, abs=1e-9)
        assert alt_back == pytest.approx(alt, abs=1e-6)

    def test_southern_mirror(self):
        """Southern latitudes mirror the northern solution."""
        north_lat, north_alt = geocentric_to_geodetic(0.6, EQUATORIAL_RADIUS)
        south_lat, south_alt = geocentric_to_geodetic(-0.6, EQUATORIAL_RADIUS)
        assert south_lat == pytest.approx(-north_lat, abs=1e-15)
        assert south_alt == pytest.approx(north_alt, abs=1e-9)

    def test_pole(self):
        lat, alt = geocentric_to_geodetic(np.pi / 2, POLAR_RADIUS + 250.0)
        assert lat == pytest.approx(np.pi / 2, abs=1e-12)
        assert alt == pytest.approx(250.0, abs=1e-6)

    def test_unset_input(self):
        assert geocentric_to_geodetic(None, EQUATORIAL_RADIUS) == (None, None)
        assert geocentric_to_geodetic(0.1, None) == (None, None)

    def test_centre_of_earth(self):
        """A zero distance has no geodetic latitude."""
        assert geocentric_to_geodetic(0.0, 0.0) == (None, None)
        assert geocentric_to_geodetic(*parallax_to_geocentric(0.0, 0.0)) == (None, None)


class TestParallax:
    """Test the parallax constant conversions."""

    def test_equator(self):
        par_c, par_s = geocentric_to_parallax(0.0, EQUATORIAL_RADIUS)
        assert par_c == pytest.approx(0.0, abs=1e-15)
        assert par_s == pytest.approx(1.0)

    def test_round_trip(self):
        """Geocentric -> parallax -> geocentric reproduces the input."""
        geoc_lat = np.radians(np.linspace(-89.5, 89.5, 359))
        geoc_dist = np.array([0.997, 1.0, 1.0007]) * EQUATORIAL_RADIUS
        lat_grid, dist_grid = np.meshgrid(geoc_lat, geoc_dist)

        par_c, par_s = geocentric_to_parallax(lat_grid, dist_grid)
        lat_back, dist_back = parallax_to_geocentric(par_c, par_s)

        np.testing.assert_allclose(lat_back, lat_grid, rtol=0, atol=1e-9)
        np.testing.assert_allclose(dist_back, dist_grid, rtol=0, atol=1e-3)

    def test_rho_in_earth_radii(self):
        par_c, par_s = geocentric_to_parallax(0.7, 2 * EQUATORIAL_RADIUS)
        assert np.hypot(par_c, par_s) == pytest.approx(2.0)

    def test_unset_input(self):
        assert geocentric_to_parallax(None, EQUATORIAL_RADIUS) == (None, None)
        assert parallax_to_geocentric(0.3, None) == (None, None)
        assert parallax_to_geocentric(None, None) == (None, None)
