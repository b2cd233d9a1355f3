"""
geodesy.py - Conversions between terrestrial position representations

A telescope position can be described three ways:

- geodetic: latitude of the local vertical and altitude above the ellipsoid
- geocentric: latitude and distance measured from the Earth's centre
- parallax constants: rho*sin(phi') and rho*cos(phi') in Earth radii

Catalogs supply one of these natively. The functions here derive the other
two on an oblate-spheroid Earth. All functions accept floats or numpy
arrays, and return (None, None) when an input is unset.
"""

import logging
from typing import Optional, Tuple

import numpy as np

# Set up logging
logger = logging.getLogger(__name__)

# Equatorial radius of the Earth (metres)
EQUATORIAL_RADIUS = 6378100.0

# Ratio of polar to equatorial radius (1 - flattening)
E = 0.996647186

# Eccentricity of the ellipsoid, published value
EPS = 0.081819221

# Polar radius and second eccentricity squared, used by the inverse
POLAR_RADIUS = EQUATORIAL_RADIUS * E
# Taken from E rather than the rounded EPS so the inverse matches the forward ellipsoid
_EPS2 = 1.0 - E * E
_EPS2_PRIME = _EPS2 / (E * E)

Pair = Tuple[Optional[float], Optional[float]]

def _unset(*values) -> bool:
    return any(v is None for v in values)

def geodetic_to_geocentric(lat: Optional[float], alt: Optional[float]) -> Pair:
    """
    Convert geodetic latitude and altitude to geocentric latitude and distance.

    The surface point under the site is located from its reduced latitude and
    the sea-level radius there, then the altitude is added along the local
    normal.

    Args:
        lat: Geodetic latitude in radians.
        alt: Altitude above the ellipsoid in metres.

    Returns:
        Tuple of (geocentric latitude in radians, distance from the Earth's
        centre in metres), or (None, None) if an input is unset.
    """
    if _unset(lat, alt):
        logger.debug("Geodetic position unset; cannot derive geocentric position")
        return None, None

    sin_mu = np.sin(lat)
    cos_mu = np.cos(lat)

    # atan2(E^2 tan(lat), 1), written to stay finite at the poles
    lambda_sl = np.arctan2(E * E * sin_mu, cos_mu)
    sin_lambda_sl = np.sin(lambda_sl)
    cos_lambda_sl = np.cos(lambda_sl)

    sl_radius = np.sqrt(
        EQUATORIAL_RADIUS * EQUATORIAL_RADIUS /
        (1.0 + (1.0 / (E * E) - 1.0) * sin_lambda_sl * sin_lambda_sl)
    )

    py = sl_radius * sin_lambda_sl + alt * sin_mu
    px = sl_radius * cos_lambda_sl + alt * cos_mu

    return np.arctan2(py, px), np.hypot(px, py)

def geocentric_to_geodetic(geoc_lat: Optional[float], geoc_dist: Optional[float]) -> Pair:
    """
    Convert geocentric latitude and distance to geodetic latitude and altitude.

    Closed form with no iteration (Bowring). The auxiliary angle is
    evaluated for the northern hemisphere and the latitude mirrored for
    southern sites.

    Args:
        geoc_lat: Geocentric latitude in radians.
        geoc_dist: Distance from the Earth's centre in metres.

    Returns:
        Tuple of (geodetic latitude in radians, altitude in metres), or
        (None, None) if an input is unset or the distance is zero.
    """
    if _unset(geoc_lat, geoc_dist):
        logger.debug("Geocentric position unset; cannot derive geodetic position")
        return None, None

    # The Earth's centre has no defined latitude
    if np.ndim(geoc_dist) == 0 and geoc_dist == 0:
        logger.debug("Geocentric distance is zero; cannot derive geodetic position")
        return None, None

    abs_lat = np.abs(geoc_lat)

    # Distance from the rotation axis and height above the equatorial plane
    p = geoc_dist * np.cos(abs_lat)
    z = geoc_dist * np.sin(abs_lat)

    theta = np.arctan2(z * EQUATORIAL_RADIUS, p * POLAR_RADIUS)
    sin_theta = np.sin(theta)
    cos_theta = np.cos(theta)

    mu = np.arctan2(
        z + _EPS2_PRIME * POLAR_RADIUS * sin_theta ** 3,
        p - _EPS2 * EQUATORIAL_RADIUS * cos_theta ** 3
    )
    sin_mu = np.sin(mu)

    alt = (p * np.cos(mu) + z * sin_mu -
           EQUATORIAL_RADIUS * np.sqrt(1.0 - _EPS2 * sin_mu * sin_mu))

    # Mirror back into the southern hemisphere
    return np.copysign(mu, geoc_lat), alt

def geocentric_to_parallax(geoc_lat: Optional[float], geoc_dist: Optional[float]) -> Pair:
    """
    Convert geocentric latitude and distance to parallax constants.

    Args:
        geoc_lat: Geocentric latitude in radians.
        geoc_dist: Distance from the Earth's centre in metres.

    Returns:
        Tuple of (rho*sin(phi'), rho*cos(phi')) in Earth radii, or
        (None, None) if an input is unset.
    """
    if _unset(geoc_lat, geoc_dist):
        logger.debug("Geocentric position unset; cannot derive parallax constants")
        return None, None

    rho = geoc_dist / EQUATORIAL_RADIUS
    return rho * np.sin(geoc_lat), rho * np.cos(geoc_lat)

def parallax_to_geocentric(par_c: Optional[float], par_s: Optional[float]) -> Pair:
    """
    Convert parallax constants to geocentric latitude and distance.

    Args:
        par_c: rho*sin(phi') in Earth radii.
        par_s: rho*cos(phi') in Earth radii.

    Returns:
        Tuple of (geocentric latitude in radians, distance in metres), or
        (None, None) if an input is unset.
    """
    if _unset(par_c, par_s):
        logger.debug("Parallax constants unset; cannot derive geocentric position")
        return None, None

    return np.arctan2(par_c, par_s), np.hypot(par_s, par_c) * EQUATORIAL_RADIUS
