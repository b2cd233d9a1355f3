"""
Core Telescope Lookup Functionality

This module contains the position model and the resolution logic.

Main components:
- geodesy: geodetic / geocentric / parallax conversions
- Site: immutable resolved position
- resolver: identifier and explicit-field resolution
- Telescope: mutable handle with pointing limits
"""

from telescope_lookup.core.geodesy import (
    EQUATORIAL_RADIUS,
    E,
    EPS,
    geodetic_to_geocentric,
    geocentric_to_geodetic,
    geocentric_to_parallax,
    parallax_to_geocentric
)
from telescope_lookup.core.limits import (
    AxisLimits,
    LimitsSpec,
    MountType,
    TELESCOPE_LIMITS,
    HORIZON_LIMITS,
    lookup_limits,
    default_limits
)
from telescope_lookup.core.site import Site, SiteSource
from telescope_lookup.core.resolver import (
    MissingAltitudeWarning,
    resolve,
    resolve_by_name,
    resolve_by_code,
    resolve_explicit,
    list_names
)
from telescope_lookup.core.telescope import Telescope, get_telescope

__all__ = [
    'EQUATORIAL_RADIUS',
    'E',
    'EPS',
    'geodetic_to_geocentric',
    'geocentric_to_geodetic',
    'geocentric_to_parallax',
    'parallax_to_geocentric',
    'AxisLimits',
    'LimitsSpec',
    'MountType',
    'TELESCOPE_LIMITS',
    'HORIZON_LIMITS',
    'lookup_limits',
    'default_limits',
    'Site',
    'SiteSource',
    'MissingAltitudeWarning',
    'resolve',
    'resolve_by_name',
    'resolve_by_code',
    'resolve_explicit',
    'list_names',
    'Telescope',
    'get_telescope'
]
