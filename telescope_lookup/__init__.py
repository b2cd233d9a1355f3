"""
Telescope Lookup

This package resolves telescope identifiers into positions on the Earth.

Main functionality:
- Look up observatories by mnemonic or by MPC observatory code
- Derive geodetic, geocentric and parallax representations from each other
- Report default pointing limits, overridable per telescope
"""

# Version info
__version__ = '0.1.0'
__author__ = 'Telescope Lookup Team'

# Core functionality
from telescope_lookup.core import (
    LimitsSpec,
    MissingAltitudeWarning,
    MountType,
    Site,
    Telescope,
    get_telescope,
    list_names,
    resolve,
    resolve_by_code,
    resolve_by_name,
    resolve_explicit
)
from telescope_lookup.utils.coordinates import DEFAULT_SEPARATOR
from telescope_lookup.catalogs.mpc_catalog import DEFAULT_MPC_TABLE

# Simplified API for common usage
def describe(identifier, sep=DEFAULT_SEPARATOR):
    """
    Describe a telescope in display units

    Parameters:
    -----------
    identifier : str
        Observatory mnemonic or MPC code
    sep : str
        Separator for sexagesimal fields

    Returns:
    --------
    dict or None
        Name, position in degrees / sexagesimal strings and limits, or
        None if the telescope is not recognized
    """
    tel = get_telescope(identifier)
    if tel is None:
        return None

    return {
        'name': tel.name,
        'fullname': tel.fullname,
        'obscode': tel.obscode,
        'long': tel.long('s', sep=sep),
        'lat': tel.lat('s', sep=sep),
        'long_deg': tel.long('d'),
        'lat_deg': tel.lat('d'),
        'alt': tel.alt,
        'geoc_lat_deg': tel.geoc_lat('d'),
        'geoc_dist': tel.geoc_dist,
        'parallax': list(tel.parallax),
        'limits': tel.limits().as_dict()
    }

__all__ = [
    'LimitsSpec',
    'MissingAltitudeWarning',
    'MountType',
    'Site',
    'Telescope',
    'get_telescope',
    'list_names',
    'resolve',
    'resolve_by_code',
    'resolve_by_name',
    'resolve_explicit',
    'describe',
    'DEFAULT_SEPARATOR',
    'DEFAULT_MPC_TABLE',
]
