"""
Utils package for telescope lookup

This package contains utility modules for angle conversion and lazily
populated lookup tables.
"""

from telescope_lookup.utils.coordinates import (
    DEFAULT_SEPARATOR,
    radians_to_degrees,
    radians_to_sexagesimal,
    sexagesimal_to_radians,
    degrees_to_radians,
    hours_to_radians,
    format_angle
)

from telescope_lookup.utils.cache import LazyTable
