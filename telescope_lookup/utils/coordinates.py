"""
coordinates.py - Angle conversion utilities for telescope lookup

This module provides the conversions between the radian values stored on a
telescope site and the representations handed to callers: decimal degrees
and sexagesimal strings. Parsing of sexagesimal catalog entries and of the
hour-angle limits lives here too.
"""

from typing import Optional, Union

import astropy.units as u
from astropy.coordinates import Angle

# Separator between sexagesimal fields
DEFAULT_SEPARATOR = " "

# Fractional-second digits in sexagesimal output
SEXAGESIMAL_PRECISION = 2

def radians_to_degrees(rad: float) -> float:
    """
    Convert an angle in radians to decimal degrees.

    Args:
        rad: Angle in radians.

    Returns:
        Angle in decimal degrees.
    """
    return (rad * u.rad).to_value(u.deg)

def radians_to_sexagesimal(rad: float, sep: str = DEFAULT_SEPARATOR,
                           precision: int = SEXAGESIMAL_PRECISION) -> str:
    """
    Convert an angle in radians to a sexagesimal degrees string.

    The sign is only written for negative angles, e.g. "19 49 22.11" and
    "-155 28 37.20".

    Args:
        rad: Angle in radians.
        sep: Separator placed between degrees, minutes and seconds.
        precision: Number of decimal places on the seconds field.

    Returns:
        Sexagesimal string.
    """
    # astropy treats some sep values ("dms", "fromunit") as style keywords, so
    # format with a fixed separator and substitute the caller's afterwards
    text = Angle(rad, unit=u.rad).to_string(unit=u.deg, sep=":", precision=precision)
    return str(text).replace(":", sep)

def sexagesimal_to_radians(text: str) -> float:
    """
    Parse a sexagesimal degrees string ("-155 28 37.20") into radians.

    Args:
        text: Degrees, minutes and seconds separated by whitespace.

    Returns:
        Angle in radians.
    """
    return Angle(text, unit=u.deg).radian

def degrees_to_radians(deg: float) -> float:
    """Convert decimal degrees to radians."""
    return (deg * u.deg).to_value(u.rad)

def hours_to_radians(hours: float) -> float:
    """Convert an hour angle in hours to radians."""
    return (hours * u.hourangle).to_value(u.rad)

def format_angle(rad: Optional[float], fmt: Optional[str] = None,
                 sep: str = DEFAULT_SEPARATOR) -> Union[float, str, None]:
    """
    Convert an angle in radians to the representation requested by fmt.

    Args:
        rad: Angle in radians. None is passed straight through.
        fmt: None for radians, a string starting with "d" for decimal
             degrees or with "s" for a sexagesimal string.
        sep: Separator used for sexagesimal output.

    Returns:
        Angle in the requested representation.

    Raises:
        ValueError: If fmt is not recognized.
    """
    if rad is None or fmt is None:
        return rad

    if fmt.startswith("d"):
        return radians_to_degrees(rad)
    if fmt.startswith("s"):
        return radians_to_sexagesimal(rad, sep=sep)

    raise ValueError(f"Unknown angle format: {fmt!r}. Use 'd' (degrees) or 's' (sexagesimal)")
