"""
telescope.py - Telescope objects

A Telescope wraps a resolved Site together with the pointing limits that
currently apply to it. The site can be swapped for another telescope in
place, and the limits can be overridden until the next such swap.

Example:
    tel = get_telescope('UKIRT')
    tel.lat()       # geodetic latitude, radians
    tel.long('s')   # east longitude, sexagesimal string
    tel.alt         # metres
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from telescope_lookup.core.limits import LimitsSpec, default_limits
from telescope_lookup.core.resolver import (
    list_names,
    resolve,
    resolve_by_code,
    resolve_explicit
)
from telescope_lookup.core.site import Site
from telescope_lookup.utils.coordinates import DEFAULT_SEPARATOR, format_angle

# Set up logging
logger = logging.getLogger(__name__)

class Telescope:
    """
    Position and pointing limits of a single telescope.

    Angles are stored in radians (longitude east positive) and lengths in
    metres. Angle accessors take an optional format: "d" for decimal degrees
    or "s" for a sexagesimal string.
    """

    # Separator used for sexagesimal output
    separator = DEFAULT_SEPARATOR

    def __init__(self, site: Site, limits: Optional[LimitsSpec] = None):
        """
        Initialize the telescope.

        Args:
            site: Resolved site.
            limits: Pointing limits. If None, uses the default for the site.
        """
        self._site = site
        self._limits = limits if limits is not None else default_limits(site.mnemonic)

    # -- identity ---------------------------------------------------------

    @property
    def site(self) -> Site:
        return self._site

    @property
    def name(self) -> str:
        """Short name of the telescope (upper case for catalog mnemonics)."""
        return self._site.mnemonic

    @property
    def fullname(self) -> str:
        return self._site.full_name

    @property
    def obscode(self) -> Optional[str]:
        """MPC observatory code, if known."""
        return self._site.obscode

    def set_name(self, name: str) -> bool:
        """
        Reconfigure this object for another telescope.

        The name is resolved like a constructor argument, mnemonic first and
        MPC code second. Limits are reset to the new telescope's defaults.

        Args:
            name: Mnemonic or MPC code.

        Returns:
            True on success. On failure the object is left unchanged.
        """
        return self._replace_site(resolve(name), name)

    def set_obscode(self, code: str) -> bool:
        """
        Reconfigure this object for the observatory with the given MPC code.

        Args:
            code: Three character MPC observatory code.

        Returns:
            True on success. On failure the object is left unchanged.
        """
        return self._replace_site(resolve_by_code(code), code)

    def reresolve(self, identifier: str) -> Optional["Telescope"]:
        """
        Resolve another telescope without modifying this one.

        Args:
            identifier: Mnemonic or MPC code.

        Returns:
            New Telescope with default limits, or None if not found.
        """
        return get_telescope(identifier)

    def _replace_site(self, site: Optional[Site], identifier: str) -> bool:
        if site is None:
            logger.info(f"Telescope {identifier!r} not recognized; keeping {self.name}")
            return False

        self._site = site
        self._limits = default_limits(site.mnemonic)
        logger.debug(f"Telescope reconfigured to {site.mnemonic}")
        return True

    # -- position ---------------------------------------------------------

    def _angle(self, rad, fmt, sep):
        return format_angle(rad, fmt, sep=self.separator if sep is None else sep)

    def long(self, fmt: Optional[str] = None, sep: Optional[str] = None) -> Union[float, str]:
        """
        Longitude of the telescope, east positive.

        Args:
            fmt: None for radians, "d" for degrees, "s" for sexagesimal.
            sep: Sexagesimal separator. Defaults to Telescope.separator.
        """
        return self._angle(self._site.longitude, fmt, sep)

    def lat(self, fmt: Optional[str] = None, sep: Optional[str] = None) -> Union[float, str, None]:
        """
        Geodetic latitude of the telescope.

        Args:
            fmt: None for radians, "d" for degrees, "s" for sexagesimal.
            sep: Sexagesimal separator. Defaults to Telescope.separator.
        """
        return self._angle(self._site.latitude, fmt, sep)

    def geoc_lat(self, fmt: Optional[str] = None, sep: Optional[str] = None) -> Union[float, str, None]:
        """
        Geocentric latitude of the telescope.

        Args:
            fmt: None for radians, "d" for degrees, "s" for sexagesimal.
            sep: Sexagesimal separator. Defaults to Telescope.separator.
        """
        return self._angle(self._site.geoc_lat, fmt, sep)

    @property
    def alt(self) -> Optional[float]:
        """Altitude above the ellipsoid in metres."""
        return self._site.altitude

    @property
    def geoc_dist(self) -> Optional[float]:
        """Distance from the centre of the Earth in metres."""
        return self._site.geoc_dist

    @property
    def parallax(self) -> Tuple[Optional[float], Optional[float]]:
        """Parallax constants (rho*sin(phi'), rho*cos(phi')) in Earth radii."""
        return self._site.par_c, self._site.par_s

    # -- limits -----------------------------------------------------------

    def limits(self) -> LimitsSpec:
        """Pointing limits currently in force."""
        return self._limits

    def set_limits(self, limits: Union[LimitsSpec, Dict[str, Any]]) -> None:
        """
        Override the pointing limits until the telescope is next reconfigured.

        Args:
            limits: LimitsSpec or its mapping form.
        """
        if not isinstance(limits, LimitsSpec):
            limits = LimitsSpec.from_dict(limits)
        self._limits = limits

    # -- misc -------------------------------------------------------------

    @staticmethod
    def tel_names() -> List[str]:
        """Sorted list of the supported observatory mnemonics."""
        return list_names()

    def as_dict(self) -> Dict[str, Any]:
        result = self._site.as_dict()
        result['limits'] = self._limits.as_dict()
        return result

    def __str__(self) -> str:
        return (f"{self.name} ({self.fullname}): "
                f"long {self.long('s')}, lat {self.lat('s')}, alt {self.alt:.1f} m")

    def __repr__(self) -> str:
        return f"Telescope({self.name!r})"

def get_telescope(identifier: Optional[str] = None, **fields) -> Optional[Telescope]:
    """
    Create a telescope object.

    Args:
        identifier: Observatory mnemonic or MPC code.
        **fields: Explicit coordinates, as accepted by resolve_explicit(),
                  used when no identifier is given.

    Returns:
        Telescope, or None if the telescope could not be resolved.
    """
    if identifier is not None:
        if fields:
            raise ValueError("Give either an identifier or explicit fields, not both")
        site = resolve(identifier)
    elif fields:
        site = resolve_explicit(**fields)
    else:
        return None

    if site is None:
        logger.info(f"Telescope {identifier or fields.get('name')!r} not recognized")
        return None

    return Telescope(site)
