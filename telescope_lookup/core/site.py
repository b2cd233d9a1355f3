"""
site.py - Resolved telescope positions

A Site is the immutable result of resolving a telescope. Whatever catalog it
came from, a Site carries all three position representations: the native
one taken from the source, and the two derived from it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from telescope_lookup.core.geodesy import (
    geocentric_to_geodetic,
    geocentric_to_parallax,
    geodetic_to_geocentric,
    parallax_to_geocentric
)

class SiteSource(Enum):
    """Where a site's native position came from."""
    PRIMARY = "primary"    # observatory catalog, geodetic
    MPC = "mpc"            # MPC code table, parallax constants
    EXPLICIT = "explicit"  # caller supplied fields

def _as_float(value) -> Optional[float]:
    return None if value is None else float(value)

@dataclass(frozen=True)
class Site:
    """Fully populated telescope position. Angles in radians, lengths in metres."""
    mnemonic: str
    full_name: str
    longitude: float
    latitude: Optional[float]
    altitude: Optional[float]
    geoc_lat: Optional[float]
    geoc_dist: Optional[float]
    par_c: Optional[float]
    par_s: Optional[float]
    obscode: Optional[str] = None
    source: SiteSource = SiteSource.EXPLICIT

    @classmethod
    def _build(cls, mnemonic, full_name, longitude, lat, alt, geoc_lat, geoc_dist,
               par_c, par_s, obscode, source) -> "Site":
        return cls(
            mnemonic=mnemonic,
            full_name=full_name,
            longitude=float(longitude),
            latitude=_as_float(lat),
            altitude=_as_float(alt),
            geoc_lat=_as_float(geoc_lat),
            geoc_dist=_as_float(geoc_dist),
            par_c=_as_float(par_c),
            par_s=_as_float(par_s),
            obscode=obscode,
            source=source
        )

    @classmethod
    def from_geodetic(cls, mnemonic: str, full_name: str, longitude: float,
                      latitude: float, altitude: float, obscode: Optional[str] = None,
                      source: SiteSource = SiteSource.EXPLICIT) -> "Site":
        """Site with a native geodetic position."""
        geoc_lat, geoc_dist = geodetic_to_geocentric(latitude, altitude)
        par_c, par_s = geocentric_to_parallax(geoc_lat, geoc_dist)
        return cls._build(mnemonic, full_name, longitude, latitude, altitude,
                          geoc_lat, geoc_dist, par_c, par_s, obscode, source)

    @classmethod
    def from_geocentric(cls, mnemonic: str, full_name: str, longitude: float,
                        geoc_lat: float, geoc_dist: float, obscode: Optional[str] = None,
                        source: SiteSource = SiteSource.EXPLICIT) -> "Site":
        """Site with a native geocentric position."""
        lat, alt = geocentric_to_geodetic(geoc_lat, geoc_dist)
        par_c, par_s = geocentric_to_parallax(geoc_lat, geoc_dist)
        return cls._build(mnemonic, full_name, longitude, lat, alt,
                          geoc_lat, geoc_dist, par_c, par_s, obscode, source)

    @classmethod
    def from_parallax(cls, mnemonic: str, full_name: str, longitude: float,
                      par_c: float, par_s: float, obscode: Optional[str] = None,
                      source: SiteSource = SiteSource.EXPLICIT) -> "Site":
        """Site with native parallax constants."""
        geoc_lat, geoc_dist = parallax_to_geocentric(par_c, par_s)
        lat, alt = geocentric_to_geodetic(geoc_lat, geoc_dist)
        return cls._build(mnemonic, full_name, longitude, lat, alt,
                          geoc_lat, geoc_dist, par_c, par_s, obscode, source)

    def as_dict(self) -> Dict[str, Any]:
        return {
            'name': self.mnemonic,
            'fullname': self.full_name,
            'obscode': self.obscode,
            'long': self.longitude,
            'lat': self.latitude,
            'alt': self.altitude,
            'geoc_lat': self.geoc_lat,
            'geoc_dist': self.geoc_dist,
            'parallax': [self.par_c, self.par_s],
            'source': self.source.value
        }
