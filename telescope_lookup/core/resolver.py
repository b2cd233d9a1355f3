"""
resolver.py - Resolve telescope identifiers into sites

This module turns an identifier into a fully populated Site. Identifiers are
tried against the observatory catalog first (mnemonics such as "JCMT") and
then against the MPC code table (codes such as "568"). A site can also be
built from explicitly supplied coordinates.

Unknown identifiers and incomplete field sets are not errors: the resolver
returns None and the caller decides what to do next.
"""

import logging
import warnings
from typing import List, Optional, Sequence

from telescope_lookup.catalogs.mpc_catalog import MPCCatalog, get_mpc_catalog
from telescope_lookup.catalogs.observatory_catalog import ObservatoryCatalog, default_catalog
from telescope_lookup.core.site import Site, SiteSource

# Set up logging
logger = logging.getLogger(__name__)

class MissingAltitudeWarning(UserWarning):
    """Geodetic latitude was supplied without an altitude; zero was assumed."""

def resolve_by_name(name: str, catalog: Optional[ObservatoryCatalog] = None) -> Optional[Site]:
    """
    Resolve an observatory catalog mnemonic.

    Args:
        name: Mnemonic, case-insensitive.
        catalog: Catalog to search. If None, uses the packaged catalog.

    Returns:
        Site with a native geodetic position, or None if the mnemonic is unknown.
    """
    if catalog is None:
        catalog = default_catalog
    entry = catalog.find(name)
    if entry is None:
        return None

    # Catalog longitudes are west positive
    return Site.from_geodetic(
        mnemonic=entry.mnemonic,
        full_name=entry.full_name,
        longitude=-entry.west_longitude,
        latitude=entry.latitude,
        altitude=entry.height,
        obscode=catalog.obscode(entry.mnemonic),
        source=SiteSource.PRIMARY
    )

def resolve_by_code(code: str, catalog: Optional[MPCCatalog] = None) -> Optional[Site]:
    """
    Resolve an MPC observatory code.

    Args:
        code: Three character observatory code.
        catalog: MPC catalog to search. If None, uses the shared catalog.

    Returns:
        Site with native parallax constants, or None if the code is unknown.
    """
    if catalog is None:
        catalog = get_mpc_catalog()
    entry = catalog.lookup(code)
    if entry is None:
        return None

    return Site.from_parallax(
        mnemonic=entry.name,
        full_name=entry.name,
        longitude=entry.longitude,
        par_c=entry.par_c,
        par_s=entry.par_s,
        obscode=entry.code,
        source=SiteSource.MPC
    )

def resolve(identifier: str,
            catalog: Optional[ObservatoryCatalog] = None,
            mpc_catalog: Optional[MPCCatalog] = None) -> Optional[Site]:
    """
    Resolve a mnemonic or an MPC code.

    Args:
        identifier: Observatory mnemonic or MPC code, case-insensitive.
        catalog: Observatory catalog. If None, uses the packaged catalog.
        mpc_catalog: MPC catalog. If None, uses the shared catalog.

    Returns:
        Resolved Site, or None if neither catalog knows the identifier.
    """
    name = identifier.strip().upper()

    site = resolve_by_name(name, catalog)
    if site is None:
        site = resolve_by_code(name, mpc_catalog)

    if site is None:
        logger.debug(f"Identifier {identifier!r} not found in any catalog")
    return site

def resolve_explicit(name: Optional[str] = None,
                     long: Optional[float] = None,
                     fullname: Optional[str] = None,
                     lat: Optional[float] = None,
                     alt: Optional[float] = None,
                     geoc_lat: Optional[float] = None,
                     geoc_dist: Optional[float] = None,
                     parallax: Optional[Sequence[float]] = None,
                     obscode: Optional[str] = None) -> Optional[Site]:
    """
    Build a site from explicitly supplied fields.

    A name and a longitude are required, plus one position: geodetic
    (lat, alt), geocentric (geoc_lat, geoc_dist) or parallax (C, S). When
    more than one is given the first in that order is used and the others
    are derived from it.

    Args:
        name: Short name of the telescope.
        long: East longitude in radians.
        fullname: Descriptive name. Defaults to name.
        lat: Geodetic latitude in radians.
        alt: Altitude in metres. Zero (with a warning) if lat is given without it.
        geoc_lat: Geocentric latitude in radians.
        geoc_dist: Distance from the Earth's centre in metres.
        parallax: Pair of (rho*sin(phi'), rho*cos(phi')) in Earth radii.
        obscode: MPC observatory code.

    Returns:
        Site, or None if required fields are missing.
    """
    missing = [key for key, value in (('name', name), ('long', long)) if value is None]
    if missing:
        logger.warning(f"Cannot build telescope: missing {', '.join(missing)}")
        return None

    mnemonic = name.upper()
    common = dict(
        mnemonic=mnemonic,
        full_name=fullname if fullname is not None else name,
        longitude=long,
        obscode=obscode,
        source=SiteSource.EXPLICIT
    )

    if lat is not None:
        if alt is None:
            warnings.warn(f"No altitude supplied for {mnemonic}; assuming 0 m",
                          MissingAltitudeWarning, stacklevel=2)
            alt = 0.0
        return Site.from_geodetic(latitude=lat, altitude=alt, **common)

    if geoc_lat is not None and geoc_dist is not None:
        site = Site.from_geocentric(geoc_lat=geoc_lat, geoc_dist=geoc_dist, **common)
    elif parallax is not None:
        par_c, par_s = parallax
        site = Site.from_parallax(par_c=par_c, par_s=par_s, **common)
    else:
        logger.warning(f"Cannot build telescope {mnemonic}: need lat, geoc_lat/geoc_dist or parallax")
        return None

    if site.latitude is None:
        logger.warning(f"Cannot build telescope {mnemonic}: position is at the Earth's centre")
        return None
    return site

def list_names(catalog: Optional[ObservatoryCatalog] = None) -> List[str]:
    """
    List every observatory catalog mnemonic.

    Args:
        catalog: Catalog to list. If None, uses the packaged catalog.

    Returns:
        Mnemonics in ascending order.
    """
    if catalog is None:
        catalog = default_catalog
    return catalog.names()
