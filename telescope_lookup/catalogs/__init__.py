"""
Observatory Catalogs

This package contains the two sources telescope positions are resolved
from. Each one stores positions in its own native representation.

Available catalogs:
- observatory: well-known observatories by mnemonic (geodetic positions)
- mpc: Minor Planet Center observatory codes (parallax constants)
"""

from telescope_lookup.catalogs.observatory_catalog import (
    SENTINEL,
    ObservatoryCatalog,
    ObservatoryEntry,
    default_catalog
)
from telescope_lookup.catalogs.mpc_catalog import (
    DEFAULT_MPC_TABLE,
    MPCCatalog,
    MPCEntry,
    get_mpc_catalog,
    configure_mpc_catalog
)

# Factory function to get a catalog by name
def get_catalog(catalog_name):
    """
    Get a catalog by name

    Parameters:
    -----------
    catalog_name : str
        Name of the catalog ('observatory', 'mpc')

    Returns:
    --------
    ObservatoryCatalog or MPCCatalog
        The shared instance of the requested catalog

    Raises:
    -------
    ValueError
        If catalog_name is not recognized
    """
    catalog_map = {
        'observatory': lambda: default_catalog,
        'mpc': get_mpc_catalog
    }

    if catalog_name.lower() not in catalog_map:
        raise ValueError(f"Unknown catalog: {catalog_name}. Available catalogs: {', '.join(catalog_map.keys())}")

    return catalog_map[catalog_name.lower()]()


__all__ = [
    'SENTINEL',
    'ObservatoryCatalog',
    'ObservatoryEntry',
    'default_catalog',
    'DEFAULT_MPC_TABLE',
    'MPCCatalog',
    'MPCEntry',
    'get_mpc_catalog',
    'configure_mpc_catalog',
    'get_catalog'
]
