"""
mpc_catalog.py - Minor Planet Center observatory code table

This module parses the MPC's fixed-width list of observatory codes and keeps
the result in memory for the life of the process.

Each line of the table holds:

    columns  0-2   observatory code
    columns  3-12  east longitude in decimal degrees
    columns 13-20  rho*cos(phi') in Earth radii
    columns 21-29  rho*sin(phi') in Earth radii
    columns 30-    observatory name

Lines whose longitude field has no digits (space telescopes, roving
observers, the header) carry no terrestrial position and are skipped.

References:
- https://minorplanetcenter.net/iau/lists/ObsCodesF.html
"""

import logging
import os
import re
import threading
from typing import Dict, Iterable, List, NamedTuple, Optional

from telescope_lookup.utils.cache import LazyTable
from telescope_lookup.utils.coordinates import degrees_to_radians

# Set up logging
logger = logging.getLogger(__name__)

# Packaged excerpt of the MPC table
DEFAULT_MPC_TABLE = os.path.join(os.path.dirname(__file__), "data", "mpc_obscodes.dat")

_DIGIT = re.compile(r"\d")

class MPCEntry(NamedTuple):
    """A terrestrial observatory from the MPC table."""
    code: str
    name: str
    longitude: float  # radians, east positive
    par_c: float      # rho*sin(phi')
    par_s: float      # rho*cos(phi')

def parse_line(line: str) -> Optional[MPCEntry]:
    """
    Parse one line of the MPC observatory table.

    Args:
        line: Raw table line.

    Returns:
        MPCEntry, or None if the line has no terrestrial position.
    """
    line = line.rstrip("\r\n")
    code = line[0:3].strip()
    long_field = line[3:13]

    if not code or not _DIGIT.search(long_field):
        return None

    try:
        longitude = degrees_to_radians(float(long_field))
        par_s = float(line[13:21])
        par_c = float(line[21:30])
    except ValueError:
        logger.warning(f"Skipping malformed MPC table line: {line!r}")
        return None

    return MPCEntry(
        code=code,
        name=line[30:].strip(),
        longitude=longitude,
        par_c=par_c,
        par_s=par_s
    )

def parse_lines(lines: Iterable[str]) -> Dict[str, MPCEntry]:
    """
    Parse an MPC observatory table.

    Args:
        lines: Table lines.

    Returns:
        Dictionary mapping observatory code to MPCEntry.
    """
    table = {}
    for line in lines:
        entry = parse_line(line)
        if entry is not None:
            table[entry.code] = entry
    return table

class MPCCatalog:
    """
    Lookup of observatories by MPC code.

    The table file is read on first use only; every later lookup reuses the
    parsed mapping.
    """

    def __init__(self, data_file: Optional[str] = None):
        """
        Initialize the catalog.

        Args:
            data_file: Path to an MPC observatory table. If None, uses the
                       packaged table.
        """
        self.data_file = data_file or DEFAULT_MPC_TABLE
        self.table = LazyTable(self._load, name=f"MPC table {self.data_file}")

    def _load(self) -> Dict[str, MPCEntry]:
        logger.debug(f"Parsing MPC observatory table {self.data_file}")
        with open(self.data_file, 'r', encoding='utf-8') as f:
            return parse_lines(f)

    def parse_table(self) -> Dict[str, MPCEntry]:
        """
        Parse the table if that has not happened yet.

        Returns:
            The parsed mapping. Repeated calls return the same object.
        """
        return self.table.load()

    def lookup(self, code: str) -> Optional[MPCEntry]:
        """
        Look up an observatory by code.

        Args:
            code: Three character MPC observatory code.

        Returns:
            MPCEntry, or None if the code is unknown or not terrestrial.
        """
        return self.table.get(code.strip().upper())

    def codes(self) -> List[str]:
        """Sorted list of the known terrestrial observatory codes."""
        return sorted(self.table.keys())

    def __contains__(self, code: str) -> bool:
        return self.lookup(code) is not None

    def __len__(self) -> int:
        return len(self.parse_table())

# Process-wide catalog, created on first use
_shared_catalog: Optional[MPCCatalog] = None
_shared_lock = threading.Lock()

def get_mpc_catalog() -> MPCCatalog:
    """
    Get the process-wide MPC catalog.

    Returns:
        The shared MPCCatalog instance.
    """
    global _shared_catalog
    if _shared_catalog is None:
        with _shared_lock:
            if _shared_catalog is None:
                _shared_catalog = MPCCatalog()
    return _shared_catalog

def configure_mpc_catalog(data_file: Optional[str] = None) -> MPCCatalog:
    """
    Replace the process-wide MPC catalog.

    Args:
        data_file: Table to read. If None, uses the packaged table.

    Returns:
        The new shared MPCCatalog instance.
    """
    global _shared_catalog
    with _shared_lock:
        _shared_catalog = MPCCatalog(data_file)
        logger.info(f"Using MPC observatory table {_shared_catalog.data_file}")
    return _shared_catalog
