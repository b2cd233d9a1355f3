"""
observatory_catalog.py - Primary catalog of well-known observatories

This module exposes the packaged observatory table through the same calling
convention as the SLALIB observatory routine: ask by 1-based index or by
mnemonic and get back a 5-tuple of

    (mnemonic, full_name, west_longitude, latitude, height)

with angles in radians. The reserved full name "?" is the sentinel for
"past the end of the table" or "no such mnemonic".
"""

import logging
from typing import Iterator, List, NamedTuple, Optional, Union

from telescope_lookup.catalogs.observatory_data import OBSERVATORY_CODES, OBSERVATORY_DATA
from telescope_lookup.utils.coordinates import sexagesimal_to_radians

# Set up logging
logger = logging.getLogger(__name__)

# Full name reported for unknown entries
SENTINEL = "?"

class ObservatoryEntry(NamedTuple):
    """One row of the primary catalog, angles in radians."""
    mnemonic: str
    full_name: str
    west_longitude: float
    latitude: float
    height: float

_END = ObservatoryEntry("", SENTINEL, 0.0, 0.0, 0.0)

class ObservatoryCatalog:
    """
    Read-only view of the primary observatory catalog.

    Rows are converted to radians once, at construction. Lookups by name are
    sequential scans up to the sentinel, as the catalog is small.
    """

    def __init__(self, data=None, codes=None):
        """
        Initialize the catalog.

        Args:
            data: Rows in the OBSERVATORY_DATA format. Defaults to the packaged table.
            codes: Mnemonic to MPC code mapping. Defaults to OBSERVATORY_CODES.
        """
        rows = OBSERVATORY_DATA if data is None else data
        self.codes = dict(OBSERVATORY_CODES if codes is None else codes)
        self._entries = [
            ObservatoryEntry(
                mnemonic=mnemonic.upper(),
                full_name=full_name,
                west_longitude=sexagesimal_to_radians(west_long),
                latitude=sexagesimal_to_radians(lat),
                height=float(height)
            )
            for mnemonic, full_name, west_long, lat, height in rows
        ]
        logger.debug(f"Observatory catalog holds {len(self._entries)} sites")

    def obs(self, key: Union[int, str]) -> ObservatoryEntry:
        """
        Fetch a catalog row by 1-based index or by mnemonic.

        Args:
            key: Index starting at 1, or a mnemonic (case-insensitive).

        Returns:
            The matching ObservatoryEntry. Its full_name is SENTINEL when the
            index is past the end of the table or the mnemonic is unknown.
        """
        if isinstance(key, int):
            if 1 <= key <= len(self._entries):
                return self._entries[key - 1]
            return _END

        name = key.upper()
        for entry in self:
            if entry.mnemonic == name:
                return entry
        return _END._replace(mnemonic=name)

    def __iter__(self) -> Iterator[ObservatoryEntry]:
        index = 1
        while True:
            entry = self.obs(index)
            if entry.full_name == SENTINEL:
                return
            yield entry
            index += 1

    def find(self, mnemonic: str) -> Optional[ObservatoryEntry]:
        """
        Look up a site by mnemonic.

        Args:
            mnemonic: Catalog mnemonic (case-insensitive).

        Returns:
            ObservatoryEntry, or None if the mnemonic is not in the catalog.
        """
        entry = self.obs(mnemonic)
        if entry.full_name == SENTINEL:
            return None
        return entry

    def obscode(self, mnemonic: str) -> Optional[str]:
        """MPC observatory code of a catalog site, if one is known."""
        return self.codes.get(mnemonic.upper())

    def names(self) -> List[str]:
        """Sorted list of every mnemonic in the catalog."""
        return sorted(entry.mnemonic for entry in self)

# Shared instance of the packaged catalog
default_catalog = ObservatoryCatalog()
