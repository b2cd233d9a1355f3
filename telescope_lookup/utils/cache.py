"""
cache.py - Lazily populated in-memory tables

This module provides a holder for lookup tables that are expensive to build
(typically parsed from a data file) and should be built at most once per
process, no matter how many callers ask for them.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

# Set up logging
logger = logging.getLogger(__name__)

class LazyTable:
    """
    Lazily initialized, read-mostly mapping.

    The loader is called on first access only. Population is guarded by a
    lock so concurrent first readers trigger a single load; later readers
    see the fully populated mapping without taking the lock.
    """

    def __init__(self, loader: Callable[[], Dict[str, Any]], name: str = "table"):
        """
        Initialize the lazy table.

        Args:
            loader: Zero-argument callable returning the populated mapping.
            name: Label used in log messages.
        """
        self.loader = loader
        self.name = name
        self._data: Optional[Dict[str, Any]] = None

        # Lock for thread safety
        self.lock = threading.RLock()

        # Cache statistics
        self.loads = 0
        self.hits = 0
        self.misses = 0

    @property
    def loaded(self) -> bool:
        """Whether the loader has already run successfully."""
        return self._data is not None

    def load(self) -> Dict[str, Any]:
        """
        Return the mapping, populating it if this is the first call.

        Returns:
            The populated mapping. The same object is returned on every call.
        """
        data = self._data
        if data is not None:
            return data

        with self.lock:
            # Another thread may have finished loading while we waited
            if self._data is None:
                logger.debug(f"Loading {self.name}")
                data = self.loader()
                self._data = data
                self.loads += 1
                logger.info(f"Loaded {len(data)} entries into {self.name}")
            return self._data

    def get(self, key: str) -> Optional[Any]:
        """
        Get a value from the table.

        Args:
            key: Lookup key.

        Returns:
            Stored value, or None if the key is absent.
        """
        value = self.load().get(key)
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def keys(self):
        """Keys of the populated table."""
        return self.load().keys()

    def invalidate(self) -> bool:
        """
        Drop the populated mapping so the next access reloads it.

        Returns:
            True if a populated mapping was discarded, False otherwise.
        """
        with self.lock:
            if self._data is None:
                return False
            self._data = None
            logger.debug(f"Invalidated {self.name}")
            return True

    def get_stats(self) -> Dict[str, Any]:
        """
        Get table statistics.

        Returns:
            Dictionary with load count, hits, misses and hit rate.
        """
        total = self.hits + self.misses
        hit_rate = self.hits / total if total > 0 else 0

        return {
            'loads': self.loads,
            'entries': len(self._data) if self._data is not None else 0,
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate
        }
