"""
Pytest configuration and shared fixtures for telescope lookup tests.

This module provides reusable fixtures for:
- Small MPC observatory tables written to a temporary directory
- Resetting the process-wide MPC catalog between tests
"""

import pytest

from telescope_lookup.catalogs import mpc_catalog

SAMPLE_MPC_TABLE = """\
Code  Long.   cos      sin    Name
000   0.0000 0.62411 +0.77873 Greenwich
011   8.7975 0.67945 +0.73185 Wetzikon
250                           Hubble Space Telescope
413 149.0642 0.85563 -0.51621 Siding Spring Observatory
568 204.5278 0.94171 +0.33725 Mauna Kea
C51                           WISE
"""

@pytest.fixture
def mpc_table_file(tmp_path):
    """
    Write a small MPC observatory table and return its path.

    Usage:
        def test_something(mpc_table_file):
            catalog = MPCCatalog(str(mpc_table_file))
    """
    path = tmp_path / "obscodes.dat"
    path.write_text(SAMPLE_MPC_TABLE, encoding="utf-8")
    return path

@pytest.fixture(autouse=True)
def reset_shared_mpc_catalog():
    """Put back the packaged MPC catalog after tests that replace it."""
    saved = mpc_catalog._shared_catalog
    yield
    mpc_catalog._shared_catalog = saved
