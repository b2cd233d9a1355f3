#!/usr/bin/env python3
"""
lookup_telescope.py - Print telescope positions and pointing limits

This script resolves telescope identifiers (observatory mnemonics or MPC
observatory codes) and prints their position in every representation the
package knows about.

Usage:
    python lookup_telescope.py JCMT 568 [--options]
    python lookup_telescope.py --list
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from telescope_lookup.catalogs.mpc_catalog import configure_mpc_catalog
from telescope_lookup.core.resolver import list_names, resolve_by_code
from telescope_lookup.core.telescope import Telescope, get_telescope
from telescope_lookup.utils.coordinates import DEFAULT_SEPARATOR, radians_to_degrees

logger = logging.getLogger("lookup_telescope")

def format_limits(tel: Telescope) -> str:
    """
    Describe the pointing limits of a telescope in degrees.

    Args:
        tel: Telescope to describe.

    Returns:
        Single line summary of the limits.
    """
    limits = tel.limits()
    parts = [limits.type.value]
    for axis in ('el', 'ha', 'dec'):
        bounds = getattr(limits, axis)
        if bounds is not None:
            lo = radians_to_degrees(bounds.min)
            hi = radians_to_degrees(bounds.max)
            parts.append(f"{axis} [{lo:.2f}, {hi:.2f}] deg")
    return " ".join(parts)

def print_telescope(tel: Telescope, sep: str) -> None:
    """Print a human readable description of a telescope."""
    print(f"\n=== {tel.name} ===")
    print(f"Full name:          {tel.fullname}")
    print(f"MPC code:           {tel.obscode or '-'}")
    print(f"Longitude:          {tel.long('s', sep=sep)}  ({tel.long('d'):.6f} deg)")
    print(f"Latitude:           {tel.lat('s', sep=sep)}  ({tel.lat('d'):.6f} deg)")
    print(f"Altitude:           {tel.alt:.1f} m")
    print(f"Geocentric lat:     {tel.geoc_lat('s', sep=sep)}  ({tel.geoc_lat():.9f} rad)")
    print(f"Geocentric dist:    {tel.geoc_dist:.1f} m")
    par_c, par_s = tel.parallax
    print(f"Parallax (C, S):    {par_c:.6f}, {par_s:.6f}")
    print(f"Limits:             {format_limits(tel)}")

def lookup(identifiers: List[str], by_code: bool = False) -> List[Optional[Telescope]]:
    """
    Resolve a list of identifiers.

    Args:
        identifiers: Mnemonics or MPC codes.
        by_code: Only consult the MPC code table.

    Returns:
        Telescope for each identifier, None where it was not recognized.
    """
    results = []
    for identifier in identifiers:
        if by_code:
            site = resolve_by_code(identifier)
            tel = Telescope(site) if site is not None else None
        else:
            tel = get_telescope(identifier)

        if tel is None:
            logger.error(f"Telescope not recognized: {identifier}")
        results.append(tel)
    return results

def main(argv: Optional[List[str]] = None) -> int:
    # Parse command line arguments
    parser = argparse.ArgumentParser(description="Look up telescope positions and pointing limits")

    parser.add_argument('identifiers', nargs='*',
                        help="Observatory mnemonics (e.g. JCMT) or MPC codes (e.g. 568)")
    parser.add_argument('--code', action='store_true',
                        help="Treat identifiers as MPC observatory codes only")
    parser.add_argument('--list', action='store_true',
                        help="List the supported observatory mnemonics")
    parser.add_argument('--sep', default=DEFAULT_SEPARATOR,
                        help="Separator for sexagesimal output")
    parser.add_argument('--format', choices=['text', 'json'], default='text',
                        help="Output format")
    parser.add_argument('--mpc-table',
                        help="MPC observatory code table to use instead of the packaged one")
    parser.add_argument('--verbose', '-v', action='store_true',
                        help="Enable verbose output")

    args = parser.parse_args(argv)

    # Set up logging
    logging.basicConfig(level=logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.mpc_table:
        configure_mpc_catalog(args.mpc_table)

    if args.list:
        names = list_names()
        if args.format == 'json':
            print(json.dumps(names))
        else:
            print("\n".join(names))
        return 0

    if not args.identifiers:
        parser.error("no telescope identifiers given (use --list to see them)")

    telescopes = lookup(args.identifiers, by_code=args.code)
    found = [tel for tel in telescopes if tel is not None]

    if args.format == 'json':
        print(json.dumps([tel.as_dict() for tel in found], indent=2))
    else:
        for tel in found:
            print_telescope(tel, args.sep)

    return 0 if len(found) == len(telescopes) else 1

if __name__ == "__main__":
    sys.exit(main())
