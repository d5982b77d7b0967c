#!/usr/bin/env python3
"""
Frost Date Lookup Script.

Prints last spring and first fall frost statistics for a US zip code using
the nearest ACIS station.

Usage:
    python scripts/frost_date_lookup.py 80301
    python scripts/frost_date_lookup.py 80301 10 20 30
    python scripts/frost_date_lookup.py 80301 --json
"""

import asyncio
import json
import logging
import sys

# Add src to path for imports
sys.path.insert(0, 'src')

from frostdates import (
    FrostDateError,
    InvalidZipcodeError,
    StationNotFoundError,
    UpstreamUnavailableError,
    get_frost_statistics,
)


async def main():
    """Run a frost date lookup."""
    args = [arg for arg in sys.argv[1:] if not arg.startswith("--")]
    as_json = "--json" in sys.argv
    if "--verbose" in sys.argv:
        logging.basicConfig(level=logging.DEBUG)

    if not args:
        print("Usage: python frost_date_lookup.py ZIPCODE [WINDOW_YEARS ...] [--json] [--verbose]")
        sys.exit(1)

    zipcode = args[0]
    try:
        windows = [int(arg) for arg in args[1:]] or [15, 30]
    except ValueError:
        print(f" Window sizes must be integers: {args[1:]}")
        sys.exit(1)

    try:
        report = await get_frost_statistics(zipcode, window_years_list=windows)
    except InvalidZipcodeError as e:
        print(f" {e}")
        sys.exit(2)
    except StationNotFoundError:
        print(f" No data available for zip code {zipcode}")
        sys.exit(3)
    except UpstreamUnavailableError as e:
        print(f" Weather data temporarily unavailable, try again later ({e})")
        sys.exit(4)

    if as_json:
        print(json.dumps(report.to_dict(), indent=2))
        return

    print(" Frost Date Lookup")
    print("=" * 50)
    print(report)

    if not report.is_complete():
        print(f"\n  {len(report.window_errors)} window(s) had no observations")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n  Lookup interrupted by user")
        sys.exit(130)
    except FrostDateError as e:
        print(f"\n Lookup failed: {e}")
        sys.exit(1)
