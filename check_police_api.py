#!/usr/bin/env python3
"""Script to verify connectivity to the data.police.uk API."""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from crimespotter.config import settings
from crimespotter.services.crimes import calculate_bounds, count_categories
from crimespotter.services.police import PoliceAPIClient, UpstreamError


def main():
    print("=" * 60)
    print("Police API Connection Check")
    print("=" * 60)
    print()

    print("1. Checking configuration...")
    print(f"   [OK] Base URL: {settings.police_api_base_url}")
    print(f"   [OK] User-Agent: {settings.police_api_user_agent}")
    print()

    client = PoliceAPIClient()

    print("2. Fetching available dates...")
    try:
        dates = client.fetch_dates()
    except UpstreamError as e:
        print(f"   [ERROR] Dates request failed: {e}")
        return 1
    if not dates:
        print("   [ERROR] Dates endpoint returned an empty list")
        return 1
    latest = dates[0].get("date")
    print(f"   [OK] {len(dates)} months available, latest {latest}")
    print()

    print("3. Fetching crimes around central London...")
    try:
        crimes = client.fetch_crimes(settings.default_latitude, settings.default_longitude, latest)
    except UpstreamError as e:
        print(f"   [ERROR] Crimes request failed: {e}")
        return 1
    print(f"   [OK] Received {len(crimes)} crimes")
    top = sorted(count_categories(crimes).items(), key=lambda item: item[1], reverse=True)[:5]
    for category, count in top:
        print(f"   [OK] {category}: {count}")
    print(f"   [OK] Bounds: {calculate_bounds(crimes)}")
    print()

    print("=" * 60)
    print("[SUCCESS] Police API is reachable!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
