#!/usr/bin/env python3
"""Script to verify Pickup Mtaani API connectivity with the configured key."""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from pickup_mtaani import ClientSettings, PickupMtaaniClient, PickupMtaaniError


def main():
    print("=" * 60)
    print("Pickup Mtaani Connection Test")
    print("=" * 60)
    print()

    print("1. Checking configuration...")
    settings = ClientSettings()
    if not settings.api_key:
        print("   [ERROR] API key is not configured")
        print("   Please set PICKUP_MTAANI_API_KEY in your .env file")
        return 1

    print(f"   [OK] Base URL: {settings.base_url}")
    print(f"   [OK] Timeout: {settings.timeout}s")
    print()

    with PickupMtaaniClient(settings=settings) as client:
        print("2. Fetching business tied to the API key...")
        try:
            business = client.business.get()
            print(f"   [OK] Business: {business.name} (id {business.id})")
            if business.wallet_balance is not None:
                print(f"   [OK] Wallet balance: KES {business.wallet_balance}")
        except PickupMtaaniError as e:
            print(f"   [ERROR] {type(e).__name__}: {e}")
            return 1
        print()

        print("3. Listing zones...")
        try:
            zones = client.locations.get_zones()
            print(f"   [OK] Received {len(zones)} zones")
            if zones:
                print(f"   [OK] Sample zone: {zones[0].name}")
        except PickupMtaaniError as e:
            print(f"   [ERROR] {type(e).__name__}: {e}")
            return 1
        print()

    print("=" * 60)
    print("[SUCCESS] Pickup Mtaani API is reachable!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
