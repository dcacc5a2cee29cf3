# scripts/setup/init_facility.py
"""
Create a facility definition and append it to FACILITY_FILE.
Run once per facility before first launch; --list shows what is on file.
Usage: python scripts/setup/init_facility.py --name "Downtown" --capacity 40 [--car-spaces 25]
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import argparse

from parkledger.config import settings
from parkledger.models.facility import Facility
from parkledger.models.vehicle import VehicleClass
from parkledger.services.facility_store import load_facility, load_facility_names, save_facility


def list_facilities(path):
    names = load_facility_names(path)
    if not names:
        print(f"No facilities stored in {path}")
        return
    print(f"Facilities in {path} ({len(names)} total):")
    for name in names:
        facility = load_facility(name, path)
        if facility is None:
            print(f"   ✗ {name} (unreadable record)")
            continue
        print(f"   ✓ {name}: {facility.capacity} spaces "
              f"({facility.spaces_for(VehicleClass.CAR)} car / {facility.spaces_for(VehicleClass.MOTORCYCLE)} motorcycle)")


def main():
    parser = argparse.ArgumentParser(description="Create or list stored parking facilities")
    parser.add_argument("--name", default=settings.FACILITY_NAME)
    parser.add_argument("--capacity", type=int, default=settings.DEFAULT_CAPACITY)
    parser.add_argument("--car-spaces", type=int, default=None,
                        help="Spaces reserved for cars (default: half the capacity)")
    parser.add_argument("--file", default=settings.FACILITY_FILE)
    parser.add_argument("--list", action="store_true", help="List stored facilities and exit")
    args = parser.parse_args()

    if args.list:
        list_facilities(args.file)
        return

    if "|" in args.name or not args.name.strip():
        print("❌ Facility name must be non-empty and must not contain '|'")
        sys.exit(1)
    if args.capacity <= 0:
        print("❌ Capacity must be a positive number")
        sys.exit(1)
    if args.name in load_facility_names(args.file):
        print(f"❌ Facility {args.name!r} already exists in {args.file}")
        sys.exit(1)

    try:
        facility = Facility.with_layout(args.name, args.capacity, args.car_spaces)
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    if not save_facility(facility, args.file):
        print(f"❌ Could not write {args.file}")
        sys.exit(1)

    print(f"✅ Facility {facility.name!r} saved to {args.file}")
    print(f"   Car spaces:        {facility.spaces_for(VehicleClass.CAR)}")
    print(f"   Motorcycle spaces: {facility.spaces_for(VehicleClass.MOTORCYCLE)}")
    print("\nStart the backend with:")
    print("   uvicorn parkledger.main:app --host 0.0.0.0 --port 8080")


if __name__ == "__main__":
    main()
