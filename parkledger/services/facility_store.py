# parkledger/services/facility_store.py
"""
Flat-file persistence for facility definitions.
Format: one line per facility, name|capacity|carSpaceCount|motoSpaceCount
Names containing '|' are not escaped and will not load back correctly.

Loading never returns a half-built facility: any malformed numeric field yields None.
"""

import os
from typing import List, Optional

from parkledger.models.facility import Facility
from parkledger.models.vehicle import VehicleClass
from parkledger.utils.logger import get_logger

logger = get_logger(__name__)

SEPARATOR = "|"


def format_record(facility: Facility) -> str:
    return SEPARATOR.join([
        facility.name,
        str(facility.capacity),
        str(facility.spaces_for(VehicleClass.CAR)),
        str(facility.spaces_for(VehicleClass.MOTORCYCLE)),
    ])


def save_facility(facility: Facility, path: str) -> bool:
    """Append the facility record to the file. Returns False if the file cannot be written."""
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(format_record(facility) + "\n")
    except OSError as e:
        logger.error(f"[STORE] Failed to save facility {facility.name!r} to {path}: {e}")
        return False
    logger.info(f"[STORE] Saved facility {facility.name!r} → {path}")
    return True


def facilities_exist(path: str) -> bool:
    return os.path.isfile(path) and os.path.getsize(path) > 0


def _read_lines(path: str) -> List[str]:
    if not os.path.isfile(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f]
    except OSError as e:
        logger.error(f"[STORE] Cannot read {path}: {e}")
        return []


def load_facility_names(path: str) -> List[str]:
    """Names of all stored facilities, in file order."""
    names = []
    for line in _read_lines(path):
        name, sep, _ = line.partition(SEPARATOR)
        if sep and name:
            names.append(name)
    return names


def load_facility(name: str, path: str) -> Optional[Facility]:
    """
    Rebuild the first facility on file whose name matches exactly.
    CAR spaces get numbers 1..car, MOTORCYCLE spaces car+1..capacity.
    """
    for line in _read_lines(path):
        fields = line.split(SEPARATOR)
        if fields[0] != name or len(fields) < 4:
            continue

        try:
            capacity = int(fields[1])
            car_spaces = int(fields[2])
            moto_spaces = int(fields[3])
        except ValueError:
            logger.error(f"[STORE] Malformed record for facility {name!r} in {path}: {line!r}")
            return None

        # Layout is always car_spaces cars + the rest motorcycles
        if car_spaces + moto_spaces != capacity:
            logger.warning(
                f"[STORE] Facility {name!r}: {car_spaces} car + {moto_spaces} motorcycle spaces "
                f"does not match capacity {capacity}; using {capacity - car_spaces} motorcycle spaces"
            )

        try:
            facility = Facility.with_layout(name, capacity, car_spaces)
        except ValueError as e:
            logger.error(f"[STORE] Invalid layout for facility {name!r}: {e}")
            return None
        logger.info(f"[STORE] Loaded facility {name!r} ({capacity} spaces, {car_spaces} for cars)")
        return facility

    logger.warning(f"[STORE] Facility {name!r} not found in {path}")
    return None
