# parkledger/services/stay_ledger.py
"""
Stay ledger: vehicle entry/exit, space allocation and billing.

How it works:
  - register_entry validates + classifies the plate, picks the first free space of the
    matching class, occupies it and opens a Stay with the next sequential ticket id
  - register_exit closes the Stay: billed hours (started hours, min 1) × hourly rate,
    releases the space, moves the Stay from active to completed history
  - Reporting methods are read-only snapshots over the facility and the stay lists

The ledger is the only writer of space occupancy and of its stay lists.
Entry and exit each run under one lock (FastAPI runs sync endpoints on a thread pool).
"""

import itertools
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional

from parkledger.errors import (
    DuplicateActiveVehicle,
    InvalidIdentifier,
    NoSpaceAvailable,
    UnclassifiableVehicle,
    VehicleNotFound,
)
from parkledger.models.facility import Facility
from parkledger.models.stay import Stay
from parkledger.models.vehicle import Vehicle, VehicleClass
from parkledger.services import fare_calculator
from parkledger.services.classifier import MIN_IDENTIFIER_LENGTH, classify, is_valid_identifier, normalize_identifier
from parkledger.services.report_writer import format_receipt
from parkledger.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ClassBreakdown:
    available: int
    occupied: int


@dataclass
class OccupancySummary:
    capacity: int
    occupied: int
    available: int
    by_class: Dict[VehicleClass, ClassBreakdown]


@dataclass
class OccupancyReport:
    facility_name: str
    capacity: int
    occupied: int
    available: int
    percent_occupied: float
    active_count: int
    completed_count: int


class StayLedger:
    def __init__(self, facility: Facility, clock: Callable[[], datetime] = None, start_id: int = 1):
        self.facility = facility
        self._clock = clock or datetime.now
        self._ids = itertools.count(start_id)
        self._active: List[Stay] = []
        self._completed: List[Stay] = []
        self._lock = threading.Lock()

    # ── Entry / Exit ──────────────────────────────────────────────────────
    def register_entry(self, identifier: str) -> Stay:
        if not is_valid_identifier(identifier):
            logger.warning(f"[ENTRY] Rejected identifier {identifier!r}")
            raise InvalidIdentifier(
                f"Identifier must be at least {MIN_IDENTIFIER_LENGTH} characters", identifier=identifier
            )

        plate = normalize_identifier(identifier)
        with self._lock:
            if self.find_active(plate) is not None:
                logger.warning(f"[ENTRY] Plate={plate} already has an open stay")
                raise DuplicateActiveVehicle(f"Vehicle {plate} is already parked", identifier=plate)

            vehicle_class = classify(plate)
            if vehicle_class is None:
                logger.warning(f"[ENTRY] Plate={plate} has no recognised vehicle class")
                raise UnclassifiableVehicle(f"Cannot determine vehicle class for {plate}", identifier=plate)

            space = self.facility.find_available(vehicle_class)
            if space is None:
                logger.warning(f"[ENTRY] No {vehicle_class.value} space free for plate {plate}")
                raise NoSpaceAvailable(f"No {vehicle_class.value} spaces available", identifier=plate)

            vehicle = Vehicle(identifier=plate, vehicle_class=vehicle_class, entry_time=self._clock())
            space.occupy(vehicle)
            stay = Stay(id=next(self._ids), vehicle=vehicle, space=space, entry_time=vehicle.entry_time)
            self._active.append(stay)

        logger.info(f"[ENTRY] Ticket #{stay.id} | Plate={plate} | Class={vehicle_class.value} | Space={space.number}")
        return stay

    def register_exit(self, identifier: str) -> Stay:
        plate = normalize_identifier(identifier)
        with self._lock:
            stay = self.find_active(plate)
            if stay is None:
                logger.warning(f"[EXIT] No open stay for plate {plate!r}")
                raise VehicleNotFound(f"Vehicle {plate} is not parked here", identifier=plate)

            exit_time = self._clock()
            hours = fare_calculator.billable_hours(stay.entry_time, exit_time)
            amount = fare_calculator.fare(stay.vehicle_class, hours)
            stay.close(exit_time, hours, amount)

            stay.space.release()
            self._active.remove(stay)
            self._completed.append(stay)

        logger.info(f"[EXIT] Ticket #{stay.id} | Plate={plate} | {hours}h | Fare={amount:.2f}")
        logger.debug(format_receipt(stay))
        return stay

    def find_active(self, identifier: str) -> Optional[Stay]:
        plate = normalize_identifier(identifier)
        for stay in self._active:
            if stay.identifier == plate:
                return stay
        return None

    # ── Reporting ─────────────────────────────────────────────────────────
    def active_stays(self) -> List[Stay]:
        return list(self._active)

    def completed_stays(self) -> List[Stay]:
        return list(self._completed)

    def occupancy_summary(self) -> OccupancySummary:
        by_class = {}
        for vehicle_class in VehicleClass:
            available, occupied = self.facility.count_by_class(vehicle_class)
            by_class[vehicle_class] = ClassBreakdown(available=available, occupied=occupied)
        return OccupancySummary(
            capacity=self.facility.capacity,
            occupied=self.facility.count_occupied(),
            available=self.facility.count_available(),
            by_class=by_class,
        )

    def occupancy_report(self) -> OccupancyReport:
        capacity = self.facility.capacity
        occupied = self.facility.count_occupied()
        return OccupancyReport(
            facility_name=self.facility.name,
            capacity=capacity,
            occupied=occupied,
            available=self.facility.count_available(),
            percent_occupied=(occupied * 100.0 / capacity) if capacity else 0.0,
            active_count=len(self._active),
            completed_count=len(self._completed),
        )

    def rates(self) -> Dict[VehicleClass, float]:
        return fare_calculator.rates()
