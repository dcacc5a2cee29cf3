# parkledger/services/fare_calculator.py
"""
Hourly fare table and billing helpers.
Every started hour is billed in full, with a one-hour minimum.
"""

from datetime import datetime
from typing import Dict

from parkledger.errors import UnknownVehicleClass
from parkledger.models.vehicle import VehicleClass

RATES: Dict[VehicleClass, float] = {
    VehicleClass.CAR: 3000.0,
    VehicleClass.MOTORCYCLE: 2000.0,
}


def rate(vehicle_class: VehicleClass) -> float:
    try:
        return RATES[vehicle_class]
    except KeyError:
        raise UnknownVehicleClass(f"No hourly rate defined for vehicle class {vehicle_class!r}") from None


def fare(vehicle_class: VehicleClass, hours: int) -> float:
    return rate(vehicle_class) * hours


def rates() -> Dict[VehicleClass, float]:
    return dict(RATES)


def billable_hours(entry_time: datetime, exit_time: datetime) -> int:
    """Whole minutes elapsed, rounded up to hours. Never less than 1 (also covers clock skew)."""
    minutes = int((exit_time - entry_time).total_seconds() // 60)
    hours = (minutes + 59) // 60
    return max(1, hours)
