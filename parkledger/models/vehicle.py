# parkledger/models/vehicle.py
"""
Vehicle record and vehicle class enum.
A vehicle is created by the stay ledger at entry and referenced by exactly one stay.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class VehicleClass(str, Enum):
    CAR = "CAR"
    MOTORCYCLE = "MOTORCYCLE"

    @classmethod
    def parse(cls, value: str) -> "VehicleClass":
        """Parse a class name coming from outside (query params, files). Case-insensitive."""
        try:
            return cls(value.strip().upper())
        except (AttributeError, ValueError):
            raise ValueError(f"Unknown vehicle class: {value!r}") from None


@dataclass
class Vehicle:
    identifier: str               # normalized: trimmed + uppercased
    vehicle_class: VehicleClass
    entry_time: datetime

    def __repr__(self):
        return f"<Vehicle {self.identifier} class={self.vehicle_class.value}>"


def describe_vehicle(vehicle: Vehicle) -> str:
    """One-line display text for a vehicle, formatted per class."""
    if vehicle.vehicle_class is VehicleClass.CAR:
        label = "CAR"
    elif vehicle.vehicle_class is VehicleClass.MOTORCYCLE:
        label = "MOTORCYCLE"
    else:
        label = str(vehicle.vehicle_class)
    entered = vehicle.entry_time.strftime("%Y-%m-%d %H:%M:%S")
    return f"{label} - Plate: {vehicle.identifier} - Entry: {entered}"
