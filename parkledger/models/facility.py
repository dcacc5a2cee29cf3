# parkledger/models/facility.py
"""
Facility space inventory.
A facility has a fixed capacity and an ordered list of typed spaces.
Spaces are appended up to capacity and never removed; only the stay ledger
flips their occupancy.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from parkledger.models.vehicle import Vehicle, VehicleClass


@dataclass
class Space:
    number: int
    vehicle_class: VehicleClass
    vehicle: Optional[Vehicle] = None

    @property
    def occupied(self) -> bool:
        return self.vehicle is not None

    @property
    def is_available(self) -> bool:
        return self.vehicle is None

    def occupy(self, vehicle: Vehicle):
        self.vehicle = vehicle

    def release(self):
        self.vehicle = None

    def __repr__(self):
        state = f"occupied by {self.vehicle.identifier}" if self.vehicle else "free"
        return f"<Space {self.number} [{self.vehicle_class.value}] {state}>"


@dataclass
class Facility:
    name: str
    capacity: int
    spaces: List[Space] = field(default_factory=list)

    def __post_init__(self):
        if self.capacity < 0:
            raise ValueError(f"Facility capacity must be >= 0, got {self.capacity}")

    @classmethod
    def with_layout(cls, name: str, capacity: int, car_spaces: int = None) -> "Facility":
        """
        Build a facility with the standard class-grouped layout:
        CAR spaces numbered 1..car_spaces, MOTORCYCLE spaces car_spaces+1..capacity.
        Defaults to half the capacity (rounded down) for cars.
        """
        if car_spaces is None:
            car_spaces = capacity // 2
        if not 0 <= car_spaces <= capacity:
            raise ValueError(f"car_spaces must be between 0 and {capacity}, got {car_spaces}")

        facility = cls(name=name, capacity=capacity)
        for number in range(1, car_spaces + 1):
            facility.add_space(Space(number, VehicleClass.CAR))
        for number in range(car_spaces + 1, capacity + 1):
            facility.add_space(Space(number, VehicleClass.MOTORCYCLE))
        return facility

    def add_space(self, space: Space) -> bool:
        """Append a space. Returns False once the facility is at capacity."""
        if len(self.spaces) >= self.capacity:
            return False
        self.spaces.append(space)
        return True

    def find_available(self, vehicle_class: VehicleClass) -> Optional[Space]:
        """First free space of the class, in insertion order."""
        for space in self.spaces:
            if space.is_available and space.vehicle_class is vehicle_class:
                return space
        return None

    def find_by_number(self, number: int) -> Optional[Space]:
        for space in self.spaces:
            if space.number == number:
                return space
        return None

    def count_available(self) -> int:
        return sum(1 for s in self.spaces if s.is_available)

    def count_occupied(self) -> int:
        return sum(1 for s in self.spaces if s.occupied)

    def count_by_class(self, vehicle_class: VehicleClass) -> Tuple[int, int]:
        """Returns (available, occupied) for one vehicle class."""
        available = occupied = 0
        for space in self.spaces:
            if space.vehicle_class is not vehicle_class:
                continue
            if space.occupied:
                occupied += 1
            else:
                available += 1
        return available, occupied

    def spaces_for(self, vehicle_class: VehicleClass) -> int:
        return sum(1 for s in self.spaces if s.vehicle_class is vehicle_class)

    def __repr__(self):
        return f"<Facility {self.name!r} {self.count_occupied()}/{self.capacity} occupied>"
