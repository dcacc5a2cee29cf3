# parkledger/models/stay.py
"""
Stay (parking ticket) record.
Opened by the stay ledger on entry, closed once on exit with exit time, billed hours and fare,
then kept in the ledger's completed history.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from parkledger.models.facility import Space
from parkledger.models.vehicle import Vehicle, VehicleClass


@dataclass
class Stay:
    id: int
    vehicle: Vehicle
    space: Space
    entry_time: datetime
    exit_time: Optional[datetime] = None
    hours: Optional[int] = None       # billed whole hours (set on exit)
    fare: float = 0.0

    @property
    def identifier(self) -> str:
        return self.vehicle.identifier

    @property
    def vehicle_class(self) -> VehicleClass:
        return self.vehicle.vehicle_class

    @property
    def space_number(self) -> int:
        return self.space.number

    @property
    def is_closed(self) -> bool:
        return self.exit_time is not None

    def close(self, exit_time: datetime, hours: int, fare: float):
        if self.is_closed:
            raise RuntimeError(f"Stay {self.id} is already closed")
        self.exit_time = exit_time
        self.hours = hours
        self.fare = fare

    def __repr__(self):
        return f"<Stay {self.id} plate={self.identifier} space={self.space_number} closed={self.is_closed}>"
