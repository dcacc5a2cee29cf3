# parkledger/schemas/stay.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from parkledger.models.vehicle import VehicleClass


class StayRequest(BaseModel):
    identifier: str


class StayOut(BaseModel):
    id: int
    identifier: str
    vehicle_class: VehicleClass
    space_number: int
    entry_time: datetime
    exit_time: Optional[datetime] = None
    hours: Optional[int] = None       # billed whole hours, set on exit
    fare: float

    class Config:
        from_attributes = True
