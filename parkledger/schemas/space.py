# parkledger/schemas/space.py
from pydantic import BaseModel
from typing import Optional

from parkledger.models.vehicle import VehicleClass


class SpaceOut(BaseModel):
    number: int
    vehicle_class: VehicleClass
    occupied: bool
    identifier: Optional[str] = None
