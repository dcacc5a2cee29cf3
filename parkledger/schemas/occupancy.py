# parkledger/schemas/occupancy.py
from pydantic import BaseModel
from typing import Dict

from parkledger.models.vehicle import VehicleClass


class ClassBreakdownOut(BaseModel):
    available: int
    occupied: int

    class Config:
        from_attributes = True


class OccupancySummaryOut(BaseModel):
    capacity: int
    occupied: int
    available: int
    by_class: Dict[VehicleClass, ClassBreakdownOut]

    class Config:
        from_attributes = True


class OccupancyReportOut(BaseModel):
    facility_name: str
    capacity: int
    occupied: int
    available: int
    percent_occupied: float
    active_count: int
    completed_count: int

    class Config:
        from_attributes = True
