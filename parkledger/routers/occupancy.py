# parkledger/routers/occupancy.py
"""Occupancy summary, aggregate report, space inventory and rate card."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from parkledger.dependencies import get_ledger
from parkledger.models.vehicle import VehicleClass
from parkledger.schemas.occupancy import OccupancyReportOut, OccupancySummaryOut
from parkledger.schemas.space import SpaceOut
from parkledger.services.stay_ledger import StayLedger

router = APIRouter()


@router.get("/occupancy", response_model=OccupancySummaryOut, summary="Occupied/available spaces")
def get_occupancy(ledger: StayLedger = Depends(get_ledger)):
    """Facility totals plus the per-class breakdown."""
    return OccupancySummaryOut.model_validate(ledger.occupancy_summary())


@router.get("/occupancy/report", response_model=OccupancyReportOut, summary="Aggregate occupancy report")
def get_occupancy_report(ledger: StayLedger = Depends(get_ledger)):
    return OccupancyReportOut.model_validate(ledger.occupancy_report())


@router.get("/spaces", response_model=list[SpaceOut], summary="Space inventory")
def list_spaces(vehicle_class: Optional[str] = None, ledger: StayLedger = Depends(get_ledger)):
    """All spaces in number order, optionally filtered by vehicle class (CAR | MOTORCYCLE)."""
    wanted = None
    if vehicle_class:
        try:
            wanted = VehicleClass.parse(vehicle_class)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return [
        SpaceOut(
            number=s.number,
            vehicle_class=s.vehicle_class,
            occupied=s.occupied,
            identifier=s.vehicle.identifier if s.vehicle else None,
        )
        for s in ledger.facility.spaces
        if wanted is None or s.vehicle_class is wanted
    ]


@router.get("/rates", summary="Hourly rates per vehicle class")
def get_rates(ledger: StayLedger = Depends(get_ledger)):
    return {vehicle_class.value: price for vehicle_class, price in ledger.rates().items()}
