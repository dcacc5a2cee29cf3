# parkledger/routers/stays.py
"""Vehicle entry/exit endpoints + active and completed stay listings."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from parkledger.dependencies import get_ledger
from parkledger.schemas.stay import StayOut, StayRequest
from parkledger.services.stay_ledger import StayLedger

router = APIRouter()


@router.post("/stays/entry", response_model=StayOut, status_code=status.HTTP_201_CREATED,
             summary="Register a vehicle entry")
def register_entry(body: StayRequest, ledger: StayLedger = Depends(get_ledger)):
    """Classifies the plate, assigns the lowest-numbered free space of its class and opens a ticket."""
    return StayOut.model_validate(ledger.register_entry(body.identifier))


@router.post("/stays/exit", response_model=StayOut, summary="Register a vehicle exit")
def register_exit(body: StayRequest, ledger: StayLedger = Depends(get_ledger)):
    """Closes the open ticket, bills started hours (minimum 1) and frees the space."""
    return StayOut.model_validate(ledger.register_exit(body.identifier))


@router.get("/stays/active", response_model=list[StayOut], summary="Vehicles currently parked")
def list_active(ledger: StayLedger = Depends(get_ledger)):
    """Open tickets in registration order."""
    return [StayOut.model_validate(s) for s in ledger.active_stays()]


@router.get("/stays/active/{identifier}", response_model=StayOut, summary="Look up an open ticket by plate")
def get_active(identifier: str, ledger: StayLedger = Depends(get_ledger)):
    stay = ledger.find_active(identifier)
    if not stay:
        raise HTTPException(status_code=404, detail=f"No open stay for {identifier.strip().upper()}")
    return StayOut.model_validate(stay)


@router.get("/stays/completed", response_model=list[StayOut], summary="Closed tickets")
def list_completed(limit: int = Query(50, ge=0), ledger: StayLedger = Depends(get_ledger)):
    """Most recent closed tickets first."""
    completed = ledger.completed_stays()
    completed.reverse()
    return [StayOut.model_validate(s) for s in completed[:limit]]
