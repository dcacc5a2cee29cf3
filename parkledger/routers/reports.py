# parkledger/routers/reports.py
"""Text report generation + stored facility listing."""

from fastapi import APIRouter, Depends, HTTPException
from parkledger.config import settings
from parkledger.dependencies import get_ledger
from parkledger.services.facility_store import load_facility_names
from parkledger.services.report_writer import write_report
from parkledger.services.stay_ledger import StayLedger

router = APIRouter()


@router.post("/reports", summary="Write a parked-vehicles report file")
def create_report(ledger: StayLedger = Depends(get_ledger)):
    """Dumps facility state and open tickets to REPORTS_DIR/report_<timestamp>.txt."""
    path = write_report(ledger, settings.REPORTS_DIR)
    if path is None:
        raise HTTPException(status_code=500, detail="Report could not be written")
    return {"status": "written", "path": str(path)}


@router.get("/facilities", response_model=list[str], summary="Facilities stored on file")
def list_facilities():
    return load_facility_names(settings.FACILITY_FILE)
