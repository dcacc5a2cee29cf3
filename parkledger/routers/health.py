# parkledger/routers/health.py
"""
System health check endpoint.
Returns backend status and whether a facility is loaded.
"""

from fastapi import APIRouter, Request
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(request: Request):
    """
    Returns:
    - Backend status
    - Loaded facility name and capacity (status "degraded" if none is loaded)
    """
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "facility": None,
    }

    ledger = getattr(request.app.state, "ledger", None)
    if ledger is None:
        result["status"] = "degraded"
    else:
        result["facility"] = {"name": ledger.facility.name, "capacity": ledger.facility.capacity}

    return result
