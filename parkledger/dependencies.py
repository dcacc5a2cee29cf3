# parkledger/dependencies.py
"""
Ledger bootstrap and the FastAPI dependency that hands it to routers.
The ledger lives on app.state for the lifetime of the process (stays are in-memory only).
"""

from fastapi import Request

from parkledger.config import Settings
from parkledger.models.facility import Facility
from parkledger.services.facility_store import load_facility, save_facility
from parkledger.services.stay_ledger import StayLedger
from parkledger.utils.logger import get_logger

logger = get_logger(__name__)


def get_ledger(request: Request) -> StayLedger:
    """FastAPI dependency: the ledger created at startup."""
    return request.app.state.ledger


def bootstrap_ledger(settings: Settings) -> StayLedger:
    """
    Load FACILITY_NAME from FACILITY_FILE, or create it with DEFAULT_CAPACITY
    (half car / half motorcycle) and append it to the file.
    """
    facility = load_facility(settings.FACILITY_NAME, settings.FACILITY_FILE)
    if facility is None:
        facility = Facility.with_layout(settings.FACILITY_NAME, settings.DEFAULT_CAPACITY)
        logger.info(f"Created facility {facility.name!r} with {facility.capacity} spaces")
        if not save_facility(facility, settings.FACILITY_FILE):
            logger.warning(f"Facility {facility.name!r} could not be saved; continuing in memory")
    return StayLedger(facility)
