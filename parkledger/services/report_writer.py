# parkledger/services/report_writer.py
"""
Human-readable text output: exit receipts, rate card, active listing,
and the timestamped report file written to REPORTS_DIR.
None of this is machine-parsed.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from parkledger.models.stay import Stay
from parkledger.models.vehicle import describe_vehicle
from parkledger.services import fare_calculator
from parkledger.utils.logger import get_logger

if TYPE_CHECKING:
    from parkledger.services.stay_ledger import StayLedger

logger = get_logger(__name__)

DISPLAY_TIME_FORMAT = "%d/%m/%Y %H:%M:%S"
FILE_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"
RULE = "=" * 40
THIN_RULE = "-" * 40


def format_receipt(stay: Stay) -> str:
    exit_time = stay.exit_time.strftime(DISPLAY_TIME_FORMAT) if stay.exit_time else "-"
    lines = [
        "========== PARKING RECEIPT ==========",
        f"Ticket #: {stay.id}",
        f"Plate: {stay.identifier}",
        f"Class: {stay.vehicle_class.value}",
        f"Space: {stay.space_number}",
        f"Entry: {stay.entry_time.strftime(DISPLAY_TIME_FORMAT)}",
        f"Exit: {exit_time}",
        f"Time: {stay.hours or 0} hour(s)",
        f"Fare: ${stay.fare:.2f}",
        "=====================================",
    ]
    return "\n".join(lines)


def format_rates() -> str:
    lines = ["========== RATES =========="]
    for vehicle_class, price in fare_calculator.rates().items():
        lines.append(f"{vehicle_class.value}: ${price:.2f} per hour")
    lines.append("===========================")
    return "\n".join(lines)


def format_active_listing(stays: Iterable[Stay]) -> str:
    stays = list(stays)
    if not stays:
        return "No vehicles currently parked."
    lines = ["========== PARKED VEHICLES =========="]
    for stay in stays:
        lines.append(f"Ticket #{stay.id} | {describe_vehicle(stay.vehicle)} | Space: {stay.space_number}")
    lines.append("=====================================")
    return "\n".join(lines)


def render_report(ledger: "StayLedger", now: datetime) -> str:
    facility = ledger.facility
    active = ledger.active_stays()

    lines = [
        RULE,
        "    PARKED VEHICLES REPORT",
        RULE,
        f"Facility: {facility.name}",
        f"Date/Time: {now.strftime(DISPLAY_TIME_FORMAT)}",
        "",
        "FACILITY STATUS:",
        f"Total capacity: {facility.capacity}",
        f"Occupied spaces: {facility.count_occupied()}",
        f"Available spaces: {facility.count_available()}",
        "",
    ]

    if not active:
        lines.append("No vehicles currently parked.")
    else:
        lines.append(f"PARKED VEHICLES ({len(active)}):")
        lines.append(THIN_RULE)
        for stay in active:
            lines.extend([
                f"Ticket #{stay.id}",
                f"  Plate: {stay.identifier}",
                f"  Class: {stay.vehicle_class.value}",
                f"  Space: {stay.space_number}",
                f"  Entry: {stay.entry_time.strftime(DISPLAY_TIME_FORMAT)}",
                THIN_RULE,
            ])

    lines.extend(["", RULE, "End of report"])
    return "\n".join(lines) + "\n"


def write_report(ledger: "StayLedger", reports_dir: str, now: datetime = None) -> Optional[Path]:
    """
    Write the report to reports_dir/report_<timestamp>.txt.
    Returns the file path, or None if the directory or file cannot be written.
    """
    now = now or datetime.now()
    path = Path(reports_dir) / f"report_{now.strftime(FILE_TIME_FORMAT)}.txt"
    try:
        os.makedirs(reports_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(render_report(ledger, now))
    except OSError as e:
        logger.error(f"[REPORT] Failed to write {path}: {e}")
        return None

    logger.info(f"[REPORT] Written to {path}")
    return path
