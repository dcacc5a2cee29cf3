# parkledger/services/classifier.py
"""
Vehicle classification from the plate identifier.
The last character decides the class: a letter means MOTORCYCLE, a digit means CAR.
Validation and classification share the same length gate so they cannot disagree.
"""

from typing import Optional

from parkledger.models.vehicle import VehicleClass

MIN_IDENTIFIER_LENGTH = 6


def normalize_identifier(identifier: str) -> str:
    return (identifier or "").strip().upper()


def is_valid_identifier(identifier: str) -> bool:
    """Non-empty and at least MIN_IDENTIFIER_LENGTH characters once trimmed."""
    normalized = normalize_identifier(identifier)
    return len(normalized) >= MIN_IDENTIFIER_LENGTH


def classify(identifier: str) -> Optional[VehicleClass]:
    """Returns the vehicle class, or None when the identifier is invalid or unclassifiable."""
    if not is_valid_identifier(identifier):
        return None

    last = normalize_identifier(identifier)[-1]
    if last.isalpha():
        return VehicleClass.MOTORCYCLE
    if last.isdecimal():
        return VehicleClass.CAR
    return None
