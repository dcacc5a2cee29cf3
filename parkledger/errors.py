# parkledger/errors.py
"""
Errors raised by the stay ledger and fare calculator.
Each carries the HTTP status the API answers with; main.py maps them in one handler.
"""


class ParkingError(Exception):
    status_code = 400

    def __init__(self, message: str, identifier: str = None):
        super().__init__(message)
        self.message = message
        self.identifier = identifier


class InvalidIdentifier(ParkingError):
    """Identifier empty or shorter than the minimum length."""
    status_code = 400


class UnclassifiableVehicle(InvalidIdentifier):
    """Identifier passed validation but its trailing character maps to no vehicle class."""
    status_code = 400


class DuplicateActiveVehicle(ParkingError):
    status_code = 409


class NoSpaceAvailable(ParkingError):
    status_code = 409


class VehicleNotFound(ParkingError):
    status_code = 404


class UnknownVehicleClass(ParkingError, ValueError):
    """No rate is defined for the class. Indicates a classification bug, never a free stay."""
    status_code = 500
