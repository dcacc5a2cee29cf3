# Parking Ledger: domain models

from parkledger.models.vehicle import Vehicle, VehicleClass, describe_vehicle  # noqa
from parkledger.models.facility import Facility, Space                          # noqa
from parkledger.models.stay import Stay                                         # noqa
