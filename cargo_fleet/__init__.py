"""
Cargo fleet - container loading rules and ship capacity enforcement.
"""

from cargo_fleet.errors import (
    CapacityExceededError,
    CargoFleetError,
    OverfillError,
    WeightExceededError,
)
from cargo_fleet.models import (
    Container,
    ContainerShip,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)
from cargo_fleet.services.hazard import (
    HazardNotifier,
    LoggingHazardNotifier,
    RecordingHazardNotifier,
)

__version__ = "0.1.0"

__all__ = [
    "CargoFleetError",
    "OverfillError",
    "CapacityExceededError",
    "WeightExceededError",
    "Container",
    "LiquidContainer",
    "GasContainer",
    "RefrigeratedContainer",
    "ContainerShip",
    "HazardNotifier",
    "LoggingHazardNotifier",
    "RecordingHazardNotifier",
]
