"""
Exceptions raised by container and ship loading rules.

Every error leaves the object it was raised from unchanged, so callers can
recover (for instance by retrying with a smaller mass).
"""

from __future__ import annotations


class CargoFleetError(Exception):
    """Base exception for loading-rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OverfillError(CargoFleetError):
    """Raised when a load request exceeds a container's applicable threshold."""

    def __init__(
        self,
        message: str = "Cargo mass exceeds container's maximum payload.",
        serial_number: str | None = None,
        requested_mass: float = 0.0,
        limit: float = 0.0,
    ):
        super().__init__(message)
        self.serial_number = serial_number
        self.requested_mass = requested_mass
        self.limit = limit


class CapacityExceededError(CargoFleetError):
    """Raised when a ship already holds its maximum number of containers."""

    def __init__(
        self,
        message: str = "Cannot load more containers, ship is full.",
        max_container_count: int = 0,
    ):
        super().__init__(message)
        self.max_container_count = max_container_count


class WeightExceededError(CargoFleetError):
    """Raised when a load would push a ship past its weight capacity."""

    def __init__(
        self,
        message: str = "Cannot load container, weight capacity exceeded.",
        current_mass: float = 0.0,
        incoming_mass: float = 0.0,
        max_weight_capacity: float = 0.0,
    ):
        super().__init__(message)
        self.current_mass = current_mass
        self.incoming_mass = incoming_mass
        self.max_weight_capacity = max_weight_capacity
