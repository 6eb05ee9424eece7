"""
Container ship model - carries a bounded, ordered list of containers.

The ship only references its containers; taking one off the ship does not
change the container itself.
"""

from __future__ import annotations

import math
import threading

from cargo_fleet.errors import CapacityExceededError, WeightExceededError
from cargo_fleet.models.container import Container
from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)


class ContainerShip:
    """
    A ship that enforces a container count limit and a total cargo
    weight limit.

    Args:
        max_speed: Maximum speed in knots
        max_container_count: Maximum number of containers on board
        max_weight_capacity: Maximum total cargo mass on board
    """

    def __init__(self, max_speed: float, max_container_count: int, max_weight_capacity: float):
        for what, value in (("Container count limit", max_container_count),
                            ("Weight capacity", max_weight_capacity)):
            if not math.isfinite(value):
                raise ValueError(f"{what} must be a finite number: {value}")
            if value < 0:
                raise ValueError(f"{what} cannot be negative: {value}")
        self.max_speed = float(max_speed)
        self.max_container_count = int(max_container_count)
        self.max_weight_capacity = float(max_weight_capacity)
        self.containers: list[Container] = []
        self._lock = threading.Lock()

    @property
    def total_cargo_mass(self) -> float:
        return sum(c.cargo_mass for c in self.containers)

    @property
    def remaining_weight_capacity(self) -> float:
        return self.max_weight_capacity - self.total_cargo_mass

    @property
    def remaining_slots(self) -> int:
        return self.max_container_count - len(self.containers)

    def load_container(self, container: Container) -> None:
        """
        Put a container on board.

        Both limits are checked before anything is appended.

        Raises:
            CapacityExceededError: if the ship already holds its maximum count
            WeightExceededError: if the total cargo mass would exceed capacity
        """
        with self._lock:
            if len(self.containers) >= self.max_container_count:
                logger.info("Ship full (%d/%d), rejected %s",
                            len(self.containers), self.max_container_count,
                            container.serial_number)
                raise CapacityExceededError(max_container_count=self.max_container_count)

            current = self.total_cargo_mass
            if current + container.cargo_mass > self.max_weight_capacity:
                logger.info("Weight limit %.1f exceeded by %s (%.1f on board + %.1f)",
                            self.max_weight_capacity, container.serial_number,
                            current, container.cargo_mass)
                raise WeightExceededError(
                    current_mass=current,
                    incoming_mass=container.cargo_mass,
                    max_weight_capacity=self.max_weight_capacity,
                )

            self.containers.append(container)
            logger.debug("Loaded %s. Containers: %d/%d",
                         container.serial_number, len(self.containers),
                         self.max_container_count)

    def remove_container(self, container: Container) -> None:
        """Take the given container off the ship. Does nothing if it is not on board."""
        with self._lock:
            for i, c in enumerate(self.containers):
                if c is container:
                    del self.containers[i]
                    return

    def find_container(self, serial_number: str) -> Container | None:
        """Return the first container on board with this serial number, or None."""
        return next((c for c in self.containers if c.serial_number == serial_number), None)

    def unload_container(self, serial_number: str) -> Container | None:
        """
        Remove and return the first container with this serial number.

        Returns:
            The unloaded container, or None if no container matches
        """
        with self._lock:
            container = self.find_container(serial_number)
            if container is not None:
                self.containers.remove(container)
                logger.debug("Unloaded %s", serial_number)
            return container

    def to_dict(self) -> dict:
        return {
            "max_speed": self.max_speed,
            "max_container_count": self.max_container_count,
            "max_weight_capacity": self.max_weight_capacity,
            "total_cargo_mass": self.total_cargo_mass,
            "containers": [c.to_dict() for c in self.containers],
        }
