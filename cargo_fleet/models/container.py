"""
Container models: a plain cargo container and its liquid, gas and
refrigerated variants.

Each variant overrides ``load`` with its own rule and ends by calling the
base ``load``, which enforces the absolute maximum-payload ceiling and
performs the assignment. Because the rule lives on the instance, a
variant held through a ``Container`` reference still applies its own rule.
"""

from __future__ import annotations

import math

from cargo_fleet.config.constants import (
    CONTAINER_KINDS,
    HAZARDOUS_NOTIFY_RATIO,
    NON_HAZARDOUS_FILL_RATIO,
)
from cargo_fleet.errors import OverfillError
from cargo_fleet.services.hazard import HazardNotifier, hazard_message
from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)


def _check_mass(value: float, what: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{what} must be a finite number: {value}")
    if value < 0:
        raise ValueError(f"{what} cannot be negative: {value}")
    return value


class Container:
    """
    A cargo container with fixed geometry and a mutable cargo mass.

    Args:
        serial_number: Unique container identifier
        cargo_mass: Initial cargo mass
        height: Height of the container
        tare_weight: Weight of the empty container
        depth: Depth of the container
        maximum_payload: Absolute upper bound on cargo mass
    """

    kind = CONTAINER_KINDS["PLAIN"]

    def __init__(self, serial_number, cargo_mass, height, tare_weight, depth, maximum_payload):
        self._serial_number = serial_number
        self._height = float(height)
        self._tare_weight = float(tare_weight)
        self._depth = float(depth)
        self._maximum_payload = _check_mass(maximum_payload, "Maximum payload")

        cargo_mass = _check_mass(cargo_mass, "Cargo mass")
        limit = self._fill_limit()
        if cargo_mass > limit:
            raise OverfillError(
                serial_number=serial_number,
                requested_mass=cargo_mass,
                limit=limit,
            )
        self._cargo_mass = cargo_mass

    def _fill_limit(self) -> float:
        """Highest cargo mass this container may hold."""
        return self._maximum_payload

    @property
    def serial_number(self) -> str:
        return self._serial_number

    @property
    def cargo_mass(self) -> float:
        return self._cargo_mass

    @property
    def height(self) -> float:
        return self._height

    @property
    def tare_weight(self) -> float:
        return self._tare_weight

    @property
    def depth(self) -> float:
        return self._depth

    @property
    def maximum_payload(self) -> float:
        return self._maximum_payload

    def load(self, requested_mass: float, notifier: HazardNotifier | None = None) -> None:
        """
        Set the cargo mass to ``requested_mass``.

        Raises:
            OverfillError: if the mass exceeds the maximum payload
            ValueError: if the mass is negative
        """
        requested_mass = _check_mass(requested_mass, "Cargo mass")
        if requested_mass > self._maximum_payload:
            self._reject(requested_mass, self._maximum_payload)
        self._cargo_mass = requested_mass

    def empty(self) -> None:
        """Remove all cargo."""
        self._cargo_mass = 0.0

    def _reject(self, requested_mass: float, limit: float):
        logger.info("Rejected load of %.1f into %s (limit %.1f)",
                    requested_mass, self._serial_number, limit)
        raise OverfillError(
            serial_number=self._serial_number,
            requested_mass=requested_mass,
            limit=limit,
        )

    def to_dict(self) -> dict:
        return {
            "serial_number": self.serial_number,
            "kind": self.kind,
            "cargo_mass": self.cargo_mass,
            "height": self.height,
            "tare_weight": self.tare_weight,
            "depth": self.depth,
            "maximum_payload": self.maximum_payload,
        }

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.serial_number!r}, "
                f"cargo_mass={self.cargo_mass}, maximum_payload={self.maximum_payload})")


class LiquidContainer(Container):
    """
    Container for liquids.

    Hazardous liquids may be filled to the full payload, but loads above
    half of it raise a hazard notification. Non-hazardous liquids are
    capped at 90% of the payload.
    """

    kind = CONTAINER_KINDS["LIQUID"]

    def __init__(self, serial_number, cargo_mass, height, tare_weight, depth,
                 maximum_payload, is_hazardous):
        # set first: the base constructor checks the initial mass against _fill_limit()
        self._is_hazardous = bool(is_hazardous)
        super().__init__(serial_number, cargo_mass, height, tare_weight, depth, maximum_payload)

    @property
    def is_hazardous(self) -> bool:
        return self._is_hazardous

    def _fill_limit(self) -> float:
        if self._is_hazardous:
            return self.maximum_payload
        return self.maximum_payload * NON_HAZARDOUS_FILL_RATIO

    def notify_hazard(self, container_id: str) -> None:
        logger.warning(hazard_message(self.kind, container_id))

    def load(self, requested_mass: float, notifier: HazardNotifier | None = None) -> None:
        """
        Load a liquid, applying the hazardous or non-hazardous rule first.

        A hazard notification is fire-and-forget: if the notifier raises,
        the error is logged and the load carries on.
        """
        requested_mass = _check_mass(requested_mass, "Cargo mass")
        if self._is_hazardous:
            if requested_mass > self.maximum_payload * HAZARDOUS_NOTIFY_RATIO:
                self._notify(notifier or self)
        else:
            cap = self._fill_limit()
            if requested_mass > cap:
                self._reject(requested_mass, cap)
        super().load(requested_mass, notifier)

    def _notify(self, notifier: HazardNotifier) -> None:
        try:
            notifier.notify_hazard(self.serial_number)
        except Exception as e:
            logger.error("Hazard notification for %s failed: %s", self.serial_number, e)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["is_hazardous"] = self.is_hazardous
        return d


class GasContainer(Container):
    """
    Container for gases.

    Uses the plain payload ceiling; it can report hazards through
    ``notify_hazard`` but ``load`` does not currently trigger one.
    """

    kind = CONTAINER_KINDS["GAS"]

    def __init__(self, serial_number, cargo_mass, height, tare_weight, depth,
                 maximum_payload, pressure):
        super().__init__(serial_number, cargo_mass, height, tare_weight, depth, maximum_payload)
        self._pressure = float(pressure)

    @property
    def pressure(self) -> float:
        return self._pressure

    def notify_hazard(self, container_id: str) -> None:
        logger.warning(hazard_message(self.kind, container_id))

    def load(self, requested_mass: float, notifier: HazardNotifier | None = None) -> None:
        requested_mass = _check_mass(requested_mass, "Cargo mass")
        if requested_mass > self.maximum_payload:
            self._reject(requested_mass, self.maximum_payload)
        super().load(requested_mass, notifier)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["pressure"] = self.pressure
        return d


class RefrigeratedContainer(Container):
    """Container for chilled goods. Temperature is descriptive only."""

    kind = CONTAINER_KINDS["REFRIGERATED"]

    def __init__(self, serial_number, cargo_mass, height, tare_weight, depth,
                 maximum_payload, product_type, required_temperature):
        super().__init__(serial_number, cargo_mass, height, tare_weight, depth, maximum_payload)
        self._product_type = product_type
        self._required_temperature = float(required_temperature)

    @property
    def product_type(self) -> str:
        return self._product_type

    @property
    def required_temperature(self) -> float:
        return self._required_temperature

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["product_type"] = self.product_type
        d["required_temperature"] = self.required_temperature
        return d
