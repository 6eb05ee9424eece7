"""
Hazard notification port.

A container variant calls ``notify_hazard`` when a load crosses a warning
threshold. The call is fire-and-forget: the load goes ahead whatever the
notifier does, and its return value is ignored.

Notifiers are passed into ``Container.load``, so tests can assert on the
serial numbers received without capturing output.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class HazardNotifier(Protocol):
    """Anything that can be told about a hazardous situation in a container."""

    def notify_hazard(self, container_id: str) -> None:
        ...


def hazard_message(category: str, container_id: str) -> str:
    """Human-readable hazard message, e.g. 'Hazardous situation in gas container X'."""
    return f"Hazardous situation in {category} container {container_id}"


class LoggingHazardNotifier:
    """Writes each hazard to the log at WARNING level."""

    def __init__(self, category: str = "cargo"):
        self.category = category

    def notify_hazard(self, container_id: str) -> None:
        logger.warning(hazard_message(self.category, container_id))


class RecordingHazardNotifier:
    """Keeps every container id it is notified about, in call order."""

    def __init__(self):
        self.notified: list[str] = []

    def notify_hazard(self, container_id: str) -> None:
        self.notified.append(container_id)

    def was_notified(self, container_id: str) -> bool:
        return container_id in self.notified

    def clear(self):
        self.notified.clear()
