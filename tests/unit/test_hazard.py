"""Tests for hazard notifiers."""

import pytest

from cargo_fleet.errors import OverfillError
from cargo_fleet.models import LiquidContainer
from cargo_fleet.services.hazard import (
    HazardNotifier,
    LoggingHazardNotifier,
    RecordingHazardNotifier,
    hazard_message,
)


class TestHazardNotifiers:
    def test_message_format(self):
        assert hazard_message("liquid", "KON-L-1") == "Hazardous situation in liquid container KON-L-1"

    def test_recording_notifier(self):
        notifier = RecordingHazardNotifier()
        notifier.notify_hazard("A")
        notifier.notify_hazard("B")
        assert notifier.notified == ["A", "B"]
        assert notifier.was_notified("A")
        assert not notifier.was_notified("C")
        notifier.clear()
        assert notifier.notified == []

    def test_notifiers_satisfy_protocol(self):
        assert isinstance(RecordingHazardNotifier(), HazardNotifier)
        assert isinstance(LoggingHazardNotifier(), HazardNotifier)

    def test_logging_notifier(self, caplog):
        with caplog.at_level("WARNING"):
            LoggingHazardNotifier("liquid").notify_hazard("KON-L-9")
        assert "Hazardous situation in liquid container KON-L-9" in caplog.text

    def test_notifier_return_value_ignored(self):
        class Loud:
            def notify_hazard(self, container_id):
                return "ignored"

        c = LiquidContainer("KON-L-1", 0, 100, 50, 60, 500, True)
        c.load(400, Loud())
        assert c.cargo_mass == 400


class TestFireAndForget:
    def test_failing_notifier_does_not_abort_load(self, caplog):
        class Broken:
            def notify_hazard(self, container_id):
                raise RuntimeError("pager offline")

        c = LiquidContainer("KON-L-1", 0, 100, 50, 60, 500, True)
        with caplog.at_level("ERROR"):
            c.load(400, Broken())
        assert c.cargo_mass == 400
        assert "Hazard notification for KON-L-1 failed: pager offline" in caplog.text

    def test_failing_notifier_still_overfills(self):
        class Broken:
            def notify_hazard(self, container_id):
                raise RuntimeError("pager offline")

        c = LiquidContainer("KON-L-1", 0, 100, 50, 60, 500, True)
        with pytest.raises(OverfillError):
            c.load(600, Broken())
        assert c.cargo_mass == 0
