"""Tests for loading constants and demo data."""

from cargo_fleet.config.constants import (
    CONTAINER_KINDS,
    DEMO_CONTAINERS,
    HAZARDOUS_NOTIFY_RATIO,
    NON_HAZARDOUS_FILL_RATIO,
)


class TestThresholds:
    def test_ratios_in_range(self):
        assert 0 < HAZARDOUS_NOTIFY_RATIO < NON_HAZARDOUS_FILL_RATIO < 1

    def test_demo_kinds_known(self):
        for entry in DEMO_CONTAINERS:
            assert entry["kind"] in CONTAINER_KINDS.values()

    def test_demo_serials_unique(self):
        serials = [e["serial_number"] for e in DEMO_CONTAINERS]
        assert len(serials) == len(set(serials))
