#!/usr/bin/env python3
"""
Cargo Fleet - CLI Entry Point

Builds the demo containers and ship, loads cargo, puts containers on
board, unloads one and prints the resulting manifest.

Usage:
    python main.py                          # Run the demo scenario
    python main.py --unload KON-G-1         # Unload a different container
    python main.py --max-containers 2       # Tighter ship count limit
    python main.py --max-weight 500         # Tighter ship weight limit
    python main.py --verbose                # Debug logging
"""

import argparse
import logging
import sys

from cargo_fleet.config.constants import DEMO_CONTAINERS, DEMO_SHIP, DEMO_UNLOAD_SERIAL
from cargo_fleet.errors import CapacityExceededError, OverfillError, WeightExceededError
from cargo_fleet.models import (
    Container,
    ContainerShip,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)
from cargo_fleet.services.hazard import RecordingHazardNotifier
from cargo_fleet.utils.logger import get_logger, set_package_level

logger = get_logger("cargo_fleet.cli")

CONTAINER_CLASSES = {
    "plain": Container,
    "liquid": LiquidContainer,
    "gas": GasContainer,
    "refrigerated": RefrigeratedContainer,
}

EXTRA_FIELDS = {
    "plain": (),
    "liquid": ("is_hazardous",),
    "gas": ("pressure",),
    "refrigerated": ("product_type", "required_temperature"),
}


def build_container(entry: dict) -> Container:
    """Construct a container from a DEMO_CONTAINERS-style entry."""
    kind = entry["kind"]
    cls = CONTAINER_CLASSES.get(kind)
    if cls is None:
        raise ValueError(f"Unknown container kind: {kind}")
    args = [
        entry["serial_number"],
        entry.get("cargo_mass", 0),
        entry["height"],
        entry["tare_weight"],
        entry["depth"],
        entry["maximum_payload"],
    ]
    args.extend(entry[name] for name in EXTRA_FIELDS[kind])
    return cls(*args)


def load_cargo(containers, requests, notifier):
    """Load each container with its requested mass, reporting overfills."""
    for container in containers:
        mass = requests.get(container.serial_number)
        if mass is None:
            continue
        try:
            container.load(mass, notifier)
            print(f"  {container.serial_number}: loaded {mass:g}")
        except OverfillError as e:
            logger.debug("Overfill on %s: %s", container.serial_number, e)
            print(f"  {container.serial_number}: Overfill Exception: {e.message}")


def board_containers(ship, containers):
    """Put containers on the ship, reporting capacity and weight rejections."""
    for container in containers:
        try:
            ship.load_container(container)
            print(f"  {container.serial_number}: on board")
        except (CapacityExceededError, WeightExceededError) as e:
            logger.debug("Boarding rejected for %s: %s", container.serial_number, e)
            print(f"  {container.serial_number}: Invalid Operation Exception: {e.message}")


def print_manifest(ship):
    manifest = ship.to_dict()
    print()
    print(f"{'Serial':<12} {'Kind':<14} {'Mass':>8} {'Payload':>9}")
    print("-" * 46)
    for c in manifest["containers"]:
        print(f"{c['serial_number']:<12} {c['kind']:<14} "
              f"{c['cargo_mass']:>8.1f} {c['maximum_payload']:>9.1f}")
    print("-" * 46)
    print(f"Containers: {len(manifest['containers'])}/{manifest['max_container_count']} | "
          f"Mass: {manifest['total_cargo_mass']:.1f}/{manifest['max_weight_capacity']:.1f}")


def run_demo(args) -> ContainerShip:
    """Compose the demo fleet and drive it through load, board and unload."""
    notifier = RecordingHazardNotifier()
    containers = [build_container(entry) for entry in DEMO_CONTAINERS]
    requests = {entry["serial_number"]: entry["load"] for entry in DEMO_CONTAINERS}

    print("=== Loading cargo ===")
    load_cargo(containers, requests, notifier)
    for serial in notifier.notified:
        print(f"  Hazard notification: {serial}")

    ship = ContainerShip(
        max_speed=DEMO_SHIP["max_speed"],
        max_container_count=(args.max_containers if args.max_containers is not None
                             else DEMO_SHIP["max_container_count"]),
        max_weight_capacity=(args.max_weight if args.max_weight is not None
                             else DEMO_SHIP["max_weight_capacity"]),
    )

    print()
    print("=== Boarding containers ===")
    board_containers(ship, containers)

    print()
    print("=== Unloading ===")
    unloaded = ship.unload_container(args.unload)
    if unloaded is not None:
        print(f"Container {unloaded.serial_number} unloaded successfully.")
    else:
        print("Container not found on the ship.")

    print_manifest(ship)
    return ship


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Cargo Fleet - container loading and ship capacity demo",
    )
    parser.add_argument(
        "--unload", default=DEMO_UNLOAD_SERIAL,
        help=f"Serial number to unload (default: {DEMO_UNLOAD_SERIAL})",
    )
    parser.add_argument("--max-containers", type=int, default=None,
                        help="Override the ship's container count limit")
    parser.add_argument("--max-weight", type=float, default=None,
                        help="Override the ship's weight capacity")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        set_package_level(logging.DEBUG)

    try:
        run_demo(args)
    except ValueError as e:
        logger.error("Demo aborted: %s", e)
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
