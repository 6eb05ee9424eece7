"""
Core constants for the cargo fleet rules.

Loading thresholds per container type and the demo fleet used by the CLI.
"""

# ---------------------------------------------------------------------------
# Liquid loading thresholds, as a fraction of maximum payload
# ---------------------------------------------------------------------------
# Hazardous liquids may fill up to the full payload, but anything above
# this ratio triggers a hazard notification.
HAZARDOUS_NOTIFY_RATIO = 0.5

# Non-hazardous liquids are hard-capped at this ratio.
NON_HAZARDOUS_FILL_RATIO = 0.9

# ---------------------------------------------------------------------------
# Container categories
# ---------------------------------------------------------------------------
CONTAINER_KINDS = {
    "PLAIN":        "plain",
    "LIQUID":       "liquid",
    "GAS":          "gas",
    "REFRIGERATED": "refrigerated",
}

# ---------------------------------------------------------------------------
# Demo fleet: constructor arguments per container plus the mass each one
# is asked to load, and the ship they are boarded onto.
# ---------------------------------------------------------------------------
DEMO_CONTAINERS = [
    {
        "kind": "liquid",
        "serial_number": "KON-L-1",
        "cargo_mass": 0,
        "height": 100,
        "tare_weight": 50,
        "depth": 60,
        "maximum_payload": 500,
        "is_hazardous": True,
        "load": 200,
    },
    {
        "kind": "gas",
        "serial_number": "KON-G-1",
        "cargo_mass": 0,
        "height": 120,
        "tare_weight": 55,
        "depth": 65,
        "maximum_payload": 1000,
        "pressure": 10,
        "load": 1200,
    },
    {
        "kind": "refrigerated",
        "serial_number": "KON-C-1",
        "cargo_mass": 0,
        "height": 110,
        "tare_weight": 52,
        "depth": 62,
        "maximum_payload": 800,
        "product_type": "Bananas",
        "required_temperature": 4,
        "load": 700,
    },
]

DEMO_SHIP = {
    "max_speed": 20,            # knots
    "max_container_count": 10,
    "max_weight_capacity": 10000,
}

DEMO_UNLOAD_SERIAL = "KON-L-1"
