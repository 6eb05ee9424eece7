"""
Models package - contains domain models (containers and the ship that carries them)
"""

from .container import Container, GasContainer, LiquidContainer, RefrigeratedContainer
from .ship import ContainerShip

__all__ = [
    "Container",
    "LiquidContainer",
    "GasContainer",
    "RefrigeratedContainer",
    "ContainerShip",
]
