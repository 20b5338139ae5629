"""towerfire - multi-floor building fire, smoke and structural failure simulation."""

from towerfire.fire_simulator.fire import FireSim
from towerfire.base_classes.control_base import ControlClass
from towerfire.utilities.data_classes import SimParams, IgnitionEvent
from towerfire.exceptions import (
    TowerFireError,
    ConfigurationError,
    ValidationError,
    GridError,
)

__version__ = "0.1.0"

__all__ = [
    "FireSim",
    "ControlClass",
    "SimParams",
    "IgnitionEvent",
    "TowerFireError",
    "ConfigurationError",
    "ValidationError",
    "GridError",
]
