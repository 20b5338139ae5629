from dataclasses import dataclass, field
from typing import Optional, List

from towerfire.utilities.fire_util import LayoutConstants, PhysicsConstants
from towerfire.exceptions import ValidationError

@dataclass
class IgnitionEvent:
    """A scheduled call to ``ignite(floor, x, y)`` applied once ``tick`` is reached."""
    tick: int
    floor: int
    x: int
    y: int

    def __post_init__(self):
        for name in ("tick", "floor"):
            val = getattr(self, name)
            if not isinstance(val, int) or val < 0:
                raise ValidationError("Ignition values must be non-negative integers",
                                      field=name, value=val)

@dataclass
class WindParams:
    # Carried through config but not consumed by the transition rule
    speed: Optional[float] = 0.0
    direction_deg: Optional[float] = 0.0

@dataclass
class SimParams:
    width: Optional[int] = LayoutConstants.GRID_WIDTH
    height: Optional[int] = LayoutConstants.GRID_HEIGHT
    num_floors: Optional[int] = LayoutConstants.NUM_FLOORS
    num_ticks: Optional[int] = 500
    seed: Optional[int] = None
    vertical_conductivity: Optional[float] = PhysicsConstants.DEFAULT_VERTICAL_CONDUCTIVITY
    wind: Optional[WindParams] = field(default_factory=WindParams)
    stats_interval: Optional[int] = 5
    flush_interval: Optional[int] = 50
    write_logs: Optional[bool] = False
    log_folder: Optional[str] = None
    ignitions: Optional[List[IgnitionEvent]] = field(default_factory=list)

@dataclass
class FloorStats:
    floor_index: int
    danger_level: float # 0-100

@dataclass
class SimulationStats:
    active_fire_cells: int
    total_smoke_mass: float
    average_temperature: float
    floor_stats: List[FloorStats] = field(default_factory=list)

    @property
    def is_critical(self) -> bool:
        return any(f.danger_level > 80 for f in self.floor_stats)
