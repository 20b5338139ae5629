from dataclasses import dataclass, asdict

@dataclass
class StatsLogEntry:
    timestamp: int
    active_fire_cells: int
    total_smoke_mass: float
    average_temperature: float
    critical: bool

    def to_dict(self):
        return asdict(self)

@dataclass
class FloorLogEntry:
    timestamp: int
    floor_index: int
    danger_level: float

    def to_dict(self):
        return asdict(self)

@dataclass
class IgnitionLogEntry:
    timestamp: int
    floor: int
    x: int
    y: int
    chimney: bool

    def to_dict(self):
        return asdict(self)
