"""rps-arena - rock-paper-scissors particle arena on a fixed-interval tick loop."""

from rps_arena.clock import Clock
from rps_arena.components import Collision, Entity
from rps_arena.config import SimulationConfig
from rps_arena.dominance import CYCLE, Kind, beats, convert
from rps_arena.engine import Simulation, advance
from rps_arena.state import SimulationState, spawn_entities
from rps_arena.systems import (
    default_systems,
    make_collision_system,
    make_motion_system,
    make_speed_floor_system,
    make_wall_system,
    resolve_collision,
)
from rps_arena.types import Arena, ConfigError, TickContext

__all__ = [
    "Arena",
    "Clock",
    "Collision",
    "ConfigError",
    "CYCLE",
    "Entity",
    "Kind",
    "Simulation",
    "SimulationConfig",
    "SimulationState",
    "TickContext",
    "advance",
    "beats",
    "convert",
    "default_systems",
    "make_collision_system",
    "make_motion_system",
    "make_speed_floor_system",
    "make_wall_system",
    "resolve_collision",
    "spawn_entities",
]
