"""Simulation configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass

from rps_arena.types import ConfigError


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable tunables for the arena simulation.

    Attributes:
        population: Number of entities created at init and on every reset.
        radius: Radius shared by every entity.
        placement_bound: Initial positions are drawn from [0, bound) per axis.
            Independent of the arena size the renderer reports later.
        launch_spread: Initial velocity components are drawn from
            [-spread / 2, spread / 2).
        interval: Seconds between scheduled ticks.
        speed: Initial global speed multiplier.
        min_speed: Lower end of the recommended speed range.
        max_speed: Upper end of the recommended speed range.
        speed_floor_factor: Entities slower than ``factor * speed`` are
            rescaled up to exactly that magnitude.
        restitution_min: Lowest restitution drawn for a wall bounce.
        restitution_spread: Width of the restitution draw.
        wall_jitter: Width of the uniform kick added to the other axis
            on a wall bounce, centered on zero.
    """

    population: int = 30
    radius: float = 10.0
    placement_bound: float = 380.0
    launch_spread: float = 3.0
    interval: float = 0.016
    speed: float = 1.0
    min_speed: float = 0.1
    max_speed: float = 2.0
    speed_floor_factor: float = 0.5
    restitution_min: float = 0.95
    restitution_spread: float = 0.1
    wall_jitter: float = 0.5

    def __post_init__(self) -> None:
        if self.population < 0:
            raise ConfigError(f"population must be >= 0, got {self.population}")
        if self.radius <= 0:
            raise ConfigError(f"radius must be positive, got {self.radius}")
        if self.interval <= 0:
            raise ConfigError(f"interval must be positive, got {self.interval}")
        if self.min_speed > self.max_speed:
            raise ConfigError(
                f"min_speed {self.min_speed} exceeds max_speed {self.max_speed}"
            )
        check_speed(self.speed)

    def in_recommended_range(self, speed: float) -> bool:
        return self.min_speed <= speed <= self.max_speed


def check_speed(value: float) -> float:
    """Return ``value`` as a float or raise ConfigError if it is unusable."""
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise ConfigError(f"speed must be a finite non-negative number, got {value}")
    return value
