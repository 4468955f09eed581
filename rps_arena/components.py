"""Entity record and collision info."""
from __future__ import annotations

from dataclasses import dataclass

from rps_arena.dominance import Kind


@dataclass
class Entity:
    """A circle in the arena. Radius is fixed for the entity's lifetime."""

    position: tuple[float, float]
    velocity: tuple[float, float]
    kind: Kind
    radius: float = 10.0


@dataclass(frozen=True)
class Collision:
    """Collision info passed to callbacks. Indices refer to the state's entity list."""

    index_a: int
    index_b: int
    normal: tuple[float, float]
    depth: float
