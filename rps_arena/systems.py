"""System factories for the per-tick pipeline.

Each tick runs, in order: motion, walls, speed floor, collisions. Systems
mutate the state in place; later systems see earlier systems' writes.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

from rps_arena import vec
from rps_arena.collision import circle_vs_circle, exchange_velocities, separate
from rps_arena.components import Collision
from rps_arena.config import SimulationConfig
from rps_arena.dominance import convert

if TYPE_CHECKING:
    from rps_arena.state import SimulationState
    from rps_arena.types import System, TickContext


def make_motion_system() -> Callable[["SimulationState", "TickContext"], None]:
    """Explicit Euler step: position += velocity * speed.

    One step per tick, no sub-stepping. Fast entities can tunnel.
    """

    def motion_system(state: SimulationState, ctx: TickContext) -> None:
        for entity in state.entities:
            entity.position = vec.add(
                entity.position, vec.scale(entity.velocity, state.speed)
            )

    return motion_system


def _bounce(
    p: float,
    v: float,
    other_v: float,
    radius: float,
    extent: float,
    ctx: TickContext,
    restitution_min: float,
    restitution_spread: float,
    jitter: float,
) -> tuple[float, float, float]:
    """Resolve one axis against the walls. Returns (p, v, other_v)."""
    low = p - radius <= 0
    if not (low or p + radius >= extent):
        return p, v, other_v
    v = -v * (restitution_min + ctx.random.random() * restitution_spread)
    p = radius if low else extent - radius
    other_v += (ctx.random.random() - 0.5) * jitter
    return p, v, other_v


def make_wall_system(
    restitution_min: float = 0.95,
    restitution_spread: float = 0.1,
    jitter: float = 0.5,
) -> Callable[["SimulationState", "TickContext"], None]:
    """Reflect, clamp and jitter entities touching the arena edges.

    The restitution is drawn fresh per bounce and the other axis gets a
    small random kick, so entities do not settle into repeating paths.
    Both axes are checked every tick; corners bounce twice.
    """

    def wall_system(state: SimulationState, ctx: TickContext) -> None:
        width = ctx.arena.width
        height = ctx.arena.height
        for entity in state.entities:
            x, y = entity.position
            dx, dy = entity.velocity
            r = entity.radius
            x, dx, dy = _bounce(
                x, dx, dy, r, width, ctx,
                restitution_min, restitution_spread, jitter,
            )
            y, dy, dx = _bounce(
                y, dy, dx, r, height, ctx,
                restitution_min, restitution_spread, jitter,
            )
            entity.position = (x, y)
            entity.velocity = (dx, dy)

    return wall_system


def make_speed_floor_system(
    factor: float = 0.5,
) -> Callable[["SimulationState", "TickContext"], None]:
    """Raise any entity slower than ``factor * speed`` to exactly that speed.

    Direction is kept. A stationary entity has no direction, so it gets a
    random one.
    """

    def speed_floor_system(state: SimulationState, ctx: TickContext) -> None:
        floor = factor * state.speed
        for entity in state.entities:
            current = vec.magnitude(entity.velocity)
            if current >= floor:
                continue
            if current == 0.0:
                angle = ctx.random.random() * 2.0 * math.pi
                entity.velocity = vec.from_angle(angle, floor)
            else:
                entity.velocity = vec.scale(entity.velocity, floor / current)

    return speed_floor_system


def resolve_collision(
    state: SimulationState, ctx: TickContext, col: Collision
) -> None:
    """Default response: elastic exchange, separation, then conversion."""
    a = state.entities[col.index_a]
    b = state.entities[col.index_b]
    a.velocity, b.velocity = exchange_velocities(a.velocity, b.velocity, col.normal)
    a.position, b.position = separate(a.position, b.position, col.normal, col.depth)
    a.kind, b.kind = convert(a.kind, b.kind)


def make_collision_system(
    on_collision: Callable[["SimulationState", "TickContext", Collision], None] = resolve_collision,
) -> Callable[["SimulationState", "TickContext"], None]:
    """Detect overlapping pairs. O(n^2), pairs visited as (i, j>i).

    ``on_collision`` runs as soon as a pair is found, before the next pair
    is tested, so later pairs see positions, velocities and kinds already
    changed earlier in the same pass. An entity can convert several times
    in one tick.
    """

    def collision_system(state: SimulationState, ctx: TickContext) -> None:
        entities = state.entities
        n = len(entities)
        for i in range(n):
            for j in range(i + 1, n):
                a = entities[i]
                b = entities[j]
                result = circle_vs_circle(a.position, a.radius, b.position, b.radius)
                if result is not None:
                    normal, depth = result
                    on_collision(state, ctx, Collision(i, j, normal, depth))

    return collision_system


def default_systems(config: SimulationConfig | None = None) -> list[System]:
    """The built-in pipeline in tick order."""
    if config is None:
        config = SimulationConfig()
    return [
        make_motion_system(),
        make_wall_system(
            config.restitution_min, config.restitution_spread, config.wall_jitter
        ),
        make_speed_floor_system(config.speed_floor_factor),
        make_collision_system(resolve_collision),
    ]
