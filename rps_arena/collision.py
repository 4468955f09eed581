"""Pure collision functions for equal-mass circles."""
from __future__ import annotations

import math

from rps_arena import vec
from rps_arena.vec import Vec


def circle_vs_circle(
    pos_a: Vec,
    radius_a: float,
    pos_b: Vec,
    radius_b: float,
) -> tuple[Vec, float] | None:
    """Detect circle overlap. Returns (normal A→B, depth) or None.

    Touching circles do not collide. Coincident centers get the normal
    (1, 0), the direction atan2(0, 0) yields.
    """
    dx = pos_b[0] - pos_a[0]
    dy = pos_b[1] - pos_a[1]
    dist = math.hypot(dx, dy)
    r_sum = radius_a + radius_b
    if dist >= r_sum:
        return None
    normal = vec.from_angle(math.atan2(dy, dx))
    return normal, r_sum - dist


def exchange_velocities(vel_a: Vec, vel_b: Vec, normal: Vec) -> tuple[Vec, Vec]:
    """Equal-mass elastic response: swap the normal components, keep tangents."""
    along_a, across_a = vec.to_frame(vel_a, normal)
    along_b, across_b = vec.to_frame(vel_b, normal)
    return (
        vec.from_frame((along_b, across_a), normal),
        vec.from_frame((along_a, across_b), normal),
    )


def separate(pos_a: Vec, pos_b: Vec, normal: Vec, depth: float) -> tuple[Vec, Vec]:
    """Push both circles apart by half the depth each along the normal."""
    push = vec.scale(normal, depth / 2.0)
    return vec.sub(pos_a, push), vec.add(pos_b, push)
