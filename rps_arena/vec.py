"""2D vector math helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec = tuple[float, float]


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def magnitude(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vec, b: Vec) -> float:
    return magnitude(sub(b, a))


def from_angle(angle: float, length: float = 1.0) -> Vec:
    return (math.cos(angle) * length, math.sin(angle) * length)


def to_frame(v: Vec, axis: Vec) -> Vec:
    """Express v in the frame whose x axis is the unit vector ``axis``.

    Returns (along, across): the component along the axis and the
    tangential component.
    """
    cos, sin = axis
    return (v[0] * cos + v[1] * sin, v[1] * cos - v[0] * sin)


def from_frame(v: Vec, axis: Vec) -> Vec:
    """Inverse of to_frame."""
    cos, sin = axis
    return (v[0] * cos - v[1] * sin, v[1] * cos + v[0] * sin)
