"""2D vector math helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec = tuple[float, float]

ZERO: Vec = (0.0, 0.0)


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def magnitude(v: Vec) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def normalize(v: Vec) -> Vec:
    mag = magnitude(v)
    if mag == 0.0:
        return ZERO
    return (v[0] / mag, v[1] / mag)


def distance(a: Vec, b: Vec) -> float:
    return magnitude(sub(a, b))


def midpoint(a: Vec, b: Vec) -> Vec:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def heading(v: Vec) -> float:
    """Angle of *v* in radians, measured from the +x axis."""
    return math.atan2(v[1], v[0])


def from_angle(angle: float, length: float = 1.0) -> Vec:
    return (math.cos(angle) * length, math.sin(angle) * length)
