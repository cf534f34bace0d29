"""Small vector helpers and interpolation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0


@overload
def lerp(lhs: Vec2, rhs: Vec2, t: float) -> Vec2: ...


@overload
def lerp(lhs: float, rhs: float, t: float) -> float: ...


def lerp(lhs, rhs, t):
    """Linearly interpolate from ``lhs`` to ``rhs`` by ``t``."""
    if isinstance(lhs, Vec2) and isinstance(rhs, Vec2):
        return Vec2(lerp(lhs.x, rhs.x, t), lerp(lhs.y, rhs.y, t))
    if isinstance(lhs, Vec2) or isinstance(rhs, Vec2):
        raise TypeError("lerp needs two vectors or two numbers")
    return lhs + t * (rhs - lhs)