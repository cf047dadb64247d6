# projection.py – wheel angle ⇄ point on the unit circle / unit square
#   - angles are in turns, [0, 1), counter-clockwise from +x
#   - ray_project: linear ray from the origin onto the 2×2 square perimeter
#   - eliptical_disc_project: elliptical grid (Fernandez–Guasti style) mapping
#   - no_projection: plain unit circle

from __future__ import annotations

from math import atan2, cos, pi, sin, sqrt, tan
from typing import Callable, Tuple

Point = Tuple[float, float]
Projection = Callable[[float], Point]

_TAU = 2.0 * pi
_TWO_SQRT_TWO = 2.0 * sqrt(2.0)


def normalize_angle(angle: float) -> float:
    """Wrap any real angle (in turns) into [0, 1)."""
    a = angle % 1.0
    # -1e-18 % 1.0 == 1.0 in floating point
    return 0.0 if a >= 1.0 else a


def clamped_reciprocal(t: float) -> float:
    """min(1, 1/t) for t ≥ 0, with 1/0 read as +inf (→ 1).

    tan() never reaches infinity at a quarter turn – it peaks at ~1.6e16 –
    so the clamp is the only place the singular angles need handling.
    """
    if t <= 0.0:
        return 1.0
    return min(1.0, 1.0 / t)


def _clamp1(v: float) -> float:
    return -1.0 if v < -1.0 else 1.0 if v > 1.0 else v


def no_projection(angle: float) -> Point:
    a = normalize_angle(angle) * _TAU
    return cos(a), sin(a)


def ray_project(angle: float) -> Point:
    """
    Project a wheel angle onto the perimeter of the square [-1, 1]².

    Works in the first quadrant and rotates the result by whole quarter
    turns, so max(|x|, |y|) == 1 for every angle.
    """
    angle = normalize_angle(angle)
    tan_angle = tan((angle % 0.25) * _TAU)
    u = clamped_reciprocal(tan_angle)
    v = min(1.0, tan_angle)
    if angle < 0.25:
        x, y = u, v
    elif angle < 0.5:
        x, y = -v, u
    elif angle < 0.75:
        x, y = -u, -v
    else:
        x, y = v, -u
    return _clamp1(x), _clamp1(y)


def ray_unproject(x: float, y: float) -> float:
    """Angle (turns) of any point; only the direction matters."""
    if x == 0.0:
        if y > 0.0:
            return 0.25
        if y < 0.0:
            return 0.75
        return 0.0
    return normalize_angle(atan2(y, x) / _TAU)


def eliptical_disc_project(angle: float) -> Point:
    """
    Elliptical grid mapping of the unit-circle point at `angle` onto the
    unit square. Agrees with ray_project on every eighth of a turn and lands
    on the square perimeter everywhere else too.
    """
    a = normalize_angle(angle) * _TAU
    u = cos(a)
    v = sin(a)
    u2 = u * u
    v2 = v * v
    # These should bottom out at exactly zero but rounding can leave them at
    # -1e-16, and sqrt of that raises.
    xa = max(2.0 + u2 - v2 + _TWO_SQRT_TWO * u, 0.0)
    xb = max(2.0 + u2 - v2 - _TWO_SQRT_TWO * u, 0.0)
    ya = max(2.0 - u2 + v2 + _TWO_SQRT_TWO * v, 0.0)
    yb = max(2.0 - u2 + v2 - _TWO_SQRT_TWO * v, 0.0)
    x = (sqrt(xa) - sqrt(xb)) / 2.0
    y = (sqrt(ya) - sqrt(yb)) / 2.0
    return _clamp1(x), _clamp1(y)


def chebyshev_radius(x: float, y: float) -> float:
    """Scale of a point relative to the square perimeter ray_project uses."""
    return max(abs(x), abs(y))


def euclidean_radius(x: float, y: float) -> float:
    return sqrt(x * x + y * y)


__all__ = [
    "Point",
    "Projection",
    "normalize_angle",
    "clamped_reciprocal",
    "no_projection",
    "ray_project",
    "ray_unproject",
    "eliptical_disc_project",
    "chebyshev_radius",
    "euclidean_radius",
]
