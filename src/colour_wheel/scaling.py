from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

# Sub-distance reported by a degenerate (min == max) axis. It carries no
# information, so it only survives when nothing better is available.
_UNDETERMINED = 0.5


@dataclass(frozen=True)
class RadialScaling:
    """Linear mapping of wheel distance [0, 1] onto the A and B parameters.

    No ordering is required: a_min > a_max runs the axis backwards and
    a_min == a_max pins it.
    """

    a_min: float = 0.0
    a_max: float = 100.0
    b_min: float = 0.0
    b_max: float = 100.0

    @property
    def a_fixed(self) -> bool:
        return self.a_min == self.a_max

    @property
    def b_fixed(self) -> bool:
        return self.b_min == self.b_max

    def as_dict(self) -> dict[str, float]:
        return {
            "aMin": self.a_min,
            "aMax": self.a_max,
            "bMin": self.b_min,
            "bMax": self.b_max,
        }


GLOBAL_DEFAULTS = RadialScaling(0.0, 100.0, 0.0, 100.0)


@dataclass(frozen=True)
class ScaleOverrides:
    """A partial RadialScaling; None leaves the underlying value alone."""

    a_min: Optional[float] = None
    a_max: Optional[float] = None
    b_min: Optional[float] = None
    b_max: Optional[float] = None

    def apply(self, base: RadialScaling) -> RadialScaling:
        values = {}
        for f in fields(RadialScaling):
            own = getattr(self, f.name)
            values[f.name] = float(own) if own is not None else getattr(base, f.name)
        return RadialScaling(**values)


@dataclass(frozen=True)
class ScaledAB:
    a: float
    b: float


@dataclass(frozen=True)
class Unscaled:
    distance: float
    a_delta: float = 0.0
    b_delta: float = 0.0


def scale_ab(distance: float, scaling: RadialScaling) -> ScaledAB:
    """Interpolate both parameters at `distance`; extrapolates outside [0, 1]."""
    return ScaledAB(
        a=scaling.a_min + (scaling.a_max - scaling.a_min) * distance,
        b=scaling.b_min + (scaling.b_max - scaling.b_min) * distance,
    )


def _sub_distance(target: float, lo: float, hi: float) -> Optional[float]:
    if lo == hi:
        return None
    return (target - lo) / (hi - lo)


def unscale_ab(
    scaling: RadialScaling,
    a: Optional[float] = None,
    b: Optional[float] = None,
) -> Unscaled:
    """
    Find the wheel distance that best reproduces the target `a` and/or `b`.

    Each supplied, non-degenerate axis is solved on its own; two solutions
    are averaged. The deltas are the part of each target the chosen
    distance cannot reach (0 for an axis that wasn't supplied).
    """
    candidates = []
    if a is not None:
        da = _sub_distance(a, scaling.a_min, scaling.a_max)
        if da is not None:
            candidates.append(da)
    if b is not None:
        db = _sub_distance(b, scaling.b_min, scaling.b_max)
        if db is not None:
            candidates.append(db)

    distance = sum(candidates) / len(candidates) if candidates else _UNDETERMINED

    reachable = scale_ab(distance, scaling)
    return Unscaled(
        distance=distance,
        a_delta=0.0 if a is None else a - reachable.a,
        b_delta=0.0 if b is None else b - reachable.b,
    )


__all__ = [
    "RadialScaling",
    "ScaleOverrides",
    "ScaledAB",
    "Unscaled",
    "GLOBAL_DEFAULTS",
    "scale_ab",
    "unscale_ab",
]
