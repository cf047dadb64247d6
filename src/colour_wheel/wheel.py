from __future__ import annotations

import logging
from dataclasses import dataclass
from math import cos, pi, sin
from typing import Literal, Optional

from .gamut import ModelResult
from .models import ColourLocation, ColourModel
from .scaling import RadialScaling

log = logging.getLogger(__name__)

Marker = Literal["inside", "outside"]


@dataclass(frozen=True)
class WheelCell:
    slice: int
    ring: int
    angle: float
    distance: float
    result: ModelResult
    # in-gamut flipped between the previous ring and this one
    gamut_edge: bool = False

    def as_dict(self) -> dict[str, object]:
        return {
            "slice": self.slice,
            "ring": self.ring,
            "angle": self.angle,
            "distance": self.distance,
            "gamutEdge": self.gamut_edge,
            **self.result.as_dict(),
        }


@dataclass(frozen=True)
class SwatchPlacement:
    x: float
    y: float
    marker: Optional[Marker] = None


def generate_wheel(
    model: ColourModel,
    scaling: RadialScaling,
    rings: int = 10,
    slices: int = 60,
) -> list[WheelCell]:
    """
    Sample the model on a rings × slices polar grid.

    Angles run [0, 1) but distances run (0, 1]: the outermost ring always
    shows the full-scale colour.
    """
    if rings < 1 or slices < 1:
        raise ValueError("rings and slices must be ≥ 1")
    log.debug("Sampling %s wheel: %d rings × %d slices", model.code, rings, slices)

    cells: list[WheelCell] = []
    for s in range(slices):
        angle = s / slices
        prev_in_gamut: Optional[bool] = None
        for r in range(rings):
            distance = (r + 1) / rings
            result = model.generate_rgb(angle, distance, scaling)
            edge = prev_in_gamut is not None and result.in_gamut != prev_in_gamut
            cells.append(WheelCell(s, r, angle, distance, result, edge))
            prev_in_gamut = result.in_gamut
    return cells


def swatch_position(location: ColourLocation) -> SwatchPlacement:
    """Place a located colour in [-1, 1]², flagging ones off the wheel."""
    d = max(0.0, min(1.0, location.distance))
    theta = location.angle * 2.0 * pi
    marker: Optional[Marker] = None
    if location.distance < 0.0:
        marker = "inside"
    elif location.distance > 1.0:
        marker = "outside"
    return SwatchPlacement(x=d * cos(theta), y=d * sin(theta), marker=marker)


__all__ = ["WheelCell", "SwatchPlacement", "generate_wheel", "swatch_position"]
