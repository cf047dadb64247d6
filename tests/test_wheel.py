from dataclasses import dataclass

import pytest

from colour_wheel.gamut import ModelResult
from colour_wheel.models import (
    ColourLocation,
    ColourModel,
    ColourOnGradient,
    HSLModel,
    get_model_defaults,
)
from colour_wheel.scaling import GLOBAL_DEFAULTS
from colour_wheel.wheel import generate_wheel, swatch_position


@dataclass(frozen=True)
class ThresholdModel(ColourModel):
    """In gamut up to half distance, out beyond it."""

    def generate_rgb(self, angle, distance, scaling=GLOBAL_DEFAULTS):
        return ModelResult(in_gamut=distance <= 0.5, srgb="#000000")

    def locate_lab(self, lab, scaling=GLOBAL_DEFAULTS):
        return ColourLocation(angle=0.0, distance=0.0, in_model=(0.0, 0.0, 0.0))

    def a_gradient(self, in_model):
        return ColourOnGradient(stop_fn=lambda v: "#000000", position=0.0)

    def b_gradient(self, in_model):
        return ColourOnGradient(stop_fn=lambda v: "#000000", position=0.0)


THRESHOLD = ThresholdModel("T", "Threshold", "test model", "A", "B")


def test_wheel_grid_shape_and_sampling():
    cells = generate_wheel(HSLModel, get_model_defaults(HSLModel), rings=4, slices=6)
    assert len(cells) == 24
    assert {c.angle for c in cells} == {s / 6 for s in range(6)}
    assert {c.distance for c in cells} == {0.25, 0.5, 0.75, 1.0}
    # outer ring at full saturation/lightness
    assert all(c.result.srgb == "#ffffff" for c in cells if c.ring == 3)


def test_wheel_flags_gamut_edges():
    cells = generate_wheel(THRESHOLD, GLOBAL_DEFAULTS, rings=4, slices=3)
    for c in cells:
        assert c.gamut_edge == (c.ring == 2)


def test_first_ring_is_never_an_edge():
    cells = generate_wheel(THRESHOLD, GLOBAL_DEFAULTS, rings=1, slices=5)
    assert not any(c.gamut_edge for c in cells)
    assert all(not c.result.in_gamut for c in cells)


@pytest.mark.parametrize("rings, slices", [(0, 10), (10, 0), (-1, 3)])
def test_wheel_rejects_empty_grid(rings, slices):
    with pytest.raises(ValueError):
        generate_wheel(HSLModel, GLOBAL_DEFAULTS, rings=rings, slices=slices)


def test_cell_as_dict():
    cell = generate_wheel(HSLModel, GLOBAL_DEFAULTS, rings=1, slices=1)[0]
    d = cell.as_dict()
    assert d["sRGB"] == cell.result.srgb
    assert d["inGamut"] is True
    assert d["gamutEdge"] is False


def test_swatch_on_wheel():
    p = swatch_position(ColourLocation(angle=0.25, distance=0.5, in_model=(0, 0, 0)))
    assert p.x == pytest.approx(0.0, abs=1e-12)
    assert p.y == pytest.approx(0.5)
    assert p.marker is None


def test_swatch_outside_is_pinned_to_rim():
    p = swatch_position(ColourLocation(angle=0.5, distance=1.7, in_model=(0, 0, 0)))
    assert p.x == pytest.approx(-1.0)
    assert p.marker == "outside"


def test_swatch_inside_is_pinned_to_centre():
    p = swatch_position(ColourLocation(angle=0.1, distance=-0.2, in_model=(0, 0, 0)))
    assert (p.x, p.y) == (0.0, 0.0)
    assert p.marker == "inside"
