"""Colour models: how a wheel position maps to a colour and back.

A model turns (angle, distance) into a displayable colour and locates a
reference Lab colour back onto the wheel. Two shapes cover the catalog:

PolarModel
    The wheel angle *is* the model's hue (optionally rotated), distance
    drives the two secondary parameters through a RadialScaling.
CartesianModel
    The wheel angle is projected onto Lab's a*/b* plane; distance drives
    lightness and the a*/b* extent.

Models are immutable and stateless, so the ALL_MODELS catalog is shared
freely between threads.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional, Sequence, Tuple

from . import spaces
from .gamut import Hex, ModelResult, rgb_to_clamped_hex, rgb_to_result
from .projection import (
    Projection,
    chebyshev_radius,
    euclidean_radius,
    no_projection,
    normalize_angle,
    ray_project,
    ray_unproject,
)
from .scaling import (
    GLOBAL_DEFAULTS,
    RadialScaling,
    ScaleOverrides,
    scale_ab,
    unscale_ab,
)

log = logging.getLogger(__name__)

Triplet = Tuple[float, float, float]
ToRGB = Callable[[float, float, float], Triplet]  # (hue°, a, b) → 0–255 RGB
FromLab = Callable[[Sequence[float]], Triplet]  # Lab → (hue°, a, b)

GRADIENT_STOPS = 11

# HSx spaces put yellow at 60°, Lab/CAM spaces near 90°: rotate them into line.
HSX_HUE_OFFSET = 330.0


@dataclass(frozen=True)
class ColourLocation:
    angle: float
    distance: float
    in_model: Triplet
    a_delta: float = 0.0
    b_delta: float = 0.0

    @property
    def on_wheel(self) -> bool:
        return 0.0 <= self.distance <= 1.0

    def as_dict(self) -> dict[str, object]:
        return {
            "angle": self.angle,
            "distance": self.distance,
            "inModel": list(self.in_model),
            "aDelta": self.a_delta,
            "bDelta": self.b_delta,
        }


@dataclass(frozen=True)
class ColourOnGradient:
    """One axis of a located colour: a gradient and where the colour sits on it.

    `stop_fn` and `position` are both in the axis's native units. The
    gradient runs from 0 to `extent` (100 unless the axis is scaled up, e.g.
    chroma 0–150). `position` is not clamped; beyond `extent` is "off the
    scale".
    """

    stop_fn: Callable[[float], Hex]
    position: float
    extent: float = 100.0

    def stops(self, n: int = GRADIENT_STOPS) -> list[Hex]:
        if n < 2:
            raise ValueError("n must be ≥ 2")
        step = self.extent / (n - 1)
        return [self.stop_fn(i * step) for i in range(n)]


@dataclass(frozen=True)
class ColourModel(ABC):
    code: str
    name: str
    description: str
    a_label: str
    b_label: str
    scale_defaults: ScaleOverrides = field(default_factory=ScaleOverrides)

    # Only hue-rotating models can sweep the hue on its own; callers check
    # for None before calling.
    angle_gradient: ClassVar[Optional[Callable[[Triplet], ColourOnGradient]]] = None

    @abstractmethod
    def generate_rgb(
        self, angle: float, distance: float, scaling: RadialScaling = GLOBAL_DEFAULTS
    ) -> ModelResult:
        raise NotImplementedError

    @abstractmethod
    def locate_lab(
        self, lab: Sequence[float], scaling: RadialScaling = GLOBAL_DEFAULTS
    ) -> ColourLocation:
        raise NotImplementedError

    @abstractmethod
    def a_gradient(self, in_model: Triplet) -> ColourOnGradient:
        raise NotImplementedError

    @abstractmethod
    def b_gradient(self, in_model: Triplet) -> ColourOnGradient:
        raise NotImplementedError

    @property
    def has_angle_gradient(self) -> bool:
        return self.angle_gradient is not None


@dataclass(frozen=True)
class PolarModel(ColourModel):
    """
    Hue from the wheel angle, (a, b) from distance.

    in_model is (native hue°, native a, native b); scaled parameters become
    native values by multiplying with the axis factor. Gradients work in
    native values.
    """

    to_rgb: ToRGB = field(default=spaces.hsl_to_rgb, repr=False)
    from_lab: FromLab = field(default=spaces.lab_to_hsl, repr=False)
    hue_offset: float = 0.0
    a_factor: float = 1.0
    b_factor: float = 1.0
    gamut_complete: bool = False

    def _hue(self, angle: float) -> float:
        return (normalize_angle(angle) * 360.0 + self.hue_offset) % 360.0

    def _angle(self, hue: float) -> float:
        return normalize_angle(((hue - self.hue_offset) % 360.0) / 360.0)

    def _render(self, h: float, a: float, b: float) -> ModelResult:
        rgb = self.to_rgb(h, a, b)
        if self.gamut_complete:
            return ModelResult(in_gamut=True, srgb=rgb_to_clamped_hex(rgb))
        return rgb_to_result(rgb)

    def generate_rgb(
        self, angle: float, distance: float, scaling: RadialScaling = GLOBAL_DEFAULTS
    ) -> ModelResult:
        ab = scale_ab(distance, scaling)
        return self._render(self._hue(angle), ab.a * self.a_factor, ab.b * self.b_factor)

    def locate_lab(
        self, lab: Sequence[float], scaling: RadialScaling = GLOBAL_DEFAULTS
    ) -> ColourLocation:
        h, a, b = self.from_lab(lab)
        found = unscale_ab(scaling, a=a / self.a_factor, b=b / self.b_factor)
        return ColourLocation(
            angle=self._angle(h),
            distance=found.distance,
            in_model=(h, a, b),
            a_delta=found.a_delta * self.a_factor,
            b_delta=found.b_delta * self.b_factor,
        )

    def a_gradient(self, in_model: Triplet) -> ColourOnGradient:
        h, a, b = in_model
        return ColourOnGradient(
            stop_fn=lambda v: self._render(h, v, b).srgb,
            position=a,
            extent=100.0 * self.a_factor,
        )

    def b_gradient(self, in_model: Triplet) -> ColourOnGradient:
        h, a, b = in_model
        return ColourOnGradient(
            stop_fn=lambda v: self._render(h, a, v).srgb,
            position=b,
            extent=100.0 * self.b_factor,
        )

    def angle_gradient(self, in_model: Triplet) -> ColourOnGradient:  # type: ignore[override]
        """Sweep the wheel angle (in percent of a turn) with a and b held."""
        h, a, b = in_model
        return ColourOnGradient(
            stop_fn=lambda v: self._render(self._hue(v / 100.0), a, b).srgb,
            position=self._angle(h) * 100.0,
        )


@dataclass(frozen=True)
class CartesianModel(ColourModel):
    """
    Lab with the wheel angle projected onto the a*/b* plane.

    a drives L*, b drives the a*/b* extent of the projected point, so
    in_model is plain (L*, a*, b*). There is no hue axis to sweep.
    """

    projection: Projection = field(default=ray_project, repr=False)
    radius: Callable[[float, float], float] = field(default=chebyshev_radius, repr=False)
    a_factor: float = 1.0
    b_factor: float = 1.0

    def _render(self, L: float, a_star: float, b_star: float) -> ModelResult:
        return rgb_to_result(spaces.lab_to_rgb((L, a_star, b_star)))

    def generate_rgb(
        self, angle: float, distance: float, scaling: RadialScaling = GLOBAL_DEFAULTS
    ) -> ModelResult:
        ab = scale_ab(distance, scaling)
        x, y = self.projection(angle)
        extent = ab.b * self.b_factor
        return self._render(ab.a * self.a_factor, x * extent, y * extent)

    def locate_lab(
        self, lab: Sequence[float], scaling: RadialScaling = GLOBAL_DEFAULTS
    ) -> ColourLocation:
        L, a_star, b_star = (float(v) for v in lab)
        extent = self.radius(a_star, b_star)
        found = unscale_ab(scaling, a=L / self.a_factor, b=extent / self.b_factor)
        return ColourLocation(
            angle=ray_unproject(a_star, b_star),
            distance=found.distance,
            in_model=(L, a_star, b_star),
            a_delta=found.a_delta * self.a_factor,
            b_delta=found.b_delta * self.b_factor,
        )

    def a_gradient(self, in_model: Triplet) -> ColourOnGradient:
        L, a_star, b_star = in_model
        return ColourOnGradient(
            stop_fn=lambda v: self._render(v, a_star, b_star).srgb,
            position=L,
            extent=100.0 * self.a_factor,
        )

    def b_gradient(self, in_model: Triplet) -> ColourOnGradient:
        L, a_star, b_star = in_model
        extent = self.radius(a_star, b_star)
        # A neutral colour has no direction to extend along: the gradient is flat.
        dx, dy = (a_star / extent, b_star / extent) if extent > 0.0 else (0.0, 0.0)

        def stop(v: float) -> Hex:
            return self._render(L, dx * v, dy * v).srgb

        return ColourOnGradient(
            stop_fn=stop, position=extent, extent=100.0 * self.b_factor
        )


# ----------------------------- catalog ---------------------------------------

HSLModel = PolarModel(
    code="HSL",
    name="Hue/Saturation/Lightness",
    description="Hue/Saturation/Lightness, hue rotated so yellow sits where it does in CIELAB",
    a_label="Saturation",
    b_label="Lightness",
    to_rgb=spaces.hsl_to_rgb,
    from_lab=spaces.lab_to_hsl,
    hue_offset=HSX_HUE_OFFSET,
    gamut_complete=True,
)

HSVModel = PolarModel(
    code="HSV",
    name="Hue/Saturation/Value",
    description="Hue/Saturation/Value, hue rotated so yellow sits where it does in CIELAB",
    a_label="Saturation",
    b_label="Value",
    to_rgb=spaces.hsv_to_rgb,
    from_lab=spaces.lab_to_hsv,
    hue_offset=HSX_HUE_OFFSET,
    gamut_complete=True,
)

HCGModel = PolarModel(
    code="HCG",
    name="Hue/Chroma/Greyness",
    description="Hue/Chroma/Greyness (an inverted value: 100 is fully grey, 0 is no grey)",
    a_label="Chroma",
    b_label="Greyness",
    scale_defaults=ScaleOverrides(b_max=0.0),
    to_rgb=spaces.hcg_to_rgb,
    from_lab=spaces.lab_to_hcg,
    hue_offset=HSX_HUE_OFFSET,
    gamut_complete=True,
)

HWBModel = PolarModel(
    code="HWB",
    name="Hue/White/Black",
    description="Hue/Whiteness/Blackness, hue rotated so yellow sits where it does in CIELAB",
    a_label="White",
    b_label="Black",
    scale_defaults=ScaleOverrides(a_max=0.0),
    to_rgb=spaces.hwb_to_rgb,
    from_lab=spaces.lab_to_hwb,
    hue_offset=HSX_HUE_OFFSET,
    gamut_complete=True,
)

JChModel = PolarModel(
    code="JCh",
    name="CIECAM02 JCh",
    description="CIECAM02 lightness/chroma/hue (average surround, D65). Chroma runs to 120 at 100%",
    a_label="Lightness",
    b_label="Chroma",
    to_rgb=spaces.jch_to_rgb,
    from_lab=spaces.lab_to_jch,
    b_factor=1.2,
)

HCLModel = PolarModel(
    code="HCL",
    name="CIELAB in polar coordinates",
    description="CIELAB lightness/chroma/hue (LCh, D65). Chroma runs to 150 at 100%",
    a_label="Chroma",
    b_label="Lightness",
    to_rgb=spaces.hcl_to_rgb,
    from_lab=spaces.lab_to_hcl,
    a_factor=1.5,
)

LABModel = CartesianModel(
    code="LAB",
    name="CIELAB",
    description=(
        "CIELAB (lightness, a*, b*). a* and b* are mapped onto the square by a "
        "linear ray projection, so 45° is (1, 1) and not (1/√2, 1/√2)"
    ),
    a_label="Lightness",
    b_label="a*/b* extent",
    scale_defaults=ScaleOverrides(b_min=100.0, b_max=100.0),
    projection=ray_project,
    radius=chebyshev_radius,
    b_factor=1.28,
)

LABCircleModel = CartesianModel(
    code="LABC",
    name="CIELAB (circular)",
    description="CIELAB (lightness, a*, b*) with a* and b* on a plain circle of constant chroma",
    a_label="Lightness",
    b_label="a*/b* radius",
    scale_defaults=ScaleOverrides(b_min=100.0, b_max=100.0),
    projection=no_projection,
    radius=euclidean_radius,
    b_factor=1.28,
)

ALL_MODELS: Tuple[ColourModel, ...] = (
    HSLModel,
    HSVModel,
    HCGModel,
    HWBModel,
    JChModel,
    LABModel,
    LABCircleModel,
    HCLModel,
)

DEFAULT_MODEL = HSLModel


def get_model_from_code(code: str) -> Optional[ColourModel]:
    """Catalog entry for `code`, or None; an unknown code is not an error."""
    for model in ALL_MODELS:
        if model.code == code:
            return model
    log.debug("No colour model with code %r", code)
    return None


def get_model_defaults(model: ColourModel) -> RadialScaling:
    return model.scale_defaults.apply(GLOBAL_DEFAULTS)


def resolve_scaling(
    model: ColourModel, overrides: Optional[ScaleOverrides] = None
) -> RadialScaling:
    """Global defaults, then the model's defaults, then the caller's values."""
    base = get_model_defaults(model)
    return overrides.apply(base) if overrides is not None else base


def scaling_after_model_change(
    previous: ColourModel, new: ColourModel, current: RadialScaling
) -> RadialScaling:
    """
    Scaling to use when switching models: an untouched (default) scaling
    follows the new model's defaults, a user-adjusted one is kept.
    """
    if previous is new:
        return current
    if current == get_model_defaults(previous):
        return get_model_defaults(new)
    return current


__all__ = [
    "GRADIENT_STOPS",
    "HSX_HUE_OFFSET",
    "ColourLocation",
    "ColourOnGradient",
    "ColourModel",
    "PolarModel",
    "CartesianModel",
    "HSLModel",
    "HSVModel",
    "HCGModel",
    "HWBModel",
    "JChModel",
    "HCLModel",
    "LABModel",
    "LABCircleModel",
    "ALL_MODELS",
    "DEFAULT_MODEL",
    "get_model_from_code",
    "get_model_defaults",
    "resolve_scaling",
    "scaling_after_model_change",
]
