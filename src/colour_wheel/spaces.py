# spaces.py – colour-space conversions used by the wheel models
#   - ColorAide for Lab/LCh (D65), XYZ (D65), sRGB, HSL, HSV, HWB
#   - HCG (hue/chroma/greyness) derived from ColorAide's HSV
#   - colour-science for CIECAM02 JCh under average surround, D65 white
#
# Every function takes and returns plain floats. RGB triplets are on the
# 0–255 scale and are *not* clamped: out-of-gamut values are the signal the
# gamut check relies on. Hues are degrees in [0, 360); an undefined hue
# (achromatic colour) comes back as 0.

from __future__ import annotations

import math
from typing import Sequence, Tuple

import colour
import numpy as np
from coloraide import Color

Triplet = Tuple[float, float, float]

# --- CIECAM02 viewing conditions --------------------------------------------
_XYZ_W = (
    colour.xy_to_XYZ(
        colour.CCS_ILLUMINANTS["CIE 1931 2 Degree Standard Observer"]["D65"]
    )
    * 100.0
)
_L_A = 318.31  # adapting luminance, cd/m²
_Y_B = 20.0  # relative background luminance
_SURROUND = colour.VIEWING_CONDITIONS_CIECAM02["Average"]

_REFERENCE = "lab-d65"


def _finite(v: float, default: float = 0.0) -> float:
    v = float(v)
    return v if math.isfinite(v) else default


def _hue(h: float) -> float:
    return _finite(h) % 360.0


def _to_255(coords: Sequence[float]) -> Triplet:
    r, g, b = (_finite(c) * 255.0 for c in coords)
    return r, g, b


def _lab(lab: Sequence[float]) -> list[float]:
    values = [float(v) for v in lab]
    if len(values) != 3:
        raise ValueError("a Lab colour needs exactly 3 components")
    return values


# --- reference space ---------------------------------------------------------
def lab_to_rgb(lab: Sequence[float]) -> Triplet:
    return _to_255(Color(_REFERENCE, _lab(lab)).convert("srgb").coords())


def rgb_to_lab(rgb: Sequence[float]) -> Triplet:
    r, g, b = (float(v) / 255.0 for v in rgb)
    L, a, b_ = Color("srgb", [r, g, b]).convert(_REFERENCE).coords()
    return _finite(L), _finite(a), _finite(b_)


# --- HSL / HSV / HWB (ColorAide keeps the secondary channels in 0–1) ----------
def _cylinder_to_rgb(space: str, h: float, a: float, b: float) -> Triplet:
    c = Color(space, [h % 360.0, a / 100.0, b / 100.0])
    return _to_255(c.convert("srgb").coords())


def _lab_to_cylinder(space: str, lab: Sequence[float]) -> Triplet:
    h, a, b = Color(_REFERENCE, _lab(lab)).convert(space).coords()
    return _hue(h), _finite(a) * 100.0, _finite(b) * 100.0


def hsl_to_rgb(h: float, s: float, l: float) -> Triplet:
    return _cylinder_to_rgb("hsl", h, s, l)


def lab_to_hsl(lab: Sequence[float]) -> Triplet:
    return _lab_to_cylinder("hsl", lab)


def hsv_to_rgb(h: float, s: float, v: float) -> Triplet:
    return _cylinder_to_rgb("hsv", h, s, v)


def lab_to_hsv(lab: Sequence[float]) -> Triplet:
    return _lab_to_cylinder("hsv", lab)


def hwb_to_rgb(h: float, w: float, b: float) -> Triplet:
    return _cylinder_to_rgb("hwb", h, w, b)


def lab_to_hwb(lab: Sequence[float]) -> Triplet:
    return _lab_to_cylinder("hwb", lab)


# --- HCG ---------------------------------------------------------------------
def hcg_to_rgb(h: float, c: float, g: float) -> Triplet:
    c1 = c / 100.0
    g1 = g / 100.0
    v = c1 + g1 * (1.0 - c1)
    s = c1 / v if v > 0.0 else 0.0
    return _cylinder_to_rgb("hsv", h, s * 100.0, v * 100.0)


def lab_to_hcg(lab: Sequence[float]) -> Triplet:
    h, s, v = _lab_to_cylinder("hsv", lab)
    c1 = (s / 100.0) * (v / 100.0)
    g1 = (v / 100.0 - c1) / (1.0 - c1) if c1 < 1.0 else 0.0
    return h, c1 * 100.0, g1 * 100.0


# --- polar Lab (HCL) -----------------------------------------------------------
def hcl_to_rgb(h: float, c: float, l: float) -> Triplet:
    lch = Color("lch-d65", [l, c, h % 360.0])
    return _to_255(lch.convert("srgb").coords())


def lab_to_hcl(lab: Sequence[float]) -> Triplet:
    L, c, h = Color(_REFERENCE, _lab(lab)).convert("lch-d65").coords()
    return _hue(h), _finite(c), _finite(L)


# --- CIECAM02 JCh ------------------------------------------------------------
def jch_to_rgb(h: float, J: float, C: float) -> Triplet:
    """CIECAM02 JCh → sRGB. J ≤ 0 is black whatever the chroma."""
    if J <= 0.0:
        return 0.0, 0.0, 0.0
    cam = colour.CAM_Specification_CIECAM02(J=J, C=max(C, 0.0), h=h % 360.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        xyz = colour.CIECAM02_to_XYZ(cam, _XYZ_W, _L_A, _Y_B, _SURROUND)
    xyz = np.nan_to_num(np.asarray(xyz, dtype=np.float64) / 100.0)
    return _to_255(Color("xyz-d65", xyz.tolist()).convert("srgb").coords())


def lab_to_jch(lab: Sequence[float]) -> Triplet:
    """Lab → (h, J, C), hue first like the other cylindrical spaces here."""
    xyz = np.asarray(
        Color(_REFERENCE, _lab(lab)).convert("xyz-d65").coords(), dtype=np.float64
    )
    with np.errstate(divide="ignore", invalid="ignore"):
        cam = colour.XYZ_to_CIECAM02(xyz * 100.0, _XYZ_W, _L_A, _Y_B, _SURROUND)
    J = _finite(cam.J)
    C = _finite(cam.C)
    return (_hue(cam.h) if C > 0.0 else 0.0), J, C


__all__ = [
    "Triplet",
    "lab_to_rgb",
    "rgb_to_lab",
    "hsl_to_rgb",
    "lab_to_hsl",
    "hsv_to_rgb",
    "lab_to_hsv",
    "hwb_to_rgb",
    "lab_to_hwb",
    "hcg_to_rgb",
    "lab_to_hcg",
    "hcl_to_rgb",
    "lab_to_hcl",
    "jch_to_rgb",
    "lab_to_jch",
]
