from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

Hex = str


@dataclass(frozen=True)
class ModelResult:
    in_gamut: bool
    srgb: Hex

    def as_dict(self) -> dict[str, object]:
        return {"inGamut": self.in_gamut, "sRGB": self.srgb}


def rgb_to_clamped_hex(rgb: Sequence[float] | np.ndarray) -> Hex:
    """
    Convert an sRGB triplet on the 0–255 scale to #rrggbb.

    Each channel is clamped on its own before round-to-nearest, so an
    out-of-gamut triplet keeps the in-range channels intact. NaN channels
    come out as 0.
    """
    v = np.nan_to_num(np.asarray(rgb, dtype=np.float64), nan=0.0)
    u8 = np.round(np.clip(v, 0.0, 255.0)).astype(np.uint8)
    return f"#{u8[0]:02x}{u8[1]:02x}{u8[2]:02x}"


def in_srgb_gamut(rgb: Sequence[float] | np.ndarray) -> bool:
    v = np.asarray(rgb, dtype=np.float64)
    return bool(np.all((v >= 0.0) & (v <= 255.0)))


def rgb_to_result(rgb: Sequence[float] | np.ndarray) -> ModelResult:
    """Gamut check plus clamped hex for any unclamped 0–255 triplet."""
    return ModelResult(in_gamut=in_srgb_gamut(rgb), srgb=rgb_to_clamped_hex(rgb))


__all__ = ["Hex", "ModelResult", "rgb_to_clamped_hex", "in_srgb_gamut", "rgb_to_result"]
