# cvd.py – dichromacy simulation after Viénot, Brettel & Mollon (1999)
#   - sRGB decoded to linear light with the IEC 61966-2-1 piecewise curve
#   - one 3×3 matrix per deficiency, applied in linear sRGB
#   - re-encoded, clamped to [0,1], rounded half-up to 8 bits

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal, Mapping

import numpy as np

from .conversions import Hex, hex_to_rgb, rgb_to_hex

log = logging.getLogger(__name__)

ColorBlindnessType = Literal["none", "protanopia", "deuteranopia", "tritanopia"]

# --- constants ---------------------------------------------------------------
_GAMMA = 2.4
_DECODE_TH = 0.04045
_ENCODE_TH = 0.0031308

# Coefficients are part of the published model; do not tune.
CVD_MATRICES: Mapping[str, np.ndarray] = {
    "protanopia": np.array(
        [
            [0.152286, 1.052583, -0.204868],
            [0.114503, 0.786281, 0.099216],
            [-0.003882, -0.048116, 1.051998],
        ]
    ),
    "deuteranopia": np.array(
        [
            [0.367322, 0.860646, -0.227968],
            [0.280085, 0.672501, 0.047413],
            [-0.011820, 0.042940, 0.968881],
        ]
    ),
    "tritanopia": np.array(
        [
            [1.255528, -0.076749, -0.178779],
            [-0.078411, 0.930809, 0.147602],
            [0.004733, 0.691367, 0.303900],
        ]
    ),
}


@dataclass(frozen=True)
class ColorBlindnessInfo:
    type: ColorBlindnessType
    label: str
    short_label: str
    description: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "label": self.label,
            "shortLabel": self.short_label,
            "description": self.description,
        }


COLOR_BLINDNESS_TYPES: tuple[ColorBlindnessInfo, ...] = (
    ColorBlindnessInfo("none", "Normal", "Off", "Normal vision"),
    ColorBlindnessInfo("protanopia", "Protan", "P", "Red-blind"),
    ColorBlindnessInfo("deuteranopia", "Deutan", "D", "Green-blind"),
    ColorBlindnessInfo("tritanopia", "Tritan", "T", "Blue-blind"),
)


# --- companding --------------------------------------------------------------
def srgb_to_linear(v: np.ndarray) -> np.ndarray:
    """8-bit sRGB channels -> linear light in [0,1]."""
    c = np.asarray(v, np.float64) / 255.0
    return np.where(c <= _DECODE_TH, c / 12.92, ((c + 0.055) / 1.055) ** _GAMMA)


def linear_to_srgb(v: np.ndarray) -> np.ndarray:
    """Linear light -> 8-bit sRGB channels (clamped, round half-up)."""
    c = np.clip(np.asarray(v, np.float64), 0.0, 1.0)
    enc = np.where(c <= _ENCODE_TH, c * 12.92, 1.055 * np.power(c, 1 / _GAMMA) - 0.055)
    return np.floor(enc * 255.0 + 0.5).astype(np.int64)


# --- public ------------------------------------------------------------------
def simulate_color_blindness(hex_str: str, cvd_type: ColorBlindnessType) -> Hex:
    if cvd_type == "none":
        return hex_str
    matrix = CVD_MATRICES.get(cvd_type)
    if matrix is None:
        log.debug("unknown deficiency %r, returning input", cvd_type)
        return hex_str

    lin = srgb_to_linear(tuple(hex_to_rgb(hex_str)))
    r, g, b = linear_to_srgb(matrix @ lin)
    return rgb_to_hex(int(r), int(g), int(b))


def simulate_palette(colors: Iterable[str], cvd_type: ColorBlindnessType) -> list[Hex]:
    return [simulate_color_blindness(c, cvd_type) for c in colors]


__all__ = [
    "COLOR_BLINDNESS_TYPES",
    "CVD_MATRICES",
    "ColorBlindnessInfo",
    "linear_to_srgb",
    "simulate_color_blindness",
    "simulate_palette",
]
