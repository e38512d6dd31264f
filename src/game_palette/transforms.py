from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Mapping

from .conversions import Hex, hex_to_hsl, hsl_to_hex

StyleFilter = Literal["original", "hypercasual", "stylized", "realistic"]


def adjust_color(hex_str: str, sat_mult: float, bright_mult: float) -> Hex:
    """Scale HSL saturation and lightness; (1, 1) returns the input untouched."""
    if sat_mult == 1 and bright_mult == 1:
        return hex_str
    h, s, l = hex_to_hsl(hex_str)  # noqa: E741
    new_s = min(100.0, max(0.0, s * sat_mult))
    new_l = min(100.0, max(0.0, l * bright_mult))
    return hsl_to_hex(h, new_s, new_l)


def shift_hue(hex_str: str, shift: float) -> Hex:
    h, s, l = hex_to_hsl(hex_str)  # noqa: E741
    return hsl_to_hex((h + shift + 360) % 360, s, l)


def rotate_hue(hex_str: str, degrees: float) -> Hex:
    """Harmony-wheel rotation; same geometry as `shift_hue`."""
    return shift_hue(hex_str, degrees)


@dataclass(frozen=True)
class StylePreset:
    name: str
    saturation: float
    brightness: float


STYLE_PRESETS: Mapping[StyleFilter, StylePreset] = {
    "original": StylePreset("Original", 1.0, 1.0),
    "hypercasual": StylePreset("Hyper", 1.3, 1.1),
    "stylized": StylePreset("Stylized", 1.15, 1.05),
    "realistic": StylePreset("Realistic", 0.9, 0.95),
}


def apply_style_filter(colors: Iterable[str], style: StyleFilter) -> list[Hex]:
    preset = STYLE_PRESETS[style]
    return [adjust_color(c, preset.saturation, preset.brightness) for c in colors]


__all__ = [
    "STYLE_PRESETS",
    "StylePreset",
    "adjust_color",
    "apply_style_filter",
    "rotate_hue",
    "shift_hue",
]
