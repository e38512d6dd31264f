"""Shadow / highlight ramps.

A ramp is five steps, S2 S1 Base L1 L2. Lightness offsets are spent against
the headroom left between the base lightness and MIN_L / MAX_L, so a ramp
never clips however dark or light the base already is; steps compress near
the extremes instead.

With hue shifting on, shadows lean toward a cool target and highlights toward
a warm one, scaled by the base saturation. A few hue families get different
targets and a hard clamp on the rotated hue (see HUE_GUARDRAILS) because the
plain rule produces muddy results there: darkened warm yellows turn olive,
lightened yellows overshoot into green, lightened blues pick up a yellow cast.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Mapping

from .conversions import Hex, HslColor, hex_to_hsl, hsl_to_hex, round_half_up

Family = Literal["warm_yellow", "yellow", "blue"]

MIN_L = 5.0
MAX_L = 95.0
MAX_OFFSET = 30.0
SPACE_USAGE = 0.5

SHADOW_SAT = 1.1
SHADOW_SAT_WARM_YELLOW = 1.02
HIGHLIGHT_SAT = 0.9

MAX_HUE_SHIFT = 15.0

SHADOW_TARGET = 240.0  # blue
SHADOW_TARGET_WARM_YELLOW = 300.0  # magenta
HIGHLIGHT_TARGET = 60.0  # yellow
HIGHLIGHT_TARGET_BLUE = 190.0  # cyan

# inclusive, degrees; looked up on the base hue
HUE_FAMILIES: Mapping[Family, tuple[float, float]] = {
    "warm_yellow": (35.0, 100.0),
    "yellow": (40.0, 80.0),
    "blue": (180.0, 260.0),
}

# (family, offset sign) -> allowed range for the rotated hue
HUE_GUARDRAILS: Mapping[tuple[Family, int], tuple[float, float]] = {
    ("warm_yellow", -1): (25.0, 70.0),
    ("yellow", 1): (45.0, 65.0),
    ("blue", 1): (185.0, 260.0),
}

# offset, label, full label, hue-shift multiplier
STEPS = (
    (-30, "S2", "Shadow 2", 1.5),
    (-15, "S1", "Shadow 1", 0.75),
    (0, "Base", "Base", 0.0),
    (15, "L1", "Light 1", 0.75),
    (30, "L2", "Light 2", 1.5),
)


@dataclass(frozen=True)
class ColorVariation:
    hex: Hex
    label: str
    full_label: str
    hsl: HslColor

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "label": self.label,
            "fullLabel": self.full_label,
            "hsl": self.hsl.to_dict(),
        }


def in_family(h: float, family: Family) -> bool:
    lo, hi = HUE_FAMILIES[family]
    return lo <= h <= hi


def hue_direction(from_h: float, to_h: float) -> int:
    """
    Sign of the shortest rotation from `from_h` to `to_h`: +1, -1, or 0 when
    already there. Exactly opposite hues rotate forwards.
    """
    diff = (to_h - from_h) % 360.0
    if diff == 0:
        return 0
    return 1 if diff <= 180.0 else -1


def step_lightness(l: float, offset: float) -> float:  # noqa: E741
    if offset < 0:
        new_l = l - (l - MIN_L) * (abs(offset) / MAX_OFFSET) * SPACE_USAGE
    elif offset > 0:
        new_l = l + (MAX_L - l) * (offset / MAX_OFFSET) * SPACE_USAGE
    else:
        new_l = l
    return min(max(new_l, MIN_L), MAX_L)


def step_saturation(s: float, offset: float, warm_yellow: bool = False) -> float:
    if offset < 0:
        return min(s * (SHADOW_SAT_WARM_YELLOW if warm_yellow else SHADOW_SAT), 100.0)
    if offset > 0:
        return s * HIGHLIGHT_SAT
    return s


def guard_hue(hue: float, base_h: float, sign: int) -> float:
    for (family, family_sign), (lo, hi) in HUE_GUARDRAILS.items():
        if family_sign == sign and in_family(base_h, family):
            hue = min(max(hue, lo), hi)
    return hue


def _hue_offsets(h: float, s: float) -> tuple[float, float]:
    """Signed unit hue shift for shadows and for highlights."""
    base_shift = round_half_up(MAX_HUE_SHIFT * min(s / 100.0, 1.0))
    if in_family(h, "warm_yellow"):
        shadow_dir = hue_direction(h, SHADOW_TARGET_WARM_YELLOW)
    else:
        shadow_dir = hue_direction(h, SHADOW_TARGET)
    light_target = HIGHLIGHT_TARGET_BLUE if in_family(h, "blue") else HIGHLIGHT_TARGET
    return shadow_dir * base_shift, hue_direction(h, light_target) * base_shift


def generate_color_variations(
    hex_str: str, use_hue_shift: bool = False
) -> List[ColorVariation]:
    base = hex_to_hsl(hex_str)
    h, s, l = base  # noqa: E741
    warm_yellow = in_family(h, "warm_yellow")
    shadow_shift, light_shift = _hue_offsets(h, s) if use_hue_shift else (0.0, 0.0)

    out: List[ColorVariation] = []
    for offset, label, full_label, mult in STEPS:
        if offset == 0:
            out.append(ColorVariation(hex_str, label, full_label, base))
            continue

        sign = -1 if offset < 0 else 1
        hue_offset = (shadow_shift if sign < 0 else light_shift) * mult
        new_h = (h + hue_offset + 360) % 360
        if hue_offset:
            new_h = guard_hue(new_h, h, sign)
        new_s = step_saturation(s, offset, warm_yellow)
        new_l = step_lightness(l, offset)

        out.append(
            ColorVariation(
                hex=hsl_to_hex(new_h, new_s, new_l),
                label=label,
                full_label=full_label,
                hsl=HslColor(
                    round_half_up(new_h) % 360,
                    round_half_up(new_s),
                    round_half_up(new_l),
                ),
            )
        )
    return out


__all__ = [
    "ColorVariation",
    "HUE_FAMILIES",
    "HUE_GUARDRAILS",
    "generate_color_variations",
    "guard_hue",
    "hue_direction",
    "in_family",
    "step_lightness",
    "step_saturation",
]
