from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Mapping, Tuple

from .conversions import Hex
from .transforms import rotate_hue

HarmonyType = Literal[
    "complementary", "analogous", "triadic", "split-complementary", "tetradic"
]

DEFAULT_LANGUAGE = "en"

# scheme -> (display name, ((member name, angle), ...))
HARMONY_SCHEMES: Mapping[HarmonyType, Tuple[str, Tuple[Tuple[str, int], ...]]] = {
    "complementary": ("Complementary", (("Base", 0), ("Complement", 180))),
    "analogous": ("Analogous", (("Left", -30), ("Base", 0), ("Right", 30))),
    "triadic": ("Triadic", (("Base", 0), ("Second", 120), ("Third", 240))),
    "split-complementary": (
        "Split Comp.",
        (("Base", 0), ("Split 1", 150), ("Split 2", 210)),
    ),
    "tetradic": (
        "Tetradic",
        (("Base", 0), ("Second", 90), ("Third", 180), ("Fourth", 270)),
    ),
}

HARMONY_ANGLES: Mapping[HarmonyType, Tuple[int, ...]] = {
    t: tuple(angle for _, angle in members)
    for t, (_, members) in HARMONY_SCHEMES.items()
}

HARMONY_DESCRIPTIONS: Mapping[Tuple[HarmonyType, str], str] = {
    ("complementary", "ko"): "보색 - 정반대 색상",
    ("analogous", "ko"): "유사색 - 인접한 색상",
    ("triadic", "ko"): "삼각배색 - 120° 간격",
    ("split-complementary", "ko"): "분열보색 - 보색 양옆",
    ("tetradic", "ko"): "사각배색 - 90° 간격",
    ("complementary", "en"): "Complementary - the opposite hue",
    ("analogous", "en"): "Analogous - neighbouring hues",
    ("triadic", "en"): "Triadic - 120° apart",
    ("split-complementary", "en"): "Split complementary - either side of the complement",
    ("tetradic", "en"): "Tetradic - 90° apart",
}


@dataclass(frozen=True)
class HarmonyColor:
    hex: Hex
    name: str
    angle: int

    def to_dict(self) -> dict:
        return {"hex": self.hex, "name": self.name, "angle": self.angle}


@dataclass(frozen=True)
class ColorHarmony:
    type: HarmonyType
    name: str
    description: str
    colors: Tuple[HarmonyColor, ...]

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "name": self.name,
            "description": self.description,
            "colors": [c.to_dict() for c in self.colors],
        }


def describe_harmony(harmony: HarmonyType, language: str = DEFAULT_LANGUAGE) -> str:
    lang = (language or DEFAULT_LANGUAGE).lower()
    try:
        return HARMONY_DESCRIPTIONS[(harmony, lang)]
    except KeyError:
        return HARMONY_DESCRIPTIONS[(harmony, DEFAULT_LANGUAGE)]


def get_harmony(
    hex_str: str, harmony: HarmonyType, language: str = DEFAULT_LANGUAGE
) -> ColorHarmony:
    name, members = HARMONY_SCHEMES[harmony]
    colors = tuple(
        HarmonyColor(hex_str if angle == 0 else rotate_hue(hex_str, angle), member, angle)
        for member, angle in members
    )
    return ColorHarmony(harmony, name, describe_harmony(harmony, language), colors)


def generate_color_harmonies(
    hex_str: str, language: str = DEFAULT_LANGUAGE
) -> List[ColorHarmony]:
    """All five schemes for `hex_str`, in a fixed order."""
    return [get_harmony(hex_str, t, language) for t in HARMONY_SCHEMES]


def get_complementary(hex_str: str) -> Hex:
    return rotate_hue(hex_str, 180)


def get_analogous(hex_str: str) -> Tuple[Hex, Hex]:
    return rotate_hue(hex_str, -30), rotate_hue(hex_str, 30)


__all__ = [
    "ColorHarmony",
    "HARMONY_ANGLES",
    "HARMONY_DESCRIPTIONS",
    "HARMONY_SCHEMES",
    "HarmonyColor",
    "describe_harmony",
    "generate_color_harmonies",
    "get_analogous",
    "get_complementary",
    "get_harmony",
]
