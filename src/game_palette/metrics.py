from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .color_cache import ColorCaches
from .conversions import Hex, hex_to_rgb, normalize_hex, resolve_caches, rgb_to_hex, round_half_up

# Rec. 601 luma weights
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114

CONTRAST_THRESHOLD = 0.5

HISTOGRAM_BINS = 32
DARK_BELOW = 85
BRIGHT_FROM = 170


def get_luminance(hex_str: str, *, caches: ColorCaches | None = None) -> int:
    """Perceptual luma of a hex colour on a 0..255 scale (0 for invalid input)."""
    h = normalize_hex(hex_str)
    if h is None:
        return 0

    def compute() -> int:
        rgb = hex_to_rgb(h, caches=caches)
        return round_half_up(LUMA_R * rgb.r + LUMA_G * rgb.g + LUMA_B * rgb.b)

    return resolve_caches(caches).luminance.get_or_compute(h, compute)


def get_contrast_color(hex_str: str, *, caches: ColorCaches | None = None) -> Hex:
    """Black text on light colours, white on dark ones."""
    if get_luminance(hex_str, caches=caches) / 255.0 > CONTRAST_THRESHOLD:
        return "#000000"
    return "#FFFFFF"


def to_grayscale(hex_str: str, *, caches: ColorCaches | None = None) -> Hex:
    y = get_luminance(hex_str, caches=caches)
    return rgb_to_hex(y, y, y)


@dataclass(frozen=True)
class LuminosityHistogram:
    bins: list[int]
    average: int
    contrast: int
    dark_percent: int
    mid_percent: int
    bright_percent: int
    min_value: int
    max_value: int

    def to_dict(self) -> dict:
        return {
            "bins": list(self.bins),
            "average": self.average,
            "contrast": self.contrast,
            "darkPercent": self.dark_percent,
            "midPercent": self.mid_percent,
            "brightPercent": self.bright_percent,
            "minValue": self.min_value,
            "maxValue": self.max_value,
        }


def luminosity_histogram(colors: Iterable[str]) -> LuminosityHistogram | None:
    """
    Summarise a palette's value distribution for preview cards.

    Bins are scaled so the fullest one reads 100; percentages are of the
    palette size. Returns None for an empty palette.
    """
    lums = [get_luminance(c) for c in colors]
    if not lums:
        return None

    bins = [0] * HISTOGRAM_BINS
    for y in lums:
        bins[min(HISTOGRAM_BINS - 1, y * HISTOGRAM_BINS // 256)] += 1

    peak = max(max(bins), 1)
    total = len(lums)
    dark = sum(1 for y in lums if y < DARK_BELOW)
    bright = sum(1 for y in lums if y >= BRIGHT_FROM)
    mid = total - dark - bright
    lo, hi = min(lums), max(lums)

    return LuminosityHistogram(
        bins=[round_half_up(v / peak * 100) for v in bins],
        average=round_half_up(sum(lums) / total),
        contrast=round_half_up((hi - lo) / 255 * 100),
        dark_percent=round_half_up(dark / total * 100),
        mid_percent=round_half_up(mid / total * 100),
        bright_percent=round_half_up(bright / total * 100),
        min_value=lo,
        max_value=hi,
    )


__all__ = [
    "LuminosityHistogram",
    "get_contrast_color",
    "get_luminance",
    "luminosity_histogram",
    "to_grayscale",
]
