"""Hex / RGB / HSL conversion.

All parsing is fail-soft: anything that is not a 3- or 6-digit hex colour
converts as black instead of raising, so UI callers never need to guard a
conversion. Integer outputs use round-half-up, never banker's rounding.
"""

from __future__ import annotations

import logging
import math
import string
from dataclasses import asdict, dataclass
from typing import Iterator, Literal

from .color_cache import DEFAULT_MAXSIZE, ColorCaches

log = logging.getLogger(__name__)

Hex = str
ColorFormat = Literal["HEX", "RGB", "HSL"]

_HEXDIGITS = frozenset(string.hexdigits)

_caches = ColorCaches(DEFAULT_MAXSIZE)


def default_caches() -> ColorCaches:
    return _caches


def configure_caches(maxsize: int = DEFAULT_MAXSIZE) -> ColorCaches:
    """Replace the process-wide caches with fresh, empty ones of `maxsize`."""
    global _caches
    _caches = ColorCaches(maxsize)
    log.debug("color caches reset (maxsize=%d)", maxsize)
    return _caches


def resolve_caches(caches: ColorCaches | None) -> ColorCaches:
    return _caches if caches is None else caches


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _channel(x: float) -> int:
    return max(0, min(255, round_half_up(x)))


# ----------------------------- value types ---------------------------------


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class HslColor:
    h: int
    s: int
    l: int  # noqa: E741

    def __iter__(self) -> Iterator[int]:
        return iter((self.h, self.s, self.l))

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ColorInfo:
    hex: Hex
    rgb: RgbColor
    hsl: HslColor

    def to_dict(self) -> dict:
        return {"hex": self.hex, "rgb": self.rgb.to_dict(), "hsl": self.hsl.to_dict()}


BLACK = RgbColor(0, 0, 0)


# ----------------------------- hex parsing ---------------------------------


def normalize_hex(value: str | None) -> Hex | None:
    """'#ABC', 'abc', ' #AaBbCc ' -> '#aabbcc'; anything else -> None."""
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if len(raw) not in (3, 6) or not all(c in _HEXDIGITS for c in raw):
        return None
    if len(raw) == 3:
        raw = "".join(ch * 2 for ch in raw)
    return "#" + raw.lower()


def hex_to_rgb(hex_str: str, *, caches: ColorCaches | None = None) -> RgbColor:
    h = normalize_hex(hex_str)
    if h is None:
        return BLACK
    return resolve_caches(caches).hex_rgb.get_or_compute(
        h, lambda: RgbColor(int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16))
    )


def rgb_to_hex(r: float, g: float, b: float) -> Hex:
    return "#{:02x}{:02x}{:02x}".format(_channel(r), _channel(g), _channel(b))


# ----------------------------- HSL -----------------------------------------


def _rgb_to_hsl(r: int, g: int, b: int) -> HslColor:
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    lum = (mx + mn) / 2.0
    if mx == mn:
        return HslColor(0, 0, round_half_up(lum * 100))

    d = mx - mn
    s = d / (2.0 - mx - mn) if lum > 0.5 else d / (mx + mn)
    if mx == rf:
        turns = ((gf - bf) / d + (6.0 if gf < bf else 0.0)) / 6.0
    elif mx == gf:
        turns = ((bf - rf) / d + 2.0) / 6.0
    else:
        turns = ((rf - gf) / d + 4.0) / 6.0
    # 359.5+ rounds up to 360, which is the same hue as 0
    h = round_half_up(turns * 360) % 360
    return HslColor(h, round_half_up(s * 100), round_half_up(lum * 100))


def rgb_to_hsl(
    r: float, g: float, b: float, *, caches: ColorCaches | None = None
) -> HslColor:
    key = (_channel(r), _channel(g), _channel(b))
    return resolve_caches(caches).rgb_hsl.get_or_compute(key, lambda: _rgb_to_hsl(*key))


def hsl_to_rgb(h: float, s: float, l: float) -> RgbColor:  # noqa: E741
    h = h % 360.0
    s = max(0.0, min(100.0, s)) / 100.0
    l = max(0.0, min(100.0, l)) / 100.0  # noqa: E741
    a = s * min(l, 1.0 - l)

    def f(n: int) -> float:
        k = (n + h / 30.0) % 12.0
        return l - a * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

    return RgbColor(_channel(f(0) * 255), _channel(f(8) * 255), _channel(f(4) * 255))


def hex_to_hsl(hex_str: str, *, caches: ColorCaches | None = None) -> HslColor:
    return rgb_to_hsl(*hex_to_rgb(hex_str, caches=caches), caches=caches)


def hsl_to_hex(h: float, s: float, l: float) -> Hex:  # noqa: E741
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def get_color_info(hex_str: str, *, caches: ColorCaches | None = None) -> ColorInfo:
    rgb = hex_to_rgb(hex_str, caches=caches)
    return ColorInfo(
        hex=normalize_hex(hex_str) or "#000000",
        rgb=rgb,
        hsl=rgb_to_hsl(*rgb, caches=caches),
    )


# ----------------------------- display formats -----------------------------


def format_hex(hex_str: str) -> str:
    return (normalize_hex(hex_str) or "#000000").upper()


def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_hsl(h: int, s: int, l: int) -> str:  # noqa: E741
    return f"hsl({h}, {s}%, {l}%)"


def format_color(info: ColorInfo, fmt: ColorFormat = "HEX") -> str:
    if fmt == "RGB":
        return format_rgb(*info.rgb)
    if fmt == "HSL":
        return format_hsl(*info.hsl)
    return format_hex(info.hex)


__all__ = [
    "BLACK",
    "ColorInfo",
    "HslColor",
    "RgbColor",
    "configure_caches",
    "default_caches",
    "format_color",
    "format_hex",
    "format_hsl",
    "format_rgb",
    "get_color_info",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "hsl_to_rgb",
    "normalize_hex",
    "resolve_caches",
    "rgb_to_hex",
    "rgb_to_hsl",
    "round_half_up",
]
