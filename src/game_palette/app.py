from __future__ import annotations

import logging
from typing import Any, Mapping, cast

from flask import Flask, jsonify, request

# Project-local algorithms
from .conversions import (
    configure_caches,
    format_hex,
    format_hsl,
    format_rgb,
    get_color_info,
    normalize_hex,
)
from .cvd import COLOR_BLINDNESS_TYPES, CVD_MATRICES, ColorBlindnessType, simulate_palette
from .export import EXPORT_FILENAMES, EXPORTERS, ExportFormat, export_palette
from .extractor import METHODS, Method, extract_palette
from .harmony import generate_color_harmonies
from .metrics import get_contrast_color, get_luminance, luminosity_histogram, to_grayscale
from .transforms import STYLE_PRESETS, StyleFilter, adjust_color, apply_style_filter
from .variations import generate_color_variations

log = logging.getLogger(__name__)

DEFAULT_CONFIG: Mapping[str, Any] = {
    "LOG_LEVEL": "INFO",
    "DEFAULT_LANGUAGE": "en",
    "COLOR_CACHE_SIZE": 512,
    "EXTRACT_MIN_COLORS": 3,
    "EXTRACT_MAX_COLORS": 8,
    "EXTRACT_METHOD": "histogram",
}

_TRUE = {"1", "true", "yes", "on"}


def require_hex(s: Any) -> str:
    h = normalize_hex(s)
    if h is None:
        raise ValueError("hex must be 3 or 6 hex digits")
    return h


def parse_colors(val: Any) -> list[str]:
    if isinstance(val, str):
        val = [v for v in val.split(",") if v.strip()]
    if not isinstance(val, list) or not val:
        raise ValueError("colors must be a non-empty list of hex strings")
    return [require_hex(v) for v in val]


def parse_flag(val: str | None) -> bool:
    return (val or "").strip().lower() in _TRUE


def parse_float(val: str | None, default: float) -> float:
    if val is None or val == "":
        return default
    return float(val)


def _bad_request(msg: str, **extra: Any):
    return jsonify({"error": msg, **extra}), 400


# ----------------------------- Flask app ----------------------------------


def create_app(test_config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("GAME_PALETTE")
    if test_config:
        app.config.from_mapping(test_config)

    logging.basicConfig(
        level=str(app.config["LOG_LEVEL"]).upper(),
        format="%(levelname)s: %(message)s",
    )
    configure_caches(int(app.config["COLOR_CACHE_SIZE"]))

    def language() -> str:
        return request.args.get("lang") or app.config["DEFAULT_LANGUAGE"]

    @app.errorhandler(ValueError)
    def value_error(e: ValueError):
        return _bad_request(f"invalid input: {e}")

    @app.route("/color")
    def color():
        hx = require_hex(request.args.get("hex"))
        info = get_color_info(hx)
        return jsonify(
            {
                **info.to_dict(),
                "display": {
                    "HEX": format_hex(info.hex),
                    "RGB": format_rgb(*info.rgb),
                    "HSL": format_hsl(*info.hsl),
                },
                "luminance": get_luminance(hx),
                "contrast": get_contrast_color(hx),
                "grayscale": to_grayscale(hx),
            }
        )

    @app.route("/variations")
    def variations():
        hx = require_hex(request.args.get("hex"))
        ramp = generate_color_variations(hx, parse_flag(request.args.get("hue_shift")))
        return jsonify([v.to_dict() for v in ramp])

    @app.route("/harmonies")
    def harmonies():
        hx = require_hex(request.args.get("hex"))
        return jsonify([h.to_dict() for h in generate_color_harmonies(hx, language())])

    @app.route("/simulate")
    def simulate():
        colors = parse_colors(request.args.get("colors") or request.args.get("hex"))
        kind = (request.args.get("type") or "none").lower()
        if kind != "none" and kind not in CVD_MATRICES:
            return _bad_request(
                f"unknown deficiency '{kind}'",
                supported=[t.type for t in COLOR_BLINDNESS_TYPES],
            )
        return jsonify(simulate_palette(colors, cast(ColorBlindnessType, kind)))

    @app.route("/adjust")
    def adjust():
        colors = parse_colors(request.args.get("colors") or request.args.get("hex"))
        style = request.args.get("style")
        if style:
            if style not in STYLE_PRESETS:
                return _bad_request(
                    f"unknown style '{style}'", supported=list(STYLE_PRESETS)
                )
            return jsonify(apply_style_filter(colors, cast(StyleFilter, style)))
        sat = parse_float(request.args.get("saturation"), 1.0)
        bright = parse_float(request.args.get("brightness"), 1.0)
        return jsonify([adjust_color(c, sat, bright) for c in colors])

    @app.route("/extract", methods=["POST"])
    def extract():
        body = request.get_json(silent=True) or {}
        method = str(body.get("method") or app.config["EXTRACT_METHOD"]).lower()
        if method not in METHODS:
            return _bad_request(f"unknown method '{method}'", supported=list(METHODS))
        try:
            count = int(body.get("count", 5))
        except (TypeError, ValueError):
            return _bad_request("count must be an integer")
        lo, hi = int(app.config["EXTRACT_MIN_COLORS"]), int(app.config["EXTRACT_MAX_COLORS"])
        if not lo <= count <= hi:
            return _bad_request(f"count must be between {lo} and {hi}")
        try:
            palette = extract_palette(body.get("pixels") or [], count, cast(Method, method))
        except ValueError as exc:
            return _bad_request(f"invalid image: {exc}")
        except Exception as exc:
            log.exception("Extraction failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(palette)

    @app.route("/export", methods=["POST"])
    def export():
        body = request.get_json(silent=True) or {}
        fmt = str(body.get("format") or request.args.get("format") or "text").lower()
        if fmt not in EXPORTERS:
            return _bad_request(f"unknown format '{fmt}'", supported=list(EXPORTERS))
        colors = parse_colors(body.get("colors"))
        hist = luminosity_histogram(colors)
        return jsonify(
            {
                "filename": EXPORT_FILENAMES[fmt],
                "content": export_palette(colors, cast(ExportFormat, fmt)),
                "histogram": hist.to_dict() if hist else None,
            }
        )

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
