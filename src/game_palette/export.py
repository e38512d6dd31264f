from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Literal, Mapping, Optional

from .conversions import hex_to_rgb

ExportFormat = Literal["json", "css", "text", "unity", "unreal"]
ClipboardFormat = Literal["json", "css", "text"]

EXPORT_FILENAMES: Mapping[str, str] = {
    "json": "palette.json",
    "css": "palette.css",
    "text": "palette.txt",
    "unity": "Palette.cs",
    "unreal": "palette.csv",
}


def to_json(colors: List[str], exported_at: Optional[datetime] = None) -> str:
    ts = (exported_at or datetime.now(timezone.utc)).astimezone(timezone.utc)
    stamp = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    doc = {
        "colors": [
            {"index": i, "hex": hx, "rgb": hex_to_rgb(hx).to_dict()}
            for i, hx in enumerate(colors)
        ],
        "exportedAt": stamp,
    }
    return json.dumps(doc, indent=2, ensure_ascii=False)


def to_css(colors: List[str]) -> str:
    body = "\n".join(f"  --color-{i}: {hx};" for i, hx in enumerate(colors, 1))
    return f":root {{\n{body}\n}}"


def to_text(colors: List[str]) -> str:
    return "\n".join(colors)


def to_unity(colors: List[str]) -> str:
    """C# ScriptableObject holding the palette as UnityEngine.Color values."""
    rows = []
    for hx in colors:
        rgb = hex_to_rgb(hx)
        rows.append(
            f"        new Color({rgb.r / 255:.3f}f, {rgb.g / 255:.3f}f, {rgb.b / 255:.3f}f)"
        )
    return (
        "using UnityEngine;\n\n"
        '[CreateAssetMenu(fileName = "Palette", menuName = "Colors/Palette")]\n'
        "public class Palette : ScriptableObject\n"
        "{\n"
        "    public Color[] colors = new Color[] {\n"
        + ",\n".join(rows)
        + "\n    };\n}"
    )


def to_unreal(colors: List[str]) -> str:
    """DataTable CSV with one linear colour struct per row."""
    lines = ["Name,Color"]
    for i, hx in enumerate(colors, 1):
        rgb = hex_to_rgb(hx)
        lines.append(f'Color{i},"(R={rgb.r},G={rgb.g},B={rgb.b},A=255)"')
    return "\n".join(lines)


EXPORTERS: Dict[str, Callable[[List[str]], str]] = {
    "json": to_json,
    "css": to_css,
    "text": to_text,
    "unity": to_unity,
    "unreal": to_unreal,
}


def export_palette(colors: Iterable[str], fmt: ExportFormat) -> str:
    try:
        exporter = EXPORTERS[fmt]
    except KeyError:
        raise ValueError(f"unknown export format '{fmt}'") from None
    return exporter(list(colors))


def clipboard_text(colors: Iterable[str], fmt: ClipboardFormat = "text") -> str:
    """Short copy-paste forms; anything but json/css copies one hex per line."""
    cs = list(colors)
    if fmt == "json":
        return json.dumps(cs, separators=(",", ":"))
    if fmt == "css":
        return "\n".join(f"--color-{i}: {hx};" for i, hx in enumerate(cs, 1))
    return to_text(cs)


__all__ = [
    "EXPORTERS",
    "EXPORT_FILENAMES",
    "clipboard_text",
    "export_palette",
    "to_css",
    "to_json",
    "to_text",
    "to_unity",
    "to_unreal",
]
