import json
from datetime import datetime, timedelta, timezone

import pytest

from game_palette.export import (
    EXPORT_FILENAMES,
    EXPORTERS,
    clipboard_text,
    export_palette,
    to_css,
    to_json,
    to_unity,
    to_unreal,
)

PALETTE = ["#ff0000", "#00ff80"]


def test_css():
    assert to_css(PALETTE) == ":root {\n  --color-1: #ff0000;\n  --color-2: #00ff80;\n}"


def test_json():
    ts = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    doc = json.loads(to_json(PALETTE, exported_at=ts))
    assert doc["colors"][0] == {"index": 0, "hex": "#ff0000", "rgb": {"r": 255, "g": 0, "b": 0}}
    assert doc["colors"][1]["rgb"] == {"r": 0, "g": 255, "b": 128}
    assert doc["exportedAt"] == "2024-05-01T12:00:00.000Z"


def test_unity():
    src = to_unity(PALETTE)
    assert src.startswith("using UnityEngine;")
    assert "new Color(1.000f, 0.000f, 0.000f)," in src
    assert "new Color(0.000f, 1.000f, 0.502f)\n    };" in src


def test_unreal():
    assert to_unreal(PALETTE).splitlines() == [
        "Name,Color",
        'Color1,"(R=255,G=0,B=0,A=255)"',
        'Color2,"(R=0,G=255,B=128,A=255)"',
    ]


def test_export_dispatch():
    assert export_palette(iter(PALETTE), "text") == "#ff0000\n#00ff80"
    assert set(EXPORTERS) == set(EXPORT_FILENAMES)
    with pytest.raises(ValueError):
        export_palette(PALETTE, "gpl")


def test_clipboard():
    assert clipboard_text(PALETTE, "json") == '["#ff0000","#00ff80"]'
    assert clipboard_text(PALETTE, "css") == "--color-1: #ff0000;\n--color-2: #00ff80;"
    assert clipboard_text(PALETTE) == "#ff0000\n#00ff80"


def test_json_timestamp_is_utc_millis():
    ts = datetime(2024, 5, 1, 14, 30, 5, 123456, tzinfo=timezone(timedelta(hours=2)))
    doc = json.loads(to_json(PALETTE, exported_at=ts))
    assert doc["exportedAt"] == "2024-05-01T12:30:05.123Z"
    assert json.loads(to_json(PALETTE))["exportedAt"].endswith("Z")
