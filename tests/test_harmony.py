import numpy as np

from game_palette.harmony import (
    HARMONY_ANGLES,
    describe_harmony,
    generate_color_harmonies,
    get_analogous,
    get_complementary,
    get_harmony,
)
from game_palette.transforms import rotate_hue


def test_five_schemes_in_order():
    hs = generate_color_harmonies("#ff0000")
    assert [h.type for h in hs] == [
        "complementary",
        "analogous",
        "triadic",
        "split-complementary",
        "tetradic",
    ]
    assert [h.name for h in hs] == [
        "Complementary",
        "Analogous",
        "Triadic",
        "Split Comp.",
        "Tetradic",
    ]


def test_fixed_angles():
    assert HARMONY_ANGLES == {
        "complementary": (0, 180),
        "analogous": (-30, 0, 30),
        "triadic": (0, 120, 240),
        "split-complementary": (0, 150, 210),
        "tetradic": (0, 90, 180, 270),
    }
    for h in generate_color_harmonies("#3a7bd5"):
        assert tuple(c.angle for c in h.colors) == HARMONY_ANGLES[h.type]


def test_red_wheel():
    tri = get_harmony("#ff0000", "triadic")
    assert [c.hex for c in tri.colors] == ["#ff0000", "#00ff00", "#0000ff"]
    assert [c.name for c in tri.colors] == ["Base", "Second", "Third"]
    ana = get_harmony("#ff0000", "analogous")
    assert [c.hex for c in ana.colors] == ["#ff0080", "#ff0000", "#ff8000"]


def test_complement_matches_rotation():
    rng = np.random.default_rng(5)
    for n in rng.integers(0, 0x1000000, size=200):
        hx = f"#{int(n):06x}"
        comp = next(h for h in generate_color_harmonies(hx) if h.type == "complementary")
        assert comp.colors[1].hex == rotate_hue(hx, 180)
        assert comp.colors[0].hex == hx


def test_complementary_and_analogous_helpers():
    assert get_complementary("#ff0000") == "#00ffff"
    assert get_analogous("#ff0000") == ("#ff0080", "#ff8000")


def test_descriptions_are_localized():
    ko = get_harmony("#ff0000", "complementary", "ko")
    en = get_harmony("#ff0000", "complementary", "en")
    assert ko.description == "보색 - 정반대 색상"
    assert en.description != ko.description
    assert [c.hex for c in ko.colors] == [c.hex for c in en.colors]


def test_unknown_language_falls_back_to_english():
    assert describe_harmony("triadic", "fr") == describe_harmony("triadic", "en")
    assert describe_harmony("triadic", "KO") == describe_harmony("triadic", "ko")


def test_to_dict_shape():
    d = get_harmony("#ff0000", "complementary").to_dict()
    assert d["type"] == "complementary"
    assert d["colors"][1] == {"hex": "#00ffff", "name": "Complement", "angle": 180}
