import pytest

from game_palette.transforms import (
    STYLE_PRESETS,
    adjust_color,
    apply_style_filter,
    rotate_hue,
    shift_hue,
)


def test_adjust_identity_returns_input():
    assert adjust_color("#FF0000", 1, 1) == "#FF0000"


def test_adjust_saturation():
    assert adjust_color("#ff0000", 0.5, 1) == "#bf4040"
    assert adjust_color("#ff0000", 0, 1) == "#808080"


def test_adjust_clamps_lightness():
    assert adjust_color("#ff0000", 1, 3) == "#ffffff"
    assert adjust_color("#ff0000", 1, 0) == "#000000"


def test_shift_hue_wraps():
    assert shift_hue("#ff0000", 120) == "#00ff00"
    assert shift_hue("#ff0000", -120) == "#0000ff"
    assert shift_hue("#ff0000", 360) == "#ff0000"


def test_rotate_matches_shift():
    for deg in (-30, 30, 90, 150, 180, 210, 270):
        assert rotate_hue("#3a7bd5", deg) == shift_hue("#3a7bd5", deg)


def test_style_presets():
    assert apply_style_filter(["#ff0000", "#00ff00"], "original") == ["#ff0000", "#00ff00"]
    assert apply_style_filter(["#ff0000"], "realistic") == ["#e60c0c"]
    assert set(STYLE_PRESETS) == {"original", "hypercasual", "stylized", "realistic"}


def test_unknown_style():
    with pytest.raises(KeyError):
        apply_style_filter(["#ff0000"], "vaporwave")
