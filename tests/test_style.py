import pytest

from tuuba.style import (
    Color,
    ColorScheme,
    Visuals,
    WidgetVisuals,
    apply_style,
    page_fill,
)


@pytest.mark.parametrize("text", ["#09090b", "#0c0c0e", "#1f1f24", "#00000080"])
def test_hex_round_trip(text):
    assert Color.from_hex(text).to_hex() == text


def test_short_form():
    assert Color.from_hex("#fff") == Color(255, 255, 255)


def test_alpha_channel():
    color = Color.from_hex("#00000080")
    assert color.a == 128
    assert Color.from_hex("#0000") == Color(0, 0, 0, 0)


@pytest.mark.parametrize("text", ["09090b", "#12345", "#zzzzzz", "#", "# 1 2 3"])
def test_invalid_hex(text):
    with pytest.raises(ValueError):
        Color.from_hex(text)


def test_channel_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_color_scheme_defaults():
    scheme = ColorScheme()
    assert scheme.bg1 == Color.from_hex("#09090b")
    assert scheme.bg2 == Color.from_hex("#0c0c0e")
    assert scheme.hover_mute == scheme.stroke_mute


def test_apply_style_fills_and_shapes():
    visuals = apply_style(Visuals())
    scheme = ColorScheme()
    assert visuals.window_fill == scheme.bg1
    assert visuals.panel_fill == scheme.bg1
    assert all(w.corner_radius == 8 for w in visuals.widgets)
    assert all(w.expansion == 2.0 for w in visuals.widgets)


def test_apply_style_strokes():
    visuals = Visuals()
    apply_style(visuals)
    scheme = ColorScheme()
    assert visuals.active.bg_stroke_width == 0.0
    assert visuals.hovered.bg_stroke_width == 0.0
    assert visuals.noninteractive.bg_stroke_color == scheme.stroke_mute
    assert visuals.hovered.weak_bg_fill == scheme.hover_mute
    assert visuals.inactive.bg_stroke_width == WidgetVisuals().bg_stroke_width


def test_page_fill():
    assert page_fill() == ColorScheme().bg2
    assert page_fill().to_hex() == "#0c0c0e"