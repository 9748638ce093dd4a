"""Colour scheme and widget visuals of the application."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

CORNER_RADIUS = 8
EXPANSION = 2.0


@dataclass(frozen=True)
class Color:
    """An sRGB colour with straight alpha, each channel 0-255."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel!r}")

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse "#rgb", "#rgba", "#rrggbb" or "#rrggbbaa"."""
        if not text.startswith("#"):
            raise ValueError(f"hex colour must start with '#': {text!r}")
        digits = text[1:]
        if not digits or any(c not in string.hexdigits for c in digits):
            raise ValueError(f"invalid hex colour: {text!r}")
        if len(digits) in (3, 4):
            channels = [int(c * 2, 16) for c in digits]
        elif len(digits) in (6, 8):
            channels = list(bytes.fromhex(digits))
        else:
            raise ValueError(f"invalid hex colour length: {text!r}")
        return cls(*channels)

    def to_hex(self) -> str:
        """Format as "#rrggbb", or "#rrggbbaa" when not fully opaque."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return text if self.a == 255 else f"{text}{self.a:02x}"


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0)


@dataclass(frozen=True)
class ColorScheme:
    bg1: Color = field(default_factory=lambda: Color.from_hex("#09090b"))
    bg2: Color = field(default_factory=lambda: Color.from_hex("#0c0c0e"))
    hover_mute: Color = field(default_factory=lambda: Color.from_hex("#1f1f24"))
    stroke_mute: Color = field(default_factory=lambda: Color.from_hex("#1f1f24"))


@dataclass
class WidgetVisuals:
    """Look of a widget in one interaction state."""

    bg_fill: Color = field(default_factory=lambda: Color(60, 60, 60))
    weak_bg_fill: Color = field(default_factory=lambda: Color(60, 60, 60))
    bg_stroke_color: Color = field(default_factory=lambda: Color(60, 60, 60))
    bg_stroke_width: float = 1.0
    corner_radius: int = 2
    expansion: float = 0.0


@dataclass
class Visuals:
    window_fill: Color = field(default_factory=lambda: Color(27, 27, 27))
    panel_fill: Color = field(default_factory=lambda: Color(27, 27, 27))
    noninteractive: WidgetVisuals = field(default_factory=WidgetVisuals)
    inactive: WidgetVisuals = field(default_factory=WidgetVisuals)
    hovered: WidgetVisuals = field(default_factory=WidgetVisuals)
    active: WidgetVisuals = field(default_factory=WidgetVisuals)
    open: WidgetVisuals = field(default_factory=WidgetVisuals)

    @property
    def widgets(self) -> tuple[WidgetVisuals, ...]:
        """All interaction states, in a fixed order."""
        return (self.noninteractive, self.inactive, self.hovered, self.active, self.open)


def apply_style(visuals: Visuals) -> Visuals:
    """Apply the application look to ``visuals`` in place and return it."""
    colors = ColorScheme()

    visuals.window_fill = colors.bg1
    visuals.panel_fill = colors.bg1

    for state in (visuals.active, visuals.hovered):
        state.bg_stroke_width = 0.0
        state.bg_stroke_color = TRANSPARENT
    visuals.noninteractive.bg_stroke_color = colors.stroke_mute

    visuals.hovered.weak_bg_fill = colors.hover_mute

    for state in visuals.widgets:
        state.corner_radius = CORNER_RADIUS
        state.expansion = EXPANSION
    return visuals


def page_fill() -> Color:
    """Background fill of the central page frame."""
    return ColorScheme().bg2