"""Colours, styles and layout helpers for the dark and light themes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB terminal colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# default colours
COLOR_TEAL = Color(35, 50, 55)
COLOR_CYAN = Color(0, 230, 230)
COLOR_LIGHT_BLUE = Color(138, 196, 255)
COLOR_YELLOW = Color(249, 229, 113)
COLOR_GREEN = Color(72, 213, 150)
COLOR_RED = Color(249, 167, 164)
COLOR_ORANGE = Color(255, 170, 66)
COLOR_WHITE = Color(255, 255, 255)
# light theme colours
COLOR_MAGENTA = Color(139, 0, 139)
COLOR_GRAY = Color(91, 87, 87)
COLOR_BLUE = Color(0, 82, 163)
COLOR_GREEN_DARK = Color(20, 97, 73)
COLOR_RED_DARK = Color(173, 25, 20)
COLOR_ORANGE_DARK = Color(184, 49, 15)


class Modifier(enum.Flag):
    """Text attributes applied on top of colours."""

    NONE = 0
    BOLD = enum.auto()
    ITALIC = enum.auto()
    REVERSED = enum.auto()


@dataclass(frozen=True)
class Style:
    """Foreground, background and text attributes of a piece of text."""

    fg: Color | None = None
    bg: Color | None = None
    modifiers: Modifier = Modifier.NONE

    def with_fg(self, color: Color) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        return replace(self, bg=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        return replace(self, modifiers=self.modifiers | modifier)


class Styles(enum.Enum):
    """The roles a themed style can play."""

    DEFAULT = enum.auto()
    LOGO = enum.auto()
    FAILURE = enum.auto()
    WARNING = enum.auto()
    SUCCESS = enum.auto()
    PRIMARY = enum.auto()
    SECONDARY = enum.auto()
    HELP = enum.auto()
    BACKGROUND = enum.auto()


_LIGHT = {
    Styles.DEFAULT: Style(fg=COLOR_GRAY),
    Styles.LOGO: Style(fg=COLOR_GREEN_DARK),
    Styles.FAILURE: Style(fg=COLOR_RED_DARK),
    Styles.WARNING: Style(fg=COLOR_ORANGE_DARK),
    Styles.SUCCESS: Style(fg=COLOR_GREEN_DARK),
    Styles.PRIMARY: Style(fg=COLOR_BLUE),
    Styles.SECONDARY: Style(fg=COLOR_MAGENTA),
    Styles.HELP: Style(fg=COLOR_BLUE),
    Styles.BACKGROUND: Style(fg=COLOR_GRAY, bg=COLOR_WHITE),
}

_DARK = {
    Styles.DEFAULT: Style(fg=COLOR_WHITE),
    Styles.LOGO: Style(fg=COLOR_GREEN),
    Styles.FAILURE: Style(fg=COLOR_RED),
    Styles.WARNING: Style(fg=COLOR_ORANGE),
    Styles.SUCCESS: Style(fg=COLOR_GREEN),
    Styles.PRIMARY: Style(fg=COLOR_CYAN),
    Styles.SECONDARY: Style(fg=COLOR_YELLOW),
    Styles.HELP: Style(fg=COLOR_LIGHT_BLUE),
    Styles.BACKGROUND: Style(fg=COLOR_WHITE, bg=COLOR_TEAL),
}


def theme_styles(light: bool) -> dict[Styles, Style]:
    """All styles of the light or the dark theme, keyed by role."""
    return dict(_LIGHT if light else _DARK)


def style_for(kind: Styles, light: bool) -> Style:
    """The style of one role in the light or the dark theme."""
    return (_LIGHT if light else _DARK)[kind]


def style_highlight() -> Style:
    """Style of a selected row: reversed video."""
    return Style(modifiers=Modifier.REVERSED)


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the terminal."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError("rectangle coordinates and sizes must not be negative")


def _middle_span(start: int, total: int, outer: int, inner: int) -> tuple[int, int]:
    before = min(outer, total)
    size = min(inner, total - before)
    return start + before, size


def centered_rect(width: int, height: int, r: Rect) -> Rect:
    """A ``width`` by ``height`` area centred in ``r``, clipped to fit inside it."""
    outer_height = max(r.height // 2 - height // 2, 0)
    y, h = _middle_span(r.y, r.height, outer_height, height)
    outer_width = max(r.width // 2 - width // 2, 0)
    x, w = _middle_span(r.x, r.width, outer_width, width)
    return Rect(x, y, w, h)