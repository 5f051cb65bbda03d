"""Keyboard keys and the terminal key events they are made from."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class KeyCode(enum.Enum):
    """Code of a raw terminal key press."""

    BACKSPACE = enum.auto()
    ENTER = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    TAB = enum.auto()
    BACK_TAB = enum.auto()
    DELETE = enum.auto()
    INSERT = enum.auto()
    F = enum.auto()
    CHAR = enum.auto()
    NULL = enum.auto()
    ESC = enum.auto()


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


@dataclass(frozen=True)
class KeyEvent:
    """A raw key press: ``char`` is set for ``CHAR``, ``number`` for ``F``."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    char: str | None = None
    number: int | None = None

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and (self.char is None or len(self.char) != 1):
            raise ValueError("a CHAR key event needs exactly one character")
        if self.code is KeyCode.F and self.number is None:
            raise ValueError("an F key event needs a function key number")


_CHAR_KINDS = ("Char", "Ctrl", "Alt")
_ARROWS = ("Left", "Right", "Up", "Down")


@dataclass(frozen=True)
class Key:
    """A key as the application understands it."""

    name: str
    value: str | None = None

    ENTER: ClassVar[Key]
    TAB: ClassVar[Key]
    BACKSPACE: ClassVar[Key]
    ESC: ClassVar[Key]
    LEFT: ClassVar[Key]
    RIGHT: ClassVar[Key]
    UP: ClassVar[Key]
    DOWN: ClassVar[Key]
    INS: ClassVar[Key]
    DELETE: ClassVar[Key]
    HOME: ClassVar[Key]
    END: ClassVar[Key]
    PAGE_UP: ClassVar[Key]
    PAGE_DOWN: ClassVar[Key]
    UNKNOWN: ClassVar[Key]

    @classmethod
    def _with_char(cls, kind: str, c: str) -> Key:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return cls(kind, c)

    @classmethod
    def char(cls, c: str) -> Key:
        return cls._with_char("Char", c)

    @classmethod
    def ctrl(cls, c: str) -> Key:
        return cls._with_char("Ctrl", c)

    @classmethod
    def alt(cls, c: str) -> Key:
        return cls._with_char("Alt", c)

    @classmethod
    def from_f(cls, n: int) -> Key:
        """Function key ``Fn`` for ``n`` in 0..12."""
        if not 0 <= n <= 12:
            raise ValueError(f"unknown function key: F{n}")
        return cls(f"F{n}")

    @classmethod
    def from_event(cls, event: KeyEvent) -> Key:
        """Map a raw key event to a key."""
        code = event.code
        if code is KeyCode.F:
            return cls.from_f(event.number)
        if code is KeyCode.CHAR:
            if event.modifiers == KeyModifiers.ALT:
                return cls.alt(event.char)
            if event.modifiers == KeyModifiers.CONTROL:
                return cls.ctrl(event.char)
            return cls.char(event.char)
        return _NAMED_CODES.get(code, cls.UNKNOWN)

    def __str__(self) -> str:
        if self.name in _CHAR_KINDS:
            shown = "Space" if self.value == " " else self.value
            prefix = "" if self.name == "Char" else f"{self.name}+"
            return f"<{prefix}{shown}>"
        if self.name in _ARROWS:
            return f"<{self.name} Arrow Key>"
        return f"<{self.name}>"


Key.ENTER = Key("Enter")
Key.TAB = Key("Tab")
Key.BACKSPACE = Key("Backspace")
Key.ESC = Key("Esc")
Key.LEFT = Key("Left")
Key.RIGHT = Key("Right")
Key.UP = Key("Up")
Key.DOWN = Key("Down")
Key.INS = Key("Ins")
Key.DELETE = Key("Delete")
Key.HOME = Key("Home")
Key.END = Key("End")
Key.PAGE_UP = Key("PageUp")
Key.PAGE_DOWN = Key("PageDown")
Key.UNKNOWN = Key("Unknown")

_NAMED_CODES = {
    KeyCode.ESC: Key.ESC,
    KeyCode.BACKSPACE: Key.BACKSPACE,
    KeyCode.LEFT: Key.LEFT,
    KeyCode.RIGHT: Key.RIGHT,
    KeyCode.UP: Key.UP,
    KeyCode.DOWN: Key.DOWN,
    KeyCode.HOME: Key.HOME,
    KeyCode.END: Key.END,
    KeyCode.PAGE_UP: Key.PAGE_UP,
    KeyCode.PAGE_DOWN: Key.PAGE_DOWN,
    KeyCode.DELETE: Key.DELETE,
    KeyCode.INSERT: Key.INS,
    KeyCode.ENTER: Key.ENTER,
    KeyCode.TAB: Key.TAB,
}