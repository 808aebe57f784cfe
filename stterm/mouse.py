"""Mouse button tracking, mouse shortcuts and mouse event reporting."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from stterm.config import Config, MouseShortcut
from stterm.keymap import match
from stterm.keytable import Modifier

_BUTTON_MASKS = {1: 1 << 8, 2: 1 << 9, 3: 1 << 10, 4: 1 << 11, 5: 1 << 12}

_MAX_BUTTON = 11
_NO_BUTTON = 12
_X10_LIMIT = 223


class MouseEventType(enum.Enum):
    """The kind of pointer event."""

    PRESS = "press"
    RELEASE = "release"
    MOTION = "motion"


@dataclass(frozen=True)
class MouseEvent:
    """A pointer event: its kind, the button involved and the modifier state."""

    type: MouseEventType
    button: int = 0
    state: int = 0


@dataclass(frozen=True)
class MouseModes:
    """The mouse reporting modes the application has switched on."""

    x10: bool = False
    motion: bool = False
    many: bool = False
    sgr: bool = False


def button_mask(button: int) -> int:
    """The modifier state bit of a button, or 0 for buttons without one."""
    return _BUTTON_MASKS.get(button, 0)


def event_cell(px: int, py: int, borderpx: int, tw: int, th: int, cw: int, ch: int) -> tuple[int, int]:
    """The cell (column, row) under a pixel position, clamped to the text area."""
    x = min(max(px - borderpx, 0), tw - 1)
    y = min(max(py - borderpx, 0), th - 1)
    return x // cw, y // ch


def find_mouse_shortcut(button: int, state: int, release: bool, config: Config) -> MouseShortcut | None:
    """The first mouse shortcut for a button press or release, if any."""
    state &= ~button_mask(button)
    for shortcut in config.mouse_shortcuts:
        if shortcut.release != release or shortcut.button != button:
            continue
        if match(shortcut.mod, state, config.ignoremod) or match(
            shortcut.mod, state & ~config.forcemousemod, config.ignoremod
        ):
            return shortcut
    return None


class MouseReporter:
    """Keeps the pressed buttons and the last reported cell, and encodes reports."""

    def __init__(self) -> None:
        self.buttons = 0
        self._last = (0, 0)

    def press(self, button: int) -> None:
        """Record a button as held down."""
        if 1 <= button <= _MAX_BUTTON:
            self.buttons |= 1 << (button - 1)

    def release(self, button: int) -> None:
        """Record a button as let go."""
        if 1 <= button <= _MAX_BUTTON:
            self.buttons &= ~(1 << (button - 1))

    def _lowest_pressed(self) -> int:
        return next(
            (b for b in range(1, _MAX_BUTTON + 1) if self.buttons & (1 << (b - 1))),
            _NO_BUTTON,
        )

    def report(self, event: MouseEvent, col: int, row: int, modes: MouseModes) -> bytes | None:
        """The bytes to send for an event at a cell, or None if nothing is reported."""
        released = event.type is MouseEventType.RELEASE
        if event.type is MouseEventType.MOTION:
            if (col, row) == self._last:
                return None
            if not modes.motion and not modes.many:
                return None
            if modes.motion and self.buttons == 0:
                return None
            btn = self._lowest_pressed()
            code = 32
        else:
            btn = event.button
            if not 1 <= btn <= _MAX_BUTTON:
                return None
            if released and (modes.x10 or btn in (4, 5)):
                return None
            code = 0

        self._last = (col, row)

        if (not modes.sgr and released) or btn == _NO_BUTTON:
            code += 3
        elif btn >= 8:
            code += 128 + btn - 8
        elif btn >= 4:
            code += 64 + btn - 4
        else:
            code += btn - 1

        if not modes.x10:
            if event.state & Modifier.SHIFT:
                code += 4
            if event.state & Modifier.MOD1:
                code += 8
            if event.state & Modifier.CONTROL:
                code += 16

        if modes.sgr:
            final = "m" if released else "M"
            return f"\x1b[<{code};{col + 1};{row + 1}{final}".encode("ascii")
        if col < _X10_LIMIT and row < _X10_LIMIT:
            return b"\x1b[M" + bytes(((32 + code) & 0xFF, 32 + col + 1, 32 + row + 1))
        return None