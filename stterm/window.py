"""Window geometry, window modes, size hints and click timing."""

from __future__ import annotations

import enum
from dataclasses import dataclass

# Geometry mask bits as returned by geometry parsing.
X_VALUE = 0x0001
Y_VALUE = 0x0002
WIDTH_VALUE = 0x0004
HEIGHT_VALUE = 0x0008
X_NEGATIVE = 0x0010
Y_NEGATIVE = 0x0020

# Selection snapping produced by repeated clicks.
SNAP_NONE = 0
SNAP_WORD = 1
SNAP_LINE = 2


class WindowMode(enum.IntFlag):
    """State and mode flags of the terminal window."""

    VISIBLE = 1 << 0
    FOCUSED = 1 << 1
    APPKEYPAD = 1 << 2
    MOUSEBTN = 1 << 3
    MOUSEMOTION = 1 << 4
    REVERSE = 1 << 5
    KBDLOCK = 1 << 6
    HIDE = 1 << 7
    APPCURSOR = 1 << 8
    MOUSESGR = 1 << 9
    EIGHTBIT = 1 << 10
    BLINK = 1 << 11
    FBLINK = 1 << 12
    FOCUS = 1 << 13
    MOUSEX10 = 1 << 14
    MOUSEMANY = 1 << 15
    BRCKTPASTE = 1 << 16
    NUMLOCK = 1 << 17
    MOUSE = MOUSEBTN | MOUSEMOTION | MOUSEX10 | MOUSEMANY


class Gravity(enum.IntEnum):
    """Window gravity, the corner a window position is taken from."""

    NORTH_WEST = 1
    NORTH_EAST = 3
    SOUTH_WEST = 7
    SOUTH_EAST = 9


def geommask_to_gravity(mask: int) -> Gravity:
    """The gravity implied by negative offsets in a geometry mask."""
    negative = mask & (X_NEGATIVE | Y_NEGATIVE)
    if negative == 0:
        return Gravity.NORTH_WEST
    if negative == X_NEGATIVE:
        return Gravity.NORTH_EAST
    if negative == Y_NEGATIVE:
        return Gravity.SOUTH_WEST
    return Gravity.SOUTH_EAST


def draw_timeout(now: float, trigger: float, minlatency: float, maxlatency: float) -> float:
    """How long (ms) to keep waiting for idle before drawing; <= 0 means draw now."""
    return (maxlatency - (now - trigger)) / maxlatency * minlatency


@dataclass(frozen=True)
class SizeHints:
    """Size and position hints for the window manager."""

    width: int
    height: int
    width_inc: int
    height_inc: int
    base_width: int
    base_height: int
    min_width: int
    min_height: int
    max_width: int | None = None
    max_height: int | None = None
    x: int | None = None
    y: int | None = None
    gravity: Gravity | None = None


class TermWindow:
    """Pixel geometry, cursor style and mode flags of the terminal window."""

    def __init__(self, cw: int, ch: int, borderpx: int) -> None:
        if cw <= 0 or ch <= 0:
            raise ValueError("character cell size must be positive")
        self.cw = cw
        self.ch = ch
        self.borderpx = borderpx
        self.w = 0
        self.h = 0
        self.tw = 0
        self.th = 0
        self.mode = WindowMode.NUMLOCK
        self.cursor = 2

    def resize(self, width: int, height: int) -> tuple[int, int]:
        """Take a new window size (0 keeps a side) and return (columns, rows)."""
        if width != 0:
            self.w = width
        if height != 0:
            self.h = height
        col = max(1, (self.w - 2 * self.borderpx) // self.cw)
        row = max(1, (self.h - 2 * self.borderpx) // self.ch)
        self.tw = col * self.cw
        self.th = row * self.ch
        return col, row

    def set_cursor(self, cursor: int) -> None:
        """Set the cursor style, 0..7."""
        if not 0 <= cursor <= 7:
            raise ValueError(f"cursor style must be in 0..7, not {cursor}")
        self.cursor = cursor

    def set_mode(self, enabled: bool, flags: int) -> bool:
        """Set or clear mode flags; return True if reverse video changed."""
        before = self.mode
        if enabled:
            self.mode |= flags
        else:
            self.mode &= ~WindowMode(flags)
        return bool((self.mode ^ before) & WindowMode.REVERSE)

    def size_hints(self, isfixed: bool, geommask: int, left: int, top: int) -> SizeHints:
        """The size hints for the current geometry."""
        border = 2 * self.borderpx
        min_width = self.cw + border
        min_height = self.ch + border
        max_width = max_height = None
        if isfixed:
            min_width = max_width = self.w
            min_height = max_height = self.h
        x = y = None
        gravity = None
        if geommask & (X_VALUE | Y_VALUE):
            x, y = left, top
            gravity = geommask_to_gravity(geommask)
        return SizeHints(
            width=self.w,
            height=self.h,
            width_inc=self.cw,
            height_inc=self.ch,
            base_width=border,
            base_height=border,
            min_width=min_width,
            min_height=min_height,
            max_width=max_width,
            max_height=max_height,
            x=x,
            y=y,
            gravity=gravity,
        )


class ClickTracker:
    """Tells single, double and triple clicks apart by their timing (ms)."""

    def __init__(self, doubleclick: float, tripleclick: float) -> None:
        self.doubleclick = doubleclick
        self.tripleclick = tripleclick
        self._previous: float | None = None
        self._before_previous: float | None = None

    def click(self, now: float) -> int:
        """Record a click at a time and return the selection snap it implies."""
        if self._before_previous is not None and now - self._before_previous <= self.tripleclick:
            snap = SNAP_LINE
        elif self._previous is not None and now - self._previous <= self.doubleclick:
            snap = SNAP_WORD
        else:
            snap = SNAP_NONE
        self._before_previous = self._previous
        self._previous = now
        return snap