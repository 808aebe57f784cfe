"""Built-in configuration: appearance, behaviour, shortcuts and resources."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

from stterm.keytable import (
    ANY_MOD,
    BREAK,
    DOWN,
    HOME,
    INSERT,
    NEXT,
    NUM_LOCK,
    PAGE_DOWN,
    PAGE_UP,
    PRINT,
    PRIOR,
    SWITCH_MOD,
    UP,
    Key,
    Modifier,
    default_keys,
)

SHIFT = int(Modifier.SHIFT)
CONTROL = int(Modifier.CONTROL)
MOD1 = int(Modifier.MOD1)
MODKEY = MOD1
TERMMOD = CONTROL | SHIFT

BUTTON2 = 2
BUTTON4 = 4
BUTTON5 = 5

# X cursor font shape of the text cursor.
XC_XTERM = 152

ShortcutArg = Union[int, float, str, tuple[str, ...], None]

OPEN_URL_COMMAND = ("/bin/sh", "-c", "st-urlhandler -o", "externalpipe")
COPY_URL_COMMAND = ("/bin/sh", "-c", "st-urlhandler -c", "externalpipe")
COPY_OUTPUT_COMMAND = ("/bin/sh", "-c", "st-copyout", "externalpipe")

ASCII_PRINTABLE = (
    " !\"#$%&'()*+,-./0123456789:;<=>?"
    "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_"
    "`abcdefghijklmnopqrstuvwxyz{|}~"
)


class ResourceType(enum.Enum):
    """How a resource string is converted."""

    STRING = 0
    INTEGER = 1
    FLOAT = 2


@dataclass(frozen=True)
class ResourcePref:
    """A resource name and the configuration value it sets.

    ``attribute`` names a field of :class:`Config`; when ``index`` is given
    the field is a list and the resource sets that element of it.
    """

    name: str
    type: ResourceType
    attribute: str
    index: int | None = None


@dataclass(frozen=True)
class Shortcut:
    """A keyboard shortcut: modifier mask, key symbol, action and argument."""

    mod: int
    keysym: int
    action: str
    arg: ShortcutArg = None


@dataclass(frozen=True)
class MouseShortcut:
    """A mouse shortcut, triggered on press or, if ``release``, on release."""

    mod: int
    button: int
    action: str
    arg: ShortcutArg = None
    release: bool = False


def default_shortcuts() -> tuple[Shortcut, ...]:
    """The built-in keyboard shortcuts, in lookup order."""
    return (
        Shortcut(ANY_MOD, BREAK, "sendbreak", 0),
        Shortcut(CONTROL, PRINT, "toggleprinter", 0),
        Shortcut(SHIFT, PRINT, "printscreen", 0),
        Shortcut(ANY_MOD, PRINT, "printsel", 0),
        Shortcut(TERMMOD, PRIOR, "zoom", 1.0),
        Shortcut(TERMMOD, NEXT, "zoom", -1.0),
        Shortcut(TERMMOD, HOME, "zoomreset", 0.0),
        Shortcut(TERMMOD, ord("C"), "clipcopy", 0),
        Shortcut(TERMMOD, ord("V"), "clippaste", 0),
        Shortcut(MODKEY, ord("c"), "clipcopy", 0),
        Shortcut(SHIFT, INSERT, "clippaste", 0),
        Shortcut(MODKEY, ord("v"), "clippaste", 0),
        Shortcut(SHIFT, INSERT, "selpaste", 0),
        Shortcut(TERMMOD, NUM_LOCK, "numlock", 0),
        Shortcut(SHIFT, PAGE_UP, "kscrollup", -1),
        Shortcut(SHIFT, PAGE_DOWN, "kscrolldown", -1),
        Shortcut(MODKEY, PAGE_UP, "kscrollup", -1),
        Shortcut(MODKEY, PAGE_DOWN, "kscrolldown", -1),
        Shortcut(MODKEY, ord("k"), "kscrollup", 1),
        Shortcut(MODKEY, ord("j"), "kscrolldown", 1),
        Shortcut(MODKEY, UP, "kscrollup", 1),
        Shortcut(MODKEY, DOWN, "kscrolldown", 1),
        Shortcut(MODKEY, ord("u"), "kscrollup", -1),
        Shortcut(MODKEY, ord("d"), "kscrolldown", -1),
        Shortcut(TERMMOD, UP, "zoom", 1.0),
        Shortcut(TERMMOD, DOWN, "zoom", -1.0),
        Shortcut(TERMMOD, ord("K"), "zoom", 1.0),
        Shortcut(TERMMOD, ord("J"), "zoom", -1.0),
        Shortcut(TERMMOD, ord("U"), "zoom", 2.0),
        Shortcut(TERMMOD, ord("D"), "zoom", -2.0),
        Shortcut(MODKEY, ord("l"), "externalpipe", OPEN_URL_COMMAND),
        Shortcut(MODKEY, ord("y"), "externalpipe", COPY_URL_COMMAND),
        Shortcut(MODKEY, ord("o"), "externalpipe", COPY_OUTPUT_COMMAND),
    )


def default_mouse_shortcuts() -> tuple[MouseShortcut, ...]:
    """The built-in mouse shortcuts, in lookup order."""
    return (
        MouseShortcut(ANY_MOD, BUTTON2, "clippaste", 0, release=True),
        MouseShortcut(SHIFT, BUTTON4, "ttysend", "\x1b[5;2~"),
        MouseShortcut(ANY_MOD, BUTTON4, "ttysend", "\x19"),
        MouseShortcut(SHIFT, BUTTON5, "ttysend", "\x1b[6;2~"),
        MouseShortcut(ANY_MOD, BUTTON5, "ttysend", "\x05"),
    )


_BASE_COLORS = (
    "#282828", "#cc241d", "#98971a", "#d79921",
    "#458588", "#b16286", "#689d6a", "#a89984",
    "#928374", "#fb4934", "#b8bb26", "#fabd2f",
    "#83a598", "#d3869b", "#8ec07c", "#ebdbb2",
)

_EXTRA_COLORS = (
    "#add8e6",  # 256: cursor
    "#555555",  # 257: reverse cursor
    "#282828",  # 258: background
    "#ebdbb2",  # 259: foreground
)


def default_colornames() -> list[str | None]:
    """Colour names by index; indices 16..255 are None (built-in colours)."""
    return [*_BASE_COLORS, *([None] * (256 - len(_BASE_COLORS))), *_EXTRA_COLORS]


_RESOURCES: tuple[ResourcePref, ...] = (
    ResourcePref("font", ResourceType.STRING, "font"),
    *(ResourcePref(f"color{i}", ResourceType.STRING, "colornames", i) for i in range(16)),
    ResourcePref("background", ResourceType.STRING, "colornames", 258),
    ResourcePref("foreground", ResourceType.STRING, "colornames", 259),
    ResourcePref("cursorColor", ResourceType.STRING, "colornames", 256),
    ResourcePref("termname", ResourceType.STRING, "termname"),
    ResourcePref("shell", ResourceType.STRING, "shell"),
    ResourcePref("minlatency", ResourceType.INTEGER, "minlatency"),
    ResourcePref("maxlatency", ResourceType.INTEGER, "maxlatency"),
    ResourcePref("blinktimeout", ResourceType.INTEGER, "blinktimeout"),
    ResourcePref("bellvolume", ResourceType.INTEGER, "bellvolume"),
    ResourcePref("tabspaces", ResourceType.INTEGER, "tabspaces"),
    ResourcePref("borderpx", ResourceType.INTEGER, "borderpx"),
    ResourcePref("cwscale", ResourceType.FLOAT, "cwscale"),
    ResourcePref("chscale", ResourceType.FLOAT, "chscale"),
    ResourcePref("alpha", ResourceType.FLOAT, "alpha"),
)


@dataclass
class Config:
    """All settings of the terminal, with their built-in defaults."""

    font: str = "mono:pixelsize=12:antialias=true:autohint=true"
    borderpx: int = 2
    shell: str = "/bin/sh"
    utmp: str | None = None
    scroll: str | None = None
    stty_args: str = "stty raw pass8 nl -echo -iexten -cstopb 38400"
    vtiden: str = "\x1b[?6c"
    cwscale: float = 1.0
    chscale: float = 1.0
    worddelimiters: str = " "
    doubleclicktimeout: int = 300
    tripleclicktimeout: int = 600
    allowaltscreen: bool = True
    allowwindowops: bool = False
    minlatency: float = 2
    maxlatency: float = 33
    blinktimeout: int = 800
    cursorthickness: int = 2
    boxdraw: bool = True
    boxdraw_bold: bool = True
    boxdraw_braille: bool = True
    bellvolume: int = 0
    termname: str = "st-256color"
    tabspaces: int = 8
    alpha: float = 0.9
    colornames: list[str | None] = field(default_factory=default_colornames)
    defaultfg: int = 259
    defaultbg: int = 258
    defaultcs: int = 256
    defaultrcs: int = 257
    bg: int = 258
    cursorshape: int = 2
    cols: int = 80
    rows: int = 24
    mouseshape: int = XC_XTERM
    mousefg: int = 7
    mousebg: int = 0
    defaultattr: int = 11
    forcemousemod: int = SHIFT
    shortcuts: tuple[Shortcut, ...] = field(default_factory=default_shortcuts)
    mouse_shortcuts: tuple[MouseShortcut, ...] = field(default_factory=default_mouse_shortcuts)
    keys: tuple[Key, ...] = field(default_factory=default_keys)
    mappedkeys: tuple[int, ...] = ()
    ignoremod: int = int(Modifier.MOD2) | SWITCH_MOD
    selmasks: dict[str, int] = field(default_factory=lambda: {"rectangular": MOD1})
    ascii_printable: str = ASCII_PRINTABLE

    def resources(self) -> tuple[ResourcePref, ...]:
        """The resources that may override these settings at start-up."""
        return _RESOURCES