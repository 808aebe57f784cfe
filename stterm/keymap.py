"""Turning key presses into shortcuts and the bytes sent to the terminal."""

from __future__ import annotations

from dataclasses import dataclass

from stterm.config import Config, Shortcut
from stterm.keytable import ANY_MOD, Modifier

_FUNCTION_KEY_START = 0xFD00


@dataclass(frozen=True)
class KeyModes:
    """The terminal modes that change what a special key sends."""

    appkeypad: bool = False
    appcursor: bool = False
    numlock: bool = True


def match(mask: int, state: int, ignoremod: int) -> bool:
    """Whether a table mask matches a modifier state, ignoring some bits."""
    return mask == ANY_MOD or mask == (state & ~ignoremod)


def kmap(keysym: int, state: int, modes: KeyModes, config: Config) -> str | None:
    """The string a special key sends, or None if the table has no entry."""
    if keysym not in config.mappedkeys and (keysym & 0xFFFF) < _FUNCTION_KEY_START:
        return None
    for key in config.keys:
        if key.keysym != keysym:
            continue
        if not match(key.mask, state, config.ignoremod):
            continue
        if (key.appkey < 0) if modes.appkeypad else (key.appkey > 0):
            continue
        if modes.numlock and key.appkey == 2:
            continue
        if (key.appcursor < 0) if modes.appcursor else (key.appcursor > 0):
            continue
        return key.string
    return None


def find_shortcut(keysym: int, state: int, config: Config) -> Shortcut | None:
    """The first keyboard shortcut matching the key and modifiers."""
    return next(
        (s for s in config.shortcuts
         if s.keysym == keysym and match(s.mod, state, config.ignoremod)),
        None,
    )


def encode_meta(text: bytes, state: int, eightbit: bool) -> bytes:
    """Apply the Alt (meta) convention to a single composed byte.

    With Alt held, a lone byte is prefixed with ESC, or in eight-bit mode
    gets its high bit set and is sent as UTF-8.
    """
    if len(text) != 1 or not state & Modifier.MOD1:
        return text
    if eightbit:
        if text[0] < 0o177:
            return chr(text[0] | 0x80).encode("utf-8")
        return text
    return b"\x1b" + text