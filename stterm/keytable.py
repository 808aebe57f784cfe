"""The special-key table: which bytes a function or keypad key sends."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class Modifier(enum.IntFlag):
    """Keyboard modifier state bits as reported by the X server."""

    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7


# Masks with a special meaning in the tables.
ANY_MOD = 0xFFFFFFFF
NO_MOD = 0
SWITCH_MOD = (1 << 13) | (1 << 14)

# Key symbols used by the key and shortcut tables.
BACKSPACE = 0xFF08
RETURN = 0xFF0D
HOME = 0xFF50
LEFT = 0xFF51
UP = 0xFF52
RIGHT = 0xFF53
DOWN = 0xFF54
PRIOR = 0xFF55
PAGE_UP = PRIOR
NEXT = 0xFF56
PAGE_DOWN = NEXT
END = 0xFF57
PRINT = 0xFF61
INSERT = 0xFF63
BREAK = 0xFF6B
NUM_LOCK = 0xFF7F
DELETE = 0xFFFF
ISO_LEFT_TAB = 0xFE20

KP_ENTER = 0xFF8D
KP_HOME = 0xFF95
KP_LEFT = 0xFF96
KP_UP = 0xFF97
KP_RIGHT = 0xFF98
KP_DOWN = 0xFF99
KP_PRIOR = 0xFF9A
KP_NEXT = 0xFF9B
KP_END = 0xFF9C
KP_BEGIN = 0xFF9D
KP_INSERT = 0xFF9E
KP_DELETE = 0xFF9F
KP_MULTIPLY = 0xFFAA
KP_ADD = 0xFFAB
KP_SUBTRACT = 0xFFAD
KP_DECIMAL = 0xFFAE
KP_DIVIDE = 0xFFAF
KP_0 = 0xFFB0
KP_1 = KP_0 + 1
KP_2 = KP_0 + 2
KP_3 = KP_0 + 3
KP_4 = KP_0 + 4
KP_5 = KP_0 + 5
KP_6 = KP_0 + 6
KP_7 = KP_0 + 7
KP_8 = KP_0 + 8
KP_9 = KP_0 + 9

F1 = 0xFFBE


def function_key(n: int) -> int:
    """The key symbol of function key F<n>, for n in 1..35."""
    if not 1 <= n <= 35:
        raise ValueError(f"no function key F{n}")
    return F1 + n - 1


@dataclass(frozen=True)
class Key:
    """One entry of the key table.

    appkey and appcursor are three-valued: 0 indifferent, above 0 only when
    the mode is on, below 0 only when it is off.  An appkey of 2 also
    requires num lock to be off.
    """

    keysym: int
    mask: int
    string: str
    appkey: int = 0
    appcursor: int = 0

    def __post_init__(self) -> None:
        if self.appkey not in (-1, 0, 1, 2):
            raise ValueError(f"appkey must be -1, 0, 1 or 2, not {self.appkey}")
        if self.appcursor not in (-1, 0, 1):
            raise ValueError(f"appcursor must be -1, 0 or 1, not {self.appcursor}")


_S = Modifier.SHIFT
_C = Modifier.CONTROL
_M1 = Modifier.MOD1
_M3 = Modifier.MOD3
_M4 = Modifier.MOD4
_E = "\x1b"


def _arrow_rows(keysym: int, letter: str) -> list[tuple[int, int, str, int, int]]:
    return [
        (keysym, _S, f"{_E}[1;2{letter}", 0, 0),
        (keysym, _M1, f"{_E}[1;3{letter}", 0, 0),
        (keysym, _S | _M1, f"{_E}[1;4{letter}", 0, 0),
        (keysym, _C, f"{_E}[1;5{letter}", 0, 0),
        (keysym, _S | _C, f"{_E}[1;6{letter}", 0, 0),
        (keysym, _C | _M1, f"{_E}[1;7{letter}", 0, 0),
        (keysym, _S | _C | _M1, f"{_E}[1;8{letter}", 0, 0),
        (keysym, ANY_MOD, f"{_E}[{letter}", 0, -1),
        (keysym, ANY_MOD, f"{_E}O{letter}", 0, 1),
    ]


def _fkey_rows(n: int, base: str, plain: str, with_mod3: bool) -> list[tuple[int, int, str, int, int]]:
    k = function_key(n)
    rows = [
        (k, NO_MOD, plain, 0, 0),
        (k, _S, base.format(2), 0, 0),
        (k, _C, base.format(5), 0, 0),
        (k, _M4, base.format(6), 0, 0),
        (k, _M1, base.format(3), 0, 0),
    ]
    if with_mod3:
        rows.append((k, _M3, base.format(4), 0, 0))
    return rows


def _build() -> tuple[Key, ...]:
    rows: list[tuple[int, int, str, int, int]] = [
        (KP_HOME, _S, f"{_E}[2J", 0, -1),
        (KP_HOME, _S, f"{_E}[1;2H", 0, 1),
        (KP_HOME, ANY_MOD, f"{_E}[H", 0, -1),
        (KP_HOME, ANY_MOD, f"{_E}[1~", 0, 1),
        (KP_UP, ANY_MOD, f"{_E}Ox", 1, 0),
        (KP_UP, ANY_MOD, f"{_E}[A", 0, -1),
        (KP_UP, ANY_MOD, f"{_E}OA", 0, 1),
        (KP_DOWN, ANY_MOD, f"{_E}Or", 1, 0),
        (KP_DOWN, ANY_MOD, f"{_E}[B", 0, -1),
        (KP_DOWN, ANY_MOD, f"{_E}OB", 0, 1),
        (KP_LEFT, ANY_MOD, f"{_E}Ot", 1, 0),
        (KP_LEFT, ANY_MOD, f"{_E}[D", 0, -1),
        (KP_LEFT, ANY_MOD, f"{_E}OD", 0, 1),
        (KP_RIGHT, ANY_MOD, f"{_E}Ov", 1, 0),
        (KP_RIGHT, ANY_MOD, f"{_E}[C", 0, -1),
        (KP_RIGHT, ANY_MOD, f"{_E}OC", 0, 1),
        (KP_PRIOR, _S, f"{_E}[5;2~", 0, 0),
        (KP_PRIOR, ANY_MOD, f"{_E}[5~", 0, 0),
        (KP_BEGIN, ANY_MOD, f"{_E}[E", 0, 0),
        (KP_END, _C, f"{_E}[J", -1, 0),
        (KP_END, _C, f"{_E}[1;5F", 1, 0),
        (KP_END, _S, f"{_E}[K", -1, 0),
        (KP_END, _S, f"{_E}[1;2F", 1, 0),
        (KP_END, ANY_MOD, f"{_E}[4~", 0, 0),
        (KP_NEXT, _S, f"{_E}[6;2~", 0, 0),
        (KP_NEXT, ANY_MOD, f"{_E}[6~", 0, 0),
        (KP_INSERT, _S, f"{_E}[2;2~", 1, 0),
        (KP_INSERT, _S, f"{_E}[4l", -1, 0),
        (KP_INSERT, _C, f"{_E}[L", -1, 0),
        (KP_INSERT, _C, f"{_E}[2;5~", 1, 0),
        (KP_INSERT, ANY_MOD, f"{_E}[4h", -1, 0),
        (KP_INSERT, ANY_MOD, f"{_E}[2~", 1, 0),
        (KP_DELETE, _C, f"{_E}[M", -1, 0),
        (KP_DELETE, _C, f"{_E}[3;5~", 1, 0),
        (KP_DELETE, _S, f"{_E}[2K", -1, 0),
        (KP_DELETE, _S, f"{_E}[3;2~", 1, 0),
        (KP_DELETE, ANY_MOD, f"{_E}[P", -1, 0),
        (KP_DELETE, ANY_MOD, f"{_E}[3~", 1, 0),
        (KP_MULTIPLY, ANY_MOD, f"{_E}Oj", 2, 0),
        (KP_ADD, ANY_MOD, f"{_E}Ok", 2, 0),
        (KP_ENTER, ANY_MOD, f"{_E}OM", 2, 0),
        (KP_ENTER, ANY_MOD, "\r", -1, 0),
        (KP_SUBTRACT, ANY_MOD, f"{_E}Om", 2, 0),
        (KP_DECIMAL, ANY_MOD, f"{_E}On", 2, 0),
        (KP_DIVIDE, ANY_MOD, f"{_E}Oo", 2, 0),
    ]
    rows += [(KP_0 + i, ANY_MOD, f"{_E}O{c}", 2, 0) for i, c in enumerate("pqrstuvwxy")]
    rows += _arrow_rows(UP, "A")
    rows += _arrow_rows(DOWN, "B")
    rows += _arrow_rows(LEFT, "D")
    rows += _arrow_rows(RIGHT, "C")
    rows += [
        (ISO_LEFT_TAB, _S, f"{_E}[Z", 0, 0),
        (RETURN, _M1, f"{_E}\r", 0, 0),
        (RETURN, ANY_MOD, "\r", 0, 0),
        (INSERT, _S, f"{_E}[4l", -1, 0),
        (INSERT, _S, f"{_E}[2;2~", 1, 0),
        (INSERT, _C, f"{_E}[L", -1, 0),
        (INSERT, _C, f"{_E}[2;5~", 1, 0),
        (INSERT, ANY_MOD, f"{_E}[4h", -1, 0),
        (INSERT, ANY_MOD, f"{_E}[2~", 1, 0),
        (DELETE, _C, f"{_E}[M", -1, 0),
        (DELETE, _C, f"{_E}[3;5~", 1, 0),
        (DELETE, _S, f"{_E}[2K", -1, 0),
        (DELETE, _S, f"{_E}[3;2~", 1, 0),
        (DELETE, ANY_MOD, f"{_E}[P", -1, 0),
        (DELETE, ANY_MOD, f"{_E}[3~", 1, 0),
        (BACKSPACE, NO_MOD, "\x7f", 0, 0),
        (BACKSPACE, _M1, f"{_E}\x7f", 0, 0),
        (HOME, _S, f"{_E}[2J", 0, -1),
        (HOME, _S, f"{_E}[1;2H", 0, 1),
        (HOME, ANY_MOD, f"{_E}[H", 0, -1),
        (HOME, ANY_MOD, f"{_E}[1~", 0, 1),
        (END, _C, f"{_E}[J", -1, 0),
        (END, _C, f"{_E}[1;5F", 1, 0),
        (END, _S, f"{_E}[K", -1, 0),
        (END, _S, f"{_E}[1;2F", 1, 0),
        (END, ANY_MOD, f"{_E}[4~", 0, 0),
        (PRIOR, _C, f"{_E}[5;5~", 0, 0),
        (PRIOR, _S, f"{_E}[5;2~", 0, 0),
        (PRIOR, ANY_MOD, f"{_E}[5~", 0, 0),
        (NEXT, _C, f"{_E}[6;5~", 0, 0),
        (NEXT, _S, f"{_E}[6;2~", 0, 0),
        (NEXT, ANY_MOD, f"{_E}[6~", 0, 0),
    ]
    for n, letter in zip(range(1, 5), "PQRS"):
        rows += _fkey_rows(n, _E + "[1;{}" + letter, f"{_E}O{letter}", with_mod3=n <= 3)
    for n, code in zip(range(5, 13), (15, 17, 18, 19, 20, 21, 23, 24)):
        rows += _fkey_rows(n, _E + f"[{code};" + "{}~", f"{_E}[{code}~", with_mod3=False)
    shifted = ["1;2P", "1;2Q", "1;2R", "1;2S", "15;2~", "17;2~", "18;2~", "19;2~",
               "20;2~", "21;2~", "23;2~", "24;2~"]
    controlled = ["1;5P", "1;5Q", "1;5R", "1;5S", "15;5~", "17;5~", "18;5~", "19;5~",
                  "20;5~", "21;5~", "23;5~"]
    rows += [(function_key(13 + i), NO_MOD, f"{_E}[{s}", 0, 0) for i, s in enumerate(shifted)]
    rows += [(function_key(25 + i), NO_MOD, f"{_E}[{s}", 0, 0) for i, s in enumerate(controlled)]
    return tuple(Key(*row) for row in rows)


_DEFAULT_KEYS = _build()


def default_keys() -> tuple[Key, ...]:
    """The built-in key table, in lookup order."""
    return _DEFAULT_KEYS


def keys_for(keysym: int, keys: Iterable[Key] | None = None) -> list[Key]:
    """The entries for one key symbol, in table order."""
    table = _DEFAULT_KEYS if keys is None else keys
    return [k for k in table if k.keysym == keysym]