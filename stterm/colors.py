"""Colour values, colour name parsing and the terminal palette."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, replace

TRUECOLOR_FLAG = 1 << 24
CUBE_END = 6 * 6 * 6 + 16
FULL = 0xFFFF

_NAMED_8BIT: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "red3": (205, 0, 0),
    "green": (0, 255, 0),
    "green3": (0, 205, 0),
    "yellow": (255, 255, 0),
    "yellow3": (205, 205, 0),
    "blue": (0, 0, 255),
    "blue2": (0, 0, 238),
    "magenta": (255, 0, 255),
    "magenta3": (205, 0, 205),
    "cyan": (0, 255, 255),
    "cyan3": (0, 205, 205),
    "gray": (190, 190, 190),
    "grey": (190, 190, 190),
    "gray50": (127, 127, 127),
    "grey50": (127, 127, 127),
    "gray90": (229, 229, 229),
    "grey90": (229, 229, 229),
}

_HEX_RE = re.compile(r"#([0-9a-fA-F]+)")
_RGB_RE = re.compile(r"rgb:([0-9a-fA-F]{1,4})/([0-9a-fA-F]{1,4})/([0-9a-fA-F]{1,4})")


@dataclass(frozen=True)
class Rgb:
    """A colour with 16-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = FULL

    def inverted(self) -> Rgb:
        """The channel-wise complement, keeping alpha."""
        return Rgb(~self.red & FULL, ~self.green & FULL, ~self.blue & FULL, self.alpha)

    def faint(self) -> Rgb:
        """Half intensity, keeping alpha."""
        return Rgb(self.red // 2, self.green // 2, self.blue // 2, self.alpha)

    def to_8bit(self) -> tuple[int, int, int]:
        """The red, green and blue channels cut to 8 bits."""
        return self.red >> 8, self.green >> 8, self.blue >> 8


def sixd_to_16bit(x: int) -> int:
    """Map a colour cube coordinate 0..5 to a 16-bit channel value."""
    return 0 if x == 0 else 0x3737 + 0x2828 * x


def _scale(digits: str) -> int:
    bits = 4 * len(digits)
    value = int(digits, 16)
    return value * FULL // ((1 << bits) - 1)


def parse_color_name(name: str) -> Rgb:
    """Parse '#rgb' style, 'rgb:r/g/b' or a known colour name."""
    text = name.strip()
    if m := _HEX_RE.fullmatch(text):
        digits = m.group(1)
        if len(digits) not in (3, 6, 9, 12):
            raise ValueError(f"bad colour specification: {name!r}")
        n = len(digits) // 3
        shift = 16 - 4 * n
        r, g, b = (int(digits[i * n:(i + 1) * n], 16) << shift for i in range(3))
        return Rgb(r, g, b)
    if m := _RGB_RE.fullmatch(text):
        return Rgb(*(_scale(part) for part in m.groups()))
    key = text.replace(" ", "").lower()
    try:
        r, g, b = _NAMED_8BIT[key]
    except KeyError:
        raise ValueError(f"unknown colour name: {name!r}") from None
    return Rgb(r * 257, g * 257, b * 257)


def default_index_color(index: int) -> Rgb:
    """The xterm colour for a 256-colour index in 16..255."""
    if not 16 <= index <= 255:
        raise ValueError(f"no built-in colour for index {index}")
    if index < CUBE_END:
        i = index - 16
        return Rgb(sixd_to_16bit((i // 36) % 6), sixd_to_16bit((i // 6) % 6),
                   sixd_to_16bit(i % 6))
    level = 0x0808 + 0x0A0A * (index - CUBE_END)
    return Rgb(level, level, level)


def is_truecolor(value: int) -> bool:
    """Whether a colour value carries a direct RGB triple."""
    return bool(value & TRUECOLOR_FLAG)


def truecolor(value: int) -> Rgb:
    """Expand a packed 0xRRGGBB colour to 16-bit channels."""
    return Rgb((value & 0xFF0000) >> 8, value & 0xFF00, (value & 0xFF) << 8)


def _load(index: int, name: str | None) -> Rgb:
    if name is None:
        if 16 <= index <= 255:
            return default_index_color(index)
        raise ValueError(f"could not allocate color {index}")
    try:
        return parse_color_name(name)
    except ValueError:
        raise ValueError(f"could not allocate color '{name}'") from None


class Palette:
    """The terminal's indexed colours, at least 256 of them."""

    def __init__(self, colornames: Sequence[str | None], defaultbg: int, alpha: float) -> None:
        self._names = list(colornames)
        self._defaultbg = defaultbg
        self._alpha = alpha
        size = max(len(self._names), 256)
        self._colors = [
            self._with_alpha(i, _load(i, None if 16 <= i <= 255 else self._name(i)))
            for i in range(size)
        ]

    def _name(self, index: int) -> str | None:
        return self._names[index] if index < len(self._names) else None

    def _with_alpha(self, index: int, color: Rgb) -> Rgb:
        if index == self._defaultbg:
            return replace(color, alpha=int(FULL * self._alpha))
        return color

    def get(self, index: int) -> Rgb:
        """Return the colour at an index."""
        if not 0 <= index < len(self._colors):
            raise IndexError(f"colour index out of range: {index}")
        return self._colors[index]

    def set_name(self, index: int, name: str | None) -> None:
        """Replace the colour at an index by a named (or built-in) colour."""
        if not 0 <= index < len(self._colors):
            raise IndexError(f"colour index out of range: {index}")
        if name is None:
            name = None if 16 <= index <= 255 else self._name(index)
        self._colors[index] = self._with_alpha(index, _load(index, name))

    def __len__(self) -> int:
        return len(self._colors)