"""Command line handling of the terminal."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from stterm.config import Config
from stterm.resources import _strtof
from stterm.window import HEIGHT_VALUE, WIDTH_VALUE, X_NEGATIVE, X_VALUE, Y_NEGATIVE, Y_VALUE

VERSION = "0.9.2"

_GEOMETRY_RE = re.compile(r"=?(\d+)?(?:[xX](\d+))?(?:([+-])(\d+)([+-])(\d+))?")
_WITH_VALUE = frozenset("AcfgolnTtw")


class UsageError(Exception):
    """The command line could not be understood."""


@dataclass
class Options:
    """Settings taken from the command line."""

    allowaltscreen: bool = True
    alpha: float | None = None
    win_class: str | None = None
    font: str | None = None
    geometry: int = 0
    cols: int = 80
    rows: int = 24
    left: int = 0
    top: int = 0
    isfixed: bool = False
    io: str | None = None
    line: str | None = None
    name: str | None = None
    title: str | None = None
    embed: str | None = None
    cmd: tuple[str, ...] | None = None
    version: bool = False


def _parse_geometry(spec: str, opts: Options) -> None:
    m = _GEOMETRY_RE.fullmatch(spec)
    if not m:
        return
    width, height, xsign, xval, ysign, yval = m.groups()
    mask = 0
    if width is not None:
        opts.cols = int(width)
        mask |= WIDTH_VALUE
    if height is not None:
        opts.rows = int(height)
        mask |= HEIGHT_VALUE
    if xval is not None:
        opts.left = -int(xval) if xsign == "-" else int(xval)
        opts.top = -int(yval) if ysign == "-" else int(yval)
        mask |= X_VALUE | Y_VALUE
        if xsign == "-":
            mask |= X_NEGATIVE
        if ysign == "-":
            mask |= Y_NEGATIVE
    opts.geometry = mask


def _apply_value(flag: str, value: str, opts: Options) -> None:
    if flag == "A":
        opts.alpha = min(max(_strtof(value), 0.0), 1.0)
    elif flag == "c":
        opts.win_class = value
    elif flag == "f":
        opts.font = value
    elif flag == "g":
        _parse_geometry(value, opts)
    elif flag == "o":
        opts.io = value
    elif flag == "l":
        opts.line = value
    elif flag == "n":
        opts.name = value
    elif flag in "tT":
        opts.title = value
    elif flag == "w":
        opts.embed = value


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    defaults = Config()
    opts = Options(cols=defaults.cols, rows=defaults.rows)
    args = list(argv)
    i = 0
    command_follows = False
    while i < len(args) and not command_follows:
        arg = args[i]
        if not arg.startswith("-") or len(arg) < 2:
            break
        if arg == "--":
            i += 1
            break
        j = 1
        while j < len(arg):
            flag = arg[j]
            if flag in _WITH_VALUE:
                if j + 1 < len(arg):
                    value = arg[j + 1:]
                elif i + 1 < len(args):
                    i += 1
                    value = args[i]
                else:
                    raise UsageError(f"option -{flag} requires an argument")
                _apply_value(flag, value, opts)
                break
            if flag == "a":
                opts.allowaltscreen = False
            elif flag == "i":
                opts.isfixed = True
            elif flag == "e":
                command_follows = True
                break
            elif flag == "v":
                opts.version = True
                return opts
            else:
                raise UsageError(f"unknown option -{flag}")
            j += 1
        i += 1
    rest = args[i:]
    if rest:
        opts.cmd = tuple(rest)
    if opts.title is None:
        opts.title = "st" if (opts.line or not opts.cmd) else opts.cmd[0]
    opts.cols = max(opts.cols, 1)
    opts.rows = max(opts.rows, 1)
    return opts


def usage(argv0: str) -> str:
    """The usage message."""
    return (
        f"usage: {argv0} [-aiv] [-c class] [-f font] [-g geometry] [-n name] [-o file]\n"
        f"          [-T title] [-t title] [-w windowid] [[-e] command [args ...]]\n"
        f"       {argv0} [-aiv] [-c class] [-f font] [-g geometry] [-n name] [-o file]\n"
        f"          [-T title] [-t title] [-w windowid] -l line [stty_args ...]\n"
    )


def _configure(opts: Options) -> Config:
    config = Config(allowaltscreen=opts.allowaltscreen, cols=opts.cols, rows=opts.rows)
    if opts.alpha is not None:
        config.alpha = opts.alpha
    if opts.font is not None:
        config.font = opts.font
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and report the resulting terminal settings."""
    if argv is None:
        argv0 = sys.argv[0] if sys.argv and sys.argv[0] else "st"
        argv = sys.argv[1:]
    else:
        argv0 = "st"
    try:
        opts = parse_args(argv)
    except UsageError:
        sys.stderr.write(usage(argv0))
        return 1
    if opts.version:
        sys.stderr.write(f"{argv0} {VERSION}\n")
        return 1
    config = _configure(opts)
    program = " ".join(opts.cmd) if opts.cmd and not opts.line else config.shell
    print(f"title: {opts.title}")
    print(f"size: {config.cols}x{config.rows}")
    print(f"font: {config.font}")
    print(f"alpha: {config.alpha}")
    print(f"line: {opts.line}" if opts.line else f"command: {program}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())