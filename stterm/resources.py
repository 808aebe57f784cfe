"""X resource database parsing and loading resources into the configuration."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping

from stterm.config import Config, ResourceType

Component = tuple[str, str]
ResourceDatabase = dict[tuple[Component, ...], str]

_ESCAPE_RE = re.compile(r"\\([0-7]{3}|n|\\|.)")
_INT_RE = re.compile(r"\s*([+-]?)(\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))")

_NAME = 2
_CLASS = 1
_ANY = 0


def _parse_name(spec: str) -> tuple[Component, ...]:
    components: list[Component] = []
    binding = "."
    current = ""
    for ch in spec:
        if ch in ".*":
            if current:
                components.append((binding, current))
                current = ""
                binding = ch
            elif ch == "*":
                binding = "*"
        else:
            current += ch
    if current:
        components.append((binding, current))
    return tuple(components)


def _unescape(value: str) -> str:
    def repl(m: re.Match[str]) -> str:
        seq = m.group(1)
        if seq == "n":
            return "\n"
        if len(seq) == 3:
            return chr(int(seq, 8))
        return seq

    return _ESCAPE_RE.sub(repl, value)


def _logical_lines(text: str) -> Iterator[str]:
    pending = ""
    for line in text.splitlines():
        stripped = line.rstrip("\r")
        trailing = len(stripped) - len(stripped.rstrip("\\"))
        if trailing % 2 == 1:
            pending += stripped[:-1]
            continue
        yield pending + stripped
        pending = ""
    if pending:
        yield pending


def parse_resource_database(text: str) -> ResourceDatabase:
    """Parse resource lines of the form 'name: value' into a database."""
    db: ResourceDatabase = {}
    for line in _logical_lines(text):
        body = line.lstrip(" \t")
        if not body or body.startswith("!") or body.startswith("#"):
            continue
        spec, sep, value = body.partition(":")
        if not sep:
            continue
        components = _parse_name(spec.strip(" \t"))
        if not components:
            continue
        db[components] = _unescape(value.lstrip(" \t"))
    return db


def _scores(entry: tuple[Component, ...], names: list[str], classes: list[str]
            ) -> Iterator[tuple[tuple[int, int, int], ...]]:
    def walk(e: int, level: int) -> Iterator[tuple[tuple[int, int, int], ...]]:
        if e == len(entry):
            if level == len(names):
                yield ()
            return
        if level == len(names):
            return
        binding, comp = entry[e]
        if comp == names[level]:
            kind: int | None = _NAME
        elif comp == classes[level]:
            kind = _CLASS
        elif comp == "?":
            kind = _ANY
        else:
            kind = None
        if kind is not None:
            tight = 1 if binding == "." else 0
            for rest in walk(e + 1, level + 1):
                yield ((1, kind, tight),) + rest
        if binding == "*":
            for rest in walk(e, level + 1):
                yield ((0, 0, 0),) + rest

    return walk(0, 0)


def _lookup(db: Mapping[tuple[Component, ...], str], fullname: str, fullclass: str) -> str | None:
    names = fullname.split(".")
    classes = fullclass.split(".")
    best: tuple[tuple[int, int, int], ...] | None = None
    found: str | None = None
    for entry, value in db.items():
        for score in _scores(entry, names, classes):
            if best is None or score > best:
                best = score
                found = value
    return found


def _strtoul(text: str) -> int:
    m = _INT_RE.match(text)
    if not m:
        return 0
    value = int(m.group(2))
    return -value if m.group(1) == "-" else value


def _strtof(text: str) -> float:
    m = _FLOAT_RE.match(text)
    return float(m.group(1)) if m else 0.0


def resource_load(db: Mapping[tuple[Component, ...], str], name: str, rtype: ResourceType,
                  name_prefix: str = "st", class_prefix: str = "St") -> str | int | float | None:
    """Look up one resource and convert it; None when it is not set."""
    raw = _lookup(db, f"{name_prefix}.{name}", f"{class_prefix}.{name}")
    if raw is None:
        return None
    if rtype is ResourceType.INTEGER:
        return _strtoul(raw)
    if rtype is ResourceType.FLOAT:
        return _strtof(raw)
    return raw


def load_resources(db: Mapping[tuple[Component, ...], str], config: Config,
                   name_prefix: str = "st", class_prefix: str = "St") -> list[str]:
    """Apply every known resource found in the database; return the names applied."""
    applied = []
    for pref in config.resources():
        value = resource_load(db, pref.name, pref.type, name_prefix, class_prefix)
        if value is None:
            continue
        if pref.index is None:
            setattr(config, pref.attribute, value)
        else:
            getattr(config, pref.attribute)[pref.index] = value
        applied.append(pref.name)
    return applied