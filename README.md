# stterm

The input and presentation logic of a small X terminal emulator, as a
plain Python library with no dependencies outside the standard library.

- `stterm.keytable`: the special-key table (`Key`, `Modifier`,
  `default_keys`, `keys_for`) and the key symbol constants it uses.
- `stterm.keymap`: turning a key symbol and modifier state into the string
  sent to the program (`kmap`, with `KeyModes` for application keypad,
  application cursor and num lock), finding keyboard shortcuts
  (`find_shortcut`), modifier matching (`match`) and the Alt convention for
  single bytes (`encode_meta`).
- `stterm.mouse`: button masks, pixel-to-cell conversion (`event_cell`),
  mouse shortcuts (`find_mouse_shortcut`) and xterm-style mouse reports in
  X10, normal and SGR forms (`MouseReporter`, `MouseEvent`,
  `MouseEventType`, `MouseModes`).
- `stterm.colors`: 16-bit colours (`Rgb` with `inverted`, `faint`,
  `to_8bit`), colour name parsing (`#rgb`-style hex, `rgb:r/g/b` and a
  small set of named colours), the 6×6×6 cube and grey ramp
  (`default_index_color`), packed truecolor values and the `Palette`.
- `stterm.boxdata`: shape data for U+2500–U+259F and braille U+2800–U+28FF
  (`boxdata_for`, `is_boxdraw`, `decode` into a `BoxShape`).
- `stterm.window`: window mode flags (`WindowMode`), cell geometry and
  resizing (`TermWindow`), window manager size hints (`SizeHints`,
  `Gravity`, `geommask_to_gravity`), the draw latency timeout
  (`draw_timeout`) and double/triple click detection (`ClickTracker`).
- `stterm.config`: the default settings (`Config`), shortcuts
  (`Shortcut`, `MouseShortcut`), colour names and the list of resources
  that may override settings (`ResourcePref`, `ResourceType`).
- `stterm.resources`: parsing X resource database text
  (`parse_resource_database`), looking up one resource (`resource_load`)
  and applying all of them to a `Config` (`load_resources`).
- `stterm.cli`: the command-line options (`parse_args`, `Options`,
  `UsageError`, `usage`, `main`).

## Installing

    pip install .

## Examples

What the Up arrow sends with no modifiers and normal cursor mode:

```python
from stterm.config import Config
from stterm.keymap import KeyModes, kmap
from stterm.keytable import UP

kmap(UP, 0, KeyModes(), Config())                    # '\x1b[A'
kmap(UP, 0, KeyModes(appcursor=True), Config())      # '\x1bOA'
```

Reporting a left-button press at column 4, row 2 in SGR mode:

```python
from stterm.mouse import MouseEvent, MouseEventType, MouseModes, MouseReporter

reporter = MouseReporter()
reporter.press(1)
reporter.report(MouseEvent(MouseEventType.PRESS, button=1), 4, 2, MouseModes(sgr=True))
# b'\x1b[<0;5;3M'
```

Decoding a box-drawing character:

```python
from stterm.boxdata import BoxCategory, boxdata_for, decode

shape = decode(boxdata_for(0x253C))   # light vertical and horizontal
shape.category is BoxCategory.LINES   # True
```

Overriding settings from resource text:

```python
from stterm.config import Config
from stterm.resources import load_resources, parse_resource_database

config = Config()
db = parse_resource_database("St.font: monospace:size=10\nst.tabspaces: 4\n")
load_resources(db, config)            # ['font', 'tabspaces']
config.tabspaces                      # 4
```

## Command line

    stterm [-aiv] [-c class] [-f font] [-g geometry] [-n name] [-o file]
           [-T title] [-t title] [-w windowid] [[-e] command [args ...]]
    stterm ... -l line [stty_args ...]

`stterm` parses these options and prints the resulting title, size, font,
alpha and the command (or line) that would be used. `stterm -v` writes the
version to standard error; an unknown option or a missing option value
writes the usage message to standard error. Both exit with status 1.

## What it does not do

The package holds no window, display connection or renderer, no
pseudo-terminal, and no screen buffer or escape-sequence interpreter. The
command line tool reports its settings; it does not open a terminal window
or start a shell.