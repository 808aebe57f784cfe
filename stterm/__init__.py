"""Key, mouse, colour, box-drawing, window and configuration logic of a small X terminal."""

__version__ = "0.9.2"
__all__ = [
    "boxdata",
    "cli",
    "colors",
    "config",
    "keymap",
    "keytable",
    "mouse",
    "resources",
    "window",
]