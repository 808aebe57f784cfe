from stterm.config import (
    BUTTON2,
    BUTTON4,
    COPY_OUTPUT_COMMAND,
    Config,
    MouseShortcut,
    ResourceType,
    Shortcut,
    default_colornames,
    default_mouse_shortcuts,
    default_shortcuts,
)
from stterm.keytable import ANY_MOD, INSERT, Modifier


def test_colornames_layout():
    names = default_colornames()
    assert names[0] == "#282828"
    assert names[15] == "#ebdbb2"
    assert all(name is None for name in names[16:256])
    assert names[256] == "#add8e6"
    assert names[258] == "#282828"
    assert names[259] == "#ebdbb2"


def test_colornames_fresh_copy_each_call():
    first = default_colornames()
    first[0] = "#000000"
    assert default_colornames()[0] == "#282828"


def test_config_defaults():
    config = Config()
    assert config.defaultfg == 259
    assert config.defaultbg == 258
    assert config.defaultcs == 256
    assert config.defaultrcs == 257
    assert config.tabspaces == 8
    assert config.termname == "st-256color"
    assert config.cols == 80 and config.rows == 24
    assert config.ignoremod & int(Modifier.MOD2)


def test_configs_do_not_share_colornames():
    a = Config()
    b = Config()
    a.colornames[1] = "#123456"
    assert b.colornames[1] == "#cc241d"


def test_resources_point_at_config_fields():
    config = Config()
    for pref in config.resources():
        value = getattr(config, pref.attribute)
        if pref.index is not None:
            assert 0 <= pref.index < len(value)


def test_resource_color_targets():
    by_name = {p.name: p for p in Config().resources()}
    assert by_name["background"].index == 258
    assert by_name["foreground"].index == 259
    assert by_name["cursorColor"].index == 256
    assert by_name["color7"].index == 7
    assert by_name["alpha"].type is ResourceType.FLOAT
    assert by_name["tabspaces"].type is ResourceType.INTEGER
    assert by_name["font"].type is ResourceType.STRING


def test_shift_insert_first_is_clippaste():
    matches = [s for s in default_shortcuts() if s.keysym == INSERT]
    assert [s.action for s in matches] == ["clippaste", "selpaste"]


def test_externalpipe_carries_command():
    pipes = [s for s in default_shortcuts() if s.action == "externalpipe"]
    assert pipes[-1].arg == COPY_OUTPUT_COMMAND


def test_shortcut_is_immutable_value():
    shortcut = Shortcut(1, 2, "zoom", 1.0)
    assert shortcut == Shortcut(1, 2, "zoom", 1.0)
    assert shortcut.keysym == 2
    assert shortcut.action == "zoom"
    assert shortcut.arg == 1.0


def test_mouse_shortcuts():
    shortcuts = default_mouse_shortcuts()
    assert shortcuts[0] == MouseShortcut(ANY_MOD, BUTTON2, "clippaste", 0, release=True)
    wheel = [s for s in shortcuts if s.button == BUTTON4]
    assert [s.arg for s in wheel] == ["\x1b[5;2~", "\x19"]
    assert not any(s.release for s in shortcuts[1:])