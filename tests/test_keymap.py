import pytest

from stterm.config import Config
from stterm.keymap import KeyModes, encode_meta, find_shortcut, kmap, match
from stterm.keytable import (
    ANY_MOD,
    INSERT,
    KP_ENTER,
    UP,
    Key,
    Modifier,
    function_key,
)

SHIFT = int(Modifier.SHIFT)
CONTROL = int(Modifier.CONTROL)
MOD1 = int(Modifier.MOD1)
MOD2 = int(Modifier.MOD2)


@pytest.fixture
def config():
    return Config()


def test_match_any_mod():
    assert match(ANY_MOD, SHIFT | CONTROL, 0)


def test_match_ignores_bits():
    assert match(SHIFT, SHIFT | MOD2, MOD2)
    assert not match(SHIFT, SHIFT | CONTROL, MOD2)


def test_kmap_f1_plain(config):
    assert kmap(function_key(1), 0, KeyModes(), config) == "\x1bOP"


def test_kmap_arrow_cursor_modes(config):
    assert kmap(UP, 0, KeyModes(appcursor=False), config) == "\x1b[A"
    assert kmap(UP, 0, KeyModes(appcursor=True), config) == "\x1bOA"


def test_kmap_shifted_arrow_with_numlock_bit(config):
    assert kmap(UP, SHIFT | MOD2, KeyModes(), config) == "\x1b[1;2A"


def test_kmap_keypad_enter(config):
    assert kmap(KP_ENTER, 0, KeyModes(appkeypad=False), config) == "\r"
    assert kmap(KP_ENTER, 0, KeyModes(appkeypad=True, numlock=False), config) == "\x1bOM"
    assert kmap(KP_ENTER, 0, KeyModes(appkeypad=True, numlock=True), config) is None


def test_kmap_ordinary_key_is_not_mapped(config):
    assert kmap(ord("a"), 0, KeyModes(), config) is None


def test_kmap_mapped_keys_extend_table():
    custom = Config(keys=(Key(ord("a"), ANY_MOD, "\x1bXa"),), mappedkeys=(ord("a"),))
    assert kmap(ord("a"), 0, KeyModes(), custom) == "\x1bXa"
    unmapped = Config(keys=(Key(ord("a"), ANY_MOD, "\x1bXa"),))
    assert kmap(ord("a"), 0, KeyModes(), unmapped) is None


def test_find_shortcut_termmod_copy(config):
    shortcut = find_shortcut(ord("C"), CONTROL | SHIFT, config)
    assert shortcut.action == "clipcopy"


def test_find_shortcut_first_wins(config):
    assert find_shortcut(INSERT, SHIFT, config).action == "clippaste"


def test_find_shortcut_scroll_argument(config):
    shortcut = find_shortcut(ord("k"), MOD1 | MOD2, config)
    assert (shortcut.action, shortcut.arg) == ("kscrollup", 1)


def test_find_shortcut_none(config):
    assert find_shortcut(ord("q"), 0, config) is None


def test_encode_meta_escape_prefix():
    assert encode_meta(b"a", MOD1, eightbit=False) == b"\x1ba"


def test_encode_meta_eightbit():
    assert encode_meta(b"a", MOD1, eightbit=True) == "\u00e1".encode("utf-8")


def test_encode_meta_unchanged_cases():
    assert encode_meta(b"a", 0, eightbit=False) == b"a"
    assert encode_meta(b"ab", MOD1, eightbit=False) == b"ab"
    assert encode_meta(b"\x7f", MOD1, eightbit=True) == b"\x7f"