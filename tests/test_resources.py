import pytest

from stterm.config import Config, ResourceType
from stterm.resources import load_resources, parse_resource_database, resource_load


def test_exact_name_lookup():
    db = parse_resource_database("st.font: mono:pixelsize=14\n")
    assert resource_load(db, "font", ResourceType.STRING) == "mono:pixelsize=14"


def test_class_lookup():
    db = parse_resource_database("St.termname: xterm\n")
    assert resource_load(db, "termname", ResourceType.STRING) == "xterm"


def test_loose_binding():
    db = parse_resource_database("*shell: /bin/zsh\n")
    assert resource_load(db, "shell", ResourceType.STRING) == "/bin/zsh"


def test_name_beats_wildcard():
    db = parse_resource_database("*font: loose\nst.font: tight\n")
    assert resource_load(db, "font", ResourceType.STRING) == "tight"


def test_missing_resource_is_none():
    db = parse_resource_database("st.font: mono\n")
    assert resource_load(db, "shell", ResourceType.STRING) is None


def test_other_program_not_matched():
    db = parse_resource_database("xterm.font: fixed\n")
    assert resource_load(db, "font", ResourceType.STRING) is None


def test_custom_prefix():
    db = parse_resource_database("myterm.shell: /bin/ksh\n")
    assert resource_load(db, "shell", ResourceType.STRING, "myterm", "MyTerm") == "/bin/ksh"


def test_integer_conversion_stops_at_garbage():
    db = parse_resource_database("st.tabspaces: 4spaces\n")
    assert resource_load(db, "tabspaces", ResourceType.INTEGER) == 4


def test_integer_without_digits_is_zero():
    db = parse_resource_database("st.tabspaces: none\n")
    assert resource_load(db, "tabspaces", ResourceType.INTEGER) == 0


def test_float_conversion():
    db = parse_resource_database("st.cwscale: 1.5\n")
    assert resource_load(db, "cwscale", ResourceType.FLOAT) == pytest.approx(1.5)


def test_comments_and_blank_lines_ignored():
    db = parse_resource_database("! a comment\n\n#include \"x\"\nst.font: mono\n")
    assert list(db.values()) == ["mono"]


def test_escapes_and_continuation():
    db = parse_resource_database("st.shell: a\\nb\\\n c\n")
    assert resource_load(db, "shell", ResourceType.STRING) == "a\nb c"


def test_later_entry_overrides():
    db = parse_resource_database("st.font: first\nst.font: second\n")
    assert resource_load(db, "font", ResourceType.STRING) == "second"


def test_load_resources_updates_config():
    db = parse_resource_database(
        "st.background: #000000\nst.color1: #ff0000\nst.borderpx: 5\nst.alpha: 0.5\n"
    )
    config = Config()
    applied = load_resources(db, config)
    assert set(applied) == {"background", "color1", "borderpx", "alpha"}
    assert config.colornames[258] == "#000000"
    assert config.colornames[1] == "#ff0000"
    assert config.borderpx == 5
    assert config.alpha == pytest.approx(0.5)


def test_load_resources_empty_database_changes_nothing():
    config = Config()
    assert load_resources({}, config) == []
    assert config == Config()