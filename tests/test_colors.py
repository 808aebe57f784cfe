import pytest

from stterm.colors import (
    TRUECOLOR_FLAG,
    Palette,
    Rgb,
    default_index_color,
    is_truecolor,
    parse_color_name,
    sixd_to_16bit,
    truecolor,
)

NAMES = [
    "#282828", "#cc241d", "#98971a", "#d79921", "#458588", "#b16286",
    "#689d6a", "#a89984", "#928374", "#fb4934", "#b8bb26", "#fabd2f",
    "#83a598", "#d3869b", "#8ec07c", "#ebdbb2",
] + [None] * 240 + ["#add8e6", "#555555", "#282828", "#ebdbb2"]


def test_sixd():
    assert sixd_to_16bit(0) == 0
    assert sixd_to_16bit(1) == 0x3737 + 0x2828
    assert sixd_to_16bit(5) == 0xFFFF


def test_cube_corners():
    assert default_index_color(16) == Rgb(0, 0, 0)
    assert default_index_color(231) == Rgb(0xFFFF, 0xFFFF, 0xFFFF)


def test_greyscale_start():
    assert default_index_color(232) == Rgb(0x0808, 0x0808, 0x0808)
    greys = [default_index_color(i).red for i in range(232, 256)]
    assert greys == sorted(greys)


@pytest.mark.parametrize("index", [0, 15, 256])
def test_default_index_out_of_range(index):
    with pytest.raises(ValueError):
        default_index_color(index)


def test_parse_hex():
    assert parse_color_name("#282828").to_8bit() == (0x28, 0x28, 0x28)
    assert parse_color_name("#ebdbb2").to_8bit() == (0xEB, 0xDB, 0xB2)


def test_parse_hex_forms_agree():
    assert parse_color_name("#abc").to_8bit() == parse_color_name("#a0b0c0").to_8bit()


def test_parse_rgb_form_scales():
    assert parse_color_name("rgb:ff/0/ff") == Rgb(0xFFFF, 0, 0xFFFF)


def test_parse_names():
    assert parse_color_name("white") == Rgb(0xFFFF, 0xFFFF, 0xFFFF)
    assert parse_color_name("Black") == Rgb(0, 0, 0)


@pytest.mark.parametrize("name", ["nosuchcolour", "#12345", "#xyz", ""])
def test_parse_invalid(name):
    with pytest.raises(ValueError):
        parse_color_name(name)


def test_inverted_round_trip():
    c = Rgb(0x1234, 0xABCD, 0x0F0F, 0x8000)
    assert c.inverted().inverted() == c
    assert c.inverted().alpha == c.alpha
    assert c.inverted().red + c.red == 0xFFFF


def test_faint_halves():
    c = Rgb(0x8000, 0x4000, 0x2000, 0x1111)
    f = c.faint()
    assert (f.red * 2, f.green * 2, f.blue * 2) == (c.red, c.green, c.blue)
    assert f.alpha == c.alpha


def test_truecolor():
    value = TRUECOLOR_FLAG | 0x123456
    assert is_truecolor(value)
    assert truecolor(value).to_8bit() == (0x12, 0x34, 0x56)
    assert not is_truecolor(0x123456)


def test_palette_length_and_cube():
    p = Palette(NAMES, 258, 0.9)
    assert len(p) == len(NAMES)
    assert p.get(16) == default_index_color(16)
    assert p.get(0).to_8bit() == (0x28, 0x28, 0x28)


def test_palette_alpha_on_defaultbg():
    p = Palette(NAMES, 258, 0.9)
    assert p.get(258).alpha == int(0xFFFF * 0.9)
    assert p.get(259).alpha == 0xFFFF


def test_palette_ignores_names_in_cube_at_load():
    names = list(NAMES)
    names[20] = "#ffffff"
    p = Palette(names, 258, 1.0)
    assert p.get(20) == default_index_color(20)


def test_palette_minimum_size():
    p = Palette(NAMES[:16], 0, 1.0)
    assert len(p) == 256


def test_palette_missing_low_name():
    names = list(NAMES)
    names[3] = None
    with pytest.raises(ValueError):
        Palette(names, 258, 1.0)


def test_palette_bad_name():
    names = list(NAMES)
    names[257] = "nosuchcolour"
    with pytest.raises(ValueError):
        Palette(names, 258, 1.0)


def test_palette_get_out_of_range():
    p = Palette(NAMES, 258, 1.0)
    with pytest.raises(IndexError):
        p.get(len(p))
    with pytest.raises(IndexError):
        p.get(-1)


def test_set_name():
    p = Palette(NAMES, 258, 1.0)
    p.set_name(3, "white")
    assert p.get(3) == parse_color_name("white")


def test_set_name_failure_keeps_colour():
    p = Palette(NAMES, 258, 1.0)
    before = p.get(3)
    with pytest.raises(ValueError):
        p.set_name(3, "nosuchcolour")
    assert p.get(3) == before
    with pytest.raises(IndexError):
        p.set_name(999, "white")


def test_set_name_defaultbg_keeps_alpha():
    p = Palette(NAMES, 258, 0.5)
    p.set_name(258, "#000000")
    assert p.get(258).alpha == int(0xFFFF * 0.5)


def test_set_name_none_restores_builtin():
    p = Palette(NAMES, 258, 1.0)
    p.set_name(100, "white")
    p.set_name(100, None)
    assert p.get(100) == default_index_color(100)