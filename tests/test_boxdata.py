import pytest

from stterm import boxdata
from stterm.boxdata import BoxCategory, boxdata_for, decode, is_boxdraw


def test_light_horizontal_value():
    assert boxdata_for(0x2500) == boxdata.BDL + boxdata.LH


def test_light_horizontal_decodes_to_lines():
    shape = decode(boxdata_for(0x2500))
    assert shape.category is BoxCategory.LINES
    assert shape.data == boxdata.LL | boxdata.LR
    assert shape.bold is False


def test_heavy_is_light_plus_double():
    assert boxdata.HH == boxdata.LH | boxdata.DH
    assert decode(boxdata_for(0x2501)).data == boxdata.HH


@pytest.mark.parametrize("cp", [0x2504, 0x250B, 0x254C, 0x254F, 0x2571, 0x2573])
def test_dashes_and_diagonals_unsupported(cp):
    assert not is_boxdraw(cp)
    assert boxdata_for(cp) == 0


@pytest.mark.parametrize("cp", [ord("A"), 0x24FF, 0x25A0, 0x27FF, 0x2900])
def test_outside_blocks(cp):
    assert boxdata_for(cp) == 0
    assert not is_boxdraw(cp)


def test_braille_carries_low_byte():
    shape = decode(boxdata_for(0x28FF))
    assert shape.category is BoxCategory.BRAILLE
    assert shape.data == 0xFF
    assert is_boxdraw(0x2800)


def test_arc():
    shape = decode(boxdata_for(0x256D))
    assert shape.category is BoxCategory.ARC
    assert shape.data == boxdata.LD | boxdata.LR


def test_full_block_is_lower_eight_eighths():
    shape = decode(boxdata_for(0x2588))
    assert shape.category is BoxCategory.BLOCK_DOWN
    assert shape.data == 0


def test_left_blocks_ordered():
    datas = [decode(boxdata_for(cp)).data for cp in range(0x2589, 0x2590)]
    assert datas == sorted(datas, reverse=True)
    assert all(decode(boxdata_for(cp)).category is BoxCategory.BLOCK_LEFT
               for cp in range(0x2589, 0x2590))


def test_upper_and_right_halves():
    assert decode(boxdata_for(0x2580)).category is BoxCategory.BLOCK_UPPER
    assert decode(boxdata_for(0x2590)).category is BoxCategory.BLOCK_RIGHT


def test_quadrant():
    shape = decode(boxdata_for(0x2599))
    assert shape.category is BoxCategory.QUADRANTS
    assert shape.data == boxdata.TL | boxdata.BL | boxdata.BR


def test_shades():
    shapes = [decode(boxdata_for(cp)) for cp in (0x2591, 0x2592, 0x2593)]
    assert [s.data for s in shapes] == [1, 2, 3]
    assert {s.category for s in shapes} == {BoxCategory.SHADE}


def test_bold_flag():
    shape = decode(boxdata.BDL | boxdata.BDB | boxdata.LH)
    assert shape.bold is True
    assert shape.category is BoxCategory.LINES


@pytest.mark.parametrize("value", [0, 7 << 10, -1, 0x10000])
def test_decode_rejects_invalid(value):
    with pytest.raises(ValueError):
        decode(value)


def test_every_supported_cell_decodes():
    for cp in range(0x2500, 0x25A0):
        value = boxdata_for(cp)
        if value:
            assert decode(value).data == value & 0xFF