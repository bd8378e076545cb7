import pytest

from stkit.boxdraw import (
    BBD,
    BDB,
    BDL,
    BRL,
    LL,
    LR,
    Fill,
    Rect,
    boxdraw_index,
    draw_box,
    draw_boxes,
    is_boxdraw,
    shade_color,
)
from stkit.colors import Color

FG = Color(0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)
BG = Color(0, 0, 0, 0xFFFF)


def test_is_boxdraw_light_horizontal():
    assert is_boxdraw(0x2500, True, False) is True


def test_is_boxdraw_disabled():
    assert is_boxdraw(0x2500, False, False) is False


def test_dashes_are_unsupported():
    assert is_boxdraw(0x2504, True, True) is False


def test_braille_depends_on_flag():
    assert is_boxdraw(0x2841, False, True) is True
    assert is_boxdraw(0x2841, True, False) is False


def test_index_light_horizontal():
    assert boxdraw_index(0x2500, False, False, False) == BDL + LL + LR


def test_index_braille():
    assert boxdraw_index(0x2841, False, False, True) == BRL | 0x41


def test_index_bold_only_when_enabled():
    assert boxdraw_index(0x2500, True, True, False) == BDB | (BDL + LL + LR)
    assert boxdraw_index(0x2500, True, False, False) == BDL + LL + LR


def test_full_block_fills_cell():
    bd = boxdraw_index(0x2588, False, False, False)
    assert bd == BBD
    assert draw_box(3, 5, 8, 16, FG, BG, bd) == [Fill(Rect(3, 5, 8, 16), FG)]


def test_upper_and_lower_eighths_cover_cell():
    upper = draw_box(0, 0, 8, 16, FG, BG, boxdraw_index(0x2594, False, False, False))
    lower = draw_box(0, 0, 8, 16, FG, BG, boxdraw_index(0x2587, False, False, False))
    area = sum(f.rect.w * f.rect.h for f in upper + lower)
    assert area == 8 * 16


def test_quadrants_partition_cell():
    a = draw_box(0, 0, 9, 17, FG, BG, boxdraw_index(0x2596, False, False, False))
    b = draw_box(0, 0, 9, 17, FG, BG, boxdraw_index(0x259C, False, False, False))
    assert sum(f.rect.w * f.rect.h for f in a + b) == 9 * 17


def test_full_braille_partitions_cell():
    fills = draw_box(0, 0, 9, 19, FG, BG, boxdraw_index(0x28FF, False, False, True))
    assert len(fills) == 8
    assert sum(f.rect.w * f.rect.h for f in fills) == 9 * 19


def test_shade_uses_blended_color():
    bd = boxdraw_index(0x2592, False, False, False)
    fills = draw_box(0, 0, 8, 16, FG, BG, bd)
    assert fills == [Fill(Rect(0, 0, 8, 16), shade_color(FG, BG, 2))]


@pytest.mark.parametrize("level", [0, 1, 2, 3, 4])
def test_shade_of_equal_colors_is_identity(level):
    c = Color(1000, 2000, 3000, 0xFFFF)
    assert shade_color(c, c, level) == c


def test_shade_extremes():
    assert shade_color(FG, BG, 4) == FG
    assert shade_color(FG, BG, 0) == BG


def test_unsupported_index_draws_nothing():
    assert draw_box(0, 0, 8, 16, FG, BG, 0) == []


@pytest.mark.parametrize("size", [(8, 16), (10, 20), (12, 24)])
@pytest.mark.parametrize("bold", [False, True])
def test_fills_stay_inside_cell(size, bold):
    w, h = size
    x0, y0 = 100, 200
    for u in list(range(0x2500, 0x25A0)) + list(range(0x2800, 0x2900)):
        if not is_boxdraw(u, True, True):
            continue
        bd = boxdraw_index(u, bold, True, True)
        for f in draw_box(x0, y0, w, h, FG, BG, bd):
            r = f.rect
            assert r.w >= 0 and r.h >= 0
            assert x0 <= r.x and r.x + r.w <= x0 + w, hex(u)
            assert y0 <= r.y and r.y + r.h <= y0 + h, hex(u)


def test_draw_boxes_advances_by_cell_width():
    full = boxdraw_index(0x2588, False, False, False)
    fills = draw_boxes(0, 0, 8, 16, FG, BG, [full, full, full])
    assert [f.rect.x for f in fills] == [0, 8, 16]