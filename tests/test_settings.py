import pytest

from hovercat.settings import (
    GAME_SCREEN_HEIGHT,
    GAME_SCREEN_WIDTH,
    letterbox_rect,
    screen_scale,
)


def test_native_size_has_unit_scale():
    assert screen_scale(GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT) == 1.0


@pytest.mark.parametrize("factor", [2, 3, 0.5])
def test_scale_is_linear_in_window_size(factor):
    assert screen_scale(GAME_SCREEN_WIDTH * factor, GAME_SCREEN_HEIGHT * factor) == pytest.approx(factor)


def test_scale_is_limited_by_the_narrower_side():
    wide = screen_scale(GAME_SCREEN_WIDTH * 4, GAME_SCREEN_HEIGHT)
    tall = screen_scale(GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT * 4)
    assert wide == pytest.approx(1.0)
    assert tall == pytest.approx(1.0)


def test_letterbox_at_native_size_fills_window():
    assert letterbox_rect(GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT) == (
        0.0,
        0.0,
        GAME_SCREEN_WIDTH,
        GAME_SCREEN_HEIGHT,
    )


@pytest.mark.parametrize("size", [(1920, 1080), (2000, 600), (800, 1200), (1280, 1024)])
def test_letterbox_is_centred_and_keeps_aspect(size):
    sw, sh = size
    x, y, w, h = letterbox_rect(sw, sh)
    assert 2 * x + w == pytest.approx(sw)
    assert 2 * y + h == pytest.approx(sh)
    assert w / h == pytest.approx(GAME_SCREEN_WIDTH / GAME_SCREEN_HEIGHT)
    assert x >= 0 and y >= 0
    assert w == pytest.approx(sw) or h == pytest.approx(sh)