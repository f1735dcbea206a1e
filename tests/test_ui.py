from hovercat.settings import TITLE_AREA_HEIGHT, WHITE, YELLOW
from hovercat.ui import hud_lines, in_title_area, overlay_lines
from hovercat.world import Hovercat


def make_game():
    return Hovercat(store=None)


def texts(lines):
    return [line.text for line in lines]


def test_hud_lines_show_score_high_score_and_speed():
    game = make_game()
    game.score = 4
    game.high_score = 9
    game.pipe_speed = 312.9
    assert hud_lines(game) == ["Score: 4", "High Score: 9", "Speed: 312"]


def test_welcome_screen_desktop():
    lines = overlay_lines(make_game(), mobile=False)
    assert lines[0].text == "Welcome to Hovercat"
    assert "Press Enter to play" in texts(lines)
    assert "Tap to play" not in texts(lines)
    ys = [line.y for line in lines]
    assert ys == sorted(ys)


def test_welcome_screen_mobile():
    lines = overlay_lines(make_game(), mobile=True)
    assert "Tap to play" in texts(lines)
    assert "- Tap to flap" in texts(lines)
    assert all(line.color in (WHITE, YELLOW) for line in lines)


def test_exit_prompt_takes_precedence():
    game = make_game()
    game.exit_requested = True
    game.paused = True
    assert texts(overlay_lines(game, mobile=False)) == ["Are you sure you want to exit? [Y/N]"]


def test_paused_text_depends_on_device():
    game = make_game()
    game.first_time_start = False
    game.paused = True
    assert texts(overlay_lines(game, False)) == ["Game paused, press P to continue"]
    assert texts(overlay_lines(game, True)) == ["Game paused, tap to continue"]


def test_lost_focus_text():
    game = make_game()
    game.first_time_start = False
    game.lost_window_focus = True
    assert texts(overlay_lines(game, False)) == ["Game paused, focus window to continue"]


def test_game_over_shows_score_centred():
    game = make_game()
    game.first_time_start = False
    game.game_over = True
    game.score = 7
    lines = overlay_lines(game, mobile=False)
    assert lines[0].text == "Game Over! Score: 7"
    assert lines[0].x is None
    assert lines[1].text == "Press Enter to play again"
    assert overlay_lines(game, mobile=True)[1].text == "Tap to play again"


def test_no_overlay_while_running():
    game = make_game()
    game.first_time_start = False
    assert overlay_lines(game, mobile=False) == []


def test_title_area_bounds():
    assert in_title_area(0, 0, 960) is True
    assert in_title_area(500, TITLE_AREA_HEIGHT - 1, 960) is True
    assert in_title_area(10, TITLE_AREA_HEIGHT, 960) is False
    assert in_title_area(960, 5, 960) is False
    assert in_title_area(-1, 5, 960) is False