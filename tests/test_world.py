import random

import pytest

from hovercat.highscore import HighScoreStore
from hovercat.world import Controls, Cue, Hovercat, Pipe, format_with_leading_zeroes


def started(**kwargs):
    game = Hovercat(**kwargs)
    game.start()
    return game


def test_format_with_leading_zeroes_pads():
    assert format_with_leading_zeroes(7, 3) == "007"


def test_format_with_leading_zeroes_exact_width():
    assert format_with_leading_zeroes(123, 3) == "123"


def test_format_with_leading_zeroes_too_long_raises():
    with pytest.raises(ValueError):
        format_with_leading_zeroes(12345, 3)


def test_zero_dt_changes_nothing():
    game = started()
    y = game.player_y
    assert game.update(0, Controls(flap=True)) == []
    assert game.player_y == y
    assert game.player_velocity == 0.0


def test_welcome_screen_holds_player_still():
    game = Hovercat()
    y = game.player_y
    game.update(0.1)
    assert game.first_time_start
    assert game.player_y == y
    assert game.pipes == []


def test_enter_held_starts_game_and_music():
    game = Hovercat()
    cues = game.update(0.01, Controls(confirm_held=True))
    assert not game.first_time_start
    assert game.music_playing
    assert Cue.MUSIC_START in cues


def test_gravity_pulls_player_down():
    game = started()
    y = game.player_y
    game.update(0.05)
    assert game.player_velocity > 0
    assert game.player_y > y


def test_flap_sets_jump_velocity():
    game = started()
    cues = game.flap()
    assert cues == [Cue.FLAP]
    assert game.player_velocity == -400.0
    assert game.player_eyes_closed()


def test_flap_control_during_update():
    game = started()
    cues = game.update(0.01, Controls(flap=True))
    assert Cue.FLAP in cues
    assert game.player_velocity < 0


def test_eyes_reopen_after_flap():
    game = started()
    game.flap()
    for _ in range(40):
        game.update(0.01, Controls(flap=False))
        game.player_y = game.height / 2
        game.player_velocity = 0.0
    assert not game.player_eyes_closed()


def test_pipe_speed_capped_and_distance_constant():
    game = started()
    game.update_pipe_speed(1.0)
    assert game.pipe_speed > 300.0
    assert game.pipe_speed * game.pipe_spawn_interval == pytest.approx(600.0)
    game.update_pipe_speed(1000.0)
    assert game.pipe_speed == 1200.0
    assert game.pipe_speed * game.pipe_spawn_interval == pytest.approx(600.0)
    assert game.background_scroll_speed == pytest.approx(game.pipe_speed * 0.2)


def test_first_pipe_gap_is_centred():
    game = Hovercat()
    pipe = game.spawn_pipe()
    assert pipe.gap_center == game.height // 2
    assert pipe.x == game.width
    assert not pipe.scored


@pytest.mark.parametrize("seed", range(5))
def test_consecutive_gaps_stay_close_and_inside(seed):
    game = Hovercat(rng=random.Random(seed))
    previous = game.spawn_pipe().gap_center
    for _ in range(50):
        center = game.spawn_pipe().gap_center
        assert abs(center - previous) <= 100.0
        assert game.pipe_gap / 2 <= center <= game.height - game.pipe_gap / 2
        previous = center


def test_collision_box_is_centred_on_player():
    game = Hovercat()
    left, top, w, h = game.collision_box()
    assert left + w / 2 == pytest.approx(game.player_x)
    assert top + h / 2 == pytest.approx(game.player_y)
    assert w < game.player_size and h < game.player_size


def test_hitting_ceiling_ends_game():
    game = started()
    game.player_y = 0.0
    cues = game.update(0.01)
    assert game.game_over
    assert Cue.CRASH in cues
    assert game.player_eyes_closed()


def test_passing_pipe_scores():
    game = started()
    pipe = Pipe(x=game.player_x - game.pipe_width - 10, gap_center=game.player_y)
    game.pipes.append(pipe)
    cues = game.update(0.01)
    assert game.score == 1
    assert pipe.scored
    assert Cue.SCORE in cues
    assert not game.game_over
    assert game.high_score == 1


def test_pipe_outside_gap_ends_game():
    game = started()
    game.pipes.append(Pipe(x=game.player_x - 10, gap_center=game.player_y + 200))
    cues = game.update(0.01)
    assert game.game_over
    assert Cue.CRASH in cues


def test_offscreen_pipes_are_removed():
    game = started()
    game.pipe_spawn_timer = 0.0
    game.pipes.append(Pipe(x=-game.pipe_width - 50, gap_center=game.player_y, scored=True))
    game.update(0.01)
    assert all(p.x >= -game.pipe_width for p in game.pipes)
    assert len(game.pipes) == 0


def test_restart_waits_for_delay():
    game = started()
    game.player_y = 0.0
    game.update(0.01)
    game.update(0.1, Controls(confirm_pressed=True))
    assert game.game_over
    cues = game.update(0.5, Controls(confirm_pressed=True))
    assert not game.game_over
    assert game.score == 0
    assert game.pipes == []
    assert Cue.MUSIC_START in cues


def test_reset_restores_start_position_and_speed():
    game = started()
    start = (game.player_x, game.player_y)
    for _ in range(5):
        game.update(0.02)
    game.reset()
    assert (game.player_x, game.player_y) == start
    assert game.player_velocity == 0.0
    assert game.pipe_speed == 300.0
    assert game.pipe_spawn_interval == 2.0


def test_manually_disabled_music_stays_off_after_reset():
    game = started()
    assert game.toggle_music() == [Cue.MUSIC_PAUSE]
    assert not game.music_playing
    assert game.reset() == []
    assert not game.music_playing
    assert game.toggle_music() == [Cue.MUSIC_START]
    assert game.music_playing and not game.music_manually_disabled


def test_high_score_is_persisted(tmp_path):
    store = HighScoreStore(tmp_path / "hs.txt")
    store.save(3)
    game = started(store=store)
    assert game.high_score == 3
    game.score = 5
    game.player_y = 0.0
    game.update(0.01)
    assert game.high_score == 5
    assert store.load() == 5


def test_pause_freezes_and_resumes():
    game = started()
    game.update(0.01, Controls(pause=True))
    assert game.paused
    y = game.player_y
    game.update(0.1)
    assert game.player_y == y
    game.update(0.01, Controls(pause=True))
    assert not game.paused
    game.update(0.1)
    assert game.player_y != y


def test_losing_focus_freezes():
    game = started()
    y = game.player_y
    game.update(0.1, Controls(focused=False))
    assert game.lost_window_focus
    assert game.player_y == y


def test_exit_menu_cancel_and_confirm():
    game = started()
    game.update(0.01, Controls(escape=True))
    assert game.exit_requested and game.in_exit_menu
    game.update(0.01, Controls(no=True))
    assert not game.exit_requested and not game.in_exit_menu
    game.update(0.01, Controls(escape=True))
    game.update(0.01, Controls(yes=True))
    assert game.should_exit


def test_fullscreen_toggle_emits_cue():
    game = Hovercat()
    cues = game.update(0.01, Controls(toggle_fullscreen=True))
    assert Cue.FULLSCREEN in cues
    assert game.fullscreen
    game.update(0.01, Controls(toggle_fullscreen=True))
    assert not game.fullscreen


def test_mobile_tap_title_area_pauses_and_resumes():
    game = Hovercat(mobile=True)
    game.update(0.01, Controls(tap=True))
    assert not game.first_time_start
    assert not game.paused
    game.update(0.01, Controls(tap=True, tap_position=(10.0, 10.0)))
    assert game.paused
    game.update(0.01, Controls(tap=True))
    assert not game.paused


def test_mobile_tap_below_title_flaps():
    game = Hovercat(mobile=True)
    game.start()
    cues = game.update(0.01, Controls(tap=True, tap_position=(10.0, 300.0)))
    assert not game.paused
    assert Cue.FLAP in cues


def test_background_scroll_wraps():
    game = started(background_width=100)
    game.background_scroll_x = 99.0
    game.update(0.1)
    assert 0.0 <= game.background_scroll_x < 100.0