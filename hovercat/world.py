"""Game state and rules, independent of rendering, audio and input devices."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Optional

from .highscore import HighScoreStore
from .settings import GAME_SCREEN_HEIGHT, GAME_SCREEN_WIDTH, TITLE_AREA_HEIGHT

DEFAULT_GRAVITY = 1200.0
DEFAULT_JUMP_FORCE = -400.0
DEFAULT_PIPE_SPEED = 300.0
DEFAULT_PIPE_SPAWN_INTERVAL = 600.0 / DEFAULT_PIPE_SPEED
DEFAULT_PIPE_WIDTH = 80.0
DEFAULT_PIPE_GAP = 230.0
PIPE_SPEED_INCREASE = 10.0
MAX_GAP_HEIGHT_DIFFERENCE = 100.0
MAX_SPEED = 1200.0
RESET_PIPE_SPAWN_INTERVAL = 2.0
PLAYER_SIZE = 80.0
PLAYER_EYES_CLOSED_DURATION = 0.33
GAME_OVER_DELAY_DURATION = 0.5
PLAYER_COLLISION_WIDTH_RATIO = 0.70
PLAYER_COLLISION_HEIGHT_RATIO = 0.55
BACKGROUND_SPEED_RATIO = 0.2


@dataclass
class Pipe:
    """A pair of pipes sharing one gap."""

    x: float
    gap_center: float
    scored: bool = False


@dataclass
class Controls:
    """Input state for one frame, as reported by the front end."""

    flap: bool = False
    toggle_music: bool = False
    confirm_pressed: bool = False
    confirm_held: bool = False
    tap: bool = False
    tap_position: Optional[tuple[float, float]] = None
    pause: bool = False
    escape: bool = False
    yes: bool = False
    no: bool = False
    close_requested: bool = False
    toggle_fullscreen: bool = False
    focused: bool = True


class Cue(enum.Enum):
    """Side effects the front end must carry out (sound, music, window)."""

    FLAP = "flap"
    SCORE = "score"
    CRASH = "crash"
    MUSIC_START = "music_start"
    MUSIC_PAUSE = "music_pause"
    FULLSCREEN = "fullscreen"


def format_with_leading_zeroes(number: int, width: int) -> str:
    """Pad the decimal form of number with zeroes on the left to width characters."""
    text = str(number)
    missing = width - len(text)
    if missing < 0:
        raise ValueError(f"{number} does not fit in {width} characters")
    return "0" * missing + text


class Hovercat:
    """The whole state of a game: player, pipes, score and menus."""

    def __init__(
        self,
        width: int = GAME_SCREEN_WIDTH,
        height: int = GAME_SCREEN_HEIGHT,
        *,
        mobile: bool = False,
        store: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
        background_width: Optional[float] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.mobile = mobile
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.background_width = float(width if background_width is None else background_width)

        self.first_time_start = True
        self.exit_requested = False
        self.should_exit = False
        self.fullscreen = False

        self.player_size = PLAYER_SIZE
        self.player_x = float(width // 4)
        self.player_y = float(height // 2)
        self.player_velocity = 0.0
        self.gravity = DEFAULT_GRAVITY
        self.jump_force = DEFAULT_JUMP_FORCE
        self.pipe_width = DEFAULT_PIPE_WIDTH
        self.pipe_gap = DEFAULT_PIPE_GAP
        self.pipe_speed = DEFAULT_PIPE_SPEED
        self.base_pipe_speed = self.pipe_speed
        self.pipe_spawn_interval = DEFAULT_PIPE_SPAWN_INTERVAL
        self.pipe_spawn_timer = self.pipe_spawn_interval
        self.initial_pipe_distance = self.base_pipe_speed * self.pipe_spawn_interval
        self.speed_level = 0
        self.pipes: list[Pipe] = []

        self.music_playing = False
        self.music_manually_disabled = False

        self.score = 0
        self.high_score = store.load() if store is not None else 0

        self.collision_width_ratio = PLAYER_COLLISION_WIDTH_RATIO
        self.collision_height_ratio = PLAYER_COLLISION_HEIGHT_RATIO

        self.background_scroll_x = 0.0
        self.background_scroll_speed = self.base_pipe_speed * BACKGROUND_SPEED_RATIO
        self.eyes_closed_timer = 0.0
        self.game_over_delay_timer = 0.0

        self._init_state()

    def _init_state(self) -> None:
        self.in_exit_menu = False
        self.paused = False
        self.lost_window_focus = False
        self.game_over = False

    @property
    def running(self) -> bool:
        """True while the world advances: started, not paused, no menu, not over."""
        return not (
            self.first_time_start
            or self.paused
            or self.lost_window_focus
            or self.in_exit_menu
            or self.game_over
        )

    def reset(self) -> list[Cue]:
        """Start a fresh round after a game over."""
        self._init_state()
        self.player_x = float(self.width // 4)
        self.player_y = float(self.height // 2)
        self.player_velocity = 0.0
        self.pipes.clear()
        self.pipe_spawn_timer = 0.0
        self.pipe_spawn_interval = RESET_PIPE_SPAWN_INTERVAL
        self.score = 0
        self.speed_level = 0
        self.pipe_speed = self.base_pipe_speed
        if not self.music_manually_disabled:
            self.music_playing = True
            return [Cue.MUSIC_START]
        return []

    def start(self) -> list[Cue]:
        """Leave the welcome screen and start the music."""
        self.first_time_start = False
        self.music_playing = True
        return [Cue.MUSIC_START]

    def flap(self) -> list[Cue]:
        """Push the player upwards and close its eyes for a moment."""
        self.player_velocity = self.jump_force
        self.eyes_closed_timer = PLAYER_EYES_CLOSED_DURATION
        return [Cue.FLAP]

    def toggle_music(self) -> list[Cue]:
        """Switch the music off or on, remembering that the player chose so."""
        if self.music_playing:
            self.music_playing = False
            self.music_manually_disabled = True
            return [Cue.MUSIC_PAUSE]
        self.music_playing = True
        self.music_manually_disabled = False
        return [Cue.MUSIC_START]

    def update_pipe_speed(self, dt: float) -> None:
        """Accelerate the pipes, keeping the distance between them constant."""
        self.pipe_speed = min(self.pipe_speed + PIPE_SPEED_INCREASE * dt, MAX_SPEED)
        self.pipe_spawn_interval = self.initial_pipe_distance / self.pipe_speed
        self.background_scroll_speed = self.pipe_speed * BACKGROUND_SPEED_RATIO

    def spawn_pipe(self) -> Pipe:
        """Add a pipe at the right edge, its gap near the previous one."""
        if not self.pipes:
            center = float(self.height // 2)
        else:
            previous = self.pipes[-1].gap_center
            low = max(self.pipe_gap / 2, previous - MAX_GAP_HEIGHT_DIFFERENCE)
            high = min(self.height - self.pipe_gap / 2, previous + MAX_GAP_HEIGHT_DIFFERENCE)
            low_i, high_i = sorted((int(low), int(high)))
            center = float(self.rng.randint(low_i, high_i))
        pipe = Pipe(float(self.width), center)
        self.pipes.append(pipe)
        return pipe

    def collision_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, width, height) of the player's hit box."""
        w = self.player_size * self.collision_width_ratio
        h = self.player_size * self.collision_height_ratio
        return (self.player_x - w / 2, self.player_y - h / 2, w, h)

    def player_eyes_closed(self) -> bool:
        """Whether the player sprite should be drawn with closed eyes."""
        return self.game_over or self.eyes_closed_timer > 0.0

    def update(self, dt: float, controls: Optional[Controls] = None) -> list[Cue]:
        """Advance the game by dt seconds and return the cues it produced."""
        if dt == 0:
            return []
        controls = controls if controls is not None else Controls()
        cues: list[Cue] = []
        if self._update_ui(controls, cues):
            return cues

        if self.running:
            self.background_scroll_x += self.background_scroll_speed * dt
            if self.background_scroll_x >= self.background_width:
                self.background_scroll_x -= self.background_width

            self._handle_input(controls, cues)
            self.update_pipe_speed(dt)
            self._step_player(dt, cues)
            self._step_pipes(dt, cues)

            if self.eyes_closed_timer > 0.0:
                self.eyes_closed_timer = max(self.eyes_closed_timer - dt, 0.0)

        if self.game_over:
            if self.game_over_delay_timer > 0.0:
                self.game_over_delay_timer = max(self.game_over_delay_timer - dt, 0.0)
            if self.game_over_delay_timer <= 0.0:
                restart = controls.tap if self.mobile else controls.confirm_pressed
                if restart:
                    cues.extend(self.reset())
        return cues

    def _update_ui(self, controls: Controls, cues: list[Cue]) -> bool:
        """Handle menus, pausing and focus; True means the frame is consumed."""
        if controls.close_requested or (controls.escape and not self.exit_requested):
            self.exit_requested = True
            self.in_exit_menu = True
            return False

        if controls.toggle_fullscreen:
            self.fullscreen = not self.fullscreen
            cues.append(Cue.FULLSCREEN)

        if self.first_time_start:
            begin = controls.tap if self.mobile else controls.confirm_held
            if begin:
                cues.extend(self.start())

        if self.exit_requested:
            if controls.yes:
                self.should_exit = True
            elif controls.no or controls.escape:
                self.exit_requested = False
                self.in_exit_menu = False

        self.lost_window_focus = not controls.focused

        if (
            not self.exit_requested
            and not self.lost_window_focus
            and not self.game_over
            and controls.pause
        ):
            self.paused = not self.paused

        if self.mobile and not self.first_time_start and not self.game_over and not self.exit_requested:
            if not self.paused and controls.tap:
                if controls.tap_position is not None and self._in_title_area(*controls.tap_position):
                    self.paused = True
                    return True
            elif self.paused and controls.tap:
                self.paused = False
                return True
        return False

    def _in_title_area(self, x: float, y: float) -> bool:
        return 0 <= x < self.width and 0 <= y < TITLE_AREA_HEIGHT

    def _handle_input(self, controls: Controls, cues: list[Cue]) -> None:
        if self.running and (controls.flap or (self.mobile and controls.tap)):
            cues.extend(self.flap())
        if controls.toggle_music:
            cues.extend(self.toggle_music())

    def _step_player(self, dt: float, cues: list[Cue]) -> None:
        self.player_velocity += self.gravity * dt
        self.player_y += self.player_velocity * dt
        _, top, _, box_h = self.collision_box()
        if top < 0 or top + box_h > self.height:
            self._crash(cues)

    def _step_pipes(self, dt: float, cues: list[Cue]) -> None:
        self.pipe_spawn_timer += dt
        if self.pipe_spawn_timer >= self.pipe_spawn_interval:
            self.pipe_spawn_timer = 0.0
            self.spawn_pipe()

        _, _, box_w, box_h = self.collision_box()
        for pipe in self.pipes:
            pipe.x -= self.pipe_speed * dt
            if self.player_x > pipe.x + self.pipe_width and not pipe.scored:
                self.score += 1
                pipe.scored = True
                cues.append(Cue.SCORE)
                self._record_high_score()

            if self.game_over:
                continue
            overlaps_x = (
                self.player_x + box_w / 2 > pipe.x
                and self.player_x - box_w / 2 < pipe.x + self.pipe_width
            )
            if overlaps_x and (
                self.player_y - box_h / 2 < pipe.gap_center - self.pipe_gap / 2
                or self.player_y + box_h / 2 > pipe.gap_center + self.pipe_gap / 2
            ):
                self._crash(cues)

        self.pipes = [pipe for pipe in self.pipes if pipe.x >= -self.pipe_width]

    def _crash(self, cues: list[Cue]) -> None:
        self.game_over = True
        self.game_over_delay_timer = GAME_OVER_DELAY_DURATION
        cues.append(Cue.CRASH)
        self._record_high_score()

    def _record_high_score(self) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
            if self.store is not None:
                self.store.save(self.high_score)