"""Window, input, drawing and sound on top of the game rules."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Optional, Union

import pygame

from .highscore import HighScoreStore
from .settings import (
    BLACK,
    GAME_SCREEN_HEIGHT,
    GAME_SCREEN_WIDTH,
    HIGH_SCORE_FILE,
    TARGET_FPS,
    TITLE,
    TITLE_AREA_HEIGHT,
    letterbox_rect,
    screen_scale,
)
from .ui import MUSIC_HINT, PAUSE_HINT, hud_lines, overlay_lines
from .world import Controls, Cue, Hovercat

BACKGROUND_FALLBACK = (112, 197, 206, 255)
PIPE_FALLBACK = (84, 170, 60, 255)
PIPE_CAP_FALLBACK = (56, 120, 40, 255)
PLAYER_FALLBACK = (214, 60, 48, 255)
PIPE_CAP_HEIGHT = 24
FONT_SIZE = 26
MUSIC_VOLUME = 0.15
HUD_RIGHT_PADDING = 20
HUD_ROWS = (20, 50, 80)

_FLAP_KEYS = {pygame.K_SPACE, pygame.K_UP, pygame.K_w}
_CONFIRM_KEYS = {pygame.K_RETURN, pygame.K_KP_ENTER}


def _fallback_background() -> pygame.Surface:
    surface = pygame.Surface((GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT), pygame.SRCALPHA)
    surface.fill(BACKGROUND_FALLBACK)
    return surface


def _fallback_pipe() -> pygame.Surface:
    surface = pygame.Surface((80, 320), pygame.SRCALPHA)
    surface.fill(PIPE_FALLBACK)
    surface.fill(PIPE_CAP_FALLBACK, pygame.Rect(0, 0, 80, PIPE_CAP_HEIGHT))
    return surface


def _fallback_player(eyes_closed: bool) -> pygame.Surface:
    surface = pygame.Surface((64, 64), pygame.SRCALPHA)
    pygame.draw.circle(surface, PLAYER_FALLBACK, (32, 32), 30)
    for cx in (22, 42):
        if eyes_closed:
            pygame.draw.line(surface, BLACK, (cx - 5, 26), (cx + 5, 26), 2)
        else:
            pygame.draw.circle(surface, BLACK, (cx, 26), 4)
    return surface


def _panel_rect(game: Hovercat) -> Optional[tuple[int, int, int, int]]:
    cx = GAME_SCREEN_WIDTH // 2
    cy = GAME_SCREEN_HEIGHT // 2
    if game.exit_requested:
        return (cx - 250, cy - 20, 500, 60)
    if game.first_time_start:
        return (cx - 320, cy - 130, 700, 300)
    if game.paused or game.lost_window_focus:
        return (cx - 250, cy - 20, 500, 60)
    if game.game_over:
        return (cx - 250, cy - 20, 500, 100)
    return None


class App:
    """Runs a game in a window: reads input, plays sounds and draws frames."""

    def __init__(
        self,
        *,
        mobile: bool = False,
        assets_dir: Union[str, Path] = ".",
        store: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
        borderless: bool = True,
    ) -> None:
        pygame.init()
        self.assets = Path(assets_dir)
        self.mobile = mobile
        self._borderless = borderless
        self.window = self._open_window(borderless)
        pygame.display.set_caption(TITLE)
        self.canvas = pygame.Surface((GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT))
        self.font = pygame.font.Font(None, FONT_SIZE)

        self.background = self._load_image("background.jpg", _fallback_background)
        self.player_open = self._load_image("redkat_eyes_open.png", lambda: _fallback_player(False))
        self.player_closed = self._load_image("redkat_eyes_closed.png", lambda: _fallback_player(True))
        self.pipe_image = self._load_image("pipe.png", _fallback_pipe)

        self._sounds: dict[str, Optional[pygame.mixer.Sound]] = {}
        self._has_music = False
        self._music_paused = False
        self._init_audio()

        self.game = Hovercat(
            GAME_SCREEN_WIDTH,
            GAME_SCREEN_HEIGHT,
            mobile=mobile,
            store=store if store is not None else HighScoreStore(),
            rng=rng,
            background_width=self.background.get_width(),
        )
        self.clock = pygame.time.Clock()
        self._focused = True

    def _open_window(self, borderless: bool) -> pygame.Surface:
        self._borderless = borderless
        if borderless:
            sizes = pygame.display.get_desktop_sizes()
            size = sizes[0] if sizes else (GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT)
            return pygame.display.set_mode(size, pygame.NOFRAME)
        return pygame.display.set_mode((GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT), pygame.RESIZABLE)

    def _load_image(self, name: str, fallback) -> pygame.Surface:
        try:
            return pygame.image.load(str(self.assets / "Data" / name)).convert_alpha()
        except (pygame.error, OSError):
            return fallback()

    def _init_audio(self) -> None:
        try:
            pygame.mixer.init()
        except pygame.error:
            return
        for key, name in (("fly", "fly.mp3"), ("hit", "hit.mp3"), ("score", "ding.mp3")):
            try:
                self._sounds[key] = pygame.mixer.Sound(str(self.assets / "Data" / name))
            except (pygame.error, OSError):
                self._sounds[key] = None
        try:
            pygame.mixer.music.load(str(self.assets / "Data" / "music.mp3"))
            pygame.mixer.music.set_volume(MUSIC_VOLUME)
            self._has_music = True
        except (pygame.error, OSError):
            self._has_music = False

    def _to_game_space(self, px: float, py: float) -> tuple[float, float]:
        width, height = self.window.get_size()
        x0, y0, _, _ = letterbox_rect(width, height)
        scale = screen_scale(width, height)
        return ((px - x0) / scale, (py - y0) / scale)

    def poll_controls(self) -> Controls:
        """Drain the event queue into the input state for one frame."""
        controls = Controls()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                controls.close_requested = True
            elif event.type == pygame.WINDOWFOCUSLOST:
                self._focused = False
            elif event.type == pygame.WINDOWFOCUSGAINED:
                self._focused = True
            elif event.type == pygame.KEYDOWN:
                self._key_down(event, controls)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                controls.tap = True
                controls.tap_position = self._to_game_space(*event.pos)
            elif event.type == pygame.FINGERDOWN:
                width, height = self.window.get_size()
                controls.tap = True
                controls.tap_position = self._to_game_space(event.x * width, event.y * height)
        held = pygame.key.get_pressed()
        controls.confirm_held = controls.confirm_pressed or any(held[key] for key in _CONFIRM_KEYS)
        controls.focused = self._focused
        return controls

    @staticmethod
    def _key_down(event: pygame.event.Event, controls: Controls) -> None:
        key = event.key
        if key in _FLAP_KEYS:
            controls.flap = True
        if key in _CONFIRM_KEYS:
            controls.confirm_pressed = True
            if getattr(event, "mod", 0) & pygame.KMOD_ALT:
                controls.toggle_fullscreen = True
        if key == pygame.K_m:
            controls.toggle_music = True
        elif key == pygame.K_p:
            controls.pause = True
        elif key == pygame.K_ESCAPE:
            controls.escape = True
        elif key == pygame.K_y:
            controls.yes = True
        elif key == pygame.K_n:
            controls.no = True

    def _play(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play()

    def _stop(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is not None:
            sound.stop()

    def _apply(self, cue: Cue) -> None:
        if cue is Cue.FLAP:
            self._play("fly")
        elif cue is Cue.SCORE:
            self._play("score")
        elif cue is Cue.CRASH:
            if self._has_music:
                pygame.mixer.music.stop()
            self._music_paused = False
            self._stop("fly")
            self._stop("score")
            self._play("hit")
        elif cue is Cue.MUSIC_START:
            if self._has_music:
                if self._music_paused:
                    pygame.mixer.music.unpause()
                else:
                    pygame.mixer.music.play(loops=-1)
            self._music_paused = False
        elif cue is Cue.MUSIC_PAUSE:
            if self._has_music:
                pygame.mixer.music.pause()
            self._music_paused = True
        elif cue is Cue.FULLSCREEN:
            self.window = self._open_window(not self._borderless)

    def frame(self, dt: float) -> list[Cue]:
        """Read input, advance the game by dt seconds, act on its cues and draw."""
        cues = self.game.update(dt, self.poll_controls())
        for cue in cues:
            self._apply(cue)
        self.draw()
        return cues

    def _blit_scaled(self, image: pygame.Surface, src, dst) -> None:
        dx, dy, dw, dh = dst
        if dw <= 0 or dh <= 0:
            return
        area = pygame.Rect(*(int(v) for v in src)).clip(image.get_rect())
        if area.width <= 0 or area.height <= 0:
            return
        part = pygame.transform.scale(image.subsurface(area), (max(1, round(dw)), max(1, round(dh))))
        self.canvas.blit(part, (round(dx), round(dy)))

    def _draw_background(self) -> None:
        bg_width = self.background.get_width()
        src_x = int(self.game.background_scroll_x)
        if src_x + GAME_SCREEN_WIDTH <= bg_width:
            self.canvas.blit(self.background, (0, 0), pygame.Rect(src_x, 0, GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT))
        else:
            first = bg_width - src_x
            self.canvas.blit(self.background, (0, 0), pygame.Rect(src_x, 0, first, GAME_SCREEN_HEIGHT))
            self.canvas.blit(
                self.background, (first, 0), pygame.Rect(0, 0, GAME_SCREEN_WIDTH - first, GAME_SCREEN_HEIGHT)
            )

    def _draw_pipes(self) -> None:
        game = self.game
        img_w, img_h = self.pipe_image.get_size()
        cap = PIPE_CAP_HEIGHT
        body_src = (0, cap, img_w, img_h - cap)
        cap_src = (0, 0, img_w, cap)
        for pipe in game.pipes:
            top_height = pipe.gap_center - game.pipe_gap / 2
            bottom_y = pipe.gap_center + game.pipe_gap / 2
            bottom_height = game.height - bottom_y
            if top_height > 0:
                body = top_height - cap
                if body > 0:
                    self._blit_scaled(self.pipe_image, body_src, (pipe.x, 0, game.pipe_width, body))
                self._blit_scaled(self.pipe_image, cap_src, (pipe.x, body, game.pipe_width, cap))
            if bottom_height > 0:
                body = bottom_height - cap
                if body > 0:
                    self._blit_scaled(self.pipe_image, body_src, (pipe.x, bottom_y + cap, game.pipe_width, body))
                self._blit_scaled(self.pipe_image, cap_src, (pipe.x, bottom_y, game.pipe_width, cap))

    def _draw_player(self) -> None:
        game = self.game
        image = self.player_closed if game.player_eyes_closed() else self.player_open
        size = game.player_size
        self._blit_scaled(
            image,
            (0, 0, *image.get_size()),
            (game.player_x - size / 2, game.player_y - size / 2, size, size),
        )

    def _text(self, text: str, x: Optional[int], y: int, color) -> None:
        rendered = self.font.render(text, True, color)
        if x is None:
            x = (GAME_SCREEN_WIDTH - rendered.get_width()) // 2
        self.canvas.blit(rendered, (x, y))

    def _draw_ui(self) -> None:
        if self.mobile:
            strip = pygame.Surface((GAME_SCREEN_WIDTH, TITLE_AREA_HEIGHT), pygame.SRCALPHA)
            strip.fill((128, 128, 128, 8))
            self.canvas.blit(strip, (0, 0))
            self._text(PAUSE_HINT, None, 40, BLACK)

        for text, y in zip(hud_lines(self.game), HUD_ROWS):
            width = self.font.size(text)[0]
            self._text(text, self.game.width - width - HUD_RIGHT_PADDING, y, BLACK)

        if not self.mobile:
            self._text(MUSIC_HINT, None, GAME_SCREEN_HEIGHT - 30, BLACK)

        panel = _panel_rect(self.game)
        if panel is not None:
            radius = int(0.76 * min(panel[2], panel[3]) / 2)
            pygame.draw.rect(self.canvas, BLACK, pygame.Rect(panel), border_radius=radius)
        for line in overlay_lines(self.game, self.mobile):
            self._text(line.text, line.x, line.y, line.color)

    def draw(self) -> None:
        """Render the game onto its canvas and show it letterboxed in the window."""
        self._draw_background()
        self._draw_pipes()
        self._draw_player()
        self._draw_ui()

        self.window.fill(BLACK)
        x, y, w, h = letterbox_rect(*self.window.get_size())
        if w >= 1 and h >= 1:
            scaled = pygame.transform.smoothscale(self.canvas, (round(w), round(h)))
            self.window.blit(scaled, (round(x), round(y)))
        pygame.display.flip()

    def run(self) -> None:
        """Play frames until the player confirms leaving."""
        while not self.game.should_exit:
            dt = self.clock.tick(TARGET_FPS) / 1000.0
            self.frame(dt)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="hovercat", description="Keep the cat between the pipes.")
    parser.add_argument("--mobile", action="store_true", help="use tap controls")
    parser.add_argument("--assets", default=".", help="directory that holds the Data folder")
    parser.add_argument("--windowed", action="store_true", help="start in a resizable window")
    parser.add_argument("--highscore", default=HIGH_SCORE_FILE, help="file that keeps the high score")
    args = parser.parse_args(argv)

    app = App(
        mobile=args.mobile,
        assets_dir=args.assets,
        store=HighScoreStore(args.highscore),
        borderless=not args.windowed,
    )
    try:
        app.run()
    finally:
        pygame.quit()
    return 0