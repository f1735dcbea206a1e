"""Text shown on screen: the score panel and the menu overlays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .settings import (
    GAME_SCREEN_HEIGHT,
    GAME_SCREEN_WIDTH,
    TITLE_AREA_HEIGHT,
    WHITE,
    YELLOW,
)
from .world import Hovercat

MUSIC_HINT = "Press M to toggle music"
PAUSE_HINT = "Tap to pause"


@dataclass(frozen=True)
class TextLine:
    """One line of overlay text; an x of None means centred horizontally."""

    text: str
    x: Optional[int]
    y: int
    color: tuple[int, int, int, int] = YELLOW


def hud_lines(game: Hovercat) -> list[str]:
    """Score, high score and speed, top to bottom."""
    return [
        f"Score: {game.score}",
        f"High Score: {game.high_score}",
        f"Speed: {int(game.pipe_speed)}",
    ]


def _welcome_lines(cx: int, cy: int, mobile: bool) -> list[TextLine]:
    y = cy - 110
    lines = [TextLine("Welcome to Hovercat", cx - 260, y)]
    y += 40
    lines.append(TextLine("Controls:", cx - 260, y))
    y += 30
    if mobile:
        entries = [
            ("- Tap to flap", cx - 220, WHITE, 30),
            ("- Tap title bar to pause", cx - 220, WHITE, 70),
            ("Tap to play", cx - 100, YELLOW, 0),
        ]
    else:
        entries = [
            ("- Press [Space], [W] or [Up Arrow] to flap", cx - 220, WHITE, 30),
            ("- Press [P] to pause", cx - 220, WHITE, 30),
            ("- Press [Esc] to exit", cx - 220, WHITE, 30),
            ("- Press [M] to toggle music", cx - 220, WHITE, 40),
            ("Press Enter to play", cx - 100, YELLOW, 30),
            ("Alt+Enter: toggle fullscreen", cx - 120, YELLOW, 0),
        ]
    for text, x, color, gap in entries:
        lines.append(TextLine(text, x, y, color))
        y += gap
    return lines


def overlay_lines(game: Hovercat, mobile: bool) -> list[TextLine]:
    """Lines of the menu shown over the game, or an empty list while playing."""
    cx = GAME_SCREEN_WIDTH // 2
    cy = GAME_SCREEN_HEIGHT // 2
    if game.exit_requested:
        return [TextLine("Are you sure you want to exit? [Y/N]", cx - 200, cy)]
    if game.first_time_start:
        return _welcome_lines(cx, cy, mobile)
    if game.paused:
        text = "Game paused, tap to continue" if mobile else "Game paused, press P to continue"
        return [TextLine(text, cx - 200, cy)]
    if game.lost_window_focus:
        return [TextLine("Game paused, focus window to continue", cx - 200, cy)]
    if game.game_over:
        again = (
            TextLine("Tap to play again", cx - 100, cy + 30)
            if mobile
            else TextLine("Press Enter to play again", cx - 120, cy + 30)
        )
        return [TextLine(f"Game Over! Score: {game.score}", None, cy - 10), again]
    return []


def in_title_area(x: float, y: float, width: float) -> bool:
    """Whether a point in game coordinates lies in the strip that pauses on tap."""
    return 0 <= x < width and 0 <= y < TITLE_AREA_HEIGHT