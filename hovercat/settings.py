"""Shared constants and screen-scaling helpers."""

from __future__ import annotations

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
DARK_GREEN = (20, 160, 133, 255)
GREY = (29, 29, 27, 255)
YELLOW = (243, 216, 63, 255)

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
GAME_SCREEN_WIDTH = 960
GAME_SCREEN_HEIGHT = 540

MINIMIZE_OFFSET = 50
BORDER_OFFSET_WIDTH = 20.0
BORDER_OFFSET_HEIGHT = 50.0
OFFSET = 110

TITLE = "Hovercat"
TARGET_FPS = 144
HIGH_SCORE_FILE = "highscore.txt"

# Height of the strip at the top of the screen that pauses the game on mobile.
TITLE_AREA_HEIGHT = 100


def screen_scale(screen_width: float, screen_height: float) -> float:
    """Scale factor that fits the game canvas inside a window of the given size."""
    return min(screen_width / GAME_SCREEN_WIDTH, screen_height / GAME_SCREEN_HEIGHT)


def letterbox_rect(
    screen_width: float, screen_height: float
) -> tuple[float, float, float, float]:
    """Return (x, y, width, height) of the scaled canvas centred in the window."""
    scale = screen_scale(screen_width, screen_height)
    width = GAME_SCREEN_WIDTH * scale
    height = GAME_SCREEN_HEIGHT * scale
    return (
        (screen_width - width) * 0.5,
        (screen_height - height) * 0.5,
        width,
        height,
    )