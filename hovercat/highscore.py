"""Persistence of the best score in a small text file."""

from __future__ import annotations

import contextlib
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .settings import HIGH_SCORE_FILE

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class HighScoreStore:
    """Reads and writes the high score as a plain integer in a text file."""

    path: Union[str, "os.PathLike[str]"] = HIGH_SCORE_FILE

    def load(self) -> int:
        """Return the stored high score, or 0 if there is none readable."""
        try:
            text = Path(self.path).read_text()
        except OSError:
            return 0
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0

    def save(self, score: int) -> None:
        """Store the score; a file that cannot be written is left alone."""
        with contextlib.suppress(OSError):
            Path(self.path).write_text(str(score))