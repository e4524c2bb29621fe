"""Best scores and their colon-separated file format."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

SCORES_FILE = ".scores"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PathLike = Union[str, "os.PathLike[str]"]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Score:
    """The best score of a player in a game."""

    game: str
    player: str
    best: int

    @classmethod
    def parse(cls, line: str) -> Score:
        """Read a 'game:player:best' line; raise ValueError if a field is empty."""
        line = line.rstrip("\n")
        parts = line.split(":", 2)
        if len(parts) < 3 or not all(parts):
            raise ValueError(f"malformed score line: {line!r}")
        game, player, value = parts
        return cls(game, player, _atoi(value))

    def format(self) -> str:
        """Return the score as a 'game:player:best' line with its newline."""
        return f"{self.game}:{self.player}:{self.best}\n"


def load_scores(path: PathLike = SCORES_FILE) -> dict[str, Score]:
    """Read scores keyed by game; stop at the first empty line, skip bad lines."""
    scores: dict[str, Score] = {}
    try:
        with open(path, encoding="utf-8") as stream:
            for line in stream:
                line = line.rstrip("\n")
                if not line:
                    break
                try:
                    score = Score.parse(line)
                except ValueError:
                    continue
                scores[score.game] = score
    except OSError:
        return {}
    return scores


def save_scores(path: PathLike, scores: Mapping[str, Score]) -> None:
    """Write the scores, one line each, ordered by game key."""
    with open(path, "w", encoding="utf-8") as stream:
        for key in sorted(scores):
            stream.write(scores[key].format())