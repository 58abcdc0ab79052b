"""Score, lives, rounds and play time of one game."""

from __future__ import annotations

import math
from pathlib import Path

POINTS_PER_ROUND = 10000
POINTS_PER_HP = 4000
POINTS_PER_SECOND = 100
MAX_SCORE = 1_000_000
TIME_ADDING_POINTS = 2.0
DELTA_ADD = 1.0 / TIME_ADDING_POINTS


def read_high_score(path: str | Path) -> int:
    """High score stored in the third ';'-separated field of the first line.

    A missing file is created empty and counts as a high score of 0.
    """
    path = Path(path)
    if not path.exists():
        path.touch()
        return 0
    with path.open("r", encoding="utf-8") as stream:
        line = stream.readline().rstrip("\r\n")
    fields = line.split(";")
    text = fields[2] if len(fields) > 2 else ""
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"no high score in the first line of {path}") from None


def format_play_time(seconds: float) -> str:
    """Play time as shown in the side panel: minutes and seconds, zero padded."""
    minutes = str(int(seconds / 60.0))
    secs = str(int(math.fmod(seconds, 60.0)))
    if len(minutes) <= 2:
        prefix = "  " + "0" * (2 - len(minutes))
    else:
        prefix = " "
    return prefix + minutes + ":" + "0" * (2 - len(secs)) + secs


class GameStats:
    """Tracks the score (added gradually), lives, rounds and the play timer."""

    def __init__(
        self,
        hp: int = 3,
        rounds: int = 5,
        *,
        record_score: int = 0,
        records_path: str | Path | None = None,
    ) -> None:
        self.hp_max = hp
        self.hp = hp
        self.n_rounds = rounds
        self.round = 1
        self.score = 0
        self.record_score = (
            read_high_score(records_path) if records_path is not None else record_score
        )
        self.time = 0.0
        self.timer_work = True
        self.game_end = False
        self.animation_adding_points = False
        self._pending_points = 0
        self._pending_added = 0
        self._fraction = 0.0
        self._adding_time = 0.0

    @property
    def play_time_text(self) -> str:
        return format_play_time(self.time)

    def update(self, dt: float) -> None:
        """Feed pending points into the score and advance the timer."""
        if self.animation_adding_points:
            self._adding_time += dt
            self._fraction += self._pending_points * DELTA_ADD * dt
            if self._fraction >= 1.0:
                whole = int(self._fraction)
                self.score += whole
                self._pending_added += whole
                self._fraction -= whole
            if self._adding_time >= TIME_ADDING_POINTS:
                self.end_score_count()

        if self.timer_work:
            self.time += dt
        if self.score > self.record_score:
            self.record_score = self.score

    def reset(self) -> None:
        self.end_score_count()
        self.score = 0
        self.round = 1
        self.time = 0.0
        self.game_end = False
        self.hp_reset()

    def end_score_count(self) -> None:
        """Add what is left of the pending points at once, in whole hundreds."""
        self.animation_adding_points = False
        self._pending_points -= self._pending_added
        self.score += self._pending_points
        self.score = int(self.score / 100.0) * 100
        self._pending_added = 0
        self._fraction = 0.0
        self._adding_time = 0.0

    def add_points(self, points: int) -> None:
        """Start adding points, capped so the score never passes the maximum."""
        if self.score >= MAX_SCORE:
            return
        available = min(points, MAX_SCORE - self.score)
        self.end_score_count()
        self._pending_points = available
        self.animation_adding_points = True

    def add_points_end_round(self) -> None:
        self.add_points(POINTS_PER_HP * self.hp + POINTS_PER_ROUND)

    def next_round(self) -> None:
        self.round += 1
        if self.round > self.n_rounds:
            self.end_score_count()
            self.game_end = True

    def resume_timer(self) -> None:
        self.timer_work = True

    def pause_timer(self) -> None:
        self.timer_work = False

    def hp_reset(self) -> None:
        self.hp = self.hp_max

    def hp_subtract(self) -> None:
        self.hp -= 1
        if self.hp <= 0:
            self.game_end = True