"""Leaderboard use cases: qualification, admission, and recording."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from salvo.game.core.errors import InvalidInitialsError
from salvo.game.core.models import LEADERBOARD_SIZE
from salvo.game.scores.repository import ScoreRepository
from salvo.game.scores.schema import INITIALS_LENGTH, TIMESTAMP_FORMAT, ScoreEntry, sort_scores

logger = logging.getLogger(__name__)


def qualifies(score: int, leaderboard: list[ScoreEntry]) -> bool:
    """Whether ``score`` earns a place on ``leaderboard``."""
    if len(leaderboard) < LEADERBOARD_SIZE:
        return True
    return score < leaderboard[LEADERBOARD_SIZE - 1].score


def admit(entry: ScoreEntry, leaderboard: list[ScoreEntry]) -> list[ScoreEntry]:
    """Return a new leaderboard with ``entry`` added in place of the worst row."""
    updated = list(leaderboard[:LEADERBOARD_SIZE])
    if len(updated) < LEADERBOARD_SIZE:
        updated.append(entry)
    else:
        updated[LEADERBOARD_SIZE - 1] = entry
    return sort_scores(updated)


def validate_initials(raw: str) -> str:
    initials = raw.strip()
    if len(initials) != INITIALS_LENGTH or any(char.isspace() for char in initials):
        raise InvalidInitialsError()
    return initials


class LeaderboardService:
    """High-level top-score operations over a score repository."""

    def __init__(
        self,
        repository: ScoreRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def top_scores(self) -> list[ScoreEntry]:
        """Current leaderboard, best first."""
        return self._repository.read()

    def qualifies(self, score: int) -> bool:
        return qualifies(score, self._repository.read())

    def record(self, initials: str, score: int) -> list[ScoreEntry]:
        """Validate initials, add the score, and persist the new leaderboard."""
        entry = ScoreEntry(
            initials=validate_initials(initials),
            score=score,
            achieved_at=self._clock().strftime(TIMESTAMP_FORMAT),
        )
        updated = admit(entry, self._repository.read())
        self._repository.write(updated)
        logger.info("score_recorded initials=%s score=%d", entry.initials, entry.score)
        return updated
