"""Score entry model and leaderboard line format."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from salvo.game.core.models import LEADERBOARD_SIZE

INITIALS_LENGTH = 3
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True, slots=True)
class ScoreEntry:
    """One leaderboard row; lower score is better."""

    initials: str
    score: int
    achieved_at: str


def format_score_line(entry: ScoreEntry) -> str:
    """Render an entry as ``<initials> <score> <date> <time>``."""
    return f"{entry.initials} {entry.score} {entry.achieved_at}"


def parse_score_line(line: str) -> ScoreEntry | None:
    """Parse one leaderboard line, or return None when it is malformed.

    The timestamp is everything after the second token, so the space between
    date and time survives.
    """
    parts = line.strip().split(maxsplit=2)
    if len(parts) != 3:
        return None
    initials, raw_score, achieved_at = parts
    if len(initials) > INITIALS_LENGTH:
        return None
    try:
        score = int(raw_score)
    except ValueError:
        return None
    return ScoreEntry(initials=initials, score=score, achieved_at=achieved_at.strip())


def parse_score_lines(lines: Iterable[str], limit: int = LEADERBOARD_SIZE) -> list[ScoreEntry]:
    """Parse up to ``limit`` entries, stopping at the first malformed line."""
    entries: list[ScoreEntry] = []
    for line in lines:
        if len(entries) >= limit:
            break
        if not line.strip():
            continue
        entry = parse_score_line(line)
        if entry is None:
            break
        entries.append(entry)
    return entries


def sort_scores(entries: Iterable[ScoreEntry]) -> list[ScoreEntry]:
    """Return entries ordered best (lowest) score first."""
    return sorted(entries, key=lambda entry: entry.score)
