"""Persistence layer for the top-score text file."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from salvo.game.core.errors import PersistenceError
from salvo.game.scores.schema import ScoreEntry, format_score_line, parse_score_lines, sort_scores

logger = logging.getLogger(__name__)


class ScoreRepository:
    """Line-oriented text file of leaderboard entries."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> list[ScoreEntry]:
        """Read the stored leaderboard; a missing file is an empty board."""
        try:
            payload = self._path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            logger.exception("scores_read_failed path=%s", self._path)
            raise PersistenceError(f"Could not read scores: {exc}") from exc
        return sort_scores(parse_score_lines(self._decoded_lines(payload)))

    def write(self, entries: list[ScoreEntry]) -> None:
        """Replace the file with ``entries``, one per line."""
        text = "".join(f"{format_score_line(entry)}\n" for entry in entries)
        temp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(text, encoding="utf-8")
            os.replace(temp_path, self._path)
        except OSError as exc:
            logger.exception("scores_write_failed path=%s", self._path)
            if temp_path.exists():
                temp_path.unlink()
            raise PersistenceError(f"Could not write scores to file: {exc}") from exc
        logger.info("scores_written path=%s count=%d", self._path, len(entries))

    def _decoded_lines(self, payload: bytes) -> Iterator[str]:
        """Yield text lines, ending at the first one that is not valid UTF-8."""
        for number, raw in enumerate(payload.splitlines(), start=1):
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning("scores_line_undecodable path=%s line=%d", self._path, number)
                return
