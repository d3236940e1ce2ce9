"""Persistence layer for the single save slot."""

from __future__ import annotations

import logging
import os
import struct
from pathlib import Path

from salvo.game.core.errors import CorruptSaveError, NoSaveError, PersistenceError
from salvo.game.core.rules import GameSession
from salvo.game.infra.app_data import SAVE_FILE_NAME
from salvo.game.saves.schema import decode_session, encode_session

logger = logging.getLogger(__name__)


class SaveRepository:
    """Binary file repository holding exactly one saved game."""

    def __init__(self, root: Path, file_name: str = SAVE_FILE_NAME) -> None:
        self._root = root
        self._path = root / file_name

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        """Return whether the slot currently holds a file."""
        return self._path.is_file()

    def save(self, session: GameSession) -> None:
        """Write ``session`` into the slot, replacing any previous save."""
        try:
            payload = encode_session(session)
        except (struct.error, UnicodeEncodeError) as exc:
            raise PersistenceError(f"Game state cannot be encoded: {exc}") from exc

        temp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            with temp_path.open("wb") as handle:
                handle.write(payload)
            os.replace(temp_path, self._path)
        except OSError as exc:
            logger.exception("save_failed path=%s", self._path)
            if temp_path.exists():
                temp_path.unlink()
            raise PersistenceError(f"Error saving game: {exc}") from exc
        logger.info("game_saved path=%s bytes=%d", self._path, len(payload))

    def load(self) -> GameSession:
        """Load the saved session.

        Raises ``NoSaveError`` when the slot is empty and ``CorruptSaveError``
        when its content cannot be decoded.
        """
        try:
            with self._path.open("rb") as handle:
                payload = handle.read()
        except FileNotFoundError as exc:
            raise NoSaveError("No saved game found.") from exc
        except OSError as exc:
            logger.exception("load_failed path=%s", self._path)
            raise PersistenceError(f"Error loading game: {exc}") from exc

        try:
            session = decode_session(payload)
        except CorruptSaveError:
            logger.warning("corrupt_save path=%s bytes=%d", self._path, len(payload))
            raise
        logger.info("game_loaded path=%s missiles=%d", self._path, session.missiles_fired)
        return session
