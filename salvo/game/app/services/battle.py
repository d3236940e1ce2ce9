"""Battle flow orchestration separated from console controller logic."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from salvo.game.core.errors import CorruptSaveError, NoSaveError, PersistenceError
from salvo.game.core.rules import GameSession, abandon, is_perfect_game, new_session
from salvo.game.saves.repository import SaveRepository
from salvo.game.scores.service import LeaderboardService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StartGameResult:
    """Outcome of starting or resuming a game session."""

    session: GameSession
    status: str
    resumed: bool
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class QuitResult:
    """Outcome of leaving an unfinished battle."""

    saved: bool
    status: str


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Final numbers of a won game."""

    score: int
    perfect: bool
    qualifies: bool
    status: str | None = None


def start_new_game(rng: random.Random) -> StartGameResult:
    """Create a session with a freshly placed computer fleet."""
    session = new_session(rng)
    warnings: tuple[str, ...] = ()
    if session.placement is not None and session.placement.failed:
        warnings = tuple(
            f"Warning: Could not place ship {ship_type.display_name}. Game might be unplayable."
            for ship_type in session.placement.failed
        )
    return StartGameResult(
        session=session,
        status="New game initialized. The computer has secretly placed its ships.",
        resumed=False,
        warnings=warnings,
    )


def resume_game(saves: SaveRepository, rng: random.Random) -> StartGameResult:
    """Load the saved game, falling back to a new game when there is none."""
    try:
        session = saves.load()
    except NoSaveError:
        reason = "No saved game found."
    except CorruptSaveError as exc:
        reason = f"Saved game could not be loaded ({exc})."
    except PersistenceError as exc:
        reason = str(exc)
    else:
        return StartGameResult(session=session, status="Game resumed.", resumed=True)

    fresh = start_new_game(rng)
    return StartGameResult(
        session=fresh.session,
        status=f"{reason} Starting a new game instead.",
        resumed=False,
        warnings=fresh.warnings,
    )


def quit_battle(session: GameSession, saves: SaveRepository, save_requested: bool) -> QuitResult:
    """Optionally save, then abandon the running game."""
    saved = False
    status = "Game not saved."
    if save_requested:
        try:
            saves.save(session)
        except PersistenceError as exc:
            status = f"Error saving game. {exc}"
        else:
            saved = True
            status = "Game saved."
    abandon(session)
    return QuitResult(saved=saved, status=status)


def finish_game(session: GameSession, leaderboard: LeaderboardService) -> GameSummary:
    """Summarize a won game and check leaderboard qualification."""
    score = session.missiles_fired
    try:
        qualifies = leaderboard.qualifies(score)
    except PersistenceError as exc:
        logger.warning("leaderboard_unavailable error=%s", exc)
        return GameSummary(
            score=score,
            perfect=is_perfect_game(session),
            qualifies=False,
            status=str(exc),
        )
    return GameSummary(score=score, perfect=is_perfect_game(session), qualifies=qualifies)
