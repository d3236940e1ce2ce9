"""Game session state and turn resolution logic."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import StrEnum

import numpy as np

from salvo.game.core.board import cell, empty_grid, set_cell
from salvo.game.core.coords import format_coordinate, parse_coordinate
from salvo.game.core.errors import (
    InvalidSessionState,
    RedundantShotError,
    UserInputError,
)
from salvo.game.core.fleet import PlacementReport, place_fleet
from salvo.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET,
    HIT_CELL,
    MISS_CELL,
    PERFECT_SCORE,
    Coord,
    Ship,
    ShotKind,
    ShotOutcome,
    build_fleet,
)
from salvo.game.core.shot_resolution import is_repeat, resolve_shot, ship_for_type

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    """Lifecycle of one game."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    ABANDONED = "ABANDONED"


@dataclass(slots=True)
class GameSession:
    """Runtime game session state."""

    ocean_grid: np.ndarray = field(default_factory=empty_grid)
    target_grid: np.ndarray = field(default_factory=empty_grid)
    fleet: list[Ship] = field(default_factory=build_fleet)
    missiles_fired: int = 0
    ships_remaining: int = len(DEFAULT_FLEET)
    in_progress: bool = False
    last_shot: Coord = Coord(0, 0)
    last_shot_valid: bool = False
    state: SessionState = SessionState.NOT_STARTED
    placement: PlacementReport | None = None

    @property
    def size(self) -> int:
        return int(self.ocean_grid.shape[0])

    @property
    def won(self) -> bool:
        return self.state is SessionState.WON


@dataclass(frozen=True, slots=True)
class TurnReport:
    """Outcome of one line of player input during battle.

    ``error`` is set when the input did not cost a missile.
    """

    coord: Coord | None
    outcome: ShotOutcome | None = None
    error: UserInputError | RedundantShotError | None = None
    missile_fired: bool = False


def new_session(rng: random.Random, size: int = BOARD_SIZE) -> GameSession:
    """Create a game with a freshly placed computer fleet."""
    session = GameSession(ocean_grid=empty_grid(size), target_grid=empty_grid(size))
    session.placement = place_fleet(session.ocean_grid, session.fleet, rng)
    session.in_progress = True
    session.state = SessionState.IN_PROGRESS
    logger.info(
        "session_started placed=%d failed=%d",
        len(session.placement.placed),
        len(session.placement.failed),
    )
    return session


def fire(session: GameSession, coord: Coord) -> ShotOutcome:
    """Fire one missile at ``coord`` and update the target grid.

    Shots at conclusive cells return ``ALREADY_PROCESSED`` without being
    counted.
    """
    if session.state is not SessionState.IN_PROGRESS:
        raise InvalidSessionState(f"Cannot fire in state {session.state.value}.")

    session.last_shot = coord
    session.last_shot_valid = True
    if is_repeat(session, coord):
        return ShotOutcome.already_processed()

    session.missiles_fired += 1
    outcome = resolve_shot(session, coord)
    if outcome.kind is ShotKind.MISS:
        set_cell(session.target_grid, coord, MISS_CELL)
    elif outcome.kind is ShotKind.HIT:
        set_cell(session.target_grid, coord, HIT_CELL)
    elif outcome.kind is ShotKind.SUNK and outcome.ship_type is not None:
        ship = ship_for_type(session.fleet, outcome.ship_type)
        if ship is not None:
            reveal_sunk_ship(session, ship)

    if session.ships_remaining <= 0:
        session.state = SessionState.WON
        session.in_progress = False
        session.last_shot_valid = False
        logger.info("session_won missiles=%d", session.missiles_fired)
    return outcome


def play_turn(session: GameSession, text: str) -> TurnReport:
    """Parse one line of shot text and fire it."""
    session.last_shot_valid = False
    try:
        coord = parse_coordinate(text, size=session.size)
    except UserInputError as exc:
        return TurnReport(coord=None, error=exc)

    fired_before = session.missiles_fired
    outcome = fire(session, coord)
    if session.missiles_fired == fired_before:
        marker = cell(session.target_grid, coord)
        return TurnReport(
            coord=coord,
            outcome=outcome,
            error=RedundantShotError(format_coordinate(coord), marker),
        )
    return TurnReport(coord=coord, outcome=outcome, missile_fired=True)


def reveal_sunk_ship(session: GameSession, ship: Ship) -> None:
    """Show every segment of a sunk ship on the target grid by its letter."""
    for segment in ship.segments:
        set_cell(session.target_grid, segment, ship.letter)


def abandon(session: GameSession) -> None:
    """Leave an unfinished game."""
    if session.state is SessionState.IN_PROGRESS:
        session.state = SessionState.ABANDONED
    session.in_progress = False
    logger.info("session_abandoned missiles=%d", session.missiles_fired)


def is_perfect_game(session: GameSession) -> bool:
    """A won game that used exactly one missile per ship segment."""
    return session.won and session.missiles_fired == PERFECT_SCORE
