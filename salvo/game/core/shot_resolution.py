"""Shot outcome evaluation (miss/hit/sunk/already processed)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from salvo.game.core.board import cell, is_conclusive, set_cell
from salvo.game.core.models import EMPTY_CELL, Coord, Ship, ShotOutcome, ShipType

if TYPE_CHECKING:
    from salvo.game.core.rules import GameSession

logger = logging.getLogger(__name__)


def is_repeat(session: GameSession, coord: Coord) -> bool:
    """Whether the player already knows the final result of ``coord``."""
    return is_conclusive(cell(session.target_grid, coord))


def resolve_shot(session: GameSession, coord: Coord) -> ShotOutcome:
    """Resolve a shot against the hidden ocean grid and update fleet bookkeeping.

    Never raises for bad grid content; impossible states come back as an
    ``INTERNAL_ERROR`` outcome.
    """
    if is_repeat(session, coord):
        return ShotOutcome.already_processed()

    target = cell(session.ocean_grid, coord)
    if target == EMPTY_CELL:
        return ShotOutcome.miss()
    if target.islower():
        return ShotOutcome.already_processed()
    if not target.isupper():
        logger.error("unhandled_ocean_cell cell=%r row=%d col=%d", target, coord.row, coord.col)
        return ShotOutcome.internal_error()

    ship = _ship_for_letter(session.fleet, target)
    if ship is None:
        logger.error(
            "unknown_ship_letter cell=%r row=%d col=%d", target, coord.row, coord.col
        )
        return ShotOutcome.internal_error()

    ship.hits_taken += 1
    set_cell(session.ocean_grid, coord, target.lower())
    if ship.hits_taken >= ship.size:
        if ship.sunk:
            return ShotOutcome.already_processed()
        ship.sunk = True
        session.ships_remaining -= 1
        return ShotOutcome.sunk(ship.ship_type)
    return ShotOutcome.hit()


def ship_for_type(fleet: list[Ship], ship_type: ShipType) -> Ship | None:
    for ship in fleet:
        if ship.ship_type is ship_type:
            return ship
    return None


def _ship_for_letter(fleet: list[Ship], letter: str) -> Ship | None:
    for ship in fleet:
        if ship.letter == letter:
            return ship
    return None
