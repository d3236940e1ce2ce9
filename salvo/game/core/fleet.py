"""Random placement of the computer fleet on the ocean grid."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

import numpy as np

from salvo.game.core.board import cell, in_bounds, set_cell
from salvo.game.core.models import (
    EMPTY_CELL,
    MAX_PLACEMENT_ATTEMPTS,
    Coord,
    Orientation,
    Ship,
    ShipType,
    cells_for,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlacementReport:
    """Outcome of placing a fleet; ``failed`` lists ships left off the grid."""

    placed: list[ShipType] = field(default_factory=list)
    failed: list[ShipType] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failed


def can_place(ocean: np.ndarray, ship_type: ShipType, bow: Coord, orientation: Orientation) -> bool:
    """Return whether every cell of the ship is in bounds and empty."""
    for target in cells_for(bow, ship_type.size, orientation):
        if not in_bounds(ocean, target):
            return False
        if cell(ocean, target) != EMPTY_CELL:
            return False
    return True


def place_fleet(
    ocean: np.ndarray,
    fleet: list[Ship],
    rng: random.Random,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> PlacementReport:
    """Place ``fleet`` in order, each ship at a random free spot.

    Ships that do not fit within ``max_attempts`` draws keep empty segments and
    are listed in the report's ``failed``.
    """
    report = PlacementReport()
    size = ocean.shape[0]

    for ship in fleet:
        placed = False
        for _ in range(max_attempts):
            row = rng.randrange(size)
            col = rng.randrange(size)
            orientation = rng.choice([Orientation.HORIZONTAL, Orientation.VERTICAL])
            bow = Coord(row=row, col=col)
            if can_place(ocean, ship.ship_type, bow, orientation):
                _mark_ship(ocean, ship, bow, orientation)
                placed = True
                break
        if placed:
            report.placed.append(ship.ship_type)
        else:
            ship.segments = []
            report.failed.append(ship.ship_type)
            logger.warning(
                "placement_failed ship=%s attempts=%d",
                ship.ship_type.value,
                max_attempts,
            )

    logger.debug(
        "fleet_placed placed=%s failed=%s",
        [ship_type.value for ship_type in report.placed],
        [ship_type.value for ship_type in report.failed],
    )
    return report


def _mark_ship(ocean: np.ndarray, ship: Ship, bow: Coord, orientation: Orientation) -> None:
    segments = cells_for(bow, ship.size, orientation)
    for segment in segments:
        set_cell(ocean, segment, ship.letter)
    ship.segments = segments
