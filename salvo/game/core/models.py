"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

BOARD_SIZE = 10
MAX_PLACEMENT_ATTEMPTS = 1000
LEADERBOARD_SIZE = 10

EMPTY_CELL = "~"
MISS_CELL = "M"
HIT_CELL = "H"


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class ShipType(StrEnum):
    """Ship classes of the computer fleet."""

    SUBMARINE = "SUBMARINE"
    CARRIER = "CARRIER"
    BATTLESHIP = "BATTLESHIP"
    CRUISER = "CRUISER"
    DESTROYER = "DESTROYER"

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]

    @property
    def letter(self) -> str:
        return SHIP_LETTERS[self]

    @property
    def display_name(self) -> str:
        return self.value.title()

    @classmethod
    def from_letter(cls, letter: str) -> ShipType | None:
        """Find the ship type drawn with ``letter`` (either case)."""
        wanted = letter.upper()
        for ship_type in cls:
            if SHIP_LETTERS[ship_type] == wanted:
                return ship_type
        return None


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.SUBMARINE: 3,
    ShipType.CARRIER: 5,
    ShipType.BATTLESHIP: 4,
    ShipType.CRUISER: 3,
    ShipType.DESTROYER: 2,
}

SHIP_LETTERS: dict[ShipType, str] = {
    ShipType.SUBMARINE: "S",
    ShipType.CARRIER: "A",
    ShipType.BATTLESHIP: "B",
    ShipType.CRUISER: "C",
    ShipType.DESTROYER: "D",
}

# Placement order; also the on-disk order of ships in a save record.
DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.SUBMARINE,
    ShipType.CARRIER,
    ShipType.BATTLESHIP,
    ShipType.CRUISER,
    ShipType.DESTROYER,
)

MAX_SHIP_SIZE = max(SHIP_LENGTHS.values())

# Every segment hit, no misses.
PERFECT_SCORE = sum(ship_type.size for ship_type in DEFAULT_FLEET)


class ShotKind(StrEnum):
    """Result tag of a single resolved shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    ALREADY_PROCESSED = "ALREADY_PROCESSED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ShotOutcome:
    """Tagged shot result; ``ship_type`` is set for sinks."""

    kind: ShotKind
    ship_type: ShipType | None = None

    @classmethod
    def miss(cls) -> ShotOutcome:
        return cls(ShotKind.MISS)

    @classmethod
    def hit(cls) -> ShotOutcome:
        return cls(ShotKind.HIT)

    @classmethod
    def sunk(cls, ship_type: ShipType) -> ShotOutcome:
        return cls(ShotKind.SUNK, ship_type)

    @classmethod
    def already_processed(cls) -> ShotOutcome:
        return cls(ShotKind.ALREADY_PROCESSED)

    @classmethod
    def internal_error(cls) -> ShotOutcome:
        return cls(ShotKind.INTERNAL_ERROR)


@dataclass(slots=True)
class Ship:
    """Fleet member: one placed instance of a ship class."""

    ship_type: ShipType
    hits_taken: int = 0
    sunk: bool = False
    segments: list[Coord] = field(default_factory=list)

    @property
    def letter(self) -> str:
        return self.ship_type.letter

    @property
    def size(self) -> int:
        return self.ship_type.size

    @property
    def placed(self) -> bool:
        return len(self.segments) == self.size


def build_fleet(catalog: tuple[ShipType, ...] = DEFAULT_FLEET) -> list[Ship]:
    """Create fresh, unplaced ships for every catalog entry."""
    return [Ship(ship_type=ship_type) for ship_type in catalog]


def cells_for(bow: Coord, size: int, orientation: Orientation) -> list[Coord]:
    """Compute the cells a ship of ``size`` covers from its bow."""
    result: list[Coord] = []
    for i in range(size):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(bow.row, bow.col + i))
        else:
            result.append(Coord(bow.row + i, bow.col))
    return result
