from __future__ import annotations

import random
from datetime import datetime

import pytest

from salvo.game.core.board import set_cell
from salvo.game.core.models import Coord, Orientation, ShipType, cells_for
from salvo.game.core.rules import GameSession, SessionState
from salvo.game.saves.repository import SaveRepository
from salvo.game.scores.repository import ScoreRepository
from salvo.game.scores.service import LeaderboardService

FIXED_BOWS: dict[ShipType, Coord] = {
    ShipType.SUBMARINE: Coord(0, 0),
    ShipType.CARRIER: Coord(2, 0),
    ShipType.BATTLESHIP: Coord(4, 0),
    ShipType.CRUISER: Coord(6, 0),
    ShipType.DESTROYER: Coord(8, 0),
}


def make_fixed_session() -> GameSession:
    """In-progress session with every ship laid horizontally from column A."""
    session = GameSession()
    for ship in session.fleet:
        ship.segments = cells_for(FIXED_BOWS[ship.ship_type], ship.size, Orientation.HORIZONTAL)
        for segment in ship.segments:
            set_cell(session.ocean_grid, segment, ship.letter)
    session.in_progress = True
    session.state = SessionState.IN_PROGRESS
    return session


def all_ship_cells(session: GameSession) -> list[Coord]:
    return [segment for ship in session.fleet for segment in ship.segments]


class ScriptedConsole:
    """ConsolePort fed from a list of lines; None once the script runs out."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.written: list[str] = []

    def read_line(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self._lines:
            return None
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.written.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.written)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def fixed_session() -> GameSession:
    return make_fixed_session()


@pytest.fixture
def save_repository(tmp_path) -> SaveRepository:
    return SaveRepository(tmp_path / "saves")


@pytest.fixture
def score_repository(tmp_path) -> ScoreRepository:
    return ScoreRepository(tmp_path / "topTenScores.txt")


@pytest.fixture
def leaderboard(score_repository: ScoreRepository) -> LeaderboardService:
    return LeaderboardService(score_repository, clock=lambda: datetime(2026, 10, 18, 12, 30))


@pytest.fixture
def scripted_console():
    def _make(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(list(lines))

    return _make
