import random

from salvo.game.app.services.battle import finish_game, quit_battle, resume_game, start_new_game
from salvo.game.core import rules
from salvo.game.core.errors import PersistenceError
from salvo.game.core.models import Coord, ShipType
from salvo.game.core.rules import SessionState, fire
from salvo.game.scores.schema import ScoreEntry
from tests.salvo.conftest import all_ship_cells


def test_start_new_game_reports_placed_fleet(seeded_rng) -> None:
    result = start_new_game(seeded_rng)
    assert not result.resumed
    assert result.warnings == ()
    assert result.session.state is SessionState.IN_PROGRESS


def test_start_new_game_surfaces_placement_warning(monkeypatch) -> None:
    original = rules.place_fleet

    def cramped(ocean, fleet, rng):
        return original(ocean, fleet, rng, max_attempts=0)

    monkeypatch.setattr(rules, "place_fleet", cramped)
    result = start_new_game(random.Random(1))
    assert len(result.warnings) == 5
    assert ShipType.CARRIER.display_name in result.warnings[1]


def test_resume_game_loads_saved_session(save_repository, fixed_session, seeded_rng) -> None:
    fire(fixed_session, Coord(9, 9))
    save_repository.save(fixed_session)
    result = resume_game(save_repository, seeded_rng)
    assert result.resumed
    assert result.status == "Game resumed."
    assert result.session.missiles_fired == 1


def test_resume_game_falls_back_to_new_game(save_repository, seeded_rng) -> None:
    result = resume_game(save_repository, seeded_rng)
    assert not result.resumed
    assert "No saved game found." in result.status
    assert result.session.missiles_fired == 0


def test_resume_game_falls_back_on_corrupt_save(save_repository, seeded_rng) -> None:
    save_repository.path.parent.mkdir(parents=True, exist_ok=True)
    save_repository.path.write_bytes(b"junk")
    result = resume_game(save_repository, seeded_rng)
    assert not result.resumed
    assert "could not be loaded" in result.status


def test_quit_battle_saves_when_requested(save_repository, fixed_session) -> None:
    result = quit_battle(fixed_session, save_repository, save_requested=True)
    assert result.saved
    assert save_repository.exists()
    assert fixed_session.state is SessionState.ABANDONED


def test_quit_battle_reports_save_failure(fixed_session, monkeypatch, save_repository) -> None:
    def broken(session):
        raise PersistenceError("disk full")

    monkeypatch.setattr(save_repository, "save", broken)
    result = quit_battle(fixed_session, save_repository, save_requested=True)
    assert not result.saved
    assert "disk full" in result.status
    assert fixed_session.state is SessionState.ABANDONED


def test_finish_game_summarizes_perfect_game(fixed_session, leaderboard) -> None:
    for coord in all_ship_cells(fixed_session):
        fire(fixed_session, coord)
    summary = finish_game(fixed_session, leaderboard)
    assert summary.score == 17
    assert summary.perfect
    assert summary.qualifies


def test_finish_game_not_qualifying(fixed_session, leaderboard, score_repository) -> None:
    score_repository.write([ScoreEntry(f"P{index}X", 17, "2026-10-18 12:00") for index in range(10)])
    fire(fixed_session, Coord(9, 9))
    for coord in all_ship_cells(fixed_session):
        fire(fixed_session, coord)
    summary = finish_game(fixed_session, leaderboard)
    assert summary.score == 18
    assert not summary.perfect
    assert not summary.qualifies
