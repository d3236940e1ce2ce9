import numpy as np
import pytest

from salvo.game.core.errors import CorruptSaveError, NoSaveError, PersistenceError
from salvo.game.core.models import Coord
from salvo.game.core.rules import fire
from salvo.game.saves.repository import SaveRepository
from tests.salvo.conftest import make_fixed_session


def test_save_then_load_round_trips(save_repository: SaveRepository, fixed_session) -> None:
    fire(fixed_session, Coord(2, 0))
    fire(fixed_session, Coord(9, 9))
    save_repository.save(fixed_session)

    loaded = save_repository.load()

    assert save_repository.exists()
    assert np.array_equal(loaded.target_grid, fixed_session.target_grid)
    assert np.array_equal(loaded.ocean_grid, fixed_session.ocean_grid)
    assert loaded.missiles_fired == 2
    assert loaded.in_progress


def test_save_overwrites_previous_slot(save_repository: SaveRepository) -> None:
    first = make_fixed_session()
    save_repository.save(first)
    second = make_fixed_session()
    fire(second, Coord(9, 9))
    save_repository.save(second)

    assert save_repository.load().missiles_fired == 1
    assert [path.name for path in save_repository.path.parent.iterdir()] == [save_repository.path.name]


def test_load_missing_slot_raises_no_save(save_repository: SaveRepository) -> None:
    assert not save_repository.exists()
    with pytest.raises(NoSaveError):
        save_repository.load()


def test_load_truncated_slot_raises_corrupt(save_repository: SaveRepository, fixed_session) -> None:
    save_repository.save(fixed_session)
    data = save_repository.path.read_bytes()
    save_repository.path.write_bytes(data[:-10])
    with pytest.raises(CorruptSaveError):
        save_repository.load()


def test_corrupt_and_missing_are_persistence_errors() -> None:
    assert issubclass(NoSaveError, PersistenceError)
    assert issubclass(CorruptSaveError, PersistenceError)


def test_save_failure_is_wrapped(tmp_path, fixed_session) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    repo = SaveRepository(blocker)
    with pytest.raises(PersistenceError):
        repo.save(fixed_session)
