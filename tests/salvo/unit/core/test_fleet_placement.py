import random

from salvo.game.core.board import cell, empty_grid, set_cell
from salvo.game.core.fleet import can_place, place_fleet
from salvo.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET,
    EMPTY_CELL,
    PERFECT_SCORE,
    Coord,
    Orientation,
    ShipType,
    build_fleet,
)


def test_catalog_lengths_total_perfect_score() -> None:
    assert [ship_type.size for ship_type in DEFAULT_FLEET] == [3, 5, 4, 3, 2]
    assert PERFECT_SCORE == 17
    assert len({ship_type.letter for ship_type in DEFAULT_FLEET}) == len(DEFAULT_FLEET)


def test_can_place_rejects_out_of_bounds_and_overlap() -> None:
    ocean = empty_grid()
    assert can_place(ocean, ShipType.CARRIER, Coord(0, 5), Orientation.HORIZONTAL)
    assert not can_place(ocean, ShipType.CARRIER, Coord(0, 6), Orientation.HORIZONTAL)
    assert not can_place(ocean, ShipType.CARRIER, Coord(6, 0), Orientation.VERTICAL)
    set_cell(ocean, Coord(0, 7), "S")
    assert not can_place(ocean, ShipType.CARRIER, Coord(0, 5), Orientation.HORIZONTAL)
    # Ships may touch; only shared cells are forbidden.
    assert can_place(ocean, ShipType.DESTROYER, Coord(1, 7), Orientation.HORIZONTAL)


def test_place_fleet_has_no_overlap_and_stays_in_bounds() -> None:
    for seed in range(200):
        ocean = empty_grid()
        fleet = build_fleet()
        report = place_fleet(ocean, fleet, random.Random(seed))

        assert report.complete
        assert report.placed == list(DEFAULT_FLEET)
        occupied = [segment for ship in fleet for segment in ship.segments]
        assert len(occupied) == PERFECT_SCORE
        assert len(set(occupied)) == len(occupied)
        for segment in occupied:
            assert 0 <= segment.row < BOARD_SIZE and 0 <= segment.col < BOARD_SIZE


def test_place_fleet_marks_letters_matching_segments(seeded_rng) -> None:
    ocean = empty_grid()
    fleet = build_fleet()
    place_fleet(ocean, fleet, seeded_rng)

    for ship in fleet:
        assert len(ship.segments) == ship.size
        assert all(cell(ocean, segment) == ship.letter for segment in ship.segments)
        rows = {segment.row for segment in ship.segments}
        cols = {segment.col for segment in ship.segments}
        assert len(rows) == 1 or len(cols) == 1
    marked = sum(1 for value in ocean.flat if str(value) != EMPTY_CELL)
    assert marked == PERFECT_SCORE


def test_place_fleet_is_deterministic_for_same_seed() -> None:
    first = build_fleet()
    second = build_fleet()
    place_fleet(empty_grid(), first, random.Random(42))
    place_fleet(empty_grid(), second, random.Random(42))
    assert [ship.segments for ship in first] == [ship.segments for ship in second]


def test_place_fleet_reports_exhausted_attempts(caplog) -> None:
    ocean = empty_grid()
    ocean[:, :] = "X"
    fleet = build_fleet()

    report = place_fleet(ocean, fleet, random.Random(0), max_attempts=25)

    assert not report.complete
    assert report.failed == list(DEFAULT_FLEET)
    assert all(ship.segments == [] for ship in fleet)
    assert "placement_failed" in caplog.text


def test_place_fleet_partial_failure_keeps_earlier_ships() -> None:
    ocean = empty_grid(size=3)
    fleet = build_fleet((ShipType.SUBMARINE, ShipType.CARRIER))

    report = place_fleet(ocean, fleet, random.Random(7), max_attempts=200)

    assert report.placed == [ShipType.SUBMARINE]
    assert report.failed == [ShipType.CARRIER]
    assert len(fleet[0].segments) == 3
