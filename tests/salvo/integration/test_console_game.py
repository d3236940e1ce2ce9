import random

from salvo.game.app.controller import GameController
from salvo.game.app.state_machine import AppState
from salvo.game.core.coords import format_coordinate
from salvo.game.core.rules import SessionState
from salvo.game.scores.schema import ScoreEntry
from tests.salvo.conftest import all_ship_cells, make_fixed_session


def make_controller(console, save_repository, leaderboard, seed: int = 1337) -> GameController:
    return GameController(
        console=console,
        saves=save_repository,
        leaderboard=leaderboard,
        rng=random.Random(seed),
    )


def ship_shots() -> list[str]:
    return [format_coordinate(coord) for coord in all_ship_cells(make_fixed_session())]


def test_resumed_perfect_game_records_score(
    scripted_console, save_repository, leaderboard, score_repository
) -> None:
    save_repository.save(make_fixed_session())
    console = scripted_console("2", *ship_shots(), "TOOLONG", "ACE", "y", "5")
    controller = make_controller(console, save_repository, leaderboard)

    controller.run()

    output = console.output
    assert "Game resumed." in output
    assert "YOU SUNK THE SUBMARINE! (S)" in output
    assert "CONGRATULATIONS! You sunk all enemy ships!" in output
    assert "Total missiles fired: 17" in output
    assert "A PERFECT GAME!" in output
    assert "Error: Initials must be exactly 3 characters. Please try again." in output
    assert "Your score has been recorded!" in output
    assert "COMPUTER'S SECRET OCEAN GRID (Revealed):" in output
    assert "Exiting game. Goodbye!" in output
    assert score_repository.read() == [ScoreEntry("ACE", 17, "2026-10-18 12:30")]
    assert controller.state is AppState.EXIT
    assert controller.session is not None and controller.session.state is SessionState.WON


def test_bad_input_and_repeats_do_not_cost_missiles(
    scripted_console, save_repository, leaderboard
) -> None:
    save_repository.save(make_fixed_session())
    console = scripted_console("2", "K5", "A", "J10", "J10", "quit", "n", "5")
    controller = make_controller(console, save_repository, leaderboard)

    controller.run()

    output = console.output
    assert "Error: Column out of range. Must be A-J." in output
    assert "Error: Invalid coordinate format. Use LetterNumber (e.g., A5, J10)." in output
    assert "***** M I S S *****" in output
    assert "You've already conclusively fired at J10 (M)." in output
    assert "Missiles Fired: 1" in output
    assert controller.session is not None
    assert controller.session.missiles_fired == 1
    assert controller.session.state is SessionState.ABANDONED


def test_quit_with_save_then_resume(scripted_console, save_repository, leaderboard) -> None:
    first = scripted_console("1", "A1", "B2", "quit", "Y", "5")
    make_controller(first, save_repository, leaderboard).run()

    assert "Game saved." in first.output
    assert save_repository.exists()

    second = scripted_console("2", "quit", "N", "5")
    controller = make_controller(second, save_repository, leaderboard)
    controller.run()

    assert "Game resumed." in second.output
    assert "Missiles Fired: 2" in second.output


def test_resume_without_save_starts_new_game(scripted_console, save_repository, leaderboard) -> None:
    console = scripted_console("2")
    controller = make_controller(console, save_repository, leaderboard)

    controller.run()

    assert "No saved game found. Starting a new game instead." in console.output
    assert controller.state is AppState.EXIT


def test_menu_scores_help_and_invalid_choice(
    scripted_console, save_repository, leaderboard, score_repository
) -> None:
    score_repository.write([ScoreEntry("BOB", 30, "2026-10-01 08:00")])
    console = scripted_console("9", "3", "4", "5")

    make_controller(console, save_repository, leaderboard).run()

    output = console.output
    assert "Invalid choice. Please try again." in output
    assert "--- TOP 10 SCORES ---" in output
    assert "BOB" in output
    assert "HOW TO PLAY BATTLESHIP" in output
    assert output.rstrip().endswith("Exiting game. Goodbye!")


def test_end_of_input_exits_cleanly(scripted_console, save_repository, leaderboard) -> None:
    console = scripted_console("1")
    controller = make_controller(console, save_repository, leaderboard)

    controller.run()

    assert controller.state is AppState.EXIT
    assert not save_repository.exists()
    assert controller.session is not None
    assert controller.session.state is SessionState.ABANDONED


def test_non_ascii_shot_text_is_reprompted(scripted_console, save_repository, leaderboard) -> None:
    console = scripted_console("1", "ß5", "quit", "n", "5")
    controller = make_controller(console, save_repository, leaderboard)

    controller.run()

    assert "Error: Invalid coordinate format. Use LetterNumber (e.g., A5, J10)." in console.output
    assert controller.state is AppState.EXIT
    assert controller.session is not None
    assert controller.session.missiles_fired == 0


def test_menu_quit_after_leaving_battle_asks_nothing_more(
    scripted_console, save_repository, leaderboard
) -> None:
    console = scripted_console("1", "A1", "quit", "n", "5")
    controller = make_controller(console, save_repository, leaderboard)

    controller.run()

    assert console.prompts[-1] == "Enter your choice (1-5): "
    assert console.prompts.count("Save current game before returning to menu? (Y/N): ") == 1
    assert controller.session is not None
    assert controller.session.state is SessionState.ABANDONED
    assert not save_repository.exists()
