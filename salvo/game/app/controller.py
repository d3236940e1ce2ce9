"""Console game controller: main menu, battle loop, and results."""

from __future__ import annotations

import logging
import random

from salvo.game.app.console import ConsolePort
from salvo.game.app.services.battle import (
    StartGameResult,
    finish_game,
    quit_battle,
    resume_game,
    start_new_game,
)
from salvo.game.app.services.menu_flow import MENU_TRIGGERS, MenuChoice, is_yes, parse_menu_choice
from salvo.game.app.state_machine import AppState, resolve_transition
from salvo.game.app.views import (
    render_fleet_status,
    render_help,
    render_main_menu,
    render_outcome,
    render_revealed_ocean,
    render_scores,
    render_target_grid,
    render_victory,
)
from salvo.game.core.errors import PersistenceError, UserInputError
from salvo.game.core.rules import GameSession, SessionState, play_turn
from salvo.game.saves.repository import SaveRepository
from salvo.game.scores.service import LeaderboardService

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"


class GameController:
    """Drives the game over a ConsolePort."""

    def __init__(
        self,
        *,
        console: ConsolePort,
        saves: SaveRepository,
        leaderboard: LeaderboardService,
        rng: random.Random,
    ) -> None:
        self._console = console
        self._saves = saves
        self._leaderboard = leaderboard
        self._rng = rng
        self._state = AppState.MAIN_MENU
        self._session: GameSession | None = None

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def session(self) -> GameSession | None:
        return self._session

    def run(self) -> None:
        """Run the main menu until the player quits or input ends."""
        self._console.write("Welcome to Battleship!")
        while self._state is not AppState.EXIT:
            self._console.write(render_main_menu())
            line = self._console.read_line("Enter your choice (1-5): ")
            choice = MenuChoice.QUIT if line is None else parse_menu_choice(line)
            if choice is None:
                self._console.write("Invalid choice. Please try again.")
                continue
            self._handle_menu_choice(choice)

    def _handle_menu_choice(self, choice: MenuChoice) -> None:
        self._transition(MENU_TRIGGERS[choice])
        if choice is MenuChoice.NEW_GAME:
            self.play(start_new_game(self._rng))
        elif choice is MenuChoice.RESUME_GAME:
            self.play(resume_game(self._saves, self._rng))
        elif choice is MenuChoice.TOP_SCORES:
            self.show_scores()
            self._transition("to_main_menu")
        elif choice is MenuChoice.HOW_TO_PLAY:
            self._console.write(render_help())
            self._transition("to_main_menu")
        else:
            self._console.write("Exiting game. Goodbye!")

    def play(self, start: StartGameResult) -> None:
        """Run one battle from a started or resumed session."""
        self._session = start.session
        for warning in start.warnings:
            self._console.write(warning)
        self._console.write(start.status)

        session = start.session
        while session.state is SessionState.IN_PROGRESS:
            self._console.write(render_target_grid(session))
            self._console.write(render_fleet_status(session))
            self._console.write("Enter 'quit' to return to main menu.")
            line = self._console.read_line("Your command (e.g., A5 or quit): ")
            if line is None or line.strip().lower() == QUIT_COMMAND:
                self._leave_battle(session, prompt=line is not None)
                return
            self._take_turn(session, line)

        if session.state is SessionState.WON:
            self._transition("game_won")
            self._finish(session)
        self._transition("to_main_menu")

    def show_scores(self) -> None:
        try:
            entries = self._leaderboard.top_scores()
        except PersistenceError as exc:
            self._console.write(f"Error: {exc}")
            return
        self._console.write(render_scores(entries))

    def _take_turn(self, session: GameSession, line: str) -> None:
        report = play_turn(session, line)
        if report.error is not None:
            prefix = "Error: " if isinstance(report.error, UserInputError) else ""
            self._console.write(f"{prefix}{report.error}")
            return
        if report.outcome is not None and report.coord is not None:
            self._console.write("\n" + render_outcome(report.outcome, session, report.coord))

    def _leave_battle(self, session: GameSession, *, prompt: bool) -> None:
        save_requested = False
        if prompt:
            self._console.write("Are you sure you want to quit this game session?")
            answer = self._console.read_line("Save current game before returning to menu? (Y/N): ")
            save_requested = is_yes(answer)
        result = quit_battle(session, self._saves, save_requested)
        if save_requested or not prompt:
            self._console.write(result.status)
        self._console.write("Returning to Main Menu...")
        self._transition("leave_battle")

    def _finish(self, session: GameSession) -> None:
        summary = finish_game(session, self._leaderboard)
        self._console.write(render_target_grid(session))
        self._console.write(render_fleet_status(session))
        self._console.write(render_victory(session, summary.perfect))
        if summary.status:
            self._console.write(f"Error: {summary.status}")

        if summary.qualifies:
            self._record_score(summary.score)
        elif summary.status is None:
            self._console.write(
                f"Good game! Your score of {summary.score} missiles was not quite enough "
                "for the Top 10 this time."
            )

        answer = self._console.read_line(
            "\nWould you like to see the computer's ship placements? (Y/N): "
        )
        if is_yes(answer):
            self._console.write(render_revealed_ocean(session))

    def _record_score(self, score: int) -> None:
        self._console.write("\nCongratulations! You've made the Top 10 high scores!")
        while True:
            raw = self._console.read_line("Enter your initials (3 characters, e.g., ACE): ")
            if raw is None:
                self._console.write("No initials entered; score not recorded.")
                return
            try:
                self._leaderboard.record(raw, score)
            except UserInputError as exc:
                self._console.write(f"Error: {exc} Please try again.")
                continue
            except PersistenceError as exc:
                self._console.write(f"Error: {exc}")
                return
            break
        self._console.write("Your score has been recorded!")
        self.show_scores()

    def _transition(self, trigger: str) -> None:
        target = resolve_transition(self._state, trigger)
        if target is None:
            logger.debug("transition_ignored state=%s trigger=%s", self._state.name, trigger)
            return
        logger.debug("transition state=%s trigger=%s target=%s", self._state.name, trigger, target.name)
        self._state = target
