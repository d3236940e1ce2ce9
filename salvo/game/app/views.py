"""Plain-text renderers for the console front end."""

from __future__ import annotations

import numpy as np

from salvo.game.app.services.menu_flow import MENU_LABELS
from salvo.game.core.board import cell
from salvo.game.core.coords import column_letter
from salvo.game.core.models import (
    DEFAULT_FLEET,
    EMPTY_CELL,
    HIT_CELL,
    MISS_CELL,
    PERFECT_SCORE,
    Coord,
    ShotKind,
    ShotOutcome,
)
from salvo.game.core.rules import GameSession
from salvo.game.scores.schema import ScoreEntry

RULE = "-" * 39


def render_main_menu() -> str:
    lines = [
        "=" * 39,
        "    B A T T L E S H I P    ",
        "=" * 39,
        "",
        "MAIN MENU",
        RULE,
    ]
    lines.extend(f"{choice.value}. {label}" for choice, label in MENU_LABELS.items())
    lines.append(RULE)
    return "\n".join(lines)


def render_grid(grid: np.ndarray, highlight: Coord | None = None) -> str:
    """Draw a grid with column letters and 1-based row numbers.

    The ``highlight`` cell is drawn in brackets.
    """
    size = grid.shape[0]
    separator = "  +" + "---+" * size
    lines = ["  |" + "".join(f" {column_letter(col)} |" for col in range(size)), separator]
    for row in range(size):
        cells: list[str] = []
        for col in range(size):
            marker = cell(grid, Coord(row, col))
            if highlight is not None and highlight == Coord(row, col):
                cells.append(f"[{marker}]|")
            else:
                cells.append(f" {marker} |")
        lines.append(f"{row + 1:2d}|" + "".join(cells))
        lines.append(separator)
    lines.append(RULE)
    return "\n".join(lines)


def render_target_grid(session: GameSession) -> str:
    highlight = session.last_shot if session.last_shot_valid else None
    return "\nYOUR TARGET GRID:\n" + render_grid(session.target_grid, highlight)


def render_revealed_ocean(session: GameSession) -> str:
    return "\nCOMPUTER'S SECRET OCEAN GRID (Revealed):\n" + render_grid(session.ocean_grid)


def render_fleet_status(session: GameSession) -> str:
    lines = ["", "GAME STATUS:", RULE, f"Missiles Fired: {session.missiles_fired}", "Enemy Fleet Status:"]
    for ship in session.fleet:
        if ship.sunk:
            status = "SUNK"
        elif ship.hits_taken > 0:
            status = f"HIT ({ship.hits_taken}/{ship.size})"
        else:
            status = "Undamaged"
        lines.append(f"  ({ship.letter}) {ship.ship_type.display_name:<20} : {status}")
    lines.append(RULE)
    return "\n".join(lines)


def render_outcome(outcome: ShotOutcome, session: GameSession, coord: Coord) -> str:
    """Message shown after a shot was resolved."""
    if outcome.kind is ShotKind.MISS:
        return "***** M I S S *****"
    if outcome.kind is ShotKind.HIT:
        return "***** H I T ! *****"
    if outcome.kind is ShotKind.SUNK and outcome.ship_type is not None:
        ship_type = outcome.ship_type
        return f"***** YOU SUNK THE {ship_type.display_name.upper()}! ({ship_type.letter}) *****"
    if outcome.kind is ShotKind.ALREADY_PROCESSED:
        return f"You already hit that spot. It's part of a ship ({cell(session.target_grid, coord)})."
    return "Error processing shot. Please report this."


def render_victory(session: GameSession, perfect: bool) -> str:
    lines = [
        "",
        "=" * 52,
        "    CONGRATULATIONS! You sunk all enemy ships!    ",
        "=" * 52,
        f"Total missiles fired: {session.missiles_fired}",
    ]
    if perfect:
        lines.append("A PERFECT GAME! You used the minimum possible missiles!")
    return "\n".join(lines)


def render_scores(entries: list[ScoreEntry]) -> str:
    lines = ["--- TOP 10 SCORES ---"]
    if not entries:
        lines.append("No scores recorded yet. Be the first!")
    else:
        lines.append("Rank | Name | Score (Missiles) | Date Achieved")
        lines.append("-----|------|------------------|--------------------")
        for rank, entry in enumerate(entries, start=1):
            lines.append(f"{rank:<4} | {entry.initials:<4} | {entry.score:<16} | {entry.achieved_at}")
    lines.append("-" * 54)
    return "\n".join(lines)


def render_help() -> str:
    lines = [
        "-" * 65,
        "                       HOW TO PLAY BATTLESHIP                    ",
        "-" * 65,
        "OBJECTIVE:",
        f"  Sink all {len(DEFAULT_FLEET)} of the computer's hidden ships.",
        "",
        "THE FLEET (Name, Letter on Grid when Sunk, Size):",
    ]
    for ship_type in DEFAULT_FLEET:
        lines.append(f"  - {ship_type.display_name:<20} ({ship_type.letter}) - {ship_type.size} holes")
    letters = ",".join(ship_type.letter for ship_type in DEFAULT_FLEET)
    lines.extend(
        [
            "",
            "GAMEPLAY:",
            "  1. On your turn, call out a shot by entering coordinates (e.g., A5, J10).",
            "  2. The grid will update with the result of your shot:",
            f"     '{EMPTY_CELL}' : Unknown water",
            f"     '{MISS_CELL}' : Miss",
            f"     '{HIT_CELL}' : Hit on a ship (that is not yet sunk)",
            f"     '{letters}': Indicates a segment of that specific sunk ship.",
            "  3. A ship is sunk when all its segments have been hit.",
            f"  4. The game ends when all {len(DEFAULT_FLEET)} ships are sunk.",
            "",
            "SCORING:",
            f"  Try to use the fewest missiles possible. A perfect game uses {PERFECT_SCORE} missiles.",
            "  Your score (missiles fired) might make the Top 10 list!",
            "",
            "SAVING/LOADING:",
            "  You can save your game progress if you need to quit and resume later.",
            "-" * 65,
        ]
    )
    return "\n".join(lines)
