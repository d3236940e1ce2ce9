"""Main-menu choice parsing and routing."""

from __future__ import annotations

from enum import Enum


class MenuChoice(Enum):
    """Main menu entries, numbered as shown to the player."""

    NEW_GAME = 1
    RESUME_GAME = 2
    TOP_SCORES = 3
    HOW_TO_PLAY = 4
    QUIT = 5


MENU_LABELS: dict[MenuChoice, str] = {
    MenuChoice.NEW_GAME: "Start New Game",
    MenuChoice.RESUME_GAME: "Resume Game",
    MenuChoice.TOP_SCORES: "View Top 10 Scores",
    MenuChoice.HOW_TO_PLAY: "How to Play",
    MenuChoice.QUIT: "Quit Game",
}

MENU_TRIGGERS: dict[MenuChoice, str] = {
    MenuChoice.NEW_GAME: "start_battle",
    MenuChoice.RESUME_GAME: "start_battle",
    MenuChoice.TOP_SCORES: "show_scores",
    MenuChoice.HOW_TO_PLAY: "show_help",
    MenuChoice.QUIT: "exit",
}


def parse_menu_choice(text: str) -> MenuChoice | None:
    """Map typed text to a menu entry, or None when it is not one."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    try:
        return MenuChoice(value)
    except ValueError:
        return None


def is_yes(text: str | None) -> bool:
    """Y/N prompt answer; only a leading Y counts as yes."""
    if not text:
        return False
    return text.strip()[:1].upper() == "Y"
