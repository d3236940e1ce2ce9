"""Application service-layer helpers."""

from salvo.game.app.services.battle import (
    GameSummary,
    QuitResult,
    StartGameResult,
    finish_game,
    quit_battle,
    resume_game,
    start_new_game,
)
from salvo.game.app.services.menu_flow import MENU_LABELS, MenuChoice, is_yes, parse_menu_choice

__all__ = [
    "GameSummary",
    "MENU_LABELS",
    "MenuChoice",
    "QuitResult",
    "StartGameResult",
    "finish_game",
    "is_yes",
    "parse_menu_choice",
    "quit_battle",
    "resume_game",
    "start_new_game",
]
