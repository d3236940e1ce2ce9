"""Application state transitions for menus, battle, and results."""

from __future__ import annotations

from enum import Enum, auto


class AppState(Enum):
    """Top-level application states."""

    MAIN_MENU = auto()
    BATTLE = auto()
    RESULT = auto()
    SCORES = auto()
    HELP = auto()
    EXIT = auto()


# (source, trigger) -> target; a None source matches any state.
_TRANSITIONS: dict[tuple[AppState | None, str], AppState] = {
    (AppState.MAIN_MENU, "start_battle"): AppState.BATTLE,
    (AppState.MAIN_MENU, "show_scores"): AppState.SCORES,
    (AppState.MAIN_MENU, "show_help"): AppState.HELP,
    (AppState.MAIN_MENU, "exit"): AppState.EXIT,
    (AppState.BATTLE, "game_won"): AppState.RESULT,
    (AppState.BATTLE, "leave_battle"): AppState.MAIN_MENU,
    (None, "to_main_menu"): AppState.MAIN_MENU,
}


def resolve_transition(current: AppState, trigger: str) -> AppState | None:
    """Return the state ``trigger`` leads to from ``current``, if allowed."""
    if current is AppState.EXIT:
        return None
    target = _TRANSITIONS.get((current, trigger))
    if target is None:
        target = _TRANSITIONS.get((None, trigger))
    return target
