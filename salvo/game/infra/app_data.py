"""Unified Salvo app-data paths."""

from __future__ import annotations

import os
import sys
from pathlib import Path

SAVE_FILE_NAME = "battleship_save_game.dat"
SCORE_FILE_NAME = "topTenScores.txt"


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for Salvo runtime state."""
    configured = os.getenv("SALVO_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_game_root() / candidate
    return resolve_game_root() / "appdata"


def resolve_game_root() -> Path:
    """Resolve the runtime game root directory."""
    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            return Path(executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def resolve_logs_dir() -> Path:
    """Resolve logs directory under app-data root."""
    configured = os.getenv("SALVO_LOG_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        return candidate if candidate.is_absolute() else resolve_app_data_root() / candidate
    return resolve_app_data_root() / "logs"


def resolve_saves_dir() -> Path:
    """Resolve saves directory under app-data root."""
    return resolve_app_data_root() / "saves"


def resolve_scores_path() -> Path:
    return resolve_app_data_root() / SCORE_FILE_NAME


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    root = resolve_app_data_root()
    logs = resolve_logs_dir()
    saves = resolve_saves_dir()
    root.mkdir(parents=True, exist_ok=True)
    logs.mkdir(parents=True, exist_ok=True)
    saves.mkdir(parents=True, exist_ok=True)
    return {"root": root, "logs": logs, "saves": saves, "scores": resolve_scores_path()}
