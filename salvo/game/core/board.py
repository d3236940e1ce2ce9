"""Grid state representation and mutation helpers."""

from __future__ import annotations

import numpy as np

from salvo.game.core.models import BOARD_SIZE, EMPTY_CELL, MISS_CELL, Coord, ShipType

GRID_DTYPE = "<U1"


def empty_grid(size: int = BOARD_SIZE) -> np.ndarray:
    """Create a ``size``×``size`` grid filled with empty water."""
    return np.full((size, size), EMPTY_CELL, dtype=GRID_DTYPE)


def cell(grid: np.ndarray, coord: Coord) -> str:
    """Return the marker stored at ``coord``."""
    return str(grid[coord.row, coord.col])


def set_cell(grid: np.ndarray, coord: Coord, marker: str) -> None:
    grid[coord.row, coord.col] = marker


def in_bounds(grid: np.ndarray, coord: Coord) -> bool:
    """Return whether the coordinate is in grid bounds."""
    rows, cols = grid.shape
    return 0 <= coord.row < rows and 0 <= coord.col < cols


def is_conclusive(marker: str) -> bool:
    """Whether a target-grid marker already tells the final result of that cell.

    Misses and revealed sunk-ship letters are conclusive. Unknown cells and plain
    hits on a still-floating ship are not.
    """
    return marker == MISS_CELL or is_ship_letter(marker)


def is_ship_letter(marker: str) -> bool:
    return ShipType.from_letter(marker) is not None and marker.isupper()


def grid_to_bytes(grid: np.ndarray) -> bytes:
    """Row-major ASCII image of a grid."""
    return grid.astype("S1").tobytes()


def grid_from_bytes(payload: bytes, size: int = BOARD_SIZE) -> np.ndarray:
    """Inverse of :func:`grid_to_bytes`."""
    if len(payload) != size * size:
        raise ValueError(f"Grid image must be {size * size} bytes, got {len(payload)}.")
    raw = np.frombuffer(payload, dtype="S1").reshape((size, size))
    return raw.astype(GRID_DTYPE)
