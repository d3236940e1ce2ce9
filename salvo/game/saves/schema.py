"""Binary save-record layout and encode/decode helpers.

One record holds a whole game session. All integers are little-endian and the
record has a fixed size for the standard board and fleet::

    header   magic "SALV", version (u16), grid size (u8), ship count (u8)
    ocean    size*size ASCII cells, row-major
    target   size*size ASCII cells, row-major
    ships    per ship in catalog order: letter (1 byte), size (u8),
             hits taken (u8), sunk (bool), MAX_SHIP_SIZE x (row u8, col u8);
             unused segment slots hold 0xFF
    trailer  missiles fired (u16), ships remaining (u8), in progress (bool),
             last shot row (u8), last shot col (u8), last shot valid (bool)
"""

from __future__ import annotations

import struct

import numpy as np

from salvo.game.core.board import grid_from_bytes, grid_to_bytes
from salvo.game.core.errors import CorruptSaveError
from salvo.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET,
    EMPTY_CELL,
    HIT_CELL,
    MAX_SHIP_SIZE,
    MISS_CELL,
    Coord,
    Ship,
)
from salvo.game.core.rules import GameSession, SessionState

SAVE_MAGIC = b"SALV"
SAVE_VERSION = 1
UNUSED_SLOT = 0xFF

_HEADER = struct.Struct("<4sHBB")
_SHIP = struct.Struct("<cBB?" + "BB" * MAX_SHIP_SIZE)
_TRAILER = struct.Struct("<HB?BB?")

_SHIP_LETTERS = frozenset(ship_type.letter for ship_type in DEFAULT_FLEET)
_OCEAN_CELLS = frozenset({EMPTY_CELL}) | _SHIP_LETTERS | {letter.lower() for letter in _SHIP_LETTERS}
_TARGET_CELLS = frozenset({EMPTY_CELL, MISS_CELL, HIT_CELL}) | _SHIP_LETTERS


def record_size(size: int = BOARD_SIZE, ship_count: int = len(DEFAULT_FLEET)) -> int:
    """Byte length of a save record for the given board and fleet."""
    return _HEADER.size + 2 * size * size + ship_count * _SHIP.size + _TRAILER.size


SAVE_RECORD_SIZE = record_size()


def encode_session(session: GameSession) -> bytes:
    """Serialize a session into one fixed-size save record."""
    size = session.size
    parts = [
        _HEADER.pack(SAVE_MAGIC, SAVE_VERSION, size, len(session.fleet)),
        grid_to_bytes(session.ocean_grid),
        grid_to_bytes(session.target_grid),
    ]
    for ship in session.fleet:
        slots: list[int] = []
        for index in range(MAX_SHIP_SIZE):
            if index < len(ship.segments):
                slots.extend((ship.segments[index].row, ship.segments[index].col))
            else:
                slots.extend((UNUSED_SLOT, UNUSED_SLOT))
        parts.append(
            _SHIP.pack(ship.letter.encode("ascii"), ship.size, ship.hits_taken, ship.sunk, *slots)
        )
    parts.append(
        _TRAILER.pack(
            session.missiles_fired,
            session.ships_remaining,
            session.in_progress,
            session.last_shot.row,
            session.last_shot.col,
            session.last_shot_valid,
        )
    )
    return b"".join(parts)


def decode_session(payload: bytes) -> GameSession:
    """Rebuild a session from a save record.

    Raises ``CorruptSaveError`` for any record that is not exactly a valid
    current-version image. Nothing is built until every field checks out.
    """
    if len(payload) != SAVE_RECORD_SIZE:
        raise CorruptSaveError(
            f"Save record is {len(payload)} bytes, expected {SAVE_RECORD_SIZE}."
        )

    magic, version, size, ship_count = _HEADER.unpack_from(payload, 0)
    if magic != SAVE_MAGIC:
        raise CorruptSaveError("Save record has an unknown signature.")
    if version != SAVE_VERSION:
        raise CorruptSaveError(f"Unsupported save version {version}.")
    if size != BOARD_SIZE or ship_count != len(DEFAULT_FLEET):
        raise CorruptSaveError("Save record board or fleet shape mismatch.")

    offset = _HEADER.size
    cells = size * size
    ocean = _decode_grid(payload[offset : offset + cells], size, _OCEAN_CELLS, "ocean")
    offset += cells
    target = _decode_grid(payload[offset : offset + cells], size, _TARGET_CELLS, "target")
    offset += cells

    fleet: list[Ship] = []
    for ship_type in DEFAULT_FLEET:
        letter, ship_size, hits, sunk, *slots = _SHIP.unpack_from(payload, offset)
        offset += _SHIP.size
        if letter.decode("ascii", errors="replace") != ship_type.letter or ship_size != ship_type.size:
            raise CorruptSaveError(f"Save record ship entry mismatch for {ship_type.value}.")
        if hits > ship_size or sunk != (hits == ship_size):
            raise CorruptSaveError(f"Save record damage is inconsistent for {ship_type.value}.")
        segments = _decode_segments(slots, ship_size, size)
        fleet.append(Ship(ship_type=ship_type, hits_taken=hits, sunk=sunk, segments=segments))

    missiles, remaining, _in_progress, last_row, last_col, last_valid = _TRAILER.unpack_from(
        payload, offset
    )
    if remaining != sum(1 for ship in fleet if not ship.sunk):
        raise CorruptSaveError("Save record ships-remaining count is inconsistent.")
    if not (0 <= last_row < size and 0 <= last_col < size):
        raise CorruptSaveError("Save record last shot is out of bounds.")

    return GameSession(
        ocean_grid=ocean,
        target_grid=target,
        fleet=fleet,
        missiles_fired=missiles,
        ships_remaining=remaining,
        in_progress=True,
        last_shot=Coord(last_row, last_col),
        last_shot_valid=last_valid,
        state=SessionState.IN_PROGRESS,
    )


def _decode_grid(raw: bytes, size: int, allowed: frozenset[str], label: str) -> np.ndarray:
    try:
        text = raw.decode("ascii")
    except UnicodeDecodeError as exc:
        raise CorruptSaveError(f"Save record {label} grid is not ASCII.") from exc
    unknown = set(text) - allowed
    if unknown:
        raise CorruptSaveError(f"Save record {label} grid has unknown cells {sorted(unknown)}.")
    return grid_from_bytes(raw, size)


def _decode_segments(slots: list[int], ship_size: int, size: int) -> list[Coord]:
    pairs = list(zip(slots[0::2], slots[1::2]))
    used = [pair for pair in pairs if pair != (UNUSED_SLOT, UNUSED_SLOT)]
    # A ship is either fully placed or was left off the grid.
    if used and len(used) != ship_size:
        raise CorruptSaveError("Save record ship segments are incomplete.")
    if pairs[: len(used)] != used:
        raise CorruptSaveError("Save record ship segments are not contiguous.")
    for row, col in used:
        if not (0 <= row < size and 0 <= col < size):
            raise CorruptSaveError("Save record ship segment is out of bounds.")
    return [Coord(row, col) for row, col in used]
