from __future__ import annotations

import hashlib
import json
from typing import Iterable, Sequence

from .core import Board


def _digest(payload: object) -> str:
    text = json.dumps(payload, ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(text.encode("utf-8")).hexdigest()


def matrix_hash(matrix: Sequence[Sequence[int]]) -> str:
    return _digest([list(row) for row in matrix])


def board_hash(board: Board) -> str:
    """Hash of the board's values only; marks are ignored."""
    return matrix_hash(board.values())


def boards_hash(boards: Iterable[Board]) -> str:
    return _digest([board_hash(b) for b in boards])


def draws_hash(draws: Iterable[int]) -> str:
    return _digest(list(draws))
