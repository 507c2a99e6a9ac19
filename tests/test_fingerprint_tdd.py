from __future__ import annotations

from bingo_sim.core import Board
from bingo_sim.fingerprint import board_hash, boards_hash, draws_hash, matrix_hash


def test_board_hash_ignores_marks():
    board = Board.from_rows([[1, 2], [3, 4]])
    before = board_hash(board)
    board.mark(2)
    assert board_hash(board) == before
    assert before == matrix_hash([[1, 2], [3, 4]])


def test_hashes_stable_and_distinct():
    a = Board.from_rows([[1, 2], [3, 4]])
    b = Board.from_rows([[1, 3], [2, 4]])
    assert board_hash(a).startswith("sha256:")
    assert board_hash(a) != board_hash(b)
    assert boards_hash([a, b]) != boards_hash([b, a])
    assert draws_hash([1, 2, 3]) == draws_hash((1, 2, 3))
    assert draws_hash([1, 2, 3]) != draws_hash([3, 2, 1])
