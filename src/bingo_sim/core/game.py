"""Replay a draw sequence against a set of boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from .board import Board
from .draws import DrawSequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Win:
    """Completion of one board."""

    board_index: int
    draw_index: int
    value: int
    unmarked_sum: int

    @property
    def score(self) -> int:
        return self.value * self.unmarked_sum


class Game:
    """Owns the initial boards and draws; every query runs on fresh copies."""

    def __init__(self, boards: Sequence[Board], draws: Iterable[int]):
        self._boards: List[Board] = [b.copy() for b in boards]
        self.draws = draws if isinstance(draws, DrawSequence) else DrawSequence(draws)

    @property
    def board_count(self) -> int:
        return len(self._boards)

    def fresh_boards(self) -> List[Board]:
        return [b.copy() for b in self._boards]

    def replay(self) -> Iterator[Win]:
        """Yield wins in completion order: by draw, then by board order.

        A board that has won is skipped for the rest of the run.
        """
        boards = self.fresh_boards()
        won = [False] * len(boards)
        remaining = len(boards)
        for draw_index, value in enumerate(self.draws):
            if remaining == 0:
                return
            for board_index, board in enumerate(boards):
                if won[board_index]:
                    continue
                board.mark(value)
                if not board.is_complete():
                    continue
                won[board_index] = True
                remaining -= 1
                win = Win(
                    board_index=board_index,
                    draw_index=draw_index,
                    value=value,
                    unmarked_sum=board.unmarked_sum(),
                )
                logger.debug(
                    "Board %d complete on draw #%d (value %d), score %d\n%s",
                    board_index,
                    draw_index,
                    value,
                    win.score,
                    board.render(),
                )
                yield win

    def winners(self) -> List[Win]:
        return list(self.replay())

    def find_first_winner(self) -> Optional[Win]:
        return next(self.replay(), None)

    def find_last_winner(self) -> Optional[Win]:
        """Last board to complete, or None unless every board completes."""
        last: Optional[Win] = None
        count = 0
        for win in self.replay():
            last = win
            count += 1
        if last is None or count < self.board_count:
            return None
        return last
