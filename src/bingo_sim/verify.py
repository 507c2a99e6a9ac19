from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence

from .core import Board


def duplicate_values(board: Board) -> List[int]:
    counts: Counter[int] = Counter(v for row in board.values() for v in row)
    return sorted(v for v, c in counts.items() if c > 1)


def repeated_draws(draws: Sequence[int]) -> List[int]:
    counts: Counter[int] = Counter(draws)
    return sorted(v for v, c in counts.items() if c > 1)


def count_unused_draws(draws: Sequence[int], boards: Sequence[Board]) -> int:
    present = {v for board in boards for row in board.values() for v in row}
    return sum(1 for v in draws if v not in present)


def verify_input(draws: Sequence[int], boards: Sequence[Board]) -> Dict[str, object]:
    """Sanity report over parsed input. Findings are warnings, not failures."""
    dupes: Dict[str, List[int]] = {}
    for idx, board in enumerate(boards):
        found = duplicate_values(board)
        if found:
            dupes[str(idx)] = found
    repeats = repeated_draws(draws)
    return {
        "boards": len(boards),
        "draws": len(draws),
        "shapes": sorted({f"{r}x{c}" for r, c in (b.shape for b in boards)}),
        "duplicate_values_within_boards": dupes,
        "repeated_draws": repeats,
        "unused_draws": count_unused_draws(draws, boards),
        "ok_no_duplicates_within_boards": not dupes,
        "ok_draws_distinct": not repeats,
    }
