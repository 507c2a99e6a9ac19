from __future__ import annotations

from typing import Iterable, Iterator, Tuple


class DrawSequence:
    """Immutable ordered list of called numbers."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int]):
        self._values: Tuple[int, ...] = tuple(int(v) for v in values)

    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrawSequence):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"DrawSequence({list(self._values)!r})"
