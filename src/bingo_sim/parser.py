"""Parse puzzle input: a comma-separated draw line, then blank-line separated boards."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Tuple

from .core import Board, DrawSequence
from .errors import ParseError

NUMBER_RE = re.compile(r"[0-9]+")


def _parse_int(token: str, *, line_no: int, line: str) -> int:
    # unsigned ASCII decimal only
    if not NUMBER_RE.fullmatch(token):
        raise ParseError(f"not an integer: {token!r}", line_no=line_no, line=line)
    return int(token)


def parse_draws(line: str, *, line_no: int = 1) -> DrawSequence:
    tokens = [t.strip() for t in line.split(",")]
    if not line.strip() or any(t == "" for t in tokens):
        raise ParseError("malformed draw sequence", line_no=line_no, line=line)
    return DrawSequence(_parse_int(t, line_no=line_no, line=line) for t in tokens)


def _build_board(block: List[Tuple[int, str]]) -> Board:
    rows: List[List[int]] = []
    width = None
    for line_no, line in block:
        row = [_parse_int(tok, line_no=line_no, line=line) for tok in line.split()]
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise ParseError(
                f"ragged board row: {len(row)} values, expected {width}",
                line_no=line_no,
                line=line,
            )
        rows.append(row)
    return Board.from_rows(rows)


def parse_input(text: str) -> Tuple[DrawSequence, List[Board]]:
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ParseError("missing draw sequence", line_no=1)
    draws = parse_draws(lines[0], line_no=1)

    boards: List[Board] = []
    block: List[Tuple[int, str]] = []
    for line_no, raw in enumerate(lines[1:], start=2):
        line = raw.strip()
        if line:
            block.append((line_no, line))
            continue
        if block:
            boards.append(_build_board(block))
            block = []
    if block:
        boards.append(_build_board(block))

    if not boards:
        raise ParseError("no boards found after draw sequence", line_no=len(lines))
    return draws, boards


def load_input(path: Path) -> Tuple[DrawSequence, List[Board]]:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return parse_input(path.read_text(encoding="utf-8-sig"))
