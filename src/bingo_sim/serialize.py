from __future__ import annotations

import json
import platform
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .core import Board, DrawSequence, Win
from .fingerprint import boards_hash, draws_hash
from .verify import verify_input


def ensure_parent(path: Path, *, mkdirs: bool) -> None:
    parent = path.parent
    if not parent.exists() and mkdirs:
        parent.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, data: object, *, mkdirs: bool, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(
            f"Refusing to overwrite existing file without --force: {path}"
        )
    ensure_parent(path, mkdirs=mkdirs)
    text = json.dumps(data, ensure_ascii=True, sort_keys=True, indent=2)
    path.write_text(text + "\n", encoding="utf-8")


def build_run_meta(*, app_version: str, input_path: str, params_hash: str) -> Dict[str, object]:
    return {
        "app_version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": sys.version.split()[0],
        "platform": platform.system().lower(),
        "input_path": input_path,
        "params_hash": params_hash,
        "hash_algorithm": "sha256",
    }


def win_to_dict(win: Optional[Win]) -> Optional[Dict[str, int]]:
    if win is None:
        return None
    return {
        "board_index": win.board_index,
        "draw_index": win.draw_index,
        "value": win.value,
        "unmarked_sum": win.unmarked_sum,
        "score": win.score,
    }


def build_report(
    *,
    run_meta: Dict[str, object],
    draws: DrawSequence,
    boards: Sequence[Board],
    first: Optional[Win],
    last: Optional[Win],
    winners: List[Win],
) -> Dict[str, object]:
    return {
        "run_meta": run_meta,
        "input": {
            "draws_hash": draws_hash(draws),
            "boards_hash": boards_hash(boards),
        },
        "answers": {
            "first_winner": win_to_dict(first),
            "last_winner": win_to_dict(last),
        },
        "win_order": [win_to_dict(w) for w in winners],
        "checks": verify_input(draws, boards),
    }


def emit_report_json(
    path: Path, *, report: Dict[str, object], mkdirs: bool, overwrite: bool
) -> None:
    write_json(path, report, mkdirs=mkdirs, overwrite=overwrite)
