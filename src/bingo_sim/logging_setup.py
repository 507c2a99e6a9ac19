from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "ts": self.formatTime(record),
                "level": record.levelname,
                "logger": record.name,
                "msg": record.getMessage(),
            },
            ensure_ascii=True,
        )


COLOR_MODES = ("auto", "always", "never")


def _console(colors: str) -> Console:
    mode = (colors or "auto").strip().lower()
    if mode not in COLOR_MODES:
        raise ValueError(f"colors must be one of {'|'.join(COLOR_MODES)}, got {colors!r}")
    if mode == "never":
        return Console(stderr=True, no_color=True, color_system=None)
    if mode == "always":
        return Console(stderr=True, force_terminal=True)
    return Console(stderr=True)


def setup_logging(
    *,
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    colors: str = "auto",
) -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    handlers: List[logging.Handler] = [
        RichHandler(
            console=_console(colors),
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            markup=False,
        )
    ]
    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)
        file_handler.setLevel(lvl)
        if json_format:
            file_handler.setFormatter(JsonLineFormatter())
        else:
            file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        handlers.append(file_handler)
    logging.basicConfig(level=lvl, handlers=handlers, force=True)
