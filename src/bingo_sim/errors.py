from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Raised when puzzle input cannot be turned into draws and boards."""

    def __init__(self, reason: str, *, line_no: Optional[int] = None, line: Optional[str] = None):
        self.reason = reason
        self.line_no = line_no
        self.line = line
        prefix = f"line {line_no}: " if line_no is not None else ""
        suffix = f" ({line!r})" if line is not None else ""
        super().__init__(f"{prefix}{reason}{suffix}")
