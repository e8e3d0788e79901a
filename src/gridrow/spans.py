from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open column range [start, end) on one line of a row source.

    Columns are 1-based for user-facing messages.
    """

    source: str
    line: int
    start: int
    end: int

    @classmethod
    def at(cls, index: int, *, source: str = "<row>", line: int = 1) -> "Span":
        """Span covering the single character at 0-based ``index``."""
        return cls(source=source, line=line, start=index + 1, end=index + 2)

    def format(self) -> str:
        return f"{self.source}:{self.line}:{self.start}"
