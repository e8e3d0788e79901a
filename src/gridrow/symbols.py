from __future__ import annotations

from enum import Enum


class Symbol(str, Enum):
    OCCUPIED = "x"
    BLANK = " "
    CONTINUATION = "-"

    # Never produced by a real character.
    INVALID = ""

    @property
    def label(self) -> str:
        return self.name.lower()


_BY_CHAR: dict[str, Symbol] = {s.value: s for s in Symbol if s is not Symbol.INVALID}


def classify(ch: str) -> Symbol:
    return _BY_CHAR.get(ch, Symbol.INVALID)


def symbol_at(row: str, index: int) -> Symbol:
    """Classify the character at ``index``; out-of-range reads as INVALID."""
    if 0 <= index < len(row):
        return classify(row[index])
    return Symbol.INVALID
