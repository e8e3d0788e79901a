from __future__ import annotations

from dataclasses import dataclass

from .spans import Span
from .symbols import Symbol


@dataclass(slots=True)
class RowParseError(Exception):
    span: Span
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.span.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


class EmptyInputError(RowParseError):
    pass


@dataclass(slots=True)
class InvalidSymbolError(RowParseError):
    char: str = ""


class LeadingContinuationError(RowParseError):
    pass


class TrailingContinuationError(RowParseError):
    pass


@dataclass(slots=True)
class UnexpectedSymbolError(RowParseError):
    previous: Symbol | None = None
    current: Symbol | None = None
