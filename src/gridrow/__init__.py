from __future__ import annotations

from .api import parse_file, parse_lines
from .errors import (
    EmptyInputError,
    InvalidSymbolError,
    LeadingContinuationError,
    RowParseError,
    TrailingContinuationError,
    UnexpectedSymbolError,
)
from .format import format_row, format_segments
from .rowparser import RowSpec, Segment, parse_row
from .spans import Span
from .symbols import Symbol, classify

__all__ = [
    "EmptyInputError",
    "InvalidSymbolError",
    "LeadingContinuationError",
    "RowParseError",
    "RowSpec",
    "Segment",
    "Span",
    "Symbol",
    "TrailingContinuationError",
    "UnexpectedSymbolError",
    "classify",
    "format_row",
    "format_segments",
    "parse_file",
    "parse_lines",
    "parse_row",
]
