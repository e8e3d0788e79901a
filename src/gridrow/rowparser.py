from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .errors import (
    EmptyInputError,
    InvalidSymbolError,
    LeadingContinuationError,
    TrailingContinuationError,
    UnexpectedSymbolError,
)
from .spans import Span
from .symbols import Symbol, symbol_at


@dataclass(frozen=True, slots=True)
class Segment:
    """One grid cell: how many units it spans and the gap before it.

    ``offset`` is measured in half-units, so it is always a multiple of 1/2.
    """

    span: int
    offset: Fraction


RowSpec = tuple[Segment, ...]

_VALID = "x, '-' or ' '"


def parse_row(row: str, *, source: str = "<row>", line: int = 1) -> RowSpec:
    """Parse one row specification into its segments.

    ``source`` and ``line`` only label error locations.
    """

    def at(index: int) -> Span:
        return Span.at(index, source=source, line=line)

    def invalid(index: int) -> InvalidSymbolError:
        ch = row[index]
        return InvalidSymbolError(
            span=at(index),
            message=f"invalid symbol {ch!r}",
            hint=f"rows may only contain {_VALID}",
            char=ch,
        )

    if not row:
        raise EmptyInputError(
            span=Span(source=source, line=line, start=1, end=1),
            message="empty row specification",
            hint="a row needs at least one 'x' or ' '",
        )

    first = symbol_at(row, 0)
    if first is Symbol.OCCUPIED:
        span_acc, offset_acc = 1, 0
    elif first is Symbol.BLANK:
        span_acc, offset_acc = 0, 1
    elif first is Symbol.CONTINUATION:
        raise LeadingContinuationError(
            span=at(0),
            message="row starts with a continuation symbol",
            hint="a '-' must follow an 'x'",
        )
    else:
        raise invalid(0)

    out: list[Segment] = []
    previous = first
    for i in range(1, len(row)):
        current = symbol_at(row, i)
        if current is Symbol.INVALID:
            raise invalid(i)

        if previous is Symbol.OCCUPIED and current is Symbol.BLANK:
            out.append(Segment(span_acc, Fraction(offset_acc, 2)))
            span_acc, offset_acc = 0, 0
        elif previous is Symbol.OCCUPIED and current is Symbol.CONTINUATION:
            # Counted when the following 'x' arrives.
            pass
        elif previous is Symbol.BLANK and current is Symbol.BLANK:
            offset_acc += 1
        elif previous is Symbol.BLANK and current is Symbol.OCCUPIED:
            span_acc = 1
        elif previous is Symbol.CONTINUATION and current is Symbol.OCCUPIED:
            span_acc += 1
        else:
            raise UnexpectedSymbolError(
                span=at(i),
                message=f"unexpected {current.label} after {previous.label}",
                hint=_unexpected_hint(previous, current),
                previous=previous,
                current=current,
            )
        previous = current

    if previous is Symbol.CONTINUATION:
        raise TrailingContinuationError(
            span=at(len(row) - 1),
            message="row ends with a continuation symbol",
            hint="a '-' must be followed by an 'x'",
        )

    if span_acc > 0:
        out.append(Segment(span_acc, Fraction(offset_acc, 2)))
    return tuple(out)


def _unexpected_hint(previous: Symbol, current: Symbol) -> str | None:
    if previous is Symbol.OCCUPIED and current is Symbol.OCCUPIED:
        return "join cells with '-' (x-x) or separate them with ' ' (x x)"
    if current is Symbol.CONTINUATION:
        return "a '-' must directly follow an 'x'"
    if previous is Symbol.CONTINUATION:
        return "a '-' must be followed by an 'x'"
    return None
