from __future__ import annotations

from collections.abc import Iterable
from fractions import Fraction

from .rowparser import Segment
from .symbols import Symbol


def _blank_units(offset: Fraction) -> int:
    units = Fraction(offset) * 2
    if units < 0 or units.denominator != 1:
        raise ValueError(f"offset must be a non-negative multiple of 1/2, got {offset!r}")
    return int(units)


def _cell(span: int) -> str:
    if span < 1:
        raise ValueError(f"span must be at least 1, got {span!r}")
    link = Symbol.CONTINUATION.value + Symbol.OCCUPIED.value
    return Symbol.OCCUPIED.value + link * (span - 1)


def format_row(segments: Iterable[Segment]) -> str:
    """Render segments as the canonical row string that parses back to them.

    The first blank after a cell is a separator and carries no offset, so every
    segment but the first gets one extra blank in front.
    """
    parts: list[str] = []
    for i, seg in enumerate(segments):
        blanks = _blank_units(seg.offset)
        if i > 0:
            blanks += 1
        parts.append(Symbol.BLANK.value * blanks)
        parts.append(_cell(seg.span))
    return "".join(parts)


def offset_text(offset: Fraction) -> str:
    """Exact decimal text of a half-unit offset: "0", "1.5", ..."""
    whole, half = divmod(_blank_units(offset), 2)
    return f"{whole}.5" if half else str(whole)


def format_segments(segments: Iterable[Segment]) -> str:
    # Listing style used in the docs: "(1 0) (2 1)".
    return " ".join(f"({s.span} {offset_text(s.offset)})" for s in segments)
