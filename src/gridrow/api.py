from __future__ import annotations

import logging
from pathlib import Path

from .rowparser import RowSpec, parse_row

logger = logging.getLogger(__name__)


def parse_lines(text: str, *, file: str = "<memory>") -> tuple[RowSpec, ...]:
    """Parse every line of ``text`` as an independent row.

    Lines end only at a line feed (a carriage return right before it is
    dropped); every other character stays in the row. Spaces are kept
    as-is and fully empty lines are skipped. Errors name ``file`` and the
    1-based line number.
    """
    rows: list[RowSpec] = []
    for lineno, raw in enumerate(text.split("\n"), start=1):
        raw = raw.removesuffix("\r")
        if not raw:
            continue
        spec = parse_row(raw, source=file, line=lineno)
        logger.debug("%s:%d: %d segment(s)", file, lineno, len(spec))
        rows.append(spec)
    return tuple(rows)


def parse_file(path: str | Path) -> tuple[RowSpec, ...]:
    p = Path(path).expanduser().resolve()
    src = p.read_text(encoding="utf-8")
    return parse_lines(src, file=str(p))
