from __future__ import annotations

import random


def _cell(r: random.Random, *, max_span: int) -> str:
    return "x" + "-x" * (r.randint(1, max_span) - 1)


def _gen_one(r: random.Random, *, max_cells: int, max_span: int, max_gap: int) -> str:
    parts: list[str] = []
    if r.random() < 0.25:
        parts.append(" " * r.randint(1, max_gap))
    for i in range(r.randint(1, max_cells)):
        if i:
            # At least one blank separates neighbouring cells.
            parts.append(" " * r.randint(1, max_gap))
        parts.append(_cell(r, max_span=max_span))
    if r.random() < 0.1:
        parts.append(" " * r.randint(1, max_gap))
    return "".join(parts)


def generate_rows(
    *,
    seed: int,
    count: int,
    max_cells: int = 8,
    max_span: int = 6,
    max_gap: int = 5,
) -> list[str]:
    """Generate a deterministic list of well-formed row specifications.

    Rows may start or end with blanks; none is empty.
    """
    r = random.Random(seed)
    return [
        _gen_one(r, max_cells=max_cells, max_span=max_span, max_gap=max_gap)
        for _ in range(count)
    ]


def corrupt_row(row: str, *, seed: int) -> str:
    """Replace one character of ``row`` with a symbol outside the row alphabet."""
    r = random.Random(seed)
    i = r.randrange(len(row))
    return row[:i] + r.choice("?.o|#_X\t") + row[i + 1 :]
