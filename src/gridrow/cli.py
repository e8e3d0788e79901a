from __future__ import annotations

import argparse
import logging
import sys

from .api import parse_file
from .errors import RowParseError
from .format import format_segments, offset_text
from .rowparser import RowSpec, parse_row
from .symbols import Symbol

logger = logging.getLogger(__name__)

_ROW_CHARS = frozenset(s.value for s in Symbol if s is not Symbol.INVALID)
_VALUE_OPTIONS = ("-f", "--file")


def _is_row(arg: str) -> bool:
    return arg != "--" and set(arg) <= _ROW_CHARS


def _rows_last(argv: list[str]) -> list[str]:
    # "-x" or "--x" would otherwise be taken for options; hand every row to
    # argparse after "--" while keeping the rows in their given order.
    opts: list[str] = []
    rows: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            rows.extend(argv[i + 1 :])
            break
        if arg in _VALUE_OPTIONS:
            opts.extend(argv[i : i + 2])
            i += 2
            continue
        if arg.startswith("-") and not _is_row(arg):
            opts.append(arg)
        else:
            rows.append(arg)
        i += 1
    return opts + ["--"] + rows if rows else opts


def _to_json(spec: RowSpec) -> str:
    # Offsets are written from their exact text; floats would round large halves.
    return "[" + ", ".join(f"[{s.span}, {offset_text(s.offset)}]" for s in spec) + "]"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="gridrow", description="Parse grid row specifications")
    ap.add_argument(
        "rows",
        nargs="*",
        help="Row strings, e.g. 'x-x x' (quote them to keep spaces); rows may start with '-'",
    )
    ap.add_argument("-f", "--file", help="Read one row per line from this file")
    ap.add_argument("--json", action="store_true", help="Print segments as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(_rows_last(sys.argv[1:] if argv is None else list(argv)))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.rows and args.file is None:
        ap.error("give at least one row or --file")

    try:
        specs = [parse_row(r, source="<arg>", line=i) for i, r in enumerate(args.rows, start=1)]
        if args.file is not None:
            specs.extend(parse_file(args.file))
    except RowParseError as e:
        logger.debug("parse failed: %s", type(e).__name__)
        print(str(e), file=sys.stderr)
        return 1

    if args.json:
        print("[" + ", ".join(_to_json(s) for s in specs) + "]")
    else:
        for s in specs:
            print(format_segments(s))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
