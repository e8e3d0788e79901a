from __future__ import annotations

from .corpus import corrupt_row, generate_rows

__all__ = ["corrupt_row", "generate_rows"]
