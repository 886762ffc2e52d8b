"""Mapping from element values to bottom-up glyph towers."""

from __future__ import annotations

import math

BLANK = " "
FULL = "█"
_EIGHTHS = (BLANK, "▁", "▂", "▃", "▄", "▅", "▆", "▇", FULL)

MAX_UNITS_PER_ROW = 8


def stack_height(max_value: int, units_per_row: int) -> int:
    """Rows needed to draw the tallest stack."""
    return max(1, math.ceil(max_value / units_per_row))


def partial_glyph(remainder: int, units_per_row: int) -> str:
    """Glyph for a row holding ``remainder`` of ``units_per_row`` units."""
    if not 0 <= remainder < units_per_row:
        raise ValueError(f"remainder {remainder} outside 0..{units_per_row - 1}")
    return _EIGHTHS[remainder * 8 // units_per_row]


def stack_glyphs(value: int, rows: int, units_per_row: int) -> list[str]:
    """Return ``rows`` glyphs for ``value``, bottom row first.

    Rows above the tower are blank so a shorter stack fully replaces a
    taller one drawn at the same column.
    """
    if not 1 <= units_per_row <= MAX_UNITS_PER_ROW:
        raise ValueError(f"units_per_row must be 1..{MAX_UNITS_PER_ROW}")
    full, remainder = divmod(max(0, value), units_per_row)
    glyphs = [FULL] * full
    if remainder:
        glyphs.append(partial_glyph(remainder, units_per_row))
    glyphs = glyphs[:rows]
    glyphs.extend(BLANK for _ in range(rows - len(glyphs)))
    return glyphs
