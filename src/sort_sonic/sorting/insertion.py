"""Insertion sort."""

from __future__ import annotations

from typing import MutableSequence, Optional

from sort_sonic.visualization.host import NULL_CONTEXT, Highlight, VizContext


def insertion_sort(
    sequence: MutableSequence[int], ctx: Optional[VizContext] = None
) -> None:
    """Sort ``sequence`` in place, showing every shift when ``ctx`` is given."""
    ctx = ctx or NULL_CONTEXT
    n = len(sequence)
    for i in range(1, n):
        x = sequence[i]
        j = i - 1
        while j >= 0 and sequence[j] > x:
            # Shift by swapping so the list stays a permutation between steps.
            sequence[j], sequence[j + 1] = x, sequence[j]
            ctx.draw(j + 1, sequence[j + 1], Highlight.ACCENT)
            ctx.sonify(sequence[j + 1])
            if j + 2 < n:
                ctx.draw(j + 2, sequence[j + 2], Highlight.NEUTRAL)
            ctx.pause()
            j -= 1
        ctx.draw_sequence(sequence)
