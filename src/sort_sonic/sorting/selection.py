"""Selection sort."""

from __future__ import annotations

from typing import MutableSequence, Optional

from sort_sonic.visualization.host import NULL_CONTEXT, Highlight, VizContext


def selection_sort(
    sequence: MutableSequence[int], ctx: Optional[VizContext] = None
) -> None:
    """Sort ``sequence`` in place, showing the scan for each minimum."""
    ctx = ctx or NULL_CONTEXT
    n = len(sequence)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if sequence[j] < sequence[min_index]:
                min_index = j
            ctx.draw(j - 1, sequence[j - 1], Highlight.NEUTRAL)
            ctx.draw(j, sequence[j], Highlight.ACCENT)
            ctx.sonify(sequence[j])
            ctx.pause()
        if min_index != i:
            sequence[i], sequence[min_index] = sequence[min_index], sequence[i]
        ctx.draw_sequence(sequence)
