"""Cocktail shaker sort."""

from __future__ import annotations

from typing import MutableSequence, Optional

from sort_sonic.visualization.host import NULL_CONTEXT, Highlight, VizContext


def cocktail_sort(
    sequence: MutableSequence[int], ctx: Optional[VizContext] = None
) -> None:
    """Bidirectional bubble sort over a shrinking ``[lower, upper]`` window.

    After each pass the bound moves to the index of the last swap, so a
    pass without swaps collapses the window and ends the sort.
    """
    ctx = ctx or NULL_CONTEXT
    lower = 0
    upper = len(sequence) - 1
    while lower <= upper:
        last_swap = lower
        for i in range(lower, upper):
            if sequence[i] > sequence[i + 1]:
                sequence[i], sequence[i + 1] = sequence[i + 1], sequence[i]
                last_swap = i
            ctx.draw(i + 1, sequence[i + 1], Highlight.ACCENT)
            ctx.sonify(sequence[i + 1])
            ctx.draw(i, sequence[i], Highlight.NEUTRAL)
            ctx.pause()
        upper = last_swap
        ctx.draw_sequence(sequence)

        last_swap = upper
        for i in range(upper - 1, lower - 1, -1):
            if sequence[i] > sequence[i + 1]:
                sequence[i], sequence[i + 1] = sequence[i + 1], sequence[i]
                last_swap = i
            ctx.draw(i, sequence[i], Highlight.ACCENT)
            ctx.sonify(sequence[i])
            ctx.draw(i + 1, sequence[i + 1], Highlight.NEUTRAL)
            ctx.pause()
        lower = last_swap + 1
        ctx.draw_sequence(sequence)
