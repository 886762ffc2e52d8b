"""Top-down merge sort."""

from __future__ import annotations

from collections import deque
from typing import MutableSequence, Optional

from sort_sonic.visualization.host import NULL_CONTEXT, Highlight, VizContext


def merge_sort(
    sequence: MutableSequence[int], ctx: Optional[VizContext] = None
) -> None:
    """Sort ``sequence`` in place.

    Each half is sorted as its own list. The right half gets a context
    shifted by the left half's length, so its local index 0 is drawn at the
    right screen column.
    """
    ctx = ctx or NULL_CONTEXT
    n = len(sequence)
    if n <= 1:
        return
    mid = n // 2
    left = list(sequence[:mid])
    right = list(sequence[mid:])
    merge_sort(left, ctx)
    merge_sort(right, ctx.with_offset(mid))
    _merge(left, right, sequence, ctx)


def _merge(
    left: list[int],
    right: list[int],
    out: MutableSequence[int],
    ctx: VizContext,
) -> None:
    lq = deque(left)
    rq = deque(right)
    index = 0
    while lq and rq:
        out[index] = lq.popleft() if lq[0] <= rq[0] else rq.popleft()
        _emit(out, index, ctx)
        index += 1
    for rest in (lq, rq):
        while rest:
            out[index] = rest.popleft()
            _emit(out, index, ctx)
            index += 1
    # The last write is still accent-colored.
    ctx.draw(index - 1, out[index - 1], Highlight.NEUTRAL)


def _emit(out: MutableSequence[int], index: int, ctx: VizContext) -> None:
    ctx.draw(index, out[index], Highlight.ACCENT)
    if index > 0:
        ctx.draw(index - 1, out[index - 1], Highlight.NEUTRAL)
    ctx.sonify(out[index])
    ctx.pause()
