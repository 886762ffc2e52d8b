"""The concrete sink that draws and sounds every sorting step."""

from __future__ import annotations

from typing import Protocol, Sequence

from sort_sonic.visualization.host import Highlight


class ColumnRenderer(Protocol):
    def draw_column(self, column: int, value: int, highlight: Highlight) -> None: ...

    def draw_sequence(self, sequence: Sequence[int]) -> None: ...


class Sonifier(Protocol):
    def sonify(self, value: int) -> None: ...


class Visualizer:
    """Bind a renderer and a sonifier into one step sink."""

    def __init__(self, renderer: ColumnRenderer, sonifier: Sonifier) -> None:
        self._renderer = renderer
        self._sonifier = sonifier

    def draw_column(self, column: int, value: int, highlight: Highlight) -> None:
        self._renderer.draw_column(column, value, highlight)

    def draw_sequence(self, sequence: Sequence[int]) -> None:
        self._renderer.draw_sequence(sequence)

    def sonify(self, value: int) -> None:
        self._sonifier.sonify(value)
