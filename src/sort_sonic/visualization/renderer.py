"""Position-addressed stack renderer built on rich."""

from __future__ import annotations

import logging
from typing import Sequence

from rich.console import Console
from rich.control import Control
from rich.style import Style

from sort_sonic.errors import DisplayUnavailableError, RenderError
from sort_sonic.visualization.glyphs import stack_glyphs, stack_height
from sort_sonic.visualization.host import Highlight

logger = logging.getLogger(__name__)


class StackRenderer:
    """Draw elements as colored glyph towers, one column at a time.

    Nothing is buffered between calls: each draw moves the cursor to the
    column and overwrites its rows, leaving every other column untouched.
    """

    def __init__(
        self,
        console: Console,
        *,
        elements: int,
        units_per_row: int = 4,
        base_color: str = "white",
        accent_color: str = "red",
        border: int = 1,
    ) -> None:
        self._console = console
        self._elements = elements
        self._units_per_row = units_per_row
        self._border = border
        self._rows = stack_height(elements, units_per_row)
        self._styles = {
            Highlight.NEUTRAL: Style(color=base_color),
            Highlight.ACCENT: Style(color=accent_color),
        }

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def required_size(self) -> tuple[int, int]:
        """Minimum (width, height) of the terminal, borders included."""
        return (
            self._elements + 2 * self._border,
            self._rows + 2 * self._border,
        )

    def ensure_surface(self) -> None:
        if not self._console.is_terminal:
            raise DisplayUnavailableError("Output is not a terminal")
        width, height = self._console.size
        need_w, need_h = self.required_size
        if width < need_w or height < need_h:
            raise DisplayUnavailableError(
                f"Terminal is {width}x{height}, need at least {need_w}x{need_h}"
            )

    def draw_column(self, column: int, value: int, highlight: Highlight) -> None:
        x = column + self._border
        bottom = self._border + self._rows - 1
        style = self._styles[highlight]
        glyphs = stack_glyphs(value, self._rows, self._units_per_row)
        try:
            with self._console:
                for row, glyph in enumerate(glyphs):
                    self._console.control(Control.move_to(x, bottom - row))
                    self._console.out(glyph, style=style, end="", highlight=False)
        except OSError as exc:
            logger.exception("Failed drawing column %s", column)
            raise RenderError(f"Failed writing to terminal: {exc}") from exc

    def draw_sequence(self, sequence: Sequence[int]) -> None:
        """Redraw every column in the base color."""
        for column, value in enumerate(sequence):
            self.draw_column(column, value, Highlight.NEUTRAL)

    def park_cursor(self) -> None:
        """Move the cursor to the first row below the stacks."""
        try:
            self._console.control(Control.move_to(0, self._rows + 2 * self._border))
        except OSError as exc:
            raise RenderError(f"Failed writing to terminal: {exc}") from exc
