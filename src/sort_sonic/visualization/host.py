"""Visualization host types shared by every sorting engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import time
from typing import Protocol, Sequence


class Highlight(Enum):
    NEUTRAL = "neutral"
    ACCENT = "accent"


class StepSink(Protocol):
    """Something that can show one column and sound one value."""

    def draw_column(self, column: int, value: int, highlight: Highlight) -> None: ...

    def draw_sequence(self, sequence: Sequence[int]) -> None: ...

    def sonify(self, value: int) -> None: ...


class NullSink:
    """Sink that ignores every event; used when a sort runs unobserved."""

    def draw_column(self, column: int, value: int, highlight: Highlight) -> None:
        pass

    def draw_sequence(self, sequence: Sequence[int]) -> None:
        pass

    def sonify(self, value: int) -> None:
        pass


@dataclass(frozen=True)
class VizContext:
    """Sink handle plus the screen column where local index 0 lives.

    Contexts are never mutated. Recursive sorts derive a child context with
    :meth:`with_offset`, so sibling branches each carry their own offset
    while sharing the same sink.
    """

    sink: StepSink
    delay: float = 0.0
    offset: int = 0

    def with_offset(self, delta: int) -> "VizContext":
        """Return a copy whose offset is shifted right by ``delta`` columns."""
        return replace(self, offset=self.offset + delta)

    def draw(self, index: int, value: int, highlight: Highlight) -> None:
        self.sink.draw_column(self.offset + index, value, highlight)

    def draw_sequence(self, sequence: Sequence[int]) -> None:
        self.sink.draw_sequence(sequence)

    def sonify(self, value: int) -> None:
        self.sink.sonify(value)

    def pause(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)


NULL_CONTEXT = VizContext(NullSink())
