"""Pytest configuration for SortSonic."""

from __future__ import annotations

import os
from typing import Sequence

import pytest

from sort_sonic.visualization.host import Highlight


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    del config
    if os.environ.get("SORT_SONIC_CI") != "1":
        return
    skip_audio = pytest.mark.skip(reason="Skipping audio-device tests in CI.")
    for item in items:
        if "audio" in item.keywords:
            item.add_marker(skip_audio)


class RecordingSink:
    """Step sink that records every event in order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def draw_column(self, column: int, value: int, highlight: Highlight) -> None:
        self.events.append(("draw", column, value, highlight))

    def draw_sequence(self, sequence: Sequence[int]) -> None:
        self.events.append(("full", tuple(sequence)))

    def sonify(self, value: int) -> None:
        self.events.append(("tone", value))

    def of_kind(self, kind: str) -> list[tuple]:
        return [event for event in self.events if event[0] == kind]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
