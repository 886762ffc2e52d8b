"""Error types for SortSonic."""

from __future__ import annotations


class SortSonicError(Exception):
    """Base class for all SortSonic errors."""


class DeviceError(SortSonicError):
    """A display or audio capability failed; the run cannot continue."""


class DisplayUnavailableError(DeviceError):
    """The terminal is missing or too small to draw every stack."""


class AudioUnavailableError(DeviceError):
    """No audio backend or output device could be opened."""


class RenderError(DeviceError):
    """Writing a stack to the terminal failed."""


class SonifyError(DeviceError):
    """Starting a tone on the audio device failed."""


class InvalidChoiceError(SortSonicError):
    """The algorithm selection does not name a known algorithm."""

    def __init__(self, choice: str) -> None:
        super().__init__(f"Invalid choice: {choice!r}")
        self.choice = choice
