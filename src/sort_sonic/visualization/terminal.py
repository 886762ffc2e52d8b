"""Scoped terminal state for a visualized run."""

from __future__ import annotations

from contextlib import contextmanager
import logging
import sys
from typing import Any, Iterator, Optional, TextIO

from rich.console import Console

from sort_sonic.logging_setup import get_console_level, set_console_level

logger = logging.getLogger(__name__)

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - Windows
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]


def _enter_cbreak(stream: TextIO) -> Optional[list[Any]]:
    """Disable echo and line buffering on a POSIX TTY; return saved attrs."""
    if termios is None or tty is None:
        return None
    try:
        if not stream.isatty():
            return None
        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
    except (OSError, ValueError, termios.error):
        logger.debug("cbreak mode unavailable", exc_info=True)
        return None
    return saved


def _restore(stream: TextIO, saved: Optional[list[Any]]) -> None:
    if saved is None or termios is None:
        return
    try:
        termios.tcsetattr(stream.fileno(), termios.TCSADRAIN, saved)
    except (OSError, ValueError, termios.error):
        logger.exception("Failed to restore terminal mode")


@contextmanager
def terminal_session(
    console: Console, stdin: Optional[TextIO] = None
) -> Iterator[Console]:
    """Hide the cursor, clear the screen and silence console logging.

    Everything is restored on exit, whether the block finishes or raises.
    """
    stream = stdin if stdin is not None else sys.stdin
    saved_level = get_console_level()
    set_console_level(logging.CRITICAL + 1)
    saved_attrs = _enter_cbreak(stream)
    try:
        console.show_cursor(False)
        console.clear()
        yield console
    finally:
        try:
            console.show_cursor(True)
        except OSError:
            logger.exception("Failed to restore cursor")
        _restore(stream, saved_attrs)
        set_console_level(saved_level)
