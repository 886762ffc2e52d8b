"""Command-line interface for SortSonic."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Iterable, MutableSequence, Optional, TextIO

from rich.console import Console

from sort_sonic.config import SortConfig, load_config
from sort_sonic.errors import DeviceError, InvalidChoiceError
from sort_sonic.logging_setup import init_logging
from sort_sonic.sequence import create_random_sequence
from sort_sonic.sonifier import ToneSonifier
from sort_sonic.sorting.registry import Algorithm, menu_lines, resolve_algorithm
from sort_sonic.visualization.host import VizContext
from sort_sonic.visualization.renderer import StackRenderer
from sort_sonic.visualization.terminal import terminal_session
from sort_sonic.visualization.visualizer import Visualizer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DEVICE_ERROR = 1
EXIT_INVALID_CHOICE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="sort-sonic", description="Watch and hear sorting algorithms"
    )
    parser.add_argument(
        "--algorithm",
        default=None,
        help="Algorithm key or name; prompts with a menu when omitted",
    )
    parser.add_argument(
        "--elements",
        type=int,
        default=None,
        help="Number of elements to sort",
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help="Pause after each visualized step, in milliseconds",
    )
    return parser


def _prompt_choice(stdin: TextIO) -> str:
    for line in menu_lines():
        print(line)
    return stdin.readline()


def _build_renderer(console: Console, cfg: SortConfig) -> StackRenderer:
    renderer = StackRenderer(
        console,
        elements=cfg.elements,
        units_per_row=cfg.units_per_row,
        base_color=cfg.base_color,
        accent_color=cfg.accent_color,
    )
    renderer.ensure_surface()
    return renderer


def _build_sonifier(cfg: SortConfig) -> ToneSonifier:
    return ToneSonifier(
        scale_hz=cfg.tone_scale_hz,
        duration=cfg.tone_duration,
        sample_rate=cfg.sample_rate,
        volume=cfg.volume,
    )


def run_visualized(
    algorithm: Algorithm,
    sequence: MutableSequence[int],
    ctx: VizContext,
    renderer: StackRenderer,
    console: Console,
    stdin: Optional[TextIO] = None,
) -> float:
    """Sort ``sequence`` on screen and return the elapsed seconds."""
    with terminal_session(console, stdin):
        renderer.draw_sequence(sequence)
        started = time.monotonic()
        algorithm.sort(sequence, ctx)
        elapsed = time.monotonic() - started
        renderer.draw_sequence(sequence)
        renderer.park_cursor()
    return elapsed


def main(
    argv: Optional[Iterable[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    console: Optional[Console] = None,
) -> int:
    """Entry point for the CLI."""
    init_logging()
    logger.info("App start")

    def excepthook(exc_type, exc, tb) -> None:
        logger.exception("Uncaught exception", exc_info=(exc_type, exc, tb))

    sys.excepthook = excepthook

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    cfg = load_config().with_overrides(
        algorithm=args.algorithm,
        elements=args.elements,
        delay_ms=args.delay_ms,
    )
    stdin = stdin if stdin is not None else sys.stdin

    choice = cfg.algorithm if cfg.algorithm is not None else _prompt_choice(stdin)
    try:
        algorithm = resolve_algorithm(choice)
    except InvalidChoiceError as exc:
        logger.warning("%s", exc)
        print("Invalid choice, quitting...", file=sys.stderr)
        return EXIT_INVALID_CHOICE
    logger.info(
        "Sorting %s elements with %s (delay %sms)",
        cfg.elements,
        algorithm.name,
        cfg.delay_ms,
    )

    console = console if console is not None else Console(highlight=False)
    try:
        sonifier = _build_sonifier(cfg)
        renderer = _build_renderer(console, cfg)
    except DeviceError as exc:
        logger.error("Startup failed: %s", exc)
        print(str(exc), file=sys.stderr)
        return EXIT_DEVICE_ERROR

    sequence = create_random_sequence(cfg.elements)
    ctx = VizContext(Visualizer(renderer, sonifier), delay=cfg.delay)
    try:
        elapsed = run_visualized(
            algorithm, sequence, ctx, renderer, console, stdin
        )
    except DeviceError as exc:
        logger.error("Run aborted: %s", exc)
        print(str(exc), file=sys.stderr)
        return EXIT_DEVICE_ERROR
    finally:
        sonifier.close()
    logger.info("Sorted with %s in %.2fs", algorithm.name, elapsed)

    print("Press enter to exit...")
    stdin.readline()
    logger.info("App exit code=%s", EXIT_OK)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
