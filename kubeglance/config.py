"""Command line settings for the dashboard."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

from .overview import BANNER

DEFAULT_TICK_RATE = 250
DEFAULT_POLL_RATE = 5000
MAX_TICK_RATE = 1000
USAGE = "Press `?` while running the app to see keybindings"


@dataclass(frozen=True)
class Settings:
    """Validated settings; rates are in milliseconds."""

    tick_rate: int = DEFAULT_TICK_RATE
    poll_rate: int = DEFAULT_POLL_RATE
    enhanced_graphics: bool = True

    def __post_init__(self) -> None:
        if self.tick_rate >= MAX_TICK_RATE:
            raise ValueError("Tick rate must be below 1000")
        if self.tick_rate <= 0:
            raise ValueError("Tick rate must be above 0")
        if self.poll_rate % self.tick_rate > 0:
            raise ValueError("Poll rate must be multiple of tick-rate")

    @property
    def ticks_per_poll(self) -> int:
        """Number of ticks between two rounds of network calls."""
        return self.poll_rate // self.tick_rate


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _boolean(text: str) -> bool:
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {text!r}")


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the dashboard command."""
    parser = argparse.ArgumentParser(
        usage=USAGE,
        description=BANNER,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-t",
        "--tick-rate",
        type=_non_negative_int,
        default=DEFAULT_TICK_RATE,
        help="Set the tick rate (milliseconds): the lower the number the higher the FPS.",
    )
    parser.add_argument(
        "-p",
        "--poll-rate",
        type=_non_negative_int,
        default=DEFAULT_POLL_RATE,
        help=(
            "Set the network call polling rate (milliseconds, should be multiples "
            "of tick-rate): the lower the number the higher the network calls."
        ),
    )
    parser.add_argument(
        "-e",
        "--enhanced-graphics",
        type=_boolean,
        nargs="?",
        const=True,
        default=True,
        help="whether unicode symbols are used to improve the overall look of the app",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    """Parse and validate command line arguments.

    Malformed arguments exit through the parser; inconsistent rates raise ``ValueError``.
    """
    namespace = build_parser().parse_args(argv)
    return Settings(
        tick_rate=namespace.tick_rate,
        poll_rate=namespace.poll_rate,
        enhanced_graphics=namespace.enhanced_graphics,
    )