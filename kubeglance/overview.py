"""Text shown in the overview: banner, logo, metric gauges and help rows."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")

BANNER = r"""  _  ______            _
 | |/ /  _ \  __ _ ___| |__
 | ' /| | | |/ _` / __| '_ \
 | . \| |_| | (_| \__ \ | | |
 |_|\_\____/ \__,_|___/_| |_|
"""

HIGHLIGHT = "=> "
HELP_HEADER = ("Key", "Action", "Context")
HELP_COLUMN_WIDTHS = (50, 40, 20)
LOADING_INDICATOR = "..."


def get_nm_ratio(node_metrics: Iterable[T], selector: Callable[[T], float]) -> float:
    """Average of a percentage across node metrics, as a ratio from 0 upwards."""
    values = [selector(metric) for metric in node_metrics]
    if not values:
        return 0.0
    return (sum(values) / len(values)) / 100.0


def nw_loading_indicator(loading: bool) -> str:
    """Marker shown while network calls are in flight."""
    return LOADING_INDICATOR if loading else ""


def logo_text(version: str, loading: bool) -> str:
    """The banner with the version line and a loading marker."""
    return f"{BANNER}\n v{version} with ♥ in Python {nw_loading_indicator(loading)}"


def format_help_row(row: Sequence[str]) -> str:
    """One help table line: key, action and context in fixed-width columns."""
    if len(row) < len(HELP_COLUMN_WIDTHS):
        raise ValueError(
            f"a help row needs {len(HELP_COLUMN_WIDTHS)} columns, got {len(row)}"
        )
    return "".join(
        cell.ljust(width) for cell, width in zip(row, HELP_COLUMN_WIDTHS)
    )