"""Formatting and color helpers for displaying probabilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from services.draw_odds_service import DrawDistribution, DrawOddsSummary

SUMMARY_FIELDS = ("whiff", "exactly_one", "at_least_one", "two_or_more", "whiff_twice")

SUMMARY_TITLES = {
    "whiff": "Whiff (0 hits)",
    "exactly_one": "Exactly 1",
    "at_least_one": "At least 1",
    "two_or_more": "2 or more",
    "whiff_twice": "Whiff twice (mulligan)",
}

EMPTY_VALUE = "-"


@dataclass(frozen=True)
class ChartBar:
    successes: int
    probability: float
    label: str
    height_percent: float
    color: tuple[int, int, int]


def format_percent(value: float | None, decimals: int = 2) -> str:
    """Format a probability as a percentage, or "-" when there is nothing to show."""
    if value is None or math.isnan(value) or math.isinf(value):
        return EMPTY_VALUE
    return f"{value * 100:.{decimals}f}%"


def round_half_up(value: float) -> int:
    """Round halves upward; the built-in round() sends them to the nearest even integer."""
    return math.floor(value + 0.5)


def probability_color(probability: float) -> tuple[int, int, int]:
    """Map a probability onto the red (0%) -> yellow (50%) -> green (100%) gradient."""
    p = max(0.0, min(1.0, probability))
    if p < 0.5:
        t = p * 2
        return (255, round_half_up(200 * t), 50)
    t = (p - 0.5) * 2
    return (
        round_half_up(255 * (1 - t)),
        round_half_up(200 + 55 * t),
        round_half_up(50 + 50 * t),
    )


def bar_height_percent(value: float, max_value: float) -> float:
    if max_value <= 0:
        return 0.0
    return value / max_value * 100


def build_chart_bars(distribution: DrawDistribution | None) -> list[ChartBar]:
    """Turn a distribution into bar descriptions, one per success count."""
    if distribution is None:
        return []
    return [
        ChartBar(
            successes=k,
            probability=p,
            label=format_percent(p, decimals=1),
            height_percent=bar_height_percent(p, distribution.max_value),
            color=probability_color(p),
        )
        for k, p in enumerate(distribution.values)
    ]


def summary_labels(summary: DrawOddsSummary | None) -> dict[str, str]:
    """Return display text for each summary statistic, all "-" when cleared."""
    if summary is None:
        return {name: EMPTY_VALUE for name in SUMMARY_FIELDS}
    return {name: format_percent(getattr(summary, name)) for name in SUMMARY_FIELDS}
