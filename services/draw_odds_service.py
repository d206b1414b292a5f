"""Draw odds for a deck after a number of turns."""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from utils.constants import CARDS_DRAWN_PER_TURN
from utils.math_utils import hypergeometric_distribution, hypergeometric_probability


@dataclass(frozen=True)
class DrawScenario:
    """Raw calculator inputs."""

    deck_size: int
    turns_elapsed: int
    sample_size: int
    targets: int


@dataclass(frozen=True)
class DrawOddsSummary:
    whiff: float
    exactly_one: float
    at_least_one: float
    two_or_more: float
    whiff_twice: float


@dataclass(frozen=True)
class DrawDistribution:
    """P(X = k) for k = 0..min(K, n); max_value only scales the chart."""

    values: list[float] = field(default_factory=list)
    max_value: float = 0.0


@dataclass(frozen=True)
class DrawOddsResult:
    remaining_deck: int
    turns_elapsed: int
    errors: list[str] = field(default_factory=list)
    summary: DrawOddsSummary | None = None
    distribution: DrawDistribution | None = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


def effective_deck_size(deck_size: int, turns_elapsed: int) -> int:
    """Return the cards left in the deck after the per-turn draws."""
    return deck_size - CARDS_DRAWN_PER_TURN * turns_elapsed


def validate_draw_inputs(
    deck_size: int,
    turns_elapsed: int,
    sample_size: int,
    targets: int,
) -> list[str]:
    """Return user-facing validation messages; an empty list means the inputs are usable."""
    remaining = effective_deck_size(deck_size, turns_elapsed)
    errors: list[str] = []
    if deck_size < 1:
        errors.append("Deck size must be at least 1")
    if remaining < 1:
        errors.append("Deck size minus turn must be at least 1")
    if sample_size > remaining:
        errors.append("Sample size cannot exceed remaining deck")
    if targets > deck_size:
        errors.append("Targets cannot exceed deck size")
    if targets > remaining:
        errors.append("Targets cannot exceed remaining deck")
    return errors


def compute_summary_statistics(
    population: int,
    targets: int,
    sample_size: int,
) -> DrawOddsSummary:
    """
    Derive the headline probabilities for a single draw of ``sample_size`` cards.

    ``whiff_twice`` squares the whiff probability: it treats a mulligan as a
    second independent draw from the same starting deck rather than modelling
    the reshuffle, so it is a simplification and not a general "draw twice"
    formula.
    """
    whiff = hypergeometric_probability(population, targets, sample_size, 0)
    exactly_one = hypergeometric_probability(population, targets, sample_size, 1)
    return DrawOddsSummary(
        whiff=whiff,
        exactly_one=exactly_one,
        at_least_one=1 - whiff,
        two_or_more=1 - whiff - exactly_one,
        whiff_twice=whiff * whiff,
    )


def compute_distribution(population: int, targets: int, sample_size: int) -> DrawDistribution:
    values = hypergeometric_distribution(population, targets, sample_size)
    return DrawDistribution(values=values, max_value=max(values, default=0.0))


class DrawOddsService:
    """Validate a scenario and compute its odds."""

    def evaluate(self, scenario: DrawScenario) -> DrawOddsResult:
        remaining = effective_deck_size(scenario.deck_size, scenario.turns_elapsed)
        errors = validate_draw_inputs(
            scenario.deck_size,
            scenario.turns_elapsed,
            scenario.sample_size,
            scenario.targets,
        )
        if errors:
            logger.debug(f"Rejected draw scenario {scenario}: {'; '.join(errors)}")
            return DrawOddsResult(
                remaining_deck=remaining,
                turns_elapsed=scenario.turns_elapsed,
                errors=errors,
            )

        summary = compute_summary_statistics(remaining, scenario.targets, scenario.sample_size)
        distribution = compute_distribution(remaining, scenario.targets, scenario.sample_size)
        logger.debug(
            f"Evaluated N={remaining} K={scenario.targets} n={scenario.sample_size}: "
            f"whiff={summary.whiff:.4f}"
        )
        return DrawOddsResult(
            remaining_deck=remaining,
            turns_elapsed=scenario.turns_elapsed,
            summary=summary,
            distribution=distribution,
        )


__all__ = [
    "DrawDistribution",
    "DrawOddsResult",
    "DrawOddsService",
    "DrawOddsSummary",
    "DrawScenario",
    "compute_distribution",
    "compute_summary_statistics",
    "effective_deck_size",
    "validate_draw_inputs",
]
