"""Tests for draw scenario validation and summary statistics."""

import pytest

from services.draw_odds_service import (
    DrawDistribution,
    DrawOddsService,
    DrawScenario,
    compute_distribution,
    compute_summary_statistics,
    effective_deck_size,
    validate_draw_inputs,
)
from utils.math_utils import hypergeometric_probability

VALID_TRIPLES = [(50, 3, 6), (48, 3, 7), (10, 2, 5), (5, 0, 3), (44, 12, 8), (1, 1, 1)]


class TestEffectiveDeckSize:
    def test_turn_zero_keeps_full_deck(self) -> None:
        assert effective_deck_size(50, 0) == 50

    def test_two_cards_per_turn(self) -> None:
        assert effective_deck_size(50, 1) == 48
        assert effective_deck_size(50, 5) == 40

    def test_can_go_negative(self) -> None:
        assert effective_deck_size(3, 4) == -5


class TestValidateDrawInputs:
    def test_valid_inputs_have_no_errors(self) -> None:
        assert validate_draw_inputs(50, 1, 6, 3) == []

    def test_empty_deck(self) -> None:
        errors = validate_draw_inputs(0, 0, 0, 0)
        assert errors == [
            "Deck size must be at least 1",
            "Deck size minus turn must be at least 1",
        ]

    def test_too_many_turns(self) -> None:
        errors = validate_draw_inputs(10, 5, 0, 0)
        assert errors == ["Deck size minus turn must be at least 1"]

    def test_sample_exceeds_remaining_deck(self) -> None:
        errors = validate_draw_inputs(10, 2, 7, 0)
        assert errors == ["Sample size cannot exceed remaining deck"]

    def test_targets_exceed_deck_and_remaining_deck(self) -> None:
        errors = validate_draw_inputs(10, 0, 5, 11)
        assert errors == [
            "Targets cannot exceed deck size",
            "Targets cannot exceed remaining deck",
        ]

    def test_targets_exceed_only_remaining_deck(self) -> None:
        errors = validate_draw_inputs(10, 3, 2, 5)
        assert errors == ["Targets cannot exceed remaining deck"]


class TestSummaryStatistics:
    def test_values_come_from_pmf(self) -> None:
        summary = compute_summary_statistics(48, 3, 7)
        assert summary.whiff == hypergeometric_probability(48, 3, 7, 0)
        assert summary.exactly_one == hypergeometric_probability(48, 3, 7, 1)

    @pytest.mark.parametrize(("population", "targets", "sample"), VALID_TRIPLES)
    def test_derived_identities(self, population: int, targets: int, sample: int) -> None:
        summary = compute_summary_statistics(population, targets, sample)
        assert summary.at_least_one + summary.whiff == pytest.approx(1.0, abs=1e-9)
        assert summary.two_or_more == pytest.approx(
            summary.at_least_one - summary.exactly_one, abs=1e-9
        )
        assert summary.whiff_twice == pytest.approx(summary.whiff**2)

    def test_no_targets_always_whiffs(self) -> None:
        summary = compute_summary_statistics(5, 0, 3)
        assert summary.whiff == 1.0
        assert summary.exactly_one == 0.0
        assert summary.at_least_one == 0.0
        assert summary.whiff_twice == 1.0

    def test_two_or_more_for_small_deck(self) -> None:
        """10 cards, 2 targets, draw 5: P(2) = 56/252."""
        summary = compute_summary_statistics(10, 2, 5)
        assert summary.two_or_more == pytest.approx(56 / 252)

    def test_degenerate_inputs_are_finite(self) -> None:
        summary = compute_summary_statistics(0, 3, 5)
        assert summary.whiff == 0.0
        assert summary.at_least_one == 1.0
        assert summary.whiff_twice == 0.0


class TestComputeDistribution:
    @pytest.mark.parametrize(("population", "targets", "sample"), VALID_TRIPLES)
    def test_sums_to_one(self, population: int, targets: int, sample: int) -> None:
        distribution = compute_distribution(population, targets, sample)
        assert len(distribution.values) == min(targets, sample) + 1
        assert sum(distribution.values) == pytest.approx(1.0, abs=1e-6)

    def test_tracks_max_value(self) -> None:
        distribution = compute_distribution(50, 3, 6)
        assert distribution.max_value == max(distribution.values)

    def test_large_deck_sums_to_one(self) -> None:
        distribution = compute_distribution(1100, 550, 550)
        assert sum(distribution.values) == pytest.approx(1.0, abs=1e-6)
        assert 0.0 < distribution.max_value < 1.0

    def test_empty_distribution_has_zero_max(self) -> None:
        distribution = compute_distribution(10, 2, -1)
        assert distribution == DrawDistribution(values=[], max_value=0.0)


class TestDrawOddsService:
    def test_valid_scenario_uses_remaining_deck(self) -> None:
        result = DrawOddsService().evaluate(
            DrawScenario(deck_size=50, turns_elapsed=1, sample_size=7, targets=3)
        )
        assert result.is_valid
        assert result.remaining_deck == 48
        assert result.turns_elapsed == 1
        assert result.summary == compute_summary_statistics(48, 3, 7)
        assert result.distribution == compute_distribution(48, 3, 7)

    def test_large_deck_scenario_evaluates(self) -> None:
        result = DrawOddsService().evaluate(
            DrawScenario(deck_size=1100, turns_elapsed=0, sample_size=550, targets=550)
        )
        assert result.is_valid
        assert result.summary == compute_summary_statistics(1100, 550, 550)
        assert result.summary.at_least_one + result.summary.whiff == pytest.approx(1.0)

    def test_invalid_scenario_skips_computation(self) -> None:
        result = DrawOddsService().evaluate(
            DrawScenario(deck_size=10, turns_elapsed=2, sample_size=7, targets=0)
        )
        assert not result.is_valid
        assert result.remaining_deck == 6
        assert result.errors == ["Sample size cannot exceed remaining deck"]
        assert result.summary is None
        assert result.distribution is None
