"""Calculator state and recalculation, independent of the UI toolkit."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from loguru import logger

from services.draw_odds_service import DrawOddsResult, DrawOddsService, DrawScenario
from utils.constants import (
    DEFAULT_DECK_SIZE,
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_TARGETS,
    DEFAULT_TURNS_ELAPSED,
)

SCENARIO_FIELDS = ("deck_size", "turns_elapsed", "sample_size", "targets")

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def default_scenario() -> DrawScenario:
    return DrawScenario(
        deck_size=DEFAULT_DECK_SIZE,
        turns_elapsed=DEFAULT_TURNS_ELAPSED,
        sample_size=DEFAULT_SAMPLE_SIZE,
        targets=DEFAULT_TARGETS,
    )


class CalculatorController:
    """Holds the current scenario and pushes fresh results to the view."""

    def __init__(
        self,
        service: DrawOddsService | None = None,
        on_result: Callable[[DrawOddsResult], None] | None = None,
    ) -> None:
        self.service = service or DrawOddsService()
        self.on_result = on_result
        self.scenario = default_scenario()
        self.last_result: DrawOddsResult | None = None

    @staticmethod
    def coerce_input(value: Any) -> int:
        """Read the leading integer of a raw input value; anything else counts as 0.

        "12abc" is 12 and "1e3" is 1, the way parseInt reads a number field.
        Integers pass through without a float round-trip.
        """
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        match = LEADING_INTEGER.match(str(value))
        if match is None:
            return 0
        return int(match.group(1))

    def update_inputs(self, **fields: Any) -> DrawOddsResult:
        unknown = set(fields) - set(SCENARIO_FIELDS)
        if unknown:
            raise TypeError(f"Unknown calculator inputs: {', '.join(sorted(unknown))}")
        changes = {name: self.coerce_input(value) for name, value in fields.items()}
        scenario = replace(self.scenario, **changes)
        if scenario == self.scenario and self.last_result is not None:
            return self.last_result
        self.scenario = scenario
        return self.recalculate()

    def reset(self) -> DrawOddsResult:
        self.scenario = default_scenario()
        return self.recalculate()

    def recalculate(self) -> DrawOddsResult:
        result = self.service.evaluate(self.scenario)
        self.last_result = result
        if not result.is_valid:
            logger.debug(f"Calculator inputs invalid: {result.errors}")
        if self.on_result is not None:
            self.on_result(result)
        return result
