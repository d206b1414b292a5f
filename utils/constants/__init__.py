"""Shared constants for the draw odds calculator."""

from utils.constants.rules import (
    CARDS_DRAWN_PER_TURN,
    DEFAULT_DECK_SIZE,
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_TARGETS,
    DEFAULT_TURNS_ELAPSED,
    MAX_DECK_SIZE_INPUT,
    MAX_TURNS_INPUT,
    OPENING_HAND_SIZE,
)
from utils.constants.theme import (
    CHART_BAR_GAP,
    CHART_LABEL_HEIGHT,
    CHART_MIN_HEIGHT,
    DARK_BG,
    DARK_PANEL,
    DRAW_ODDS_FRAME_MIN_SIZE,
    DRAW_ODDS_FRAME_SIZE,
    ERROR_TEXT,
    LIGHT_TEXT,
    PADDING_LG,
    PADDING_MD,
    PADDING_SM,
    SPIN_CTRL_WIDTH,
    SUBDUED_TEXT,
)

LOG_LEVEL_ENV_VAR = "DRAW_ODDS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

__all__ = [
    "CARDS_DRAWN_PER_TURN",
    "CHART_BAR_GAP",
    "CHART_LABEL_HEIGHT",
    "CHART_MIN_HEIGHT",
    "DARK_BG",
    "DARK_PANEL",
    "DEFAULT_DECK_SIZE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SAMPLE_SIZE",
    "DEFAULT_TARGETS",
    "DEFAULT_TURNS_ELAPSED",
    "DRAW_ODDS_FRAME_MIN_SIZE",
    "DRAW_ODDS_FRAME_SIZE",
    "ERROR_TEXT",
    "LIGHT_TEXT",
    "LOG_LEVEL_ENV_VAR",
    "MAX_DECK_SIZE_INPUT",
    "MAX_TURNS_INPUT",
    "OPENING_HAND_SIZE",
    "PADDING_LG",
    "PADDING_MD",
    "PADDING_SM",
    "SPIN_CTRL_WIDTH",
    "SUBDUED_TEXT",
]
