"""Entry point for the draw odds calculator."""

import os

import wx
from loguru import logger

from controllers.calculator_controller import CalculatorController
from utils.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR
from utils.logging_config import configure_logging
from widgets.draw_odds_frame import DrawOddsFrame


def main() -> None:
    configure_logging(os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
    app = wx.App(False)
    frame = DrawOddsFrame(CalculatorController())
    frame.Show()
    logger.info("Draw odds calculator started")
    app.MainLoop()


if __name__ == "__main__":
    main()
