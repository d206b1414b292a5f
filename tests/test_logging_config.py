"""Tests for loguru sink configuration."""

from __future__ import annotations

from loguru import logger

from utils.logging_config import configure_logging


def test_file_sink_receives_debug_messages(tmp_path) -> None:
    log_file = tmp_path / "logs" / "draw_odds.log"
    try:
        configure_logging("warning", log_file=log_file)
        logger.debug("recalculated scenario")
    finally:
        # Reconfiguring removes and closes the file sink
        configure_logging("warning")
    assert "recalculated scenario" in log_file.read_text(encoding="utf-8")


def test_stderr_sink_respects_level(capsys) -> None:
    try:
        configure_logging("warning")
        logger.info("hidden message")
        logger.warning("visible message")
        captured = capsys.readouterr()
        assert "hidden message" not in captured.err
        assert "visible message" in captured.err
    finally:
        configure_logging("warning")
