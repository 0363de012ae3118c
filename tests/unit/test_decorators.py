#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_decorators.py
"""Unit tests for the debug timer."""

import logging

import pytest

from html2dast.utils.decorators import debug_timer

logger = logging.getLogger("html2dast.tests.timer")


@pytest.mark.unit
class TestDebugTimer:
    """Tests for debug_timer."""

    def test_logs_at_debug(self, caplog) -> None:
        """Test elapsed time is logged when DEBUG is enabled."""
        with caplog.at_level(logging.DEBUG, logger=logger.name):
            with debug_timer(logger, "Conversion"):
                pass
        assert any("Conversion completed in" in record.getMessage() for record in caplog.records)

    def test_silent_above_debug(self, caplog) -> None:
        """Test nothing is logged at higher levels."""
        with caplog.at_level(logging.INFO, logger=logger.name):
            with debug_timer(logger, "Conversion"):
                pass
        assert caplog.records == []

    def test_exception_propagates(self) -> None:
        """Test errors raised in the block are not swallowed."""
        with pytest.raises(RuntimeError):
            with debug_timer(logger, "Conversion"):
                raise RuntimeError("boom")
