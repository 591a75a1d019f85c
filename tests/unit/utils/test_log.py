"""
Unit tests for the package logger.
"""

import pytest

from devtools_mcp.utils import log


@pytest.fixture
def captured(caplog):
  # The package logger does not propagate; attach caplog's handler directly.
  log.logger.addHandler(caplog.handler)
  level, debug_level = log.logger.level, log.debug_level
  yield caplog
  log.logger.removeHandler(caplog.handler)
  log.logger.setLevel(level)
  log.debug_level = debug_level


@pytest.mark.unit
class TestLog:
  def test_does_not_propagate(self):
    assert log.logger.propagate is False

  def test_info_and_warning(self, captured):
    log.set_log_level_to_info()
    log.log_info("hello")
    log.log_warning("careful")
    assert [r.getMessage() for r in captured.records] == ["hello", "careful"]

  def test_debug_hidden_at_info(self, captured):
    log.set_log_level_to_info()
    log.log_debug("quiet")
    assert captured.records == []

  def test_debug_levels(self, captured):
    log.set_log_level_to_debug()
    log.log_debug("level one")
    log.log_debug("level two", log_level=2)
    assert [r.getMessage() for r in captured.records] == ["level one"]

    log.set_log_level_to_debug(level=2)
    log.log_debug("level two", log_level=2)
    assert captured.records[-1].getMessage() == "level two"
