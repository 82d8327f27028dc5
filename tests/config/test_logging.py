"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from cakecollate.config.logging import MAX_LOGGED_INPUT, clip_input, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("cakecollate")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


def _json_lines(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("cakecollate").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("cakecollate").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("cakecollate.test").warning("json test", answer=42)
        (parsed,) = _json_lines(stream)
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "cakecollate.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("cakecollate.services.validate").debug("parse_name rejected")
        (parsed,) = _json_lines(stream)
        assert parsed["event"] == "parse_name rejected"
        assert parsed["level"] == "debug"

    def test_debug_hidden_without_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        structlog.get_logger("cakecollate.parser.fields").debug("delivery_date_rejected")
        assert stream.getvalue() == ""

    def test_third_party_debug_is_suppressed(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("somelib").debug("noise")
        assert stream.getvalue() == ""

    def test_long_input_is_clipped(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("cakecollate.test").debug("rejected", input="x" * 500)
        (parsed,) = _json_lines(stream)
        assert parsed["input"] == "x" * MAX_LOGGED_INPUT + "..."

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestClipInput:
    def test_short_input_untouched(self) -> None:
        event = {"event": "x", "input": "abc"}
        assert clip_input(None, "debug", event)["input"] == "abc"

    def test_missing_input(self) -> None:
        assert clip_input(None, "debug", {"event": "x"}) == {"event": "x"}
