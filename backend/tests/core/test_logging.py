"""
Tests for bookreel.core.logging
"""

import json
import logging

from bookreel.core.logging import (
    REDACTED,
    DevelopmentFormatter,
    LogTimer,
    StructuredFormatter,
    clear_context,
    get_logger,
    redact,
    set_job_id,
    set_request_id,
    set_step,
)


def _record(msg="hello", **extra):
    record = logging.LogRecord("bookreel.test", logging.INFO, __file__, 10, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRedact:
    """Test suite for secret redaction in log extras"""

    def test_sensitive_keys_are_replaced(self):
        """Values under key-like names never reach the log"""
        data = {"api_key": "abc", "xi-api-key": "def", "Authorization": "Bearer x", "voice_id": "v1"}
        result = redact(data)
        assert result["api_key"] == REDACTED
        assert result["xi-api-key"] == REDACTED
        assert result["Authorization"] == REDACTED
        assert result["voice_id"] == "v1"

    def test_nested_structures(self):
        """Redaction walks into nested dicts and lists"""
        data = {"request": {"headers": {"token": "t"}, "items": [{"password": "p"}]}}
        result = redact(data)
        assert result["request"]["headers"]["token"] == REDACTED
        assert result["request"]["items"][0]["password"] == REDACTED


class TestStructuredFormatter:
    """Test suite for the JSON formatter"""

    def teardown_method(self):
        clear_context()

    def test_basic_fields(self):
        """Level, logger and message are always present"""
        data = json.loads(StructuredFormatter().format(_record("rendering")))
        assert data["level"] == "INFO"
        assert data["logger"] == "bookreel.test"
        assert data["message"] == "rendering"

    def test_correlation_ids_included(self):
        """Request, job and step ids from the context are attached"""
        set_request_id("req-1")
        set_job_id("job-1")
        set_step("generating script")
        data = json.loads(StructuredFormatter().format(_record()))
        assert data["request_id"] == "req-1"
        assert data["job_id"] == "job-1"
        assert data["step"] == "generating script"

    def test_extra_fields_are_redacted(self):
        """Extras land under 'extra' with secrets masked"""
        data = json.loads(StructuredFormatter().format(_record(voice_id="abc", api_key="secret")))
        assert data["extra"]["voice_id"] == "abc"
        assert data["extra"]["api_key"] == REDACTED


class TestDevelopmentFormatter:
    """Test suite for the console formatter"""

    def teardown_method(self):
        clear_context()

    def test_context_prefix(self):
        """Short ids are shown next to the message"""
        set_job_id("abcdef1234567890")
        line = DevelopmentFormatter().format(_record("clip ready"))
        assert "job:abcdef12" in line
        assert "clip ready" in line


class TestLoggerAdapter:
    """Test suite for bound logger context"""

    def test_bound_context_merged(self, caplog):
        """Component bound at creation is present on each record"""
        logger = get_logger("bookreel.test.adapter", component="unit")
        with caplog.at_level(logging.INFO, logger="bookreel.test.adapter"):
            logger.info("event", extra={"voice_id": "v"})
        record = caplog.records[-1]
        assert record.component == "unit"
        assert record.voice_id == "v"


class TestLogTimer:
    """Test suite for LogTimer"""

    def test_records_duration(self):
        """Duration is measured on exit"""
        logger = get_logger("bookreel.test.timer")
        with LogTimer(logger, "work") as timer:
            pass
        assert timer.duration is not None
        assert timer.duration >= 0
