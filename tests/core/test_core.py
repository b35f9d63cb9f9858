"""Tests for settings, logging and errors."""

import json
import logging

from exam_grading.core.config import Settings, get_settings
from exam_grading.core.errors import ExamGradingError, QuestionNotFoundError
from exam_grading.core.logging import (
    LoggerAdapter,
    StructuredFormatter,
    TextFormatter,
    get_context_logger,
    setup_logging,
)


class TestSettings:
    """Test configuration defaults and overrides."""

    def test_defaults(self):
        """Test the grading defaults."""
        settings = Settings()
        assert settings.PASSING_SCORE == 70
        assert settings.PARTIAL_CREDIT_THRESHOLD == 0.7
        assert settings.PARTIAL_CREDIT_RATIO == 0.5
        assert settings.REVIEW_CORRECT_RATIO == 0.6
        assert settings.MAX_SIMILARITY_LENGTH == 10000
        assert "manual" in settings.ESSAY_REVIEW_MESSAGE

    def test_environment_override(self, monkeypatch):
        """Test that prefixed environment variables override defaults."""
        monkeypatch.setenv("EXAM_GRADING_PASSING_SCORE", "60")
        monkeypatch.setenv("EXAM_GRADING_LOG_FORMAT", "text")
        settings = Settings()
        assert settings.PASSING_SCORE == 60
        assert settings.LOG_FORMAT == "text"

    def test_cached(self):
        """Test that get_settings() returns the same instance."""
        assert get_settings() is get_settings()


class TestLogging:
    """Test log formatting."""

    def _record(self, **extra):
        record = logging.LogRecord(
            name="exam_grading.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="Exam graded",
            args=(),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_structured_formatter(self):
        """Test that records format as JSON including extra data."""
        output = StructuredFormatter().format(self._record(extra_data={"percentage": 75.0}))
        data = json.loads(output)
        assert data["message"] == "Exam graded"
        assert data["level"] == "INFO"
        assert data["percentage"] == 75.0

    def test_text_formatter(self):
        """Test the human-readable format."""
        output = TextFormatter().format(self._record())
        assert "exam_grading.test - INFO - Exam graded" in output

    def test_context_logger_merges_extra_data(self):
        """Test that permanent context and per-call data are merged."""
        adapter = get_context_logger("exam_grading.test", attempt_id="abc")
        assert isinstance(adapter, LoggerAdapter)
        msg, kwargs = adapter.process("Review applied", {"extra_data": {"question_key": "0-1"}})
        assert kwargs["extra"]["extra_data"] == {"attempt_id": "abc", "question_key": "0-1"}

    def test_setup_logging(self, monkeypatch, tmp_path):
        """Test that setup_logging() configures the package logger only."""
        log_file = tmp_path / "logs" / "grading.log"
        monkeypatch.setenv("EXAM_GRADING_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("EXAM_GRADING_LOG_FILE", str(log_file))
        get_settings.cache_clear()

        package_logger = logging.getLogger("exam_grading")
        saved = (package_logger.level, list(package_logger.handlers), package_logger.propagate)
        try:
            setup_logging()
            assert package_logger.level == logging.DEBUG
            assert len(package_logger.handlers) == 2
            assert isinstance(package_logger.handlers[0].formatter, StructuredFormatter)
            assert log_file.parent.exists()
        finally:
            for handler in package_logger.handlers:
                handler.close()
            package_logger.setLevel(saved[0])
            package_logger.handlers = saved[1]
            package_logger.propagate = saved[2]


class TestErrors:
    """Test exception payloads."""

    def test_base_error(self):
        """Test message and details on the base error."""
        error = ExamGradingError("Something failed", details={"key": "0-0"})
        assert str(error) == "Something failed"
        assert error.to_dict() == {
            "error": {
                "type": "ExamGradingError",
                "message": "Something failed",
                "details": {"key": "0-0"},
            }
        }

    def test_question_not_found(self):
        """Test the not-found message."""
        error = QuestionNotFoundError("2-3")
        assert "2-3" in error.message
        assert isinstance(error, ExamGradingError)
