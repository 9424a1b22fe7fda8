"""
Unit tests for logging and metrics.
"""

import json
import logging

import pytest

from rulegate.core.rules import RuleEngine
from rulegate.observability.logger import CustomJsonFormatter, get_logger, log_operation, setup_logger
from rulegate.observability.metrics import REGISTRY, generate_metrics, get_content_type, record_validation


def _sample(name: str, **labels) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.unit
class TestMetrics:
    """Tests for validation metrics"""

    def test_outcomes_counted(self):
        """Test passed and failed validations increment their counters"""
        engine = RuleEngine({"metrics_name": "required"})
        passed_before = _sample("rulegate_validations_total", outcome="passed")
        failed_before = _sample("rulegate_validations_total", outcome="failed")

        engine.validate_payload({"metrics_name": "x"})
        engine.validate_payload({})

        assert _sample("rulegate_validations_total", outcome="passed") == passed_before + 1
        assert _sample("rulegate_validations_total", outcome="failed") == failed_before + 1

    def test_field_violation_labelled_by_rule(self):
        """Test the failing field and rule are recorded"""
        engine = RuleEngine({"metrics_price": "required|decimal:2"})
        before = _sample("rulegate_field_violations_total", field_name="metrics_price", rule_name="decimal")

        engine.validate_payload({"metrics_price": "1.5"})

        after = _sample("rulegate_field_violations_total", field_name="metrics_price", rule_name="decimal")
        assert after == before + 1

    def test_record_validation_direct(self):
        """Test record_validation takes the outcome flag, violations and duration"""
        before = _sample("rulegate_field_violations_total", field_name="metrics_code", rule_name="max")
        count_before = _sample("rulegate_validation_duration_seconds_count")

        record_validation(passed=False, violations=[("metrics_code", "max")], duration_seconds=0.001)

        after = _sample("rulegate_field_violations_total", field_name="metrics_code", rule_name="max")
        assert after == before + 1
        assert _sample("rulegate_validation_duration_seconds_count") == count_before + 1

    def test_generate_metrics(self):
        """Test the text exposition includes the validation counters"""
        RuleEngine({"x": "required"}).validate_payload({"x": "y"})

        text = generate_metrics().decode()

        assert "rulegate_validations_total" in text
        assert "rulegate_validation_duration_seconds" in text
        assert get_content_type().startswith("text/plain")


@pytest.mark.unit
class TestLogger:
    """Tests for the structured logger"""

    def test_json_formatter_adds_context(self):
        """Test JSON records carry level, logger and extra fields"""
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s",
        )
        record = logging.LogRecord(
            name="rulegate.test", level=logging.WARNING, pathname=__file__, lineno=1,
            msg="rule is inert", args=None, exc_info=None,
        )
        record.field_name = "age"

        payload = json.loads(formatter.format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "rulegate.test"
        assert payload["message"] == "rule is inert"
        assert payload["field_name"] == "age"

    def test_setup_logger_level(self):
        """Test explicit levels override the environment"""
        logger = setup_logger("rulegate-test-level", level="debug", format_type="text")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_logger_reads_env(self, monkeypatch):
        """Test LOG_LEVEL is honoured when no level is given"""
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        logger = setup_logger("rulegate-test-env")

        assert logger.level == logging.ERROR

    def test_package_loggers_share_handler(self):
        """Test module loggers under the package reuse the package handler"""
        logger = get_logger("rulegate.some.module")

        assert logger.handlers == []
        assert logging.getLogger("rulegate").handlers

    def test_log_operation_reraises(self):
        """Test log_operation never swallows exceptions"""
        with pytest.raises(RuntimeError):
            with log_operation("failing op", logger=setup_logger("rulegate-test-op")):
                raise RuntimeError("boom")
