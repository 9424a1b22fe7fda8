"""
Prometheus metrics collection for rulegate

This module provides metrics instrumentation for monitoring
validation outcomes and per-field rule violations.
"""
from collections.abc import Iterable

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

# Payloads validated
validations_total = Counter(
    name="rulegate_validations_total",
    documentation="Total number of payloads validated",
    labelnames=["outcome"],  # outcome: passed, failed
    registry=REGISTRY,
)

# First violation per failing field
field_violations_total = Counter(
    name="rulegate_field_violations_total",
    documentation="Total number of field violations (first failing rule per field)",
    labelnames=["field_name", "rule_name"],
    registry=REGISTRY,
)

# Time to evaluate one payload
validation_duration_seconds = Histogram(
    name="rulegate_validation_duration_seconds",
    documentation="Time spent validating a payload in seconds",
    buckets=[0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def observe_histogram(histogram: Histogram, value: float, **labels) -> None:
    """
    Observe a value in a histogram metric

    Args:
        histogram: Prometheus Histogram metric
        value: Value to observe
        **labels: Label values for the metric
    """
    if labels:
        histogram.labels(**labels).observe(value)
    else:
        histogram.observe(value)


def record_validation(
    passed: bool,
    violations: Iterable[tuple[str, str]],
    duration_seconds: float,
) -> None:
    """
    Record the outcome of validating one payload.

    Args:
        passed: Whether the payload passed
        violations: (field_name, rule_name) for each failing field
        duration_seconds: Evaluation time in seconds
    """
    increment_counter(validations_total, 1, outcome="passed" if passed else "failed")

    for field_name, rule_name in violations:
        increment_counter(field_violations_total, 1, field_name=field_name, rule_name=rule_name)

    observe_histogram(validation_duration_seconds, duration_seconds)
