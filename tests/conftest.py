"""
Pytest configuration and fixtures for rulegate tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
from types import SimpleNamespace

import pytest

from rulegate.core.rules import RuleEngine


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that mount the engine in a host framework"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests through the command-line interface"
    )


# =======================
# SPEC FIXTURES
# =======================

@pytest.fixture
def signup_spec() -> dict[str, str]:
    """
    A spec covering every built-in rule

    Returns:
        Field name -> rule string
    """
    return {
        "name": "required|min:3|max:5",
        "age": "required|numeric",
        "price": "decimal:2",
    }


@pytest.fixture
def signup_engine(signup_spec) -> RuleEngine:
    """RuleEngine built from signup_spec"""
    return RuleEngine(signup_spec)


# =======================
# REQUEST PIPELINE FIXTURES
# =======================

@pytest.fixture
def make_request():
    """
    Factory for host request objects exposing a ``body`` attribute

    Returns:
        Callable building a request from a payload mapping
    """
    def _make_request(body):
        return SimpleNamespace(body=body)

    return _make_request


class Continuation:
    """Zero-argument continuation that counts its calls."""

    def __init__(self, result=None):
        self.calls = 0
        self.result = result

    def __call__(self):
        self.calls += 1
        return self.result


@pytest.fixture
def call_next() -> Continuation:
    """Continuation callback recording how often it ran"""
    return Continuation(result="next-called")


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def rules_file(tmp_path):
    """
    Write a YAML rules file and return its path

    Returns:
        Callable taking YAML text
    """
    def _rules_file(yaml_content: str):
        path = tmp_path / "rules.yaml"
        path.write_text(yaml_content)
        return path

    return _rules_file
