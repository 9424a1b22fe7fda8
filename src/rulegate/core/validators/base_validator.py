"""
Base validator interface for all rule-string rules.

All validators must inherit from BaseValidator and implement the validate() method.
"""

import re
from abc import ABC, abstractmethod
from typing import Any

_INTEGER_PARAMETER = re.compile(r"[0-9]+", re.ASCII)


class RuleViolation(Exception):
    """Raised when a value breaks a rule."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one rule name of the rule-string vocabulary
    (required, min, max, numeric, decimal).
    """

    def __init__(self, field_name: str, parameter: str | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the field to validate (used in messages)
            parameter: Raw rule parameter (the text after ':' in "min:8")

        Raises:
            ValueError: If the parameter is unusable for this rule
        """
        self.field_name = field_name
        self.parameter = parameter

    @abstractmethod
    def validate(self, value: Any) -> None:
        """
        Validate a value against this rule.

        Args:
            value: The field value to validate (None when absent)

        Raises:
            RuleViolation: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_name(self) -> str:
        """Return the rule name used in rule strings."""
        pass

    def fail(self, message: str) -> None:
        raise RuleViolation(
            rule_name=self.rule_name,
            field_name=self.field_name,
            message=message,
        )

    def _integer_parameter(self, default: int | None = None) -> int:
        """Parse the parameter as a non-negative integer."""
        if self.parameter is None or self.parameter.strip() == "":
            if default is None:
                raise ValueError(f"Rule '{self.rule_name}' requires an integer parameter")
            return default

        raw = self.parameter.strip()
        if not _INTEGER_PARAMETER.fullmatch(raw):
            raise ValueError(
                f"Rule '{self.rule_name}' expects a non-negative integer, got '{self.parameter}'"
            )
        return int(raw)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, parameter={self.parameter})"
