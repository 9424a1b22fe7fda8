"""
MinLengthValidator and MaxLengthValidator - bound the text length of a value.
"""

from typing import Any

from .base_validator import BaseValidator
from .coercion import to_text


class MinLengthValidator(BaseValidator):
    """
    Validates that the text form of a value has at least N characters.

    Parameter: N, a non-negative integer ("min:8"). Length is measured on the
    text form, so the number 8 is one character long.
    """

    def __init__(self, field_name: str, parameter: str | None = None):
        super().__init__(field_name, parameter)
        self.length = self._integer_parameter()

    def validate(self, value: Any) -> None:
        """
        Validate the lower length bound.

        Raises:
            RuleViolation: If the value is shorter than N characters
        """
        if len(to_text(value)) < self.length:
            self.fail(f"The {self.field_name} field must be at least {self.length} characters.")

    @property
    def rule_name(self) -> str:
        return "min"


class MaxLengthValidator(BaseValidator):
    """
    Validates that the text form of a value has at most N characters.

    Parameter: N, a non-negative integer ("max:8").
    """

    def __init__(self, field_name: str, parameter: str | None = None):
        super().__init__(field_name, parameter)
        self.length = self._integer_parameter()

    def validate(self, value: Any) -> None:
        """
        Validate the upper length bound.

        Raises:
            RuleViolation: If the value is longer than N characters
        """
        if len(to_text(value)) > self.length:
            self.fail(f"The {self.field_name} field must be at most {self.length} characters.")

    @property
    def rule_name(self) -> str:
        return "max"
