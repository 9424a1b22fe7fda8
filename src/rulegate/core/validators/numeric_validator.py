"""
NumericValidator - validates that a value reads as a number.
"""

from typing import Any

from .base_validator import BaseValidator
from .coercion import is_number


class NumericValidator(BaseValidator):
    """
    Validates that a value is a number or a plain numeric string.

    Accepted strings match ``-?[0-9]+(\\.[0-9]+)?`` exactly: no whitespace,
    no exponent, no leading '+'. Missing values are not numbers.
    """

    def validate(self, value: Any) -> None:
        if not is_number(value):
            self.fail(f"The {self.field_name} field must be a number.")

    @property
    def rule_name(self) -> str:
        return "numeric"
