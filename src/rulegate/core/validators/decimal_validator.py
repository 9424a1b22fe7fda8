"""
DecimalValidator - validates the number of fractional digits of a value.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseValidator
from .coercion import to_text


class DecimalValidator(BaseValidator):
    """
    Validates that a value is an integer part followed by exactly D decimals.

    Parameter: D, a non-negative integer, default 0 ("decimal:2").

    With D=2, "12.34" passes while "12", "12.3" and "12.345" fail.
    With D=0, "12" passes and any fractional part fails.
    """

    def __init__(self, field_name: str, parameter: str | None = None):
        super().__init__(field_name, parameter)
        self.places = self._integer_parameter(default=0)

        if self.places == 0:
            self.pattern: Pattern = re.compile(r"-?[0-9]+", re.ASCII)
        else:
            self.pattern = re.compile(rf"-?[0-9]+\.[0-9]{{{self.places}}}", re.ASCII)

    def validate(self, value: Any) -> None:
        """
        Validate the decimal places of the value's text form.

        Raises:
            RuleViolation: If the text does not have exactly D decimal places
        """
        if not self.pattern.fullmatch(to_text(value)):
            self.fail(f"The {self.field_name} field must have {self.places} decimal places.")

    @property
    def rule_name(self) -> str:
        return "decimal"
