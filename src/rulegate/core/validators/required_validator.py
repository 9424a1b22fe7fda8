"""
RequiredValidator - ensures a field is present and not empty.
"""

from typing import Any

from .base_validator import BaseValidator
from .coercion import is_blank


class RequiredValidator(BaseValidator):
    """
    Validates that a required field is present and not empty.

    Fails if the value is:
    - absent from the payload or None
    - an empty string
    - False
    - NaN

    Numeric zero, empty lists and empty dicts pass.
    """

    def validate(self, value: Any) -> None:
        """
        Validate that the field is present and not empty.

        Args:
            value: The field value to validate

        Raises:
            RuleViolation: If the value is blank
        """
        if is_blank(value):
            self.fail(f"The {self.field_name} field is required.")

    @property
    def rule_name(self) -> str:
        return "required"
