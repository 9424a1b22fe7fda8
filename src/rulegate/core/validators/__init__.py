"""
Rule implementations.

Provides validators for the rule-string vocabulary: required fields, text
length bounds, numeric values and decimal places.
"""

from .base_validator import BaseValidator, RuleViolation
from .coercion import is_blank, is_number, to_text
from .decimal_validator import DecimalValidator
from .length_validator import MaxLengthValidator, MinLengthValidator
from .numeric_validator import NumericValidator
from .required_validator import RequiredValidator

__all__ = [
    "BaseValidator",
    "RuleViolation",
    "RequiredValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "NumericValidator",
    "DecimalValidator",
    "to_text",
    "is_blank",
    "is_number",
]
