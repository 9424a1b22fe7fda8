"""
Core data models for the rule-string validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .rule_descriptor import RuleDescriptor
from .validation_result import ValidationResult
from .validation_spec import ValidationSpec

__all__ = [
    "RuleDescriptor",
    "ValidationSpec",
    "ValidationResult",
]
