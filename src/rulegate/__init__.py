"""
Declarative field validation driven by pipe-delimited rule strings.

    from rulegate import validate, ValidationFailed

    check = validate({"name": "required|min:3|max:5"})
    check(request, call_next)
"""

from .core.errors import ValidationFailed
from .core.models import RuleDescriptor, ValidationResult, ValidationSpec
from .core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine, parse_rules
from .middleware import validate

__version__ = "0.1.0"

__all__ = [
    "validate",
    "ValidationFailed",
    "ValidationSpec",
    "ValidationResult",
    "RuleDescriptor",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "parse_rules",
]
