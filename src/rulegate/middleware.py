"""
Framework-neutral validation middleware.

Usage:
    check_signup = validate({"name": "required|min:3|max:5", "age": "required|numeric"})

    # inside the host pipeline
    check_signup(request, call_next)   # raises ValidationFailed or calls call_next()
"""

from collections.abc import Callable, Mapping
from typing import Any

from rulegate.core.errors import ValidationFailed
from rulegate.core.models import ValidationSpec
from rulegate.core.rules import RuleEngine
from rulegate.core.validators import BaseValidator

Middleware = Callable[[Any, Callable[[], Any]], Any]


def validate(
    spec: "Mapping[str, str] | ValidationSpec",
    extra_validators: Mapping[str, type[BaseValidator]] | None = None,
) -> Middleware:
    """
    Build a middleware that validates ``request.body`` against a spec.

    The field rules are parsed once here. The returned function reads only
    ``request.body``; on failure it raises ValidationFailed carrying one
    message per failing field, otherwise it calls ``call_next()`` exactly
    once and returns its result.

    Args:
        spec: Field name -> rule string
        extra_validators: Additional rule name -> validator class entries

    Returns:
        middleware(request, call_next)
    """
    engine = RuleEngine(spec, extra_validators)

    def middleware(request: Any, call_next: Callable[[], Any]) -> Any:
        result = engine.validate_payload(getattr(request, "body", None))
        if not result.passed:
            raise ValidationFailed(result.errors)
        return call_next()

    middleware.engine = engine
    return middleware
