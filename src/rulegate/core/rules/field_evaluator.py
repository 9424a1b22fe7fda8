"""
Field evaluation: applies one field's rules to its value, in order.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from rulegate.core.models import RuleDescriptor
from rulegate.core.validators import (
    BaseValidator,
    DecimalValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NumericValidator,
    RequiredValidator,
    RuleViolation,
)

# Rule name -> validator class. Read-only; extra rules go through
# FieldEvaluator(extra_validators=...).
VALIDATOR_REGISTRY: Mapping[str, type[BaseValidator]] = MappingProxyType({
    "required": RequiredValidator,
    "min": MinLengthValidator,
    "max": MaxLengthValidator,
    "numeric": NumericValidator,
    "decimal": DecimalValidator,
})


class FieldEvaluator:
    """
    Evaluates one field's value against its ordered rule descriptors.

    Stops at the first failing rule. Rules with an unknown name or an
    unusable parameter are inert.
    """

    def __init__(self, extra_validators: Mapping[str, type[BaseValidator]] | None = None):
        """
        Initialize the evaluator.

        Args:
            extra_validators: Additional rule name -> validator class entries,
                              merged over VALIDATOR_REGISTRY for this evaluator only
        """
        if extra_validators:
            self.registry: Mapping[str, type[BaseValidator]] = MappingProxyType(
                {**VALIDATOR_REGISTRY, **extra_validators}
            )
        else:
            self.registry = VALIDATOR_REGISTRY

    def is_known(self, rule_name: str) -> bool:
        return rule_name in self.registry

    def build_validator(self, field_name: str, descriptor: RuleDescriptor) -> BaseValidator | None:
        """
        Instantiate the validator for a descriptor.

        Returns:
            The validator, or None if the rule is inert (unknown name or bad parameter)
        """
        validator_class = self.registry.get(descriptor.name)
        if validator_class is None:
            return None

        try:
            return validator_class(field_name, descriptor.parameter)
        except ValueError:
            return None

    def inert_reason(self, field_name: str, descriptor: RuleDescriptor) -> str | None:
        """Explain why a descriptor imposes no check, or None if it is active."""
        validator_class = self.registry.get(descriptor.name)
        if validator_class is None:
            return f"unknown rule '{descriptor.name}'"

        try:
            validator_class(field_name, descriptor.parameter)
        except ValueError as e:
            return str(e)
        return None

    def first_violation(
        self,
        field_name: str,
        data: Any,
        descriptors: Iterable[RuleDescriptor],
    ) -> RuleViolation | None:
        """
        Apply rules in declared order and return the first violation.

        Args:
            field_name: Field being checked (used in messages)
            data: The field's value (None when absent)
            descriptors: Rules for the field, in declared order

        Returns:
            The first RuleViolation, or None if every rule passes
        """
        for descriptor in descriptors:
            validator = self.build_validator(field_name, descriptor)
            if validator is None:
                continue

            try:
                validator.validate(data)
            except RuleViolation as violation:
                return violation

        return None

    def evaluate(
        self,
        field_name: str,
        data: Any,
        descriptors: Iterable[RuleDescriptor],
    ) -> str | None:
        """
        Return the message of the first violated rule, or None if all pass.
        """
        violation = self.first_violation(field_name, data, descriptors)
        return violation.message if violation else None


_default_evaluator = FieldEvaluator()


def evaluate(field_name: str, data: Any, descriptors: Iterable[RuleDescriptor]) -> str | None:
    """Evaluate a field with the built-in rules only."""
    return _default_evaluator.evaluate(field_name, data, descriptors)
