"""
Rule engine for validating payloads against a validation spec.

The rule engine parses the field rules once, applies each field's rules to incoming
payloads and aggregates the first violation of every failing field.
"""

import time
from collections.abc import Mapping
from typing import Any

from rulegate.core.models import RuleDescriptor, ValidationResult, ValidationSpec
from rulegate.core.validators import BaseValidator, RuleViolation
from rulegate.observability.logger import get_logger
from rulegate.observability.metrics import record_validation

from .field_evaluator import FieldEvaluator
from .rule_parser import parse_spec

logger = get_logger(__name__)


class RuleEngine:
    """
    Validates payloads against a ValidationSpec.

    Every declared field is evaluated, in declaration order. Within a field
    evaluation stops at the first failing rule, so each failing field
    contributes exactly one message.
    """

    def __init__(
        self,
        spec: "Mapping[str, str] | ValidationSpec",
        extra_validators: Mapping[str, type[BaseValidator]] | None = None,
    ):
        """
        Initialize the rule engine with a validation spec.

        Args:
            spec: Field name -> rule string (e.g. {"name": "required|min:3"})
            extra_validators: Additional rule name -> validator class entries
        """
        self.spec = ValidationSpec.from_mapping(spec)
        self.evaluator = FieldEvaluator(extra_validators)
        self.fields: tuple[tuple[str, tuple[RuleDescriptor, ...]], ...] = parse_spec(self.spec)
        self.inert_rules: list[str] = []
        self._check_rules()

    def _check_rules(self) -> None:
        """Log rules that will impose no check."""
        for field_name, descriptors in self.fields:
            for descriptor in descriptors:
                reason = self.evaluator.inert_reason(field_name, descriptor)
                if reason is None:
                    continue

                self.inert_rules.append(f"{field_name}.{descriptor}")
                logger.warning(
                    f"Rule '{descriptor}' on field '{field_name}' is inert: {reason}",
                    extra={"field_name": field_name, "rule": str(descriptor)},
                )

    def collect_violations(self, payload: Mapping[str, Any] | None) -> list[RuleViolation]:
        """
        Evaluate every declared field and collect the first violation of each.

        Args:
            payload: Field name -> value. Undeclared fields are ignored.

        Returns:
            Violations in field declaration order
        """
        if payload is None:
            payload = {}
        elif not isinstance(payload, Mapping):
            logger.warning(
                f"Payload is a {type(payload).__name__}, not a mapping; treating it as empty",
                extra={"payload_type": type(payload).__name__},
            )
            payload = {}

        violations = []
        for field_name, descriptors in self.fields:
            violation = self.evaluator.first_violation(field_name, payload.get(field_name), descriptors)
            if violation is not None:
                logger.debug(
                    f"Field '{field_name}' failed rule '{violation.rule_name}'",
                    extra={"field_name": field_name, "rule_name": violation.rule_name},
                )
                violations.append(violation)

        return violations

    def validate_payload(self, payload: Mapping[str, Any] | None) -> ValidationResult:
        """
        Validate a payload against all declared fields.

        Args:
            payload: The request payload (e.g. a parsed JSON body)

        Returns:
            ValidationResult with pass/fail status and per-field messages
        """
        start = time.perf_counter()
        violations = self.collect_violations(payload)
        duration = time.perf_counter() - start

        errors = {violation.field_name: violation.message for violation in violations}
        passed = len(errors) == 0

        record_validation(
            passed,
            [(violation.field_name, violation.rule_name) for violation in violations],
            duration,
        )

        if not passed:
            logger.info(
                f"Validation failed for fields: {', '.join(errors)}",
                extra={"failed_fields": list(errors)},
            )

        return ValidationResult(passed=passed, errors=errors)

    def validate_batch(self, payloads: list[Mapping[str, Any]]) -> list[ValidationResult]:
        """
        Validate a batch of payloads.

        Args:
            payloads: List of payload mappings

        Returns:
            List of ValidationResult objects, one per payload
        """
        return [self.validate_payload(payload) for payload in payloads]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts, declared fields and inert rules
        """
        return {
            "total_rules": sum(len(descriptors) for _, descriptors in self.fields),
            "fields": [field_name for field_name, _ in self.fields],
            "rules_by_name": self._count_by_name(),
            "inert_rules": list(self.inert_rules),
        }

    def _count_by_name(self) -> dict[str, int]:
        """Count rules by rule name."""
        counts: dict[str, int] = {}
        for _, descriptors in self.fields:
            for descriptor in descriptors:
                counts[descriptor.name] = counts.get(descriptor.name, 0) + 1
        return counts
