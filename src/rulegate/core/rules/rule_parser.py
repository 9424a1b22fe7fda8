"""
Rule string parsing.

A rule string is a '|'-delimited list of rule tokens, each a rule name
optionally followed by ':' and a parameter:

    "required|min:8|max:8"  ->  required, min(8), max(8)

Rule names are not checked here. Unknown names reach the field evaluator,
which has no validator for them, so they impose no check.
"""

from collections.abc import Mapping

from rulegate.core.models import RuleDescriptor, ValidationSpec

RULE_SEPARATOR = "|"
PARAMETER_SEPARATOR = ":"


def parse_rule(token: str) -> RuleDescriptor | None:
    """
    Parse a single rule token.

    Args:
        token: One token of a rule string ("min:8", "required")

    Returns:
        RuleDescriptor, or None for an empty token
    """
    name, separator, parameter = token.partition(PARAMETER_SEPARATOR)
    name = name.strip()
    if not name:
        return None

    return RuleDescriptor(name=name, parameter=parameter if separator else None)


def parse_rules(rule_string: str) -> tuple[RuleDescriptor, ...]:
    """
    Split a rule string into ordered rule descriptors.

    Args:
        rule_string: Pipe-delimited rules ("required|min:3|max:5")

    Returns:
        Descriptors in the order they were written. Empty tokens are dropped.

    Examples:
        >>> [str(d) for d in parse_rules("required|min:3")]
        ['required', 'min:3']
    """
    descriptors = []
    for token in rule_string.split(RULE_SEPARATOR):
        descriptor = parse_rule(token)
        if descriptor is not None:
            descriptors.append(descriptor)
    return tuple(descriptors)


def parse_spec(
    spec: "Mapping[str, str] | ValidationSpec",
) -> tuple[tuple[str, tuple[RuleDescriptor, ...]], ...]:
    """
    Parse every field of a validation spec, keeping declaration order.

    Args:
        spec: Field name -> rule string

    Returns:
        (field_name, descriptors) pairs
    """
    spec = ValidationSpec.from_mapping(spec)
    return tuple(
        (field_name, parse_rules(rule_string))
        for field_name, rule_string in spec.items()
    )
