"""
Rule parsing, field evaluation, the rule engine and configuration management.
"""

from .field_evaluator import VALIDATOR_REGISTRY, FieldEvaluator, evaluate
from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import RuleEngine
from .rule_parser import parse_rule, parse_rules, parse_spec

__all__ = [
    "parse_rule",
    "parse_rules",
    "parse_spec",
    "VALIDATOR_REGISTRY",
    "FieldEvaluator",
    "evaluate",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
]
