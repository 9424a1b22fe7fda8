"""
Rule configuration management.

Loads validation specs from YAML files and provides a builder
for assembling specs programmatically.
"""

from pathlib import Path
from typing import Any

import yaml

from rulegate.core.models import ValidationSpec

from .rule_parser import PARAMETER_SEPARATOR, RULE_SEPARATOR


class RuleConfigLoader:
    """
    Loads a validation spec from a YAML configuration file.

    Expected YAML format:
    ```yaml
    rules:
      name: "required|min:3|max:5"

      price:
        - required
        - decimal:2
    ```

    A field maps either to a rule string or to a list of rule tokens.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_spec(self) -> ValidationSpec:
        """
        Load and parse the validation spec from the YAML file.

        Returns:
            ValidationSpec with fields in file order

        Raises:
            ValueError: If YAML is invalid or a field's rules are malformed
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        field_rules = config["rules"] or {}
        if not isinstance(field_rules, dict):
            raise ValueError("'rules' section must map field names to rules")

        rules = {}
        for field_name, field_rule_def in field_rules.items():
            rules[str(field_name)] = self._parse_field(str(field_name), field_rule_def)

        return ValidationSpec(rules=rules)

    def _parse_field(self, field_name: str, field_rule_def: Any) -> str:
        """
        Normalize one field's rules to a rule string.

        Args:
            field_name: The field these rules apply to
            field_rule_def: A rule string or a list of rule tokens

        Returns:
            Pipe-delimited rule string

        Raises:
            ValueError: If the definition is neither a string nor a list of strings
        """
        if isinstance(field_rule_def, str):
            return field_rule_def

        if isinstance(field_rule_def, list):
            if not all(isinstance(token, str) for token in field_rule_def):
                raise ValueError(f"Rules for field '{field_name}' must be strings")
            return RULE_SEPARATOR.join(field_rule_def)

        raise ValueError(
            f"Rules for field '{field_name}' must be a rule string or a list, "
            f"got {type(field_rule_def).__name__}"
        )


class RuleConfigBuilder:
    """
    Programmatically build validation specs (for testing or dynamic rules).
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: dict[str, list[str]] = {}

    def add_rule(self, field_name: str, rule: str, parameter: Any = None) -> "RuleConfigBuilder":
        """Append a rule token to a field, keeping insertion order."""
        token = rule if parameter is None else f"{rule}{PARAMETER_SEPARATOR}{parameter}"
        self.rules.setdefault(field_name, []).append(token)
        return self

    def add_required(self, field_name: str) -> "RuleConfigBuilder":
        """Add a required rule."""
        return self.add_rule(field_name, "required")

    def add_min(self, field_name: str, length: int) -> "RuleConfigBuilder":
        """Add a minimum text length rule."""
        return self.add_rule(field_name, "min", length)

    def add_max(self, field_name: str, length: int) -> "RuleConfigBuilder":
        """Add a maximum text length rule."""
        return self.add_rule(field_name, "max", length)

    def add_numeric(self, field_name: str) -> "RuleConfigBuilder":
        """Add a numeric rule."""
        return self.add_rule(field_name, "numeric")

    def add_decimal(self, field_name: str, places: int = 0) -> "RuleConfigBuilder":
        """Add a decimal places rule."""
        return self.add_rule(field_name, "decimal", places)

    def build(self) -> ValidationSpec:
        """Build and return the validation spec."""
        return ValidationSpec(rules={
            field_name: RULE_SEPARATOR.join(tokens)
            for field_name, tokens in self.rules.items()
        })
