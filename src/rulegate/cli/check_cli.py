"""
Command-line interface for checking payloads against rule files.

Usage:
    python -m rulegate.cli.check_cli check --rules <rules.yaml> --payload <body.json> [options]
"""

import argparse
import json
import sys
from pathlib import Path

from rulegate.core.rules import RuleConfigLoader, RuleEngine
from rulegate.observability.logger import get_logger, log_operation

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def load_payload(payload_path: Path) -> object:
    """
    Read a JSON payload file.

    Args:
        payload_path: Path to a JSON document

    Returns:
        The decoded JSON value

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON
    """
    if not payload_path.exists():
        raise FileNotFoundError(f"Payload file not found: {payload_path}")

    with open(payload_path) as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Payload file is not valid JSON: {e}")


def check_command(args) -> int:
    """
    Execute the check command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit status
    """
    try:
        with log_operation("Loading rules", logger=logger, rules_path=args.rules):
            spec = RuleConfigLoader(args.rules).load_spec()
        payload = load_payload(Path(args.payload))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot run check: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    engine = RuleEngine(spec)
    result = engine.validate_payload(payload)

    if args.format == "json":
        print(json.dumps(result.model_dump(), indent=2))
    elif result.passed:
        print(f"OK: {len(spec)} field(s) valid")
    else:
        print(f"INVALID: {len(result.errors)} field(s) failed")
        for field_name, message in result.errors.items():
            print(f"  {field_name}: {message}")

    return EXIT_VALID if result.passed else EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rulegate",
        description="Check JSON payloads against rule-string validation specs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a request body against a rule file
  rulegate check --rules config/signup_rules.yaml --payload body.json

  # Machine-readable result
  rulegate check --rules config/signup_rules.yaml --payload body.json --format json
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Check a payload file")
    check_parser.add_argument(
        "--rules",
        required=True,
        help="Path to validation rules YAML file"
    )
    check_parser.add_argument(
        "--payload",
        required=True,
        help="Path to JSON payload file"
    )
    check_parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    if args.command == "check":
        return check_command(args)

    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
