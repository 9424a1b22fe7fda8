"""
Core validation engine: models, validators, rules and the failure signal.
"""

from .errors import ValidationFailed

__all__ = ["ValidationFailed"]
