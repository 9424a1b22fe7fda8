"""
Logging and metrics for the validation engine.
"""

from .logger import get_logger, log_operation, setup_logger
from .metrics import generate_metrics, record_validation

__all__ = [
    "get_logger",
    "setup_logger",
    "log_operation",
    "generate_metrics",
    "record_validation",
]
