"""
Failure signal raised to the host request pipeline.
"""

from typing import Any


class ValidationFailed(Exception):
    """
    Raised when one or more declared fields violate their rules.

    Carries the per-field first violation messages in field declaration
    order. The host pipeline converts it into a transport-level response
    (HTTP 400 by default).
    """

    status = 400

    def __init__(self, errors: dict[str, str], message: str = "The given data was invalid."):
        self.errors = dict(errors)
        self.message = message
        super().__init__(f"{message} Failed fields: {', '.join(self.errors)}")

    @property
    def status_code(self) -> int:
        return self.status

    def to_dict(self) -> dict[str, Any]:
        """Response body for the host pipeline."""
        return {"message": self.message, "errors": dict(self.errors)}
