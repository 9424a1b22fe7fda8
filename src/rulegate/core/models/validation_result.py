"""
ValidationResult model representing the outcome of validating a payload (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of validating one payload against a ValidationSpec.

    Note: ValidationResult is produced fresh per invocation and never cached.

    Attributes:
        passed: Overall validation status
        errors: Field name -> first violation message, in field declaration order
    """

    passed: bool
    errors: dict[str, str] = Field(default_factory=dict)

    @field_validator('errors')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies errors is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but errors is not empty")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "passed": False,
                "errors": {
                    "name": "The name field must be at least 3 characters.",
                    "price": "The price field must have 2 decimal places."
                }
            }
        }

    @property
    def failed_fields(self) -> list[str]:
        """Names of the fields that failed, in declaration order."""
        return list(self.errors)
