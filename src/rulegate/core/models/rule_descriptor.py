"""
RuleDescriptor model representing one parsed rule token (ephemeral).
"""

from pydantic import BaseModel, Field


class RuleDescriptor(BaseModel):
    """
    A single rule parsed from a rule string.

    Attributes:
        name: Rule name ("required", "min", "decimal", ...)
        parameter: Raw text after the first ':' (None when the token has no ':')
    """

    name: str = Field(..., min_length=1)
    parameter: str | None = None

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "min",
                "parameter": "8"
            }
        }

    def __str__(self) -> str:
        if self.parameter is None:
            return self.name
        return f"{self.name}:{self.parameter}"
