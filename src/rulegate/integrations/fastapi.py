"""FastAPI integration

Mounts a rule-string spec on a route as a request-body dependency and maps
ValidationFailed to an HTTP 400 JSON response.

Usage:
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/signup")
    async def signup(body: dict = validated_body({"name": "required|min:3"})):
        ...
"""

from collections.abc import Mapping
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from rulegate.core.errors import ValidationFailed
from rulegate.core.models import ValidationSpec
from rulegate.core.rules import RuleEngine
from rulegate.core.validators import BaseValidator
from rulegate.observability.logger import get_logger

log = get_logger(__name__)


class ValidatedBody:
    """FastAPI dependency returning the request's JSON body once it passes the field rules.

    Usage:
        @router.post("/users")
        async def create_user(body: dict = Depends(ValidatedBody({"email": "required"}))):
            ...
    """

    def __init__(
        self,
        spec: Mapping[str, str] | ValidationSpec,
        extra_validators: Mapping[str, type[BaseValidator]] | None = None,
    ):
        self.engine = RuleEngine(spec, extra_validators)

    async def __call__(self, request: Request) -> dict[str, Any]:
        try:
            body = await request.json()
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid JSON in request body: {e}")

        result = self.engine.validate_payload(body)
        if not result.passed:
            raise ValidationFailed(result.errors)

        return body


def validated_body(
    spec: Mapping[str, str] | ValidationSpec,
    extra_validators: Mapping[str, type[BaseValidator]] | None = None,
) -> Any:
    """FastAPI dependency factory for a validated request body."""
    return Depends(ValidatedBody(spec, extra_validators))


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    """Convert ValidationFailed into a 400 response listing each failing field."""
    log.warning(
        "validation_failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "failed_fields": list(exc.errors),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """Install the ValidationFailed handler on an application."""
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
