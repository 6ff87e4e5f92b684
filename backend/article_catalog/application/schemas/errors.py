"""Error bodies returned by the API's exception handlers."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """Generic error body."""

    message: str
    status_code: int
    trace_id: str
    detail: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ValidationErrorResponse(ErrorResponse):
    """Validation failure, with messages grouped by offending field."""

    message: str = "Validation failed"
    errors: dict[str, list[str]] = Field(default_factory=dict)
