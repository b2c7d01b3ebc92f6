# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error response schemas."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    See https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str = Field(
        default="about:blank",
        description="URI reference identifying the problem type.",
    )
    title: str = Field(description="Short human-readable summary of the problem.")
    status: int = Field(description="HTTP status code.")
    detail: str = Field(
        default="",
        description="Human-readable explanation specific to this occurrence.",
    )
    request_id: str = Field(
        default="",
        description="Correlation ID for tracing this request in logs.",
    )
    instance: str = Field(
        default="",
        description="URI reference identifying the specific occurrence of the problem.",
    )


class FieldError(BaseModel):
    """A user-correctable error attached to one form field."""

    field: str
    code: str
    message: str


class FormErrorResponse(ErrorResponse):
    """Problem Details plus the field errors and the submitted form for redisplay."""

    errors: list[FieldError] = []
    form: dict = Field(
        default_factory=dict,
        description="Submitted form values, echoed back so the client can redisplay them.",
    )
