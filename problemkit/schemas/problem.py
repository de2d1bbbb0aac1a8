"""
Problem document schema, used to describe error responses in OpenAPI.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProblemDocument(BaseModel):
    """RFC7807 body returned for all 4xx/5xx responses. Extension properties sit next to the standard ones."""
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = Field(default=None, description='Error category URI. Absent means "about:blank".')
    title: Optional[str] = None
    status: int
    detail: Optional[str] = None
    instance: Optional[str] = Field(default=None, description="Path of the failing request.")


class Violation(BaseModel):
    """A single field-level validation error, listed under `violations`."""
    field: str
    message: str
