"""
Request and response schemas for the Blog API.

JSON bodies are parsed into these models at the HTTP boundary, so the
store only ever receives well-formed values. Field names follow the
wire format (``firstName``/``lastName``), not the column names.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.errors import ValidationError


def _require_text(value: str | None) -> str:
    """Reject None and whitespace-only strings."""
    if value is None or not value.strip():
        raise ValueError("must be a non-empty string")
    return value


class AuthorIn(BaseModel):
    """Structured author name as submitted by clients."""

    firstName: str
    lastName: str

    @field_validator("firstName", "lastName")
    @classmethod
    def check_names(cls, value: str) -> str:
        return _require_text(value)


class PostCreate(BaseModel):
    """Body of ``POST /posts``."""

    author: AuthorIn
    title: str
    content: str

    @field_validator("title", "content")
    @classmethod
    def check_text(cls, value: str) -> str:
        return _require_text(value)


class PostUpdate(BaseModel):
    """
    Body of ``PUT /posts/<id>``.

    Only ``title`` and ``content`` may change; other keys (including
    ``author``) are ignored. A field that is sent must not be blank.
    """

    id: str | None = None
    title: str | None = None
    content: str | None = None

    @field_validator("title", "content")
    @classmethod
    def check_text(cls, value: str | None) -> str:
        return _require_text(value)

    def changes(self) -> dict[str, str]:
        """Return only the fields the client actually sent."""
        return {
            name: getattr(self, name)
            for name in ("title", "content")
            if name in self.model_fields_set
        }


class BlogPostView(BaseModel):
    """Wire representation of a stored post."""

    id: str
    author: str
    title: str
    content: str
    created: datetime | None = None


def _describe(error: dict[str, Any]) -> str:
    """Turn one pydantic error entry into a client-facing message."""
    field = ".".join(str(part) for part in error["loc"])
    if error["type"] == "missing":
        return f"'{field}' is required"
    return f"'{field}' is invalid: {error['msg']}"


def parse_body(schema: type[BaseModel], data: Any) -> Any:
    """
    Validate a decoded JSON body against a schema.

    Args:
        schema: Pydantic model class describing the body.
        data: Decoded JSON value (anything ``request.get_json`` returns).

    Returns:
        Instance of ``schema``.

    Raises:
        ValidationError: If the body is not a JSON object or a field
            is missing or malformed.
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc.errors()[0])) from exc
