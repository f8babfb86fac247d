"""Pydantic request models for the blog API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator


class PostCreate(BaseModel):
    """Body of ``POST /posts``.

    Only presence is checked here. Length limits belong to the store, which
    reports them as constraint failures.
    """

    title: str
    content: str
    author: Optional[str] = None

    @field_validator("title", "content")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("author")
    @classmethod
    def _blank_author_is_anonymous(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``field: message; ...``."""

    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "body"
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)
