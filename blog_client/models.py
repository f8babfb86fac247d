"""Pydantic models for gateway responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Post(BaseModel):
    """A post as returned by ``GET /posts`` and ``POST /posts``."""

    id: int
    title: str
    content: str
    author: str | None = None
    created_at: datetime | None = None
