"""Persistence layer for blog posts.

Two backends implement the same two calls. :class:`SupabasePostStore` talks to
the hosted Postgres through the Supabase client and is used whenever the
service-role credentials are configured. :class:`SqlPostStore` runs the same
schema through Flask-SQLAlchemy (SQLite by default) for local development and
tests.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from flask_sqlalchemy import SQLAlchemy
from postgrest.exceptions import APIError
from sqlalchemy import select
from sqlalchemy.exc import (
    DataError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from supabase import Client as SupabaseClient, create_client

from ..config import GatewaySettings
from ..extensions import db
from ..models import Post
from .result import (
    CONNECTIVITY,
    CONSTRAINT,
    STORE,
    StoreError,
    StoreFailure,
    StoreOk,
    StoreResult,
)

logger = logging.getLogger(__name__)

TABLE = "posts"

# Paste into the Supabase SQL editor to bootstrap a new project.
SCHEMA_SQL = """
CREATE TABLE posts (
  id SERIAL PRIMARY KEY,
  title VARCHAR(200) NOT NULL,
  content TEXT NOT NULL,
  author VARCHAR(100),
  created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE comments (
  id SERIAL PRIMARY KEY,
  post_id INTEGER REFERENCES posts(id) ON DELETE CASCADE,
  author VARCHAR(100),
  content TEXT NOT NULL,
  created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""

# Postgres SQLSTATE classes: 08 connection exception, 22 data exception,
# 23 integrity constraint violation.
_CONNECTIVITY_SQLSTATE_PREFIXES = ("08",)
_CONSTRAINT_SQLSTATE_PREFIXES = ("22", "23")
_UNDEFINED_TABLE_CODES = {"42P01", "PGRST205"}


class PostStore:
    """Interface shared by the store backends."""

    name = "abstract"

    def list_posts(self) -> StoreResult:
        raise NotImplementedError

    def create_post(self, title: str, content: str, author: Optional[str] = None) -> StoreResult:
        raise NotImplementedError


def _error_from_api(exc: APIError) -> StoreError:
    code = str(getattr(exc, "code", "") or "")
    message = getattr(exc, "message", None) or str(exc)

    if code in _UNDEFINED_TABLE_CODES:
        logger.warning("Table '%s' is missing. Create it in the Supabase SQL editor:\n%s", TABLE, SCHEMA_SQL)
    if code.startswith(_CONNECTIVITY_SQLSTATE_PREFIXES):
        return StoreError(CONNECTIVITY, message, retryable=True)
    if code.startswith(_CONSTRAINT_SQLSTATE_PREFIXES):
        return StoreError(CONSTRAINT, message)
    return StoreError(STORE, message)


def _error_from_transport(exc: httpx.HTTPError) -> StoreError:
    return StoreError(CONNECTIVITY, f"Supabase is unreachable: {exc}", retryable=True)


class SupabasePostStore(PostStore):
    """Post store backed by the hosted Supabase database."""

    name = "supabase"

    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: GatewaySettings) -> "SupabasePostStore":
        client = create_client(settings.supabase_url, settings.supabase_service_role_key)
        logger.info("Supabase client initialised for %s", settings.supabase_url)
        return cls(client)

    def list_posts(self) -> StoreResult:
        try:
            response = self._client.table(TABLE).select("*").execute()
        except APIError as exc:
            return StoreFailure(_error_from_api(exc))
        except httpx.HTTPError as exc:
            return StoreFailure(_error_from_transport(exc))
        except ValueError as exc:
            return StoreFailure(_error_from_unreadable(exc))
        return StoreOk(list(response.data or []))

    def create_post(self, title: str, content: str, author: Optional[str] = None) -> StoreResult:
        row: Dict[str, Any] = {"title": title, "content": content, "author": author}
        try:
            response = self._client.table(TABLE).insert(row).execute()
        except APIError as exc:
            return StoreFailure(_error_from_api(exc))
        except httpx.HTTPError as exc:
            return StoreFailure(_error_from_transport(exc))
        except ValueError as exc:
            return StoreFailure(_error_from_unreadable(exc))

        rows = list(response.data or [])
        if not rows:
            return StoreFailure(StoreError(STORE, "Insert succeeded but no row was returned."))
        return StoreOk(rows[:1])


def _error_from_unreadable(exc: ValueError) -> StoreError:
    # Non-JSON bodies, e.g. an HTML page from a proxy in front of Supabase.
    logger.warning("supabase.response.unreadable", extra={"error": str(exc)})
    return StoreError(STORE, f"Supabase returned an unreadable response: {exc}")


def _error_from_sqlalchemy(exc: SQLAlchemyError) -> StoreError:
    message = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, (IntegrityError, DataError)):
        return StoreError(CONSTRAINT, message)
    if isinstance(exc, (OperationalError, InterfaceError, DisconnectionError)):
        return StoreError(CONNECTIVITY, message, retryable=True)
    return StoreError(STORE, message)


class SqlPostStore(PostStore):
    """Post store backed by the local SQLAlchemy database.

    Must be called inside an application context; the gateway's request
    handlers always are.
    """

    name = "sqlalchemy"

    def __init__(self, database: SQLAlchemy = db) -> None:
        self._db = database

    def list_posts(self) -> StoreResult:
        session = self._db.session
        try:
            posts = session.execute(select(Post)).scalars().all()
            rows = [post.to_dict() for post in posts]
        except SQLAlchemyError as exc:
            session.rollback()
            return StoreFailure(_error_from_sqlalchemy(exc))
        return StoreOk(rows)

    def create_post(self, title: str, content: str, author: Optional[str] = None) -> StoreResult:
        session = self._db.session
        post = Post(title=title, content=content, author=author)
        try:
            session.add(post)
            session.commit()
            row = post.to_dict()
        except SQLAlchemyError as exc:
            session.rollback()
            return StoreFailure(_error_from_sqlalchemy(exc))
        return StoreOk([row])


def build_post_store(settings: GatewaySettings) -> PostStore:
    """Return the Supabase store when credentials exist, else the local one."""

    if settings.uses_supabase:
        return SupabasePostStore.from_settings(settings)

    logger.info("Supabase credentials not configured; using local database store")
    return SqlPostStore(db)
