"""The blog page: a post list and a new-post form bound to the gateway."""

from __future__ import annotations

import logging
from typing import Optional

from .api import BlogApiClient, BlogApiError
from .render import render_posts
from .state import (
    BlogState,
    field_changed,
    load_failed,
    load_started,
    load_succeeded,
    submit_failed,
    submit_started,
    submit_succeeded,
)

logger = logging.getLogger(__name__)


class BlogPage:
    """Drives :class:`BlogState` from user events and gateway responses.

    Failures never reach the caller. A failed load keeps the previous list; a
    failed submit still clears the form. Both are logged and recorded on
    ``state.load_error`` and ``state.submit_error``.
    """

    def __init__(self, client: BlogApiClient, state: Optional[BlogState] = None) -> None:
        self._client = client
        self._state = state or BlogState()

    @property
    def state(self) -> BlogState:
        return self._state

    def edit(self, name: str, value: str) -> None:
        self._state = field_changed(self._state, name, value)

    async def mount(self) -> None:
        await self.refresh()

    async def refresh(self) -> None:
        self._state, request_id = load_started(self._state)
        try:
            posts = await self._client.list_posts()
        except BlogApiError as exc:
            logger.warning("page.load.failed", extra={"request_id": request_id, "error_kind": exc.kind})
            self._state = load_failed(self._state, request_id, exc.message)
            return
        self._state = load_succeeded(self._state, request_id, posts)

    async def submit(self) -> None:
        self._state, draft = submit_started(self._state)
        try:
            post = await self._client.create_post(
                draft.title,
                draft.content,
                draft.author or None,
            )
        except BlogApiError as exc:
            logger.warning("page.submit.failed", extra={"error_kind": exc.kind})
            self._state = submit_failed(self._state, exc.message)
        else:
            self._state = submit_succeeded(self._state, post)
        await self.refresh()

    def render(self) -> str:
        return render_posts(self._state.posts)
