"""Page state and its transitions.

The page holds an immutable :class:`BlogState`. Every event produces a new
state through one of the pure functions below, so the whole state machine can
be exercised without a network.

List requests are numbered when they start. A list result is applied only if
it is newer than the last one applied, so when two submissions interleave the
refetch that started last wins. Each refetch starts only after its own insert
finished, which means the winning list contains every completed submission.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from .models import Post

FORM_FIELDS = ("title", "content", "author")


@dataclass(frozen=True)
class PostDraft:
    """The in-progress new-post form."""

    title: str = ""
    content: str = ""
    author: str = ""


@dataclass(frozen=True)
class BlogState:
    posts: Tuple[Post, ...] = ()
    draft: PostDraft = field(default_factory=PostDraft)
    pending_submissions: int = 0
    issued_load: int = 0
    applied_load: int = 0
    load_error: Optional[str] = None
    submit_error: Optional[str] = None
    last_created: Optional[Post] = None

    @property
    def is_submitting(self) -> bool:
        return self.pending_submissions > 0


def field_changed(state: BlogState, name: str, value: str) -> BlogState:
    if name not in FORM_FIELDS:
        raise ValueError(f"Unknown form field: {name}")
    return replace(state, draft=replace(state.draft, **{name: value}))


def load_started(state: BlogState) -> Tuple[BlogState, int]:
    """Number a new list request. Returns the new state and the request id."""
    request_id = state.issued_load + 1
    return replace(state, issued_load=request_id), request_id


def load_succeeded(state: BlogState, request_id: int, posts: Iterable[Post]) -> BlogState:
    if request_id <= state.applied_load:
        return state
    return replace(state, posts=tuple(posts), applied_load=request_id, load_error=None)


def load_failed(state: BlogState, request_id: int, error: str) -> BlogState:
    # A newer list already landed; this failure says nothing about it.
    if request_id <= state.applied_load:
        return state
    # The previous list stays on screen.
    return replace(state, load_error=error)


def submit_started(state: BlogState) -> Tuple[BlogState, PostDraft]:
    """Capture the form and clear it. Returns the new state and the captured draft."""
    cleared = replace(
        state,
        draft=PostDraft(),
        pending_submissions=state.pending_submissions + 1,
    )
    return cleared, state.draft


def submit_succeeded(state: BlogState, post: Post) -> BlogState:
    return replace(
        state,
        pending_submissions=max(state.pending_submissions - 1, 0),
        submit_error=None,
        last_created=post,
    )


def submit_failed(state: BlogState, error: str) -> BlogState:
    return replace(
        state,
        pending_submissions=max(state.pending_submissions - 1, 0),
        submit_error=error,
    )
