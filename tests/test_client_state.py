from __future__ import annotations

import pytest

from blog_client.models import Post
from blog_client.state import (
    BlogState,
    PostDraft,
    field_changed,
    load_failed,
    load_started,
    load_succeeded,
    submit_failed,
    submit_started,
    submit_succeeded,
)


def _post(post_id: int, title: str = "Hello") -> Post:
    return Post(id=post_id, title=title, content="World", author="Amy")


def test_initial_state_is_idle_and_empty():
    state = BlogState()

    assert state.posts == ()
    assert state.draft == PostDraft()
    assert not state.is_submitting


def test_field_changed_updates_only_that_field():
    state = field_changed(BlogState(), "title", "Hello")
    state = field_changed(state, "author", "Amy")

    assert state.draft == PostDraft(title="Hello", content="", author="Amy")


def test_field_changed_rejects_unknown_fields():
    with pytest.raises(ValueError):
        field_changed(BlogState(), "subject", "Hello")


def test_load_succeeded_replaces_posts():
    state, request_id = load_started(BlogState(posts=(_post(1),)))
    state = load_succeeded(state, request_id, [_post(2), _post(3)])

    assert [post.id for post in state.posts] == [2, 3]
    assert state.applied_load == request_id


def test_load_failed_keeps_previous_posts():
    state, first = load_started(BlogState())
    state = load_succeeded(state, first, [_post(1)])
    state, second = load_started(state)

    state = load_failed(state, second, "Blog API error (500): boom")

    assert [post.id for post in state.posts] == [1]
    assert state.load_error == "Blog API error (500): boom"


def test_stale_load_result_is_discarded():
    state, older = load_started(BlogState())
    state, newer = load_started(state)

    state = load_succeeded(state, newer, [_post(1), _post(2)])
    state = load_succeeded(state, older, [_post(1)])

    assert [post.id for post in state.posts] == [1, 2]


def test_stale_load_failure_does_not_flag_a_newer_list():
    state, older = load_started(BlogState())
    state, newer = load_started(state)

    state = load_succeeded(state, newer, [_post(1), _post(2)])
    state = load_failed(state, older, "Blog API error (500): boom")

    assert state.load_error is None
    assert [post.id for post in state.posts] == [1, 2]


def test_submit_started_captures_draft_and_clears_form():
    state = BlogState(draft=PostDraft(title="Hello", content="World", author="Amy"))

    state, draft = submit_started(state)

    assert draft == PostDraft(title="Hello", content="World", author="Amy")
    assert state.draft == PostDraft()
    assert state.is_submitting


def test_submit_outcomes_leave_posts_for_the_refetch():
    state, _ = submit_started(BlogState(posts=(_post(1),)))
    state, _ = submit_started(state)
    assert state.pending_submissions == 2

    state = submit_succeeded(state, _post(2))
    assert state.pending_submissions == 1
    assert state.last_created.id == 2
    assert [post.id for post in state.posts] == [1]

    state = submit_failed(state, "Blog API error (500): value too long")
    assert not state.is_submitting
    assert state.submit_error == "Blog API error (500): value too long"
    assert [post.id for post in state.posts] == [1]


def test_transitions_do_not_mutate_their_input():
    original = BlogState(draft=PostDraft(title="Hello"))

    submit_started(original)
    field_changed(original, "content", "World")

    assert original.draft == PostDraft(title="Hello")
    assert original.pending_submissions == 0
