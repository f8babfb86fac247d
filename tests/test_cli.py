from __future__ import annotations

import io
import json

import httpx
import pytest
from rich.console import Console

import blog_client.cli as cli_module
from blog_client.api import BlogApiClient


@pytest.fixture
def gateway(monkeypatch):
    """In-memory gateway shared by a single CLI invocation."""

    rows = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            body = json.loads(request.content)
            if len(body["title"]) > 200:
                return httpx.Response(500, json={"error": {"kind": "constraint", "message": "value too long", "retryable": False}})
            row = {"id": len(rows) + 1, **body, "created_at": "2024-05-01T07:30:00"}
            rows.append(row)
            return httpx.Response(200, json=row)
        return httpx.Response(200, json=rows)

    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(
        cli_module.BlogApiClient,
        "from_settings",
        classmethod(lambda cls, settings: BlogApiClient(base_url=settings.api_url, transport=transport)),
    )
    output = io.StringIO()
    monkeypatch.setattr(cli_module, "console", Console(file=output, width=100, force_terminal=False))
    return rows, output


def test_list_on_empty_gateway(gateway):
    _, output = gateway

    assert cli_module.main(["list"]) == 0
    assert "No posts yet." in output.getvalue()


def test_add_creates_and_prints_post(gateway):
    rows, output = gateway

    exit_code = cli_module.main(["add", "--title", "Hello", "--content", "World", "--author", "Amy"])

    assert exit_code == 0
    assert rows[0]["title"] == "Hello"
    assert rows[0]["author"] == "Amy"
    printed = output.getvalue()
    assert "Hello" in printed
    assert "By Amy" in printed


def test_add_without_author_sends_null(gateway):
    rows, _ = gateway

    assert cli_module.main(["add", "--title", "Hello", "--content", "World"]) == 0
    assert rows[0]["author"] is None


def test_failed_add_exits_non_zero(gateway):
    rows, output = gateway

    exit_code = cli_module.main(["add", "--title", "x" * 201, "--content", "World"])

    assert exit_code == 1
    assert rows == []
    assert "value too long" in output.getvalue()
