"""Text rendering of the post list."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .models import Post


def byline(post: Post) -> str:
    return f"By {post.author or ''}"


def render_posts(posts: Iterable[Post]) -> str:
    """Render each post as its title, content and byline, separated by blank lines."""
    blocks = [f"{post.title}\n{post.content}\n{byline(post)}" for post in posts]
    return "\n\n".join(blocks)


def print_posts(console: Console, posts: Iterable[Post]) -> None:
    posts = list(posts)
    if not posts:
        console.print("[dim]No posts yet.[/dim]")
        return
    for post in posts:
        console.print(Panel(
            f"{escape(post.content)}\n\n[italic]{escape(byline(post))}[/italic]",
            title=f"[bold]{escape(post.title)}[/bold]",
            title_align="left",
            border_style="cyan",
        ))
