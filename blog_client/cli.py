"""Blog client - command-line entry point.

Usage:
    python -m blog_client list
    python -m blog_client add --title "Hello" --content "World" --author "Amy"
"""

import argparse
import asyncio
import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .api import BlogApiClient
from .config import ClientSettings
from .page import BlogPage
from .render import print_posts

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    default_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    level = logging.DEBUG if verbose else getattr(logging, default_level, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blog-client",
        description="List and create blog posts through the blog API gateway.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Show every post")

    add = subparsers.add_parser("add", help="Create a post, then show every post")
    add.add_argument("--title", required=True, help="Post title (max 200 characters)")
    add.add_argument("--content", required=True, help="Post body")
    add.add_argument("--author", default="", help="Author name (optional)")
    return parser


async def main_async(args: argparse.Namespace, client: BlogApiClient) -> int:
    """Mount the page, optionally submit the form, then print the list."""
    page = BlogPage(client)
    await page.mount()

    if args.command == "add":
        page.edit("title", args.title)
        page.edit("content", args.content)
        page.edit("author", args.author)
        await page.submit()

    print_posts(console, page.state.posts)

    errors = [error for error in (page.state.submit_error, page.state.load_error) if error]
    for error in errors:
        console.print(f"[red]{escape(error)}[/red]")
    return 1 if errors else 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    load_dotenv()
    setup_logging(args.verbose)

    client = BlogApiClient.from_settings(ClientSettings.from_env())
    return asyncio.run(main_async(args, client))
