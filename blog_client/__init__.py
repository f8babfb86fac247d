"""Client application for the blog API gateway."""

from .api import BlogApiClient, BlogApiError
from .page import BlogPage
from .state import BlogState, PostDraft

__all__ = ["BlogApiClient", "BlogApiError", "BlogPage", "BlogState", "PostDraft"]
