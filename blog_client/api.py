import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from .config import ClientSettings, DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS
from .models import Post

# Configure module logger
logger = logging.getLogger(__name__)


class BlogApiError(Exception):
    """Raised when a gateway call fails for any reason."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        kind: Optional[str] = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.kind = kind
        self.retryable = retryable


class BlogApiClient:
    """
    Client for the blog API gateway.

    Each call opens its own ``httpx.AsyncClient`` so calls made concurrently
    from different tasks never share connection state. Nothing is retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        anon_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Gateway root, e.g. ``http://localhost:5000``.
            anon_key: Public Supabase key sent as the ``apikey`` header. Only
                needed when the gateway sits behind Supabase's API gateway.
            timeout: Per-request timeout in seconds.
            transport: Custom httpx transport, used by tests.
        """
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "BlogApiClient":
        return cls(
            base_url=settings.api_url,
            anon_key=settings.anon_key if settings.has_anon_key else None,
            timeout=settings.timeout,
            transport=transport,
        )

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.anon_key:
            headers["apikey"] = self.anon_key
        return headers

    async def _request_json(
        self,
        method: str,
        path: str,
        json_data: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Execute a request and return the decoded JSON body."""
        async with httpx.AsyncClient(
            base_url=self.base_url,
            transport=self._transport,
            timeout=self.timeout,
        ) as client:
            try:
                response = await client.request(
                    method,
                    path,
                    headers=self._get_headers(),
                    json=json_data,
                )
            except httpx.RequestError as e:
                raise BlogApiError(
                    f"Network error: {e}", kind="connectivity", retryable=True
                ) from e

        if response.status_code >= 400:
            kind = None
            retryable = False
            try:
                err_data = response.json().get("error") or {}
                err_msg = err_data.get("message") or response.text
                kind = err_data.get("kind")
                retryable = bool(err_data.get("retryable"))
            except (ValueError, AttributeError):
                err_msg = response.text
            raise BlogApiError(
                f"Blog API error ({response.status_code}): {err_msg}",
                status_code=response.status_code,
                kind=kind,
                retryable=retryable,
            )

        try:
            return response.json()
        except ValueError as e:
            raise BlogApiError(
                "Blog API returned a non-JSON response",
                status_code=response.status_code,
            ) from e

    async def list_posts(self) -> List[Post]:
        """
        Fetch every post.

        Returns:
            Posts in the order the gateway returned them. An empty or null
            body is treated as no posts.
        """
        data = await self._request_json("GET", "/posts")
        if data is None:
            return []
        if not isinstance(data, list):
            raise BlogApiError("Blog API returned an unexpected payload for /posts")
        try:
            return [Post.model_validate(row) for row in data]
        except ValidationError as e:
            raise BlogApiError(f"Blog API returned a malformed post: {e}") from e

    async def create_post(
        self,
        title: str,
        content: str,
        author: Optional[str] = None,
    ) -> Post:
        """
        Create a post.

        Returns:
            The stored post, including its generated id and timestamp.
        """
        payload = {"title": title, "content": content, "author": author}
        data = await self._request_json("POST", "/posts", json_data=payload)
        try:
            post = Post.model_validate(data)
        except ValidationError as e:
            raise BlogApiError(f"Blog API returned a malformed post: {e}") from e
        logger.debug("Created post %s", post.id)
        return post
