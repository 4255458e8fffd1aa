"""Reddit listing URL construction and page fetching."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

import httpx
from loguru import logger

from redditfeed.config import FeedConfig

BASE_URL = "https://www.reddit.com/"
USER_AGENT = "redditfeed/0.1 (dashboard feed helper)"


class FeedFetchError(RuntimeError):
    """Base error for failures while retrieving a feed page."""


class FeedUnavailableError(FeedFetchError):
    """Raised when the upstream request fails or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedFeedError(FeedFetchError):
    """Raised when a response lacks the expected `data.children` listing."""


def format_subreddit(subreddit: str | list[str]) -> str:
    """Join multiple subreddits into Reddit's `a+b+c` multireddit form."""

    if isinstance(subreddit, list):
        return "+".join(subreddit)
    return subreddit


def build_feed_url(config: FeedConfig, base_url: str = BASE_URL) -> str:
    url = base_url
    subreddit = format_subreddit(config.subreddit)
    if subreddit not in {"", "frontpage"}:
        url += f"r/{subreddit}/"

    query = urlencode({"raw_json": 1, "limit": config.count})
    return f"{url}{config.feed_type.value}/.json?{query}"


def extract_children(body: Any) -> list[Any]:
    """Return the listing's post entries or raise MalformedFeedError."""

    data = body.get("data") if isinstance(body, dict) else None
    children = data.get("children") if isinstance(data, dict) else None
    if not isinstance(children, list):
        raise MalformedFeedError("Response has no data.children listing")
    return children


def fetch_feed_page(
    config: FeedConfig,
    *,
    client: httpx.Client | None = None,
    base_url: str = BASE_URL,
    timeout: float = 20.0,
) -> Any:
    """GET one listing page for config and return the decoded JSON body."""

    url = build_feed_url(config, base_url=base_url)
    logger.debug("Fetching feed page {}", url)

    owns_client = client is None
    if owns_client:
        client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )

    try:
        try:
            response = client.get(url)
        except httpx.HTTPError as exc:
            raise FeedUnavailableError(f"Failed to fetch '{url}': {exc}") from exc

        if not response.is_success:
            raise FeedUnavailableError(
                f"Failed to fetch '{url}': {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise FeedFetchError(f"Response from '{url}' is not valid JSON") from exc
    finally:
        if owns_client:
            client.close()
