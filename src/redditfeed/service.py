"""Fetch cycle orchestration for redditfeed."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from loguru import logger
from pydantic import ValidationError

from redditfeed.assembler import assemble_feed
from redditfeed.client import (
    FeedFetchError,
    FeedUnavailableError,
    MalformedFeedError,
    extract_children,
    fetch_feed_page,
)
from redditfeed.config import FeedConfig
from redditfeed.models import FeedResult

GENERIC_FETCH_ERROR = "An error occurred while fetching Reddit data."
NO_POSTS_ERROR = (
    "No posts returned. Ensure the subreddit name is spelled correctly. "
    "Private subreddits are also inaccessible."
)


def run_fetch_cycle(
    config: FeedConfig,
    *,
    fetch: Callable[[FeedConfig], Any] = fetch_feed_page,
) -> FeedResult:
    """Fetch one feed page and assemble it, reporting failures as a message.

    Every failure is logged and converted into ``FeedResult.error`` so a caller
    polling on a timer can simply try again on its next cycle.
    """

    try:
        body = fetch(config)
        children = extract_children(body)
        posts = assemble_feed(children, config)
    except FeedUnavailableError as exc:
        logger.error("Error fetching Reddit data: {}", exc)
        if exc.status_code is None:
            return FeedResult(error=GENERIC_FETCH_ERROR)
        return FeedResult(error=f"Error fetching Reddit data: {exc.status_code}")
    except MalformedFeedError as exc:
        logger.error("{}: {}", NO_POSTS_ERROR, exc)
        return FeedResult(error=NO_POSTS_ERROR)
    except FeedFetchError as exc:
        logger.error("Reddit fetch failed: {}", exc)
        return FeedResult(error=GENERIC_FETCH_ERROR)
    except (re.error, ValidationError) as exc:
        logger.error("Invalid configuration: {}", exc)
        return FeedResult(error=f"Invalid configuration: {exc}")
    except Exception:
        logger.exception("Reddit fetch failed")
        return FeedResult(error=GENERIC_FETCH_ERROR)

    logger.debug("Kept {} of {} fetched posts", len(posts), len(children))
    return FeedResult(posts=posts)
