"""Map raw listing entries into normalized output posts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from redditfeed.config import FeedConfig
from redditfeed.filters import is_eligible
from redditfeed.images import select_image_url
from redditfeed.models import OutputPost, RawPost
from redditfeed.titles import format_title


def _coerce_post(entry: RawPost | Mapping[str, Any]) -> RawPost:
    if isinstance(entry, RawPost):
        return entry
    # Listing children wrap the post as {"kind": "t3", "data": {...}}.
    if "data" in entry and isinstance(entry["data"], Mapping):
        entry = entry["data"]
    return RawPost.model_validate(entry)


def _iter_valid_posts(raw_posts: Iterable[RawPost | Mapping[str, Any]]) -> Iterable[RawPost]:
    for position, entry in enumerate(raw_posts):
        try:
            yield _coerce_post(entry)
        except (ValidationError, TypeError) as exc:
            logger.warning("Skipping malformed post at position {}: {}", position, exc)


def build_output_post(post: RawPost, config: FeedConfig) -> OutputPost:
    return OutputPost(
        title=format_title(post.title, config.title_replacements, config.character_limit),
        score=post.score,
        thumbnail=post.thumbnail,
        src=select_image_url(post.preview, post.thumbnail, config.image_quality),
        gilded=post.gilded,
        num_comments=post.num_comments,
        subreddit=post.subreddit,
        author=post.author,
    )


def assemble_feed(
    raw_posts: Iterable[RawPost | Mapping[str, Any]],
    config: FeedConfig,
) -> list[OutputPost]:
    """Filter raw posts for display and normalize the survivors, preserving order."""

    posts: list[OutputPost] = []
    for post in _iter_valid_posts(raw_posts):
        if not is_eligible(post, config.display_type, config.image_quality):
            continue
        posts.append(build_output_post(post, config))
    return posts
