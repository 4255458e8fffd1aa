"""Eligibility rules deciding which fetched posts are displayed."""

from __future__ import annotations

from redditfeed.config import DisplayType, ImageQuality
from redditfeed.images import select_image_url
from redditfeed.models import RawPost

# Thumbnail values Reddit uses in place of a URL when a post has no image.
NO_IMAGE_THUMBNAILS = frozenset({"self", "default", "nsfw", "spoiler", "image"})


def has_valid_thumbnail(thumbnail: str | None) -> bool:
    if not thumbnail or thumbnail in NO_IMAGE_THUMBNAILS:
        return False
    return thumbnail.startswith("http")


def is_image_valid(
    post: RawPost,
    display_type: DisplayType,
    quality: ImageQuality = ImageQuality.LOW,
) -> bool:
    if display_type != DisplayType.IMAGE:
        return True
    return select_image_url(post.preview, post.thumbnail, quality) is not None


def is_eligible(
    post: RawPost,
    display_type: DisplayType,
    quality: ImageQuality = ImageQuality.LOW,
) -> bool:
    """Return True when the post has a real thumbnail and, in image mode, a usable preview."""

    return has_valid_thumbnail(post.thumbnail) and is_image_valid(post, display_type, quality)
