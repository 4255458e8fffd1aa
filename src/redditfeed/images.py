"""Preview image selection for image posts."""

from __future__ import annotations

import math

from redditfeed.config import ImageQuality
from redditfeed.models import ImageVariant, PreviewData

# Quality rank is scaled over a fixed 0..4 range, independent of how many
# renditions a post has.
QUALITY_SCALE = 4

# Lists longer than this round to the nearest index instead of flooring.
ROUNDING_THRESHOLD = 5


def is_image_post(preview: PreviewData | None, thumbnail: str | None) -> bool:
    if preview is None or not thumbnail or "http" not in thumbnail:
        return False
    if not preview.images:
        return False
    return preview.images[0].source is not None


def collect_candidates(preview: PreviewData) -> list[ImageVariant]:
    """Return the first image's resolutions with the source appended when it is not already last."""

    image_set = preview.images[0]
    source = image_set.source
    candidates = list(image_set.resolutions)

    if not candidates:
        return [source]

    last = candidates[-1]
    if (last.width, last.height) != (source.width, source.height):
        candidates.append(source)
    return candidates


def select_index(quality: ImageQuality, count: int) -> int:
    quality_percent = quality.rank / QUALITY_SCALE
    position = quality_percent * count

    if count > ROUNDING_THRESHOLD:
        index = math.floor(position + 0.5)
    else:
        index = math.floor(position)

    # Ranks stop at 3/4 of the scale, so this only guards against a longer scale.
    return min(index, count - 1)


def select_image_url(
    preview: PreviewData | None,
    thumbnail: str | None,
    quality: ImageQuality,
) -> str | None:
    """Pick the preview rendition matching quality, or None for non-image posts."""

    if not is_image_post(preview, thumbnail):
        return None

    candidates = collect_candidates(preview)
    return candidates[select_index(quality, len(candidates))].url
