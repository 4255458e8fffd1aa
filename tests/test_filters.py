from redditfeed.config import DisplayType, ImageQuality
from redditfeed.filters import has_valid_thumbnail, is_eligible
from redditfeed.models import ImageVariant, ImageVariantSet, PreviewData, RawPost

THUMB = "https://b.thumbs.redditmedia.com/thumb.jpg"


def _post(thumbnail: str | None, preview: PreviewData | None = None) -> RawPost:
    return RawPost(title="A post", thumbnail=thumbnail, preview=preview)


def test_has_valid_thumbnail_rejects_sentinels() -> None:
    for value in ["self", "default", "nsfw", "spoiler", "", None]:
        assert not has_valid_thumbnail(value)
    assert has_valid_thumbnail(THUMB)


def test_has_valid_thumbnail_requires_http_prefix() -> None:
    assert not has_valid_thumbnail("thumbs/https://example.com/a.jpg")


def test_is_eligible_rejects_self_thumbnail() -> None:
    assert not is_eligible(_post("self"), DisplayType.HEADLINES)


def test_is_eligible_image_mode_requires_preview() -> None:
    post = _post(THUMB)
    assert is_eligible(post, DisplayType.HEADLINES)
    assert not is_eligible(post, DisplayType.IMAGE)


def test_is_eligible_image_mode_with_preview() -> None:
    source = ImageVariant(url="https://preview.redd.it/src.jpg", width=640, height=480)
    post = _post(THUMB, PreviewData(images=[ImageVariantSet(source=source, resolutions=[source])]))
    assert is_eligible(post, DisplayType.IMAGE, ImageQuality.HIGH)
