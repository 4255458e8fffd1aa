"""Domain models used by redditfeed."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError, ValidatorFunctionWrapHandler, field_validator


class ImageVariant(BaseModel):
    """One rendition of a post image."""

    url: str
    width: int
    height: int


class ImageVariantSet(BaseModel):
    """All renditions of a single image: the original plus scaled resolutions."""

    source: ImageVariant | None = None
    resolutions: list[ImageVariant] = Field(default_factory=list)


class PreviewData(BaseModel):
    images: list[ImageVariantSet] | None = None


class RawPost(BaseModel):
    """A post as returned in a listing's `data.children[].data`.

    Upstream data is tolerated where it can be: null counts read as 0 and a
    preview that does not parse is treated as absent.
    """

    title: str
    score: int = 0
    thumbnail: str | None = None
    preview: PreviewData | None = None
    num_comments: int = 0
    subreddit: str = ""
    author: str = ""
    gilded: int = 0

    @field_validator("score", "num_comments", "gilded", mode="before")
    @classmethod
    def null_count_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("preview", mode="wrap")
    @classmethod
    def drop_malformed_preview(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> PreviewData | None:
        try:
            return handler(value)
        except ValidationError:
            return None


class OutputPost(BaseModel):
    """Normalized post record handed to the display layer."""

    title: str
    score: int
    thumbnail: str
    src: str | None = None
    gilded: int
    num_comments: int
    subreddit: str
    author: str


class FeedResult(BaseModel):
    """Outcome of one fetch cycle: either posts or an error message."""

    posts: list[OutputPost] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
