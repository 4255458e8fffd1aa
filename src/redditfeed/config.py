"""Configuration models and enums for redditfeed."""

from __future__ import annotations

import json
import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FeedType(str, Enum):
    HOT = "hot"
    NEW = "new"
    RISING = "rising"
    TOP = "top"
    CONTROVERSIAL = "controversial"
    BEST = "best"


class DisplayType(str, Enum):
    HEADLINES = "headlines"
    LIST = "list"
    IMAGE = "image"


class ImageQuality(str, Enum):
    """Image quality preference, declared in ascending order."""

    LOW = "low"
    MID = "mid"
    MID_HIGH = "mid-high"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return list(ImageQuality).index(self)


class TitleRule(BaseModel):
    """A regex substitution applied to every occurrence in a post title."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    to_replace: str
    replacement: str = ""
    case_sensitive: bool = True

    @field_validator("to_replace")
    @classmethod
    def validate_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"Invalid title replacement pattern {value!r}: {exc}") from exc
        return value


class FeedConfig(BaseModel):
    """Per-cycle settings for fetching and shaping one feed page."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    subreddit: str | list[str] = "all"
    feed_type: FeedType = Field(default=FeedType.HOT, alias="type")
    count: int = Field(default=10, ge=1, le=100)
    display_type: DisplayType = DisplayType.HEADLINES
    image_quality: ImageQuality = ImageQuality.MID_HIGH
    title_replacements: list[TitleRule] = Field(default_factory=list)
    character_limit: int | None = Field(default=None, ge=0)


def load_config(path: Path) -> FeedConfig:
    """Load and validate a FeedConfig from a JSON file."""

    if not path.exists() or not path.is_file():
        raise ValueError(f"Config file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Config file is not valid JSON: {path}: {exc}") from exc

    return FeedConfig.model_validate(data)
