"""Title post-processing: ordered regex replacements and truncation."""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import reduce

from redditfeed.config import TitleRule

ELLIPSIS = "..."


def apply_rule(title: str, rule: TitleRule) -> str:
    flags = 0 if rule.case_sensitive else re.IGNORECASE
    return re.sub(rule.to_replace, rule.replacement, title, flags=flags)


def truncate_title(title: str, limit: int | None) -> str:
    """Cut title to limit characters, marking it with an ellipsis if it changed length."""

    if limit is None:
        return title

    truncated = title[:limit].strip()
    if len(truncated) != len(title):
        truncated += ELLIPSIS
    return truncated


def format_title(title: str, rules: Sequence[TitleRule], limit: int | None) -> str:
    """Apply rules in order, each to the previous rule's output, then truncate."""

    return truncate_title(reduce(apply_rule, rules, title), limit)
