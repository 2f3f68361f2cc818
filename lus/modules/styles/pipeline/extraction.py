from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Pattern

from ..domain.models import Region


@dataclass(frozen=True)
class MarkerRule:
    start: Pattern[str]
    end: str

    def __post_init__(self) -> None:
        if not self.end:
            raise ValueError("End marker must be a non-empty string")

    @classmethod
    def for_language(cls, lang: str, *, tag: str = "style") -> "MarkerRule":
        """Opening ``<tag ... lang="<lang>" ...>`` and a literal ``</tag>``."""
        name = re.escape(tag)
        value = re.escape(lang)
        pattern = re.compile(
            rf"<{name}\s(?:[^>]*?\s)?lang\s*=\s*(?:\"{value}\"|'{value}')[^>]*>",
            re.IGNORECASE,
        )
        return cls(start=pattern, end=f"</{tag}>")


STYLUS_MARKER = MarkerRule.for_language("stylus")


def extract_regions(text: str, rule: MarkerRule = STYLUS_MARKER) -> Iterator[Region]:
    position = 0
    while position <= len(text):
        match = rule.start.search(text, position)
        if match is None:
            return
        inner_start = match.end()
        inner_end = text.find(rule.end, inner_start)
        if inner_end == -1:
            # Unterminated block: skip the marker and keep scanning.
            position = inner_start if inner_start > match.start() else match.start() + 1
            continue
        yield Region(
            tag_start=match.start(),
            start=inner_start,
            end=inner_end,
            text=text[inner_start:inner_end],
        )
        position = inner_end + len(rule.end)


def collect_regions(text: str, rule: MarkerRule = STYLUS_MARKER) -> List[Region]:
    return list(extract_regions(text, rule))
