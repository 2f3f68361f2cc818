from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Region:
    """A delimited span of embedded style text inside a host document.

    ``start`` points right after the start marker, ``end`` at the first
    character of the end marker. ``tag_start`` is where the start marker begins.
    """

    tag_start: int
    start: int
    end: int
    text: str

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end


@dataclass(frozen=True)
class Replacement:
    region: Region
    formatted: str

    @property
    def original(self) -> str:
        return self.region.text


@dataclass
class ReplacementPlan:
    replacements: List[Replacement] = field(default_factory=list)

    def add(self, region: Region, formatted: str) -> None:
        self.replacements.append(Replacement(region=region, formatted=formatted))

    def __len__(self) -> int:
        return len(self.replacements)

    def __iter__(self):
        return iter(self.replacements)

    def pairs(self) -> Sequence[Tuple[str, str]]:
        return [(item.original, item.formatted) for item in self.replacements]

    def apply(self, text: str) -> str:
        """Splice every replacement into ``text`` by offset.

        Offsets refer to ``text`` as it was when the regions were extracted, so
        identical inner texts in different regions never interfere.
        """
        parts: List[str] = []
        last = 0
        for item in self.replacements:
            start, end = item.region.span
            if start < last or end < start or end > len(text):
                raise ValueError(f"Replacement span {start}:{end} is out of order or out of bounds")
            parts.append(text[last:start])
            parts.append(item.formatted)
            last = end
        parts.append(text[last:])
        return "".join(parts)


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    regions: int
    changed: bool
    written: bool


@dataclass
class RunReport:
    outcomes: List[FileOutcome] = field(default_factory=list)
    failures: List[Tuple[Path, BaseException]] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.outcomes) + len(self.failures)

    @property
    def changed_paths(self) -> List[Path]:
        return [outcome.path for outcome in self.outcomes if outcome.changed]

    @property
    def ok(self) -> bool:
        return not self.failures
