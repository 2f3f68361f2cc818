from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableMapping, Optional

from ...domain.models import Block
from ...domain.options import FormattingOptions


@dataclass
class FormattingContext:
    text: str
    options: FormattingOptions = field(default_factory=FormattingOptions)
    stats: MutableMapping[str, int] = field(default_factory=dict)
    leading: str = ""
    trailing: str = ""
    indent: str = "\t"
    newline: str = "\n"
    tree: Optional[Block] = None

    def set_text(self, value: str) -> None:
        self.text = value

    def set_stat(self, key: str, value: int) -> None:
        self.stats[key] = value
