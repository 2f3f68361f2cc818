from __future__ import annotations

from typing import Any, Mapping, Protocol


class StyleFormatter(Protocol):
    def format(self, text: str, options: Mapping[str, Any]) -> str:
        """Return the formatted style text."""
