from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

from ..domain.models import RunReport
from ..infrastructure.paths import resolve_paths
from .rewriter import DocumentRewriter

logger = logging.getLogger(__name__)


class StyleRunner:
    def __init__(self, rewriter: DocumentRewriter) -> None:
        self._rewriter = rewriter

    async def run(self, paths: Iterable[Union[str, Path]]) -> RunReport:
        report = RunReport()
        # One document at a time: each write finishes before the next read.
        for path in paths:
            logger.info("formatting %s", path)
            try:
                outcome = await self._rewriter.format_document(path)
            except Exception as exc:  # noqa: BLE001
                report.failures.append((Path(path), exc))
                continue
            report.outcomes.append(outcome)
        return report

    async def run_patterns(self, patterns: Sequence[str], ignore: Sequence[str] = ()) -> RunReport:
        paths = resolve_paths(patterns, ignore)
        if not paths:
            logger.warning("No files matched %s", ", ".join(patterns))
        return await self.run(paths)
