from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..domain.interfaces import StyleFormatter
from ..domain.models import FileOutcome, ReplacementPlan
from ..infrastructure.files import DocumentStore
from ..pipeline.extraction import STYLUS_MARKER, MarkerRule, extract_regions

logger = logging.getLogger(__name__)


class DocumentRewriter:
    """Formats every style region of a document and rewrites it in place."""

    def __init__(
        self,
        formatter: StyleFormatter,
        *,
        options: Optional[Mapping[str, Any]] = None,
        rule: MarkerRule = STYLUS_MARKER,
        store: Optional[DocumentStore] = None,
        check: bool = False,
    ) -> None:
        self._formatter = formatter
        self._options: Mapping[str, Any] = dict(options or {})
        self._rule = rule
        self._store = store or DocumentStore()
        self._check = check

    @property
    def check(self) -> bool:
        return self._check

    def build_plan(self, text: str) -> ReplacementPlan:
        plan = ReplacementPlan()
        for region in extract_regions(text, self._rule):
            plan.add(region, self._formatter.format(region.text, self._options))
        return plan

    async def format_document(self, path: Union[str, Path]) -> FileOutcome:
        path = Path(path)
        try:
            original = await self._store.read_text(path)
            plan = self.build_plan(original)
            if not len(plan):
                logger.info("no style blocks in %s", path)
                return FileOutcome(path=path, regions=0, changed=False, written=False)

            updated = plan.apply(original)
            changed = updated != original
            if not changed:
                logger.info("%s is already formatted", path)
                return FileOutcome(path=path, regions=len(plan), changed=False, written=False)
            if self._check:
                logger.warning("%s is not formatted", path)
                return FileOutcome(path=path, regions=len(plan), changed=True, written=False)

            await self._store.write_text(path, updated)
            logger.info("formatted %d style block(s) in %s", len(plan), path)
            return FileOutcome(path=path, regions=len(plan), changed=True, written=True)
        except Exception as exc:
            logger.error("Failed to format %s: %s", path, exc)
            raise
