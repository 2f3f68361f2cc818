from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ...domain.options import FormattingOptions
from .context import FormattingContext


@dataclass
class PipelineResult:
    text: str
    stats: dict[str, int]


class FormattingStage:
    name: str

    def apply(self, context: FormattingContext) -> None:
        raise NotImplementedError


class FormattingPipeline:
    def __init__(self, stages: Sequence[FormattingStage]):
        self._stages: List[FormattingStage] = list(stages)

    @property
    def stages(self) -> Sequence[FormattingStage]:
        return tuple(self._stages)

    def run(self, text: str, *, options: Optional[FormattingOptions] = None) -> PipelineResult:
        ctx = FormattingContext(text=text, options=options or FormattingOptions())
        for stage in self._stages:
            stage.apply(ctx)
        return PipelineResult(text=ctx.text, stats=dict(ctx.stats))
