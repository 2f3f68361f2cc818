from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from ...domain.options import FormattingOptions
from .context import FormattingContext
from .pipeline import FormattingPipeline, FormattingStage, PipelineResult
from .registry import StageRegistry, default_registry, register_stage
from .stages.declarations import DeclarationsStage
from .stages.parse import ParseStage
from .stages.preflight import PreflightStage
from .stages.render import RenderStage
from .stages.sort_properties import SortPropertiesStage


def _register_builtin_stages() -> None:
    names = set(default_registry.list_stage_names())
    for stage in (PreflightStage, ParseStage, DeclarationsStage, SortPropertiesStage, RenderStage):
        if stage.name not in names:
            register_stage(stage, name=stage.name)


_register_builtin_stages()


class PipelineBuilder:
    def __init__(self, registry: StageRegistry = default_registry) -> None:
        self._registry = registry

    def build(self) -> FormattingPipeline:
        return self._registry.create_pipeline()


OptionsLike = Union[FormattingOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> FormattingOptions:
    if isinstance(options, FormattingOptions):
        return options
    return FormattingOptions.model_validate(dict(options or {}))


def format_stylus(
    text: str,
    options: OptionsLike = None,
    *,
    pipeline: Optional[FormattingPipeline] = None,
) -> tuple[str, Dict[str, int]]:
    if not text.strip():
        return text, {}
    pipe = pipeline or default_registry.create_pipeline()
    result = pipe.run(text, options=resolve_options(options))
    return result.text, result.stats


__all__ = [
    "FormattingContext",
    "FormattingOptions",
    "FormattingPipeline",
    "FormattingStage",
    "PipelineBuilder",
    "PipelineResult",
    "StageRegistry",
    "default_registry",
    "format_stylus",
    "register_stage",
    "resolve_options",
]
