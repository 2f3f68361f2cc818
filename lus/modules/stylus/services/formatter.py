from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ..pipeline.formatting import FormattingPipeline, PipelineBuilder, format_stylus, resolve_options

logger = logging.getLogger(__name__)


class StylusFormatter:
    """Default formatter plugged into the document rewriter."""

    def __init__(self, pipeline: Optional[FormattingPipeline] = None) -> None:
        self._pipeline = pipeline or PipelineBuilder().build()

    def format(self, text: str, options: Mapping[str, Any]) -> str:
        formatted, stats = format_stylus(text, options, pipeline=self._pipeline)
        logger.debug("stylus stats: %s", stats)
        return formatted


def validated_options(options: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return ``options`` if the formatter accepts them, otherwise an empty mapping."""
    try:
        resolve_options(options)
    except ValidationError as exc:
        logger.error("Invalid formatting options, using default settings: %s", exc)
        return {}
    return options
