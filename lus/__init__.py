from __future__ import annotations

__version__ = "1.1.0"

from .modules.styles.domain.models import FileOutcome, Region, ReplacementPlan, RunReport
from .modules.styles.pipeline.extraction import STYLUS_MARKER, MarkerRule, collect_regions, extract_regions
from .modules.styles.services.rewriter import DocumentRewriter
from .modules.styles.services.runner import StyleRunner
from .modules.stylus.pipeline.formatting import format_stylus
from .modules.stylus.services.formatter import StylusFormatter

__all__ = [
    "DocumentRewriter",
    "FileOutcome",
    "MarkerRule",
    "Region",
    "ReplacementPlan",
    "RunReport",
    "STYLUS_MARKER",
    "StyleRunner",
    "StylusFormatter",
    "collect_regions",
    "extract_regions",
    "format_stylus",
]
