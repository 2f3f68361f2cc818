from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .config import AppConfig, get_config_file_options
from ..modules.styles.domain.interfaces import StyleFormatter
from ..modules.styles.infrastructure.files import DocumentStore
from ..modules.styles.pipeline.extraction import STYLUS_MARKER, MarkerRule
from ..modules.styles.services.rewriter import DocumentRewriter
from ..modules.styles.services.runner import StyleRunner
from ..modules.stylus.services.formatter import StylusFormatter, validated_options

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    config: AppConfig
    options: Mapping[str, Any]
    formatter: StyleFormatter
    rewriter: DocumentRewriter
    runner: StyleRunner

    @classmethod
    def build(
        cls,
        config: AppConfig,
        *,
        config_file: Optional[str] = None,
        check: bool = False,
        cwd: Optional[Path] = None,
        formatter: Optional[StyleFormatter] = None,
        rule: MarkerRule = STYLUS_MARKER,
    ) -> "AppContainer":
        options = get_config_file_options(config_file or config.config_file, cwd=cwd)
        if formatter is None:
            formatter = StylusFormatter()
            options = validated_options(options)
        rewriter = DocumentRewriter(
            formatter,
            options=options,
            rule=rule,
            store=DocumentStore(encoding=config.encoding),
            check=check,
        )
        return cls(
            config=config,
            options=options,
            formatter=formatter,
            rewriter=rewriter,
            runner=StyleRunner(rewriter),
        )
