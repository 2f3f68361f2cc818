from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".stylusrc"


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    config_file: str = Field(DEFAULT_CONFIG_NAME, alias="LUS_CONFIG")
    encoding: str = Field("utf-8", alias="LUS_ENCODING")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = Field(None, alias="LUS_LOG_LEVEL")

    # Keep the raw env value as a string to avoid dotenv provider attempting JSON decode
    ignore_raw: Optional[str] = Field(None, alias="LUS_IGNORE")

    @property
    def ignore(self) -> List[str]:
        return split_patterns(self.ignore_raw)


def split_patterns(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def get_config_file_options(config_name: Union[str, Path], *, cwd: Optional[Path] = None) -> Dict[str, Any]:
    """Load formatting options from a JSON file relative to ``cwd``.

    A missing file is a warning and a malformed one an error; both fall back
    to an empty mapping.
    """
    config_path = (cwd or Path.cwd()) / config_name
    if not config_path.is_file():
        logger.warning("No config file found. Using default settings.")
        return {}

    logger.info("using config file %s", config_path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.error("Malformed JSON in config file: %s (%s)", config_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.error("Malformed JSON in config file: %s (expected an object)", config_path)
        return {}
    return data
