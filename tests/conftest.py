from __future__ import annotations

import logging
from typing import Iterator

import pytest

from helpers import RecordingFormatter


@pytest.fixture(autouse=True)
def _reset_lus_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("lus")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def recording_formatter() -> RecordingFormatter:
    return RecordingFormatter()
