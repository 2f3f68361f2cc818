from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from helpers import TEST_FORMATTING_CONFIG
from lus.app.config import AppConfig, get_config_file_options, split_patterns


def test_missing_config_file_warns_and_returns_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    assert get_config_file_options(".missingrc", cwd=tmp_path) == {}
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_reads_config_file(tmp_path: Path) -> None:
    (tmp_path / ".stylusrc").write_text(json.dumps({"insertSemicolons": False}), encoding="utf-8")
    assert get_config_file_options(".stylusrc", cwd=tmp_path) == {"insertSemicolons": False}


def test_reads_nested_config_path(tmp_path: Path) -> None:
    (tmp_path / ".test").mkdir()
    (tmp_path / ".test" / ".stylusrc").write_text(json.dumps(TEST_FORMATTING_CONFIG), encoding="utf-8")
    assert get_config_file_options(".test/.stylusrc", cwd=tmp_path) == TEST_FORMATTING_CONFIG


def test_uses_current_directory_by_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".stylusrc").write_text('{"insertColons": false}', encoding="utf-8")
    assert get_config_file_options(".stylusrc") == {"insertColons": False}


@pytest.mark.parametrize("content", ["{insertSemicolons: false", "[1, 2]", ""])
def test_malformed_config_logs_error_and_returns_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, content: str
) -> None:
    (tmp_path / ".stylusrc").write_text(content, encoding="utf-8")
    assert get_config_file_options(".stylusrc", cwd=tmp_path) == {}
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_app_config_reads_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LUS_CONFIG", ".lusrc")
    monkeypatch.setenv("LUS_IGNORE", "dist/**, build/*,")
    config = AppConfig()
    assert config.config_file == ".lusrc"
    assert config.ignore == ["dist/**", "build/*"]


def test_app_config_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("LUS_CONFIG", "LUS_IGNORE", "LUS_ENCODING", "LUS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config = AppConfig()
    assert config.config_file == ".stylusrc"
    assert config.encoding == "utf-8"
    assert config.ignore == []
    assert config.log_level is None


def test_split_patterns() -> None:
    assert split_patterns("a,b ,, c") == ["a", "b", "c"]
    assert split_patterns(None) == []
