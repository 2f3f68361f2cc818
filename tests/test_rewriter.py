from __future__ import annotations

import logging
from pathlib import Path

import pytest

from helpers import (
    INPUT_STYLE,
    OUTPUT_STYLE_DEFAULT,
    OUTPUT_STYLE_WITH_CONFIG,
    TEST_FORMATTING_CONFIG,
    RecordingFormatter,
    vue_document,
)
from lus.modules.styles.services.rewriter import DocumentRewriter
from lus.modules.stylus.services.formatter import StylusFormatter


@pytest.mark.asyncio
async def test_document_without_style_blocks_is_left_untouched(tmp_path: Path, recording_formatter) -> None:
    path = tmp_path / "Plain.vue"
    content = b"<template><div/></template>\r\n<style>a{}</style>\n"
    path.write_bytes(content)
    mtime = path.stat().st_mtime_ns

    outcome = await DocumentRewriter(recording_formatter).format_document(path)

    assert outcome.regions == 0
    assert not outcome.written
    assert recording_formatter.calls == []
    assert path.read_bytes() == content
    assert path.stat().st_mtime_ns == mtime


@pytest.mark.asyncio
async def test_formats_file_with_default_options(tmp_path: Path) -> None:
    path = tmp_path / "Test.vue"
    path.write_text(vue_document(INPUT_STYLE), encoding="utf-8")

    outcome = await DocumentRewriter(StylusFormatter()).format_document(path)

    assert outcome.regions == 3
    assert outcome.written
    assert path.read_text(encoding="utf-8") == vue_document(OUTPUT_STYLE_DEFAULT)


@pytest.mark.asyncio
async def test_formats_file_with_config_options(tmp_path: Path) -> None:
    path = tmp_path / "Test.vue"
    path.write_text(vue_document(INPUT_STYLE), encoding="utf-8")

    await DocumentRewriter(StylusFormatter(), options=TEST_FORMATTING_CONFIG).format_document(path)

    assert path.read_text(encoding="utf-8") == vue_document(OUTPUT_STYLE_WITH_CONFIG)


@pytest.mark.asyncio
async def test_single_region_only_changes_inner_text(tmp_path: Path) -> None:
    path = tmp_path / "One.vue"
    path.write_text('<div>a {\n  color red\n}</div>\n<style lang="stylus">a {\n  color red\n}</style>\n', encoding="utf-8")

    await DocumentRewriter(StylusFormatter()).format_document(path)

    assert path.read_text(encoding="utf-8") == (
        '<div>a {\n  color red\n}</div>\n<style lang="stylus">a {\n  color: red;\n}</style>\n'
    )


@pytest.mark.asyncio
async def test_formatter_called_once_per_region_in_order(tmp_path: Path, recording_formatter) -> None:
    path = tmp_path / "Many.vue"
    path.write_text(
        '<style lang="stylus">first</style><style lang="stylus">second</style><style lang="stylus">third</style>',
        encoding="utf-8",
    )

    outcome = await DocumentRewriter(recording_formatter).format_document(path)

    assert recording_formatter.calls == ["first", "second", "third"]
    assert outcome.regions == 3
    assert path.read_text(encoding="utf-8") == (
        '<style lang="stylus">FIRST</style><style lang="stylus">SECOND</style><style lang="stylus">THIRD</style>'
    )


@pytest.mark.asyncio
async def test_identical_regions_are_formatted_independently(tmp_path: Path) -> None:
    block = '<style lang="stylus">x\n  y red</style>'
    path = tmp_path / "Same.vue"
    path.write_text("\n".join([block, block, block]), encoding="utf-8")
    formatter = RecordingFormatter()

    await DocumentRewriter(formatter).format_document(path)

    result = path.read_text(encoding="utf-8")
    assert len(formatter.calls) == 3
    assert result.count("X\n  Y RED") == 3
    assert "x\n  y red" not in result


@pytest.mark.asyncio
async def test_identical_regions_with_stylus_formatter(tmp_path: Path) -> None:
    block = '<style lang="stylus">x\n  y red</style>'
    path = tmp_path / "Same.vue"
    path.write_text("\n".join([block, block, block]), encoding="utf-8")

    await DocumentRewriter(StylusFormatter()).format_document(path)

    formatted = '<style lang="stylus">x {\n  y: red;\n}</style>'
    assert path.read_text(encoding="utf-8") == "\n".join([formatted, formatted, formatted])


@pytest.mark.asyncio
async def test_unterminated_region_produces_no_formatter_call(tmp_path: Path, recording_formatter) -> None:
    path = tmp_path / "Broken.vue"
    content = '<template/>\n<style lang="stylus">\na\n  color red\n'
    path.write_text(content, encoding="utf-8")

    outcome = await DocumentRewriter(recording_formatter).format_document(path)

    assert recording_formatter.calls == []
    assert not outcome.written
    assert path.read_text(encoding="utf-8") == content


@pytest.mark.asyncio
async def test_formatter_error_leaves_file_untouched(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "Fail.vue"
    content = '<style lang="stylus">good</style><style lang="stylus">bad</style>'
    path.write_text(content, encoding="utf-8")
    formatter = RecordingFormatter(fail_on="bad")

    with pytest.raises(RuntimeError):
        await DocumentRewriter(formatter).format_document(path)

    assert formatter.calls == ["good", "bad"]
    assert path.read_text(encoding="utf-8") == content
    assert any(record.levelno == logging.ERROR and "Fail.vue" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_missing_file_is_rejected_with_original_error(tmp_path: Path, recording_formatter) -> None:
    with pytest.raises(FileNotFoundError):
        await DocumentRewriter(recording_formatter).format_document(tmp_path / "missing.vue")


@pytest.mark.asyncio
async def test_check_mode_reports_without_writing(tmp_path: Path) -> None:
    path = tmp_path / "Test.vue"
    content = vue_document(INPUT_STYLE)
    path.write_text(content, encoding="utf-8")

    outcome = await DocumentRewriter(StylusFormatter(), check=True).format_document(path)

    assert outcome.changed
    assert not outcome.written
    assert path.read_text(encoding="utf-8") == content


@pytest.mark.asyncio
async def test_already_formatted_file_is_not_rewritten(tmp_path: Path) -> None:
    path = tmp_path / "Done.vue"
    path.write_text(vue_document(OUTPUT_STYLE_DEFAULT), encoding="utf-8")

    outcome = await DocumentRewriter(StylusFormatter()).format_document(path)

    assert outcome.regions == 3
    assert not outcome.changed
    assert not outcome.written


@pytest.mark.asyncio
async def test_line_endings_and_undecodable_bytes_survive(tmp_path: Path) -> None:
    path = tmp_path / "Crlf.vue"
    path.write_bytes(b'<!-- \xff -->\r\n<style lang="stylus">\r\n.a {\r\n  color red\r\n}\r\n</style>\r\n')

    await DocumentRewriter(StylusFormatter()).format_document(path)

    assert path.read_bytes() == (
        b'<!-- \xff -->\r\n<style lang="stylus">\r\n.a {\r\n  color: red;\r\n}\r\n</style>\r\n'
    )
    assert [p.name for p in tmp_path.iterdir()] == ["Crlf.vue"]


@pytest.mark.asyncio
async def test_symlinked_document_keeps_its_link(tmp_path: Path) -> None:
    target = tmp_path / "Real.vue"
    target.write_text(vue_document(INPUT_STYLE), encoding="utf-8")
    link = tmp_path / "Link.vue"
    link.symlink_to(target)

    outcome = await DocumentRewriter(StylusFormatter()).format_document(link)

    assert outcome.written
    assert link.is_symlink()
    assert link.resolve() == target.resolve()
    assert target.read_text(encoding="utf-8") == vue_document(OUTPUT_STYLE_DEFAULT)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["Link.vue", "Real.vue"]
