from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Tuple

RE_ZERO_WITH_UNIT = re.compile(
    r"(?<![\w.#-])0(?:\.0+)?(?:px|em|rem|ex|ch|vw|vh|vmin|vmax|cm|mm|in|pt|pc|q)(?![\w%])",
    re.IGNORECASE,
)


def _bare_interpolation_end(text: str, idx: int) -> int:
    """Index of the ``}`` closing a ``{name}`` glued to a selector, or -1.

    ``.col-{i}`` and ``{$prefix}-btn`` interpolate; ``a {`` and ``a{color:red}``
    open blocks.
    """
    close = text.find("}", idx + 1)
    if close == -1:
        return -1
    inner = text[idx + 1:close]
    if not inner or any(ch.isspace() or ch in "{:;" for ch in inner):
        return -1
    before = text[idx - 1] if idx else ""
    after = text[close + 1] if close + 1 < len(text) else ""
    if (before and not before.isspace()) or (after and not after.isspace() and after not in "{};,"):
        return close
    return -1


def iter_top_level(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(index, char)`` for characters outside strings, parentheses and interpolation."""
    quote = ""
    parens = 0
    interpolation = 0
    i = 0
    size = len(text)
    while i < size:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif text.startswith("#{", i):
            interpolation += 1
            i += 2
            continue
        elif interpolation and ch == "{":
            interpolation += 1
        elif interpolation and ch == "}":
            interpolation -= 1
        elif ch == "(":
            parens += 1
        elif ch == ")":
            parens = max(parens - 1, 0)
        elif not parens and not interpolation:
            if ch == "{":
                end = _bare_interpolation_end(text, i)
                if end != -1:
                    i = end + 1
                    continue
            yield i, ch
        i += 1


def split_inline_comment(text: str) -> Tuple[str, str]:
    for idx, ch in iter_top_level(text):
        if ch == "/" and text.startswith("//", idx):
            return text[:idx].rstrip(), text[idx:].strip()
    return text, ""


def split_statements(code: str) -> List[Tuple[str, str, bool]]:
    """Split one line of code into ``(kind, text, had_semicolon)`` tokens.

    ``kind`` is ``open`` for ``selector {``, ``close`` for ``}`` and ``line``
    for anything else.
    """
    tokens: List[Tuple[str, str, bool]] = []
    begin = 0
    for idx, ch in iter_top_level(code):
        if ch not in "{};":
            continue
        piece = code[begin:idx].strip()
        if ch == "{":
            tokens.append(("open", piece, False))
        elif ch == "}":
            if piece:
                tokens.append(("line", piece, False))
            tokens.append(("close", "", False))
        elif piece:
            tokens.append(("line", piece, True))
        begin = idx + 1
    rest = code[begin:].strip()
    if rest:
        tokens.append(("line", rest, False))
    return tokens


def split_selectors(header: str) -> List[str]:
    parts: List[str] = []
    begin = 0
    for idx, ch in iter_top_level(header):
        if ch == ",":
            parts.append(header[begin:idx].strip())
            begin = idx + 1
    parts.append(header[begin:].strip())
    return [part for part in parts if part]


def indent_width(line: str) -> int:
    stripped = line.lstrip(" \t")
    return len(line[: len(line) - len(stripped)].expandtabs(4))


def _code_lines(lines: Iterable[str]) -> Iterator[str]:
    """Skip blank lines and comments; ``/* */`` continuation lines carry no indent step."""
    in_comment = False
    for line in lines:
        stripped = line.strip()
        if in_comment:
            in_comment = "*/" not in stripped
            continue
        if not stripped or stripped.startswith("//"):
            continue
        if stripped.startswith("/*"):
            in_comment = "*/" not in stripped[2:]
            continue
        yield line


def detect_indent(lines: List[str], default: str = "\t") -> str:
    content = list(_code_lines(lines))
    if not content:
        return default
    base = min(indent_width(line) for line in content)
    steps = []
    for line in content:
        leading = line[: len(line) - len(line.lstrip(" \t"))]
        if indent_width(line) <= base:
            continue
        if leading.startswith("\t") and not steps:
            return "\t"
        steps.append(indent_width(line) - base)
    if not steps:
        return default
    return " " * min(steps)


def drop_zero_units(value: str) -> str:
    return RE_ZERO_WITH_UNIT.sub("0", value)
