from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from ....domain.models import Blank, Block, Comment, Line, StylusSyntaxError
from ..context import FormattingContext
from ..pipeline import FormattingStage
from ..text_utils import indent_width, split_inline_comment, split_statements


@dataclass
class _Item:
    kind: str
    text: str
    indent: int
    number: int
    semicolon: bool = False
    comment: str = ""
    lines: List[str] = field(default_factory=list)


@dataclass
class _Frame:
    block: Block
    indent: int
    explicit: bool
    number: int = 0


class ParseStage(FormattingStage):
    """Builds a block tree out of brace or indentation based Stylus."""

    name = "parse"

    RE_LITERAL_HEADER = re.compile(r"(?:[:=]|^return)\s*$")

    def apply(self, context: FormattingContext) -> None:
        items = self._merge_selector_lines(self._tokenize(context.text))
        context.tree = self._build(items)
        context.set_stat("blocks", sum(1 for _ in context.tree.iter_blocks()) - 1)

    def _tokenize(self, text: str) -> List[_Item]:
        lines = text.splitlines()
        items: List[_Item] = []
        idx = 0
        while idx < len(lines):
            raw = lines[idx]
            number = idx + 1
            idx += 1
            stripped = raw.strip()
            if not stripped:
                items.append(_Item("blank", "", 0, number))
                continue
            indent = indent_width(raw)
            if stripped.startswith("/*"):
                block = [stripped]
                closed = "*/" in stripped[2:]
                while not closed and idx < len(lines):
                    block.append(lines[idx].strip())
                    closed = "*/" in block[-1]
                    idx += 1
                if not closed:
                    raise StylusSyntaxError("Unterminated comment", line=number)
                items.append(_Item("comment", "", indent, number, lines=block))
                continue
            code, comment = split_inline_comment(stripped)
            tokens = split_statements(code) if code else []
            if not tokens:
                if comment:
                    items.append(_Item("comment", "", indent, number, lines=[comment]))
                continue
            for kind, piece, semicolon in tokens:
                items.append(_Item(kind, piece, indent, number, semicolon=semicolon))
            items[-1].comment = comment
        return items

    @classmethod
    def _merge_selector_lines(cls, items: List[_Item]) -> List[_Item]:
        merged: List[_Item] = []
        literals: List[bool] = []
        for item in items:
            in_literal = bool(literals) and literals[-1]
            previous = merged[-1] if merged else None
            if (
                not in_literal
                and previous is not None
                and previous.kind == "line"
                and previous.text.endswith(",")
                and not previous.comment
                and item.kind in ("line", "open")
                and item.text
            ):
                previous.text = f"{previous.text} {item.text}"
                previous.kind = item.kind
                previous.semicolon = item.semicolon
                previous.comment = item.comment
                item = previous
            else:
                merged.append(item)
            if item.kind == "open":
                literals.append(in_literal or cls._is_literal_header(item.text))
            elif item.kind == "close" and literals:
                literals.pop()
        return merged

    @classmethod
    def _is_literal_header(cls, header: str) -> bool:
        return bool(cls.RE_LITERAL_HEADER.search(header))

    def _build(self, items: List[_Item]) -> Block:
        root = Block(header=None)
        stack: List[_Frame] = [_Frame(root, -1, True)]
        for pos, item in enumerate(items):
            if item.kind == "blank":
                stack[-1].block.children.append(Blank())
                continue
            if item.kind == "close":
                while len(stack) > 1 and not stack[-1].explicit:
                    self._pop(stack)
                if len(stack) == 1:
                    raise StylusSyntaxError("Unexpected '}'", line=item.number)
                stack.pop()
                if item.comment:
                    stack[-1].block.children.append(Comment([item.comment]))
                continue

            while not stack[-1].explicit and item.indent <= stack[-1].indent:
                self._pop(stack)
            parent = stack[-1].block

            if item.kind == "comment":
                parent.children.append(Comment(item.lines))
            elif item.kind == "open":
                header, comment = item.text, item.comment
                if not header and parent.children and isinstance(parent.children[-1], Line):
                    previous = parent.children.pop()
                    header, comment = previous.text, comment or previous.comment
                block = Block(
                    header=header,
                    comment=comment,
                    literal=parent.literal or self._is_literal_header(header),
                )
                parent.children.append(block)
                stack.append(_Frame(block, item.indent, True, item.number))
            elif not parent.literal and self._opens_indented_block(items, pos):
                block = Block(header=item.text, comment=item.comment)
                parent.children.append(block)
                stack.append(_Frame(block, item.indent, False, item.number))
            else:
                parent.children.append(Line(text=item.text, semicolon=item.semicolon, comment=item.comment))

        while len(stack) > 1:
            if stack[-1].explicit:
                raise StylusSyntaxError("Unclosed block", line=stack[-1].number)
            self._pop(stack)
        return root

    @staticmethod
    def _opens_indented_block(items: List[_Item], pos: int) -> bool:
        item = items[pos]
        following: Optional[_Item] = None
        for candidate in items[pos + 1:]:
            if candidate.kind not in ("blank", "comment"):
                following = candidate
                break
        if following is None or following.kind == "close":
            return False
        if following.kind == "open" and not following.text:
            return False
        return following.number != item.number and following.indent > item.indent

    @staticmethod
    def _pop(stack: List[_Frame]) -> None:
        # blank lines that precede a dedent belong to the enclosing block
        frame = stack.pop()
        children = frame.block.children
        moved = 0
        while children and isinstance(children[-1], Blank):
            children.pop()
            moved += 1
        stack[-1].block.children.extend(Blank() for _ in range(moved))
