from __future__ import annotations

import re
from typing import List, Optional

from ....domain.models import Blank, Block, Comment, Declaration, Line, Node
from ....domain.options import FormattingOptions
from ..context import FormattingContext
from ..pipeline import FormattingStage
from ..text_utils import split_selectors


class RenderStage(FormattingStage):
    name = "render"

    RE_PLAIN_HEADER = re.compile(r"^(?:[@+=]|(?:if|else|unless|for)\b)")
    RE_ELSE = re.compile(r"^else\b")

    def apply(self, context: FormattingContext) -> None:
        if context.tree is None:
            return
        lines: List[str] = []
        self._render_children(context.tree, 0, context, lines)
        body = context.newline.join(lines)
        context.set_text(f"{context.leading}{body}{context.trailing}")

    def _render_children(self, block: Block, depth: int, context: FormattingContext, out: List[str]) -> None:
        pad = context.indent * depth
        options = context.options
        previous: Optional[Node] = None
        for child in self._trim_blanks(block.children):
            if isinstance(child, Blank):
                if not isinstance(previous, Blank):
                    out.append("")
                previous = child
                continue
            if isinstance(child, Block):
                self._render_block(child, depth, context, out, follows_block=isinstance(previous, Block))
            elif isinstance(child, Declaration):
                out.append(pad + self._declaration(child, options))
            elif isinstance(child, Comment):
                out.extend(self._comment(child, pad))
            else:
                out.append(pad + self._line(child, options))
            previous = child

    def _render_block(
        self,
        block: Block,
        depth: int,
        context: FormattingContext,
        out: List[str],
        *,
        follows_block: bool = False,
    ) -> None:
        pad = context.indent * depth
        raw = block.header or ""
        header = raw if block.literal else self._header(raw, pad, context)
        suffix = f" {block.comment}" if block.comment else ""
        if context.options.insert_braces or block.literal:
            opening = f"{header} {{" if header else "{"
            if self._joins_previous(block, follows_block, context) and out and out[-1] == f"{pad}}}":
                out[-1] = f"{pad}}} {opening}{suffix}"
            else:
                out.append(f"{pad}{opening}{suffix}")
            self._render_children(block, depth + 1, context, out)
            out.append(f"{pad}}}")
        else:
            out.append(f"{pad}{header}{suffix}")
            self._render_children(block, depth + 1, context, out)

    def _joins_previous(self, block: Block, follows_block: bool, context: FormattingContext) -> bool:
        # `} else {` unless a line break before else was asked for
        if not follows_block or context.options.insert_new_line_before_else:
            return False
        return bool(self.RE_ELSE.match(block.header or ""))

    def _header(self, header: str, pad: str, context: FormattingContext) -> str:
        if self.RE_PLAIN_HEADER.match(header):
            return header
        selectors = split_selectors(header)
        if len(selectors) < 2:
            return header
        separator = context.options.selector_separator
        if "\n" in separator:
            separator = separator.replace("\r\n", "\n").replace("\n", context.newline + pad)
        return separator.join(selectors)

    @staticmethod
    def _declaration(declaration: Declaration, options: FormattingOptions) -> str:
        joiner = ": " if options.insert_colons else " "
        terminator = ";" if options.insert_semicolons else ""
        comment = f" {declaration.comment}" if declaration.comment else ""
        return f"{declaration.prop}{joiner}{declaration.value}{terminator}{comment}"

    @staticmethod
    def _line(line: Line, options: FormattingOptions) -> str:
        terminator = ";" if line.semicolon and options.insert_semicolons else ""
        comment = f" {line.comment}" if line.comment else ""
        return f"{line.text}{terminator}{comment}"

    @staticmethod
    def _comment(comment: Comment, pad: str) -> List[str]:
        rendered = [pad + comment.lines[0]]
        for line in comment.lines[1:]:
            rendered.append(pad + (f" {line}" if line.startswith("*") else line))
        return rendered

    @staticmethod
    def _trim_blanks(children: List[Node]) -> List[Node]:
        start = 0
        end = len(children)
        while start < end and isinstance(children[start], Blank):
            start += 1
        while end > start and isinstance(children[end - 1], Blank):
            end -= 1
        return children[start:end]
