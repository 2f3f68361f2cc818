from __future__ import annotations

import re
from typing import Optional

from ....domain.models import Block, Declaration, Line
from ....domain.options import FormattingOptions
from ..context import FormattingContext
from ..pipeline import FormattingStage
from ..text_utils import drop_zero_units


class DeclarationsStage(FormattingStage):
    """Turns ``prop value`` lines into declarations.

    Hash literals and function or mixin definitions (``add(a, b)``) hold
    expressions rather than properties, so their bodies are left as written.
    """

    name = "declarations"

    RE_DECLARATION = re.compile(r"^(?P<prop>\*?-?[A-Za-z_][\w-]*)(?:\s*:\s*|\s+)(?P<value>\S.*)$")
    RE_ASSIGNMENT = re.compile(r"^[?:+\-*/]?=")
    RE_OPERATOR = re.compile(r"^(?:\*\*|\.\.\.?|[-+*/%]|[<>=!]=?)(?:\s|$)")
    RE_DEFINITION = re.compile(r"^[A-Za-z_$-][\w$-]*\(.*\)$")
    KEYWORDS = frozenset({"if", "else", "unless", "for", "in", "return"})

    def apply(self, context: FormattingContext) -> None:
        if context.tree is None:
            return
        context.set_stat("declarations", self._convert(context.tree, context.options, skip=False))

    def _convert(self, block: Block, options: FormattingOptions, *, skip: bool) -> int:
        skip = skip or block.literal or bool(block.header and self.RE_DEFINITION.match(block.header))
        count = 0
        for idx, child in enumerate(block.children):
            if isinstance(child, Block):
                count += self._convert(child, options, skip=skip)
            elif isinstance(child, Line) and block.header is not None and not skip:
                declaration = self._parse(child, options)
                if declaration is not None:
                    block.children[idx] = declaration
                    count += 1
        return count

    def _parse(self, line: Line, options: FormattingOptions) -> Optional[Declaration]:
        match = self.RE_DECLARATION.match(line.text)
        if match is None:
            return None
        prop = match.group("prop")
        value = match.group("value").rstrip("; \t")
        if prop in self.KEYWORDS or not value or self.RE_ASSIGNMENT.match(value):
            return None
        if self.RE_OPERATOR.match(value):
            return None
        if options.always_use_zero_without_unit:
            value = drop_zero_units(value)
        return Declaration(prop=prop, value=value, comment=line.comment)
