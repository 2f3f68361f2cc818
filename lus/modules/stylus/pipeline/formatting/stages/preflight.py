from __future__ import annotations

import re

from ..context import FormattingContext
from ..pipeline import FormattingStage
from ..text_utils import detect_indent


class PreflightStage(FormattingStage):
    name = "preflight"

    RE_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\r?\n)*")

    def apply(self, context: FormattingContext) -> None:
        text = context.text
        leading = self.RE_LEADING_BLANK_LINES.match(text).group(0)
        rest = text[len(leading):]
        core = rest.rstrip()
        context.leading = leading
        context.trailing = rest[len(core):]
        context.set_text(core)

        options = context.options
        context.newline = options.new_line_char or ("\r\n" if "\r\n" in text else "\n")
        context.indent = options.tab_stop_char or detect_indent(core.splitlines())
        context.set_stat("lines", len(core.splitlines()))
