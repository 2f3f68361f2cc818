from __future__ import annotations

from typing import Any, List, Mapping, Optional


class RecordingFormatter:
    def __init__(self, *, fail_on: Optional[str] = None) -> None:
        self.calls: List[str] = []
        self.fail_on = fail_on

    def format(self, text: str, options: Mapping[str, Any]) -> str:
        self.calls.append(text)
        if self.fail_on is not None and self.fail_on in text:
            raise RuntimeError(f"cannot format {text!r}")
        return text.upper()


INPUT_STYLE = """.Test {
\tpadding 10px;
\tcolor red;
}"""

OUTPUT_STYLE_DEFAULT = """.Test {
\tpadding: 10px;
\tcolor: red;
}"""

OUTPUT_STYLE_WITH_CONFIG = """.Test
  padding 10px
  color red"""

TEST_FORMATTING_CONFIG = {
    "insertColons": False,
    "insertSemicolons": False,
    "insertBraces": False,
    "sortProperties": False,
    "alwaysUseZeroWithoutUnit": True,
    "selectorSeparator": ",\n",
    "insertNewLineBeforeElse": True,
    "tabStopChar": "  ",
    "newLineChar": "\n",
}


def vue_document(style: str) -> str:
    return f"""<template lang="pug">
.Test Hello
</template>

<style lang="stylus">
{style}
</style>

<style lang="stylus" scoped>
{style}
</style>

<style lang="stylus" rel="stylesheet/stylus">
{style}
</style>

<script setup lang="ts">
// silence is golden
</script>
"""
