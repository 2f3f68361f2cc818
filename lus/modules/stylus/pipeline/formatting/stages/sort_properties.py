from __future__ import annotations

from typing import Callable, List, Sequence, Union

from ....domain.models import Declaration, Node
from ..context import FormattingContext
from ..pipeline import FormattingStage


class SortPropertiesStage(FormattingStage):
    name = "sort_properties"

    def apply(self, context: FormattingContext) -> None:
        order = context.options.sort_properties
        if not order or context.tree is None:
            return
        key = self._sort_key(order)
        runs = 0
        for block in context.tree.iter_blocks():
            block.children, sorted_runs = self._sort_runs(block.children, key)
            runs += sorted_runs
        context.set_stat("sorted_runs", runs)

    @staticmethod
    def _sort_key(order: Union[str, Sequence[str]]) -> Callable[[Declaration], object]:
        if order == "alphabetical":
            return lambda declaration: declaration.prop.lower()
        ranks = {name.lower(): idx for idx, name in enumerate(order)}
        fallback = len(ranks)
        return lambda declaration: ranks.get(declaration.prop.lower(), fallback)

    @staticmethod
    def _sort_runs(children: List[Node], key: Callable[[Declaration], object]) -> tuple[List[Node], int]:
        result: List[Node] = []
        run: List[Declaration] = []
        runs = 0
        for child in [*children, None]:
            if isinstance(child, Declaration):
                run.append(child)
                continue
            if len(run) > 1:
                ordered = sorted(run, key=key)
                if ordered != run:
                    runs += 1
                run = ordered
            result.extend(run)
            run = []
            if child is not None:
                result.append(child)
        return result, runs
