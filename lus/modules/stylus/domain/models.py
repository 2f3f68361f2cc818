from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


class StylusSyntaxError(ValueError):
    def __init__(self, message: str, *, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


@dataclass
class Blank:
    pass


@dataclass
class Comment:
    lines: List[str]


@dataclass
class Line:
    text: str
    semicolon: bool = False
    comment: str = ""


@dataclass
class Declaration:
    prop: str
    value: str
    comment: str = ""


@dataclass
class Block:
    header: Optional[str]
    children: List["Node"] = field(default_factory=list)
    comment: str = ""
    # hash literal body such as `colors = {`; printed verbatim and always braced
    literal: bool = False

    def iter_blocks(self):
        yield self
        for child in self.children:
            if isinstance(child, Block):
                yield from child.iter_blocks()


Node = Union[Blank, Comment, Line, Declaration, Block]
