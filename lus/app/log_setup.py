from __future__ import annotations

import logging
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

PREFIX = "Lus:"


class LusFormatter(logging.Formatter):
    """Renders ``Lus: [warning|error] message`` as rich markup."""

    def __init__(self) -> None:
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        parts = [f"[cyan]{PREFIX}[/cyan]"]
        if record.levelno >= logging.ERROR:
            parts.append("[red]error[/red]")
        elif record.levelno >= logging.WARNING:
            parts.append("[yellow]warning[/yellow]")
        parts.append(escape(super().format(record)))
        return " ".join(parts)


class ConsoleHandler(logging.Handler):
    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.console.print(self.format(record))
        except Exception:
            self.handleError(record)


def make_console(stream: Optional[TextIO] = None) -> Console:
    """Console on stderr; an explicit stream is colored only when it is a terminal."""
    force_terminal = None if stream is None else stream.isatty()
    return Console(
        file=stream,
        stderr=stream is None,
        force_terminal=force_terminal,
        soft_wrap=True,
        highlight=False,
        emoji=False,
    )


def setup_logging(
    verbose: bool = False,
    *,
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Configure the ``lus`` logger; info messages only show up when verbose."""
    logger = logging.getLogger("lus")
    logger.handlers.clear()
    handler = ConsoleHandler(console or make_console(stream))
    handler.setFormatter(LusFormatter())
    logger.addHandler(handler)
    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    else:
        logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False
    return logger
