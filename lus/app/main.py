from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Sequence

from .. import __version__
from .config import AppConfig, split_patterns
from .di import AppContainer
from .log_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lus",
        description="Format Vue SFC files that use stylus",
    )
    parser.add_argument("globs", nargs="+", metavar="files/globs", help="Files or globs to format")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("-c", "--config", default=config.config_file, help="the config file to use")
    parser.add_argument("-C", "--check", action="store_true", help="only check if files are formatted")
    parser.add_argument(
        "-i",
        "--ignore",
        type=split_patterns,
        default=[],
        help="ignore files using these comma-separated glob patterns",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def main(argv: Optional[Sequence[str]] = None) -> int:
    config = AppConfig()
    args = build_parser(config).parse_args(argv)
    setup_logging(args.verbose, level=config.log_level)

    container = AppContainer.build(config, config_file=args.config, check=args.check)
    ignore: List[str] = [*config.ignore, *args.ignore]
    try:
        report = await container.runner.run_patterns(args.globs, ignore)
    except Exception:
        logger.exception("Unexpected error while formatting")
        return 1

    if report.failures:
        logger.warning("%d of %d file(s) could not be formatted", len(report.failures), report.attempted)
    if args.check and report.changed_paths:
        logger.warning("%d file(s) would be reformatted", len(report.changed_paths))
        return 1
    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
