from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from app import CommandParser, TrackerFacade
from domain.errors import StorageFormatError, StorageIOError, TrackerError
from domain.services import InternshipList
from infra.config import FileSystemConfigProvider
from infra.interaction import ConsoleRenderer
from infra.persistence import PipeFileInternshipStorage
from infra.runtime import LEVELS, StructuredLogger, SystemClock


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="internship-tracker",
        description="Track internship applications from the command line.",
    )
    parser.add_argument("--config-dir", default="./config", help="Folder holding config.json")
    parser.add_argument("--data-file", default=None, help="Storage file (overrides config.json)")
    parser.add_argument("--log-level", choices=list(LEVELS), default=None)
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    renderer = ConsoleRenderer(stdout, stderr)

    config_provider = FileSystemConfigProvider(args.config_dir)
    errors = config_provider.validate()
    if errors:
        renderer.error("Config validation failed: " + "; ".join(errors))
        return 1
    cfg = config_provider.get_config()

    logger = StructuredLogger(min_level=args.log_level or cfg.log_level)
    internships = InternshipList(clock=SystemClock(), logger=logger)
    storage = PipeFileInternshipStorage(args.data_file or cfg.data_file, logger=logger)
    facade = TrackerFacade(internships=internships, storage=storage, logger=logger)

    try:
        result = facade.load()
    except (StorageFormatError, StorageIOError) as exc:
        renderer.error(f"{exc} ({storage.path})")
        return 1
    for warning in result.warnings:
        renderer.warning(warning)

    renderer.welcome()
    renderer.greet(facade.get_username())
    renderer.line()
    return run_session(facade, renderer, stdin)


def run_session(facade: TrackerFacade, renderer: ConsoleRenderer, stdin: TextIO) -> int:
    """Read, execute and render commands until ``exit`` or end of input."""
    parser = CommandParser()
    while True:
        line = stdin.readline()
        if not line:
            return 0
        renderer.line()
        try:
            command = parser.parse(line.rstrip("\r\n"))
            command.execute(facade, renderer)
        except TrackerError as exc:
            renderer.error(str(exc))
        else:
            if command.is_exit:
                renderer.line()
                return 0
        renderer.line()


if __name__ == "__main__":
    raise SystemExit(main())
