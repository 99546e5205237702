import argparse
import sys
from typing import List, Optional, Sequence, Tuple

# --- Settings/Logging ---
from league.logging.setup import setup_logging
from league.config.settings import settings

setup_logging()

from loguru import logger

# --- Core Logic Imports ---
from league.parsing.parser import ParseError, parse_games
from league.calculation.standings import compute_standings
from league.output.report import (
    stderr_console,
    stdout_console,
    write_error,
    write_standings,
)

USAGE = """Usage: league [input-file]
       league -

When using '-' for the input-file, league will read from standard input."""


class UsageError(Exception):
    """Raised for invalid command line arguments or unreadable input files."""

    pass


class LeagueArgumentParser(argparse.ArgumentParser):
    """Argument parser which reports problems as UsageError instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> LeagueArgumentParser:
    parser = LeagueArgumentParser(
        prog="league", usage=USAGE, add_help=False, allow_abbrev=False
    )
    parser.add_argument("--help", "-h", action="store_true", dest="help")
    parser.add_argument("input_file", nargs="?", default=None)
    return parser


def parse_arguments(argv: Sequence[str]) -> Tuple[argparse.Namespace, List[str]]:
    """Parses the command line, returning the options and any unexpected arguments."""
    return build_parser().parse_known_args(list(argv))


def read_input(path: str) -> str:
    """Reads the whole input, from standard input when the path is '-'."""
    if path == "-":
        logger.debug("Reading input from standard input")
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as e:
            raise UsageError("Standard input is not valid UTF-8") from e

    logger.debug(f"Reading input from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise UsageError(f"File not found: {path}") from e
    except IsADirectoryError as e:
        raise UsageError(f"Not a file: {path}") from e
    except UnicodeDecodeError as e:
        raise UsageError(f"File is not valid UTF-8: {path}") from e
    except OSError as e:
        raise UsageError(f"Unable to read {path}: {e.strerror}") from e


def run(text: str) -> int:
    """Parses the input text and writes the standings to standard output."""
    try:
        games = parse_games(text)
    except ParseError as e:
        logger.debug(f"Parse failed at index {e.index}: {e.message}")
        write_error(e.message)
        return 1

    standings = compute_standings(
        games,
        win_points=settings.win_points,
        draw_points=settings.draw_points,
        loss_points=settings.loss_points,
    )
    written = write_standings(standings)
    logger.info(f"Wrote standings for {written} teams from {len(games)} games")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for 'league'. See USAGE for the expected arguments."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        options, unexpected = parse_arguments(argv)
        if options.help:
            stdout_console.print(USAGE)
            return 0
        if unexpected:
            # The first argument is reported, not the first leftover
            raise UsageError(f"Unexpected argument: {argv[0]}")
        if options.input_file is None:
            raise UsageError("Missing file path argument")
    except UsageError as e:
        write_error(str(e))
        stderr_console.print()
        stderr_console.print(USAGE)
        return 1

    try:
        text = read_input(options.input_file)
    except UsageError as e:
        write_error(str(e))
        return 1

    return run(text)


def entry_point() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(130)


if __name__ == "__main__":
    entry_point()
