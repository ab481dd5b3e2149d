#!/usr/bin/env python3
"""CLI entry point for Tabletop Simulator script syncing.

This module provides the argument parser and main entry point that
dispatches to the extract and pack commands.

Usage:
    python -m tts_scripts extract "My Game"
    python -m tts_scripts pack "My Game"
    python -m tts_scripts extract "My Game" --prune --skip-empty
    python -m tts_scripts pack "My Game" --saves-dir ./Saves
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, NoReturn

from tts_scripts.commands import cmd_extract, cmd_pack
from tts_scripts.config import MODE_EXTRACT, MODE_PACK, MODES
from tts_scripts.errors import CliError, InvalidModeError, UsageError
from tts_scripts.persistence import SavePaths, resolve_save_paths

PROG = "tts-scripts"

Handler = Callable[[SavePaths, argparse.Namespace], int]

HANDLERS: dict[str, Handler] = {
    MODE_EXTRACT: cmd_extract,
    MODE_PACK: cmd_pack,
}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2.

    Status 2 is reserved for an unrecognized mode.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(self.prog, message)


def _configure_stdio_utf8() -> None:
    """Ensure non-ASCII save names and paths print on Windows terminals."""
    stdout = getattr(sys, "stdout", None)
    stderr = getattr(sys, "stderr", None)
    if hasattr(stdout, "reconfigure"):
        stdout.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]
    if hasattr(stderr, "reconfigure"):
        stderr.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Mode is a free-form positional rather than a choices list so that an
    unknown mode reaches main() and exits with its own status.
    """
    parser = _ArgumentParser(
        prog=PROG,
        description=(
            "Extract Lua scripts and XML UI from a Tabletop Simulator save "
            "into files, or pack edited files back into the save."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("mode", help=f"One of: {', '.join(MODES)}.")
    parser.add_argument("save_name", help="Save name without the .json extension.")
    parser.add_argument(
        "--saves-dir",
        type=Path,
        default=None,
        help="Saves root (default: ~/Documents/My Games/Tabletop Simulator/Saves).",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="extract: delete .lua/.xml files no object produced this run.",
    )
    parser.add_argument(
        "--skip-empty",
        action="store_true",
        help="extract: don't write files for empty scripts or UI.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file read and written.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code: 0 success, 1 usage error, 2 unknown mode,
        3 save rejected (validation, missing script directory)

    Handles:
        - CliError: printed as "Error: ..." with the error's exit code

    Failures reading or writing the save document itself propagate.
    """
    _configure_stdio_utf8()
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)

        handler = HANDLERS.get(args.mode)
        if handler is None:
            raise InvalidModeError(parser.prog, args.mode)

        paths = resolve_save_paths(args.save_name, args.saves_dir)
        return int(handler(paths, args))
    except CliError as error:
        print(f"Error: {error}", file=sys.stderr)
        return error.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
