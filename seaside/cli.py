"""Command-line arguments of the seaside command."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from seaside.config import SEASIDE_VERSION


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seaside", description="A MIPS interpreter.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {SEASIDE_VERSION}")
    parser.add_argument(
        "--config", type=Path, default=None, help="An explicit path to a `Seaside.toml` file"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    run = commands.add_parser(
        "run", help="Runs an assembled MIPS program in the specified project directory."
    )
    run.add_argument("directory", type=Path)
    commands.add_parser("exe-path", help="Prints the file path of the `seaside` executable.")
    commands.add_parser("experiment", help="Runs experimental code.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments; exits with usage text on bad input."""
    return _parser().parse_args(argv)