# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the loxfront command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from loxfront.compiler.artifact import serialize
from loxfront.compiler.diagnostics import Diagnostics
from loxfront.compiler.parser import parse
from loxfront.compiler.printer import render
from loxfront.compiler.scanner import scan
from loxfront.settings.config import CONFIG_FILE_NAME, ConfigError, DriverConfig, load_config

# ###############
# Public Interface
# ###############

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_DATA_ERROR = 65


def main() -> None:
    """Run the loxfront CLI."""
    parser = argparse.ArgumentParser(
        prog="loxfront",
        description="Scan and parse a Lox expression and print its syntax tree.",
    )
    parser.add_argument(
        "script",
        nargs="?",
        help="Lox source file to run once (default: start an interactive prompt)",
    )
    parser.add_argument(
        "--emit",
        choices=("ast", "tokens", "json"),
        default="ast",
        help="What to print for each input: the rendered tree, the token list, or the tree as JSON (default: ast)",
    )
    parser.add_argument(
        "--config",
        help=f"Path to a configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not color diagnostics",
    )

    args = parser.parse_args()
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Load the configuration and run a script or the interactive prompt."""
    try:
        config = _load_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    if args.no_color:
        config.color = False

    if args.script is not None:
        return _run_file(Path(args.script), config, args.emit)
    return _run_prompt(config, args.emit)


def _load_config(path: str | None) -> DriverConfig:
    """Load the explicit config file, or the default one if it exists."""
    if path is not None:
        return load_config(Path(path))
    default = Path.cwd() / CONFIG_FILE_NAME
    if default.exists():
        return load_config(default)
    return DriverConfig()


def _run_file(path: Path, config: DriverConfig, emit: str) -> int:
    """Scan and parse a whole file once."""
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return EXIT_FAILURE

    had_error = _run(source, config, emit)
    return EXIT_DATA_ERROR if had_error else EXIT_OK


def _run_prompt(config: DriverConfig, emit: str) -> int:
    """Read and process one line at a time until end of input or interrupt."""
    print("Welcome to the Lox expression front end. Press Ctrl-D to exit.")
    while True:
        try:
            line = input(config.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return EXIT_OK
        # Errors in one line never end the session.
        _run(line, config, emit)


def _run(source: str, config: DriverConfig, emit: str) -> bool:
    """Process one source text and return True if any diagnostic was reported."""
    diagnostics = Diagnostics()
    tokens = scan(source, diagnostics)

    if emit == "tokens":
        for token in tokens:
            print(token)
    else:
        expr = parse(
            tokens,
            diagnostics,
            max_depth=config.max_nesting_depth,
            allow_trailing=config.allow_trailing_tokens,
        )
        if expr is not None:
            print(serialize(expr) if emit == "json" else render(expr))

    for message in diagnostics.messages():
        print(chalk.red(message) if config.color else message, file=sys.stderr)
    return diagnostics.had_error
