# myrtle/core.py
import logging
import os
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from typing import IO, Optional

from .framework.base_interpreter import execute_dsl
from .framework.errors import ExitCode, InputFileError, MyrtleError, OutputFileError
from .domains.turtle.interpreter import MyrtleInterpreter

logger = logging.getLogger(__name__)

# --- Configuration ---
class AppConfig:
    """Centralized configuration for the application."""
    MAX_ROWS = 50
    MAX_COLS = 50
    VERSION = "1.0.0"
    COPYRIGHT_YEAR = "2011"
    AUTHOR = "Kevin R. Burger"
    PACKAGE_ROOT = os.path.dirname(os.path.abspath(__file__))
    GRAMMAR_FILE = os.path.join("domains", "turtle", "grammar.dsl")

    @staticmethod
    def get_grammar_path(grammar_file: str) -> str:
        """Constructs the full path to a grammar file."""
        return os.path.join(AppConfig.PACKAGE_ROOT, grammar_file)

    @staticmethod
    def version_line() -> str:
        return f"Myrtle (the Turtle) Ver {AppConfig.VERSION} -- (c) {AppConfig.COPYRIGHT_YEAR} {AppConfig.AUTHOR}"


@dataclass
class RunOptions:
    """What the command line asked for. None means the standard stream."""
    in_fname: Optional[str] = None
    out_fname: Optional[str] = None
    verbose: bool = False


# --- Stream Management ---
def open_input(stack: ExitStack, fname: Optional[str]) -> IO[str]:
    """Opens the command source; stdin is used as-is and never closed."""
    if not fname:
        return sys.stdin
    try:
        return stack.enter_context(open(fname, 'r'))
    except OSError as e:
        raise InputFileError(f"Cannot open input file '{fname}'") from e


def open_output(stack: ExitStack, fname: Optional[str]) -> IO[str]:
    """Opens the canvas destination; stdout is used as-is and never closed."""
    if not fname:
        return sys.stdout
    try:
        return stack.enter_context(open(fname, 'w'))
    except OSError as e:
        raise OutputFileError(f"Cannot open output file '{fname}'") from e


# --- Entry Points ---
def interpret(stream: IO[str], output: IO[str], verbose: bool = False,
              console: Optional[IO[str]] = None) -> ExitCode:
    """Runs one program from `stream`, writing the canvas to `output`."""
    return execute_dsl(
        stream,
        AppConfig.get_grammar_path(AppConfig.GRAMMAR_FILE),
        MyrtleInterpreter,
        output=output,
        rows=AppConfig.MAX_ROWS,
        cols=AppConfig.MAX_COLS,
        verbose=verbose,
        console=console,
    )


def report_error(error: MyrtleError) -> ExitCode:
    """Tells the user why we are stopping and picks the exit code."""
    print(f"{error.message}. Terminating.", file=sys.stderr)
    return error.exit_code


def run_program(options: RunOptions) -> ExitCode:
    """Opens the streams named in `options` and interprets the program."""
    logger.debug("Reading commands from %s, writing canvas to %s",
                 options.in_fname or "<stdin>", options.out_fname or "<stdout>")
    try:
        with ExitStack() as stack:
            stream = open_input(stack, options.in_fname)
            output = open_output(stack, options.out_fname)
            return interpret(stream, output, verbose=options.verbose)
    except MyrtleError as e:
        return report_error(e)
