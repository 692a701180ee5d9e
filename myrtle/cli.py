# myrtle/cli.py
import argparse
import logging
import sys
from typing import List, Optional

from .core import AppConfig, RunOptions, report_error, run_program
from .framework.errors import CommandLineError, ExitCode

HELP_TEXT = """\
A Myrtle programming language interpreter.
Usage: myrtle [options]

If there are no command line options, then Myrtle reads commands from
stdin and performs them and writes the output to stdout.

Options:
-i file    Reads commands from 'file'.
-o file    Sends output to 'file'.
-h         Displays this help message and terminates.
-V         Verbose mode. Displays commands as they are performed.
-v         Displays the version of the Myrtle interpreter and terminates.
"""


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises instead of printing usage and exiting."""

    def error(self, message: str):
        raise CommandLineError(f"Invalid command line: {message}")


def build_parser() -> _ArgumentParser:
    p = _ArgumentParser(prog="myrtle", add_help=False, allow_abbrev=False)
    p.add_argument("-i", dest="in_fname", metavar="file")
    p.add_argument("-o", dest="out_fname", metavar="file")
    p.add_argument("-h", dest="help", action="store_true")
    p.add_argument("-V", dest="verbose", action="store_true")
    p.add_argument("-v", dest="version", action="store_true")
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except CommandLineError as e:
        print(HELP_TEXT)
        return int(report_error(e))

    if args.help:
        print(AppConfig.version_line())
        print(HELP_TEXT)
        return int(ExitCode.NORMAL)
    if args.version:
        print(AppConfig.version_line())
        return int(ExitCode.NORMAL)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = RunOptions(in_fname=args.in_fname, out_fname=args.out_fname, verbose=args.verbose)
    return int(run_program(options))
