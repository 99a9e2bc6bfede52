"""Command-line interface for SiCompiler.

WHY: Students and lab scripts compile programs from the terminal. The
CLI wires the pipeline: repertoire loading, tokenizing, validation,
and writing: behind a single command and turns failures into a
readable message and a non-zero exit status.

HOW: Uses argparse to accept the input file, an optional output file,
an optional repertoire path, an output format, and a verbosity flag.
Calls pipeline.run() and reports the elapsed time. Status messages go
to stderr.

RULES:
- Positional: input_file (required), output_file (optional, config default)
- -r/--repertoire: repertoire file (default: config, then bundled file)
- -f/--format: formatter key (default: config, "canonical")
- -v/--verbose: DEBUG logging
- Success prints "Finished in {seconds}s" to stderr, exit status 0
- SicompilerError prints "Error: ..." to stderr, exit status 1
- Ctrl-C exits with status 130
- An unknown format, including one set through config, exits with status 2
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from sicompiler import __version__
from sicompiler.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_OUTPUT_PATH,
)
from sicompiler.errors import SicompilerError
from sicompiler.formatters import FORMATTERS
from sicompiler.pipeline import run


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _resolve_log_level(verbose: bool) -> int:
    """DEBUG when verbose, else the configured level name (WARNING if unknown)."""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(verbose: bool) -> None:
    level = _resolve_log_level(verbose)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="sicompiler",
        description="Validate a pseudo-assembly program against an instruction "
                    "repertoire and write it in canonical form.",
    )
    parser.add_argument(
        "input_file",
        help="Path to the program source file.",
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        default=DEFAULT_OUTPUT_PATH,
        help="Path of the file to write (default: %(default)s).",
    )
    parser.add_argument(
        "-r", "--repertoire",
        default=None,
        help="Path to the repertoire file (default: SICOMPILER_REPERTOIRE or "
             "the bundled repertoire).",
    )
    parser.add_argument(
        "-f", "--format",
        dest="output_format",
        choices=sorted(FORMATTERS.keys()),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: %(default)s).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the exit status; __main__ and the console script pass it
      to sys.exit()
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check a default against choices
    if args.output_format not in FORMATTERS:
        parser.error("unknown output format '{}' (choose from {})".format(
            args.output_format, ", ".join(sorted(FORMATTERS))
        ))
    _configure_logging(args.verbose)

    started = time.perf_counter()
    try:
        output_path = run(
            args.input_file,
            args.output_file,
            repertoire_path=args.repertoire,
            output_format=args.output_format,
        )
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        return 130
    except SicompilerError as e:
        _status("Error: {}".format(e))
        return 1

    _status("Wrote {}".format(output_path))
    _status("Finished in {:.6f}s".format(time.perf_counter() - started))
    return 0


if __name__ == "__main__":
    sys.exit(main())
