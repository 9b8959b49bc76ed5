"""Command-line driver.

Exit codes follow the BSD ``sysexits`` convention.
"""

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import List, Optional, TextIO

from dfacheck import __version__
from dfacheck.checker import check_stream
from dfacheck.config import Config
from dfacheck.exceptions import DataFormatError, EvaluationError

logger = logging.getLogger(__name__)

EX_OK = 0
DATA_ERROR = 65
NO_INPUT_ERROR = 66
CANT_CREATE_ERROR = 73
IO_ERROR = 74

DESCRIPTION = """\
Check which words are accepted by a DFA.

Without options the DFA definition and the words are read from standard
input and the results are written to standard output. The definition
block ends at a line containing only '---'; every following line is a
word of space-separated symbols. Each word produces one ACEITA or
REJEITA line.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfacheck",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"dfacheck v. {__version__}",
    )
    parser.add_argument(
        "-i",
        "--input",
        metavar="FILE",
        help="read the definition and words from FILE instead of standard input",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="write the results to FILE instead of standard output",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject definitions that use undeclared states or symbols",
    )
    return parser


def _open_input(path: Optional[str], config: Config) -> TextIO:
    if path is None:
        return sys.stdin
    return open(path, encoding=config.encoding)


def _open_output(path: Optional[str], config: Config) -> TextIO:
    if path is None:
        return sys.stdout
    return open(path, "w", encoding=config.encoding)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the checker and return the process exit code."""
    args = build_parser().parse_args(argv)
    config = Config(strict=args.strict)
    logging.basicConfig(format="dfacheck: %(message)s", level=logging.WARNING)

    with ExitStack() as stack:
        try:
            reader = _open_input(args.input, config)
        except FileNotFoundError:
            logger.error("Input file not found: %s", args.input)
            return NO_INPUT_ERROR
        except OSError as e:
            logger.error("Cannot read input file %s: %s", args.input, e)
            return IO_ERROR
        if reader is not sys.stdin:
            stack.enter_context(reader)

        try:
            writer = _open_output(args.output, config)
        except OSError:
            logger.error("Cannot create output file: %s", args.output)
            return CANT_CREATE_ERROR
        if writer is not sys.stdout:
            stack.enter_context(writer)

        try:
            check_stream(reader, writer, config)
            writer.flush()
        except DataFormatError as e:
            logger.error("Invalid automaton definition: %s", e)
            return DATA_ERROR
        except EvaluationError as e:
            logger.error("Cannot evaluate word: %s", e)
            return DATA_ERROR
        except UnicodeError as e:
            logger.error("Input is not valid %s text: %s", config.encoding, e)
            return DATA_ERROR
        except OSError as e:
            logger.error("I/O error: %s", e)
            return IO_ERROR

    return EX_OK


if __name__ == "__main__":
    sys.exit(main())
