"""Command-line interface and interactive prompt.

WHY: Most people use the approximator by typing words at a prompt and
reading the result. Scripts want the same thing without the prompt. The
CLI provides both on top of the library's transliterate() function.

HOW: Uses argparse to accept optional words, an --explain flag and a
--log-level option. With words, each one is converted and printed once.
Without words, run_repl() reads lines from stdin until 'exit' or end of
input. The streams are parameters so tests can drive the loop with
io.StringIO.

RULES:
- Banner and instructions print once; the "> " prompt prints before each read
- A line equal to 'exit' (any case) prints the farewell and stops
- Empty lines are skipped without calling transliterate()
- Results print as "English approximation: ..." followed by a blank line
- End of input stops the loop quietly
- Read failures go to stderr and give exit status 1
- Log records go to stderr so stdout only carries results
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from framburdur.config import (
    BANNER,
    EXIT_COMMAND,
    FAREWELL,
    INSTRUCTIONS,
    LOG_FORMAT,
    LOG_LEVEL,
    LOG_LEVELS,
    PROMPT,
    READ_ERROR_PREFIX,
    RESULT_LABEL,
)
from framburdur.core import tokenize, transliterate

logger = logging.getLogger(__name__)


def _print_explanation(word: str, out: TextIO) -> None:
    """Print one indented ``source -> sound (rule)`` line per token."""
    for token in tokenize(word):
        print("  {}".format(token.describe()), file=out)


def run_repl(
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    explain: bool = False,
) -> int:
    """Run the interactive read-print loop.

    WHY: This is the program's normal mode: type a word, get its
    approximation, repeat.

    HOW: Reads one line at a time with readline() so a prompt can be shown
    before each read. The trailing newline is removed before the line is
    checked for the exit command or passed to transliterate().

    RULES:
    - Returns 0 on 'exit' or end of input
    - Returns 1 after reporting an OSError or UnicodeDecodeError on stderr
    - Lines that are only whitespace are still converted (to an empty result)

    Args:
        stdin: Stream to read words from.
        stdout: Stream for the banner, prompts and results.
        stderr: Stream for read errors.
        explain: Also print the per-token rule breakdown.

    Returns:
        Process exit status.
    """
    print(BANNER, file=stdout)
    print(INSTRUCTIONS, file=stdout)

    while True:
        print(PROMPT, end="", file=stdout, flush=True)
        try:
            line = stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Input stream failed", exc_info=True)
            print("{} {}".format(READ_ERROR_PREFIX, e), file=stderr)
            return 1

        if not line:
            logger.debug("End of input")
            return 0

        line = line.rstrip("\r\n")
        if line.lower() == EXIT_COMMAND:
            print(FAREWELL, file=stdout)
            return 0

        if not line:
            continue

        print("{}{}".format(RESULT_LABEL, transliterate(line)), file=stdout)
        if explain:
            _print_explanation(line, stdout)
        print(file=stdout)


def run_once(words: List[str], stdout: TextIO, explain: bool = False) -> int:
    """Convert each word given on the command line and print ``word: result``."""
    for word in words:
        print("{}: {}".format(word, transliterate(word)), file=stdout)
        if explain:
            _print_explanation(word, stdout)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable. Tests can inspect the parser without running the loop.

    RULES:
    - Positional: words (zero or more; none means interactive mode)
    - Optional: --explain, --log-level
    """
    parser = argparse.ArgumentParser(
        prog="framburdur",
        description="Approximate the pronunciation of Icelandic words for "
                    "English speakers. Without words, starts an interactive prompt.",
    )

    parser.add_argument(
        "words",
        nargs="*",
        help="Icelandic words to convert. Omit for interactive mode.",
    )

    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show which rule produced each part of the result.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s, from FRAMBURDUR_LOG_LEVEL).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    WHY: This is the function that __main__.py and the ``framburdur``
    console script call.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Exits with the status returned by the selected mode
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level not in LOG_LEVELS:
        parser.error("invalid log level {!r} (choose from {})".format(
            args.log_level, ", ".join(LOG_LEVELS)))

    logging.basicConfig(
        level=args.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        if args.words:
            status = run_once(args.words, sys.stdout, explain=args.explain)
        else:
            status = run_repl(sys.stdin, sys.stdout, sys.stderr, explain=args.explain)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)

    sys.exit(status)


if __name__ == "__main__":
    main()
