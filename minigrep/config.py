"""Command-line configuration: options, output modes and argument parsing."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class OutputMode(Enum):
    """How search results are reported."""

    STANDARD = "standard"
    JSON = "json"
    COUNT = "count"
    FILES_WITH_MATCHES = "files_with_matches"
    FILES_WITHOUT_MATCH = "files_without_match"


@dataclass
class Config:
    """All options that control a search run."""

    query: str
    path: str | None = None
    ignore_case: bool = False
    invert_match: bool = False
    only_matching: bool = False
    after_context: int = 0
    before_context: int = 0
    context: int = 0
    line_number: bool = False
    json: bool = False
    count: bool = False
    files_with_matches: bool = False
    files_without_match: bool = False

    def effective_context(self) -> tuple[int, int]:
        """Return ``(after, before)`` context lengths; ``context`` overrides both."""
        if self.context > 0:
            return self.context, self.context
        return self.after_context, self.before_context

    def output_mode(self) -> OutputMode:
        """Return the selected output mode, STANDARD when no mode flag is set."""
        candidates = (
            (self.json, OutputMode.JSON),
            (self.count, OutputMode.COUNT),
            (self.files_with_matches, OutputMode.FILES_WITH_MATCHES),
            (self.files_without_match, OutputMode.FILES_WITHOUT_MATCH),
        )
        return next((mode for active, mode in candidates if active), OutputMode.STANDARD)


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"value must not be negative: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog="minigrep",
        description="Search for a pattern in files or standard input.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("query", help="The pattern to search for")
    parser.add_argument("path", nargs="?", default=None, help="The path to the file to search in")

    search = parser.add_argument_group("Search Options")
    search.add_argument("-i", "--ignore-case", action="store_true", help="Case-insensitive search")
    exclusive = search.add_mutually_exclusive_group()
    exclusive.add_argument(
        "-v", "--invert-match", action="store_true", help="Invert the sense of matching"
    )
    exclusive.add_argument(
        "-o", "--only-matching", action="store_true", help="Print only the matched parts of a line"
    )

    output = parser.add_argument_group("Output Options")
    output.add_argument(
        "-A", "--after-context", metavar="NUM", type=_non_negative, default=0,
        help="Show NUM lines of trailing context",
    )
    output.add_argument(
        "-B", "--before-context", metavar="NUM", type=_non_negative, default=0,
        help="Show NUM lines of leading context",
    )
    output.add_argument(
        "-C", "--context", metavar="NUM", type=_non_negative, default=0,
        help="Show NUM lines of context (A+B)",
    )
    output.add_argument(
        "-n", "--line-number", action="store_true",
        help="Prefix each line of output with the line number",
    )

    modes_group = parser.add_argument_group("Output Modes")
    modes = modes_group.add_mutually_exclusive_group()
    modes.add_argument("--json", action="store_true", help="Output results in JSON format")
    modes.add_argument("-c", "--count", action="store_true", help="Print a count of matching lines")
    modes.add_argument(
        "-l", "--files-with-matches", action="store_true",
        help="Print only the names of files with matches",
    )
    modes.add_argument(
        "--files-without-match", action="store_true",
        help="Print only the names of files that DO NOT contain matches",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line arguments into a Config; exits on invalid input."""
    namespace = build_parser().parse_args(argv)
    return Config(**vars(namespace))