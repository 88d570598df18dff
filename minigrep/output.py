"""Result records, prefix formatting and the sinks that print search results."""

from __future__ import annotations

import json
import os
import re
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO, Iterable

from minigrep.config import Config
from minigrep.matcher import ContentMatch, LineMatch, MatchResult


class ContextKind(Enum):
    """Whether a context line precedes or follows a match."""

    BEFORE = "before"
    AFTER = "after"


@dataclass
class ContextLine:
    """A non-matching line shown around a match."""

    path: Path
    line_number: int
    content: str
    kind: ContextKind


@dataclass
class MatchedLine:
    """A selected line together with where it was found."""

    path: Path
    line_number: int
    match_result: MatchResult


def _color_enabled(stream: IO[str]) -> bool:
    env = os.environ
    if env.get("NO_COLOR"):
        return False
    force = env.get("CLICOLOR_FORCE")
    if force and force != "0":
        return True
    if env.get("CLICOLOR") == "0":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class _Palette:
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def _paint(self, text: str, code: str) -> str:
        return f"\x1b[{code}m{text}\x1b[0m" if self.enabled else text

    def cyan(self, text: str) -> str:
        return self._paint(text, "36")

    def green(self, text: str) -> str:
        return self._paint(text, "32")

    def red_bold(self, text: str) -> str:
        return self._paint(text, "1;31")


def _resolve(out: IO[str] | None, color: bool | None) -> tuple[IO[str], _Palette]:
    stream = out if out is not None else sys.stdout
    enabled = _color_enabled(stream) if color is None else color
    return stream, _Palette(enabled)


class Sink(ABC):
    """Receives matches and context lines; ``finish`` emits any summary.

    ``matched``, ``context`` and ``context_break`` return True to keep
    reading the current input and False when nothing more is needed from it.
    """

    @abstractmethod
    def matched(self, data: MatchedLine) -> bool:
        """Handle a selected line."""

    def context(self, line: ContextLine) -> bool:
        """Handle a context line; ignored by default."""
        return True

    def context_break(self) -> bool:
        """Handle a gap between context groups; ignored by default."""
        return True

    @abstractmethod
    def finish(self) -> None:
        """Emit any output gathered during the search."""


class OutputFormatter:
    """Builds the ``[path:]line<sep>`` prefix of printed lines."""

    def __init__(self, config: Config, color: bool | None = None) -> None:
        self.config = config
        self._palette = _Palette(_color_enabled(sys.stdout) if color is None else color)

    def format_prefix(
        self,
        file_path: str | os.PathLike[str],
        line_number: int,
        context_kind: ContextKind | None = None,
    ) -> str:
        prefix = ""
        if self.config.path is not None and Path(self.config.path).is_dir():
            prefix += f"{self._palette.cyan(str(file_path))}:"
        separator = ":" if context_kind is None else "-"
        return prefix + f"{self._palette.green(str(line_number))}{separator}"


class StandardSink(Sink):
    """Prints matching lines with highlighted matches, plus context lines."""

    def __init__(
        self,
        config: Config,
        pattern: re.Pattern[str],
        out: IO[str] | None = None,
        color: bool | None = None,
    ) -> None:
        self.pattern = pattern
        self._out, self._palette = _resolve(out, color)
        self.formatter = OutputFormatter(config, color=self._palette.enabled)

    def matched(self, data: MatchedLine) -> bool:
        prefix = self.formatter.format_prefix(data.path, data.line_number, None)
        result = data.match_result
        if isinstance(result, LineMatch):
            highlighted = self.pattern.sub(
                lambda m: self._palette.red_bold(m.group(0)), result.line
            )
            print(f"{prefix}{highlighted}", file=self._out)
        else:
            for fragment in result.matches:
                print(f"{prefix}{self._palette.red_bold(fragment)}", file=self._out)
        return True

    def context(self, line: ContextLine) -> bool:
        prefix = self.formatter.format_prefix(line.path, line.line_number, line.kind)
        print(f"{prefix}{line.content}", file=self._out)
        return True

    def context_break(self) -> bool:
        print(self._palette.cyan("--"), file=self._out)
        return True

    def finish(self) -> None:
        pass


class FilesWithMatchesSink(Sink):
    """Collects files with at least one match and prints them sorted."""

    def __init__(self, out: IO[str] | None = None, color: bool | None = None) -> None:
        self._out, self._palette = _resolve(out, color)
        self.matched_files: set[Path] = set()

    def matched(self, data: MatchedLine) -> bool:
        self.matched_files.add(Path(data.path))
        return False

    def finish(self) -> None:
        for path in sorted(self.matched_files):
            print(self._palette.cyan(str(path)), file=self._out)


class CountSink(Sink):
    """Counts matching lines per file and prints the counts sorted by path."""

    def __init__(self, out: IO[str] | None = None, color: bool | None = None) -> None:
        self._out, self._palette = _resolve(out, color)
        self.counts: dict[Path, int] = {}

    def matched(self, data: MatchedLine) -> bool:
        path = Path(data.path)
        self.counts[path] = self.counts.get(path, 0) + 1
        return True

    def finish(self) -> None:
        for path in sorted(self.counts):
            print(f"{self._palette.cyan(str(path))}:{self.counts[path]}", file=self._out)
        if len(self.counts) > 1:
            print(f"Total: {sum(self.counts.values())}", file=self._out)


class JsonSink(Sink):
    """Collects matches and prints them as a pretty JSON array."""

    def __init__(self, out: IO[str] | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self.matches: list[dict[str, object]] = []

    def matched(self, data: MatchedLine) -> bool:
        result = data.match_result
        content: object
        if isinstance(result, ContentMatch):
            content = list(result.matches)
        else:
            content = result.line
        self.matches.append(
            {"path": str(data.path), "line_number": data.line_number, "content": content}
        )
        return True

    def finish(self) -> None:
        if not self.matches:
            print("[]", file=self._out)
            return
        print(json.dumps(self.matches, indent=2, ensure_ascii=False), file=self._out)


class FilesWithoutMatchSink(Sink):
    """Prints, sorted, the known files in which nothing matched."""

    def __init__(
        self,
        all_files: Iterable[str | os.PathLike[str]],
        out: IO[str] | None = None,
        color: bool | None = None,
    ) -> None:
        self._out, self._palette = _resolve(out, color)
        self.all_files: set[Path] = {Path(p) for p in all_files}
        self.files_with_matches: set[Path] = set()

    def matched(self, data: MatchedLine) -> bool:
        self.files_with_matches.add(Path(data.path))
        return True

    def finish(self) -> None:
        for path in sorted(self.all_files - self.files_with_matches):
            print(self._palette.cyan(str(path)), file=self._out)