"""Searching streams, files and directory trees for matching lines."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import IO, Callable, Iterable, Iterator

from minigrep.config import Config, OutputMode
from minigrep.context import ContextManager
from minigrep.fs import is_binary, is_hidden
from minigrep.matcher import DefaultMatcher, Matcher, OnlyMatchingMatcher
from minigrep.output import (
    CountSink,
    FilesWithMatchesSink,
    FilesWithoutMatchSink,
    JsonSink,
    Sink,
    StandardSink,
)

STDIN_NAME = "stdin"


def _walk_files(
    root: str | os.PathLike[str],
    *,
    skip_hidden: bool,
    on_error: Callable[[OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield regular files below ``root`` in name order, not following symlinks."""
    try:
        with os.scandir(root) as entries_iter:
            entries = sorted(entries_iter, key=lambda entry: entry.name)
    except OSError as exc:
        if on_error is not None:
            on_error(exc)
        return
    for entry in entries:
        if skip_hidden and is_hidden(entry.name):
            continue
        try:
            if entry.is_dir(follow_symlinks=False):
                yield from _walk_files(entry.path, skip_hidden=skip_hidden, on_error=on_error)
            elif entry.is_file(follow_symlinks=False):
                yield Path(entry.path)
        except OSError as exc:
            if on_error is not None:
                on_error(exc)


def _decoded_lines(lines: Iterable[str | bytes]) -> Iterator[str]:
    """Yield lines as text with a trailing ``\\n`` or ``\\r\\n`` removed."""
    for raw in lines:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        if text.endswith("\n"):
            text = text[:-1]
            if text.endswith("\r"):
                text = text[:-1]
        yield text


def _report_access_error(exc: OSError) -> None:
    print(f"Failed to access path: {exc}", file=sys.stderr)


class Searcher:
    """Runs a matcher over inputs and forwards results to a sink."""

    def __init__(self, matcher: Matcher, sink: Sink) -> None:
        self.matcher = matcher
        self.sink = sink

    def search_stream(
        self,
        lines: Iterable[str | bytes],
        path: str | os.PathLike[str],
        before_len: int,
        after_len: int,
    ) -> None:
        """Search one input given as lines; bytes are decoded as UTF-8."""
        manager = ContextManager(self.sink, before_len, after_len, path)
        for line_num, content in enumerate(_decoded_lines(lines), start=1):
            result = self.matcher.find(content)
            if result is not None:
                manager.handle_match(line_num, result)
            else:
                manager.handle_non_match(line_num, content)

    def search_reader(
        self, reader: Iterable[str | bytes], before_len: int, after_len: int
    ) -> None:
        """Search a reader such as standard input, reported under the name ``stdin``."""
        self.search_stream(reader, STDIN_NAME, before_len, after_len)

    def _targets(self, path: Path) -> Iterator[Path]:
        if path.is_dir():
            yield from _walk_files(path, skip_hidden=True, on_error=_report_access_error)
        elif not os.path.lexists(path):
            _report_access_error(
                FileNotFoundError(2, "No such file or directory", str(path))
            )
        elif is_hidden(path.name):
            return
        elif path.is_file():
            yield path

    def search_path(
        self, path: str | os.PathLike[str], before_len: int, after_len: int
    ) -> None:
        """Search a file, or every visible text file below a directory."""
        for file_path in self._targets(Path(path)):
            try:
                if is_binary(file_path):
                    continue
            except OSError:
                continue
            try:
                handle = open(file_path, "rb")
            except OSError as exc:
                print(f"Failed to open {file_path}: {exc}", file=sys.stderr)
                continue
            with handle:
                self.search_stream(handle, file_path, before_len, after_len)


class SearcherBuilder:
    """Chooses the matcher and sink that a configuration asks for."""

    def __init__(
        self,
        config: Config,
        pattern: re.Pattern[str],
        out: IO[str] | None = None,
        color: bool | None = None,
    ) -> None:
        self.config = config
        self.pattern = pattern
        self.out = out
        self.color = color

    def build_matcher(self) -> Matcher:
        if self.config.only_matching:
            return OnlyMatchingMatcher(self.pattern)
        return DefaultMatcher(self.pattern, invert_match=self.config.invert_match)

    def build_sink(
        self, mode: OutputMode, all_files: Iterable[str | os.PathLike[str]] | None
    ) -> Sink:
        if mode is OutputMode.STANDARD:
            return StandardSink(self.config, self.pattern, out=self.out, color=self.color)
        if mode is OutputMode.JSON:
            return JsonSink(out=self.out)
        if mode is OutputMode.COUNT:
            return CountSink(out=self.out, color=self.color)
        if mode is OutputMode.FILES_WITH_MATCHES:
            return FilesWithMatchesSink(out=self.out, color=self.color)
        if all_files is None:
            raise ValueError("List of all files is required for --files-without-match")
        return FilesWithoutMatchSink(all_files, out=self.out, color=self.color)

    def build(
        self, mode: OutputMode, all_files: Iterable[str | os.PathLike[str]] | None = None
    ) -> Searcher:
        return Searcher(self.build_matcher(), self.build_sink(mode, all_files))