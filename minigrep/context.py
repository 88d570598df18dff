"""Tracks leading and trailing context lines around matches in one input."""

from __future__ import annotations

import os
from collections import deque
from pathlib import Path

from minigrep.matcher import MatchResult
from minigrep.output import ContextKind, ContextLine, MatchedLine, Sink


class ContextManager:
    """Routes matches and surrounding context lines of a single input to a sink."""

    def __init__(
        self,
        sink: Sink,
        before_len: int,
        after_len: int,
        path: str | os.PathLike[str],
    ) -> None:
        self.sink = sink
        self.before_len = before_len
        self.after_len = after_len
        self.path = Path(path)
        self._before: deque[tuple[int, str]] = deque(maxlen=before_len)
        self._after_countdown = 0
        self._last_line_num = 0

    @property
    def _context_enabled(self) -> bool:
        return self.before_len > 0 or self.after_len > 0

    def handle_match(self, line_num: int, match_result: MatchResult) -> None:
        """Emit a separator if needed, pending leading context, then the match."""
        if (
            self._context_enabled
            and self._last_line_num > 0
            and line_num > self._last_line_num + self.after_len + 1
        ):
            self.sink.context_break()

        for buffered_num, content in self._before:
            if buffered_num > self._last_line_num:
                self.sink.context(
                    ContextLine(self.path, buffered_num, content, ContextKind.BEFORE)
                )
        self._before.clear()

        self.sink.matched(MatchedLine(self.path, line_num, match_result))

        self._last_line_num = line_num
        self._after_countdown = self.after_len

    def handle_non_match(self, line_num: int, line_content: str) -> None:
        """Emit the line as trailing context if due, and remember it as leading context."""
        if self._after_countdown > 0:
            self.sink.context(
                ContextLine(self.path, line_num, line_content, ContextKind.AFTER)
            )
            self._last_line_num = line_num
            self._after_countdown -= 1

        if self.before_len > 0:
            self._before.append((line_num, line_content))