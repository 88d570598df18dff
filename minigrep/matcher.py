"""Line matchers and the results they produce."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Union


@dataclass
class LineMatch:
    """A whole line selected by a matcher."""

    line: str


@dataclass
class ContentMatch:
    """The matched fragments of a line, in order."""

    matches: list[str] = field(default_factory=list)


MatchResult = Union[LineMatch, ContentMatch]


class Matcher(ABC):
    """Decides whether a line is selected and what part of it is reported."""

    @abstractmethod
    def find(self, line: str) -> MatchResult | None:
        """Return the match result for ``line`` or None when it is not selected."""


class DefaultMatcher(Matcher):
    """Selects whole lines that match (or, inverted, do not match) a pattern."""

    def __init__(self, pattern: re.Pattern[str], invert_match: bool = False) -> None:
        self.pattern = pattern
        self.invert_match = invert_match

    def find(self, line: str) -> LineMatch | None:
        is_match = self.pattern.search(line) is not None
        if is_match != self.invert_match:
            return LineMatch(line)
        return None


class OnlyMatchingMatcher(Matcher):
    """Reports every non-overlapping match of a pattern within a line."""

    def __init__(self, pattern: re.Pattern[str]) -> None:
        self.pattern = pattern

    def find(self, line: str) -> ContentMatch | None:
        matches = [m.group(0) for m in self.pattern.finditer(line)]
        return ContentMatch(matches) if matches else None