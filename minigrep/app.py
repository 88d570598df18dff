"""Top-level search run and the command-line entry point."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import IO, Iterable, Sequence

from minigrep.config import Config, OutputMode, parse_args
from minigrep.search import SearcherBuilder, _walk_files


class App:
    """Runs one search as described by a configuration."""

    def __init__(
        self,
        config: Config,
        pattern: re.Pattern[str],
        output_mode: OutputMode,
        out: IO[str] | None = None,
        color: bool | None = None,
        stdin: Iterable[str | bytes] | None = None,
    ) -> None:
        self.config = config
        self.pattern = pattern
        self.output_mode = output_mode
        self.out = out
        self.color = color
        self.stdin = stdin

    def execute(self) -> None:
        """Search the configured path, or standard input when no path is given."""
        after_len, before_len = self.config.effective_context()
        builder = SearcherBuilder(self.config, self.pattern, out=self.out, color=self.color)

        if self.config.path is not None:
            path = Path(self.config.path)
            all_files = (
                self.collect_all_files(path)
                if self.output_mode is OutputMode.FILES_WITHOUT_MATCH
                else None
            )
            searcher = builder.build(self.output_mode, all_files)
            searcher.search_path(path, before_len, after_len)
            searcher.sink.finish()
            return

        if self.output_mode is OutputMode.FILES_WITHOUT_MATCH:
            raise ValueError("Error: --files-without-match is not supported for stdin.")

        searcher = builder.build(self.output_mode, None)
        reader = self.stdin if self.stdin is not None else getattr(sys.stdin, "buffer", sys.stdin)
        searcher.search_reader(reader, before_len, after_len)
        searcher.sink.finish()

    def collect_all_files(self, path: str | os.PathLike[str]) -> set[Path]:
        """Return every regular file at or below ``path``, hidden ones included."""
        root = Path(path)
        if root.is_dir():
            return set(_walk_files(root, skip_hidden=False))
        if root.is_file():
            return {root}
        return set()


def compile_pattern(config: Config) -> re.Pattern[str]:
    """Compile the query, case-insensitively when requested."""
    flags = re.IGNORECASE if config.ignore_case else 0
    return re.compile(config.query, flags)


def run(config: Config) -> None:
    """Run a search for ``config``, printing results to standard output."""
    pattern = compile_pattern(config)
    App(config, pattern, config.output_mode()).execute()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    config = parse_args(argv)
    try:
        run(config)
    except Exception as exc:  # every failure is reported the same way
        print(f"Application error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())