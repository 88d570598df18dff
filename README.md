# minigrep

A small grep-like command-line tool. It searches a file, a whole directory
tree, or standard input for lines that match a Python regular expression.
It can print the matches with highlighting, count them, list the files
that contain them or do not contain them, or write them out as JSON.

## Installation

```
pip install .
```

This installs the `minigrep` command. The package has no dependencies
outside the standard library.

## Usage

```
minigrep [OPTIONS] QUERY [PATH]
```

`QUERY` is a regular expression in Python's `re` syntax.

- With no `PATH`, standard input is read as UTF-8 and reported under the
  name `stdin`.
- If `PATH` is a file, that file is searched.
- If `PATH` is a directory, every regular file below it is searched, in
  name order. Symbolic links are not followed.

Entries whose name starts with `.` and entries named `target` are skipped
during the search. Binary files, meaning files with a NUL byte in their
first 1024 bytes, are skipped too. Directories that cannot be read are
reported on standard error as `Failed to access path: ...`, and the search
goes on.

### Search options

| Option | Meaning |
| --- | --- |
| `-i`, `--ignore-case` | Case-insensitive search |
| `-v`, `--invert-match` | Select lines that do not match. Cannot be combined with `-o` |
| `-o`, `--only-matching` | Print only the matched parts of each line, one per output line |

### Output options

| Option | Meaning |
| --- | --- |
| `-A NUM`, `--after-context NUM` | Show NUM lines of trailing context |
| `-B NUM`, `--before-context NUM` | Show NUM lines of leading context |
| `-C NUM`, `--context NUM` | Show NUM lines of context on both sides. A value above 0 overrides `-A` and `-B` |
| `-n`, `--line-number` | Accepted. Line numbers are always shown in the standard output mode |
| `--version` | Print the version and exit |

### Output modes (at most one)

| Option | Meaning |
| --- | --- |
| *(none)* | Print each selected line as `LINE:text`, with the matches highlighted. Context lines use `-` in place of `:`, and separate context groups are divided by `--` |
| `--json` | Print all matches as a pretty-printed JSON array |
| `-c`, `--count` | Print `path:count` for each file that has matches, sorted by path. When more than one file matched, a `Total: N` line follows |
| `-l`, `--files-with-matches` | Print the sorted names of the files that have at least one match |
| `--files-without-match` | Print the sorted names of the files with no match. This mode needs a `PATH` |

When `PATH` is a directory, each line in the standard mode begins with the
file's path, as in `path:LINE:text`.

Each JSON element has the keys `path`, `line_number` and `content`. The
value of `content` is the whole line, or, with `-o`, a list of the matched
parts. If there are no matches, `[]` is printed.

### Colour

Colours are used when standard output is a terminal. Setting `NO_COLOR`
turns them off, `CLICOLOR=0` turns them off, and `CLICOLOR_FORCE` (set to
a value other than `0`) turns them on even when output is not a terminal.

## Examples

```
minigrep -C 2 "def main" minigrep/
cat notes.txt | minigrep -i todo
minigrep --count error logs/
minigrep --json -o "[0-9]+" data.txt
minigrep --files-without-match TODO src/
```

## Errors and exit status

If a run fails, for example because the pattern is invalid or
`--files-without-match` is used without a `PATH`, the tool prints
`Application error: ...` to standard error and exits with status 1.
Invalid command-line arguments, such as a negative context length or two
output modes at once, are rejected by the argument parser with status 2.
A successful run exits with status 0, whether or not anything matched.

## Library use

```python
from minigrep.config import parse_args
from minigrep.app import run

run(parse_args(["needle", "haystack.txt"]))
```

To capture the output or to supply the input yourself, use `App` directly:

```python
import io

from minigrep.app import App, compile_pattern
from minigrep.config import Config

config = Config(query="b+", only_matching=True)
out = io.StringIO()
App(
    config,
    compile_pattern(config),
    config.output_mode(),
    out=out,
    color=False,
    stdin=["abbbc\n", "xyz\n"],
).execute()
print(out.getvalue())  # 1:bbb
```

The building blocks live in these modules:

- `minigrep.config`: `Config`, `OutputMode`, `build_parser`, `parse_args`
- `minigrep.matcher`: `DefaultMatcher`, `OnlyMatchingMatcher`, `LineMatch`, `ContentMatch`
- `minigrep.output`: `StandardSink`, `JsonSink`, `CountSink`, `FilesWithMatchesSink`, `FilesWithoutMatchSink`, `OutputFormatter`
- `minigrep.context`: `ContextManager`
- `minigrep.search`: `SearcherBuilder`, `Searcher`
- `minigrep.fs`: `is_hidden`, `is_binary`