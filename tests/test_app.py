import io
import json
import re
from pathlib import Path

import pytest

from minigrep.app import App, compile_pattern, main
from minigrep.config import Config, OutputMode


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("foo\nbar\n")
    (tmp_path / "b.txt").write_text("bar only\n")
    (tmp_path / ".hidden.txt").write_text("bar\n")
    return tmp_path


def test_compile_pattern_ignore_case():
    pattern = compile_pattern(Config(query="hello", ignore_case=True))
    assert pattern.search("HeLLo world") is not None
    assert compile_pattern(Config(query="hello")).search("HELLO") is None


def test_compile_pattern_invalid_raises():
    with pytest.raises(re.error):
        compile_pattern(Config(query="("))


def test_main_standard_output(tmp_path, capsys):
    file_path = tmp_path / "f.txt"
    file_path.write_text("alpha\nfoo beta\ngamma\n")
    assert main(["foo", str(file_path)]) == 0
    assert capsys.readouterr().out == "2:foo beta\n"


def test_main_directory_prefixes_path(tree, capsys):
    assert main(["foo", str(tree)]) == 0
    assert capsys.readouterr().out == f"{tree / 'a.txt'}:1:foo\n"


def test_main_files_without_match(tree, capsys):
    assert main(["--files-without-match", "foo", str(tree)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == sorted([str(tree / ".hidden.txt"), str(tree / "b.txt")])


def test_main_json(tmp_path, capsys):
    file_path = tmp_path / "f.txt"
    file_path.write_text("foo\nbar\n")
    assert main(["--json", "foo", str(file_path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [{"path": str(file_path), "line_number": 1, "content": "foo"}]


def test_main_invalid_regex_fails(tmp_path, capsys):
    file_path = tmp_path / "f.txt"
    file_path.write_text("x\n")
    assert main(["(", str(file_path)]) == 1
    assert capsys.readouterr().err.startswith("Application error:")


def test_main_files_without_match_on_stdin_fails(capsys):
    assert main(["--files-without-match", "foo"]) == 1
    assert "--files-without-match is not supported for stdin." in capsys.readouterr().err


def test_collect_all_files_includes_hidden(tree):
    app = App(Config(query="x", path=str(tree)), re.compile("x"), OutputMode.STANDARD)
    assert app.collect_all_files(tree) == {
        tree / "a.txt",
        tree / "b.txt",
        tree / ".hidden.txt",
    }


def test_collect_all_files_single_file(tree):
    file_path = tree / "a.txt"
    app = App(Config(query="x", path=str(file_path)), re.compile("x"), OutputMode.STANDARD)
    assert app.collect_all_files(file_path) == {Path(file_path)}


def test_execute_reads_stdin():
    out = io.StringIO()
    config = Config(query="foo", count=True)
    app = App(
        config,
        compile_pattern(config),
        config.output_mode(),
        out=out,
        color=False,
        stdin=io.BytesIO(b"foo\nbar\nfoo\n"),
    )
    app.execute()
    assert out.getvalue() == "stdin:2\n"


def test_execute_count_over_directory_prints_total(tree):
    out = io.StringIO()
    config = Config(query="bar", path=str(tree), count=True)
    App(config, compile_pattern(config), config.output_mode(), out=out, color=False).execute()
    lines = out.getvalue().splitlines()
    assert lines[:2] == [f"{tree / 'a.txt'}:1", f"{tree / 'b.txt'}:1"]
    assert lines[-1] == "Total: 2"