import pytest

from minigrep.fs import is_binary, is_hidden


@pytest.mark.parametrize("name", [".git", ".hidden", "target", "."])
def test_hidden_names(name):
    assert is_hidden(name) is True


@pytest.mark.parametrize("name", ["src", "targets", "file.txt", "my.target"])
def test_visible_names(name):
    assert is_hidden(name) is False


def test_text_file_is_not_binary(tmp_path):
    path = tmp_path / "text.txt"
    path.write_text("hello\nworld\n")
    assert is_binary(path) is False


def test_file_with_nul_is_binary(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"abc\x00def")
    assert is_binary(path) is True


def test_nul_after_first_kilobyte_is_ignored(tmp_path):
    path = tmp_path / "late.bin"
    path.write_bytes(b"a" * 1024 + b"\x00")
    assert is_binary(path) is False


def test_empty_file_is_not_binary(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert is_binary(path) is False


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        is_binary(tmp_path / "absent")