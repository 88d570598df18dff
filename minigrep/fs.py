"""File-system helpers: hidden entries and binary detection."""

from __future__ import annotations

import os

_SNIFF_SIZE = 1024


def is_hidden(name: str) -> bool:
    """Return True for dot-entries and for build output directories named ``target``."""
    return name.startswith(".") or name == "target"


def is_binary(path: str | os.PathLike[str]) -> bool:
    """Return True if the first 1024 bytes of the file contain a NUL byte."""
    with open(path, "rb") as handle:
        head = handle.read(_SNIFF_SIZE)
    return b"\0" in head