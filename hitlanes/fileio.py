"""Whole-file helpers for saving and loading game data."""

import os
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def write_entire_file(name: PathLike, data: bytes) -> None:
    """Replace the contents of ``name`` with ``data``."""
    with open(name, "wb") as file:
        file.write(data)


def append_to_file(name: PathLike, data: bytes) -> None:
    """Append ``data`` to ``name``, creating the file if needed."""
    with open(name, "ab") as file:
        file.write(data)


def read_entire_file(name: PathLike, size: Optional[int] = None) -> bytes:
    """Read the whole file, or at most ``size`` bytes of it when ``size`` is given."""
    if size is not None and size < 0:
        raise ValueError("size must not be negative")
    with open(name, "rb") as file:
        return file.read() if size is None else file.read(size)


def read_entire_text(name: PathLike) -> str:
    """Read the whole file as UTF-8 text, keeping line endings as stored."""
    return read_entire_file(name).decode("utf-8")


def get_file_size(name: PathLike) -> int:
    """Size of ``name`` in bytes, or 0 when the file cannot be opened."""
    try:
        with open(name, "rb") as file:
            return file.seek(0, os.SEEK_END)
    except OSError:
        return 0