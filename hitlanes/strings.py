"""Small string helpers used by the platform layer."""

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII letters lowered; other characters are kept."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII letters raised; other characters are kept."""
    return text.translate(_TO_UPPER)


def find_char(source: str, c: str) -> bool:
    """Tell whether the single character ``c`` occurs in ``source``."""
    if len(c) != 1:
        raise ValueError("find_char expects exactly one character")
    return c in source.split("\0", 1)[0]


def strlcpy(src: str, size: int) -> str:
    """Return what fits in a buffer of ``size`` slots, one kept for the terminator.

    Copying stops at the first NUL character of ``src``.
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    return src.split("\0", 1)[0][: size - 1]


def split(source: str, c: str) -> list[str]:
    """Split ``source`` on ``c``, dropping empty pieces."""
    if len(c) != 1:
        raise ValueError("split expects exactly one separator character")
    return [part for part in source.split(c) if part]