"""String searching, copying, comparing, trimming and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import TypeVar

_NUL = "\0"

T = TypeVar("T")


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator ``"\\0"`` gives the length of ``s``.
    """
    _single_char(c, "search character")
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator ``"\\0"`` gives the length of ``s``.
    """
    _single_char(c, "search character")
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the end
    of a string counting as code 0; 0 when the compared parts are equal.
    """
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a == _NUL or b == _NUL or a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return where ``little`` first lies wholly within ``big[:length]``, or None.

    An empty ``little`` is found at 0.
    """
    if not little:
        return 0
    index = big[: max(length, 0)].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``, so truncation
    shows as a length not smaller than ``size``.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed the length of ``dest``, nothing is
    appended and the length returned is ``len(src) + size``.
    """
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if start >= len(s) or length <= 0:
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def _words(s: str, sep: str) -> list[str]:
    _single_char(sep, "separator")
    return [word for word in s.split(sep) if word]


def count_words(s: str, sep: str) -> int:
    """Count the non-empty runs of ``s`` between ``sep`` characters."""
    return len(_words(s, sep))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    return _words(s, sep)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(chars: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace each item of ``chars`` in place with ``func(index, item)``."""
    for index, item in enumerate(chars):
        chars[index] = func(index, item)