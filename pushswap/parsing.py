"""Parsing and validating the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.libft.strings import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def parse_number(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; no digits give 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return sign * int(text[pos:end]) if end > pos else 0


def is_valid_number_format(text: str) -> bool:
    """True for optional leading spaces, an optional sign and one or more digits."""
    body = text.lstrip(" ")
    if body[:1] in ("+", "-"):
        body = body[1:]
    return bool(body) and all("0" <= ch <= "9" for ch in body)


def has_duplicates(values: Iterable[int]) -> bool:
    """True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Sequence[int]) -> bool:
    """True if the values are in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def _parse_token(token: str) -> int:
    if not is_valid_number_format(token):
        raise InputError(f"not a number: {token!r}")
    number = parse_number(token)
    if not INT_MIN <= number <= INT_MAX:
        raise InputError(f"out of range: {token!r}")
    return number


def parse_args(args: Iterable[str]) -> list[int]:
    """Turn the arguments into integers.

    Each argument may hold several space-separated numbers. An argument
    with none, a malformed number, one outside the 32-bit range or a
    repeated value raises InputError.
    """
    values: list[int] = []
    for arg in args:
        tokens = split(arg, " ")
        if not tokens:
            raise InputError(f"empty argument: {arg!r}")
        values.extend(_parse_token(token) for token in tokens)
    if has_duplicates(values):
        raise InputError("duplicate values")
    return values