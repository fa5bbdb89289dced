"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def _wrap_int(value: int) -> int:
    """Reduce a value to the range of a signed 32-bit integer."""
    value %= _INT_MOD
    return value - _INT_MOD if value >= -_INT_MIN else value


def isdigit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalpha(c: int | str) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a signed 32-bit value.

    Leading whitespace is skipped and one sign is accepted; two signs in a
    row give 0. Parsing stops at the first non-digit. Values outside the
    32-bit range wrap around.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
        if pos < len(text) and text[pos] in "+-":
            return 0
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    result = int(text[pos:end]) if end > pos else 0
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(int(n))