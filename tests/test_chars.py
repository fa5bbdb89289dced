import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.chars import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@pytest.mark.parametrize("code", range(128))
def test_classification_matches_ascii_rules(code):
    ch = chr(code)
    assert isalpha(code) == ch.isalpha()
    assert isdigit(code) == ch.isdigit()
    assert isalnum(code) == ch.isalnum()
    assert isprint(code) == ch.isprintable()
    assert isascii(code) is True


@pytest.mark.parametrize("ch", ["é", "ß", "٣"])
def test_non_ascii_letters_and_digits_rejected(ch):
    assert isalpha(ch) is False
    assert isdigit(ch) is False
    assert isascii(ch) is False


def test_isascii_bounds():
    assert isascii(-1) is False
    assert isascii(128) is False
    assert isascii(0) is True


def test_classification_rejects_multichar_string():
    with pytest.raises(ValueError):
        isalpha("ab")


@pytest.mark.parametrize("code", range(128))
def test_case_conversion_matches_ascii(code):
    ch = chr(code)
    assert tolower(ch) == ch.lower()
    assert toupper(ch) == ch.upper()
    assert tolower(code) == ord(ch.lower())
    assert toupper(code) == ord(ch.upper())


def test_case_conversion_leaves_non_ascii():
    assert toupper("é") == "é"
    assert tolower("É") == "É"


@given(INT32)
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


@given(INT32, st.sampled_from([" ", "\t", "\n", "\v", "\f", "\r", "  \t "]))
def test_atoi_skips_whitespace_and_stops_at_garbage(n, prefix):
    assert atoi(prefix + str(n) + "x12") == n


@given(st.integers(min_value=0, max_value=2**31 - 1))
def test_atoi_explicit_plus(n):
    assert atoi("+" + str(n)) == n


@pytest.mark.parametrize("text", ["+-5", "--5", "-+5", "++5"])
def test_atoi_double_sign_gives_zero(text):
    assert atoi(text) == 0


def test_atoi_without_digits():
    assert atoi("") == 0
    assert atoi("abc") == atoi("")


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@given(INT32)
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n
    assert atoi(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"