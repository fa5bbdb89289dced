import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.lines import LineReader


class _RecordingStream:
    def __init__(self, data: str) -> None:
        self._inner = io.StringIO(data)
        self.sizes: list[int] = []

    def read(self, size: int) -> str:
        self.sizes.append(size)
        return self._inner.read(size)


@given(st.text(alphabet="ab\n", max_size=60), st.integers(min_value=1, max_value=20))
def test_lines_match_splitlines(data, size):
    reader = LineReader(io.StringIO(data), size)
    assert list(reader) == data.splitlines(keepends=True)


@given(st.binary(max_size=60), st.integers(min_value=1, max_value=20))
def test_binary_lines_join_back(data, size):
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(line.count(b"\n") <= 1 for line in lines)


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("first\nsecond"), 3)
    assert reader.read_line() == "first\n"
    assert reader.read_line() == "second"
    assert reader.read_line() is None


def test_exhausted_reader_keeps_returning_none():
    reader = LineReader(io.StringIO("x\n"), 4)
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_gives_no_lines():
    assert list(LineReader(io.StringIO(""), 5)) == []


def test_reads_use_the_buffer_size():
    stream = _RecordingStream("one\ntwo\nthree\n")
    lines = list(LineReader(stream, 7))
    assert lines == ["one\n", "two\n", "three\n"]
    assert set(stream.sizes) == {7}


def test_default_buffer_size_reads_whole_stream():
    data = "a long line that is longer than one chunk\nshort\n"
    assert list(LineReader(io.StringIO(data))) == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)