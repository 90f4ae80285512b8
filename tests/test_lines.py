import io

import pytest

from ftkit.lines import LineReader, read_lines

TEXTS = [
    "ab\ncd\n",
    "first line\nsecond\nno newline at end",
    "\n\n\n",
    "single",
    "x\n" * 50,
]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("size", [1, 2, 3, 7, 4096])
def test_lines_join_back_to_input(text, size):
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_read_lines_values():
    assert read_lines(io.StringIO("ab\ncd\n")) == ["ab\n", "cd\n"]


def test_last_line_without_newline():
    assert read_lines(io.StringIO("ab\ncd")) == ["ab\n", "cd"]


def test_empty_stream():
    reader = LineReader(io.StringIO(""), 5)
    assert reader.readline() is None
    assert read_lines(io.StringIO("")) == []


def test_readline_after_end_stays_none():
    reader = LineReader(io.StringIO("a\n"), 1)
    assert reader.readline() == "a\n"
    assert reader.readline() is None
    assert reader.readline() is None


def test_binary_stream():
    assert read_lines(io.BytesIO(b"one\ntwo")) == [b"one\n", b"two"]


def test_binary_small_buffer_round_trip():
    data = b"alpha\nbeta\n\ngamma"
    assert b"".join(LineReader(io.BytesIO(data), 2)) == data


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates():
    reader = LineReader(_FailingStream(), 4)
    with pytest.raises(OSError):
        reader.readline()