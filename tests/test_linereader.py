import io
import os

import pytest

from pipex.linereader import LineReader

SAMPLE = "first line\nsecond\n\nlast without newline"


def test_lines_keep_newlines():
    reader = LineReader(io.StringIO("a\nbb\n"))
    assert reader.next_line() == "a\n"
    assert reader.next_line() == "bb\n"
    assert reader.next_line() is None


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("x\ntail"))
    assert list(reader) == ["x\n", "tail"]


def test_empty_input_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None


def test_none_repeats_after_end():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


@pytest.mark.parametrize("size", [1, 2, 5, 7, 64])
def test_round_trip_any_buffer_size(size):
    lines = list(LineReader(io.StringIO(SAMPLE), buffer_size=size))
    assert "".join(lines) == SAMPLE
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


def test_blank_line_is_returned():
    lines = list(LineReader(io.StringIO(SAMPLE)))
    assert lines[2] == "\n"


def test_bytes_stream():
    data = b"one\ntwo\n"
    assert list(LineReader(io.BytesIO(data))) == [b"one\n", b"two\n"]


def test_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"alpha\nbeta")
        os.close(write_fd)
        write_fd = -1
        lines = list(LineReader(read_fd, buffer_size=3))
    finally:
        os.close(read_fd)
        if write_fd != -1:
            os.close(write_fd)
    assert lines == [b"alpha\n", b"beta"]


@pytest.mark.parametrize("size", [0, -3])
def test_rejects_non_positive_buffer(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=size)


@pytest.mark.parametrize("fd", [-1, 1024])
def test_rejects_bad_descriptor(fd):
    with pytest.raises(ValueError):
        LineReader(fd)