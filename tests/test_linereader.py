import io

import pytest

from fdfview.linereader import BUFFER_SIZE, LineReader

SAMPLE = b"0 0 1\n2 3,0xFF 4\n\nlast line without newline"


class _ChunkStream:
    """Hands out prepared chunks, one per read, ignoring the size asked for."""

    def __init__(self, chunks):
        self._chunks = list(chunks)

    def read(self, size):
        return self._chunks.pop(0) if self._chunks else b""


@pytest.mark.parametrize("size", [1, 2, 3, 7, BUFFER_SIZE])
def test_lines_join_back_to_input(size):
    lines = list(LineReader(io.BytesIO(SAMPLE), size))
    assert b"".join(lines) == SAMPLE
    assert lines == SAMPLE.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 5, BUFFER_SIZE])
def test_every_line_but_last_ends_with_newline(size):
    lines = list(LineReader(io.BytesIO(SAMPLE), size))
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert not lines[-1].endswith(b"\n")
    assert all(line.count(b"\n") <= 1 for line in lines)


def test_text_stream():
    text = "alpha\nbeta\ngamma\n"
    reader = LineReader(io.StringIO(text), 4)
    assert list(reader) == text.splitlines(keepends=True)


def test_empty_stream_gives_none():
    assert LineReader(io.BytesIO(b"")).read_line() is None


def test_none_after_end_repeats():
    reader = LineReader(io.BytesIO(b"one\n"))
    assert reader.read_line() == b"one\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_data_arriving_after_end_is_read():
    reader = LineReader(_ChunkStream([b"ab", b"", b"cd\n"]))
    assert reader.read_line() == b"ab"
    assert reader.read_line() == b"cd\n"
    assert reader.read_line() is None


def test_line_spanning_several_reads():
    reader = LineReader(_ChunkStream([b"12", b"34", b"5\n6"]))
    assert reader.read_line() == b"12345\n"
    assert reader.read_line() == b"6"


def test_only_newlines():
    reader = LineReader(io.BytesIO(b"\n\n"), 1)
    assert list(reader) == [b"\n", b"\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(SAMPLE), size)