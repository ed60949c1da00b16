import io

import pytest

from shkit.linereader import LineReader

SAMPLES = [
    "first\nsecond\nthird\n",
    "no trailing newline\nlast",
    "\n\n\n",
    "single",
    "a much longer line that certainly spans several small buffers\nshort\n",
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("size", [1, 2, 3, 7, 256])
def test_lines_match_splitlines(text, size):
    reader = LineReader(io.StringIO(text), size)
    assert list(reader) == text.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 256])
def test_concatenation_restores_input(size):
    text = "alpha\nbeta\n\ngamma"
    reader = LineReader(io.StringIO(text), size)
    assert "".join(reader) == text


def test_bytes_source():
    data = b"one\ntwo\nthree"
    reader = LineReader(io.BytesIO(data), 3)
    assert list(reader) == data.splitlines(keepends=True)


def test_empty_source_returns_none():
    reader = LineReader(io.StringIO(""), 8)
    assert reader.read_line() is None


def test_none_after_exhaustion_and_repeated():
    reader = LineReader(io.StringIO("x\n"), 4)
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_pending_data_kept_between_calls():
    reader = LineReader(io.StringIO("ab\ncd\nef\n"), 256)
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd\n"
    assert reader.read_line() == "ef\n"


def test_default_buffer_size():
    reader = LineReader(io.StringIO("x"))
    assert reader.buffer_size == 256


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


class _FailingSource:
    def read(self, size=-1):
        raise OSError("boom")


def test_read_error_propagates():
    reader = LineReader(_FailingSource(), 4)
    with pytest.raises(OSError):
        reader.read_line()