import io

import pytest

from solong.linereader import LineReader, read_lines

SAMPLE = "1111\n1PC1\n1E01\n1111"


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 5, 1024])
def test_round_trip_text(buffer_size):
    lines = list(LineReader(io.StringIO(SAMPLE), buffer_size))
    assert "".join(lines) == SAMPLE
    assert lines == SAMPLE.splitlines(keepends=True)


@pytest.mark.parametrize("buffer_size", [1, 4, 1024])
def test_round_trip_bytes(buffer_size):
    data = SAMPLE.encode()
    lines = list(LineReader(io.BytesIO(data), buffer_size))
    assert b"".join(lines) == data
    assert all(isinstance(line, bytes) for line in lines)


def test_lines_keep_newline_except_last():
    reader = LineReader(io.StringIO("ab\ncd"), 2)
    assert reader.next_line() == "ab\n"
    assert reader.next_line() == "cd"
    assert reader.next_line() is None


def test_trailing_newline_gives_no_empty_line():
    data = "ab\ncd\n"
    lines = list(LineReader(io.StringIO(data)))
    assert lines == data.splitlines(keepends=True)
    assert len(lines) == 2


def test_blank_lines_preserved():
    data = "\n\nx\n"
    lines = list(LineReader(io.StringIO(data), 1))
    assert lines == ["\n", "\n", "x\n"]


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None
    assert list(reader) == []


def test_exhausted_reader_stays_exhausted():
    reader = LineReader(io.StringIO("only"))
    assert reader.next_line() == "only"
    assert reader.next_line() is None
    assert reader.next_line() is None


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_invalid_buffer_size(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size)


def test_read_lines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes(SAMPLE.encode())
    lines = read_lines(path)
    assert lines == SAMPLE.splitlines(keepends=True)


def test_read_lines_keeps_carriage_return(tmp_path):
    path = tmp_path / "crlf.ber"
    path.write_bytes(b"11\r\n11\r\n")
    lines = read_lines(path)
    assert lines == ["11\r\n", "11\r\n"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.ber")