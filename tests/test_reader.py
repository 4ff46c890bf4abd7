import os

import pytest

from nextline.reader import LineReader, line_length, split_line


def _open(tmp_path, content: bytes, name: str = "data.txt") -> int:
    path = tmp_path / name
    path.write_bytes(content)
    return os.open(path, os.O_RDONLY)


def _read_all(fd: int, size: int) -> list[bytes]:
    reader = LineReader(fd, size)
    lines = []
    while (line := reader.read_line()) is not None:
        lines.append(line)
    return lines


SAMPLES = [
    b"",
    b"one line\n",
    b"one line no newline",
    b"first\nsecond\nthird\n",
    b"\n\n\n",
    b"x" * 57 + b"\n" + b"y" * 23,
    b"\na\n\nbb\n\n\nccc",
]


def test_line_length():
    assert line_length(b"") == 0
    assert line_length(b"ab\ncd") == 3
    assert line_length(b"abc") == 3
    assert line_length(b"\n") == 1


def test_split_line():
    assert split_line(b"ab\ncd") == (b"ab\n", b"cd")
    assert split_line(b"abc") == (b"abc", b"")
    assert split_line(b"") == (b"", b"")


@pytest.mark.parametrize("size", [1, 2, 3, 10, 42, 4096])
@pytest.mark.parametrize("content", SAMPLES)
def test_lines_rebuild_content(tmp_path, content, size):
    fd = _open(tmp_path, content)
    try:
        lines = _read_all(fd, size)
    finally:
        os.close(fd)
    assert b"".join(lines) == content
    assert lines == content.splitlines(keepends=True)


def test_specific_lines(tmp_path):
    fd = _open(tmp_path, b"first\nsecond\nthird")
    try:
        reader = LineReader(fd, 4)
        assert reader.read_line() == b"first\n"
        assert reader.read_line() == b"second\n"
        assert reader.read_line() == b"third"
        assert reader.read_line() is None
        assert reader.read_line() is None
    finally:
        os.close(fd)


def test_iteration(tmp_path):
    fd = _open(tmp_path, b"a\nb\nc\n")
    try:
        assert list(LineReader(fd, 10)) == [b"a\n", b"b\n", b"c\n"]
    finally:
        os.close(fd)


def test_empty_file_gives_none(tmp_path):
    fd = _open(tmp_path, b"")
    try:
        assert LineReader(fd).read_line() is None
    finally:
        os.close(fd)


def test_pipe_input():
    read_fd, write_fd = os.pipe()
    os.write(write_fd, b"hello\nworld\n")
    os.close(write_fd)
    try:
        assert list(LineReader(read_fd, 3)) == [b"hello\n", b"world\n"]
    finally:
        os.close(read_fd)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1, 10)


@pytest.mark.parametrize("size", [0, -5])
def test_bad_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(0, size)


def test_read_error_raises(tmp_path):
    fd = _open(tmp_path, b"data\n")
    os.close(fd)
    reader = LineReader(fd, 10)
    with pytest.raises(OSError):
        reader.read_line()