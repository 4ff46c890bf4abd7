# nextline

Read a file descriptor one line at a time, through a fixed-size read buffer.

Each line comes back as `bytes` with its trailing `b"\n"` kept. The last line
of the input is returned even when it has no newline. When the input is
exhausted, `None` is returned.

## Installing

```
pip install nextline
```

## One descriptor: `LineReader`

```python
import os
from nextline.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(fd, buffer_size=10)

first = reader.read_line()   # b"first line\n", or None at end of input
for line in reader:          # the rest of the lines
    print(line)

os.close(fd)
```

`buffer_size` (default 10) is the number of bytes asked for in each
`os.read` call. Any bytes past the newline stay in the reader's buffer and are
used by the next call. Iterating over a `LineReader` yields lines until
`read_line()` returns `None`.

A negative descriptor or a buffer size that is not positive raises
`ValueError`. An `OSError` from reading is passed on to the caller; the
partial line and anything buffered are dropped.

The helpers `line_length(data)` and `split_line(data)` give the length of the
first line in a chunk of bytes (its newline included) and split a chunk into
that line and the rest:

```python
from nextline.reader import line_length, split_line

line_length(b"ab\ncd")   # 3
split_line(b"ab\ncd")    # (b"ab\n", b"cd")
```

## Many descriptors: `MultiReader`

```python
import os
from nextline.multi import MultiReader

a = os.open("a.txt", os.O_RDONLY)
b = os.open("b.txt", os.O_RDONLY)
readers = MultiReader(buffer_size=10)

while True:
    line_a = readers.read_line(a)
    line_b = readers.read_line(b)
    if line_a is None and line_b is None:
        break
    ...
```

Every descriptor keeps its own buffer, so reads on different descriptors can
be interleaved freely. Descriptors from 0 to 1023 are accepted; any other
value raises `ValueError`. When a descriptor runs out of lines, or a read on
it raises `OSError`, its buffer is dropped. `pending(fd)` returns the bytes
still held for a descriptor, and `discard(fd)` throws them away.

`get_next_line(fd)` reads from a single shared `MultiReader` that uses the
default buffer size of 10 bytes.

## Running the tests

```
pip install "nextline[test]"
pytest
```