"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import BinaryIO, Union

BUFFER_SIZE = 21

Source = Union[int, BinaryIO]


class LineReader:
    """Yield lines, newline kept, from a file descriptor or binary stream.

    Data is read ``buffer_size`` bytes at a time and kept between calls.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(fd, int) and fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._storage = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self.fd, int):
            return os.read(self.fd, self.buffer_size)
        return self.fd.read(self.buffer_size)

    def readline(self) -> bytes:
        """Return the next line, ending in a newline unless it is the last.

        Returns an empty bytes object when nothing is left.
        """
        while b"\n" not in self._storage:
            chunk = self._read_chunk()
            if not chunk:
                break
            self._storage += chunk
        if not self._storage:
            return b""
        end = self._storage.find(b"\n")
        if end < 0:
            line, self._storage = self._storage, b""
        else:
            line, self._storage = self._storage[: end + 1], self._storage[end + 1 :]
        return line

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.readline()
        if not line:
            raise StopIteration
        return line


def main(argv: list[str] | None = None) -> int:
    """Print a file line by line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: get_next_line <filename>")
        return 1
    try:
        fd = os.open(args[0], os.O_RDONLY)
    except OSError:
        sys.stdout.write("Error opening file")
        return 1
    try:
        sys.stdout.flush()
        binary = getattr(sys.stdout, "buffer", None)
        for line in LineReader(fd):
            if binary is not None:
                binary.write(line)
            else:
                sys.stdout.write(line.decode("utf-8", errors="replace"))
        if binary is not None:
            binary.flush()
    finally:
        os.close(fd)
    return 0