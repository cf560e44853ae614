"""Command-line tools: print arguments, sort arguments, display a file."""

from __future__ import annotations

import functools
import sys
from typing import BinaryIO

from hivelib.basics import strcmp

_CHUNK_SIZE = 1024


class _DisplayError(OSError):
    """An OSError tagged with the step of displaying a file that failed."""

    def __init__(self, stage: str, error: OSError) -> None:
        super().__init__(error.errno, error.strerror, error.filename)
        self.stage = stage


def sort_params(params: list[str]) -> list[str]:
    """Return the strings in ascending character-code order."""
    return sorted(params, key=functools.cmp_to_key(strcmp))


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        sys.stdout.write(line + "\n")
    sys.stdout.flush()


def print_params_main(argv: list[str] | None = None) -> int:
    """Print each argument on its own line."""
    args = sys.argv[1:] if argv is None else list(argv)
    _print_lines(args)
    return 0


def sort_params_main(argv: list[str] | None = None) -> int:
    """Print the arguments sorted, each on its own line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        _print_lines(sort_params(args))
    return 0


def display_file(path: str, out: BinaryIO | None = None) -> int:
    """Copy the bytes of the file at ``path`` to ``out``; return the count.

    Raises OSError when the file cannot be opened, read or closed.
    """
    if out is None:
        sys.stdout.flush()
        out = sys.stdout.buffer
    try:
        handle = open(path, "rb")
    except OSError as error:
        raise _DisplayError("Error opening file", error) from error
    total = 0
    try:
        while chunk := handle.read(_CHUNK_SIZE):
            out.write(chunk)
            total += len(chunk)
    except OSError as error:
        raise _DisplayError("Error reading file", error) from error
    finally:
        try:
            handle.close()
        except OSError as error:
            raise _DisplayError("Error closing file", error) from error
    out.flush()
    return total


def display_file_main(argv: list[str] | None = None) -> int:
    """Print the content of the one file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("File name missing.\n")
        return 1
    if len(args) > 1:
        sys.stderr.write("Too many arguments.\n")
        return 1
    try:
        display_file(args[0])
    except _DisplayError as error:
        sys.stderr.write(f"{error.stage}: {error.strerror}\n")
    return 0