"""Sending text between processes one bit per signal.

A 1 bit is sent as SIGUSR2, a 0 bit as SIGUSR1, least significant bit
first; each message ends with a zero byte.  The receiver acknowledges
every bit with SIGUSR1.
"""

from __future__ import annotations

import os
import signal
import sys
from dataclasses import dataclass
from typing import BinaryIO

from hivelib.chars import atoi
from hivelib.printf import printf

_BITS_PER_CHAR = 8


def _as_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def encode_char(c: str | bytes | int) -> list[int]:
    """Bits of one byte, least significant first."""
    if isinstance(c, int):
        value = c & 0xFF
    else:
        data = _as_bytes(c)
        if len(data) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        value = data[0]
    return [(value >> i) & 1 for i in range(_BITS_PER_CHAR)]


def encode_message(text: str | bytes) -> list[int]:
    """Bits of every byte of ``text`` followed by a zero terminator."""
    bits: list[int] = []
    for byte in _as_bytes(text):
        bits.extend(encode_char(byte))
    bits.extend(encode_char(0))
    return bits


@dataclass
class BitDecoder:
    """Rebuild bytes from bits received least significant first."""

    c: int = 0
    bit_pos: int = 0

    def feed(self, bit: int) -> bytes | None:
        """Take one bit; return the output for a completed byte, else None.

        A completed zero byte ends a message and gives a newline.
        """
        if bit:
            self.c |= 1 << self.bit_pos
        self.bit_pos += 1
        if self.bit_pos < _BITS_PER_CHAR:
            return None
        out = b"\n" if self.c == 0 else bytes([self.c])
        self.c = 0
        self.bit_pos = 0
        return out


def send_message(pid: int, text: str | bytes) -> None:
    """Send ``text`` to process ``pid``, waiting for an ack after each bit."""
    ack = {signal.SIGUSR1}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, ack)
    try:
        for bit in encode_message(text):
            os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
            signal.sigwait(ack)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def client_main(argv: list[str] | None = None) -> int:
    """Send a message to a server: ``client <server_pid> <message>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf("Usage: %s <server_pid> <message>\n", "client")
        return 1
    pid = atoi(args[0])
    if pid <= 0:
        printf("Invalid server PID.\n")
        return 1
    send_message(pid, args[1])
    return 0


def _serve(out: BinaryIO) -> None:
    wanted = {signal.SIGUSR1, signal.SIGUSR2}
    decoder = BitDecoder()
    while True:
        info = signal.sigwaitinfo(wanted)
        produced = decoder.feed(1 if info.si_signo == signal.SIGUSR2 else 0)
        if produced is not None:
            out.write(produced)
            out.flush()
        os.kill(info.si_pid, signal.SIGUSR1)


def server_main(argv: list[str] | None = None) -> int:
    """Print the process id, then print every message received."""
    wanted = {signal.SIGUSR1, signal.SIGUSR2}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, wanted)
    try:
        printf("Server PID: %d\n", os.getpid())
        sys.stdout.flush()
        _serve(getattr(sys.stdout, "buffer", sys.stdout))
    except KeyboardInterrupt:
        return 0
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)
    return 0