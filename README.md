# hivelib

Classic C-library style utilities for Python, and a few small programs
built on them: a line-by-line file printer, a signal-based messenger,
a dining philosophers simulation and some argument and file tools.

No third-party packages are needed.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `hivelib.chars`

Character tests and case conversion. Each function takes a
one-character string or an integer code: `is_alpha`, `is_digit`,
`is_alnum`, `is_ascii`, `is_print`, `is_space` (newline, tab and space
only), `to_lower` and `to_upper` (ASCII letters only; other input is
returned unchanged, in the type it came in).

`atoi(text)` skips leading blanks, reads one optional sign and then
digits up to the first non-digit; text without digits gives 0 and the
result wraps like a 32-bit signed integer. `itoa(n)` gives the decimal
text of `n` taken as a 32-bit signed integer.

### `hivelib.memory`

Helpers on `bytearray` and bytes-like objects: `memset`, `bzero`,
`memcpy`, `memmove(buf, dest_offset, src_offset, n)` (an overlap-safe
copy inside one buffer), `memchr` (an index or `None`), `memcmp` and
`calloc(count, size)`, which returns a zeroed `bytearray` and raises
`OverflowError` when the size would not fit 64 bits. Counts larger
than a buffer raise `IndexError`.

### `hivelib.strings`

`strlen`, `strchr` and `strrchr` (indexes, or `None`; searching for
`"\0"` gives the length), `strncmp`, `strnstr`, `strlcpy` and
`strlcat` (each returning the new buffer text and the reported
length), `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`
and `striteri` (which updates a mutable sequence of characters in
place).

```python
from hivelib.strings import split, strtrim

split("  a  bc d ", " ")     # ['a', 'bc', 'd']
strtrim("xxhixx", "x")       # 'hi'
```

### `hivelib.linkedlist`

A singly linked list of `Node` objects. `LinkedList(items)` supports
`append`, `appendleft`, `len()`, iteration over contents, `last()`,
`pop_front`, `clear`, `for_each` and `map`. The optional `delete`
callbacks are called on the content of every node removed; if the
function given to `map` raises, the partly built list is cleared with
`delete` and the error propagates.

### `hivelib.printf`

A minimal printf supporting `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`,
`%X` and `%%`. `format_string(fmt, *args)` returns the text;
`printf(fmt, *args, file=...)` writes it (to stdout by default) and
returns the number of characters written. `%s` of `None` prints
`(null)` and `%p` of `None` or 0 prints `(nil)`.

Any other conversion, or a lone `%` at the end, raises
`UnsupportedFormatError`; `printf` first writes the text before it and
the line `Not supported format`. Too few arguments raise `TypeError`.

```python
from hivelib.printf import format_string

format_string("%d %x %s", -42, 255, None)   # '-42 ff (null)'
```

### `hivelib.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a file
descriptor number, a text stream, or stdout when none is given.

### `hivelib.lines`

`LineReader(fd, buffer_size=21)` reads a file descriptor or binary
stream in chunks and returns one line at a time as bytes, newline
included. `readline()` returns `b""` at the end; the reader is also an
iterator.

### `hivelib.talk`

Messages sent one bit at a time over `SIGUSR1` (0) and `SIGUSR2` (1),
least significant bit first, each bit acknowledged with `SIGUSR1`.
`encode_char` and `encode_message` give the bits (a message ends with
a zero byte), `BitDecoder.feed` rebuilds the bytes, turning the zero
byte into a newline, and `send_message(pid, text)` sends to a running
server. This needs a POSIX system whose Python provides
`signal.sigwait` and `signal.sigwaitinfo`, such as Linux.

### `hivelib.philo_args` and `hivelib.philosophers`

The dining philosophers simulation. `parse_int`, `parse_long` and
`parse_args` check the command line and return `SimulationParams`,
raising `ArgumentError` on bad input. `Simulation(params, out).run()`
runs one thread per philosopher, prints each event as
`<ms since start> <philosopher> <action>`, stops at the first death,
and returns `True` when nobody died. `now_ms` and `sleep_until` are the
timing helpers it uses.

### `hivelib.basics`

Small helpers: `alphabet`, `digits`, `sign_letter`, `div_mod`
(truncating toward zero), `factorial_iterative`,
`factorial_recursive`, `exact_sqrt`, `strcmp`, `int_range`,
`abs_value`, `foreach`, `count_if` and the `Point` dataclass.

### `hivelib.commands`

`sort_params(params)` sorts strings by character code, and
`display_file(path, out)` copies a file's bytes to a binary stream and
returns the count.

## Commands

Print a file line by line:

```
hive-gnl notes.txt
```

Send a message between processes; start the server first, it prints
its PID:

```
hive-talk-server
hive-talk-client 12345 "hello"
```

Run the philosophers: number of philosophers (1 to 200), time to die,
time to eat and time to sleep in milliseconds, and optionally the
number of meals each must eat:

```
hive-philo 5 800 200 200
hive-philo 5 800 200 200 7
```

Print the arguments, one per line, as given or sorted:

```
hive-print-params one two three
hive-sort-params pear apple fig
```

Print the contents of one file:

```
hive-display-file notes.txt
```