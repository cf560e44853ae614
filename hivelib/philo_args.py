"""Command-line arguments of the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass

INT_MAX = (1 << 31) - 1
LLONG_MAX = (1 << 63) - 1
MAX_PHILOSOPHERS = 200
UNLIMITED_MEALS = -1

RANGE_MESSAGE = "Please use number philosophers in range 1 to 200"


class ArgumentError(ValueError):
    """Raised for arguments the simulation cannot run with.

    ``shown`` tells whether the message is meant to be printed to the user
    before the usage line.
    """

    def __init__(self, message: str, shown: bool = False) -> None:
        super().__init__(message)
        self.shown = shown


@dataclass(frozen=True)
class SimulationParams:
    """Settings of one simulation; times are in milliseconds."""

    philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    eats: int = UNLIMITED_MEALS


def _parse_decimal(text: str, allow_minus: bool, maximum: int) -> int:
    negative = False
    pos = 0
    if allow_minus and text.startswith("-"):
        negative = True
        pos = 1
    elif text.startswith("+"):
        pos = 1
    limit = maximum + 1 if negative else maximum
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        if value > limit:
            raise ArgumentError(f"number out of range: {text!r}")
        pos += 1
    if pos != len(text):
        raise ArgumentError(f"not a number: {text!r}")
    return -value if negative else value


def parse_int(text: str) -> int:
    """Parse a whole decimal 32-bit integer with an optional sign.

    Text holding only a sign, or nothing, gives 0.  Raises ArgumentError
    on any other character or on overflow.
    """
    return _parse_decimal(text, allow_minus=True, maximum=INT_MAX)


def parse_long(text: str) -> int:
    """Parse a whole non-negative decimal 64-bit integer, ``+`` allowed.

    Raises ArgumentError on a minus sign, any other character or overflow.
    """
    return _parse_decimal(text, allow_minus=False, maximum=LLONG_MAX)


def parse_args(argv: list[str]) -> SimulationParams:
    """Build the settings from the four or five command-line arguments.

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    """
    args = list(argv)
    if len(args) not in (4, 5):
        raise ArgumentError(f"expected 4 or 5 arguments, got {len(args)}")
    philos = parse_int(args[0])
    if not 1 <= philos <= MAX_PHILOSOPHERS:
        raise ArgumentError(RANGE_MESSAGE, shown=True)
    time_to_die = parse_long(args[1])
    time_to_eat = parse_long(args[2])
    time_to_sleep = parse_long(args[3])
    eats = parse_int(args[4]) if len(args) == 5 else UNLIMITED_MEALS
    if eats == 0:
        raise ArgumentError("the number of meals must not be 0")
    return SimulationParams(philos, time_to_die, time_to_eat, time_to_sleep, eats)