"""Command-line argument validation."""

from collections.abc import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DIGITS = frozenset("0123456789")
_SPACES = frozenset("\t\n\v\f\r")


class ArgumentError(ValueError):
    """Raised when the command-line operands are not acceptable."""


def all_digit(s: str | None) -> bool:
    """Return True when every character of ``s`` is an ASCII digit."""
    if s is None:
        return False
    return all(c in _DIGITS for c in s)


def parse_long(text: str) -> int:
    """Parse a leading signed decimal integer, ignoring trailing garbage."""
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for c in rest:
        if c not in _DIGITS:
            break
        value = value * 10 + int(c)
    return value * sign


def validate_args(args: Sequence[str]) -> list[int]:
    """Check the operands (without the program name) and return them as integers."""
    if len(args) not in (4, 5):
        raise ArgumentError("argc should be 5 or 6")
    values = []
    for arg in args:
        if not all_digit(arg):
            raise ArgumentError("argv should be nbr only")
        value = parse_long(arg)
        if value > INT_MAX or value < INT_MIN:
            raise ArgumentError("argv should within INT_RANGE")
        values.append(value)
    return values