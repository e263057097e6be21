"""Validating numbers with the Luhn checksum."""

from __future__ import annotations

_DIGITS = "0123456789"


def digits(code: str) -> list[int]:
    """Return the decimal digits of ``code``, skipping spaces.

    Raises ValueError if anything other than an ASCII digit or a space
    is found.
    """
    result = []
    for char in code:
        if char == " ":
            continue
        if char not in _DIGITS:
            raise ValueError(f"not a digit: {char!r}")
        result.append(int(char))
    return result


def _doubled(digit: int) -> int:
    doubled = digit * 2
    return doubled - 9 if doubled > 9 else doubled


def is_valid(code: str) -> bool:
    """Return True if ``code`` passes the Luhn check.

    Spaces are ignored; any other non-digit makes the code invalid, as
    does having fewer than two digits.
    """
    try:
        values = digits(code)
    except ValueError:
        return False
    if len(values) < 2:
        return False
    # Every second digit, counting from the rightmost, is doubled.
    total = sum(
        _doubled(digit) if position % 2 else digit
        for position, digit in enumerate(reversed(values))
    )
    return total % 10 == 0