"""Armstrong (narcissistic) numbers."""


def is_armstrong_number(num: int) -> bool:
    """Return True if ``num`` equals the sum of its digits each raised to
    the number of digits."""
    num = int(num)
    if num < 0:
        raise ValueError("Armstrong numbers are not negative")
    digits = [int(d) for d in str(num)]
    power = len(digits)
    return sum(d**power for d in digits) == num