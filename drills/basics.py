"""Small arithmetic and greeting helpers."""


def add(a: int, b: int) -> int:
    """Return the sum of ``a`` and ``b``."""
    return a + b


def multiply(a: int, b: int) -> int:
    """Return the product of ``a`` and ``b``."""
    return a * b


def greet(name: str) -> str:
    """Return a greeting addressed to ``name``."""
    return f"Hello, {name}!"


def hello() -> str:
    """Return the classic greeting."""
    return "Hello, World!"


def something() -> int:
    """Announce itself and return 1."""
    print("something test function")
    return 1