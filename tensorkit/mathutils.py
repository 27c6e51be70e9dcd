"""Small arithmetic helpers and a demonstration entry point."""

from __future__ import annotations

import sys

_PI = 3.14159


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def multiply(a: int, b: int) -> int:
    """Return the product of two integers."""
    return a * b


def calculate_area(radius: float) -> float:
    """Return the area of a circle with the given radius."""
    return _PI * radius * radius


def print_result(result: int) -> None:
    """Print a result line to standard output."""
    print(f"Result: {result}")


def main(argv: list[str] | None = None) -> int:
    """Print a greeting followed by a few computed results."""
    del argv
    print("Hello, World!")

    total = add(5, 3)
    product = multiply(4, 7)
    area = calculate_area(2.5)

    print_result(total)
    print_result(product)
    print(f"Area: {area:g}")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())