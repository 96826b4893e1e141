"""Demonstration: compare, combine and sort a mixed list of numbers."""

from __future__ import annotations

import sys
from itertools import combinations
from typing import TextIO

from polynum.numeric import Complex, Double, Float, Int, Numeric

__all__ = ["sample_numbers", "sort_numbers", "run", "main"]


def sample_numbers() -> list[Numeric]:
    """Return the fixed mixed list the demonstration works on."""
    return [
        Int(10),
        Double(10.1),
        Int(7),
        Double(2.71),
        Float(2.71),
        Complex(2),
        Complex(3, 2),
        Complex(3, -2),
    ]


def sort_numbers(numbers: list[Numeric]) -> list[Numeric]:
    """Return a new list ordered by an exchange sort using ``>``."""
    result = list(numbers)
    # Exchange sort keeps the exact ordering for mixed, non-transitive comparisons.
    for i, j in combinations(range(len(result)), 2):
        if result[i] > result[j]:
            result[i], result[j] = result[j], result[i]
    return result


def run(out: TextIO) -> None:
    """Write the demonstration's output to ``out``."""

    def show(number: Numeric) -> str:
        return f"{number}\n"

    numbers = sample_numbers()
    n = numbers
    checks = [
        (n[3] == n[4], n[3], " equals ", n[4]),
        (n[4] > n[3], n[4], " more than ", n[3]),
        (n[3] < n[4], n[4], " more than ", n[3]),
        (n[5] < n[6], n[6], " more than ", n[5]),
        (n[5] < n[2], n[2], " more than ", n[5]),
        (n[0] > n[7], n[0], " more than ", n[7]),
        (n[1] > n[3], n[1], " more than ", n[3]),
    ]
    for holds, left, word, right in checks:
        if holds:
            out.write(show(left) + word + show(right))

    out.write("Finish\n")
    out.write("Initial numbers:\n")
    for number in numbers:
        out.write(show(number) + "\n")

    total = Int.from_numeric(n[3] + n[7])
    out.write(show(total))

    out.write("Sorted array:\n")
    for number in sort_numbers(numbers):
        out.write(show(number) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration on standard output."""
    run(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())