#!/usr/bin/env python3
"""Prints a tour of the operators over a few ints and the Fibonacci numbers."""
import argparse
import logging

from typing import Optional

from . import __version__
from .transport import Transport
from .operators import (
    from_sequence, fibonaccis,
    map, filter, zip, take, skip,
    first, last, max, count, sum, count_with_timeout,
    DEFAULT_TIMEOUT, TIMEOUT_SENTINEL,
)

INTS = [1, 2, 3, 6, 4, 1, 9, 5, 8]


def concat_ints(separator: str, source: Optional[Transport]) -> str:
    if source is None:
        return ""
    return separator.join("{:d}".format(value) for value in source)


def concat_floats(separator: str, source: Optional[Transport]) -> str:
    if source is None:
        return ""
    return separator.join("{:.6f}".format(value) for value in source)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chanx-demo", description=__doc__)
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help="seconds to wait when counting the Fibonacci numbers")
    parser.add_argument("-v", "--verbose", action="store_true", help="log stage lifecycles")
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    return parser


def run(timeout: float = DEFAULT_TIMEOUT, out=print):
    ints = INTS

    def is_even(i):
        return i % 2 == 0

    def square(i):
        return i * i

    def product(a, b):
        return a * b

    def ratio(a, b):
        return b / a

    out("Given ints:")
    out(concat_ints(", ", from_sequence(ints)))

    out("Squares of ints:")
    out(concat_ints(", ", map(from_sequence(ints), square)))

    out("Even squares of given ints:")
    out(concat_ints(", ", filter(map(from_sequence(ints), square), is_even)))

    out("Max of given ints:")
    out(max(from_sequence(ints)))

    out("First int:")
    out(first(from_sequence(ints)))

    out("Last int:")
    out(last(from_sequence(ints)))

    out("Count of ints:")
    n = count(from_sequence(ints))
    out(n)

    out("Sum of ints:")
    out(sum(from_sequence(ints)))

    out("Sum of first three ints:")
    out(sum(take(from_sequence(ints), 3)))

    out("Sum of final two ints:")
    out(sum(skip(from_sequence(ints), n - 2)))

    out("First ten Fibonacci numbers")
    out(concat_ints(", ", take(fibonaccis(), 10)))

    first_after_four = first(skip(fibonaccis(), 4))
    out("First ten Fibonacci numbers, ignoring the first four, ie starting with {}:".format(first_after_four))
    out(concat_ints(", ", take(skip(fibonaccis(), 4), 10)))

    out("Squares of first ten Fibonacci numbers")
    # map runs ahead of take over an endless source
    out(concat_ints(", ", take(map(fibonaccis(), square), 10)))

    out("Total number of Fibonacci numbers:")
    fib_count = count_with_timeout(fibonaccis(), timeout)
    if fib_count != TIMEOUT_SENTINEL:
        out(fib_count)
    else:
        out("Timed out, obviously")

    out("Multiply each integer in the test set by the subsequent integer:")
    out(concat_ints(", ", zip(from_sequence(ints), skip(from_sequence(ints), 1), product)))

    out("Successive ratios of the five Fibonacci numbers after skipping the first five:")
    fibs = fibonaccis()
    fibs2 = skip(fibonaccis(), 1)
    out(concat_floats(", ", take(skip(zip(fibs, fibs2, ratio), 5), 5)))
    fibs.close()
    fibs2.close()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    run(args.timeout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
