"""
American flag sort: in-place MSD radix sort on decimal digits.

Run with something like:
    american-flag-sort --n 100000 --verify
    american-flag-sort --sample
    american-flag-sort --benchmark --seed 7
"""

from __future__ import annotations

import argparse
import numbers
import random
import time
from typing import Dict, Iterable, List, MutableSequence, Optional, Sequence, Tuple

NUMBER_OF_BUCKETS = 10

Timings = Dict[str, List[Tuple[int, float]]]


class InvalidInputError(ValueError):
    """Raised when the input holds something other than non-negative integers."""


def get_digit(value: int, divisor: int) -> int:
    return (value // divisor) % 10


def number_of_digits(value: int) -> int:
    """Decimal digit count of a non-negative integer (0 has one digit)."""
    if value < 0:
        raise InvalidInputError(f"negative value {value!r} has no digit count")
    digits = 1
    while value >= 10:
        value //= 10
        digits += 1
    return digits


def max_number_of_digits(A: Sequence[int]) -> int:
    if not A:
        return 0
    return number_of_digits(max(A))


def _validate(A: Sequence[int]) -> None:
    for i, v in enumerate(A):
        if not isinstance(v, numbers.Integral):
            raise InvalidInputError(f"element {i} is not an integer: {v!r}")
        if v < 0:
            raise InvalidInputError(f"element {i} is negative: {v!r}")


def _place(A: MutableSequence[int], start: int, end: int, divisor: int) -> List[int]:
    """Bucket A[start:end] by the digit at `divisor`; return the bucket end offsets."""
    # 1) Count digit frequencies
    count = [0] * NUMBER_OF_BUCKETS
    for i in range(start, end):
        count[get_digit(A[i], divisor)] += 1

    # 2) Exclusive prefix sum -> write cursor of each bucket
    offset = [0] * NUMBER_OF_BUCKETS
    offset[0] = start
    for i in range(1, NUMBER_OF_BUCKETS):
        offset[i] = offset[i - 1] + count[i - 1]

    # 3) Cycle-following placement, no output array
    for b in range(NUMBER_OF_BUCKETS):
        while count[b] > 0:
            origin = offset[b]
            num = A[origin]
            while True:
                digit = get_digit(num, divisor)
                to = offset[digit]
                offset[digit] += 1
                count[digit] -= 1
                A[to], num = num, A[to]
                if to == origin:
                    break

    # each cursor now sits on the end of its bucket
    return offset


def sort_range(
    A: MutableSequence[int],
    start: int,
    end: int,
    divisor: int,
    verbose: bool = False,
) -> None:
    """Sort A[start:end] in place, bucketing from the digit at `divisor` downwards.

    Values in the range must not have significant digits above `divisor`.
    Pending sub-ranges are kept on an explicit stack, so long integers do
    not run into the recursion limit.
    """
    stack: List[Tuple[int, int, int]] = [(start, end, divisor)]
    while stack:
        lo, hi, div = stack.pop()
        ends = _place(A, lo, hi, div)
        if verbose:
            print(f"divisor = {div:<8} A[{lo}:{hi}] = {list(A[lo:hi])}")

        if div > 1:
            for b in range(NUMBER_OF_BUCKETS):
                begin = ends[b - 1] if b > 0 else lo
                if ends[b] - begin > 1:
                    stack.append((begin, ends[b], div // 10))


def american_flag_sort(A: MutableSequence[int], verbose: bool = False) -> MutableSequence[int]:
    """Sort A ascending in place and return it.

    Raises InvalidInputError, leaving A untouched, if any element is negative
    or not an integer. Not stable.
    """
    _validate(A)
    if len(A) < 2:
        return A

    divisor = 10 ** (max_number_of_digits(A) - 1)
    sort_range(A, 0, len(A), divisor, verbose=verbose)

    if verbose:
        print(f"Sorted array: {list(A)}")

    return A


# ------------------ BENCHMARK / DEMO ------------------ #

def benchmark_american_flag(
    sizes: Iterable[int] = (10_000, 100_000, 1_000_000),
    max_value: int = 10**9,
    seed: Optional[int] = None,
    verbose: bool = True,
) -> Timings:
    """Time american_flag_sort against sorted() on the same random data."""
    rng = random.Random(seed)
    timings: Timings = {"american flag": [], "timsort (sorted)": []}

    if verbose:
        print("\n=== American Flag Sort Performance ===")

    for n in sizes:
        data = [rng.randint(0, max_value) for _ in range(n)]

        A = list(data)
        start = time.perf_counter()
        american_flag_sort(A)
        afs_time = time.perf_counter() - start

        start = time.perf_counter()
        expected = sorted(data)
        ref_time = time.perf_counter() - start

        if A != expected:
            raise AssertionError(f"american_flag_sort disagrees with sorted() for n = {n:,}")

        timings["american flag"].append((n, afs_time))
        timings["timsort (sorted)"].append((n, ref_time))
        if verbose:
            print(f"n = {n:>10,}  ->  time = {afs_time:.3f} s  (sorted(): {ref_time:.3f} s)")

    return timings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="American flag sort demo")
    parser.add_argument("--n", type=int, default=100_000, help="Number of random integers to sort.")
    parser.add_argument("--max-value", type=int, default=10**9, help="Largest random value generated.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--verify", action="store_true", help="Check the result against sorted().")
    parser.add_argument("--sample", action="store_true", help="Sort 20 small integers, printing every bucket pass.")
    parser.add_argument("--benchmark", action="store_true", help="Time increasing input sizes against sorted().")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    rng = random.Random(args.seed)

    if args.sample:
        A = [rng.randint(0, 999) for _ in range(20)]
        print("Unsorted:", A)
        american_flag_sort(A, verbose=True)
        return 0

    if args.benchmark:
        benchmark_american_flag(max_value=args.max_value, seed=args.seed)
        return 0

    data = [rng.randint(0, args.max_value) for _ in range(args.n)]
    A = list(data)
    t0 = time.perf_counter()
    american_flag_sort(A)
    t1 = time.perf_counter()

    print(f"Sorted {args.n:,} integers in {t1 - t0:.3f} s.")
    if args.verify and A != sorted(data):
        raise AssertionError("Result is not sorted correctly")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
