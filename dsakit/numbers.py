"""Small number-theory and recursion routines on integers."""

from __future__ import annotations

import math
from typing import Iterator, NamedTuple


class HanoiMove(NamedTuple):
    """One move of a disk between two pegs."""

    disk: int
    source: str
    target: str


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must be non-negative, got {n}")


def digit_count(n: int) -> int:
    """Return the number of decimal digits of ``n``; zero has none."""
    n = abs(n)
    count = 0
    while n:
        n //= 10
        count += 1
    return count


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    _require_non_negative(n, "factorial argument")
    return math.prod(range(2, n + 1))


def factors(n: int) -> list[int]:
    """Return every positive divisor of ``n`` in ascending order."""
    return [d for d in range(1, n + 1) if n % d == 0]


def fibonacci_sequence(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from 0."""

    def generate() -> Iterator[int]:
        current, following = 0, 1
        for _ in range(count):
            yield current
            current, following = following, current + following

    return list(generate())


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("gcd needs two positive integers")
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    return a * b // gcd(a, b)


def is_palindrome_number(n: int) -> bool:
    """Tell whether the decimal digits of ``n`` read the same both ways."""
    digits = str(abs(n))
    return digits == digits[::-1]


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a power of two greater than one."""
    return n > 1 and n & (n - 1) == 0


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` with multiplicity, ascending."""
    result: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            result.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        result.append(n)
    return result


def count_down(n: int) -> list[int]:
    """Return the natural numbers from ``n`` down to 1."""
    return list(range(n, 0, -1))


def count_up(n: int) -> list[int]:
    """Return the natural numbers from 1 up to ``n``."""
    return list(range(1, n + 1))


def is_bit_set(n: int, k: int) -> bool:
    """Tell whether the ``k``-th bit of ``n`` (counting from 1) is set."""
    if k < 1:
        raise ValueError(f"bit position must be at least 1, got {k}")
    return bool(n & (1 << (k - 1)))


def count_set_bits(n: int) -> int:
    """Return the number of one bits in a positive ``n``; zero otherwise."""
    return bin(n).count("1") if n > 0 else 0


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative ``n``."""
    _require_non_negative(n, "number")
    return sum(int(digit) for digit in str(n))


def sum_natural(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    _require_non_negative(n, "count")
    return n * (n + 1) // 2


def hanoi_moves(
    n: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> list[HanoiMove]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""

    def moves(count: int, src: str, aux: str, dst: str) -> Iterator[HanoiMove]:
        if count < 1:
            return
        yield from moves(count - 1, src, dst, aux)
        yield HanoiMove(count, src, dst)
        yield from moves(count - 1, aux, src, dst)

    return list(moves(n, source, auxiliary, target))


def max_rope_pieces(n: int, a: int, b: int, c: int) -> int | None:
    """Return the most pieces of lengths a, b or c that a rope of ``n`` cuts into.

    Returns ``None`` when the rope cannot be cut exactly.
    """
    lengths = (a, b, c)
    if min(lengths) <= 0:
        raise ValueError("piece lengths must be positive")
    if n < 0:
        return None
    best: list[int | None] = [0] + [None] * n
    for total in range(1, n + 1):
        options = [
            previous
            for piece in lengths
            if piece <= total and (previous := best[total - piece]) is not None
        ]
        if options:
            best[total] = max(options) + 1
    return best[n]


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    _require_non_negative(n, "factorial argument")
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count