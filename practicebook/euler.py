"""Small number-theory exercises: multiples, Fibonacci, primes and divisors."""

from __future__ import annotations

import math
from functools import reduce


def sum_multiples_of_3_or_5(limit: int) -> int:
    """Sum of the natural numbers below ``limit`` divisible by 3 or 5."""
    return sum(i for i in range(1, limit) if i % 3 == 0 or i % 5 == 0)


def even_fibonacci_sum(limit: int) -> int:
    """Sum of the even Fibonacci terms generated while the trailing term is below ``limit``."""
    total = 0
    previous, current = 0, 1
    while previous < limit:
        previous, current = current, previous + current
        if current % 2 == 0:
            total += current
    return total


def find_prime_factors(num: int) -> list[int]:
    """Distinct prime factors of ``num`` in ascending order."""
    if num < 1:
        raise ValueError("num must be a positive integer")
    factors: list[int] = []
    while num % 2 == 0:
        if 2 not in factors:
            factors.append(2)
        num //= 2
    factor = 3
    while factor * factor <= num:
        while num % factor == 0:
            if factor not in factors:
                factors.append(factor)
            num //= factor
        factor += 2
    if num > 2:
        factors.append(num)
    return sorted(factors)


def largest_prime_factor(num: int) -> int:
    """Largest prime factor of ``num``."""
    factors = find_prime_factors(num)
    if not factors:
        raise ValueError(f"{num} has no prime factors")
    return max(factors)


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same backwards."""
    return text == text[::-1]


def largest_palindrome_product() -> int:
    """Largest palindrome that is a product of two three-digit numbers."""
    return max(
        (
            a * b
            for a in range(999, 99, -1)
            for b in range(a, 99, -1)
            if is_palindrome(str(a * b))
        ),
        default=0,
    )


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return a * b // gcd(a, b)


def smallest_multiple(n: int) -> int:
    """Smallest positive number evenly divisible by every number from 1 to ``n``."""
    return reduce(lcm, range(1, n + 1), 1)


def sum_square_difference(num: int) -> int:
    """Square of the sum of 1..num minus the sum of their squares."""
    sum_of_squares = num * (num + 1) * (2 * num + 1) // 6
    total = num * (num + 1) // 2
    return total * total - sum_of_squares


def sieve_of_eratosthenes(limit: int) -> list[int]:
    """All primes less than or equal to ``limit``."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return [n for n, flag in enumerate(is_prime) if flag]


def find_nth_prime(n: int) -> int:
    """The ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    limit = 15 if n < 6 else math.ceil(n * math.log(n) * 1.2)
    while True:
        primes = sieve_of_eratosthenes(limit)
        if len(primes) >= n:
            return primes[n - 1]
        limit *= 2


def factors(num: int) -> list[int]:
    """Divisors of ``num`` up to half of it, followed by ``num`` itself."""
    return [i for i in range(1, num // 2 + 1) if num % i == 0] + [num]