"""Prime numbers and prime factorisation."""

from __future__ import annotations

from math import isqrt


def is_prime(number: int) -> bool:
    """Whether ``number`` is prime; numbers below 2 are not."""
    if number <= 1:
        return False
    return all(number % divisor for divisor in range(2, isqrt(number) + 1))


def primes_up_to(number: int) -> list[int]:
    """All primes from 2 up to and including ``number``."""
    return [candidate for candidate in range(2, number + 1) if is_prime(candidate)]


def prime_factors(number: int) -> list[int]:
    """Prime factors of ``number`` in ascending order, with repeats; [] below 2."""
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= number:
        while number % divisor == 0:
            factors.append(divisor)
            number //= divisor
        divisor += 1
    if number > 1:
        factors.append(number)
    return factors