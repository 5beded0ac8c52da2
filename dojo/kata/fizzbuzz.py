"""FizzBuzz: multiples of 3 say one word, multiples of 5 another, both say both."""

from __future__ import annotations


def fizz(number: int, word: str = "fizz") -> str:
    """``word`` if ``number`` is a multiple of 3, otherwise an empty string."""
    return word if number % 3 == 0 else ""


def buzz(number: int, word: str = "buzz") -> str:
    """``word`` if ``number`` is a multiple of 5, otherwise an empty string."""
    return word if number % 5 == 0 else ""


def fizzbuzz(number: int, fizz_word: str = "fizz", buzz_word: str = "buzz") -> str:
    """The words for the multiples ``number`` is of, or the number itself."""
    return (fizz(number, fizz_word) + buzz(number, buzz_word)) or str(number)