"""Number-theory helpers: primes, digit puzzles, modular powers."""

from __future__ import annotations

from itertools import takewhile
from math import gcd

__all__ = [
    "MOD",
    "nth_prime",
    "is_armstrong",
    "power_mod",
    "fibonacci",
    "gcd_weighted_sum",
    "digit_removal",
]

MOD = 1_000_000_007


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"there is no prime number {n}")
    primes = [2]
    candidate = 3
    while len(primes) < n:
        divisors = takewhile(lambda p: p * p <= candidate, primes)
        if all(candidate % p for p in divisors):
            primes.append(candidate)
        candidate += 2
    return primes[n - 1]


def is_armstrong(number: int) -> bool:
    """True when ``number`` equals the sum of its digits, each raised to
    the count of its digits."""
    if number < 0:
        raise ValueError("Armstrong numbers are defined for non-negative integers")
    digits = str(number)
    order = len(digits)
    return sum(int(d) ** order for d in digits) == number


def power_mod(base: int, exponent: int, modulus: int = MOD) -> int:
    """Compute ``base ** exponent % modulus`` by binary exponentiation.

    An exponent of zero always gives 1, whatever the modulus.
    """
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def fibonacci(n: int) -> int:
    """Fibonacci number where both the 0th and the 1st terms are 1."""
    if n < 2:
        return 1
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def gcd_weighted_sum(n: int) -> int:
    """Sum of ``i * gcd(i, n)`` for ``i`` from 1 to ``n``."""
    return sum(i * gcd(i, n) for i in range(1, n + 1))


def digit_removal(n: int, digit: int) -> int:
    """Smallest amount to add to ``n`` so that no digit of the result is ``digit``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if not 0 <= digit <= 9:
        raise ValueError(f"{digit} is not a decimal digit")
    text = str(n)
    length = len(text)

    if digit == 0:
        index = text.find("0")
        if index >= 0:
            text = text[:index] + "1" * (length - index)
    elif digit == 9:
        index = text.find("9")
        if index == 0:
            text = "1" + "0" * length
        elif index > 0:
            bump = next(
                (j for j in range(index - 1, -1, -1) if text[j] <= "7"), None
            )
            if bump is None:
                text = "1" + "0" * length
            else:
                raised = str(int(text[bump]) + 1)
                text = text[:bump] + raised + "0" * (length - bump - 1)
    else:
        index = text.find(str(digit))
        if index >= 0:
            text = text[:index] + str(digit + 1) + "0" * (length - index - 1)

    return int(text) - n