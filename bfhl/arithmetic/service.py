"""Pure arithmetic behind the fibonacci, prime, lcm and hcf keys."""

import math
from functools import reduce
from typing import Any

from bfhl.exceptions import BadRequestError, UnprocessableEntityError
from bfhl.validation import validate_integer, validate_integer_array


def fibonacci_series(n: int) -> list[int]:
    """Return the first n Fibonacci terms starting 0, 1."""
    series: list[int] = []
    a, b = 0, 1
    for _ in range(n):
        series.append(a)
        a, b = b, a + b
    return series


def is_prime(number: int) -> bool:
    """Trial division by odd candidates up to the integer square root."""
    if number <= 1:
        return False
    if number == 2:
        return True
    if number % 2 == 0:
        return False

    for divisor in range(3, math.isqrt(number) + 1, 2):
        if number % divisor == 0:
            return False
    return True


def gcd(a: int, b: int) -> int:
    """Euclidean GCD on absolute values."""
    x, y = abs(a), abs(b)
    while y != 0:
        x, y = y, x % y
    return x


def lcm(a: int, b: int) -> int:
    """Pairwise LCM. Anything paired with 0 gives 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def handle_fibonacci(value: Any, max_terms: int) -> list[int]:
    """Validate the fibonacci input and return the series.

    Args:
        value: Raw request value.
        max_terms: Largest accepted term count.

    Returns:
        The first ``value`` terms.

    Raises:
        BadRequestError: If the value is not a non-negative integer.
        UnprocessableEntityError: If the value exceeds max_terms.
    """
    n = validate_integer(value, "fibonacci")
    if n < 0:
        raise BadRequestError("fibonacci must be a non-negative integer")
    if n > max_terms:
        raise UnprocessableEntityError("fibonacci value is too large")
    return fibonacci_series(n)


def handle_prime(value: Any, max_length: int) -> list[int]:
    """Return the primes of the input array, preserving order."""
    numbers = validate_integer_array(value, "prime", max_length)
    return [number for number in numbers if is_prime(number)]


def handle_lcm(value: Any, max_length: int) -> int:
    """Reduce the input array left to right with pairwise LCM."""
    numbers = validate_integer_array(value, "lcm", max_length)
    return reduce(lcm, numbers[1:], abs(numbers[0]))


def handle_hcf(value: Any, max_length: int) -> int:
    """Reduce the input array left to right with pairwise GCD."""
    numbers = validate_integer_array(value, "hcf", max_length)
    return reduce(gcd, numbers[1:], abs(numbers[0]))
