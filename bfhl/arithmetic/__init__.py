"""Arithmetic module - Fibonacci, primes, LCM and HCF."""

from .service import (
    fibonacci_series,
    is_prime,
    gcd,
    lcm,
    handle_fibonacci,
    handle_prime,
    handle_lcm,
    handle_hcf,
)


__all__ = [
    "fibonacci_series",
    "is_prime",
    "gcd",
    "lcm",
    "handle_fibonacci",
    "handle_prime",
    "handle_lcm",
    "handle_hcf",
]
