"""Integer puzzles: bit counting, powers, Fibonacci and reflections."""

from __future__ import annotations

_MODULUS = 1_000_000_007
_UINT32_LIMIT = 1 << 32


def number_of_steps(num: int) -> int:
    """Count the steps to reach zero by halving even numbers and decrementing odd ones."""
    if num < 0:
        raise ValueError("num must not be negative")
    steps = 0
    while num:
        num = num // 2 if num % 2 == 0 else num - 1
        steps += 1
    return steps


def concatenated_binary(n: int) -> int:
    """Return the binary concatenation of 1..n as a number, modulo 1,000,000,007."""
    result = 0
    for i in range(1, n + 1):
        result = ((result << i.bit_length()) + i) % _MODULUS
    return result


def hamming_weight(n: int) -> int:
    """Return the number of set bits in an unsigned 32-bit integer."""
    if not 0 <= n < _UINT32_LIMIT:
        raise ValueError(f"{n} is not an unsigned 32-bit integer")
    return n.bit_count()


def _is_power_of(n: int, base: int) -> bool:
    if n <= 0:
        return False
    while n % base == 0:
        n //= base
    return n == 1


def is_power_of_two(n: int) -> bool:
    """Return True if n is a positive power of two."""
    return _is_power_of(n, 2)


def add(num1: int, num2: int) -> int:
    """Return the sum of two integers."""
    return num1 + num2


def is_power_of_three(n: int) -> bool:
    """Return True if n is a positive power of three."""
    return _is_power_of(n, 3)


def is_power_of_four(n: int) -> bool:
    """Return True if n is a positive power of four."""
    return _is_power_of(n, 4)


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def mirror_reflection(p: int, q: int) -> int:
    """Return the receptor (0, 1 or 2) a laser ray meets first in a square mirror room."""
    if p <= 0 or q < 0:
        raise ValueError("p must be positive and q must not be negative")
    while p % 2 == 0 and q % 2 == 0:
        p //= 2
        q //= 2
    if p % 2 == 0:
        return 2
    if q % 2 == 0:
        return 0
    return 1