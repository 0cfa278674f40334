"""Number theory primitives underpinning the block cipher.

Covers the greatest common divisor, coprimality tests, the modular inverse via the Extended Euclidean Algorithm, fast
modular exponentiation and the Chinese Remainder Theorem. All functions are pure and operate on Python integers.

Typical usage example:

    gcd(252, 198)
    modular_inverse(101, 4620)
    fast_modular_exponentiation(3, 644, 645)
    chinese_remainder_theorem([2, 3, 2], [3, 5, 7]) % 105
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Sequence
import itertools
import math


class NoInverseError(ValueError):
    """Raised when a modular inverse does not exist, i.e. gcd(a, n) != 1.

    Attributes:
        a: The number that was to be inverted.
        n: The modulus.
    """

    def __init__(self, a: int, n: int) -> None:
        super().__init__(f"{a} mod {n} does not have an inverse.")
        self.a = a
        self.n = n


def gcd(a: int, b: int) -> int:
    """Calculates the greatest common divisor with the iterative Euclidean Algorithm.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The last nonzero remainder, gcd(a, b).
    """
    while b != 0:
        a, b = b, a % b
    return a


def are_relatively_prime(a: int, b: int) -> bool:
    """Tests whether `a` and `b` share no common factor."""
    return gcd(a, b) == 1


def are_pairwise_relatively_prime(values: Sequence[int]) -> bool:
    """Tests whether every pair of entries in `values` is relatively prime.

    Pairs are taken by position, so a value repeated at two positions is tested against itself. An entry is never
    paired with its own position.

    Args:
        values: The integers to test.

    Returns:
        True if gcd(x, y) == 1 for all pairs of distinct positions, False otherwise.
    """
    return all(are_relatively_prime(x, y) for x, y in itertools.combinations(values, 2))


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Runs the iterative Extended Euclidean Algorithm.

    Carries the remainder pair alongside both Bezout coefficient pairs, stepping each pair as
    (x, new_x) -> (new_x, x - quotient*new_x) until the remainder reaches zero.

    Args:
        a: The first non-negative integer.
        b: The second non-negative integer.

    Returns:
        A tuple (r, s, t) where r is the greatest common divisor of `a` and `b`, and s, t are Bezout coefficients
        with a*s + b*t == r.
    """
    r, new_r = a, b
    s, new_s = 1, 0
    t, new_t = 0, 1
    while new_r != 0:
        quotient = r // new_r
        r, new_r = new_r, r - quotient * new_r
        s, new_s = new_s, s - quotient * new_s
        t, new_t = new_t, t - quotient * new_t
    return r, s, t


def modular_inverse(a: int, n: int) -> int:
    """Calculates the modular inverse of `a` mod `n`.

    Runs the Extended Euclidean Algorithm on (n, a), so the coefficient of interest starts at (0, 1) against the
    remainders (n, a) and is extracted once the remainder reaches zero.

    Args:
        a: The number to invert.
        n: The modulus. Must be positive.

    Returns:
        A number s in [0, n) such that s*a mod n == 1.

    Raises:
        NoInverseError: If gcd(a, n) != 1.
    """
    r, _, t = eea(n, a)
    if r > 1:
        raise NoInverseError(a, n)
    if t < 0:
        t += n
    return t


def fast_modular_exponentiation(base: int, exponent: int, modulus: int) -> int:
    """Calculates base**exponent mod modulus by square-and-multiply.

    Walks the bits of the exponent from least significant upwards, multiplying the accumulator by the running square
    whenever the bit is set. Covers the full bit length of the exponent, so there is no upper bound on its size.

    The accumulator starts at 1 reduced mod `modulus`, so any power mod 1 is 0. This includes exponent 0, for which
    an accumulator left at a bare 1 would return 1.

    Args:
        base: The base of the exponentiation.
        exponent: The exponent. Must be non-negative.
        modulus: The modulus. Must be positive.

    Returns:
        The result of base**exponent mod modulus.

    Raises:
        ValueError: If the exponent is negative.
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative.")
    x = 1 % modulus
    power = base % modulus
    for i in range(exponent.bit_length()):
        if (exponent >> i) & 1:
            x = (x * power) % modulus
        power = (power * power) % modulus
    return x


def chinese_remainder_theorem(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Solves a system of linear congruences using the Chinese Remainder Theorem.

    Note! The result is NOT reduced. The caller takes it mod the product of the moduli to obtain the canonical
    representative.

    Args:
        residues: Arbitrary integers, x == residues[i] (mod moduli[i]).
        moduli: Pairwise relatively prime integers greater than 1.

    Returns:
        The sum of residues[i] * M_i * y_i, where M_i is the product of all other moduli and y_i its inverse
        mod moduli[i].

    Raises:
        NoInverseError: If an inverse cannot be found, i.e. the moduli were not pairwise relatively prime.
        ValueError: If the sequences differ in length.
    """
    m = math.prod(moduli)
    total = 0
    for a_i, m_i in zip(residues, moduli, strict=True):
        big_m = m // m_i
        total += a_i * big_m * modular_inverse(big_m, m_i)
    return total
