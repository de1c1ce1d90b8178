"""
GF(2^8) arithmetic for wordshard.

Elements are ints in 0..255, reduced by the AES polynomial
x^8 + x^4 + x^3 + x + 1 (0x11B). Multiplication and division go through
log/exp tables generated once at import from the generator 3.

The tables are not constant-time lookups; nothing here resists timing
side channels.
"""

from .errors import DivisionByZero

# 0x11B without the x^8 term, which is shifted out before reducing.
IRREDUCIBLE = 0x1B
GENERATOR = 0x03
ORDER = 255  # size of the multiplicative group


def multiply_direct(a: int, b: int) -> int:
    """
    Shift-and-reduce ("Russian peasant") multiplication.

    Reference implementation: bit-identical to multiply() for every input,
    used to build the lookup tables and to check them.
    """
    result = 0
    while b:
        if b & 1:
            result ^= a
        carry = a & 0x80
        a = (a << 1) & 0xFF
        if carry:
            a ^= IRREDUCIBLE
        b >>= 1
    return result


def _build_tables():
    exp = bytearray(2 * ORDER)
    log = bytearray(256)
    x = 1
    for i in range(ORDER):
        exp[i] = x
        exp[i + ORDER] = x
        log[x] = i
        x = multiply_direct(x, GENERATOR)
    return bytes(exp), bytes(log)


# exp holds the cycle twice so log[a] + log[b] (at most 508) indexes directly.
_EXP, _LOG = _build_tables()


def add(a: int, b: int) -> int:
    return a ^ b


# Characteristic 2: every element is its own additive inverse.
subtract = add


def multiply(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return _EXP[_LOG[a] + _LOG[b]]


def divide(a: int, b: int) -> int:
    """Return a / b. Raises DivisionByZero when b is zero."""
    if b == 0:
        raise DivisionByZero(f"Cannot divide {a} by zero in GF(256)")
    if a == 0:
        return 0
    return _EXP[_LOG[a] - _LOG[b] + ORDER]


def inverse(a: int) -> int:
    """Return the multiplicative inverse of a. Raises DivisionByZero for zero."""
    if a == 0:
        raise DivisionByZero("Zero has no multiplicative inverse in GF(256)")
    return _EXP[ORDER - _LOG[a]]


def power(a: int, n: int) -> int:
    """Return a**n. power(x, 0) is 1 for every x, including zero."""
    if n == 0:
        return 1
    if a == 0:
        return 0
    return _EXP[(_LOG[a] * n) % ORDER]


def exp(i: int) -> int:
    """Return GENERATOR**i."""
    return _EXP[i % ORDER]


def log(a: int) -> int:
    """Return the discrete log of a to base GENERATOR."""
    if a == 0:
        raise DivisionByZero("Zero has no logarithm in GF(256)")
    return _LOG[a]
