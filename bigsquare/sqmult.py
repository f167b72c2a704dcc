# bigsquare/sqmult.py
# a^b mod n by square-and-multiply
# - powers a^(2^i) mod n come from the memo table when present
# - accumulator is reduced mod n after every multiply (no 32-bit wraparound)
# - exponents wider than 32 bits are rejected, never truncated

from __future__ import annotations
from typing import Optional

from .errors import ExponentTooWide, OperandTooWide
from .memo import ModExpCache, cache_key
from .settings import WORD_BITS, WORD_MASK

# ---------- Preconditions ----------

def _is_word(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool) and 0 <= x <= WORD_MASK

def check_modulus(n: int) -> None:
    if not _is_word(n) or n < 1:
        raise OperandTooWide(f"modulus must be an integer in [1, 2^{WORD_BITS}), got {n!r}")

def check_base(a: int) -> None:
    if not _is_word(a):
        raise OperandTooWide(f"base must be an integer in [0, 2^{WORD_BITS}), got {a!r}")

def check_exponent(b: int) -> None:
    if not _is_word(b):
        raise ExponentTooWide(f"exponent must be an integer in [0, 2^{WORD_BITS}), got {b!r}")

# ---------- Squaring chain ----------

def sq_mod_power(a: int, i: int, n: int, cache: ModExpCache) -> int:
    """a^(2^i) mod n, reusing the highest rung of the chain already cached."""
    if not 0 <= i < WORD_BITS:
        raise ExponentTooWide(f"bit position {i} outside 0..{WORD_BITS - 1}")

    start, value = -1, 0
    for k in range(i, -1, -1):
        hit = cache.get(cache_key(a, 1 << k, n), (a, 1 << k, n))
        if hit is not None:
            start, value = k, hit
            break

    if start < 0:
        value = a % n
        cache.put(cache_key(a, 1, n), value, (a, 1, n))
        start = 0

    for k in range(start + 1, i + 1):
        value = (value * value) % n
        p = 1 << k
        cache.put(cache_key(a, p, n), value, (a, p, n))
    return value

# ---------- Square and multiply ----------

def mod_pow(a: int, b: int, n: int, cache: Optional[ModExpCache] = None) -> int:
    """
    a^b mod n for 32-bit unsigned a, b and 1 <= n < 2^32.
    cache=None gives the call a private memo table.
    """
    check_base(a)
    check_exponent(b)
    check_modulus(n)
    if cache is None:
        cache = ModExpCache()

    res = 1 % n
    i = 0
    while b:
        if b & 1:
            res = (res * sq_mod_power(a, i, n, cache)) % n
        b >>= 1
        i += 1
    return res
