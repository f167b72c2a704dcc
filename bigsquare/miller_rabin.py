# bigsquare/miller_rabin.py
# Miller-Rabin with caller-chosen witnesses, built on the memoized mod_pow.

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from .errors import InvalidWitness
from .memo import ModExpCache
from .sqmult import _is_word, check_modulus, mod_pow

# For small integers, testing a = 2 and a = 3 makes MR deterministic
# (n < 1,373,653).
DETERMINISTIC_WITNESSES = (2, 3)

def _witness_list(witnesses: Iterable[int]) -> List[int]:
    avals = list(witnesses)
    if not avals:
        raise InvalidWitness("at least one witness is required")
    for a in avals:
        if not _is_word(a):
            raise InvalidWitness(f"witness must be a 32-bit unsigned integer, got {a!r}")
    return avals

def _odd_part(n: int) -> int:
    d = n - 1
    while d % 2 == 0:
        d >>= 1
    return d

def _passes(n: int, a: int, d: int, cache: ModExpCache) -> bool:
    """One strong round for base a; d is the odd part of n-1."""
    x = mod_pow(a, d, n, cache)
    while d != n - 1 and x != 1 and x != n - 1:
        x = (x * x) % n
        d *= 2
    return not (x != n - 1 and d % 2 == 0)

def is_probable_prime(n: int,
                      witnesses: Sequence[int] = DETERMINISTIC_WITNESSES,
                      cache: Optional[ModExpCache] = None) -> bool:
    """
    Strong probable-prime test of n against each witness in order; stops at
    the first witness that proves n composite.
    Witnesses divisible by n say nothing about n and are skipped.
    Witness correctness (e.g. 1 or n-1 as bases) is not checked.
    """
    avals = _witness_list(witnesses)
    if n == 0:
        return False
    check_modulus(n)
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    if cache is None:
        cache = ModExpCache()

    d = _odd_part(n)
    for a in avals:
        if a % n == 0:
            continue
        if not _passes(n, a, d, cache):
            return False
    return True

def witness_verdicts(n: int, witnesses: Iterable[int],
                     cache: Optional[ModExpCache] = None) -> List[bool]:
    """Single-witness verdict for each witness, in order."""
    if cache is None:
        cache = ModExpCache()
    return [is_probable_prime(n, (a,), cache) for a in _witness_list(witnesses)]
