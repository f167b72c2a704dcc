import random

import pytest

from bigsquare import ExponentTooWide, ModExpCache, OperandTooWide, mod_pow, sq_mod_power
from bigsquare.settings import WORD_MASK

@pytest.fixture
def cache():
    return ModExpCache()

def test_small_vectors(cache):
    assert mod_pow(2, 10, 1000, cache) == 24
    assert mod_pow(3, 4, 5, cache) == 1
    assert mod_pow(7, 1, 5, cache) == 2

@pytest.mark.parametrize("n", [1, 2, 7, 3763, WORD_MASK])
def test_zero_exponent(n, cache):
    for a in (0, 1, 5, 12345, WORD_MASK):
        assert mod_pow(a, 0, n, cache) == 1 % n

def test_modulus_one_is_zero(cache):
    assert mod_pow(9, 0, 1, cache) == 0
    assert mod_pow(9, 5, 1, cache) == 0

def test_matches_builtin_pow(cache):
    rng = random.Random(1234)
    for _ in range(500):
        a = rng.randrange(0, WORD_MASK + 1)
        b = rng.randrange(0, WORD_MASK + 1)
        n = rng.randrange(1, WORD_MASK + 1)
        assert mod_pow(a, b, n, cache) == pow(a, b, n)

def test_base_reduction(cache):
    rng = random.Random(99)
    for _ in range(200):
        n = rng.randrange(1, 100000)
        a = rng.randrange(0, WORD_MASK + 1)
        b = rng.randrange(0, 1 << 20)
        assert mod_pow(a, b, n, cache) == mod_pow(a % n, b, n, cache)

def test_word_edges_use_wide_accumulator(cache):
    n = 0xFFFFFFFB
    assert mod_pow(WORD_MASK, WORD_MASK, n, cache) == pow(WORD_MASK, WORD_MASK, n)
    assert mod_pow(n - 1, 2, n, cache) == 1

def test_result_independent_of_cache_state():
    warm = ModExpCache()
    rng = random.Random(7)
    triples = [(rng.randrange(1 << 16), rng.randrange(1 << 24), rng.randrange(2, 1 << 16))
               for _ in range(300)]
    for a, b, n in triples:
        mod_pow(a, b, n, warm)
    for a, b, n in triples:
        first = mod_pow(a, b, n, warm)
        assert first == mod_pow(a, b, n, warm) == mod_pow(a, b, n) == pow(a, b, n)

def test_tiny_capacity_still_correct():
    c = ModExpCache(capacity=2)
    assert mod_pow(3, 255, 1009, c) == pow(3, 255, 1009)
    assert c.clears > 0

def test_squaring_chain_reuses_rungs(cache):
    assert sq_mod_power(3, 5, 1000, cache) == pow(3, 32, 1000)
    assert len(cache) == 6
    hits = cache.hits
    assert sq_mod_power(3, 7, 1000, cache) == pow(3, 128, 1000)
    assert len(cache) == 8
    assert cache.hits == hits + 1

def test_bit_position_limit(cache):
    with pytest.raises(ExponentTooWide):
        sq_mod_power(3, 32, 1000, cache)

@pytest.mark.parametrize("b", [1 << 32, -1, 2 ** 40])
def test_exponent_too_wide(b):
    with pytest.raises(ExponentTooWide):
        mod_pow(2, b, 7)

@pytest.mark.parametrize("a,n", [(1 << 32, 7), (-3, 7), (2, 0), (2, 1 << 32), (2, -5)])
def test_operand_too_wide(a, n):
    with pytest.raises(OperandTooWide):
        mod_pow(a, 3, n)

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        mod_pow(2, 1 << 33, 7)
