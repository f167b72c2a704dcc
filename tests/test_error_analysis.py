from fractions import Fraction

import pytest
from sympy import isprime

from bigsquare import ErrorBucket, ModExpCache, error_rate, odd_candidates, scan_errors

@pytest.fixture(scope="module")
def cache():
    return ModExpCache()

def test_prime_has_no_error(cache):
    for p in (3, 5, 101, 997, 7919):
        assert error_rate(p, cache) == 0

def test_nine_has_one_liar(cache):
    # strong liars of 9 are 1 and 8; only 1 is swept
    assert error_rate(9, cache) == Fraction(1, 8)

def test_small_edge_cases(cache):
    assert error_rate(2, cache) == 0
    assert error_rate(4, cache) == 0

def test_rejects_n_below_two():
    with pytest.raises(ValueError):
        error_rate(1)

def test_rate_in_unit_interval(cache):
    for n in range(2, 400):
        e = error_rate(n, cache)
        assert isinstance(e, Fraction)
        assert 0 <= e <= 1

def test_composite_rate_below_quarter(cache):
    # Rabin's bound: at most a quarter of bases are strong liars
    for n in range(9, 600, 2):
        if not isprime(n):
            assert error_rate(n, cache) <= Fraction(1, 4)

def test_custom_reference(cache):
    # against a reference that wrongly calls 2047 prime, nearly every witness disagrees
    assert error_rate(2047, cache, reference=(2,)) > Fraction(3, 4)

def test_odd_candidates():
    assert list(odd_candidates(105000, 105010)) == [105001, 105003, 105005, 105007, 105009]
    assert list(odd_candidates(7, 12)) == [7, 9, 11]
    assert list(odd_candidates(0, 8)) == [3, 5, 7]
    assert list(odd_candidates(10, 10)) == []

def test_bucket_fills_then_replaces_minimum():
    b = ErrorBucket(size=3)
    assert b.offer(1, Fraction(1, 2))
    assert b.offer(2, Fraction(1, 4))
    assert b.offer(3, Fraction(1, 4))
    assert not b.offer(4, Fraction(1, 8))
    # ties with the minimum still get in; the first minimum leaves
    assert b.offer(5, Fraction(1, 4))
    assert b.items() == [(1, Fraction(1, 2)), (3, Fraction(1, 4)), (5, Fraction(1, 4))]
    assert b.minimum == Fraction(1, 4)
    assert len(b) == 3

def test_bucket_size_must_be_positive():
    with pytest.raises(ValueError):
        ErrorBucket(0)

def test_scan_tracks_max_and_bucket(cache):
    seen = []
    res = scan_errors(3, 200, cache, bucket_size=5, on_new_max=lambda n, e: seen.append((n, e)))
    expected = [(n, error_rate(n, cache)) for n in range(3, 200, 2)]
    assert res.rates == expected
    assert res.scanned == len(expected)
    top = max(e for _, e in expected)
    assert res.max_error == top
    assert error_rate(res.max_n, cache) == top
    assert [e for _, e in seen] == sorted({e for _, e in seen})
    assert seen[-1] == (res.max_n, top)
    assert len(res.bucket) == 5
    assert res.bucket.items()[0][1] == top
    assert all(e >= res.bucket.minimum for _, e in res.bucket.items())

def test_scan_with_precomputed_rates():
    rates = [(9, Fraction(1, 8)), (15, Fraction(1, 14)), (21, Fraction(1, 20))]
    res = scan_errors(0, 0, rates=iter(rates))
    assert res.max_error == Fraction(1, 8) and res.max_n == 9
    assert res.scanned == 3

def test_empty_scan():
    res = scan_errors(10, 10)
    assert res.max_error == 0 and res.max_n is None and res.scanned == 0
