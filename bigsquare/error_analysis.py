# bigsquare/error_analysis.py
# How often does a single Miller-Rabin witness disagree with the {2,3}
# verdict? Exhaustive witness sweep per n, plus a range scan keeping the
# worst offenders.

from __future__ import annotations
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .memo import ModExpCache
from .miller_rabin import DETERMINISTIC_WITNESSES, is_probable_prime

def error_rate(n: int, cache: Optional[ModExpCache] = None,
               reference: Sequence[int] = DETERMINISTIC_WITNESSES) -> Fraction:
    """Fraction of witnesses a in [1, n-1) whose lone verdict differs from the reference."""
    if n < 2:
        raise ValueError("error_rate needs n >= 2")
    if cache is None:
        cache = ModExpCache()

    true_answer = is_probable_prime(n, reference, cache)
    count = 0
    for a in range(1, n - 1):
        if is_probable_prime(n, (a,), cache) != true_answer:
            count += 1
    return Fraction(count, n - 1)

class ErrorBucket:
    """
    Keeps the `size` highest (n, error) pairs seen. Once full, a new value
    >= the current minimum evicts the first entry holding that minimum.
    """

    def __init__(self, size: int = 10):
        if size < 1:
            raise ValueError("bucket size must be >= 1")
        self.size = size
        self._vals: Dict[int, Fraction] = {}

    def __len__(self) -> int:
        return len(self._vals)

    @property
    def minimum(self) -> Optional[Fraction]:
        return min(self._vals.values()) if self._vals else None

    def offer(self, n: int, error: Fraction) -> bool:
        if len(self._vals) < self.size:
            self._vals[n] = error
            return True
        low = self.minimum
        if error >= low:
            victim = next(k for k, v in self._vals.items() if v == low)
            del self._vals[victim]
            self._vals[n] = error
            return True
        return False

    def items(self) -> List[Tuple[int, Fraction]]:
        return sorted(self._vals.items(), key=lambda kv: (-kv[1], kv[0]))

@dataclass
class ScanResult:
    max_error: Fraction
    max_n: Optional[int]
    bucket: ErrorBucket
    scanned: int = 0
    rates: List[Tuple[int, Fraction]] = field(default_factory=list)

def odd_candidates(low: int, high: int) -> Iterator[int]:
    """Odd integers in [low, high); 1 is skipped since error_rate needs n >= 2."""
    first = max(low, 3)
    if first % 2 == 0:
        first += 1
    return iter(range(first, high, 2))

def scan_errors(low: int, high: int,
                cache: Optional[ModExpCache] = None,
                bucket_size: int = 10,
                on_new_max: Optional[Callable[[int, Fraction], None]] = None,
                rates: Optional[Iterable[Tuple[int, Fraction]]] = None) -> ScanResult:
    """
    Error rate of every odd n in [low, high). `rates` lets a caller hand in
    precomputed (n, error) pairs (e.g. from worker processes), consumed in order.
    """
    if rates is None:
        if cache is None:
            cache = ModExpCache()
        rates = ((n, error_rate(n, cache)) for n in odd_candidates(low, high))

    result = ScanResult(max_error=Fraction(0), max_n=None, bucket=ErrorBucket(bucket_size))
    for n, error in rates:
        result.scanned += 1
        result.rates.append((n, error))
        result.bucket.offer(n, error)
        if error > result.max_error:
            result.max_error, result.max_n = error, n
            if on_new_max:
                on_new_max(n, error)
    return result
