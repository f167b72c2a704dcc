# bigsquare/memo.py
# Memo table for powers-of-two modular squares.
# - Cantor-pairing fingerprint over (a, p), xor'd with the modulus
# - Bounded store, fully cleared when it fills up (no LRU bookkeeping)
# - Optional tag check so fingerprint collisions cannot leak wrong values

from __future__ import annotations
from typing import Dict, Optional, Tuple

from .settings import MEMOSIZE, WORD_MASK

Tag = Tuple[int, int, int]

def cache_key(a: int, p: int, n: int) -> int:
    """
    Fingerprint for a^p mod n (p a power of two).
    Pairing over (a+p) keeps a and p non-commutative; the multiply is done
    wide and narrowed to the word only at the end. Distinct triples can
    still land on the same key after narrowing or the xor with n.
    """
    s = a + p
    key = ((s * (s + 1)) >> 1) + p
    return (key & WORD_MASK) ^ n

class ModExpCache:
    """
    key -> a^(2^i) mod n memo, shared by every mod_pow call that is handed it.
    When full, the whole table is dropped before the next insert.
    Not safe for concurrent mutation: give each worker its own instance.
    """

    def __init__(self, capacity: int = MEMOSIZE, verify: bool = True):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self.verify = verify
        self._entries: Dict[int, Tuple[Optional[Tag], int]] = {}
        self.hits = 0
        self.misses = 0
        self.clears = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: int) -> bool:
        return key in self._entries

    def get(self, key: int, tag: Optional[Tag] = None) -> Optional[int]:
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return None
        stored_tag, value = entry
        if self.verify and tag is not None and stored_tag is not None and stored_tag != tag:
            # fingerprint collision: someone else owns this slot
            self.misses += 1
            return None
        self.hits += 1
        return value

    def put(self, key: int, value: int, tag: Optional[Tag] = None) -> None:
        if key in self._entries:
            # never replace an interim value; the first occupant keeps the slot
            return
        if len(self._entries) >= self.capacity:
            self.clear()
        self._entries[key] = (tag if self.verify else None, value)

    def clear(self) -> None:
        self._entries.clear()
        self.clears += 1

    def stats(self) -> dict:
        return {"size": len(self._entries), "capacity": self.capacity,
                "hits": self.hits, "misses": self.misses, "clears": self.clears}
