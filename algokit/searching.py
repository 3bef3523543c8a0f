"""Sequential search and Rabin-Karp substring search."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")

_RADIX = 256


def linear_search(items: Iterable[T], target: T) -> int | None:
    """Return the 1-based position of the first match, or None if absent."""
    for position, item in enumerate(items, start=1):
        if item == target:
            return position
    return None


def _codes(text: str | bytes) -> list[int]:
    if isinstance(text, (bytes, bytearray)):
        return list(text)
    return [ord(ch) for ch in text]


def rabin_karp(text: str | bytes, pattern: str | bytes, prime: int) -> list[int]:
    """Return every 0-based index where pattern occurs in text.

    A rolling hash modulo ``prime`` finds candidate windows, each of which
    is then checked character by character.
    """
    if prime < 1:
        raise ValueError("prime must be a positive integer")
    if not pattern:
        raise ValueError("pattern must not be empty")
    txt = _codes(text)
    pat = _codes(pattern)
    m, n = len(pat), len(txt)
    if m > n:
        return []

    high = pow(_RADIX, m - 1, prime)
    p_hash = t_hash = 0
    for p_code, t_code in zip(pat, txt):
        p_hash = (_RADIX * p_hash + p_code) % prime
        t_hash = (_RADIX * t_hash + t_code) % prime

    found: list[int] = []
    for i in range(n - m + 1):
        if p_hash == t_hash and txt[i : i + m] == pat:
            found.append(i)
        if i < n - m:
            t_hash = (_RADIX * (t_hash - txt[i] * high) + txt[i + m]) % prime
    return found