"""Classic comparison and distribution sorts over Python sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Return a new ascending list built by repeated adjacent swaps."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Return a new ascending list, moving each minimum to the front in turn."""
    result = list(items)
    for i in range(len(result) - 1):
        min_idx = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[min_idx] = result[min_idx], result[i]
    return result


def _merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    merged: list[T] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a new ascending list using a stable top-down merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def radix_sort_passes(items: Iterable[int]) -> Iterator[list[int]]:
    """Yield the list after each least-significant-digit pass.

    The number of passes is the number of decimal digits of the largest
    value; when the largest value is not positive no pass is made.
    Negative values are rejected.
    """
    data = list(items)
    if any(value < 0 for value in data):
        raise ValueError("radix sort only handles non-negative integers")
    if not data:
        return
    largest = max(data)
    passes = 0
    while largest > 0:
        passes += 1
        largest //= 10
    divisor = 1
    for _ in range(passes):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in data:
            buckets[(value // divisor) % 10].append(value)
        data = [value for bucket in buckets for value in bucket]
        divisor *= 10
        yield list(data)


def radix_sort(items: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ascending order."""
    result = list(items)
    for result in radix_sort_passes(result):
        pass
    return list(result)


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) with one bucket per value."""
    data = list(values)
    n = len(data)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in data:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort value out of range [0, 1): {value!r}")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]