"""Sorting routines: Dutch flag, inversion counting, interval merging, two-list merge."""

from collections.abc import Iterable, Sequence


def sort012(arr: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low = mid = 0
    high = len(arr) - 1
    while mid <= high:
        if arr[mid] == 0:
            arr[low], arr[mid] = arr[mid], arr[low]
            low += 1
            mid += 1
        elif arr[mid] == 1:
            mid += 1
        else:
            arr[mid], arr[high] = arr[high], arr[mid]
            high -= 1


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return list(items), 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:middle])
    right, right_count = _sort_and_count(items[middle:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inversion_count(arr: Iterable[int]) -> int:
    """Count pairs ``i < j`` with ``arr[i] > arr[j]``."""
    return _sort_and_count(list(arr))[1]


def merge_overlap(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(iv) for iv in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def min_removal(intervals: Iterable[Sequence[int]]) -> int:
    """Return the fewest intervals to drop so that the rest do not overlap."""
    ordered = sorted(list(iv) for iv in intervals)
    if not ordered:
        raise ValueError("min_removal() needs at least one interval")
    removed = 0
    end = ordered[0][1]
    for start, stop in ordered[1:]:
        if start < end:
            removed += 1
            end = min(stop, end)
        else:
            end = stop
    return removed


def merge_arrays(a: list[int], b: list[int]) -> None:
    """Rearrange two sorted lists in place so that ``a + b`` is sorted."""
    for i, j in zip(range(len(a) - 1, -1, -1), range(len(b))):
        if a[i] <= b[j]:
            break
        a[i], b[j] = b[j], a[i]
    a.sort()
    b.sort()