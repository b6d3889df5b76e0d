"""Searching routines built on binary search."""

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def count_freq(arr: Sequence[int], target: int) -> int:
    """Count occurrences of ``target`` in the sorted sequence ``arr``."""
    return bisect_right(arr, target) - bisect_left(arr, target)


def find_min(arr: Sequence[int]) -> int:
    """Return the smallest value of a sorted list that has been rotated."""
    if not arr:
        raise ValueError("find_min() arg is an empty sequence")
    low, high = 0, len(arr) - 1
    best = arr[0]
    while low <= high:
        mid = (low + high) // 2
        if arr[low] > arr[mid]:
            best = min(best, arr[mid])
            high = mid - 1
        else:
            best = min(best, arr[low])
            low = mid + 1
    return best


def search(arr: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted list, or -1 if absent."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == target:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= target <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] <= target <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def peak_element(arr: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours.

    A single element is its own peak. When no peak is found, 0 is returned.
    """
    n = len(arr)
    if n == 0:
        raise ValueError("peak_element() arg is an empty sequence")
    if n == 1:
        return 0
    if arr[0] > arr[1]:
        return 0
    if arr[-1] > arr[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if arr[mid - 1] < arr[mid] > arr[mid + 1]:
            return mid
        if arr[mid - 1] < arr[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return 0


def kth_element(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest (1-based) value of two sorted sequences.

    The last element of ``b`` never takes part in the exchange step that
    precedes the final sort.
    """
    if not 1 <= k <= len(a) + len(b):
        raise ValueError(f"k must be between 1 and {len(a) + len(b)}, got {k}")
    first, second = list(a), list(b)
    for i, j in zip(range(len(first) - 1, -1, -1), range(len(second) - 1)):
        if first[i] <= second[j]:
            break
        first[i], second[j] = second[j], first[i]
    if k <= len(first):
        return sorted(first)[k - 1]
    return sorted(second)[k - len(first) - 1]


def _can_allocate(arr: Sequence[int], limit: int, k: int) -> bool:
    students, load = 1, 0
    for pages in arr:
        if pages > limit:
            return False
        if load + pages <= limit:
            load += pages
        else:
            load = pages
            students += 1
    return students <= k


def find_pages(arr: Sequence[int], k: int) -> int:
    """Return the smallest possible maximum of pages per student.

    Books are handed out in order, each student taking a contiguous run.
    Returns -1 when there are more students than books.
    """
    if not arr:
        raise ValueError("find_pages() needs at least one book")
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    low, high = max(arr), sum(arr)
    if k == 1:
        return high
    if k == len(arr):
        return low
    if k > len(arr):
        return -1
    while low <= high:
        mid = (low + high) // 2
        if _can_allocate(arr, mid, k):
            high = mid - 1
        else:
            low = mid + 1
    return low