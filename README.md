# dsakit

Small implementations of classic algorithm exercises on strings, sorting and
searching. They need nothing outside the standard library. Each function takes
ordinary Python values, such as strings, lists of ints and lists of
`[start, end]` intervals, and returns ordinary Python values.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Strings: `dsakit.strings`

| Function | What it does |
| --- | --- |
| `my_atoi(s)` | Parses a leading decimal integer and clamps the result to the signed 32-bit range. A `-` counts only when it is the very first character of `s`, and then no spaces are skipped after it. Otherwise leading spaces are skipped. `+` is not accepted. Parsing stops at the first character that is not a digit. |
| `trim_leading_zeros(s)` | Drops everything before the first `'1'`. Returns `"0"` if there is no `'1'`. |
| `add_binary(a, b)` | Adds two binary strings and returns the sum with no leading zeros. Raises `ValueError` for a string that is not binary. |
| `are_anagrams(s, t)` | Tells whether two strings hold the same characters with the same counts. |
| `are_rotations(s1, s2)` | Tells whether `s2` occurs within `s1 + s1`. |

```python
from dsakit.strings import my_atoi, add_binary, are_rotations

my_atoi("-123abc")            # -123
my_atoi("   42x")             # 42
my_atoi("99999999999")        # 2147483647
add_binary("1101", "111")     # "10100"
are_rotations("abcd", "cdab") # True
```

## Sorting: `dsakit.sorting`

| Function | What it does |
| --- | --- |
| `sort012(arr)` | Sorts a list of 0s, 1s and 2s in place, in a single pass (Dutch national flag). |
| `inversion_count(arr)` | Counts the pairs `i < j` with `arr[i] > arr[j]`, using merge sort. The input is not changed. |
| `merge_overlap(intervals)` | Merges overlapping or touching `[start, end]` intervals. Returns a new list sorted by start. |
| `min_removal(intervals)` | Gives the fewest intervals to remove so that the rest do not overlap. Intervals that only touch do not count as overlapping. Raises `ValueError` for an empty input. |
| `merge_arrays(a, b)` | Rearranges two sorted lists in place. Afterwards `a` holds the smallest values and `b` the rest, and both are sorted. |

```python
from dsakit.sorting import merge_overlap, inversion_count

merge_overlap([[1, 3], [2, 4], [6, 8], [9, 10]])  # [[1, 4], [6, 8], [9, 10]]
inversion_count([2, 4, 1, 3, 5])                  # 3
```

## Searching: `dsakit.searching`

| Function | What it does |
| --- | --- |
| `count_freq(arr, target)` | Counts the occurrences of `target` in a sorted sequence. |
| `find_min(arr)` | Finds the minimum of a sorted list that has been rotated. Raises `ValueError` for an empty sequence. |
| `search(arr, target)` | Gives the index of `target` in a rotated sorted list of distinct values, or `-1` if it is absent. |
| `peak_element(arr)` | Gives the index of an element greater than its neighbours. A single element is its own peak. Returns `0` when no peak is found. Raises `ValueError` for an empty sequence. |
| `kth_element(a, b, k)` | Gives the k-th smallest (1-based) value of two sorted sequences, working on copies. Raises `ValueError` if `k` is out of range. The last element of `b` never moves into `a` during the exchange step, so the result can be wrong when that element belongs among the smallest `len(a)` values, for example when `b` has a single element. |
| `find_pages(arr, k)` | Hands out books to `k` students, each student taking a contiguous run, and returns the smallest possible largest number of pages. Returns `-1` when there are more students than books. Raises `ValueError` for no books or for `k < 1`. |

```python
from dsakit.searching import search, find_pages

search([5, 6, 7, 8, 9, 10, 1, 2, 3], 10)  # 5
find_pages([12, 34, 67, 90], 2)            # 113
```

Only `sort012` and `merge_arrays` change the lists they are given. Every other
function leaves its input untouched.

## What this package does not do

dsakit is a library only. It has no command-line program and does not read
test cases from standard input or print results. You call the functions from
your own code.