"""Array exercises: games, profits, merging, in-place edits and searches."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def _truncated_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def get_winner(arr: Sequence[int], k: int) -> int:
    """Return the value that first wins ``k`` rounds in a row.

    The current winner meets each later value in turn. When the values run
    out, the last winner is returned.
    """
    if not arr:
        raise ValueError("the game needs at least one value")
    winner, wins = arr[0], 0
    for challenger in arr[1:]:
        if wins >= k:
            break
        if winner > challenger:
            wins += 1
        else:
            winner, wins = challenger, 1
    return winner


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one sale."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price <= lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def max_profit_tracking(prices: Sequence[int]) -> int:
    """Return the best profit, tracking the buy and sell prices separately."""
    if len(prices) <= 1:
        return 0
    buy, sell, profit = prices[0], 0, 0
    for price in prices[1:]:
        if buy > price:
            buy = sell = price
        if price > sell:
            sell = price
        profit = max(profit, sell - buy)
    return profit


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` values of ``nums2`` into ``nums1`` in place.

    The first ``m`` values of ``nums1`` are sorted; each value of ``nums2``
    is inserted at its place by binary search.
    """
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    if n == 0:
        return
    if m == 0:
        nums1[: len(nums2[: len(nums1)])] = nums2[: len(nums1)]
        return
    for offset, value in enumerate(nums2[:n]):
        end = m + offset
        position = bisect_left(nums1, value, 0, end)
        nums1[position + 1 : end + 1] = nums1[position:end]
        nums1[position] = value


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Copy ``nums2`` behind the first ``m`` values of ``nums1`` and sort it."""
    count = min(len(nums1) - m, len(nums2))
    nums1[m : m + count] = nums2[:count]
    nums1.sort()


def minimum_average_difference(nums: Iterable[int]) -> int:
    """Return the index where the front and back averages differ least.

    Averages are integer quotients truncated towards zero; the earliest
    index wins ties.
    """
    values = list(nums)
    total = sum(values)
    front = 0
    best_index, best = 0, None
    for count, value in enumerate(values, start=1):
        front += value
        back_count = len(values) - count
        back_avg = _truncated_div(total - front, back_count) if back_count else 0
        difference = abs(_truncated_div(front, count) - back_avg)
        if best is None or difference < best:
            best, best_index = difference, count - 1
    return best_index


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    if any(not 0 <= digit <= 9 for digit in digits):
        raise ValueError("digits must lie between 0 and 9")
    text = "".join(str(digit) for digit in digits) or "0"
    return [int(char) for char in str(int(text) + 1).zfill(len(digits))]


def remove_duplicates(nums: list[int]) -> int:
    """Keep each value of a sorted list once at its front; return the count."""
    if not nums:
        return 0
    kept = 1
    for value in nums[1:]:
        if value > nums[kept - 1]:
            nums[kept] = value
            kept += 1
    return kept


def remove_element(nums: list[int], val: int) -> int:
    """Move the values other than ``val`` to the front; return their count."""
    kept = 0
    for value in list(nums):
        if value != val:
            nums[kept] = value
            kept += 1
    return kept


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a sorted list, or where it belongs."""
    low, high = 0, len(nums) - 1
    while low <= high:
        pivot = (low + high) // 2
        value = nums[pivot]
        if value == target:
            return pivot
        if value < target:
            low = pivot + 1
        else:
            high = pivot - 1
    return low


def find_magic_index(values: Sequence[int]) -> int:
    """Return an index ``i`` with ``values[i] == i`` in a sorted list, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        pivot = (low + high) // 2
        if values[pivot] == pivot:
            return pivot
        if values[pivot] < pivot:
            low = pivot + 1
        else:
            high = pivot - 1
    return -1


def power_set(values: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``values``, the empty one first."""
    subsets: list[list[int]] = [[]]
    for value in reversed(values):
        subsets += [[value, *subset] for subset in subsets]
    return subsets