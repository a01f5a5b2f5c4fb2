"""Drills that lean on sorting: triplet sums, custom orders, rankings and greedy pairings."""

from __future__ import annotations

import heapq
from bisect import bisect_left, insort
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cmp_to_key

MEDALS = ("Gold Medal", "Silver Medel", "Bronze Medel")


def has_triplet_sum(items: Iterable[int], target: int) -> bool:
    """True when three entries at distinct positions add up to target."""
    ordered = sorted(items)
    n = len(ordered)
    for i in range(n - 2):
        left, right = i + 1, n - 1
        while left < right:
            total = ordered[i] + ordered[left] + ordered[right]
            if total == target:
                return True
            if total < target:
                left += 1
            else:
                right -= 1
    return False


def _concat_order(x: str, y: str) -> int:
    if x + y > y + x:
        return -1
    if x + y < y + x:
        return 1
    return 0


def largest_number(parts: Iterable[str]) -> str:
    """Concatenate the parts in the order that forms the largest number."""
    ordered = sorted(parts, key=cmp_to_key(_concat_order))
    if not ordered:
        raise ValueError("parts must not be empty")
    if ordered[0] == "0":
        return "0"
    return "".join(ordered)


def closest_triplet_sum(items: Iterable[int], target: int) -> int:
    """Sum of three entries closest to target; ties go to the larger sum.

    With fewer than three entries the result is 0.
    """
    ordered = sorted(items)
    n = len(ordered)
    best_diff: int | None = None
    best = 0
    for i in range(n - 2):
        left, right = i + 1, n - 1
        while left < right:
            total = ordered[i] + ordered[left] + ordered[right]
            diff = abs(total - target)
            if best_diff is None or diff < best_diff or (diff == best_diff and total > best):
                best_diff = diff
                best = total
            if total < target:
                left += 1
            else:
                right -= 1
    return best


def sort_by_frequency(items: Iterable[int]) -> list[int]:
    """Order items by descending frequency, breaking ties by ascending value."""
    values = list(items)
    counts = Counter(values)
    return sorted(values, key=lambda value: (-counts[value], value))


def rank_labels(scores: Sequence[int]) -> list[str]:
    """Label each score by its place: medals for the top three, then positions.

    Equal scores are placed in order of appearance.
    """
    order = sorted(range(len(scores)), key=lambda i: (-scores[i], i))
    labels = [""] * len(scores)
    for place, index in enumerate(order):
        labels[index] = MEDALS[place] if place < len(MEDALS) else str(place + 1)
    return labels


def find_error_pair(nums: Sequence[int]) -> list[int]:
    """[duplicate, missing] for numbers meant to be 1..n; -1 where none is found.

    The duplicate is the last value seen again; the missing number is the
    smallest of 1..n that does not occur.
    """
    n = len(nums)
    seen: set[int] = set()
    duplicate = -1
    for value in nums:
        if not 0 <= value <= n:
            raise ValueError(f"value {value} is outside 0..{n}")
        if value in seen:
            duplicate = value
        seen.add(value)
    missing = next((i for i in range(1, n + 1) if i not in seen), -1)
    return [duplicate, missing]


def reorganize(s: str) -> str:
    """Rearrange s so no two neighbours are equal, or return '' if impossible.

    The most frequent character goes first each time; among equal counts the
    later character in code order wins.
    """
    heap = [(-count, -ord(char), char) for char, count in Counter(s).items()]
    heapq.heapify(heap)
    out = []
    held: tuple[int, int, str] | None = None
    while heap:
        count, rank, char = heapq.heappop(heap)
        out.append(char)
        if held is not None:
            heapq.heappush(heap, held)
        remaining = -count - 1
        held = (-remaining, rank, char) if remaining else None
    result = "".join(out)
    return result if len(result) == len(s) else ""


def max_token_score(tokens: Iterable[int], power: int) -> int:
    """Best score from playing tokens face up (spend power) or face down (gain it)."""
    ordered = sorted(tokens)
    low, high = 0, len(ordered) - 1
    score = best = 0
    while low <= high:
        if power >= ordered[low]:
            power -= ordered[low]
            low += 1
            score += 1
            best = max(best, score)
        elif score:
            power += ordered[high]
            high -= 1
            score -= 1
        else:
            break
    return best


def can_win_all(villains: Iterable[int], players: Iterable[int]) -> bool:
    """True when, both sorted, every player outranks the villain paired with them."""
    v = sorted(villains)
    p = sorted(players)
    if len(v) != len(p):
        raise ValueError("villains and players must be equal in number")
    return all(villain > player for villain, player in zip(v, p))


def sorted_squares(items: Iterable[int]) -> list[int]:
    """Squares of the items in ascending order."""
    return sorted(value * value for value in items)


def distinct_pair_count(items: Iterable[int]) -> int:
    """Number of unordered pairs that can be formed from the distinct values."""
    m = len(set(items))
    return m * (m - 1) // 2


def prefix_ranks(words: Iterable[str]) -> list[int]:
    """For each word, how many distinct earlier words sort before it."""
    seen: list[str] = []
    ranks = []
    for word in words:
        position = bisect_left(seen, word)
        ranks.append(position)
        if position == len(seen) or seen[position] != word:
            insort(seen, word)
    return ranks