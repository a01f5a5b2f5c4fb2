"""Counting and scanning drills over flat and nested integer sequences."""

from collections.abc import Iterable, Sequence

PASS_MARK = 7
SURGE_THRESHOLD = 50
OVERSTOCK_LEVEL = 100
OVERSTOCK_MIN_ITEMS = 3
MIN_REPORTED_PROFIT = 2


def can_afford_exact(budget: int, prices: Iterable[int]) -> bool:
    """Return True if some price equals the budget exactly."""
    return any(price == budget for price in prices)


def grade_split(scores: Iterable[int]) -> tuple[int, int]:
    """Return (passed, missed): scores at or above the pass mark and below it."""
    passed = missed = 0
    for score in scores:
        if score >= PASS_MARK:
            passed += 1
        else:
            missed += 1
    return passed, missed


def count_peaks(scores: Sequence[int]) -> int:
    """Count interior scores strictly greater than both neighbours."""
    return sum(
        1
        for before, here, after in zip(scores, scores[1:], scores[2:])
        if here > before and here > after
    )


def count_surges(values: Sequence[int]) -> int:
    """Count values of at least the threshold that rise over the previous one."""
    return sum(
        1
        for previous, current in zip(values, values[1:])
        if current >= SURGE_THRESHOLD and current > previous
    )


def count_overstocked_rows(stock: Iterable[Iterable[int]]) -> int:
    """Count rows holding at least three items at or above the overstock level."""
    return sum(
        1
        for row in stock
        if sum(1 for item in row if item >= OVERSTOCK_LEVEL) >= OVERSTOCK_MIN_ITEMS
    )


def longest_rising_streak(temps: Sequence[int]) -> int:
    """Length of the longest run of strictly increasing readings (at least 1)."""
    best = current = 1
    for previous, here in zip(temps, temps[1:]):
        if here > previous:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best buy-then-sell gain; gains below two count as no profit."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best if best >= MIN_REPORTED_PROFIT else 0


def shortest_session_span(target: int, sessions: Sequence[int]) -> int:
    """Length of the shortest contiguous run summing to at least target, or 0."""
    if target <= 0:
        raise ValueError("target must be positive")
    best = len(sessions) + 1
    start = 0
    total = 0
    for end, value in enumerate(sessions):
        total += value
        while total >= target and start <= end:
            best = min(best, end - start + 1)
            total -= sessions[start]
            start += 1
    return 0 if best == len(sessions) + 1 else best