"""Queue-based drills: ticket lines, card reveals, rounds and streams."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from typing import Any

RADIANT = "Radiant"
DIRE = "Dire"
NO_UNIQUE = "#"


def ticket_time(tickets: Sequence[int], k: int) -> int:
    """Seconds until the person at position k has bought all their tickets."""
    if not 0 <= k < len(tickets):
        raise ValueError(f"position {k} is outside the line")
    wanted = tickets[k]
    return sum(
        min(count, wanted - (i > k)) for i, count in enumerate(tickets)
    )


def reveal_order(deck: Iterable[Any]) -> list[Any]:
    """Reveal the top card, move the next one to the bottom, and repeat."""
    pending = deque(deck)
    revealed = []
    while pending:
        revealed.append(pending.popleft())
        if pending:
            pending.rotate(-1)
    return revealed


def trapped_water(heights: Sequence[int]) -> int:
    """Water held between bars, scanning inwards from both ends.

    The level for a bar taken from the right is the larger of that bar and
    the running maximum seen from the left.
    """
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left <= right:
        if heights[left] <= heights[right]:
            left_max = max(left_max, heights[left])
            water += left_max - heights[left]
            left += 1
        else:
            right_max = max(left_max, heights[right])
            water += right_max - heights[right]
            right -= 1
    return water


def students_unable(students: Iterable[int], sandwiches: Sequence[int]) -> int:
    """How many students are left when nobody at the front wants the top sandwich."""
    line = deque(students)
    if len(line) != len(sandwiches):
        raise ValueError("there must be one sandwich per student")
    served = 0
    skipped = 0
    while line and skipped < len(line):
        if line[0] == sandwiches[served]:
            line.popleft()
            served += 1
            skipped = 0
        else:
            line.rotate(-1)
            skipped += 1
    return len(line)


def max_jump_score(nums: Sequence[int], k: int) -> int:
    """Best total from the first to the last index, jumping at most k steps."""
    if not nums:
        raise ValueError("nums must not be empty")
    if k < 1 and len(nums) > 1:
        raise ValueError("jump length must be at least 1")
    best: list[int] = []
    for i, value in enumerate(nums):
        if i == 0:
            best.append(value)
        else:
            best.append(value + max(best[max(0, i - k):i]))
    return best[-1]


def senate_winner(senate: str) -> str:
    """The party whose senators survive when each bans the next opponent in turn."""
    n = len(senate)
    radiant = deque(i for i, party in enumerate(senate) if party == "R")
    dire = deque(i for i, party in enumerate(senate) if party != "R")
    while radiant and dire:
        r = radiant.popleft()
        d = dire.popleft()
        if r < d:
            radiant.append(r + n)
        else:
            dire.append(d + n)
    return RADIANT if radiant else DIRE


def first_unique_stream(s: str) -> str:
    """After each character, the first one seen so far that is still unique, or '#'."""
    counts: Counter = Counter()
    pending: deque[str] = deque()
    out = []
    for char in s:
        counts[char] += 1
        pending.append(char)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        out.append(pending[0] if pending else NO_UNIQUE)
    return "".join(out)


def reverse_queue(items: Iterable[Any]) -> list[Any]:
    """Empty a queue onto a stack and read the stack back, reversing the order."""
    queue = deque(items)
    stack = []
    while queue:
        stack.append(queue.popleft())
    return [stack.pop() for _ in range(len(stack))]