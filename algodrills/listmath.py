"""Arithmetic and splicing drills over linked lists."""

from __future__ import annotations

from itertools import zip_longest
from typing import Any

from algodrills.linked import Node, build, values


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def double_number(head: Node | None) -> Node | None:
    """Double the number whose decimal digits the list holds, most significant first."""
    digits = []
    carry = 0
    for digit in reversed(values(head)):
        total = digit * 2 + carry
        digits.append(total % 10)
        carry = total // 10
    while carry:
        digits.append(carry % 10)
        carry //= 10
    return build(reversed(digits))


def add_numbers(first: Node | None, second: Node | None) -> Node | None:
    """Add two numbers stored least significant digit first."""
    digits = []
    carry = 0
    for a, b in zip_longest(values(first), values(second), fillvalue=0):
        total = a + b + carry
        digits.append(total % 10)
        carry = total // 10
    while carry:
        digits.append(carry % 10)
        carry //= 10
    return build(digits)


def remove_value(head: Node | None, target: Any) -> Node | None:
    """Unlink every node holding target."""
    dummy = Node(None, head)
    current = dummy
    while current.next is not None:
        if current.next.value == target:
            current.next = current.next.next
        else:
            current = current.next
    return dummy.next


def merge_sorted(first: Node | None, second: Node | None) -> Node | None:
    """Splice two ascending lists into one; on ties the second list's node goes first."""
    dummy = Node(None)
    tail = dummy
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def reverse_between(head: Node | None, left: int, right: int) -> Node | None:
    """Reverse the nodes at 1-based positions left through right in place."""
    if head is None or left == right:
        return head
    length = len(values(head))
    if left < 1 or right > length:
        raise ValueError(f"positions must lie within 1..{length}")
    dummy = Node(None, head)
    prev = dummy
    for _ in range(left - 1):
        prev = prev.next
    current = prev.next
    for _ in range(right - left):
        moved = current.next
        current.next = moved.next
        moved.next = prev.next
        prev.next = moved
    return dummy.next