"""Singly linked list nodes and rearrangement drills over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One list cell holding a value and a link to the next cell."""

    value: Any
    next: Node | None = field(default=None, repr=False)


def _nodes(head: Node | None) -> Iterator[Node]:
    """Yield the nodes from head onwards, refusing to loop over a cycle."""
    seen: set[int] = set()
    while head is not None:
        if id(head) in seen:
            raise ValueError("list contains a cycle")
        seen.add(id(head))
        yield head
        head = head.next


def build(values: Iterable[Any]) -> Node | None:
    """Link the given values into a list and return its head (None if empty)."""
    dummy = Node(None)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def build_with_cycle(values: Iterable[Any], pos: int) -> Node | None:
    """Build a list whose tail links back to the node at 1-based position pos.

    A pos of zero or less leaves the list acyclic; a pos past the end links
    the tail to nothing.
    """
    head = build(values)
    if pos > 0 and head is not None:
        nodes = list(_nodes(head))
        nodes[-1].next = nodes[pos - 1] if pos <= len(nodes) else None
    return head


def values(head: Node | None) -> list[Any]:
    """The values of the list in order; raises ValueError on a cycle."""
    return [node.value for node in _nodes(head)]


def remove_sorted_duplicates(head: Node | None) -> Node | None:
    """Drop nodes equal to their predecessor, leaving one of each run."""
    current = head
    while current is not None and current.next is not None:
        if current.value == current.next.value:
            current.next = current.next.next
        else:
            current = current.next
    return head


def zigzag_order(items: Iterable[Any]) -> list[Any]:
    """Alternate between the first and last remaining items."""
    pending = deque(items)
    order = []
    while pending:
        order.append(pending.popleft())
        if pending:
            order.append(pending.pop())
    return order


def remove_cycle(head: Node | None) -> bool:
    """Break a cycle in the list if there is one; True when a link was cut."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False

    slow = head
    if slow is fast:
        while fast.next is not slow:
            fast = fast.next
    else:
        while slow.next is not fast.next:
            slow = slow.next
            fast = fast.next
    fast.next = None
    return True


def move_negatives_front(head: Node | None) -> Node | None:
    """Move every negative node after the head to the front, one at a time."""
    if head is None or head.next is None:
        return head
    prev, current = head, head.next
    while current is not None:
        if current.value < 0:
            prev.next = current.next
            current.next = head
            head = current
            current = prev.next
        else:
            prev, current = current, current.next
    return head


def sort_colors(head: Node | None) -> Node | None:
    """Stable regrouping of nodes: zeros, then ones, then everything else."""
    if head is None or head.next is None:
        return head
    zeros, ones, rest = [], [], []
    for node in _nodes(head):
        if node.value == 0:
            zeros.append(node)
        elif node.value == 1:
            ones.append(node)
        else:
            rest.append(node)
    ordered = zeros + ones + rest
    for node, following in zip(ordered, ordered[1:]):
        node.next = following
    ordered[-1].next = None
    return ordered[0]


def split_parts(head: Node | None, k: int) -> list[Node | None]:
    """Cut the list into k consecutive parts whose sizes differ by at most one.

    Earlier parts take the extra nodes; parts past the end are None.
    """
    if k <= 0:
        raise ValueError("number of parts must be positive")
    length = sum(1 for _ in _nodes(head))
    base, extra = divmod(length, k)
    parts: list[Node | None] = [None] * k
    current = head
    for i in range(k):
        if current is None:
            break
        parts[i] = current
        for _ in range(base + (i < extra) - 1):
            current = current.next
        tail = current
        current = tail.next
        tail.next = None
    return parts


def sort_values(head: Node | None) -> Node | None:
    """Sort the list in place by rewriting node values in ascending order."""
    nodes = list(_nodes(head))
    for node, value in zip(nodes, sorted(node.value for node in nodes)):
        node.value = value
    return head


def second_half(head: Node | None) -> list[Any]:
    """Values from the middle node to the end (the second middle when even)."""
    if head is None:
        raise ValueError("list must contain at least one node")
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return values(slow)