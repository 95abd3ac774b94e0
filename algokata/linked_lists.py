"""Singly linked lists and the classic exercises built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _digits_to_int(digits: Iterable[int]) -> int:
    text = "".join(str(digit) for digit in digits)
    return int(text) if text else 0


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a list from head to tail."""
    return [node.val for node in _nodes(head)]


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Merge two sorted lists by splicing their nodes together."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_two_lists_copying(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Merge two sorted lists, copying nodes while both lists have items.

    The remainder of the longer list is attached as it is.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = ListNode(list1.val)
            list1 = list1.next
        else:
            tail.next = ListNode(list2.val)
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def append_to_tail(head: ListNode | None, val: int) -> ListNode:
    """Append ``val`` to the end of a non-empty list and return its head."""
    if head is None:
        raise ValueError("cannot append to an empty list")
    last = head
    while last.next is not None:
        last = last.next
    last.next = ListNode(val)
    return head


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode:
    """Add two numbers stored as digit lists, least significant digit first."""
    total = _digits_to_int(reversed(list_values(l1))) + _digits_to_int(
        reversed(list_values(l2))
    )
    result = build_list(int(char) for char in reversed(str(total)))
    assert result is not None
    return result


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None when there is no cycle."""
    seen: set[ListNode] = set()
    node = head
    while node is not None:
        if node in seen:
            return node
        seen.add(node)
        node = node.next
    return None


def find_intersection(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Find a shared node by scanning the rest of ``l2`` for each step of ``l1``."""
    while l1 is not None and l2 is not None:
        if any(node is l1 for node in _nodes(l2)):
            return l1
        l1, l2 = l1.next, l2.next
    return None


def find_intersection_hashed(
    l1: ListNode | None, l2: ListNode | None
) -> ListNode | None:
    """Return the first node of ``l2`` that is also a node of ``l1``."""
    seen = set(_nodes(l1))
    return next((node for node in _nodes(l2) if node in seen), None)


def kth_to_last(head: ListNode | None, k: int) -> ListNode | None:
    """Return the k-th node from the end (k=1 is the last node)."""
    if k < 0:
        raise ValueError("k must not be negative")
    nodes = list(_nodes(head))
    if k > len(nodes):
        return None
    index = len(nodes) - k
    return nodes[index] if index < len(nodes) else None


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Return a reversed copy of a list, leaving the original untouched."""
    return build_list(reversed(list_values(head)))


def is_palindrome_list(head: ListNode | None) -> bool:
    """Tell whether a list reads the same in both directions."""
    return all(
        forward.val == backward.val
        for forward, backward in zip(_nodes(head), _nodes(reverse_list(head)))
    )


def partition_list(head: ListNode | None, partition: int) -> ListNode | None:
    """Return a new list with values below ``partition`` before the others.

    Relative order inside each part is kept.
    """
    if head is None:
        return None
    values = list_values(head)
    lower = [value for value in values if value < partition]
    upper = [value for value in values if value >= partition]
    return build_list(lower + upper)


def delete_sorted_duplicates(head: ListNode | None) -> ListNode | None:
    """Remove repeated values from a sorted list in place."""
    if head is None:
        return head
    kept = head
    current = head.next
    while current is not None:
        if current.val == kept.val:
            kept.next = None
        else:
            kept.next = current
            kept = current
        current = current.next
    return head


def remove_duplicates_with_buffer(head: ListNode | None) -> ListNode | None:
    """Remove later repeats of any value in place, remembering seen values."""
    seen: set[int] = set()
    node = head
    while node is not None and node.next is not None:
        seen.add(node.val)
        if node.next.val in seen:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_duplicates_no_buffer(head: ListNode | None) -> ListNode | None:
    """Remove later repeats of any value in place without extra storage."""
    for node in _nodes(head):
        runner = node
        while runner.next is not None:
            if runner.next.val == node.val:
                runner.next = runner.next.next
            else:
                runner = runner.next
    return head


def sum_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Add two digit lists stored least significant digit first."""
    if list1 is None and list2 is None:
        return None
    total = _digits_to_int(reversed(list_values(list1))) + _digits_to_int(
        reversed(list_values(list2))
    )
    return build_list(int(char) for char in reversed(str(total)))


def sum_lists_forward(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Add two digit lists stored most significant digit first."""
    if list1 is None and list2 is None:
        return None
    total = _digits_to_int(list_values(list1)) + _digits_to_int(list_values(list2))
    return build_list(int(char) for char in str(total))