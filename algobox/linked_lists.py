"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list, head first."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists; return the reversed digit list of the sum."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def delete_all_duplicates(head: ListNode | None) -> ListNode | None:
    """Remove every value that appears more than once in a sorted list."""
    dummy = ListNode(next=head)
    prev = dummy
    curr = head
    while curr is not None:
        duplicate = False
        while curr.next is not None and curr.val == curr.next.val:
            duplicate = True
            curr = curr.next
        if duplicate:
            prev.next = curr.next
        else:
            prev = prev.next
        curr = curr.next
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Keep one node of each run of equal values in a sorted list."""
    curr = head
    while curr is not None and curr.next is not None:
        if curr.val == curr.next.val:
            curr.next = curr.next.next
        else:
            curr = curr.next
    return head


def partition(head: ListNode | None, x: int) -> ListNode | None:
    """Move nodes below ``x`` before the others, keeping relative order in each part."""
    before_head = ListNode()
    after_head = ListNode()
    before = before_head
    after = after_head
    for node in list(_nodes(head)):
        if node.val < x:
            before.next = node
            before = node
        else:
            after.next = node
            after = node
    after.next = None
    before.next = after_head.next
    return before_head.next


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether the list loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reorder_list(head: ListNode | None) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None or head.next is None:
        return

    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next

    prev = None
    curr = slow.next
    slow.next = None
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next

    first, second = head, prev
    while second is not None:
        first_next = first.next
        second_next = second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


def insertion_sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by insertion sort and return the new head."""
    dummy = ListNode()
    curr = head
    while curr is not None:
        following = curr.next
        prev = dummy
        while prev.next is not None and prev.next.val < curr.val:
            prev = prev.next
        curr.next = prev.next
        prev.next = curr
        curr = following
    return dummy.next


def _merge(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val < b.val:
            tail.next = a
            a = a.next
        else:
            tail.next = b
            b = b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def _middle(head: ListNode) -> ListNode:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    mid = _middle(head)
    right = mid.next
    mid.next = None
    return _merge(sort_list(head), sort_list(right))