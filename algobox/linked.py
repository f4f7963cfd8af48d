"""Singly linked list nodes and a list container built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: Any = 0
    next: Optional["ListNode"] = None


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a chain of nodes from ``values`` and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def to_list(head: Optional[ListNode]) -> list[Any]:
    """Return the values of the chain starting at ``head``."""
    return [node.val for node in _iter_nodes(head)]


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a chain in place iteratively and return the new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reverse_list_recursive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a chain in place recursively and return the new head."""

    def rev(previous: Optional[ListNode], current: Optional[ListNode]) -> Optional[ListNode]:
        if current is None:
            return previous
        new_head = rev(current, current.next)
        current.next = previous
        return new_head

    return rev(None, head)


class LinkedList:
    """A singly linked list with positional and value-based removal."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in _iter_nodes(self.head))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the beginning."""
        self.head = ListNode(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        node = ListNode(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def find(self, value: Any) -> Optional[int]:
        """Return the 1-based position of the first ``value``, or None."""
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        return None

    def _unlink(self, previous: Optional[ListNode], node: ListNode) -> Any:
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1
        return node.val

    def delete_at(self, position: int) -> Any:
        """Remove the node at the 1-based ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        previous: Optional[ListNode] = None
        for index, node in enumerate(_iter_nodes(self.head), start=1):
            if index == position:
                return self._unlink(previous, node)
            previous = node
        raise IndexError(f"position {position} out of range")

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        previous: Optional[ListNode] = None
        for node in _iter_nodes(self.head):
            if node.val == value:
                self._unlink(previous, node)
                return
            previous = node
        raise ValueError(f"{value!r} not in list")

    def middle(self) -> Any:
        """Return the middle value; for an even length, the second of the two."""
        if self.head is None:
            raise ValueError("middle of an empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next.next
        assert slow is not None
        return slow.val

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._tail = self.head
        self.head = reverse_list(self.head)