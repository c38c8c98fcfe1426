"""
Singly linked list with no cached tail or length.

Everything is derived by walking the chain from the head, so there is
no second copy of the list's shape that can drift out of sync with the
links themselves. The price is O(n) for append, pop, tail and size.

Nodes handed back to callers expose their link read-only. Only the list
rewires links, which keeps the chain acyclic and singly owned.
"""

import logging
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar
from .list_defs import *
from .txt_strs import *

log = logging.getLogger(__name__)
T = TypeVar("T")

class Node:
    __slots__ = ("value", "_next")

    def __init__(self, value):
        self.value = value
        self._next = None

    @property
    def next(self) -> Optional["Node"]:
        """Successor node, or None for the last node."""
        return self._next

    def __repr__(self):
        return f"Node({self.value!r})"

def check_index(op: str, index: Any):
    # bool is an int subclass but never a sensible position.
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(
            TXTS["index_type"].format(op=op, kind=type(index).__name__)
        )

class LinkedList(Generic[T]):
    def __init__(self, values: Optional[Iterable[T]] = None):
        self._head: Optional[Node] = None
        if values is not None:
            self._link_values(values)

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> "LinkedList[T]":
        return cls(values)

    def _link_values(self, values):
        """Append many values with a single walk to the end."""
        last = self._walk_to_end()
        for value in values:
            node = Node(value)
            if last is None:
                self._head = node
            else:
                last._next = node
            last = node

    def _nodes(self) -> Iterator[Node]:
        cur = self._head
        while cur is not None:
            nxt = cur._next
            yield cur
            cur = nxt

    def _walk(self, steps: int) -> Optional[Node]:
        """Node `steps` links past the head, or None if the chain ends first."""
        cur = self._head
        for _ in range(steps):
            if cur is None:
                return None
            cur = cur._next
        return cur

    def _walk_to_end(self) -> Optional[Node]:
        last = None
        for last in self._nodes():
            pass
        return last

    def _out_of_bounds(self, op: str, index: int, upper: int):
        if upper < 0:
            msg = TXTS["index_empty"].format(op=op, index=index)
        else:
            msg = TXTS["index_range"].format(op=op, index=index, upper=upper)

        log.debug(msg)
        return IndexOutOfBounds(msg)

    def _empty(self, op: str):
        msg = TXTS["empty"].format(op=op)
        log.debug(msg)
        return EmptyListError(msg)

    ################################################################################
    def prepend(self, value: T) -> Node:
        """Add value to the start of the list and return its node. O(1)."""
        node = Node(value)
        node._next = self._head
        self._head = node
        return node

    def append(self, value: T) -> Node:
        """Add value to the end of the list and return its node. O(n)."""
        node = Node(value)
        last = self._walk_to_end()
        if last is None:
            self._head = node
        else:
            last._next = node

        return node

    def insert_at(self, value: T, index: int) -> Node:
        """
        Insert value so that it ends up at position index.

        Valid positions are 0..size() inclusive: 0 prepends and size()
        appends. Anything else raises IndexOutOfBounds without touching
        the list.
        """
        check_index("insert_at", index)
        if index < 0:
            raise self._out_of_bounds("insert_at", index, self.size())
        if index == 0:
            return self.prepend(value)

        prev = self._walk(index - 1)
        if prev is None:
            raise self._out_of_bounds("insert_at", index, self.size())

        # New node takes the successor before prev lets go of it.
        node = Node(value)
        node._next = prev._next
        prev._next = node
        return node

    def pop(self) -> Node:
        """Remove the last node and return it. Raises EmptyListError if empty."""
        if self._head is None:
            raise self._empty("pop")

        if self._head._next is None:
            removed = self._head
            self._head = None
        else:
            prev = self._head
            while prev._next._next is not None:
                prev = prev._next

            removed = prev._next
            prev._next = None

        log.debug("pop: released %r", removed)
        return removed

    def remove_at(self, index: int) -> Node:
        """Unlink the node at index and return it. Valid 0..size()-1."""
        check_index("remove_at", index)
        if index < 0 or self._head is None:
            raise self._out_of_bounds("remove_at", index, self.size() - 1)

        if index == 0:
            removed = self._head
            self._head = removed._next
        else:
            prev = self._walk(index - 1)
            if prev is None or prev._next is None:
                raise self._out_of_bounds("remove_at", index, self.size() - 1)

            removed = prev._next
            prev._next = removed._next

        # Detach so the released node can't reach back into the list.
        removed._next = None
        log.debug("remove_at: released %r from index %d", removed, index)
        return removed

    def clear(self):
        count = 0
        for node in self._nodes():
            node._next = None
            count += 1

        self._head = None
        log.debug("clear: released %d nodes", count)

    ################################################################################
    def at(self, index: int) -> Node:
        check_index("at", index)
        node = None if index < 0 else self._walk(index)
        if node is None:
            raise self._out_of_bounds("at", index, self.size() - 1)

        return node

    def find(self, value: T) -> int:
        """Index of the first node equal to value, else NOT_FOUND."""
        for i, node in enumerate(self._nodes()):
            if node.value == value:
                return i

        return NOT_FOUND

    def contains(self, value: T) -> bool:
        return self.find(value) != NOT_FOUND

    def head(self) -> Node:
        if self._head is None:
            raise self._empty("head")

        return self._head

    def tail(self) -> Node:
        last = self._walk_to_end()
        if last is None:
            raise self._empty("tail")

        return last

    def size(self) -> int:
        return sum(1 for _ in self._nodes())

    def values(self) -> List[T]:
        return list(self)

    def to_string(self) -> str:
        parts = [NODE_FMT.format(value) for value in self]
        parts.append(TERMINAL_TXT)
        return LINK_TXT.join(parts)

    ################################################################################
    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __len__(self):
        return self.size()

    def __bool__(self):
        return self._head is not None

    def __contains__(self, value):
        return self.contains(value)

    def __getitem__(self, index: int) -> T:
        return self.at(index).value

    def __eq__(self, other):
        if not isinstance(other, LinkedList):
            return NotImplemented

        return self.values() == other.values()

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"{type(self).__name__}({self.values()!r})"
