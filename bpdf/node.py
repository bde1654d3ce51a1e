"""A generic tree node used to describe document structure."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A tree node holding data, an id, a parent and children."""

    def __init__(self, data: T) -> None:
        self.data = data
        self.id = 0
        self.previous: Node[T] | None = None
        self.nexts: list[Node[T]] = []

    def with_id(self, id: int) -> Node[T]:
        """Set the id and return the node."""
        self.id = id
        return self

    def get_structure(self) -> list[str]:
        """Describe the edges of the subtree in depth-first order."""
        parent = "NULL" if self.previous is None else str(self.previous.id)
        current = f"({parent}) -> ({self.id})"
        if self.nexts:
            current += ", "
        structure = [current]
        for child in self.nexts:
            structure.extend(child.get_structure())
        return structure

    def is_root(self) -> bool:
        return self.previous is None

    def is_leaf(self) -> bool:
        return not self.nexts

    def backtrack(self) -> list[Node[T]]:
        """Return the path from this node up to the root."""
        path: list[Node[T]] = []
        current: Node[T] | None = self
        while current is not None:
            path.append(current)
            current = current.previous
        return path

    def add_next(self, node: Node[T]) -> None:
        """Attach ``node`` as a child."""
        node.previous = self
        self.nexts.append(node)

    def filter(self, predicate: Callable[[T], bool]) -> Node[T] | None:
        """Copy the subtree keeping only nodes whose data satisfies ``predicate``."""
        if not predicate(self.data):
            return None
        copy = Node(self.data).with_id(self.id)
        for child in self.nexts:
            kept = child.filter(predicate)
            if kept is not None:
                copy.add_next(kept)
        return copy