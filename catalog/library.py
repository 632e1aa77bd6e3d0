import logging
from typing import Optional

from catalog.book import BookRecord

logger = logging.getLogger(__name__)


class _BookNode:
    """Tree node owning one record and up to two children."""

    __slots__ = ("record", "left", "right")

    def __init__(self, record: BookRecord) -> None:
        self.record = record
        self.left: Optional["_BookNode"] = None
        self.right: Optional["_BookNode"] = None


class OrderedCatalog:
    """Books kept in a binary search tree ordered by name.

    Names compare case-sensitively in code-point order and must be unique.
    The tree is never rebalanced, so sorted input degrades it to a chain;
    every walk below is a loop rather than recursion for that reason.

    Not safe for concurrent use. Callers sharing a catalog between threads
    must guard the whole object with a single lock.
    """

    def __init__(self) -> None:
        self._root: Optional[_BookNode] = None
        self._size = 0

    @property
    def size(self) -> int:
        """Number of distinct (by name) records stored."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    # ------------------------- Core operations ------------------------- #
    def insert(self, record: BookRecord) -> bool:
        """Add a record. Returns False, leaving the tree untouched, when the name already exists."""
        if self._root is None:
            self._root = _BookNode(record)
            self._size += 1
            logger.debug(f"Inserted {record.name!r} as root")
            return True

        node = self._root
        while True:
            if record.name == node.record.name:
                logger.debug(f"Duplicate name rejected: {record.name!r}")
                return False
            if record.name < node.record.name:
                if node.left is None:
                    node.left = _BookNode(record)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _BookNode(record)
                    break
                node = node.right

        self._size += 1
        logger.debug(f"Inserted {record.name!r}")
        return True

    def lookup(self, name: str) -> Optional[BookRecord]:
        """Return the record with exactly this name, or None."""
        node = self._root
        while node is not None:
            if name == node.record.name:
                return node.record
            node = node.left if name < node.record.name else node.right
        return None

    def find_minimum(self) -> Optional[BookRecord]:
        """Return the record with the smallest name, or None when empty."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.record

    # ------------------------- Introspection ------------------------- #
    def depth(self) -> int:
        """Nodes on the longest root-to-leaf path (0 for an empty catalog)."""
        if self._root is None:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            if node.left is not None:
                stack.append((node.left, level + 1))
            if node.right is not None:
                stack.append((node.right, level + 1))
        return deepest
