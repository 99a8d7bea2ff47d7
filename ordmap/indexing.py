import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, Tuple, TypeVar

from ordmap import config

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class OrderedMap(ABC, Generic[K, V]):
    """Abstract base class representing a map kept in key order."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of entries in the map (duplicates counted separately)."""
        pass

    def is_empty(self) -> bool:
        """Return True if the map holds no entries."""
        return len(self) == 0

    @abstractmethod
    def insert(self, key: K, value: V) -> None:
        """Add the entry (key, value); an equal key adds a second entry."""
        pass

    @abstractmethod
    def find(self, key: K) -> Optional[V]:
        """Return the value stored under key, or None."""
        pass

    @abstractmethod
    def neighbors(self, key: K) -> Tuple[Optional[V], Optional[V]]:
        """Return (predecessor value, successor value) around key."""
        pass

    @abstractmethod
    def delete(self, key: K) -> None:
        """Remove one entry stored under key; do nothing if there is none."""
        pass


class AVLTreeMap(OrderedMap[K, V]):
    """
    Map implementation using an AVL-balanced binary search tree.

    Each node exclusively owns its left and right subtrees and there are no
    parent links. Every mutating helper takes a subtree root and returns the
    root that must replace it in the caller's slot, so a rotation or a
    successor splice never leaves two parents pointing at one node.

    Keys only need to support ``<``. Equal keys route right, so duplicates
    are kept as separate entries.

    The map is not safe for concurrent mutation; callers sharing it between
    threads must hold one lock around every operation.
    """

    class _Node:
        """Tree node storing one entry plus the cached height of its subtree."""
        __slots__ = '_key', '_value', '_height', '_left', '_right'

        def __init__(self, key, value):
            self._key = key
            self._value = value
            self._height = 1
            self._left = None
            self._right = None

        def __repr__(self):
            return f"_Node({self._key!r}, height={self._height})"

    def __init__(self, rebalance_on_delete: Optional[bool] = None):
        """
        Create an empty map.

        rebalance_on_delete: run the full AVL fixup on every node that
        deletion passes back through. When False, deletion only refreshes
        cached heights, which keeps BST order but may leave a balance factor
        outside [-1, 1]. Defaults to ``config.REBALANCE_ON_DELETE``.
        """
        self._root: Optional[AVLTreeMap._Node] = None
        self._size = 0
        if rebalance_on_delete is None:
            rebalance_on_delete = config.REBALANCE_ON_DELETE
        self._rebalance_on_delete = bool(rebalance_on_delete)

    # ------------------ Accessors ------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self._tree_search(self._root, key) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, height={self.height})"

    @property
    def height(self) -> int:
        """Height of the whole tree (0 when empty)."""
        return self._get_height(self._root)

    @property
    def rebalance_on_delete(self) -> bool:
        return self._rebalance_on_delete

    # ------------------ Height bookkeeping ------------------
    @staticmethod
    def _get_height(node: Optional[_Node]) -> int:
        """Return the cached height of node (or 0 if None)."""
        if node is None:
            return 0
        return node._height

    def _update_height(self, node: _Node) -> None:
        """Recompute the height of node from its current children."""
        node._height = 1 + max(self._get_height(node._left), self._get_height(node._right))

    def _balance_factor(self, node: _Node) -> int:
        """Right subtree height minus left subtree height."""
        return self._get_height(node._right) - self._get_height(node._left)

    # ------------------ Rotations ------------------
    def _rotate_left(self, node: _Node) -> _Node:
        """Promote the right child of node and return it as the new subtree root."""
        pivot = node._right
        if pivot is None:
            raise RuntimeError(f"Cannot rotate left at key {node._key!r}: no right child")
        node._right = pivot._left
        pivot._left = node
        self._update_height(node)
        self._update_height(pivot)
        logger.debug("rotate_left: %r lifted over %r", pivot._key, node._key)
        return pivot

    def _rotate_right(self, node: _Node) -> _Node:
        """Promote the left child of node and return it as the new subtree root."""
        pivot = node._left
        if pivot is None:
            raise RuntimeError(f"Cannot rotate right at key {node._key!r}: no left child")
        node._left = pivot._right
        pivot._right = node
        self._update_height(node)
        self._update_height(pivot)
        logger.debug("rotate_right: %r lifted over %r", pivot._key, node._key)
        return pivot

    def _rebalance(self, node: _Node) -> _Node:
        """Refresh the height of node and apply the AVL fixup; return the subtree root."""
        self._update_height(node)
        factor = self._balance_factor(node)

        if factor < -1:
            # left heavy; left-right case straightens the left child first
            if self._balance_factor(node._left) > 0:
                node._left = self._rotate_left(node._left)
            return self._rotate_right(node)
        if factor > 1:
            if self._balance_factor(node._right) < 0:
                node._right = self._rotate_right(node._right)
            return self._rotate_left(node)
        return node

    # ------------------ Insertion ------------------
    def insert(self, key: K, value: V) -> None:
        """Insert (key, value); equal keys are stored again to the right."""
        self._root = self._subtree_insert(self._root, key, value)
        self._size += 1

    def _subtree_insert(self, node: Optional[_Node], key, value) -> _Node:
        """Insert below node and return the rebalanced root of that subtree."""
        if node is None:
            return self._Node(key, value)
        if key < node._key:
            node._left = self._subtree_insert(node._left, key, value)
        else:
            node._right = self._subtree_insert(node._right, key, value)
        return self._rebalance(node)

    # ------------------ Point queries ------------------
    def _tree_search(self, node: Optional[_Node], key) -> Optional[_Node]:
        """Return the node holding key in the subtree at node, or None."""
        if node is None:
            return None
        if key < node._key:
            return self._tree_search(node._left, key)
        if node._key < key:
            return self._tree_search(node._right, key)
        return node

    def find(self, key: K) -> Optional[V]:
        """Return the value associated with key, or None."""
        node = self._tree_search(self._root, key)
        if node is None:
            return None
        return node._value

    def _subtree_first(self, node: _Node) -> _Node:
        """Return the leftmost node of the subtree at node."""
        walk = node
        while walk._left is not None:
            walk = walk._left
        return walk

    def _subtree_last(self, node: _Node) -> _Node:
        """Return the rightmost node of the subtree at node."""
        walk = node
        while walk._right is not None:
            walk = walk._right
        return walk

    def first(self) -> Optional[V]:
        """Return the value stored under the smallest key, or None if empty."""
        if self._root is None:
            return None
        return self._subtree_first(self._root)._value

    def last(self) -> Optional[V]:
        """Return the value stored under the largest key, or None if empty."""
        if self._root is None:
            return None
        return self._subtree_last(self._root)._value

    def _successor_node(self, node: Optional[_Node], key) -> Optional[_Node]:
        if node is None:
            return None
        if key < node._key:
            # node bounds key from above unless something tighter sits on the left
            found = self._successor_node(node._left, key)
            return node if found is None else found
        if node._key < key:
            return self._successor_node(node._right, key)
        if node._right is None:
            return None
        return self._subtree_first(node._right)

    def _predecessor_node(self, node: Optional[_Node], key) -> Optional[_Node]:
        if node is None:
            return None
        if node._key < key:
            found = self._predecessor_node(node._right, key)
            return node if found is None else found
        if key < node._key:
            return self._predecessor_node(node._left, key)
        if node._left is None:
            return None
        return self._subtree_last(node._left)

    def successor(self, key: K) -> Optional[V]:
        """Return the value under the next larger key, whether or not key is stored."""
        node = self._successor_node(self._root, key)
        return None if node is None else node._value

    def predecessor(self, key: K) -> Optional[V]:
        """Return the value under the next smaller key, whether or not key is stored."""
        node = self._predecessor_node(self._root, key)
        return None if node is None else node._value

    def neighbors(self, key: K) -> Tuple[Optional[V], Optional[V]]:
        """Return (predecessor, successor) values bounding key."""
        if self._root is None:
            return None, None
        return self.predecessor(key), self.successor(key)

    # ------------------ Deletion ------------------
    def delete(self, key: K) -> None:
        """Remove one entry stored under key; absent keys are ignored."""
        if self._tree_search(self._root, key) is None:
            logger.debug("delete: key %r not present", key)
            return
        self._root = self._subtree_delete(self._root, key)
        self._size -= 1

    def _settle(self, node: _Node) -> _Node:
        """Restore bookkeeping on a node whose children were just replaced."""
        if self._rebalance_on_delete:
            return self._rebalance(node)
        self._update_height(node)
        return node

    def _subtree_delete(self, node: Optional[_Node], key) -> Optional[_Node]:
        """Remove key from the subtree at node and return the replacement root."""
        if node is None:
            return None
        if key < node._key:
            node._left = self._subtree_delete(node._left, key)
            return self._settle(node)
        if node._key < key:
            node._right = self._subtree_delete(node._right, key)
            return self._settle(node)

        left, right = node._left, node._right
        node._left = node._right = None
        if left is None and right is None:
            return None
        if right is None:
            return self._settle(left)
        if left is None:
            return self._settle(right)

        successor, remainder = self._extract_min(right)
        logger.debug("delete: %r replaced by in-order successor %r", key, successor._key)
        successor._left = left
        successor._right = remainder
        return self._settle(successor)

    def _extract_min(self, node: _Node) -> Tuple[_Node, Optional[_Node]]:
        """
        Detach the minimum node of the subtree at node.

        Returns (min_node, remainder). The detached node comes back with no
        children; its former right child takes its place in the remainder.
        """
        if node._left is None:
            remainder = node._right
            node._right = None
            return node, remainder
        min_node, node._left = self._extract_min(node._left)
        return min_node, self._settle(node)
