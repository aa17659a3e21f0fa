"""Disjoint set (union-find) over hashable keys."""

from typing import Dict, Generic, Hashable, TypeVar

from .errors import UnknownKeyError

K = TypeVar("K", bound=Hashable)


class DisjointSet(Generic[K]):
    """
    Incremental connectivity structure.

    Each key maps to its parent key; a key that maps to itself is the
    representative (top) of its group. Union is directional: the first
    group is grafted under the second group's top, without rank or size
    balancing.
    """

    def __init__(self):
        self._parent: Dict[K, K] = {}

    def __contains__(self, key) -> bool:
        return key in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def add(self, key: K) -> None:
        """Register ``key`` as a singleton group (re-adding resets it)."""
        self._parent[key] = key

    def find(self, key: K) -> K:
        """
        Return the representative of ``key``'s group.

        Every key visited on the way up is pointed straight at the top, so
        later finds are shorter. Group membership is never changed.

        Raises:
            UnknownKeyError: If ``key`` was never added
        """
        top = self.find_uncompressed(key)
        current = key
        while current != top:
            parent = self._parent[current]
            self._parent[current] = top
            current = parent
        return top

    def find_uncompressed(self, key: K) -> K:
        """Same as :meth:`find` but leaves the parent pointers untouched."""
        try:
            current = key
            parent = self._parent[current]
            while parent != current:
                current = parent
                parent = self._parent[current]
        except KeyError:
            raise UnknownKeyError(key) from None
        return current

    def union(self, a: K, b: K) -> bool:
        """
        Merge ``a``'s group into ``b``'s group.

        Returns:
            True if the groups were different before the call
        """
        a_top = self.find(a)
        b_top = self.find(b)
        if a_top == b_top:
            return False
        self._parent[a_top] = b_top
        return True

    def same_group(self, a: K, b: K) -> bool:
        return self.find(a) == self.find(b)

    def group_count(self) -> int:
        """Number of distinct groups."""
        return sum(1 for key, parent in self._parent.items() if key == parent)
