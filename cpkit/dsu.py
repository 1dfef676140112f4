"""Disjoint set union structures: plain, with per-set data, and with rollback."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Optional


class DisjointSet:
    """Union by size with path compression.

    ``union_sets`` returns the root of the merged set, or None when both
    elements already share a set.
    """

    def __init__(self, size: int) -> None:
        # A negative entry marks a root and holds minus the set's size.
        self._parent = [-1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find_set(self, x: int) -> int:
        root = x
        while self._parent[root] >= 0:
            root = self._parent[root]
        while self._parent[x] >= 0:
            self._parent[x], x = root, self._parent[x]
        return root

    def size_of_set(self, x: int) -> int:
        return -self._parent[self.find_set(x)]

    def union_sets(self, u: int, v: int) -> Optional[int]:
        gu, gv = self.find_set(u), self.find_set(v)
        if gu == gv:
            return None
        if self._parent[gu] < self._parent[gv]:
            gu, gv = gv, gu
        self._parent[gv] += self._parent[gu]
        self._parent[gu] = gv
        return gv


class DataDisjointSet(DisjointSet):
    """Disjoint sets carrying a value per set, merged with ``op`` on union.

    Indexing with an element reads or writes the value of its set.
    """

    def __init__(self, values: Iterable[Any], op: Callable[[Any, Any], Any] = operator.add) -> None:
        self._data = list(values)
        super().__init__(len(self._data))
        self._op = op

    @classmethod
    def filled(
        cls, size: int, value: Any = 0, op: Callable[[Any, Any], Any] = operator.add
    ) -> "DataDisjointSet":
        return cls([value] * size, op)

    def __getitem__(self, x: int) -> Any:
        return self._data[self.find_set(x)]

    def __setitem__(self, x: int, value: Any) -> None:
        self._data[self.find_set(x)] = value

    def union_sets(self, u: int, v: int) -> Optional[int]:
        gu, gv = self.find_set(u), self.find_set(v)
        root = super().union_sets(gu, gv)
        if root is not None:
            other = gu if root == gv else gv
            self._data[root] = self._op(self._data[root], self._data[other])
        return root


class RollbackDisjointSet:
    """Union by size without path compression, so unions can be undone."""

    def __init__(self, size: int) -> None:
        self._parent = [-1] * size
        self._history: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def version(self) -> int:
        """Number of unions currently applied."""
        return len(self._history)

    def find_set(self, x: int) -> int:
        while self._parent[x] >= 0:
            x = self._parent[x]
        return x

    def size_of_set(self, x: int) -> int:
        return -self._parent[self.find_set(x)]

    def union_sets(self, u: int, v: int) -> Optional[int]:
        gu, gv = self.find_set(u), self.find_set(v)
        if gu == gv:
            return None
        if self._parent[gu] < self._parent[gv]:
            gu, gv = gv, gu
        self._history.append((gu, self._parent[gu]))
        self._parent[gv] += self._parent[gu]
        self._parent[gu] = gv
        return gv

    def rollback(self, version: Optional[int] = None) -> None:
        """Undo unions until ``version`` remain; by default undo the last one."""
        if version is None:
            if not self._history:
                return
            version = len(self._history) - 1
        while len(self._history) > version:
            gu, size_gu = self._history.pop()
            gv = self._parent[gu]
            self._parent[gv] -= size_gu
            self._parent[gu] = size_gu