"""Segment trees: point-update, lazy range-update and dynamically allocated."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Optional, Sequence

Combine = Callable[[Any, Any], Any]
Predicate = Callable[[Any], bool]

_NO_LAZY = object()


def _keep_value(value: Any, _length: int) -> Any:
    """Default length adjustment: the update value is used as is."""
    return value


def _split(lo: int, hi: int) -> int:
    return lo + (hi - lo) // 2


def _right_child(p: int, lo: int, hi: int) -> int:
    # Children of a node covering [lo, hi] are laid out in 2n - 1 slots.
    return p + ((hi - lo) // 2 + 1) * 2


class SegmentTree:
    """Segment tree with range queries and point updates."""

    def __init__(
        self,
        values: Iterable[Any],
        combine: Combine = operator.add,
        update: Combine = operator.add,
    ) -> None:
        values = list(values)
        if not values:
            raise ValueError("a segment tree needs at least one element")
        self._size = len(values)
        self._tree: list[Any] = [None] * (2 * self._size)
        self._combine = combine
        self._update = update
        self._build(values, 0, 0, self._size - 1)

    @classmethod
    def filled(
        cls,
        size: int,
        value: Any = 0,
        combine: Combine = operator.add,
        update: Combine = operator.add,
    ) -> "SegmentTree":
        """Build a tree of ``size`` copies of ``value``."""
        return cls([value] * size, combine, update)

    def __len__(self) -> int:
        return self._size

    def _build(self, values: Sequence[Any], p: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[p] = values[lo]
            return
        mi = _split(lo, hi)
        ul, ur = p + 1, _right_child(p, lo, hi)
        self._build(values, ul, lo, mi)
        self._build(values, ur, mi + 1, hi)
        self._tree[p] = self._combine(self._tree[ul], self._tree[ur])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] out of bounds")

    def modify(self, index: int, value: Any) -> None:
        """Apply ``update(element, value)`` to the element at ``index``."""
        self._check_index(index)
        path = []
        u, lo, hi = 0, 0, self._size - 1
        while lo != hi:
            path.append((u, lo, hi))
            mi = _split(lo, hi)
            if index <= mi:
                u, hi = u + 1, mi
            else:
                u, lo = _right_child(u, lo, hi), mi + 1
        self._tree[u] = self._update(self._tree[u], value)
        for u, lo, hi in reversed(path):
            self._tree[u] = self._combine(
                self._tree[u + 1], self._tree[_right_child(u, lo, hi)]
            )

    def query(self, left: int, right: int) -> Any:
        """Combine the elements of the inclusive range ``[left, right]``."""
        self._check_range(left, right)
        return self._query(left, right, 0, 0, self._size - 1)

    def _query(self, left: int, right: int, u: int, lo: int, hi: int) -> Any:
        if left == lo and right == hi:
            return self._tree[u]
        mi = _split(lo, hi)
        ul, ur = u + 1, _right_child(u, lo, hi)
        if right <= mi:
            return self._query(left, right, ul, lo, mi)
        if left > mi:
            return self._query(left, right, ur, mi + 1, hi)
        return self._combine(
            self._query(left, mi, ul, lo, mi),
            self._query(mi + 1, right, ur, mi + 1, hi),
        )

    def _find(
        self, left: int, u: int, lo: int, hi: int, predicate: Predicate
    ) -> Optional[int]:
        if not predicate(self._tree[u]):
            return None
        if lo == hi:
            return lo
        mi = _split(lo, hi)
        if left <= mi:
            found = self._find(left, u + 1, lo, mi, predicate)
            if found is not None:
                return found
        return self._find(left, _right_child(u, lo, hi), mi + 1, hi, predicate)

    def find(self, left: int, right: int, predicate: Predicate) -> Optional[int]:
        """First index from ``left`` whose node satisfies ``predicate``, or None."""
        self._check_range(left, right)
        result = self._find(left, 0, 0, self._size - 1, predicate)
        return result if result is not None and result <= right else None

    def find_value(
        self,
        left: int,
        right: int,
        value: Any,
        predicate: Callable[[Any, Any], bool] = operator.eq,
    ) -> Optional[int]:
        """Like :meth:`find` with the test ``predicate(node, value)``."""
        return self.find(left, right, lambda node: predicate(node, value))


class _LazyRangeOps:
    """Range update and query logic shared by the lazy trees."""

    _tree: list
    _lazy: list
    _size: int

    def _configure(
        self,
        combine: Combine,
        update: Combine,
        combine_update: Optional[Combine],
        update_len: Callable[[Any, int], Any],
    ) -> None:
        self._combine = combine
        self._update = update
        self._combine_update = update if combine_update is None else combine_update
        self._update_len = update_len

    def __len__(self) -> int:
        return self._size

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] out of bounds")

    def _build(self, values: Sequence[Any], p: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[p] = values[lo]
            return
        mi = _split(lo, hi)
        ul, ur = self._child_indices(p, lo, hi)
        self._build(values, ul, lo, mi)
        self._build(values, ur, mi + 1, hi)
        self._tree[p] = self._combine(self._tree[ul], self._tree[ur])

    def _apply(self, u: int, value: Any, lo: int, hi: int) -> None:
        self._tree[u] = self._update(self._tree[u], self._update_len(value, hi - lo + 1))
        pending = self._lazy[u]
        self._lazy[u] = (
            value if pending is _NO_LAZY else self._combine_update(pending, value)
        )

    def _push(self, u: int, lo: int, hi: int) -> None:
        pending = self._lazy[u]
        if pending is _NO_LAZY:
            return
        mi = _split(lo, hi)
        ul, ur = self._child_indices(u, lo, hi)
        self._apply(ul, pending, lo, mi)
        self._apply(ur, pending, mi + 1, hi)
        self._lazy[u] = _NO_LAZY

    def _modify(self, left: int, right: int, value: Any, u: int, lo: int, hi: int) -> None:
        if left <= lo and hi <= right:
            self._apply(u, value, lo, hi)
            return
        self._push(u, lo, hi)
        mi = _split(lo, hi)
        ul, ur = self._child_indices(u, lo, hi)
        if left <= mi:
            self._modify(left, right, value, ul, lo, mi)
        if mi < right:
            self._modify(left, right, value, ur, mi + 1, hi)
        self._tree[u] = self._combine(self._tree[ul], self._tree[ur])

    def _query(self, left: int, right: int, u: int, lo: int, hi: int) -> Any:
        if left <= lo and hi <= right:
            return self._tree[u]
        self._push(u, lo, hi)
        mi = _split(lo, hi)
        ul, ur = self._child_indices(u, lo, hi)
        if right <= mi:
            return self._query(left, right, ul, lo, mi)
        if mi < left:
            return self._query(left, right, ur, mi + 1, hi)
        return self._combine(
            self._query(left, right, ul, lo, mi),
            self._query(left, right, ur, mi + 1, hi),
        )


class LazySegmentTree(_LazyRangeOps):
    """Segment tree with range queries and lazily propagated range updates.

    ``update_len(value, length)`` turns an update value into the value applied
    to a node covering ``length`` elements; ``combine_update`` merges two
    pending updates and defaults to ``update``.
    """

    def __init__(
        self,
        values: Iterable[Any],
        combine: Combine = operator.add,
        update: Combine = operator.add,
        combine_update: Optional[Combine] = None,
        update_len: Callable[[Any, int], Any] = _keep_value,
    ) -> None:
        values = list(values)
        if not values:
            raise ValueError("a segment tree needs at least one element")
        self._size = len(values)
        self._tree = [None] * (2 * self._size)
        self._lazy = [_NO_LAZY] * (2 * self._size)
        self._configure(combine, update, combine_update, update_len)
        self._build(values, 0, 0, self._size - 1)

    @classmethod
    def filled(
        cls,
        size: int,
        value: Any = 0,
        combine: Combine = operator.add,
        update: Combine = operator.add,
        combine_update: Optional[Combine] = None,
        update_len: Callable[[Any, int], Any] = _keep_value,
    ) -> "LazySegmentTree":
        """Build a tree of ``size`` copies of ``value``."""
        return cls([value] * size, combine, update, combine_update, update_len)

    @staticmethod
    def _child_indices(u: int, lo: int, hi: int) -> tuple[int, int]:
        return u + 1, _right_child(u, lo, hi)

    def modify(self, left: int, right: int, value: Any) -> None:
        """Apply ``value`` to every element of ``[left, right]``."""
        self._check_range(left, right)
        self._modify(left, right, value, 0, 0, self._size - 1)

    def query(self, left: int, right: int) -> Any:
        """Combine the elements of the inclusive range ``[left, right]``."""
        self._check_range(left, right)
        return self._query(left, right, 0, 0, self._size - 1)

    def _find(
        self, left: int, u: int, lo: int, hi: int, predicate: Predicate
    ) -> Optional[int]:
        if not predicate(self._tree[u]):
            return None
        if lo == hi:
            return lo
        self._push(u, lo, hi)
        mi = _split(lo, hi)
        if left <= mi:
            found = self._find(left, u + 1, lo, mi, predicate)
            if found is not None:
                return found
        return self._find(left, _right_child(u, lo, hi), mi + 1, hi, predicate)

    def find(self, left: int, right: int, predicate: Predicate) -> Optional[int]:
        """First index from ``left`` whose node satisfies ``predicate``, or None."""
        self._check_range(left, right)
        result = self._find(left, 0, 0, self._size - 1, predicate)
        return result if result is not None and result <= right else None

    def find_value(
        self,
        left: int,
        right: int,
        value: Any,
        predicate: Callable[[Any, Any], bool] = operator.eq,
    ) -> Optional[int]:
        """Like :meth:`find` with the test ``predicate(node, value)``."""
        return self.find(left, right, lambda node: predicate(node, value))


class DynamicSegmentTree(_LazyRangeOps):
    """Lazy segment tree whose nodes are created only when first visited.

    ``initializer(lo, hi)`` gives the starting value of a node covering
    ``[lo, hi]``.
    """

    def __init__(
        self,
        size: int,
        initializer: Callable[[int, int], Any],
        combine: Combine = operator.add,
        update: Combine = operator.add,
        combine_update: Optional[Combine] = None,
        update_len: Callable[[Any, int], Any] = _keep_value,
    ) -> None:
        if size < 1:
            raise ValueError("a segment tree needs at least one element")
        self._size = size
        self._initializer = initializer
        self._tree = []
        self._lazy = []
        self._left: list[int] = []
        self._right: list[int] = []
        self._configure(combine, update, combine_update, update_len)
        self._root = self._create_node(0, size - 1)

    @classmethod
    def filled(
        cls,
        size: int,
        value: Any = 0,
        combine: Combine = operator.add,
        update: Combine = operator.add,
        combine_update: Optional[Combine] = None,
        update_len: Callable[[Any, int], Any] = _keep_value,
    ) -> "DynamicSegmentTree":
        """A tree in which every new node starts as ``value``."""
        return cls(size, lambda lo, hi: value, combine, update, combine_update, update_len)

    @classmethod
    def from_values(
        cls,
        values: Iterable[Any],
        combine: Combine = operator.add,
        update: Combine = operator.add,
        combine_update: Optional[Combine] = None,
        update_len: Callable[[Any, int], Any] = _keep_value,
    ) -> "DynamicSegmentTree":
        """Build a fully populated tree over ``values``."""
        values = list(values)
        tree = cls(
            len(values),
            lambda lo, hi: values[lo],
            combine,
            update,
            combine_update,
            update_len,
        )
        tree._build(values, tree._root, 0, len(values) - 1)
        return tree

    def _create_node(self, lo: int, hi: int) -> int:
        self._tree.append(self._initializer(lo, hi))
        self._lazy.append(_NO_LAZY)
        self._left.append(0)
        self._right.append(0)
        return len(self._tree) - 1

    def _child_indices(self, u: int, lo: int, hi: int) -> tuple[int, int]:
        mi = _split(lo, hi)
        if not self._left[u]:
            self._left[u] = self._create_node(lo, mi)
        if not self._right[u]:
            self._right[u] = self._create_node(mi + 1, hi)
        return self._left[u], self._right[u]

    def modify(self, left: int, right: int, value: Any) -> None:
        """Apply ``value`` to every element of ``[left, right]``."""
        self._check_range(left, right)
        self._modify(left, right, value, self._root, 0, self._size - 1)

    def query(self, left: int, right: int) -> Any:
        """Combine the elements of the inclusive range ``[left, right]``."""
        self._check_range(left, right)
        return self._query(left, right, self._root, 0, self._size - 1)