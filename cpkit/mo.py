"""Mo's algorithm: answer offline range queries by moving a sliding window."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

Query = tuple[int, int]


class Mo:
    """Collects inclusive range queries over ``n`` positions and answers them.

    The caller keeps the window state; the solver calls back to add or
    remove positions and to read off the answer for each query.
    """

    def __init__(self, n: int, queries: Iterable[Query] = ()) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._magic = n.bit_length() // 2
        self._queries: list[Query] = [(int(l), int(r)) for l, r in queries]

    def __len__(self) -> int:
        return len(self._queries)

    @property
    def queries(self) -> tuple[Query, ...]:
        """The queries pushed so far, in order."""
        return tuple(self._queries)

    def _block(self, x: int) -> int:
        return x >> self._magic

    def push_query(self, left: int, right: int) -> int:
        """Add the query ``[left, right]`` and return its index."""
        self._queries.append((left, right))
        return len(self._queries) - 1

    def solve(
        self,
        answer: Callable[[int, int, int], Any],
        push_left: Callable[[int], None],
        pop_left: Callable[[int], None],
        push_right: Optional[Callable[[int], None]] = None,
        pop_right: Optional[Callable[[int], None]] = None,
    ) -> list[Any]:
        """Answer every query with add and remove callbacks.

        ``answer(l, r, index)`` is called once the window is ``[l, r]``.
        The right-side callbacks default to the left-side ones.
        """
        push_right = push_left if push_right is None else push_right
        pop_right = pop_left if pop_right is None else pop_right

        def key(i: int) -> tuple[int, int]:
            ql, qr = self._queries[i]
            block = self._block(ql)
            return block, (qr if block else -qr)

        order = sorted(range(len(self._queries)), key=key)
        result: list[Any] = [None] * len(self._queries)
        l, r = 0, -1
        for qi in order:
            ql, qr = self._queries[qi]
            while l > ql:
                l -= 1
                push_left(l)
            while r < qr:
                r += 1
                push_right(r)
            while l < ql:
                pop_left(l)
                l += 1
            while r > qr:
                pop_right(r)
                r -= 1
            result[qi] = answer(l, r, qi)
        return result

    def solve_rollback(
        self,
        answer: Callable[[int, int, int], Any],
        save: Callable[[], None],
        restore: Callable[[], None],
        push_left: Callable[[int], None],
        push_right: Optional[Callable[[int], None]] = None,
    ) -> list[Any]:
        """Answer every query using only additions plus save and restore.

        ``save`` pushes a snapshot of the state and ``restore`` pops the most
        recent one back; no removal callback is needed.
        """
        push_right = push_left if push_right is None else push_right

        def key(i: int) -> tuple[int, int]:
            ql, qr = self._queries[i]
            return self._block(ql), qr

        order = sorted(range(len(self._queries)), key=key)
        result: list[Any] = [None] * len(self._queries)
        last_block = -1
        l, r = 0, -1
        save()  # snapshot of the empty state
        for qi in order:
            ql, qr = self._queries[qi]
            block = self._block(ql)
            if block != last_block:
                restore()
                save()
                l = (block + 1) << self._magic
                r = l - 1
                last_block = block
            if block == self._block(qr):
                # Short query inside one block: compute it from scratch.
                save()
                for j in range(ql, qr + 1):
                    push_right(j)
                result[qi] = answer(l, r, qi)
                restore()
                continue
            while r < qr:
                r += 1
                push_right(r)
            save()
            saved_l = l
            while l > ql:
                l -= 1
                push_left(l)
            result[qi] = answer(l, r, qi)
            restore()
            l = saved_l
        return result