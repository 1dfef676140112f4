"""Suffix arrays with LCP arrays, LCP range queries and substring search."""

from __future__ import annotations

import bisect
from itertools import accumulate
from typing import Any, Callable, Iterator, Optional, Sequence


def _codes(s: Sequence[Any]) -> list[int]:
    if isinstance(s, str):
        return [ord(c) for c in s]
    codes = [int(x) for x in s]
    if any(c < 0 for c in codes):
        raise ValueError("symbols must be non-negative integers")
    return codes


def build_suffix_array(s: Sequence[Any]) -> tuple[list[int], list[int]]:
    """Return ``(sa, rank)``: suffix start positions in sorted order and their inverse.

    ``s`` is a string or a sequence of non-negative integers.
    """
    codes = _codes(s)
    n = len(codes)
    if n == 0:
        return [], []

    def count_sort(items: list[int], key: Callable[[int], int], buckets: int) -> list[int]:
        cnt = [0] * buckets
        for x in items:
            cnt[key(x)] += 1
        cnt = list(accumulate(cnt))
        out = [0] * n
        for x in reversed(items):
            k = key(x)
            cnt[k] -= 1
            out[cnt[k]] = x
        return out

    def update_rank(order: list[int], key: Callable[[int], Any]) -> tuple[list[int], int]:
        new_rank = [0] * n
        current = 0
        for prev, i in zip(order, order[1:]):
            if key(i) != key(prev):
                current += 1
            new_rank[i] = current
        return new_rank, current + 1

    sa = count_sort(list(range(n)), codes.__getitem__, max(codes) + 1)
    rank, classes = update_rank(sa, codes.__getitem__)
    w = 1
    while w < n:
        # Suffixes without a second half sort first, the rest keep their order.
        shifted = list(range(n - w, n)) + [i - w for i in sa if i >= w]
        sa = count_sort(shifted, rank.__getitem__, classes)
        old = rank
        rank, classes = update_rank(
            sa, lambda i, w=w: (old[i], old[i + w] if i + w < n else -1)
        )
        if classes >= n:
            break
        w *= 2
    return sa, rank


def build_lcp(s: Sequence[Any], sa: Sequence[int], rank: Sequence[int]) -> list[int]:
    """``lcp[k]`` is the common prefix length of suffixes ``sa[k - 1]`` and ``sa[k]``."""
    n = len(s)
    lcp = [0] * n
    h = 0
    for i in range(n):
        if rank[i] == 0:
            continue
        if h:
            h -= 1
        j = sa[rank[i] - 1]
        while i + h < n and j + h < n and s[i + h] == s[j + h]:
            h += 1
        lcp[rank[i]] = h
    return lcp


class SuffixArray:
    """Sorted suffixes of a sequence; indexing yields suffix start positions."""

    def __init__(
        self,
        s: Sequence[Any],
        sa: Optional[Sequence[int]] = None,
        rank: Optional[Sequence[int]] = None,
        lcp: Optional[Sequence[int]] = None,
    ) -> None:
        self._text = s if isinstance(s, str) else tuple(s)
        if sa is None:
            sa, rank = build_suffix_array(self._text)
        elif rank is None:
            inverse = [0] * len(sa)
            for k, i in enumerate(sa):
                inverse[i] = k
            rank = inverse
        self._sa = list(sa)
        self._rank = list(rank)
        self._lcp = list(build_lcp(self._text, self._sa, self._rank) if lcp is None else lcp)

    def __len__(self) -> int:
        return len(self._sa)

    def __getitem__(self, k: int) -> int:
        return self._sa[k]

    def __iter__(self) -> Iterator[int]:
        return iter(self._sa)

    @property
    def text(self) -> Sequence[Any]:
        return self._text

    @property
    def sa(self) -> list[int]:
        return self._sa

    @property
    def rank(self) -> list[int]:
        return self._rank

    @property
    def lcp(self) -> list[int]:
        return self._lcp

    def count_unique_substrings(self) -> int:
        n = len(self._text)
        return n * (n + 1) // 2 - sum(self._lcp)

    def longest_common_prefix(self) -> "LcpTable":
        """A table answering longest-common-prefix queries between suffixes."""
        return LcpTable(self)

    def _prepare(self, t: Sequence[Any]) -> tuple[Sequence[Any], Callable[[int], Any]]:
        if not isinstance(self._text, str):
            t = tuple(t)
        m = len(t)
        text = self._text
        return t, lambda i: text[i : i + m]

    def lower_bound(self, t: Sequence[Any]) -> int:
        """First position in the array whose suffix does not start below ``t``."""
        t, key = self._prepare(t)
        return bisect.bisect_left(self._sa, t, key=key)

    def upper_bound(self, t: Sequence[Any]) -> int:
        """First position in the array whose suffix prefix sorts above ``t``."""
        t, key = self._prepare(t)
        return bisect.bisect_right(self._sa, t, key=key)

    def equal_range(self, t: Sequence[Any]) -> tuple[int, int]:
        """Half-open range of array positions whose suffixes start with ``t``."""
        return self.lower_bound(t), self.upper_bound(t)

    def binary_search(self, t: Sequence[Any]) -> bool:
        """Whether ``t`` occurs as a substring."""
        lo, hi = self.equal_range(t)
        return lo < hi

    def count(self, t: Sequence[Any]) -> int:
        """Number of occurrences of ``t`` as a substring."""
        lo, hi = self.equal_range(t)
        return hi - lo


class LcpTable:
    """Longest common prefix of any two suffixes via a sparse table over the LCP array."""

    def __init__(self, suffix_array: SuffixArray) -> None:
        self._parent = suffix_array
        levels = [list(suffix_array.lcp)]
        n = len(levels[0])
        j = 1
        while (1 << j) <= n:
            prev = levels[-1]
            half = 1 << (j - 1)
            levels.append([min(prev[i], prev[i + half]) for i in range(n - (1 << j) + 1)])
            j += 1
        self._levels = levels

    def _range_min(self, left: int, right: int) -> int:
        k = (right - left + 1).bit_length() - 1
        level = self._levels[k]
        return min(level[left], level[right - (1 << k) + 1])

    def query(self, left: int, right: int) -> int:
        """Common prefix length of the suffixes starting at ``left`` and ``right``."""
        if left == right:
            return len(self._parent.text) - left
        rank = self._parent.rank
        rl, rr = sorted((rank[left], rank[right]))
        return self._range_min(rl + 1, rr)

    def substr_cmp(self, s_left: int, s_size: int, t_left: int, t_size: int) -> int:
        """Compare two substrings of the text: negative, zero or positive."""
        common = self.query(s_left, t_left)
        if common >= s_size or common >= t_size:
            return (s_size > t_size) - (s_size < t_size)
        rank = self._parent.rank
        return (rank[s_left] > rank[t_left]) - (rank[s_left] < rank[t_left])