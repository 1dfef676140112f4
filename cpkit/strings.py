"""String algorithms: prefix and Z functions, KMP, tries and Aho-Corasick."""

from __future__ import annotations

import operator
from collections import deque
from typing import Any, Callable, Iterable, Optional, Sequence

_SEPARATOR = object()


def prefix_function(s: Sequence[Any]) -> list[int]:
    """For each position, the length of the longest proper border of ``s[:i + 1]``."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def z_function(s: Sequence[Any]) -> list[int]:
    """For each position ``i > 0``, the length of the longest common prefix of ``s`` and ``s[i:]``."""
    n = len(s)
    z = [0] * n
    l = r = 0
    for i in range(1, n):
        if i < r:
            z[i] = min(r - i, z[i - l])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > r:
            l, r = i, i + z[i]
    return z


def kmp(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Start positions of every (possibly overlapping) occurrence of ``pattern`` in ``text``."""
    combined = [*pattern, _SEPARATOR, *text]
    pi = prefix_function(combined)
    m = len(pattern)
    return [i - 2 * m for i in range(m + 1, len(pi)) if pi[i] == m]


class Charset:
    """An ordered alphabet mapping characters to dense indices."""

    __slots__ = ("_alphabet", "_index")

    def __init__(self, alphabet: str) -> None:
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet characters must be distinct")
        self._alphabet = alphabet
        self._index = {c: i for i, c in enumerate(alphabet)}

    @property
    def size(self) -> int:
        return len(self._alphabet)

    def __len__(self) -> int:
        return len(self._alphabet)

    def __repr__(self) -> str:
        return f"Charset({self._alphabet!r})"

    def to_index(self, c: str) -> int:
        try:
            return self._index[c]
        except KeyError:
            raise ValueError(f"character {c!r} is not in the charset") from None

    def to_char(self, i: int) -> str:
        if not 0 <= i < len(self._alphabet):
            raise IndexError(f"index {i} out of range")
        return self._alphabet[i]


_LOWER_LETTERS = "abcdefghijklmnopqrstuvwxyz"
_UPPER_LETTERS = _LOWER_LETTERS.upper()
_DIGITS = "0123456789"

LOWER = Charset(_LOWER_LETTERS)
UPPER = Charset(_UPPER_LETTERS)
DIGIT = Charset(_DIGITS)
ALPHA = Charset(_UPPER_LETTERS + _LOWER_LETTERS)
ALNUM = Charset(_DIGITS + _UPPER_LETTERS + _LOWER_LETTERS)
ASCII = Charset("".join(chr(c) for c in range(32, 127)))


class _TrieNodes:
    """Node storage shared by the tries; node 0 is the root and never a child."""

    def __init__(self, charset: Charset, default_factory: Callable[[], Any]) -> None:
        self._charset = charset
        self._default = default_factory
        self._children: list[list[int]] = []
        self._data: list[Any] = []
        self._root = self._create_node()

    def _create_node(self) -> int:
        self._children.append([0] * self._charset.size)
        self._data.append(self._default())
        return len(self._children) - 1

    def _descend(self, key: str) -> list[int]:
        """Nodes along ``key`` from the root, creating missing ones."""
        u = self._root
        path = [u]
        for c in key:
            v = self._charset.to_index(c)
            if not self._children[u][v]:
                self._children[u][v] = self._create_node()
            u = self._children[u][v]
            path.append(u)
        return path

    def _locate(self, key: str) -> Optional[int]:
        u = self._root
        for c in key:
            u = self._children[u][self._charset.to_index(c)]
            if not u:
                return None
        return u


class Trie(_TrieNodes):
    """A trie holding a value per key, updated with ``op(old, value)``."""

    def __init__(
        self,
        op: Callable[[Any, Any], Any] = operator.add,
        default_factory: Callable[[], Any] = int,
        charset: Charset = LOWER,
    ) -> None:
        super().__init__(charset, default_factory)
        self._op = op

    def query(self, key: str) -> Any:
        """The value stored at ``key``, or a fresh default if the key has no node."""
        u = self.find(key)
        return self._default() if u is None else self._data[u]

    def modify(self, key: str, value: Any) -> None:
        u = self._descend(key)[-1]
        self._data[u] = self._op(self._data[u], value)

    def find(self, key: str) -> Optional[int]:
        """The node id of ``key``, or None when no node exists for it."""
        return self._locate(key)


class OrderedTrie(_TrieNodes):
    """A multiset of strings with rank and selection in lexicographic order."""

    def __init__(self, charset: Charset = LOWER) -> None:
        self._prefix_count: list[int] = []
        super().__init__(charset, int)

    def _create_node(self) -> int:
        self._prefix_count.append(0)
        return super()._create_node()

    def __len__(self) -> int:
        return self._prefix_count[self._root]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.count(key) > 0

    def _adjust(self, key: str, delta: int) -> None:
        path = self._descend(key)
        for u in path:
            self._prefix_count[u] += delta
        self._data[path[-1]] += delta

    def insert(self, key: str, count: int = 1) -> None:
        self._adjust(key, count)

    def erase(self, key: str, count: int = 1) -> None:
        """Remove ``count`` copies of ``key``; raise KeyError if fewer are present."""
        if self.count(key) < count:
            raise KeyError(key)
        self._adjust(key, -count)

    def count(self, key: str) -> int:
        u = self._locate(key)
        return 0 if u is None else self._data[u]

    def count_prefix(self, key: str) -> int:
        """Number of stored strings that start with ``key``."""
        u = self._locate(key)
        return 0 if u is None else self._prefix_count[u]

    def order_of_key(self, key: str) -> int:
        """Number of stored strings strictly smaller than ``key``."""
        u = self._root
        ans = 0
        for c in key:
            ans += self._data[u]
            v = self._charset.to_index(c)
            ans += sum(self._prefix_count[child] for child in self._children[u][:v] if child)
            if not self._children[u][v]:
                break
            u = self._children[u][v]
        return ans

    def find_by_order(self, k: int) -> str:
        """The ``k``-th smallest stored string, counting from zero."""
        if not 0 <= k < len(self):
            raise IndexError(f"order {k} out of range")
        u = self._root
        chars = []
        while k < self._prefix_count[u]:
            if k < self._data[u]:
                break
            k -= self._data[u]
            for i, child in enumerate(self._children[u]):
                if child:
                    if k < self._prefix_count[child]:
                        break
                    k -= self._prefix_count[child]
            chars.append(self._charset.to_char(i))
            u = self._children[u][i]
        return "".join(chars)


class AhoCorasick(_TrieNodes):
    """Counts occurrences of many patterns in a text in one pass."""

    def __init__(self, patterns: Iterable[str], charset: Charset = LOWER) -> None:
        super().__init__(charset, list)
        self._patterns = list(patterns)
        for i, pattern in enumerate(self._patterns):
            self._data[self._descend(pattern)[-1]].append(i)
        self._build()

    def __len__(self) -> int:
        return len(self._patterns)

    def _build(self) -> None:
        children, root = self._children, self._root
        size = self._charset.size
        self._fail = fail = [0] * len(children)
        in_degree = [0] * len(children)
        queue: deque[int] = deque()
        for child in children[root]:
            if child:
                fail[child] = root
                queue.append(child)
        while queue:
            u = queue.popleft()
            for i in range(size):
                child = children[u][i]
                if child:
                    fail[child] = children[fail[u]][i]
                    in_degree[fail[child]] += 1
                    queue.append(child)
                else:
                    children[u][i] = children[fail[u]][i]
        # Topological order of the failure links, deepest nodes first.
        queue.extend(u for u, d in enumerate(in_degree) if d == 0)
        self._topo_order: list[int] = []
        while queue:
            u = queue.popleft()
            self._topo_order.append(u)
            v = fail[u]
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)

    def count_matches(self, text: str) -> list[int]:
        """Occurrence count of each pattern in ``text``, in pattern order."""
        match_count = [0] * len(self._children)
        u = self._root
        for c in text:
            u = self._children[u][self._charset.to_index(c)]
            match_count[u] += 1
        result = [0] * len(self._patterns)
        for u in self._topo_order:
            for pattern_id in self._data[u]:
                result[pattern_id] += match_count[u]
            match_count[self._fail[u]] += match_count[u]
        return result

    def count_all_matches(self, text: str) -> int:
        """Number of patterns that occur at least once in ``text``."""
        return sum(1 for c in self.count_matches(text) if c > 0)