"""GCD of rectangular blocks of the table ``a[i] + b[j]``.

Input: ``n q``, the arrays ``a`` and ``b`` of length ``n``, then ``q`` queries
``h1 h2 w1 w2`` (one-based, inclusive). Each answer is the greatest common
divisor of ``a[i] + b[j]`` over rows ``h1..h2`` and columns ``w1..w2``.
"""

from __future__ import annotations

import math
import sys
from typing import Optional, Sequence

from cpkit.formatting import TokenReader
from cpkit.segment_tree import SegmentTree


def _difference_tree(values: Sequence[int]) -> SegmentTree:
    diffs = [abs(values[0])] + [abs(b - a) for a, b in zip(values, values[1:])]
    return SegmentTree(diffs, combine=math.gcd)


def solve(text: str) -> str:
    """Answer every query in ``text``; one answer per line."""
    reader = TokenReader(text)
    n, q = reader.read_tuple(int, int)
    a = reader.read_list(n)
    b = reader.read_list(n)
    rows, cols = _difference_tree(a), _difference_tree(b)
    answers = []
    for _ in range(q):
        x1, x2, y1, y2 = reader.read_index_list(4)
        ans = math.gcd(
            a[x1] + b[y1], a[x1] + b[y2], a[x2] + b[y1], a[x2] + b[y2]
        )
        if x1 < x2:
            ans = math.gcd(ans, rows.query(x1 + 1, x2))
        if y1 < y2:
            ans = math.gcd(ans, cols.query(y1 + 1, y2))
        answers.append(f"{ans}\n")
    return "".join(answers)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the problem from standard input and write the answers."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())