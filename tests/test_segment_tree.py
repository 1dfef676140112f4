import math
import operator
from dataclasses import dataclass

import pytest

from cpkit.modint import modint_factory
from cpkit.segment_tree import DynamicSegmentTree, LazySegmentTree, SegmentTree


def assign(_old, new):
    return new


def keep(old, _new):
    return old


def test_range_sum_point_add():
    st = SegmentTree([3, 2, 8, 5])
    assert st.query(0, 1) == 5
    assert st.query(1, 3) == 15
    assert st.query(2, 3) == 13
    st.modify(1, 10)
    assert st.query(1, 3) == 25
    assert st.query(0, 0) == 3
    assert st.query(0, 3) == 28


def test_range_max_point_add():
    st = SegmentTree([3, 2, 8, 5], max)
    assert st.query(0, 1) == 3
    assert st.query(1, 3) == 8
    assert st.query(2, 3) == 8
    st.modify(1, 10)
    assert st.query(1, 3) == 12
    assert st.query(0, 0) == 3
    assert st.query(0, 3) == 12


def test_range_min_point_min():
    st = SegmentTree([3, 2, 8, 5], min, min)
    assert st.query(0, 1) == 2
    st.modify(1, 10)
    assert st.query(1, 1) == 2
    st.modify(2, 4)
    assert st.query(2, 3) == 4


def test_range_min_point_assign():
    st = SegmentTree([3, 2, 8, 5], min, assign)
    assert st.query(0, 1) == 2
    st.modify(1, 10)
    assert st.query(1, 1) == 10
    st.modify(2, 4)
    assert st.query(2, 3) == 4


def test_range_min_with_projection():
    v = [3, 2, 8, 5]
    st = SegmentTree(range(len(v)), lambda a, b: min(a, b, key=v.__getitem__), assign)
    assert st.query(0, 1) == 1
    v[0] = 0
    st.modify(0, 0)
    assert st.query(0, 1) == 0
    v[2] = 4
    st.modify(2, 2)
    assert st.query(2, 3) == 2
    assert st.query(1, 3) == 1


def test_order_preserving_rightmost():
    st = SegmentTree([3, 2, 8, 5], assign, assign)
    assert st.query(0, 1) == 2
    st.modify(1, 10)
    assert st.query(1, 1) == 10
    st.modify(2, 4)
    assert st.query(2, 3) == 5
    assert st.query(1, 2) == 4


def test_order_preserving_leftmost():
    st = SegmentTree([3, 2, 8, 5], keep, assign)
    assert st.query(0, 1) == 3
    st.modify(1, 10)
    assert st.query(1, 1) == 10
    st.modify(2, 4)
    assert st.query(2, 3) == 4
    assert st.query(1, 2) == 10


def test_find_and_find_value():
    st = SegmentTree([3, 2, 8, 5], max)
    assert st.find(0, 3, lambda x: x >= 5) == 2
    assert st.find(0, 1, lambda x: x >= 5) is None
    assert st.find(3, 3, lambda x: x >= 5) == 3
    assert st.find_value(0, 3, 8) == 2
    assert st.find_value(0, 3, 100) is None


def test_filled_and_len():
    st = SegmentTree.filled(6, 1)
    assert len(st) == 6
    assert st.query(0, 5) == 6


def test_invalid_ranges():
    st = SegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        st.query(2, 1)
    with pytest.raises(IndexError):
        st.query(0, 3)
    with pytest.raises(IndexError):
        st.modify(3, 1)
    with pytest.raises(ValueError):
        SegmentTree([])


def test_lazy_range_max_range_add():
    st = LazySegmentTree([3, 2, 8, 5], max)
    assert st.query(0, 1) == 3
    assert st.query(1, 3) == 8
    assert st.query(2, 3) == 8
    st.modify(1, 2, 10)
    assert st.query(1, 3) == 18
    assert st.query(0, 0) == 3
    assert st.query(0, 1) == 12


def test_lazy_range_max_range_assign():
    st = LazySegmentTree([3, 2, 8, 5], max, assign)
    assert st.query(0, 1) == 3
    assert st.query(1, 3) == 8
    assert st.query(2, 3) == 8
    st.modify(1, 2, 10)
    assert st.query(1, 3) == 10
    assert st.query(0, 0) == 3
    assert st.query(0, 1) == 10


def test_lazy_range_gcd_range_assign():
    st = LazySegmentTree([5, 2, 8, 6], math.gcd, assign)
    assert st.query(0, 1) == 1
    assert st.query(1, 3) == 2
    assert st.query(2, 3) == 2
    st.modify(1, 2, 10)
    assert st.query(1, 3) == 2
    assert st.query(0, 0) == 5
    assert st.query(0, 1) == 5


def test_lazy_range_gcd_range_product():
    st = LazySegmentTree([5, 2, 8, 6], math.gcd, operator.mul)
    assert st.query(0, 1) == 1
    st.modify(1, 2, 5)
    assert st.query(1, 3) == 2
    assert st.query(0, 0) == 5
    assert st.query(0, 1) == 5
    assert st.query(1, 2) == 10


def test_lazy_range_product_range_product():
    mint = modint_factory(13)
    v = [mint(x) for x in (1, 3, 4, 7, 2)]
    st = LazySegmentTree(v, operator.mul, operator.mul, operator.mul, lambda x, n: x**n)
    assert st.query(0, 2) == 12
    assert st.query(1, 3) == 6
    st.modify(0, 2, 2)
    assert st.query(0, 1) == 12
    assert st.query(1, 3) == 11
    st.modify(1, 3, 5)
    assert st.query(0, 0) == 2
    assert st.query(1, 3) == 10


@dataclass(frozen=True)
class MxssNode:
    l_ans: int
    r_ans: int
    ans: int
    sum: int

    @classmethod
    def single(cls, v):
        return cls(v, v, v, v)

    def __add__(self, rhs):
        return MxssNode(
            max(self.l_ans, self.sum + rhs.l_ans),
            max(self.r_ans + rhs.sum, rhs.r_ans),
            max(self.ans, rhs.ans, self.r_ans + rhs.l_ans),
            self.sum + rhs.sum,
        )


def mxss_len(x, length):
    best = max(x, x * length)
    return MxssNode(best, best, best, x * length)


def test_lazy_max_subarray_sum_range_assign():
    v = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
    st = LazySegmentTree(
        [MxssNode.single(x) for x in v], operator.add, assign, assign, mxss_len
    )
    assert st.query(1, 2).ans == 1
    assert st.query(0, 2).sum == -4
    assert st.query(0, 3).l_ans == 0
    assert st.query(1, 3).r_ans == 4
    assert st.query(7, 7).ans == -5
    assert st.query(3, 6).ans == 6
    assert st.query(0, 8).ans == 6
    st.modify(6, 7, -1)
    assert st.query(0, 8).ans == 7
    assert st.query(6, 7).ans == -1
    assert st.query(6, 8).sum == 2
    assert st.query(7, 8).r_ans == 4
    st.modify(1, 2, 0)
    assert st.query(0, 8).ans == 7
    assert st.query(0, 2).l_ans == -2
    assert st.query(1, 2).r_ans == 0


def test_dynamic_from_values_matches_lazy_cases():
    st = DynamicSegmentTree.from_values([3, 2, 8, 5], max)
    assert st.query(0, 1) == 3
    assert st.query(1, 3) == 8
    st.modify(1, 2, 10)
    assert st.query(1, 3) == 18
    assert st.query(0, 0) == 3
    assert st.query(0, 1) == 12


def test_dynamic_large_sum_range_add():
    st = DynamicSegmentTree.filled(10**9, 0, update_len=operator.mul)
    st.modify(0, 9, 5)
    st.modify(10, 19, 1)
    assert st.query(0, 99) == 60
    assert st.query(5, 14) == 30
    assert st.query(10**9 - 10, 10**9 - 1) == 0
    assert len(st) == 10**9


def test_dynamic_matches_lazy_tree():
    values = [4, -1, 7, 0, 3, 9, -2, 5]
    lazy = LazySegmentTree(values, update_len=operator.mul)
    dyn = DynamicSegmentTree.from_values(values, update_len=operator.mul)
    for left, right, add in [(0, 3, 2), (2, 7, -1), (5, 5, 10)]:
        lazy.modify(left, right, add)
        dyn.modify(left, right, add)
    for left in range(len(values)):
        for right in range(left, len(values)):
            assert dyn.query(left, right) == lazy.query(left, right)


def test_dynamic_invalid():
    with pytest.raises(ValueError):
        DynamicSegmentTree.filled(0)
    st = DynamicSegmentTree.filled(4)
    with pytest.raises(IndexError):
        st.query(0, 4)