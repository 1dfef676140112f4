import os

import pytest

from cpkit.suffix_array import LcpTable, SuffixArray, build_lcp, build_suffix_array

TEXTS = ["a", "aaaa", "banana", "mississippi", "abracadabra", "abcdefg", "zyxwzyxw"]


def _sorted_suffixes(s):
    return sorted(range(len(s)), key=lambda i: s[i:])


@pytest.mark.parametrize("s", TEXTS)
def test_suffix_array_sorts_suffixes(s):
    sa, rank = build_suffix_array(s)
    assert sa == _sorted_suffixes(s)
    assert all(rank[i] == k for k, i in enumerate(sa))


def test_empty_input():
    assert build_suffix_array("") == ([], [])
    assert SuffixArray("").count_unique_substrings() == 0


def test_integer_sequences():
    values = [3, 1, 2, 1, 2, 0]
    sa, rank = build_suffix_array(values)
    assert sa == _sorted_suffixes(values)
    with pytest.raises(ValueError):
        build_suffix_array([1, -1])


@pytest.mark.parametrize("s", TEXTS)
def test_lcp_of_adjacent_suffixes(s):
    sa, rank = build_suffix_array(s)
    lcp = build_lcp(s, sa, rank)
    assert lcp[0] == 0
    for k in range(1, len(s)):
        assert lcp[k] == len(os.path.commonprefix([s[sa[k - 1] :], s[sa[k] :]]))


@pytest.mark.parametrize("s", TEXTS)
def test_count_unique_substrings(s):
    distinct = {s[i:j] for i in range(len(s)) for j in range(i + 1, len(s) + 1)}
    assert SuffixArray(s).count_unique_substrings() == len(distinct)


def test_sequence_protocol_and_accessors():
    s = "banana"
    sa = SuffixArray(s)
    assert list(sa) == sa.sa == _sorted_suffixes(s)
    assert len(sa) == len(s)
    assert sa[0] == len(s) - 1
    assert sa.text == s
    rebuilt = SuffixArray(s, sa.sa)
    assert rebuilt.rank == sa.rank
    assert rebuilt.lcp == sa.lcp


@pytest.mark.parametrize("s", ["mississippi", "abracadabra", "aaaa"])
@pytest.mark.parametrize("t", ["a", "ss", "issi", "abra", "aa", "q", "", "mississippi", "ippix"])
def test_search_functions(s, t):
    sa = SuffixArray(s)
    occurrences = sum(s.startswith(t, i) for i in range(len(s)))
    assert sa.count(t) == occurrences
    assert sa.binary_search(t) == (occurrences > 0)
    lo, hi = sa.equal_range(t)
    assert (lo, hi) == (sa.lower_bound(t), sa.upper_bound(t))
    assert all(s.startswith(t, sa[k]) for k in range(lo, hi))
    assert all(s[sa[k] :] < t for k in range(lo))


def test_search_on_integer_text():
    values = [1, 2, 1, 2, 1]
    sa = SuffixArray(values)
    assert sa.count([1, 2]) == 2
    assert sa.count((2, 1)) == 2
    assert not sa.binary_search([2, 2])


@pytest.mark.parametrize("s", ["banana", "mississippi", "abracadabra"])
def test_lcp_table_queries(s):
    table = SuffixArray(s).longest_common_prefix()
    assert isinstance(table, LcpTable)
    for i in range(len(s)):
        for j in range(len(s)):
            assert table.query(i, j) == len(os.path.commonprefix([s[i:], s[j:]]))


@pytest.mark.parametrize("s", ["banana", "abracadabra"])
def test_substring_comparison(s):
    table = SuffixArray(s).longest_common_prefix()
    n = len(s)
    for a in range(n):
        for b in range(n):
            for a_size in range(1, n - a + 1, 2):
                for b_size in range(1, n - b + 1, 2):
                    x, y = s[a : a + a_size], s[b : b + b_size]
                    expected = (x > y) - (x < y)
                    result = table.substr_cmp(a, a_size, b, b_size)
                    assert (result > 0) - (result < 0) == expected