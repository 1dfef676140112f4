import io
from collections import deque

import pytest

from cpkit.formatting import TokenReader, format_indices, format_value


def test_flat_list_is_space_separated():
    assert format_value([1, 2, 3]) == "1 2 3"


def test_nested_list_one_row_per_line():
    assert format_value([[1, 2], [3, 4]]) == "1 2\n3 4"


def test_pair_is_space_separated():
    assert format_value((1, "a")) == "1 a"


def test_list_of_tuples_is_line_per_item():
    pairs = [(1, 2), (3, 4), (5, 6)]
    assert format_value(pairs).splitlines() == [format_value(p) for p in pairs]


def test_deque_matches_list():
    assert format_value(deque([7, 8, 9])) == format_value([7, 8, 9])


def test_indices_with_zero_base_match_plain():
    data = [[0, 3], [2, 5]]
    assert format_indices(data, 0) == format_value(data)


def test_indices_shift_every_number():
    assert format_indices([0, 1, 4]) == format_value([1, 2, 5])
    assert format_indices((2, 3), base=10) == format_value((12, 13))


def test_reader_reads_count_then_list():
    reader = TokenReader("3\n10 20 30\n")
    count = reader.read()
    assert count == 3
    assert reader.read_list(count) == [10, 20, 30]


def test_reader_tuple_with_kinds():
    reader = TokenReader("7 word 2.5")
    assert reader.read_tuple(int, str, float) == (7, "word", 2.5)


def test_reader_from_stream():
    reader = TokenReader(io.StringIO("1 2\n3\n\n4"))
    assert reader.read_list(4) == [1, 2, 3, 4]


def test_round_trip_values():
    values = [5, -2, 17, 0]
    reader = TokenReader(format_value(values))
    assert reader.read_list(len(values)) == values


def test_round_trip_matrix():
    matrix = [[1, 2, 3], [4, 5, 6]]
    reader = TokenReader(format_value(matrix))
    assert [reader.read_list(3) for _ in range(2)] == matrix


def test_round_trip_indices():
    indices = [0, 4, 2, 9]
    reader = TokenReader(format_indices(indices))
    assert reader.read_index_list(len(indices)) == indices


def test_round_trip_single_index_custom_base():
    reader = TokenReader(format_indices(6, base=3))
    assert reader.read_index(base=3) == 6


def test_exhausted_input_raises_eof():
    reader = TokenReader("1")
    assert reader.read() == 1
    with pytest.raises(EOFError):
        reader.next_token()


def test_bad_integer_raises_value_error():
    reader = TokenReader("abc")
    with pytest.raises(ValueError):
        reader.read()


def test_iteration_yields_remaining_tokens():
    reader = TokenReader("a b c")
    assert reader.next_token() == "a"
    assert list(reader) == ["b", "c"]