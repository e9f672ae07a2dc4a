import math

import pytest

from rangestab.range_dict import RangeDict


def test_store_and_lookup():
    rd = RangeDict()
    rd[0.0, 5.0] = "a"
    rd[2.0, 8.0] = "b"
    assert sorted(rd[3.0]) == ["a", "b"]
    assert rd[1.0] == ["a"]
    assert rd[6.0] == ["b"]


def test_end_is_exclusive_and_start_inclusive():
    rd = RangeDict()
    rd[1.1, 2.2] = "A"
    rd[2.0, 3.0] = "B"
    assert sorted(rd[2.0]) == ["A", "B"]
    assert rd[2.2] == ["B"]


def test_missing_point_raises_index_error():
    rd = RangeDict()
    rd[0, 1] = "x"
    with pytest.raises(IndexError, match="Not found."):
        rd[1]
    with pytest.raises(IndexError, match="Not found."):
        RangeDict()[0.5]


def test_len_counts_stored_ranges():
    rd = RangeDict()
    assert len(rd) == 0
    for i in range(10):
        rd[i, i + 1] = i
    assert len(rd) == 10


def test_integer_bounds_and_keys_accepted():
    rd = RangeDict()
    rd[0, 10] = "int"
    assert rd[5] == ["int"]


@pytest.mark.parametrize("key", [(2.0, 2.0), (3.0, 1.0), (math.nan, 1.0), (0.0, math.nan)])
def test_empty_or_reversed_range_rejected(key):
    rd = RangeDict()
    with pytest.raises(IndexError, match="Invalid Range."):
        rd[key] = "bad"
    assert len(rd) == 0


@pytest.mark.parametrize("key", [(1.0,), (1.0, 2.0, 3.0), ("a", "b"), (None, 1.0)])
def test_malformed_tuple_rejected(key):
    rd = RangeDict()
    with pytest.raises(IndexError, match="must be a"):
        rd[key] = "bad"
    assert len(rd) == 0


def test_non_tuple_key_is_type_error():
    rd = RangeDict()
    with pytest.raises(TypeError) as excinfo:
        rd[[0.0, 1.0]] = "bad"
    assert excinfo.type is TypeError
    assert len(rd) == 0


def test_nan_lookup_raises():
    rd = RangeDict()
    rd[0.0, 1.0] = "x"
    with pytest.raises(FloatingPointError) as excinfo:
        rd[math.nan]
    assert excinfo.type is FloatingPointError
    assert rd[0.5] == ["x"]


def test_non_numeric_lookup_is_type_error():
    rd = RangeDict()
    rd[0.0, 1.0] = "x"
    with pytest.raises(TypeError) as excinfo:
        rd["0.5"]
    assert excinfo.type is TypeError
    assert rd[0.5] == ["x"]


def test_stores_arbitrary_objects_by_identity():
    rd = RangeDict()
    payload = {"k": [1, 2]}
    rd[-1.0, 1.0] = payload
    result = rd[0.0]
    assert len(result) == 1
    assert result[0] is payload


def test_lookup_returns_fresh_list():
    rd = RangeDict()
    rd[0.0, 1.0] = "x"
    first = rd[0.5]
    first.append("y")
    assert rd[0.5] == ["x"]