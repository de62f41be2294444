from collections import Counter

import pytest

from netviz.core.models import FrequencyEntry
from netviz.exceptions import ConfigurationError
from netviz.histogram.reducer import TopNReducer, rank_key, reduce_top_n
from netviz.iptree import IPTree
from tests.utils.assertions import assert_fixed_width, assert_top_pairs


def test_reduce_orders_by_count_then_address():
    counts = Counter({"10.0.0.1": 2, "10.0.0.2": 1})
    result = TopNReducer(2).from_counts(counts)
    assert result.as_pairs() == [("10.0.0.1", 2), ("10.0.0.2", 1)]
    assert result.total_count == 3


def test_tie_break_prefers_larger_address():
    entries = [FrequencyEntry("192.168.1.1", 7), FrequencyEntry("192.168.1.2", 7)]
    result = reduce_top_n(entries, 2)
    assert [e.key for e in result] == ["192.168.1.2", "192.168.1.1"]


def test_tie_break_compares_bytes_not_strings():
    # "9.0.0.1" > "10.0.0.1" as strings, but 10 > 9 as a byte
    entries = [FrequencyEntry("9.0.0.1", 3), FrequencyEntry("10.0.0.1", 3)]
    result = reduce_top_n(entries, 2)
    assert result[0].key == "10.0.0.1"


def test_tie_break_across_families():
    v6 = "2001:0db8:0000:0000:0000:0000:0000:0001"
    entries = [FrequencyEntry("10.0.0.1", 4), FrequencyEntry(v6, 4)]
    assert reduce_top_n(entries, 2)[0].key == v6


def test_rank_key_is_total_for_padded_collisions():
    v4 = bytes([1, 2, 3, 4])
    v6 = bytes([1, 2, 3, 4]) + bytes(12)
    assert rank_key(1, v6) < rank_key(1, v4)


def test_truncation_keeps_total():
    entries = [FrequencyEntry(f"10.0.0.{i}", i) for i in range(1, 6)]
    result = reduce_top_n(entries, 3)
    assert_fixed_width(result, 3)
    assert_top_pairs(result, ("10.0.0.5", 5), ("10.0.0.4", 4), ("10.0.0.3", 3))
    assert result.total_count == 15
    assert result.shown_count == 12


def test_empty_input_is_padded():
    result = reduce_top_n([], 4)
    assert_fixed_width(result, 4)
    assert all(e.is_empty for e in result)
    assert result.total_count == 0


def test_zero_capacity():
    result = reduce_top_n([FrequencyEntry("10.0.0.1", 3)], 0)
    assert len(result) == 0
    assert result.total_count == 3


def test_negative_capacity_rejected():
    with pytest.raises(ConfigurationError):
        TopNReducer(-1)
    with pytest.raises(ConfigurationError):
        reduce_top_n([], -2)


def test_supplied_total_overrides_sum():
    result = reduce_top_n([FrequencyEntry("10.0.0.1", 3)], 1, total=10)
    assert result.total_count == 10


def test_reduce_is_repeatable():
    entries = [FrequencyEntry(f"172.16.0.{i}", i % 3 + 1) for i in range(20)]
    reducer = TopNReducer(5)
    assert reducer.reduce(entries) == reducer.reduce(list(reversed(entries)))


def test_from_tree_uses_tree_sum():
    tree = IPTree()
    tree.add("192.168.1.1", 7)
    tree.add("192.168.1.2", 7)
    tree.add("2001:db8::1", 1)
    tree.add("10.1.1.1", 2)
    result = TopNReducer(2).from_tree(tree)
    assert result.as_pairs() == [("192.168.1.2", 7), ("192.168.1.1", 7)]
    assert result.total_count == 17


def test_as_dataframe_shares():
    result = reduce_top_n([FrequencyEntry("10.0.0.1", 3), FrequencyEntry("10.0.0.2", 1)], 3)
    df = result.as_dataframe()
    assert list(df.columns) == ["rank", "address", "count", "share"]
    assert df["rank"].tolist() == [1, 2, 3]
    assert df["share"].tolist() == pytest.approx([0.75, 0.25, 0.0])
