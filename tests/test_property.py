from hypothesis import given, strategies as st

from netviz.core.models import FrequencyEntry
from netviz.extractor import format_address, key_to_packed
from netviz.histogram.reducer import reduce_top_n

address_keys = st.ip_addresses().map(lambda addr: format_address(addr.packed))
populations = st.dictionaries(address_keys, st.integers(min_value=1, max_value=1000), max_size=30)
capacities = st.integers(min_value=0, max_value=12)


def _entries(population):
    return [FrequencyEntry(key, count) for key, count in population.items()]


@given(populations, capacities)
def test_output_is_fixed_width(population, capacity):
    result = reduce_top_n(_entries(population), capacity)
    assert len(result) == capacity
    assert sum(1 for e in result if not e.is_empty) == min(capacity, len(population))


@given(populations, capacities)
def test_total_is_conserved(population, capacity):
    result = reduce_top_n(_entries(population), capacity)
    assert result.total_count == sum(population.values())
    assert result.total_count >= result.shown_count


@given(populations, capacities)
def test_order_independent_of_input_order(population, capacity):
    entries = _entries(population)
    assert reduce_top_n(entries, capacity) == reduce_top_n(list(reversed(entries)), capacity)


@given(populations)
def test_sorted_by_count_then_address(population):
    shown = reduce_top_n(_entries(population), len(population)).non_empty()
    for left, right in zip(shown, shown[1:]):
        assert left.count >= right.count
        if left.count == right.count:
            assert key_to_packed(left.key).ljust(16, b"\x00") >= key_to_packed(right.key).ljust(16, b"\x00")


@given(st.ip_addresses())
def test_keys_roundtrip_to_address(addr):
    assert key_to_packed(format_address(addr.packed)) == addr.packed
