import pytest
from hypothesis import given, settings, strategies as st

from clrsKit.core.errors import UnknownAlgorithmError
from clrsKit.core.quick_sort import Partitioner, hoare_partition, lomuto_partition, quick_sort


def test_lomuto_partition_places_pivot():
    # CLRS figure 7.1
    src = [2, 8, 7, 1, 3, 5, 6, 4]
    q = lomuto_partition(src, 0, len(src) - 1)
    assert q == 3
    assert src[q] == 4
    assert all(v <= 4 for v in src[:q])
    assert all(v > 4 for v in src[q + 1:])


@settings(max_examples=100, deadline=None)
@given(values=st.lists(st.integers(-50, 50), min_size=1, max_size=40))
def test_lomuto_partition_invariant(values):
    src = list(values)
    pivot = src[-1]
    q = lomuto_partition(src, 0, len(src) - 1)
    assert src[q] == pivot
    assert all(v <= pivot for v in src[:q])
    assert all(v > pivot for v in src[q + 1:])
    assert sorted(src) == sorted(values)


@settings(max_examples=100, deadline=None)
@given(values=st.lists(st.integers(-50, 50), min_size=2, max_size=40))
def test_hoare_partition_invariant(values):
    src = list(values)
    j = hoare_partition(src, 0, len(src) - 1)
    assert 0 <= j < len(src) - 1
    assert max(src[: j + 1]) <= min(src[j + 1:])
    assert sorted(src) == sorted(values)


def test_partition_respects_subrange():
    src = [9, 9, 3, 1, 2, 0, 0]
    lomuto_partition(src, 2, 4)
    assert src[:2] == [9, 9]
    assert src[5:] == [0, 0]
    assert sorted(src[2:5]) == [1, 2, 3]


@pytest.mark.parametrize("partitioner", list(Partitioner))
def test_quick_sort_reference_vectors(partitioner, sort_vectors):
    for src, expected in sort_vectors:
        quick_sort(src, partitioner)
        assert src == expected


@pytest.mark.parametrize("partitioner", ["lomuto", "HOARE", " Lomuto "])
def test_partitioner_accepts_names(partitioner):
    src = [3, 1, 2]
    quick_sort(src, partitioner)
    assert src == [1, 2, 3]


def test_unknown_partitioner_is_rejected():
    with pytest.raises(UnknownAlgorithmError) as exc_info:
        Partitioner.from_name("sedgewick")
    assert exc_info.value.metadata["choices"] == ["lomuto", "hoare"]


@pytest.mark.parametrize("partitioner", list(Partitioner))
def test_quick_sort_worst_case_input_stays_shallow(partitioner):
    # already sorted input is the quadratic case for both schemes
    src = list(range(1500))
    quick_sort(src, partitioner)
    assert src == list(range(1500))


def test_default_partitioner_is_lomuto():
    src = [4, 4, 1, 4, 0]
    quick_sort(src)
    assert src == [0, 1, 4, 4, 4]
