import pytest
from hypothesis import given
from hypothesis import strategies as st

from treekit.dynamic_segment_tree import DynamicSegmentTree, main


def test_worked_example():
    tree = DynamicSegmentTree(100)
    tree.insert(1, 5)
    tree.insert(2, 10)
    tree.update_range(1, 2, 3)
    assert tree.get_sum(1, 2) == 21


def test_versions_count_modifications():
    tree = DynamicSegmentTree(10)
    assert tree.version() == 0
    tree.insert(3, 7)
    tree.update_range(0, 9, 1)
    assert tree.version() == 2


def test_old_versions_remain_queryable():
    tree = DynamicSegmentTree(100)
    tree.insert(1, 5)
    tree.insert(2, 10)
    assert tree.get_sum(0, 99, version=0) == 0
    assert tree.get_sum(1, 1, version=1) == 5
    assert tree.get_sum(2, 2, version=1) == 0
    assert tree.get_sum(2, 2, version=2) == 10


def test_update_range_is_clipped():
    tree = DynamicSegmentTree(100)
    tree.update_range(-5, 200, 1)
    assert tree.get_sum(0, 99) == 100
    assert tree.get_sum(-50, 500) == 100


def test_empty_query_range():
    tree = DynamicSegmentTree(10)
    tree.update_range(0, 9, 4)
    assert tree.get_sum(5, 2) == 0


def test_invalid_size():
    with pytest.raises(ValueError):
        DynamicSegmentTree(0)


def test_insert_out_of_range():
    tree = DynamicSegmentTree(10)
    with pytest.raises(IndexError):
        tree.insert(10, 1)
    with pytest.raises(IndexError):
        tree.insert(-1, 1)


def test_unknown_version():
    tree = DynamicSegmentTree(10)
    tree.insert(1, 1)
    with pytest.raises(IndexError):
        tree.get_sum(0, 9, version=2)


_operation = st.one_of(
    st.tuples(st.just("insert"), st.integers(0, 63), st.integers(-50, 50)),
    st.tuples(st.just("range"), st.integers(-5, 70), st.integers(-5, 70), st.integers(-50, 50)),
)


@given(st.lists(_operation, max_size=30), st.integers(0, 63), st.integers(0, 63))
def test_matches_list_model_in_every_version(operations, a, b):
    size = 64
    tree = DynamicSegmentTree(size)
    snapshots = [[0] * size]
    for op in operations:
        data = list(snapshots[-1])
        if op[0] == "insert":
            _, key, value = op
            tree.insert(key, value)
            data[key] += value
        else:
            _, start, end, value = op
            tree.update_range(start, end, value)
            for index in range(max(start, 0), min(end, size - 1) + 1):
                data[index] += value
        snapshots.append(data)
    lo, hi = min(a, b), max(a, b)
    assert tree.version() == len(snapshots) - 1
    for version, data in enumerate(snapshots):
        assert tree.get_sum(lo, hi, version=version) == sum(data[lo : hi + 1])
        assert tree.get_sum(0, size - 1, version=version) == sum(data)


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Sum from index 1 to 2: 21\n"