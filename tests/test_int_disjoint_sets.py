import pytest

from disjoint_sets.structures import IntDisjointSets


def _five_elements() -> IntDisjointSets:
    sets = IntDisjointSets()
    for _ in range(5):
        sets.add()
    return sets


def test_empty_structure_has_no_sets():
    sets = IntDisjointSets()
    assert sets.set_count() == 0
    assert sets.set_reprs() == set()
    assert len(sets) == 0


def test_add_returns_dense_ids():
    sets = IntDisjointSets()
    assert [sets.add() for _ in range(4)] == [0, 1, 2, 3]
    assert sets.set_count() == 4
    assert all(sets.find(i) == i for i in range(4))
    assert all(sets.set_size(i) == 1 for i in range(4))


def test_union_merges_and_tracks_sizes():
    sets = _five_elements()
    sets.union(0, 1)
    sets.union(2, 3)
    assert sets.set_count() == 3
    assert sets.set_size(0) == 2
    assert sets.set_size(2) == 2
    assert sets.set_size(4) == 1

    sets.union(1, 3)
    assert sets.set_count() == 2
    assert sets.find(0) == sets.find(3)
    assert sets.set_size(2) == 4
    assert len(sets.set_reprs()) == 2


def test_union_of_same_set_is_noop():
    sets = _five_elements()
    sets.union(0, 1)
    sets.union(1, 2)
    before = (sets.set_count(), sets.find(0), sets.set_size(0))
    sets.union(2, 0)
    sets.union(0, 0)
    assert (sets.set_count(), sets.find(0), sets.set_size(0)) == before


def test_smaller_set_goes_under_larger_root():
    sets = _five_elements()
    sets.union(0, 1)
    sets.union(1, 2)
    large_root = sets.find(0)
    sets.union(4, 3)
    sets.union(large_root, 3)
    assert sets.find(3) == large_root
    assert sets.set_size(4) == 5


def test_equal_sizes_attach_left_under_right():
    sets = _five_elements()
    sets.union(0, 1)
    assert sets.find(0) == 1


def test_find_update_compresses_path():
    sets = IntDisjointSets(reprs=[0, 0, 1, 2], sizes=[4, 1, 1, 1], count=1)
    assert sets.find(3) == 0
    assert sets.reprs == [0, 0, 1, 2]
    assert sets.find_update(3) == 0
    assert sets.reprs[3] == 1
    assert sets.find(3) == 0


def test_long_chains_stay_consistent():
    sets = IntDisjointSets()
    ids = [sets.add() for _ in range(200)]
    for left, right in zip(ids, ids[1:]):
        sets.union(left, right)
    assert sets.set_count() == 1
    assert sets.set_size(0) == 200
    assert len({sets.find(i) for i in ids}) == 1


@pytest.mark.parametrize("bad_id", [-1, 5, 100, 1.5, "1", True])
def test_invalid_ids_raise_index_error(bad_id):
    sets = _five_elements()
    with pytest.raises(IndexError):
        sets.find(bad_id)
    with pytest.raises(IndexError):
        sets.union(0, bad_id)
    with pytest.raises(IndexError):
        sets.set_size(bad_id)


def test_copy_is_independent():
    sets = _five_elements()
    clone = sets.copy()
    clone.union(0, 1)
    assert sets.set_count() == 5
    assert clone.set_count() == 4
