import numpy as np
import pytest

from percolate.structures import DisjointSetForest


def test_empty_forest():
    forest = DisjointSetForest()
    assert forest.count == 0
    assert len(forest) == 0
    assert forest.is_empty
    assert forest.parent == []
    assert forest.weight == []


def test_new_forest_has_singleton_roots():
    for size in range(1, 50):
        forest = DisjointSetForest(size)
        assert forest.count == size
        assert not forest.is_empty
        assert forest.parent == list(range(size))
        assert forest.weight == [1] * size
        assert all(forest.find(node) == node for node in range(size))


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        DisjointSetForest(-1)


def test_union_scenario_merges_weights():
    forest = DisjointSetForest(10)

    forest.union(0, 1)
    assert forest.find(0) == forest.find(1)
    assert forest.weight[forest.find(0)] == 2

    forest.union(2, 3)
    forest.union(1, 2)
    assert forest.find(0) == forest.find(3)
    assert forest.weight[forest.find(0)] == 4


def test_union_tie_keeps_second_root():
    forest = DisjointSetForest(10)
    forest.union(0, 1)
    assert forest.parent[0] == 1
    assert forest.find(0) == 1

    forest.union(2, 3)
    forest.union(1, 2)
    assert forest.find(0) == 3
    assert forest.weight[3] == 4


def test_union_attaches_lighter_root_under_heavier():
    forest = DisjointSetForest(10)
    forest.union(0, 1)

    forest.union(2, 1)
    assert forest.parent[2] == 1
    assert forest.weight[1] == 3

    forest.union(3, 4)
    forest.union(2, 3)
    assert forest.parent[4] == 1
    assert forest.find(3) == 1
    assert forest.weight[1] == 5


def test_union_with_itself_changes_nothing():
    forest = DisjointSetForest(10)
    parent, weight = list(forest.parent), list(forest.weight)
    forest.union(0, 0)
    assert forest.parent == parent
    assert forest.weight == weight


def test_redundant_union_changes_nothing():
    forest = DisjointSetForest(10)
    forest.union(0, 1)
    forest.union(1, 2)
    parent, weight = list(forest.parent), list(forest.weight)
    forest.union(0, 2)
    forest.union(2, 1)
    assert forest.parent == parent
    assert forest.weight == weight


def test_find_does_not_compress():
    forest = DisjointSetForest(5)
    forest.union(0, 1)
    forest.union(2, 3)
    forest.union(1, 3)
    assert forest.parent[0] == 1

    assert forest.find(0) == 3
    assert forest.connected(0, 2)
    assert forest.parent[0] == 1


def test_union_halves_the_walked_path():
    forest = DisjointSetForest(5)
    forest.union(0, 1)
    forest.union(2, 3)
    forest.union(1, 3)

    forest.union(0, 4)
    assert forest.parent[0] == 3
    assert forest.parent[4] == 3
    assert forest.weight[3] == 5


def test_connected_is_reflexive_and_symmetric():
    forest = DisjointSetForest(6)
    forest.union(1, 4)
    for left in range(6):
        assert forest.connected(left, left)
        for right in range(6):
            assert forest.connected(left, right) == forest.connected(right, left)
    assert forest.connected(4, 1)
    assert not forest.connected(0, 1)


def test_connected_is_transitive():
    forest = DisjointSetForest(8)
    forest.union(0, 5)
    forest.union(5, 7)
    assert forest.connected(0, 5)
    assert forest.connected(5, 7)
    assert forest.connected(0, 7)
    assert not forest.connected(0, 6)


@pytest.mark.parametrize("bad_id", [-1, 10, 100])
def test_out_of_range_ids_are_rejected(bad_id):
    forest = DisjointSetForest(10)
    with pytest.raises(IndexError):
        forest.find(bad_id)
    with pytest.raises(IndexError):
        forest.union(0, bad_id)
    with pytest.raises(IndexError):
        forest.union(bad_id, 0)
    with pytest.raises(IndexError):
        forest.connected(bad_id, 0)


def test_find_on_empty_forest_is_rejected():
    with pytest.raises(IndexError):
        DisjointSetForest().find(0)


def test_grow_appends_disconnected_nodes():
    forest = DisjointSetForest(3)
    forest.union(0, 2)

    forest.grow(by=4)
    assert forest.count == 7
    assert forest.parent[3:] == [3, 4, 5, 6]
    assert forest.weight[3:] == [1, 1, 1, 1]
    assert forest.connected(0, 2)
    for node in range(3, 7):
        assert forest.find(node) == node
        assert not forest.connected(node, 0)


def test_grow_defaults_to_one_node():
    forest = DisjointSetForest()
    for expected in range(1, 6):
        forest.grow()
        assert forest.count == expected
        assert forest.find(expected - 1) == expected - 1


@pytest.mark.parametrize("amount", [0, -3])
def test_grow_rejects_non_positive_amounts(amount):
    forest = DisjointSetForest(2)
    with pytest.raises(ValueError):
        forest.grow(by=amount)
    assert forest.count == 2


def test_root_weights_match_tree_sizes_after_random_unions():
    rng = np.random.default_rng(7)
    forest = DisjointSetForest(200)
    for _ in range(150):
        left, right = (int(value) for value in rng.integers(0, 200, size=2))
        forest.union(left, right)
        assert forest.connected(left, right)

    members = {}
    for node in range(forest.count):
        members.setdefault(forest.find(node), []).append(node)

    assert sorted(members) == forest.roots()
    for root, nodes in members.items():
        assert forest.weight[root] == len(nodes)
    assert sum(forest.weight[root] for root in forest.roots()) == forest.count


def test_forests_with_different_links_are_not_equal():
    linked = DisjointSetForest(3)
    linked.union(0, 1)
    assert DisjointSetForest(3) != linked
    assert DisjointSetForest(3) == DisjointSetForest(3)
    assert "parent=[1, 1, 2]" in repr(linked)


@pytest.mark.parametrize("bad_id", [1.0, "1", None])
def test_non_integer_ids_are_rejected(bad_id):
    forest = DisjointSetForest(3)
    with pytest.raises(TypeError, match="node id must be an integer"):
        forest.find(bad_id)
    with pytest.raises(TypeError):
        forest.union(0, bad_id)


def test_numpy_integer_ids_are_accepted():
    forest = DisjointSetForest(3)
    forest.union(np.int64(0), np.int64(2))
    assert forest.connected(0, 2)
