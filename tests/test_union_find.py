"""Tests for utils/union_find.py"""

import pytest

from utils.union_find import DisjointSetUnion


class TestDisjointSetUnion:
    def test_initial_singletons(self):
        dsu = DisjointSetUnion(4)
        assert len(dsu) == 4
        assert dsu.set_count == 4
        assert [dsu.find_set(i) for i in range(4)] == [0, 1, 2, 3]

    def test_empty(self):
        dsu = DisjointSetUnion(0)
        assert len(dsu) == 0
        assert dsu.get_all_sets() == {}

    def test_negative_size(self):
        with pytest.raises(ValueError, match="non-negative"):
            DisjointSetUnion(-1)

    def test_union_reports_merge(self):
        dsu = DisjointSetUnion(3)
        assert dsu.union_sets(0, 1) is True
        assert dsu.union_sets(1, 0) is False
        assert dsu.connected(0, 1)
        assert not dsu.connected(0, 2)
        assert dsu.set_count == 2

    def test_union_by_rank(self):
        """Equal ranks bump the survivor; a lower rank root goes under a higher one."""
        dsu = DisjointSetUnion(3)
        dsu.union_sets(0, 1)
        assert dsu.parent[1] == 0
        assert dsu.rank[0] == 1

        dsu.union_sets(2, 0)
        assert dsu.parent[2] == 0
        assert dsu.rank[0] == 1

    def test_path_compression(self):
        """Every node on the walk to the root ends up pointing at the root."""
        dsu = DisjointSetUnion(4)
        dsu.parent = [0, 0, 1, 2]
        assert dsu.find_set(3) == 0
        assert dsu.parent == [0, 0, 0, 0]

    def test_get_all_sets(self):
        dsu = DisjointSetUnion(5)
        dsu.union_sets(0, 1)
        dsu.union_sets(3, 4)
        groups = sorted(sorted(members) for members in dsu.get_all_sets().values())
        assert groups == [[0, 1], [2], [3, 4]]

    def test_transitive_connection(self):
        dsu = DisjointSetUnion(4)
        dsu.union_sets(0, 1)
        dsu.union_sets(2, 3)
        dsu.union_sets(1, 3)
        assert dsu.connected(0, 2)
        assert dsu.set_count == 1
