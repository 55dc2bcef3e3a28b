"""
Union-Find (Disjoint Set Union) data structure.

Tracks a partition of the dense index range 0..n-1 with:
- find_set(v): Which set contains v? - O(α(n)) amortized
- union_sets(a, b): Merge sets containing a and b - O(α(n)) amortized
- connected(a, b): Are a and b in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Callers map their own keys to indices first (see utils.graph.DenseIndex);
a fresh instance is built for every spanning tree computation.
"""


class DisjointSetUnion:
    """
    Union-Find with path compression and union by rank.

    Example:
        >>> dsu = DisjointSetUnion(4)
        >>> dsu.union_sets(0, 1)
        True
        >>> dsu.union_sets(1, 0)
        False
        >>> dsu.connected(0, 1), dsu.connected(0, 2)
        (True, False)
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Size must be non-negative, got {n}")
        self.parent: list[int] = list(range(n))
        self.rank: list[int] = [0] * n
        self._set_count = n

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets (trees) currently alive."""
        return self._set_count

    def find_set(self, v: int) -> int:
        """
        Find the representative (root) of the set containing v.

        Uses path compression: every node visited on the way up is
        rewritten to point directly at the root.
        """
        # Find root
        root = v
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression: point all nodes to root
        current = v
        while self.parent[current] != root:
            next_node = self.parent[current]
            self.parent[current] = root
            current = next_node

        return root

    def union_sets(self, a: int, b: int) -> bool:
        """
        Merge the sets containing a and b.

        Uses union by rank: the lower-rank root goes under the higher-rank
        one, and a tie bumps the surviving root's rank.

        Returns False when a and b already share a representative.
        """
        a = self.find_set(a)
        b = self.find_set(b)

        if a == b:
            return False

        if self.rank[a] < self.rank[b]:
            a, b = b, a
        self.parent[b] = a
        if self.rank[a] == self.rank[b]:
            self.rank[a] += 1

        self._set_count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Check if a and b are in the same set."""
        return self.find_set(a) == self.find_set(b)

    def get_all_sets(self) -> dict[int, set[int]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[int, set[int]] = {}
        for element in range(len(self.parent)):
            root = self.find_set(element)
            if root not in sets:
                sets[root] = set()
            sets[root].add(element)
        return sets
