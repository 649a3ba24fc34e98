"""Tree problems: ancestors, lowest common ancestors, subtree sizes and distances."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    count = 0
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        adj[a].append(b)
        adj[b].append(a)
        count += 1
    if count != n - 1:
        raise ValueError(f"a tree on {n} nodes needs {n - 1} edges, got {count}")
    return adj


def _traverse(adj: list[list[int]], start: int) -> tuple[list[int], list[int], list[int]]:
    """Breadth-first walk from start: (parent, depth, visiting order)."""
    parent = [0] * len(adj)
    depth = [-1] * len(adj)
    depth[start] = 0
    order = [start]
    for node in order:
        for neighbour in adj[node]:
            if depth[neighbour] < 0:
                depth[neighbour] = depth[node] + 1
                parent[neighbour] = node
                order.append(neighbour)
    if len(order) != len(adj) - 1:
        raise ValueError("edges do not connect all nodes")
    return parent, depth, order


def _parent_edges(parents: Sequence[int]) -> list[Edge]:
    return [(boss, child) for child, boss in enumerate(parents, start=2)]


class BinaryLifting:
    """A tree rooted at node 1 that answers ancestor, LCA and distance queries."""

    def __init__(self, n: int, edges: Iterable[Edge]) -> None:
        adj = _adjacency(n, edges)
        self.n = n
        self._parent, self._depth, self._order = _traverse(adj, 1)
        self._up = [self._parent]
        for _ in range(1, max(1, n.bit_length())):
            previous = self._up[-1]
            self._up.append([previous[previous[v]] for v in range(n + 1)])

    @classmethod
    def from_parents(cls, parents: Sequence[int]) -> BinaryLifting:
        """Build from the parents of nodes 2..n, in that order."""
        return cls(len(parents) + 1, _parent_edges(parents))

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.n:
            raise ValueError(f"node {node} is outside 1..{self.n}")

    def ancestor(self, node: int, k: int) -> int | None:
        """The k-th ancestor of node, or None if the tree is not that deep."""
        self._check(node)
        if k < 0:
            raise ValueError("k must be non-negative")
        if k > self._depth[node]:
            return None
        for level, table in enumerate(self._up):
            if k >> level & 1:
                node = table[node]
        return node

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of a and b."""
        self._check(a)
        self._check(b)
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        lifted = self.ancestor(a, self._depth[a] - self._depth[b])
        assert lifted is not None
        a = lifted
        if a == b:
            return a
        for table in reversed(self._up):
            if table[a] != table[b]:
                a, b = table[a], table[b]
        return self._parent[a]

    def distance(self, a: int, b: int) -> int:
        """Number of edges on the path between a and b."""
        common = self.lca(a, b)
        return self._depth[a] + self._depth[b] - 2 * self._depth[common]


def company_ancestors(
    parents: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int | None]:
    """For each (employee, k), the boss k levels up, or None."""
    tree = BinaryLifting.from_parents(parents)
    return [tree.ancestor(node, k) for node, k in queries]


def company_lca(parents: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """For each pair of employees, their lowest common boss."""
    tree = BinaryLifting.from_parents(parents)
    return [tree.lca(a, b) for a, b in queries]


def distance_queries(
    n: int, edges: Iterable[Edge], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each pair of nodes, the number of edges between them."""
    tree = BinaryLifting(n, edges)
    return [tree.distance(a, b) for a, b in queries]


def counting_paths(n: int, edges: Iterable[Edge], paths: Iterable[tuple[int, int]]) -> list[int]:
    """For each node 1..n, how many of the given paths pass through it."""
    tree = BinaryLifting(n, edges)
    parent = tree._parent
    marks = [0] * (n + 1)
    for a, b in paths:
        common = tree.lca(a, b)
        marks[a] += 1
        marks[b] += 1
        marks[common] -= 1
        marks[parent[common]] -= 1
    for node in reversed(tree._order[1:]):
        marks[parent[node]] += marks[node]
    return marks[1:]


def subordinates(parents: Sequence[int]) -> list[int]:
    """For each employee 1..n, the number of subordinates, given bosses of 2..n."""
    n = len(parents) + 1
    parent, _, order = _traverse(_adjacency(n, _parent_edges(parents)), 1)
    below = [0] * (n + 1)
    for node in reversed(order[1:]):
        below[parent[node]] += below[node] + 1
    return below[1:]


def tree_diameter(n: int, edges: Iterable[Edge]) -> int:
    """Number of edges on the longest path in the tree."""
    adj = _adjacency(n, edges)
    _, _, order = _traverse(adj, 1)
    _, depth, far_order = _traverse(adj, order[-1])
    return depth[far_order[-1]]


def tree_distances_max(n: int, edges: Iterable[Edge]) -> list[int]:
    """For each node 1..n, the largest distance to any other node."""
    adj = _adjacency(n, edges)
    _, _, order = _traverse(adj, 1)
    _, from_u, order_u = _traverse(adj, order[-1])
    _, from_v, _ = _traverse(adj, order_u[-1])
    return [max(from_u[i], from_v[i]) for i in range(1, n + 1)]


def tree_distances_sum(n: int, edges: Iterable[Edge]) -> list[int]:
    """For each node 1..n, the sum of distances to all other nodes."""
    adj = _adjacency(n, edges)
    parent, depth, order = _traverse(adj, 1)
    size = [1] * (n + 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    totals = [0] * (n + 1)
    totals[1] = sum(depth[1:])
    for node in order[1:]:
        totals[node] = totals[parent[node]] + n - 2 * size[node]
    return totals[1:]