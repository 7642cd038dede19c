"""Shortest paths, breadth-first distances and maximum flow."""

import math
from collections import deque
from dataclasses import dataclass

UNREACHABLE = -1


def _check_node(node, low, high):
    if not low <= node <= high:
        raise ValueError(f"node {node} outside {low}..{high}")


def _other_distances(dist, n, source):
    return [
        UNREACHABLE if dist[node] == math.inf else dist[node]
        for node in range(1, n + 1)
        if node != source
    ]


def bellman_ford(n, edges, source):
    """Return shortest distances from ``source`` over undirected weighted edges.

    Nodes are numbered 1..n and ``edges`` holds ``(u, v, weight)`` triples.
    The result lists every node except ``source`` in increasing order, with
    -1 for nodes that cannot be reached. At most n + 1 relaxation rounds run.
    """
    _check_node(source, 1, n)
    dist = [math.inf] * (n + 1)
    dist[source] = 0
    for _ in range(n + 1):
        relaxed = False
        for start, end, weight in edges:
            if dist[start] + weight < dist[end]:
                dist[end] = dist[start] + weight
                relaxed = True
            if dist[end] + weight < dist[start]:
                dist[start] = dist[end] + weight
                relaxed = True
        if not relaxed:
            break
    return _other_distances(dist, n, source)


def bfs_distances(n, edges, source):
    """Return edge counts from ``source`` over undirected unweighted edges.

    Nodes are numbered 1..n. Every node except ``source`` is listed in
    increasing order, with -1 for nodes that cannot be reached.
    """
    _check_node(source, 1, n)
    graph = [[] for _ in range(n + 1)]
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)
    dist = [math.inf] * (n + 1)
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in graph[node]:
            if dist[nxt] == math.inf:
                dist[nxt] = dist[node] + 1
                queue.append(nxt)
    return _other_distances(dist, n, source)


def _relax_all_pairs(dist):
    for k, row_k in enumerate(dist):
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j, d in enumerate(row_k):
                if d != math.inf and via + d < row[j]:
                    row[j] = via + d


def floyd_warshall(n, edges):
    """Return the all-pairs shortest path matrix of a directed graph.

    Nodes are numbered 0..n-1 and ``edges`` holds ``(u, v, weight)`` triples;
    of parallel edges the lightest is kept. Unreachable pairs hold
    ``math.inf`` and pairs whose path can pass through a negative cycle hold
    ``-math.inf``.
    """
    dist = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for u, v, w in edges:
        _check_node(u, 0, n - 1)
        _check_node(v, 0, n - 1)
        dist[u][v] = min(dist[u][v], w)
    _relax_all_pairs(dist)
    on_cycle = [k for k in range(n) if dist[k][k] < 0]
    return [
        [
            -math.inf
            if any(row[k] != math.inf and dist[k][j] != math.inf for k in on_cycle)
            else d
            for j, d in enumerate(row)
        ]
        for row in dist
    ]


def has_negative_cycle(matrix):
    """Return True if the weighted adjacency ``matrix`` holds a negative cycle.

    Missing edges are given as ``None`` or ``math.inf``. The matrix is not
    changed.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    dist = [[math.inf if w is None else w for w in row] for row in matrix]
    _relax_all_pairs(dist)
    return any(dist[k][k] < 0 for k in range(n))


@dataclass(frozen=True)
class FlowResult:
    """A maximum flow value and the flow carried by each used edge."""

    value: int
    edges: tuple


def _augmenting_path(capacity, source, sink):
    parent = {source: None}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt, cap in enumerate(capacity[node]):
            if cap > 0 and nxt not in parent:
                parent[nxt] = node
                if nxt == sink:
                    return parent
                queue.append(nxt)
    return None


def _path_edges(parent, sink):
    v = sink
    while parent[v] is not None:
        u = parent[v]
        yield u, v
        v = u


def max_flow(n, edges, source, sink):
    """Compute a maximum flow from ``source`` to ``sink`` by Edmonds-Karp.

    Nodes are numbered 0..n-1 and ``edges`` holds directed ``(u, v, capacity)``
    triples; a repeated edge replaces the earlier capacity. The result lists
    ``(u, v, flow)`` for every edge that carries flow, in row-major order.
    """
    _check_node(source, 0, n - 1)
    _check_node(sink, 0, n - 1)
    original = [[0] * n for _ in range(n)]
    for u, v, c in edges:
        _check_node(u, 0, n - 1)
        _check_node(v, 0, n - 1)
        original[u][v] = c
    capacity = [row[:] for row in original]
    total = 0
    while (parent := _augmenting_path(capacity, source, sink)) is not None:
        path = list(_path_edges(parent, sink))
        flow = min(capacity[u][v] for u, v in path)
        total += flow
        for u, v in path:
            capacity[u][v] -= flow
            capacity[v][u] += flow
    used = tuple(
        (i, j, cap - capacity[i][j])
        for i, row in enumerate(original)
        for j, cap in enumerate(row)
        if cap and capacity[i][j] < cap
    )
    return FlowResult(total, used)