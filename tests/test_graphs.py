import pytest

from interviewkit.graphs import (
    DependencyGraph,
    GraphNode,
    Package,
    bfs,
    bidirectional_bfs,
    build_graph,
    build_order,
    order_packages,
    path_exists,
    shortest_path,
)

PACKAGES = ["a", "b", "c", "d", "e", "f"]
DEPENDENCIES = [("a", "d"), ("f", "b"), ("b", "d"), ("f", "a"), ("d", "c")]

SOCIAL = {
    "a": ["e"],
    "b": ["e"],
    "d": ["f"],
    "e": ["a", "b", "g"],
    "f": ["e", "d", "g"],
    "g": ["e", "f", "h"],
    "h": ["g", "i"],
    "i": ["h", "j", "k"],
    "j": ["i", "l", "m"],
    "k": ["i", "n", "o"],
    "l": ["j"],
    "m": ["j"],
    "n": ["k"],
    "o": ["k"],
}

BFS_EDGES = [[1, 2], [0, 3, 4], [0, 4], [1, 4, 5], [1, 2, 3, 5], [3, 5]]
SHORTEST_EDGES = [[1, 2], [0], [0, 4], [4, 5], [2, 3, 5], [3, 5]]


def _is_walk(edges, path):
    return all(b in edges[a] for a, b in zip(path, path[1:]))


def test_add_child_counts_dependencies_once():
    parent, child = Package("p"), Package("c")
    parent.add_child(child)
    parent.add_child(child)
    assert parent.children == [child]
    assert child.dependencies == 1


def test_graph_get_or_create_reuses_nodes():
    graph = DependencyGraph()
    first = graph.get_or_create_node("x")
    assert graph.get_or_create_node("x") is first
    graph.add_edge("x", "y")
    assert [p.name for p in graph.nodes] == ["x", "y"]


def test_build_graph_keeps_package_order():
    graph = build_graph(PACKAGES, DEPENDENCIES)
    assert [p.name for p in graph.nodes] == PACKAGES


def test_build_order_example():
    assert build_order(PACKAGES, DEPENDENCIES) == ["e", "f", "b", "a", "d", "c"]


def test_build_order_respects_dependencies():
    order = build_order(PACKAGES, DEPENDENCIES)
    assert sorted(order) == sorted(PACKAGES)
    for before, after in DEPENDENCIES:
        assert order.index(before) < order.index(after)


def test_order_packages_does_not_mutate():
    graph = build_graph(PACKAGES, DEPENDENCIES)
    counts = [p.dependencies for p in graph.nodes]
    first = order_packages(graph.nodes)
    assert [p.dependencies for p in graph.nodes] == counts
    assert order_packages(graph.nodes) == first


def test_cycle_raises():
    with pytest.raises(ValueError):
        build_order(["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "a")])


def test_path_exists():
    a, b, c, d = GraphNode(1), GraphNode(2), GraphNode(3), GraphNode(4)
    a.children = [b]
    b.children = [c, a]
    assert path_exists(a, c) is True
    assert path_exists(c, a) is False
    assert path_exists(a, d) is False
    assert path_exists(d, d) is True


def test_bfs_example_order():
    assert bfs(BFS_EDGES, 0) == [0, 1, 2, 3, 4, 5]


def test_bfs_visits_each_reachable_vertex_once():
    order = bfs(SOCIAL, "a")
    assert order[0] == "a"
    assert len(order) == len(set(order))
    assert set(order) == set(SOCIAL) - {"c"} or set(order) == set(SOCIAL)


def test_bfs_on_mapping_missing_vertex():
    assert bfs({"x": ["y"]}, "x") == ["x", "y"]


def test_shortest_path_is_valid_walk():
    path = shortest_path(SHORTEST_EDGES, 0, 3)
    assert path[0] == 0 and path[-1] == 3
    assert _is_walk(SHORTEST_EDGES, path)
    assert len(path) == len(bidirectional_bfs(SHORTEST_EDGES, 0, 3))


def test_shortest_path_unreachable():
    assert shortest_path([[1], [0], []], 0, 2) is None
    assert shortest_path([[1], [0], []], 2, 2) == [2]


def test_bidirectional_bfs_example():
    assert bidirectional_bfs(SOCIAL, "a", "m") == ["a", "e", "g", "h", "i", "j", "m"]


def test_bidirectional_disconnected_and_same():
    edges = {"x": ["y"], "y": ["x"], "z": []}
    assert bidirectional_bfs(edges, "x", "z") is None
    assert bidirectional_bfs(edges, "x", "x") == ["x"]