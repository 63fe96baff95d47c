"""Graph algorithms: build ordering, reachability and breadth-first searches."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Package:
    """A package in a dependency graph; ``dependencies`` counts incoming edges."""

    name: str
    dependencies: int = 0
    children: list["Package"] = field(default_factory=list)

    def add_child(self, package: "Package") -> None:
        """Record that ``package`` depends on this one; repeated edges are ignored."""
        if any(child.name == package.name for child in self.children):
            return
        self.children.append(package)
        package.dependencies += 1


class DependencyGraph:
    """A directed graph of packages, kept in the order they were created."""

    def __init__(self) -> None:
        self._nodes: list[Package] = []
        self._by_name: dict[str, Package] = {}

    @property
    def nodes(self) -> list[Package]:
        """The packages, in creation order."""
        return list(self._nodes)

    def create_node(self, name: str) -> Package:
        """Create the package ``name`` unless it exists; return it."""
        package = self._by_name.get(name)
        if package is None:
            package = Package(name)
            self._by_name[name] = package
            self._nodes.append(package)
        return package

    def get_or_create_node(self, name: str) -> Package:
        """Return the package ``name``, creating it if needed."""
        return self.create_node(name)

    def add_edge(self, start: str, end: str) -> None:
        """Record that ``end`` depends on ``start``."""
        self.get_or_create_node(start).add_child(self.get_or_create_node(end))


def build_graph(
    packages: Iterable[str], dependencies: Iterable[tuple[str, str]]
) -> DependencyGraph:
    """Build a graph with an edge (a, b) for every pair where b depends on a."""
    graph = DependencyGraph()
    for name in packages:
        graph.create_node(name)
    for start, end in dependencies:
        graph.add_edge(start, end)
    return graph


def order_packages(packages: Sequence[Package]) -> list[Package]:
    """Order ``packages`` so that each comes after everything it depends on.

    The packages themselves are left unchanged. Raises ValueError when the
    dependencies form a cycle.
    """
    remaining = {id(package): package.dependencies for package in packages}
    order = [package for package in packages if package.dependencies == 0]
    processed = 0
    while processed < len(packages):
        if processed >= len(order):
            raise ValueError("no valid build order: dependencies form a cycle")
        for child in order[processed].children:
            count = remaining.setdefault(id(child), child.dependencies) - 1
            remaining[id(child)] = count
            if count == 0:
                order.append(child)
        processed += 1
    return order


def build_order(
    packages: Iterable[str], dependencies: Iterable[tuple[str, str]]
) -> list[str]:
    """Names of ``packages`` in an order that builds dependencies first."""
    graph = build_graph(packages, dependencies)
    return [package.name for package in order_packages(graph.nodes)]


@dataclass(eq=False)
class GraphNode:
    """A node of a directed graph with links to its children."""

    key: Any
    children: list["GraphNode"] = field(default_factory=list)


def path_exists(start: GraphNode, end: GraphNode) -> bool:
    """Tell whether a directed route leads from ``start`` to ``end``."""
    if start is end:
        return True
    visited = {id(start)}
    queue = deque([start])
    while queue:
        for child in queue.popleft().children:
            if child is end:
                return True
            if id(child) not in visited:
                visited.add(id(child))
                queue.append(child)
    return False


def _neighbours(edges: Any, vertex: Hashable) -> Iterable[Hashable]:
    if isinstance(edges, Mapping):
        return edges.get(vertex, ())
    return edges[vertex]


def bfs(edges: Any, source: Hashable) -> list[Hashable]:
    """Vertices reachable from ``source`` in breadth-first visiting order.

    ``edges`` is an adjacency list: a mapping or a sequence indexed by vertex.
    """
    visited = {source}
    order: list[Hashable] = []
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in _neighbours(edges, vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def _trace(parents: Mapping[Hashable, Optional[Hashable]], vertex: Hashable) -> list[Hashable]:
    path = [vertex]
    while parents[path[-1]] is not None:
        path.append(parents[path[-1]])
    return path


def shortest_path(edges: Any, source: Hashable, dest: Hashable) -> Optional[list[Hashable]]:
    """Shortest path from ``source`` to ``dest`` as a list of vertices, or None."""
    parents: dict[Hashable, Optional[Hashable]] = {source: None}
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        if vertex == dest:
            return _trace(parents, dest)[::-1]
        for neighbour in _neighbours(edges, vertex):
            if neighbour not in parents:
                parents[neighbour] = vertex
                queue.append(neighbour)
    return None


def _expand_level(
    neighbours: Any,
    frontier: deque,
    primary: dict[Hashable, Optional[Hashable]],
    secondary: Mapping[Hashable, Optional[Hashable]],
) -> Optional[Hashable]:
    for _ in range(len(frontier)):
        vertex = frontier.popleft()
        for neighbour in _neighbours(neighbours, vertex):
            if neighbour not in primary:
                primary[neighbour] = vertex
                frontier.append(neighbour)
            if neighbour in secondary:
                return neighbour
    return None


def bidirectional_bfs(
    neighbours: Any, source: Hashable, dest: Hashable
) -> Optional[list[Hashable]]:
    """Path from ``source`` to ``dest`` found by searching from both ends.

    The searches alternate a level at a time and stop where they meet.
    Returns None when the two ends are not connected.
    """
    if source == dest:
        return [source]
    from_source: dict[Hashable, Optional[Hashable]] = {source: None}
    from_dest: dict[Hashable, Optional[Hashable]] = {dest: None}
    source_frontier = deque([source])
    dest_frontier = deque([dest])
    while source_frontier and dest_frontier:
        meeting = _expand_level(neighbours, source_frontier, from_source, from_dest)
        if meeting is None:
            meeting = _expand_level(neighbours, dest_frontier, from_dest, from_source)
        if meeting is not None:
            return _trace(from_source, meeting)[::-1] + _trace(from_dest, meeting)[1:]
    return None