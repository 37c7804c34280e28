"""A weighted directed graph with shortest-path search."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from itertools import count
from typing import Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

NodeId = TypeVar("NodeId", bound=Hashable)


@dataclass
class Edge(Generic[NodeId]):
    """A directed, weighted edge to be added to a graph."""

    source: NodeId
    destination: NodeId
    weight: int


@dataclass
class Destination(Generic[NodeId]):
    """An outgoing connection stored on a node."""

    node: NodeId
    weight: int


@dataclass
class Node(Generic[NodeId]):
    """Per-node state: outgoing connections and search results."""

    min_distance: Optional[int] = None
    visited: bool = False
    destinations: List[Destination] = field(default_factory=list)
    previous_location: List[NodeId] = field(default_factory=list)


class Graph(Generic[NodeId]):
    """Nodes keyed by id, each holding its outgoing edges and search state."""

    def __init__(self) -> None:
        self._nodes: Dict[NodeId, Node] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._nodes)

    def add_node(self, node_id: NodeId) -> None:
        """Insert a fresh node, replacing any existing node with this id."""
        self._nodes[node_id] = Node()

    def get_node(self, node_id: NodeId) -> Optional[Node]:
        return self._nodes.get(node_id)

    def get_node_distance(self, node_id: NodeId) -> Optional[int]:
        node = self._nodes.get(node_id)
        return None if node is None else node.min_distance

    def add_edge(self, edge: Edge) -> None:
        """Add an edge, creating either endpoint if it does not yet exist."""
        if edge.source not in self._nodes:
            self.add_node(edge.source)
        if edge.destination not in self._nodes:
            self.add_node(edge.destination)
        self._nodes[edge.source].destinations.append(Destination(edge.destination, edge.weight))

    def _start(self, start_node: NodeId) -> None:
        node = self._nodes.get(start_node)
        if node is None:
            raise KeyError("The start node does not exist")
        node.min_distance = 0

    def _relax(self, node_id: NodeId, distance: int, destination: Destination) -> Optional[int]:
        """Update a neighbour; return its new distance if it improved."""
        neighbour = self._nodes[destination.node]
        new_distance = distance + destination.weight
        if neighbour.min_distance is None or new_distance < neighbour.min_distance:
            neighbour.min_distance = new_distance
            neighbour.previous_location = [node_id]
            return new_distance
        if new_distance == neighbour.min_distance:
            neighbour.previous_location.append(node_id)
        return None

    def dijkstra(self, start_node: NodeId) -> None:
        """Compute shortest distances and all equal-cost predecessors from a start node."""
        self._start(start_node)
        tie_breaker = count()
        queue = [(0, next(tie_breaker), start_node)]
        while queue:
            distance, _, node_id = heapq.heappop(queue)
            node = self._nodes[node_id]
            if node.visited:
                continue
            node.visited = True
            for destination in list(node.destinations):
                if self._nodes[destination.node].visited:
                    continue
                improved = self._relax(node_id, distance, destination)
                if improved is not None:
                    heapq.heappush(queue, (improved, next(tie_breaker), destination.node))

    def dfs(self, start_node: NodeId) -> None:
        """Depth-first search recording the distance along the first path found."""
        self._start(start_node)
        stack = [(start_node, 0)]
        while stack:
            node_id, distance = stack.pop()
            node = self._nodes[node_id]
            if node.visited:
                continue
            node.visited = True
            for destination in list(node.destinations):
                if self._nodes[destination.node].visited:
                    continue
                self._relax(node_id, distance, destination)
                stack.append((destination.node, distance + destination.weight))

    def get_path_nodes(self, finish: NodeId) -> Optional[List[NodeId]]:
        """All nodes on every recorded best path ending at ``finish``, or None if unknown."""
        route: List[NodeId] = []
        stack = [finish]
        while stack:
            node_id = stack.pop()
            node = self._nodes.get(node_id)
            if node is None:
                return None
            route.append(node_id)
            stack.extend(reversed(node.previous_location))
        return route