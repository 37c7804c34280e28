import pytest

from adventkit.graph import Destination, Edge, Graph, Node


def _graph(edges):
    graph = Graph()
    for source, destination, weight in edges:
        graph.add_edge(Edge(source, destination, weight))
    return graph


def test_it_adds_an_edge():
    graph = Graph()
    assert len(graph) == 0

    graph.add_edge(Edge(source=1, destination=2, weight=10))
    assert len(graph) == 2

    assert graph.get_node(1) == Node(
        min_distance=None,
        visited=False,
        destinations=[Destination(node=2, weight=10)],
        previous_location=[],
    )
    assert graph.get_node(2) == Node(
        min_distance=None, visited=False, destinations=[], previous_location=[]
    )
    assert graph.get_node(3) is None


def test_dijkstra_finds_shortest_distances():
    graph = _graph([(1, 2, 1), (1, 3, 4), (2, 3, 1), (3, 4, 1)])
    graph.dijkstra(1)
    assert [graph.get_node_distance(n) for n in (1, 2, 3, 4)] == [0, 1, 2, 3]
    assert graph.get_path_nodes(4) == [4, 3, 2, 1]


def test_dijkstra_records_equal_cost_predecessors():
    graph = _graph([(1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 4, 1)])
    graph.dijkstra(1)
    assert sorted(graph.get_node(4).previous_location) == [2, 3]
    assert sorted(graph.get_path_nodes(4)) == [1, 1, 2, 3, 4]


def test_dijkstra_leaves_unreachable_nodes_without_distance():
    graph = _graph([(1, 2, 5), (3, 4, 1)])
    graph.dijkstra(1)
    assert graph.get_node_distance(2) == 5
    assert graph.get_node_distance(4) is None


def test_search_from_missing_node_raises():
    graph = _graph([(1, 2, 1)])
    with pytest.raises(KeyError):
        graph.dijkstra(7)
    with pytest.raises(KeyError):
        graph.dfs(7)


def test_dfs_follows_the_first_path_it_explores():
    graph = _graph([(1, 2, 1), (1, 3, 4), (2, 3, 1), (3, 4, 1)])
    graph.dfs(1)
    assert graph.get_node_distance(3) == 4
    assert graph.get_node_distance(4) == 5


def test_dfs_on_a_chain():
    graph = _graph([("a", "b", 2), ("b", "c", 3)])
    graph.dfs("a")
    assert graph.get_node_distance("c") == 5
    assert graph.get_path_nodes("c") == ["c", "b", "a"]


def test_path_nodes_of_unknown_node_is_none():
    graph = _graph([(1, 2, 1)])
    assert graph.get_path_nodes(99) is None


def test_node_distance_of_unknown_node_is_none():
    assert Graph().get_node_distance("x") is None