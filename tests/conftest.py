import pytest

from pathgraph.graph import Edge, Graph, Node


def build_graph(nodes, edges):
    """Graph from node ids and (start, end, weight) triples; ids double as labels."""
    G = Graph()
    G.add_nodes(Node(n, label=n) for n in nodes)
    G.add_edges(Edge(u, v, w) for u, v, w in edges)
    return G


@pytest.fixture
def chain():
    return build_graph("ABC", [("A", "B", 5), ("B", "C", 3)])


@pytest.fixture
def diamond():
    return build_graph("ABCD", [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)])


@pytest.fixture
def sample():
    # A -> B -> C -> D -> F is the cheapest A -> F route (cost 6)
    return build_graph(
        "ABCDEF",
        [
            ("A", "B", 2), ("A", "C", 5),
            ("B", "C", 1), ("B", "D", 4),
            ("C", "D", 2), ("C", "E", 3),
            ("D", "F", 1),
            ("E", "F", 5),
        ],
    )
