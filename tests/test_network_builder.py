import networkx as nx

from pathgraph.network_builder import DEMO_EDGES, DEMO_NODES, build_demo_network, build_random_network
from pathgraph.pathfinding.dijkstra import shortest_path


def test_demo_network_shape():
    G, nodes = build_demo_network()
    assert [n.label for n in G] == DEMO_NODES
    assert len(G.edges) == len(DEMO_EDGES)
    assert set(nodes) == set(DEMO_NODES)
    assert G.weight_between(nodes["book"], nodes["poster"]) == 0


def test_demo_network_shortest_trade():
    G, nodes = build_demo_network()
    result = shortest_path(G, nodes["book"], nodes["piano"])
    assert [G.node(n).label for n in result.path] == ["book", "lp", "drums", "piano"]
    assert result.cost == 35


def test_demo_networks_are_independent():
    (g1, n1), (g2, n2) = build_demo_network(), build_demo_network()
    assert n1["book"].id != n2["book"].id


def test_random_network_is_connected_both_ways():
    G = build_random_network(n_nodes=10, edge_prob=0.3, seed=7)
    nxg = G.to_networkx()
    assert len(G) == 10
    assert nx.is_strongly_connected(nxg)
    # every relationship is stored as two directed edges
    assert len(G.edges) % 2 == 0
    for edge in G.edges.values():
        assert 1 <= edge.weight <= 11
        assert nxg.has_edge(edge.end, edge.start)


def test_random_network_is_reproducible():
    a = build_random_network(n_nodes=8, seed=3)
    b = build_random_network(n_nodes=8, seed=3)
    key = lambda g: sorted((e.start, e.end, e.weight) for e in g.edges.values())
    assert key(a) == key(b)


def test_random_network_single_node():
    G = build_random_network(n_nodes=1, seed=0)
    assert [n.id for n in G] == ["n0"]
    assert not G.edges
