import random

import networkx as nx

from pathgraph.graph import Edge, Graph, Node

# the "trade up" example: swap a book for a piano, one trade at a time
DEMO_NODES = ["book", "poster", "lp", "drums", "bass_guitar", "piano"]
DEMO_EDGES = [
    ("book", "poster", 0),
    ("book", "lp", 5),
    ("poster", "bass_guitar", 30),
    ("lp", "drums", 20),
    ("bass_guitar", "piano", 20),
    ("drums", "piano", 10),
]


def build_demo_network():
    """
    Fixed demo graph. Returns the graph and a label -> Node map, since node
    ids are random UUIDs.
    """
    nodes = {label: Node(label=label) for label in DEMO_NODES}
    G = Graph().add_nodes(nodes.values())
    G.add_edges(Edge.between(nodes[u], nodes[v], w) for u, v, w in DEMO_EDGES)
    return G, nodes


def build_random_network(n_nodes=15, edge_prob=0.4, weight_range=(1, 11), seed=None):
    """
    Random connected network:
    - Erdos-Renyi skeleton, redrawn until connected.
    - Each undirected edge becomes two directed edges with independent weights.
    - Node ids are "n0", "n1", ... so results are reproducible for a fixed seed.
    """
    rng = random.Random(seed)

    skeleton = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=seed)
    # make sure the graph is connected
    while n_nodes > 1 and not nx.is_connected(skeleton):
        skeleton = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=rng.randint(1, 10**6))

    G = Graph()
    for n in skeleton.nodes():
        G.add_node(Node(f"n{n}"))

    for u, v in skeleton.edges():
        # u -> v
        G.add_edge(Edge(f"n{u}", f"n{v}", rng.randint(*weight_range)))
        # v -> u
        G.add_edge(Edge(f"n{v}", f"n{u}", rng.randint(*weight_range)))

    return G
