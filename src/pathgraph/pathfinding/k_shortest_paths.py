import logging
from itertools import islice

import networkx as nx

from pathgraph.errors import NoPathFound, UnknownStartOrEnd
from pathgraph.graph import node_key

logger = logging.getLogger(__name__)

DEFAULT_K = 3

# Yen's algorithm


def top_k_shortest_paths(graph, source, target, k=DEFAULT_K, cutoff=None):
    # k : number of paths, cutoff : maximum nodes per path
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    source, target = node_key(source), node_key(target)
    for node_id in (source, target):
        if node_id not in graph:
            raise UnknownStartOrEnd(node_id)

    # parallel edges collapse to their cheapest weight in the DiGraph
    G = graph.to_networkx()

    try:
        # simple paths by increasing total weight
        generator = nx.shortest_simple_paths(G, source, target, weight="weight")
        if cutoff is not None:
            # limit the number of nodes per path
            generator = (path for path in generator if len(path) <= cutoff)
        paths = list(islice(generator, k))
    except nx.NetworkXNoPath as exc:
        raise NoPathFound(source, target) from exc

    if not paths:
        # every path was longer than cutoff
        raise NoPathFound(source, target)
    logger.debug("Found %d of %d requested paths %s -> %s", len(paths), k, source, target)
    return paths


def path_cost(graph, path):
    return sum(graph.weight_between(u, v) for u, v in zip(path[:-1], path[1:]))
