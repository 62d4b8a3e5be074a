"""Per-query bookkeeping for Dijkstra: tentative costs, predecessors, finalized nodes.

A fresh set of these is built for every query; only the graph is shared.
"""
from pathgraph.graph import node_key

# "Not reached". A finite sum can still overflow to inf, the engine raises
# CostOverflow when that happens.
INFINITY = float("inf")


class CostLedger:
    """Tentative distance from the start node, INFINITY when not yet reached."""

    def __init__(self, start, end):
        self._costs = {node_key(start): 0.0}
        self._costs.setdefault(node_key(end), INFINITY)

    def cost_of(self, node):
        return self._costs.get(node_key(node), INFINITY)

    def set_cost(self, node, value):
        # no monotonicity check here, the engine only writes improvements
        self._costs[node_key(node)] = float(value)

    def is_reached(self, node):
        return self.cost_of(node) < INFINITY

    def as_dict(self):
        return dict(self._costs)


class PredecessorMap:
    def __init__(self):
        self._prev = {}

    def get(self, node):
        return self._prev.get(node_key(node))

    def set(self, node, predecessor):
        self._prev[node_key(node)] = node_key(predecessor)

    def __contains__(self, node):
        return node_key(node) in self._prev

    def as_dict(self):
        return dict(self._prev)


class ProcessedSet:
    """Finalized nodes in the order they were finalized."""

    def __init__(self):
        self._order = []
        self._members = set()

    def add(self, node):
        key = node_key(node)
        if key in self._members:
            raise ValueError(f"node '{key}' is already finalized")
        self._members.add(key)
        self._order.append(key)

    def __contains__(self, node):
        return node_key(node) in self._members

    def __len__(self):
        return len(self._order)

    def __iter__(self):
        return iter(self._order)
