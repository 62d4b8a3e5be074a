"""In-memory directed weighted graph.

Nodes and edges live in two registration-ordered dicts keyed by identifier.
Edges refer to their endpoints by identifier only, so nothing in the store
holds a reference into another object's lifetime.
"""
import logging
import math
from dataclasses import dataclass, field
from numbers import Real

import networkx as nx

from pathgraph.errors import DanglingEndpoint, DuplicateIdentifier, InvalidWeight, NoSuchEdge
from pathgraph.ids import new_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    id: str = field(default_factory=new_id)
    label: str = field(default="", compare=False)

    @property
    def name(self):
        return self.label or self.id


@dataclass(frozen=True)
class Edge:
    start: str
    end: str
    weight: float
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        w = self.weight
        if isinstance(w, bool) or not isinstance(w, Real):
            raise InvalidWeight(w)
        try:
            value = float(w)
        except OverflowError:
            raise InvalidWeight(w) from None
        if math.isnan(value) or math.isinf(value) or value < 0:
            raise InvalidWeight(w)
        object.__setattr__(self, "weight", value)

    @classmethod
    def between(cls, start, end, weight, edge_id=None):
        """Build an edge from two nodes (or node identifiers)."""
        if edge_id is None:
            return cls(node_key(start), node_key(end), weight)
        return cls(node_key(start), node_key(end), weight, id=edge_id)


def node_key(node):
    """Identifier of a Node, or the value itself when it already is one."""
    return node.id if isinstance(node, Node) else node


class Graph:
    """Node/edge registry with adjacency lookup.

    Registration order is kept and is the tie-break order used by the
    frontier selector. The store is append-only: once a query starts it is
    only read, so one Graph may back any number of concurrent queries.
    """

    def __init__(self):
        self.nodes = {}
        self.edges = {}
        self._outgoing = {}  # node id -> [edge id], in registration order

    def register(self, *items):
        """Register nodes and edges left to right.

        A node listed before an edge in the same call is already known when
        the edge is checked.
        """
        for item in items:
            if isinstance(item, Node):
                self.add_node(item)
            elif isinstance(item, Edge):
                self.add_edge(item)
            else:
                raise TypeError(f"cannot register {type(item).__name__}")
        return self

    def add_node(self, node):
        if node.id in self.nodes:
            logger.debug("Duplicate node id %s", node.id)
            raise DuplicateIdentifier("node", node.id)
        self.nodes[node.id] = node
        self._outgoing[node.id] = []
        return self

    def add_nodes(self, nodes):
        for node in nodes:
            self.add_node(node)
        return self

    def add_edge(self, edge):
        if edge.id in self.edges:
            logger.debug("Duplicate edge id %s", edge.id)
            raise DuplicateIdentifier("edge", edge.id)
        for endpoint in (edge.start, edge.end):
            if endpoint not in self.nodes:
                logger.debug("Edge %s has dangling endpoint %s", edge.id, endpoint)
                raise DanglingEndpoint(edge.id, endpoint)
        self.edges[edge.id] = edge
        self._outgoing[edge.start].append(edge.id)
        return self

    def add_edges(self, edges):
        for edge in edges:
            self.add_edge(edge)
        return self

    def node(self, node_id):
        return self.nodes[node_id]

    def outgoing(self, node):
        return [self.edges[eid] for eid in self._outgoing.get(node_key(node), ())]

    def neighbors_of(self, node):
        """End nodes of every edge leaving ``node``, without repeats.

        Unknown nodes and nodes with no outgoing edges give an empty list.
        """
        seen = set()
        neighbors = []
        for edge in self.outgoing(node):
            if edge.end not in seen:
                seen.add(edge.end)
                neighbors.append(self.nodes[edge.end])
        return neighbors

    def weight_between(self, a, b):
        """Weight of the edge a -> b; the smallest one if there are parallel edges."""
        b = node_key(b)
        weights = [e.weight for e in self.outgoing(a) if e.end == b]
        if not weights:
            raise NoSuchEdge(node_key(a), b)
        return min(weights)

    def to_networkx(self):
        G = nx.DiGraph()
        for node in self.nodes.values():
            G.add_node(node.id, label=node.name)
        for edge in self.edges.values():
            # a DiGraph holds one edge per ordered pair: keep the cheapest
            if G.has_edge(edge.start, edge.end) and G[edge.start][edge.end]["weight"] <= edge.weight:
                continue
            G.add_edge(edge.start, edge.end, weight=edge.weight)
        return G

    def __contains__(self, node):
        return node_key(node) in self.nodes

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes.values())

    def __repr__(self):
        edges = ", ".join(
            f"{self.nodes[e.start].name}->{self.nodes[e.end].name}({e.weight:g})" for e in self.edges.values()
        )
        return f"Graph(nodes={len(self.nodes)}, edges=[{edges}])"
