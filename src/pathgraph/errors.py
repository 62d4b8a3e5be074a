"""Exceptions raised by the graph store and the shortest-path engine.

Every failure here is an input error the caller can fix: nothing is retried
and nothing is turned into an empty or partial result.
"""
import networkx as nx


class PathGraphError(Exception):
    """Base class for every error raised by pathgraph."""


class DuplicateIdentifier(PathGraphError, ValueError):
    def __init__(self, kind, identifier):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} '{identifier}' is already registered")


class DanglingEndpoint(PathGraphError, ValueError):
    def __init__(self, edge_id, node_id):
        self.edge_id = edge_id
        self.node_id = node_id
        super().__init__(f"edge '{edge_id}' references unregistered node '{node_id}'")


class InvalidWeight(PathGraphError, ValueError):
    def __init__(self, weight):
        self.weight = weight
        super().__init__(f"edge weight must be a finite non-negative number, got {weight!r}")


class NoSuchEdge(PathGraphError, LookupError):
    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"no edge from '{start}' to '{end}'")


# networkx parents let code written against nx.shortest_path keep its except clauses
class UnknownStartOrEnd(PathGraphError, nx.NodeNotFound):
    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(f"node '{node_id}' is not in the graph")


class NoPathFound(PathGraphError, nx.NetworkXNoPath):
    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"no path from '{start}' to '{end}'")


class QueryCancelled(PathGraphError):
    def __init__(self, finalized):
        self.finalized = finalized
        super().__init__(f"query cancelled after finalizing {finalized} node(s)")


class CostOverflow(PathGraphError, OverflowError):
    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"path cost overflows at edge '{start}' -> '{end}'")
