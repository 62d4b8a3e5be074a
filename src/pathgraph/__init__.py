"""Single-source shortest paths over an in-memory weighted directed graph."""

from pathgraph.errors import (
    CostOverflow,
    DanglingEndpoint,
    DuplicateIdentifier,
    InvalidWeight,
    NoPathFound,
    NoSuchEdge,
    PathGraphError,
    QueryCancelled,
    UnknownStartOrEnd,
)
from pathgraph.graph import Edge, Graph, Node
from pathgraph.ids import new_id
from pathgraph.pathfinding import INFINITY, PathResult, ShortestPathEngine, shortest_path

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "new_id",
    "INFINITY",
    "PathResult",
    "ShortestPathEngine",
    "shortest_path",
    "PathGraphError",
    "DuplicateIdentifier",
    "DanglingEndpoint",
    "InvalidWeight",
    "NoSuchEdge",
    "UnknownStartOrEnd",
    "NoPathFound",
    "QueryCancelled",
    "CostOverflow",
]
