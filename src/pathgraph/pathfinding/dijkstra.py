import enum
import logging
from dataclasses import dataclass

from pathgraph.errors import CostOverflow, NoPathFound, QueryCancelled, UnknownStartOrEnd
from pathgraph.graph import node_key
from pathgraph.pathfinding.ledger import INFINITY, CostLedger, PredecessorMap, ProcessedSet

logger = logging.getLogger(__name__)


class EngineState(enum.Enum):
    UNSTARTED = "unstarted"
    RELAXING = "relaxing"
    FINALIZING = "finalizing"
    DONE = "done"


@dataclass(frozen=True)
class PathResult:
    path: tuple
    cost: float

    def __iter__(self):
        return iter(self.path)

    def __len__(self):
        return len(self.path)


def select_next(graph, ledger, processed):
    """Cheapest node not yet finalized, or None when every node is finalized.

    Nodes are scanned in registration order and only a strictly smaller cost
    replaces the current best, so the earliest registered node wins a tie.
    """
    best = None
    best_cost = None
    for node in graph:
        if node in processed:
            continue
        cost = ledger.cost_of(node)
        if best is None or cost < best_cost:
            best, best_cost = node, cost
    return best


class ShortestPathEngine:
    """One single-source query from ``start`` to ``end``.

    The engine owns its ledger, predecessor map and processed set; the graph
    is only read. ``should_cancel`` is polled once per finalized node, and a
    true result aborts the query with QueryCancelled.
    """

    def __init__(self, graph, start, end, early_exit=True, should_cancel=None):
        self.graph = graph
        self.start = node_key(start)
        self.end = node_key(end)
        self.early_exit = early_exit
        self.should_cancel = should_cancel
        self.state = EngineState.UNSTARTED
        self.ledger = CostLedger(self.start, self.end)
        self.predecessors = PredecessorMap()
        self.processed = ProcessedSet()
        self._result = None
        self._error = None

    def run(self):
        if self.state is EngineState.DONE:
            if self._error is not None:
                raise self._error
            return self._result
        if self.state is not EngineState.UNSTARTED:
            raise RuntimeError(f"engine is already {self.state.value}")

        for node_id in (self.start, self.end):
            if node_id not in self.graph:
                raise UnknownStartOrEnd(node_id)

        self.state = EngineState.RELAXING
        try:
            self._relax_all()
            self.state = EngineState.FINALIZING
            path = self._reconstruct()
        except (CostOverflow, NoPathFound) as exc:
            # the query has an answer, it is this error
            self._error = exc
            self.state = EngineState.DONE
            raise

        self._result = PathResult(tuple(path), self.ledger.cost_of(self.end))
        self.state = EngineState.DONE
        logger.info(
            "Shortest path %s -> %s: %d hops, cost %g (%d nodes finalized)",
            self.start, self.end, len(path) - 1, self._result.cost, len(self.processed),
        )
        return self._result

    def _relax_all(self):
        while True:
            if self.should_cancel is not None and self.should_cancel():
                logger.info("Query %s -> %s cancelled", self.start, self.end)
                raise QueryCancelled(len(self.processed))

            u = select_next(self.graph, self.ledger, self.processed)
            if u is None:
                return

            u_cost = self.ledger.cost_of(u)
            # unreached nodes can't improve anyone
            neighbors = self.graph.neighbors_of(u) if u_cost < INFINITY else ()
            for v in neighbors:
                candidate = u_cost + self.graph.weight_between(u, v)
                if candidate == INFINITY:
                    raise CostOverflow(u.id, v.id)
                if candidate < self.ledger.cost_of(v):  # dv > du + w
                    self.ledger.set_cost(v, candidate)
                    self.predecessors.set(v, u)
            self.processed.add(u)
            logger.debug("Finalized %s at cost %g", u.id, u_cost)

            # non-negative weights: nothing left can lower the end node's cost
            if self.early_exit and u.id == self.end:
                return

    def _reconstruct(self):
        path = [self.end]
        node = self.end
        while node != self.start:
            node = self.predecessors.get(node)
            if node is None or len(path) > len(self.graph):
                raise NoPathFound(self.start, self.end)
            path.append(node)
        path.reverse()
        return path


def shortest_path(graph, start, end, early_exit=True):
    """Lowest-cost path from start to end as a PathResult.

    Raises UnknownStartOrEnd if either node is missing from the graph and
    NoPathFound if end cannot be reached from start. CostOverflow means a
    path cost no longer fits in a float.
    """
    return ShortestPathEngine(graph, start, end, early_exit=early_exit).run()


def dijkstra(graph, src, dst):
    result = shortest_path(graph, src, dst)
    return list(result.path), result.cost
