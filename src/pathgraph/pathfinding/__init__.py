from pathgraph.pathfinding.dijkstra import EngineState, PathResult, ShortestPathEngine, dijkstra, select_next, shortest_path
from pathgraph.pathfinding.k_shortest_paths import path_cost, top_k_shortest_paths
from pathgraph.pathfinding.ledger import INFINITY, CostLedger, PredecessorMap, ProcessedSet
