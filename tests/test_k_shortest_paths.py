import pytest

from pathgraph.errors import NoPathFound, UnknownStartOrEnd
from pathgraph.graph import Node
from pathgraph.pathfinding.k_shortest_paths import path_cost, top_k_shortest_paths

from conftest import build_graph


def test_paths_come_cheapest_first(sample):
    paths = top_k_shortest_paths(sample, "A", "F", k=4)
    assert paths[0] == ["A", "B", "C", "D", "F"]
    costs = [path_cost(sample, p) for p in paths]
    assert len(paths) == 4
    assert costs == sorted(costs)
    assert costs[0] == 6


def test_k_larger_than_available_paths(chain):
    assert top_k_shortest_paths(chain, "A", "C", k=10) == [["A", "B", "C"]]


def test_cutoff_limits_nodes_per_path(sample):
    paths = top_k_shortest_paths(sample, "A", "F", k=10, cutoff=4)
    assert paths
    assert all(len(p) <= 4 for p in paths)
    assert ["A", "B", "C", "D", "F"] not in paths


def test_cutoff_excluding_everything(chain):
    with pytest.raises(NoPathFound):
        top_k_shortest_paths(chain, "A", "C", cutoff=2)


def test_parallel_edges_use_cheapest_weight():
    G = build_graph("AB", [("A", "B", 7), ("A", "B", 2)])
    paths = top_k_shortest_paths(G, "A", "B")
    assert paths == [["A", "B"]]
    assert path_cost(G, paths[0]) == 2


def test_no_path(chain):
    chain.add_node(Node("E"))
    with pytest.raises(NoPathFound):
        top_k_shortest_paths(chain, "A", "E")


def test_unknown_node(chain):
    with pytest.raises(UnknownStartOrEnd):
        top_k_shortest_paths(chain, "A", "Z")


def test_k_must_be_positive(chain):
    with pytest.raises(ValueError):
        top_k_shortest_paths(chain, "A", "C", k=0)
