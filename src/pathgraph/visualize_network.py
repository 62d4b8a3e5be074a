import logging
import os

import matplotlib.pyplot as plt
import networkx as nx

logger = logging.getLogger(__name__)

DEFAULT_PLOT_PATH = "plots/shortest_path.png"


def draw_graph_with_path(graph, path=None, output_link=DEFAULT_PLOT_PATH, layout="spring"):
    G = graph.to_networkx()

    # pick a layout, spring spreads the nodes out the most
    if layout == "kamada":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    elif layout == "spectral":
        pos = nx.spectral_layout(G)
    else:
        pos = nx.spring_layout(G, seed=42, k=2.0)

    plt.figure(figsize=(10, 8))

    labels = nx.get_node_attributes(G, "label")
    on_path = set(path or ())
    node_colors = ["#FFDD57" if n in on_path else "#A0CBE2" for n in G.nodes()]

    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=500)
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=9)
    nx.draw_networkx_edges(G, pos, arrows=True, arrowstyle="->", width=1.0, arrowsize=12)
    edge_labels = {edge: f"{w:g}" for edge, w in nx.get_edge_attributes(G, "weight").items()}
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=8)

    # highlight the path
    if path and len(path) > 1:
        path_edges = list(zip(path, path[1:]))
        nx.draw_networkx_edges(
            G, pos, edgelist=path_edges,
            width=3.0, edge_color="red",
            arrows=True, arrowstyle="->", arrowsize=16,
        )
        path_labels = {edge: edge_labels[edge] for edge in path_edges if edge in edge_labels}
        nx.draw_networkx_edge_labels(
            G, pos,
            edge_labels=path_labels,
            font_color="red",
            font_size=10,
            bbox=dict(facecolor="white", edgecolor="none", alpha=0.8),
        )

    plt.title("Graph with Highlighted Shortest Path", fontsize=12)
    plt.tight_layout()
    directory = os.path.dirname(output_link)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(output_link)
    plt.close()
    logger.info("Saved %s", output_link)
    return output_link
