"""Build graphs from configuration."""

import logging
from typing import Any

from digraph.config import GraphConfig
from digraph.graph import DirectedGraph


def load_graph(cfg: GraphConfig) -> DirectedGraph[Any]:
    """Create a graph from a validated GraphConfig.

    Standalone nodes are added first, then edges in file order. Every source in
    the edges mapping becomes a node even if it has no targets.
    """
    graph: DirectedGraph[Any] = DirectedGraph()
    for node in cfg["nodes"]:
        graph.add_node(node)
    for src, targets in cfg["edges"].items():
        graph.add_node(src)
        for dst in targets:
            graph.add_edge(src, dst)
    logging.info(
        "loaded %s from %s: %d nodes, %d edges",
        cfg["name"],
        cfg.path,
        len(graph),
        graph.edge_count(),
    )
    return graph
