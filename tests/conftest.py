"""Shared fixtures for digraph tests."""

import logging

import pytest

from digraph.graph import DirectedGraph


@pytest.fixture
def graph():
    """An empty graph."""
    return DirectedGraph()


@pytest.fixture
def triangle():
    """Edges A->B, B->C, A->C."""
    g = DirectedGraph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("A", "C")
    return g


@pytest.fixture
def write_graph(tmp_path):
    """Write YAML content to a graph file and return its path."""

    def write(content, name="graph.yml"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return write


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo changes setup_logging makes to the root logger."""
    logger = logging.getLogger()
    level = logger.level
    handlers = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
