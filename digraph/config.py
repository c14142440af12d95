"""Graph description files."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


class GraphConfig:

    """A YAML file describing a graph.

    Example:

        name: example
        nodes: [d]
        edges:
          a: [b, c]
          b: c

    Only "edges" is required. After validate(), "nodes" is a list and "edges"
    is a dict mapping each source to a list of targets. Problems are logged and
    the offending entries dropped, so a validated config is always usable.
    """

    required = {
        "edges": {},
    }

    optional = {
        "name": "graph",
        "nodes": [],
    }

    def __init__(self, path: Path, data: Dict[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        return f"GraphConfig(path={self.path!r}, data={self.data!r})"

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    @staticmethod
    def load(path: Path) -> Optional[GraphConfig]:
        """Load a graph file as UTF-8.

        Logs an error and returns None if the file cannot be read or decoded.
        """
        try:
            with open(path, encoding="utf-8") as f:
                content = f.read()
        except OSError as ex:
            logging.error("cannot read %s: %s", path, ex.strerror)
            return None
        except UnicodeDecodeError as ex:
            logging.error("cannot read %s: %s", path, ex)
            return None
        return GraphConfig.parse(path, content)

    @staticmethod
    def parse(path: Path, content: str) -> GraphConfig:
        """Parse YAML content that came from path."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return GraphConfig(path, data)

    def validate(self):
        """Fill in defaults and normalize nodes and edges.

        This must be called manually after loading.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        self.data = {**self.required, **self.optional, **self.data}
        self.data["nodes"] = self._validate_nodes(self.data["nodes"])
        self.data["edges"] = self._validate_edges(self.data["edges"])

    def _validate_nodes(self, nodes: Any) -> List[Any]:
        if nodes is None:
            return []
        if not isinstance(nodes, list):
            logging.error("%s: 'nodes' must be a list, got %s", self.path, type(nodes))
            return []
        return [n for n in nodes if self._check_node(n)]

    def _validate_edges(self, edges: Any) -> Dict[Any, List[Any]]:
        if edges is None:
            return {}
        if not isinstance(edges, dict):
            logging.error("%s: 'edges' must be a mapping, got %s", self.path, type(edges))
            return {}
        result: Dict[Any, List[Any]] = {}
        for src, targets in edges.items():
            if targets is None:
                targets = []
            elif not isinstance(targets, list):
                targets = [targets]
            result[src] = [t for t in targets if self._check_node(t)]
        return result

    def _check_node(self, node: Any) -> bool:
        if isinstance(node, Hashable):
            return True
        logging.error("%s: node %r is not hashable", self.path, node)
        return False
