"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from collections.abc import Hashable
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple

import yaml

from digraph.config import GraphConfig
from digraph.graph import DirectedGraph
from digraph.loader import load_graph
from digraph.logs import fatal, setup_logging


def main(argv: Optional[Sequence[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    setup_logging(sys.stderr, args.verbose or 0, args.keep_going)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="digraph", description="query directed graphs described in YAML"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    def add_graph_command(name: str, summary: str) -> ArgumentParser:
        # The graph file comes first, before any node arguments.
        subparser = commands.add_parser(name, help=summary)
        subparser.add_argument("file", type=Path, help="graph file (YAML)")
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )
        return subparser

    add_graph_command("nodes", "list all nodes")

    parser_edges = add_graph_command("edges", "show adjacency lists")
    parser_edges.add_argument(
        "node", nargs="?", help="only show the neighbors of this node"
    )

    parser_dfs = add_graph_command("dfs", "depth-first traversal")
    parser_dfs.add_argument("start", help="node to start from")

    parser_bfs = add_graph_command("bfs", "breadth-first traversal")
    parser_bfs.add_argument("start", help="node to start from")

    parser_path = add_graph_command("path", "shortest path between nodes")
    parser_path.add_argument("start", help="first node of the path")
    parser_path.add_argument("end", help="last node of the path")

    return parser, commands.choices


def open_graph(path: Path) -> DirectedGraph[Any]:
    """Load and validate a graph file.

    Exits with a fatal log if the file cannot be read at all.
    """
    cfg = GraphConfig.load(path)
    if cfg is None:
        fatal("no graph to load from %s", path)
    cfg.validate()
    logging.debug("graph config: %r", cfg)
    return load_graph(cfg)


def parse_node(s: str) -> Any:
    """Parse a node given on the command line.

    Uses YAML scalar rules so that values match those loaded from graph files.
    Falls back to the raw string if the result is not a usable node.
    """
    try:
        node = yaml.safe_load(s)
    except yaml.YAMLError:
        return s
    if not isinstance(node, Hashable):
        logging.error("node %r is not hashable", s)
        return s
    return node


def print_nodes(nodes: Iterable[Any]):
    for node in nodes:
        print(node)


def command_nodes(args: Namespace):
    graph = open_graph(args.file)
    print_nodes(graph.get_nodes())


def command_edges(args: Namespace):
    graph = open_graph(args.file)
    if args.node is None:
        graph.dump()
        return
    node = parse_node(args.node)
    if node not in graph:
        logging.warning("node %r not in graph", node)
    print_nodes(graph.get_edges(node))


def command_dfs(args: Namespace):
    graph = open_graph(args.file)
    print_nodes(graph.traverse_dfs(parse_node(args.start)))


def command_bfs(args: Namespace):
    graph = open_graph(args.file)
    print_nodes(graph.traverse_bfs(parse_node(args.start)))


def command_path(args: Namespace):
    graph = open_graph(args.file)
    start = parse_node(args.start)
    end = parse_node(args.end)
    path = graph.find_path(start, end)
    if not path:
        logging.warning("no path from %r to %r", start, end)
    print_nodes(path)
