"""Generic directed graphs with traversal and unweighted path finding."""

from digraph.graph import DirectedGraph, GraphKernel, GraphSecondary

__all__ = ["DirectedGraph", "GraphKernel", "GraphSecondary"]
