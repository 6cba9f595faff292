"""Persistence: reading graph documents from disk."""

from .graph_document import GraphDocument, build_symbol_graph, load_graph, parse_graph_document

__all__ = ["GraphDocument", "build_symbol_graph", "load_graph", "parse_graph_document"]
