"""Graph loading and RDF format resolution."""

from .loader import MIME_ALIASES, load_graph, load_graph_with_format, resolve_format

__all__ = [
    'MIME_ALIASES',
    'load_graph',
    'load_graph_with_format',
    'resolve_format',
]
