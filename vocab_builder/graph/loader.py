"""Load a serialized RDF vocabulary into an in-memory rdflib graph."""

from pathlib import Path
from typing import Optional, Union
from xml.sax import SAXParseException

from rdflib import Graph, plugin
from rdflib.exceptions import ParserError
from rdflib.parser import Parser
from rdflib.plugin import PluginException
from rdflib.util import guess_format

from vocab_builder.errors import ParseError, UnknownFormatError

# MIME types seen in the wild that rdflib does not register a parser under
MIME_ALIASES = {
    "application/x-turtle": "turtle",
    "text/rdf+n3": "n3",
    "application/xml": "xml",
    "text/xml": "xml",
    "text/plain": "nt",
    "application/json": "json-ld",
}


def _parser_exists(name: str) -> bool:
    try:
        plugin.get(name, Parser)
    except PluginException:
        return False
    return True


def resolve_format(path: Union[str, Path], hint: Optional[str] = None) -> str:
    """Resolve the rdflib parser name for a vocabulary file.

    Args:
        path: Path to the vocabulary file
        hint: Optional MIME type (e.g. 'text/turtle') or rdflib format name (e.g. 'xml')

    Returns:
        rdflib parser name accepted by ``Graph.parse(format=...)``

    Raises:
        UnknownFormatError: If the hint matches no parser, or no hint was given
            and the extension is not recognized
    """
    source = str(path)
    if hint:
        # Drop MIME parameters such as '; charset=utf-8'
        name = hint.split(";", 1)[0].strip().lower()
        name = MIME_ALIASES.get(name, name)
        if not _parser_exists(name):
            raise UnknownFormatError(source, hint)
        return name

    guessed = guess_format(source)
    if guessed is None or not _parser_exists(guessed):
        raise UnknownFormatError(source)
    return guessed


def _location(exc: Exception) -> tuple[Optional[int], Optional[int]]:
    """Extract (line, column) from an rdflib or SAX parse exception."""
    if isinstance(exc, SAXParseException):
        return exc.getLineNumber(), exc.getColumnNumber()
    # notation3.BadSyntax counts lines from zero
    lines = getattr(exc, "lines", None)
    if isinstance(lines, int):
        return lines + 1, None
    lineno = getattr(exc, "lineno", None)
    if isinstance(lineno, int):
        return lineno, getattr(exc, "offset", None)
    return None, None


def load_graph_with_format(
    path: Union[str, Path],
    format_hint: Optional[str] = None,
) -> tuple[Graph, str]:
    """Parse a vocabulary file into a new graph, reporting the parser used.

    The whole document is read before the graph is returned; a document that
    fails to parse yields no graph at all.

    Args:
        path: Path to vocabulary file (TTL, N3, RDF/XML, ...)
        format_hint: Optional MIME type or rdflib format name; guessed from
            the file extension when omitted

    Returns:
        Tuple of (graph, rdf_format)
        - graph: Fully loaded rdflib Graph
        - rdf_format: rdflib parser name the format resolved to

    Raises:
        FileNotFoundError: If the path does not exist
        UnknownFormatError: If no parser can be resolved
        ParseError: If the document is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Vocabulary not found: {path}")

    rdf_format = resolve_format(path, format_hint)

    graph = Graph()
    try:
        with path.open("rb") as stream:
            graph.parse(file=stream, format=rdf_format)
    except (SyntaxError, SAXParseException, ParserError, ValueError) as e:
        line, column = _location(e)
        message = getattr(e, "message", None) or str(e)
        raise ParseError(str(path), str(message).strip(), line, column) from e

    return graph, rdf_format


def load_graph(path: Union[str, Path], format_hint: Optional[str] = None) -> Graph:
    """Parse a vocabulary file into a new graph.

    Same contract as load_graph_with_format, without the resolved format.
    """
    graph, _ = load_graph_with_format(path, format_hint)
    return graph
