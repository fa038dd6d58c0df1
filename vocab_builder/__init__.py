"""vocab_builder - Generate source-code constants from RDF vocabularies.

Loads an RDF vocabulary (Turtle, N3, RDF/XML, ...), infers its namespace and
display name, and writes a module exposing every term as a named constant.

Architecture:
- graph/: RDF format resolution and graph loading
- ontology/: prefix/name inference, term extraction, description lookup
- emit/: Python module and Java class renderers, atomic file output
- logging/: JSONL run log
- builder.py: VocabBuilder pipeline
- config.py: YAML generator config
- cli.py: command-line interface
"""

__version__ = "0.1.0"

from .builder import VocabBuilder
from .errors import (
    ConfigError,
    GenerationError,
    KeyCollisionError,
    ParseError,
    UnknownFormatError,
    VocabularyError,
)
from .ontology import TermEntry, VocabularySpec, clean_key

__all__ = [
    "VocabBuilder",
    "VocabularySpec",
    "TermEntry",
    "clean_key",
    "VocabularyError",
    "ConfigError",
    "UnknownFormatError",
    "ParseError",
    "GenerationError",
    "KeyCollisionError",
]
