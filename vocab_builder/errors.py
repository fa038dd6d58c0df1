"""Error types raised by the vocabulary generation pipeline.

Missing input files surface as the builtin ``FileNotFoundError`` and unwritable
destinations as ``OSError``; everything else derives from ``VocabularyError``.
"""

from typing import Optional


class VocabularyError(Exception):
    """Base class for vocabulary generation failures."""


class ConfigError(VocabularyError, ValueError):
    """Raised when a generator config file is malformed."""


class UnknownFormatError(VocabularyError, ValueError):
    """Raised when no RDF parser matches the format hint or file extension."""

    def __init__(self, source: str, hint: Optional[str] = None):
        if hint:
            message = f"{source}: unknown RDF format '{hint}'"
        else:
            message = f"{source}: could not detect RDF format from file extension"
        super().__init__(message)
        self.source = source
        self.hint = hint


class ParseError(VocabularyError, ValueError):
    """Raised when the input document is not valid in its declared format."""

    def __init__(
        self,
        source: str,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        location = source
        if line is not None:
            location += f":{line}"
            if column is not None:
                location += f":{column}"
        super().__init__(f"{location}: {message}")
        self.source = source
        self.line = line
        self.column = column
        self.message = message


class GenerationError(VocabularyError):
    """Raised when a vocabulary file cannot be generated from the loaded graph."""


class KeyCollisionError(GenerationError):
    """Raised when two term URIs sanitize to the same constant name."""

    def __init__(self, key: str, first_uri: str, second_uri: str):
        super().__init__(
            f"constant '{key}' is ambiguous: {first_uri} and {second_uri} "
            f"both map to it"
        )
        self.key = key
        self.first_uri = first_uri
        self.second_uri = second_uri
