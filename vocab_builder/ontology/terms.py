"""Term extraction and description lookup for vocabulary generation.

Terms are the URI subjects of the graph that live under the vocabulary
prefix. Each term gets a sanitized constant key and, where the graph has one,
a human-readable description taken from the first matching annotation
predicate in ``DESCRIPTION_PREDICATES``.
"""

from __future__ import annotations

import re
import textwrap
import unicodedata
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from rdflib import DC, DCTERMS, RDFS, SKOS, Graph, Literal, URIRef

from vocab_builder.errors import KeyCollisionError

if TYPE_CHECKING:
    from vocab_builder.logging import GenerationLog

COLLISION_POLICIES = ("overwrite", "error")

# Checked in order; the first predicate with a usable literal wins
DESCRIPTION_PREDICATES = (
    RDFS.comment,
    DCTERMS.description,
    DC.description,
    SKOS.definition,
    RDFS.label,
    DCTERMS.title,
    DC.title,
)

DESCRIPTION_WIDTH = 70

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class TermEntry:
    """One vocabulary term.

    Attributes:
        key: Sanitized constant name, unique within a TermTable
        uri: Full term URI (prefix + local_name)
        local_name: Part of the URI after the prefix, unsanitized
        description: Resolved description text, if any
    """

    key: str
    uri: str
    local_name: str
    description: Optional[str] = None


def clean_key(local_name: str) -> str:
    """Sanitize a local name into a constant key.

    '#' is dropped, '.' and '-' become '_'. Applying it twice gives the same
    result as applying it once.
    """
    return local_name.replace("#", "").replace(".", "_").replace("-", "_")


def sort_key(key: str) -> tuple[str, str]:
    """Case-insensitive ordering with the raw key as tie-break."""
    return key.casefold(), key


def extract_terms(
    graph: Graph,
    prefix: str,
    on_collision: str = "overwrite",
    log: Optional[GenerationLog] = None,
) -> dict[str, TermEntry]:
    """Collect the terms under ``prefix`` keyed by sanitized local name.

    Subjects are visited in URI order. When two URIs sanitize to the same key
    the later URI replaces the earlier one (``on_collision='overwrite'``) or a
    KeyCollisionError is raised (``on_collision='error'``).

    Args:
        graph: Loaded vocabulary graph
        prefix: Namespace URI every term starts with
        on_collision: 'overwrite' or 'error'
        log: Optional run log receiving collision events

    Returns:
        Dict of key -> TermEntry (descriptions not yet resolved)

    Raises:
        ValueError: If on_collision is not a known policy
        KeyCollisionError: On a key collision under the 'error' policy
    """
    if on_collision not in COLLISION_POLICIES:
        raise ValueError(
            f"on_collision must be one of {COLLISION_POLICIES}, got {on_collision!r}"
        )

    subjects = sorted(
        str(s) for s in set(graph.subjects())
        if isinstance(s, URIRef)
    )

    table: dict[str, TermEntry] = {}
    for uri in subjects:
        if not uri.startswith(prefix) or len(uri) == len(prefix):
            continue
        local_name = uri[len(prefix):]
        key = clean_key(local_name)

        existing = table.get(key)
        if existing is not None:
            if log is not None:
                log.on_key_collision(key, kept_uri=uri, dropped_uri=existing.uri)
            if on_collision == "error":
                raise KeyCollisionError(key, existing.uri, uri)

        table[key] = TermEntry(key=key, uri=uri, local_name=local_name)

    if log is not None:
        log.on_terms_extracted(prefix, len(table))
    return table


def sorted_terms(table: dict[str, TermEntry]) -> list[TermEntry]:
    """Terms in emission order."""
    return [table[k] for k in sorted(table, key=sort_key)]


def _literal_rank(literal: Literal, language: Optional[str]) -> tuple[int, str]:
    if language and literal.language and literal.language.lower() == language.lower():
        rank = 0
    elif literal.language is None:
        rank = 1
    else:
        rank = 2
    return rank, str(literal)


def resolve_description(
    graph: Graph,
    uri: str,
    language: Optional[str] = None,
) -> Optional[str]:
    """Find the description of a term.

    Args:
        graph: Loaded vocabulary graph
        uri: Term URI
        language: Preferred language tag for literals (e.g. 'en')

    Returns:
        Raw literal text of the first predicate with a non-blank literal, or None
    """
    subject = URIRef(uri)
    for predicate in DESCRIPTION_PREDICATES:
        literals = [
            o for o in graph.objects(subject, predicate)
            if isinstance(o, Literal) and str(o).strip()
        ]
        if literals:
            best = min(literals, key=lambda lit: _literal_rank(lit, language))
            return str(best)
    return None


def strip_control(text: str) -> str:
    """Drop control characters (NUL, ESC, ...) that are not whitespace."""
    return "".join(
        c for c in text
        if c.isspace() or unicodedata.category(c) != "Cc"
    )


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and drop other control characters."""
    return strip_control(_WHITESPACE.sub(" ", text)).strip()


def wrap_description(text: str, width: int = DESCRIPTION_WIDTH) -> list[str]:
    """Normalize whitespace and wrap to ``width`` columns without splitting words."""
    return textwrap.wrap(
        normalize_whitespace(text),
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
    )


def with_descriptions(
    graph: Graph,
    table: dict[str, TermEntry],
    language: Optional[str] = None,
) -> list[TermEntry]:
    """Sorted terms with their descriptions resolved."""
    return [
        TermEntry(
            key=entry.key,
            uri=entry.uri,
            local_name=entry.local_name,
            description=resolve_description(graph, entry.uri, language),
        )
        for entry in sorted_terms(table)
    ]
