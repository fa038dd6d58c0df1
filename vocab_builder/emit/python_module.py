"""Render a vocabulary as an importable Python module of rdflib URIRef constants.

Layout of the generated module:

    \"\"\"Namespace <name>.\"\"\"           (package noted in the docstring)
    imports, __all__
    NAMESPACE = "<prefix>"
    PREFIX = "<name lowercased>"
    <Key>: URIRef                     one documented declaration per term
    _NS = Namespace(NAMESPACE)
    <Key> = _NS.term("<local name>")  bindings, same order
"""

import json
import keyword
import re
from typing import Optional

from vocab_builder.errors import GenerationError
from vocab_builder.ontology.metadata import VocabularySpec
from vocab_builder.ontology.terms import (
    TermEntry,
    normalize_whitespace,
    strip_control,
    wrap_description,
)

# Names the generated module defines itself
RESERVED_NAMES = frozenset({"NAMESPACE", "PREFIX", "Namespace", "URIRef", "_NS"})

_NON_IDENTIFIER = re.compile(r"\W")


def _is_dunder(ident: str) -> bool:
    # module attributes such as __all__ and __doc__ belong to Python
    return len(ident) > 4 and ident.startswith("__") and ident.endswith("__")


def python_identifier(key: str) -> str:
    """Map a term key to a Python identifier.

    Keywords, dunder names and names reserved by the generated module get a
    trailing '_'; other invalid characters become '_' and a leading digit
    gets a '_' prefix.

    Raises:
        GenerationError: If no valid identifier can be derived
    """
    ident = _NON_IDENTIFIER.sub("_", key)
    if not ident or ident[0].isdigit():
        ident = "_" + ident
    if keyword.iskeyword(ident) or ident in RESERVED_NAMES or _is_dunder(ident):
        ident += "_"
    if not ident.isidentifier():
        raise GenerationError(f"cannot derive a Python name for term key {key!r}")
    return ident


def _string(value: str) -> str:
    # JSON string escapes are valid Python string literal escapes
    return json.dumps(value, ensure_ascii=False)


def _docstring_text(value: str) -> str:
    return strip_control(value).replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def _comment_text(value: str) -> str:
    # a raw newline or NUL inside a comment breaks the module
    return normalize_whitespace(value)


def _assign_identifiers(terms: list[TermEntry]) -> list[tuple[str, TermEntry]]:
    seen: dict[str, str] = {}
    named = []
    for entry in terms:
        ident = python_identifier(entry.key)
        if ident in seen:
            raise GenerationError(
                f"term keys {seen[ident]!r} and {entry.key!r} both map to "
                f"Python name {ident!r}"
            )
        seen[ident] = entry.key
        named.append((ident, entry))
    return named


def render_python_module(
    spec: VocabularySpec,
    terms: list[TermEntry],
    source: Optional[str] = None,
) -> str:
    """Render the module text.

    Args:
        spec: Finalized spec (prefix and name set)
        terms: Terms in emission order, descriptions resolved
        source: Optional source file name noted in the docstring

    Returns:
        Python source text
    """
    named = _assign_identifiers(terms)
    lines = [f'"""Namespace {_docstring_text(spec.name or "")}.', ""]
    if spec.package_name:
        lines.append(f"Package: {_docstring_text(spec.package_name)}")
        lines.append("")
    if source:
        lines.append(f"Generated by vocab-builder from {_docstring_text(source)}.")
    else:
        lines.append("Generated by vocab-builder.")
    lines.append('"""')
    lines.append("")
    lines.append("from rdflib.namespace import Namespace")
    lines.append("from rdflib.term import URIRef")
    lines.append("")
    lines.append("__all__ = [")
    for ident in ["NAMESPACE", "PREFIX"] + [ident for ident, _ in named]:
        lines.append(f"    {_string(ident)},")
    lines.append("]")
    lines.append("")

    lines.append(f"#: ``{_comment_text(spec.prefix)}``")
    lines.append(f"NAMESPACE = {_string(spec.prefix)}")
    lines.append("")
    lines.append(f"#: ``{_comment_text(spec.lower_prefix)}``")
    lines.append(f"PREFIX = {_string(spec.lower_prefix)}")
    lines.append("")

    for ident, entry in named:
        lines.append(f"#: ``{_comment_text(entry.uri)}``")
        if entry.description:
            lines.append("#:")
            for text in wrap_description(entry.description):
                lines.append(f"#: {text}")
        lines.append("#:")
        lines.append(f"#: See {_comment_text(entry.uri)}")
        lines.append(f"{ident}: URIRef")
        lines.append("")

    lines.append("_NS = Namespace(NAMESPACE)")
    if named:
        lines.append("")
        for ident, entry in named:
            lines.append(f"{ident} = _NS.term({_string(entry.local_name)})")
    return "\n".join(lines) + "\n"
