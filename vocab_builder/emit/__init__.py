"""Source file emitters for generated vocabularies.

The target language follows the destination suffix: ``.java`` renders a Java
constants class, anything else a Python module.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, Union

from rdflib import Graph

from vocab_builder.errors import GenerationError
from vocab_builder.ontology.metadata import VocabularySpec
from vocab_builder.ontology.terms import TermEntry, with_descriptions

from .java_class import java_identifier, render_java_class
from .python_module import python_identifier, render_python_module
from .writer import write_atomic

if TYPE_CHECKING:
    from vocab_builder.logging import GenerationLog


def emitter_for(output: Union[str, Path]) -> Callable[..., str]:
    """Pick the renderer for a destination path."""
    output = Path(output)
    if output.suffix == ".java":
        class_name = output.stem

        def render_java(spec, terms, source=None):
            return render_java_class(spec, terms, class_name, source=source)

        return render_java
    return render_python_module


def finalize_spec(spec: VocabularySpec, output: Union[str, Path]) -> VocabularySpec:
    """Check the spec is complete for ``output`` and fill in a default name.

    Raises:
        GenerationError: If no prefix is set
    """
    if not spec.prefix or not spec.prefix.strip():
        raise GenerationError("could not detect prefix, please set explicitly")
    if not spec.name or not spec.name.strip():
        return spec.with_overrides(name=Path(output).stem)
    return spec


def emit_vocabulary(
    spec: VocabularySpec,
    graph: Graph,
    table: dict[str, TermEntry],
    output: Union[str, Path],
    *,
    language: Optional[str] = None,
    source: Optional[str] = None,
    log: Optional[GenerationLog] = None,
) -> Path:
    """Render the vocabulary and write it to ``output``.

    The file is rendered completely in memory first, then written atomically,
    so a failure at any point leaves no new file behind.

    Args:
        spec: Vocabulary spec; prefix must be set
        graph: Graph the terms were extracted from (for descriptions)
        table: Term table from extract_terms
        output: Destination path; '.java' selects the Java renderer
        language: Preferred description language tag
        source: Source file name recorded in the generated header
        log: Optional run log

    Returns:
        Path of the written file

    Raises:
        GenerationError: If the prefix is missing or terms cannot be named
        OSError: If the destination cannot be written
    """
    output = Path(output)
    spec = finalize_spec(spec, output)
    terms = with_descriptions(graph, table, language)
    text = emitter_for(output)(spec, terms, source=source)
    write_atomic(output, text)
    if log is not None:
        log.on_file_written(str(output), len(terms))
    return output


__all__ = [
    'emit_vocabulary',
    'emitter_for',
    'finalize_spec',
    'java_identifier',
    'python_identifier',
    'render_java_class',
    'render_python_module',
    'write_atomic',
]
