"""Vocabulary builder: load a vocabulary file and generate its constants file.

Typical use:

    builder = VocabBuilder("ldp.ttl")
    builder.spec = builder.spec.with_overrides(package_name="org.example.vocab")
    builder.run(Path("generated/ldp.py"))
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from vocab_builder.emit import emit_vocabulary, finalize_spec
from vocab_builder.graph.loader import load_graph_with_format
from vocab_builder.ontology.metadata import (
    VocabularySpec,
    infer_vocabulary_spec,
    ontology_subjects,
)
from vocab_builder.ontology.terms import TermEntry, extract_terms, with_descriptions

if TYPE_CHECKING:
    from vocab_builder.logging import GenerationLog


class VocabBuilder:
    """Holds one loaded vocabulary graph and its generation settings.

    Attributes:
        source: Path of the vocabulary file
        graph: Loaded rdflib graph (read-only after construction)
        rdf_format: rdflib parser name the source was read with
        spec: Inferred VocabularySpec; replace it to apply overrides
        on_collision: Key collision policy, 'overwrite' or 'error'
        language: Preferred language tag for descriptions
    """

    def __init__(
        self,
        source: Union[str, Path],
        format_hint: Optional[str] = None,
        *,
        on_collision: str = "overwrite",
        language: Optional[str] = None,
        log: Optional[GenerationLog] = None,
    ):
        """Load the vocabulary and infer default prefix and name.

        Raises:
            FileNotFoundError: If ``source`` does not exist
            UnknownFormatError: If the format cannot be resolved
            ParseError: If the file is not valid RDF
        """
        self.source = Path(source)
        self.on_collision = on_collision
        self.language = language
        self.log = log

        self.graph, self.rdf_format = load_graph_with_format(self.source, format_hint)
        if log is not None:
            log.on_graph_loaded(str(self.source), self.rdf_format, len(self.graph))

        self.spec: VocabularySpec = infer_vocabulary_spec(self.graph, self.source)
        if log is not None:
            log.on_prefix_inferred(self.spec.prefix, ontology_subjects(self.graph))

    def terms(self) -> list[TermEntry]:
        """Sorted terms under the current prefix, with descriptions.

        Raises:
            GenerationError: If no prefix is set or keys collide under 'error'
        """
        spec = finalize_spec(self.spec, self.source)
        table = extract_terms(self.graph, spec.prefix, self.on_collision, self.log)
        return with_descriptions(self.graph, table, self.language)

    def run(self, output: Union[str, Path]) -> Path:
        """Generate the vocabulary file at ``output``.

        Args:
            output: Destination path ('.java' for a Java class, else a Python module)

        Returns:
            Path of the written file

        Raises:
            GenerationError: If no prefix is set or terms cannot be named
            OSError: If the destination cannot be written
        """
        output = Path(output)
        try:
            spec = finalize_spec(self.spec, output)
            table = extract_terms(self.graph, spec.prefix, self.on_collision, self.log)
            return emit_vocabulary(
                spec,
                self.graph,
                table,
                output,
                language=self.language,
                source=self.source.name,
                log=self.log,
            )
        except Exception as e:
            if self.log is not None:
                self.log.on_generation_failed(e)
            raise
