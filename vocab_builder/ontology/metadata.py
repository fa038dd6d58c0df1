"""Vocabulary metadata: namespace prefix and display name inference.

The prefix comes from an ``owl:Ontology`` subject in the graph; the display
name comes from the source file name. Either may be overridden before
generation.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from rdflib import Graph, OWL, RDF, URIRef


@dataclass
class VocabularySpec:
    """Run configuration for one generated vocabulary file."""

    name: Optional[str] = None
    prefix: Optional[str] = None
    package_name: Optional[str] = None

    def with_overrides(
        self,
        *,
        name: Optional[str] = None,
        prefix: Optional[str] = None,
        package_name: Optional[str] = None,
    ) -> 'VocabularySpec':
        """Return a copy where every non-empty override replaces the current value."""
        changes = {
            field: value
            for field, value in (
                ('name', name),
                ('prefix', prefix),
                ('package_name', package_name),
            )
            if value is not None and value.strip()
        }
        return replace(self, **changes)

    @property
    def lower_prefix(self) -> str:
        """Short lowercase prefix label, e.g. 'foaf' for name 'FOAF'."""
        return (self.name or "").lower()


def ontology_subjects(graph: Graph) -> list[str]:
    """List URI subjects typed owl:Ontology, sorted by string value."""
    return sorted(
        str(s) for s in set(graph.subjects(RDF.type, OWL.Ontology))
        if isinstance(s, URIRef)
    )


def infer_prefix(graph: Graph) -> Optional[str]:
    """Infer the vocabulary namespace from its owl:Ontology declaration.

    When several ontology subjects exist the lexicographically smallest is
    used so repeated runs agree.

    Args:
        graph: Loaded vocabulary graph

    Returns:
        Namespace URI string, or None if the graph declares no ontology
    """
    candidates = ontology_subjects(graph)
    return candidates[0] if candidates else None


def infer_name(path: Union[str, Path]) -> str:
    """Derive a display name from a file name: 'foaf.rdf' -> 'Foaf'."""
    name = Path(path).name
    if "." in name:
        name = name[:name.rindex(".")]
    return name[:1].upper() + name[1:]


def infer_vocabulary_spec(graph: Graph, path: Union[str, Path]) -> VocabularySpec:
    """Build the default VocabularySpec for a loaded vocabulary file."""
    return VocabularySpec(name=infer_name(path), prefix=infer_prefix(graph))
