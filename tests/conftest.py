"""Shared test fixtures for the vocab_builder test suite."""

import pytest
from pathlib import Path
from tempfile import TemporaryDirectory
from rdflib import Graph, Namespace, Literal, URIRef, OWL, RDF, RDFS, SKOS


EX = Namespace("http://example.org/ns#")


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def tmp_test_dir():
    """Create a temporary directory for test artifacts."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ============================================================================
# Vocabulary File Fixtures
# ============================================================================

FRUIT_TTL = """\
@prefix ex: <http://example.org/ns#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix skos: <http://www.w3.org/2004/02/skos/core#> .

<http://example.org/ns#> a owl:Ontology ;
    rdfs:label "Fruit vocabulary" .

ex:Thing a owl:Class ;
    rdfs:comment "A thing." .

ex:has-value a owl:DatatypeProperty ;
    rdfs:label "has value" .

ex:apple a owl:Class ;
    rdfs:label "Apple" ;
    rdfs:comment \"\"\"A   fruit
      that grows on trees.\"\"\" .

ex:Banana a owl:Class ;
    skos:definition "A long yellow fruit." .

ex:cherry a owl:Class .

<http://other.org/vocab#Unrelated> a owl:Class .
"""

THING_TTL = """\
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .

<http://example.org/ns#> a owl:Ontology .

<http://example.org/ns#Thing> rdfs:comment "A thing." .
"""

NO_ONTOLOGY_TTL = """\
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .

<http://example.org/ns#Thing> rdfs:comment "A thing." .
"""

THING_RDF_XML = """\
<?xml version="1.0"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:rdfs="http://www.w3.org/2000/01/rdf-schema#"
         xmlns:owl="http://www.w3.org/2002/07/owl#">
  <owl:Ontology rdf:about="http://example.org/ns#"/>
  <owl:Class rdf:about="http://example.org/ns#Thing">
    <rdfs:comment>A thing.</rdfs:comment>
  </owl:Class>
</rdf:RDF>
"""


@pytest.fixture
def write_vocab(tmp_test_dir):
    """Return a helper writing text to a file in the temp directory."""
    def _write(filename: str, text: str) -> Path:
        path = tmp_test_dir / filename
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def fruit_ttl(write_vocab):
    """Turtle vocabulary with an ontology subject and mixed annotations."""
    return write_vocab("fruit.ttl", FRUIT_TTL)


@pytest.fixture
def thing_ttl(write_vocab):
    """Minimal vocabulary: one ontology subject, one commented term."""
    return write_vocab("test.ttl", THING_TTL)


@pytest.fixture
def no_ontology_ttl(write_vocab):
    """Vocabulary without an owl:Ontology declaration."""
    return write_vocab("plain.ttl", NO_ONTOLOGY_TTL)


@pytest.fixture
def thing_rdf_xml(write_vocab):
    """RDF/XML version of the minimal vocabulary."""
    return write_vocab("test.rdf", THING_RDF_XML)


# ============================================================================
# Graph Fixtures
# ============================================================================

@pytest.fixture
def empty_graph():
    """Create an empty RDF graph."""
    return Graph()


@pytest.fixture
def fruit_graph():
    """In-memory graph equivalent to a small vocabulary."""
    g = Graph()
    g.add((URIRef(str(EX)), RDF.type, OWL.Ontology))
    g.add((EX.Thing, RDF.type, OWL.Class))
    g.add((EX.Thing, RDFS.comment, Literal("A thing.")))
    g.add((EX["has-value"], RDFS.label, Literal("has value")))
    g.add((EX.Banana, SKOS.definition, Literal("A long yellow fruit.")))
    return g
