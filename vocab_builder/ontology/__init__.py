"""Vocabulary metadata inference, term extraction and description lookup."""

from .metadata import (
    VocabularySpec,
    infer_name,
    infer_prefix,
    infer_vocabulary_spec,
    ontology_subjects,
)
from .terms import (
    COLLISION_POLICIES,
    DESCRIPTION_PREDICATES,
    TermEntry,
    clean_key,
    extract_terms,
    normalize_whitespace,
    resolve_description,
    sort_key,
    strip_control,
    sorted_terms,
    with_descriptions,
    wrap_description,
)

__all__ = [
    'VocabularySpec',
    'infer_name',
    'infer_prefix',
    'infer_vocabulary_spec',
    'ontology_subjects',
    'COLLISION_POLICIES',
    'DESCRIPTION_PREDICATES',
    'TermEntry',
    'clean_key',
    'extract_terms',
    'normalize_whitespace',
    'resolve_description',
    'sort_key',
    'strip_control',
    'sorted_terms',
    'with_descriptions',
    'wrap_description',
]
