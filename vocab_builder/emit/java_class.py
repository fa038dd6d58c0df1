"""Render a vocabulary as a Sesame-style Java constants class."""

import re
from typing import Optional

from vocab_builder.errors import GenerationError
from vocab_builder.ontology.metadata import VocabularySpec
from vocab_builder.ontology.terms import TermEntry, strip_control, wrap_description

JAVA_KEYWORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "_",
    # literals
    "true", "false", "null",
})

# Names the generated class (and its static block) defines itself
JAVA_RESERVED_NAMES = frozenset({"NAMESPACE", "PREFIX", "factory"})

_NON_JAVA_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]")


def java_identifier(key: str) -> str:
    """Map a term key to a Java identifier, the same way as python_identifier.

    Keywords, literals and names the class defines get a trailing '_';
    other invalid characters become '_' and a leading digit gets a '_' prefix.
    """
    ident = _NON_JAVA_IDENTIFIER.sub("_", key)
    if not ident or ident[0].isdigit():
        ident = "_" + ident
    if ident in JAVA_KEYWORDS or ident in JAVA_RESERVED_NAMES:
        ident += "_"
    return ident


def _assign_identifiers(terms: list[TermEntry]) -> list[tuple[str, TermEntry]]:
    seen: dict[str, str] = {}
    named = []
    for entry in terms:
        ident = java_identifier(entry.key)
        if ident in seen:
            raise GenerationError(
                f"term keys {seen[ident]!r} and {entry.key!r} both map to "
                f"Java name {ident!r}"
            )
        seen[ident] = entry.key
        named.append((ident, entry))
    return named


def _java_string(value: str) -> str:
    out = []
    for c in value.replace("\\", "\\\\").replace('"', '\\"'):
        # octal, since \u escapes are decoded before the lexer sees the literal
        out.append(f"\\{ord(c):03o}" if ord(c) < 0x20 else c)
    return '"' + "".join(out) + '"'


def _javadoc(value: str) -> str:
    # '*/' would close the comment early, and so would a \u002a/ escape
    return strip_control(value).replace("\\", "&#92;").replace("*/", "*&#47;")


def render_java_class(
    spec: VocabularySpec,
    terms: list[TermEntry],
    class_name: str,
    source: Optional[str] = None,
) -> str:
    """Render a Java class with one ``org.openrdf.model.URI`` constant per term.

    Args:
        spec: Finalized spec (prefix and name set)
        terms: Terms in emission order, descriptions resolved
        class_name: Java class name, normally the destination file stem
        source: Optional source file name noted in the class comment
    """
    out = []
    if spec.package_name:
        out.append(f"package {spec.package_name};")
        out.append("")
    out.append("import org.openrdf.model.URI;")
    out.append("import org.openrdf.model.ValueFactory;")
    out.append("import org.openrdf.model.impl.ValueFactoryImpl;")
    out.append("")
    out.append("/** ")
    out.append(f" * Namespace {_javadoc(spec.name or '')}")
    if source:
        out.append(" * <p>")
        out.append(f" * Generated by vocab-builder from {_javadoc(source)}.")
    out.append(" */")
    out.append(f"public class {class_name} {{")
    out.append("")

    out.append(f"\t/** {{@code {_javadoc(spec.prefix)}}} **/")
    out.append(f"\tpublic static final String NAMESPACE = {_java_string(spec.prefix)};")
    out.append("")
    out.append(f"\t/** {{@code {_javadoc(spec.lower_prefix)}}} **/")
    out.append(f"\tpublic static final String PREFIX = {_java_string(spec.lower_prefix)};")
    out.append("")

    named = _assign_identifiers(terms)
    for ident, entry in named:
        out.append("\t/**")
        out.append(f"\t * {{@code {_javadoc(entry.uri)}}}.")
        if entry.description:
            out.append("\t * <p>")
            for text in wrap_description(entry.description):
                out.append(f"\t * {_javadoc(text)}")
        out.append("\t *")
        out.append(f"\t * @see <a href=\"{_javadoc(entry.uri)}\">{_javadoc(entry.key)}</a>")
        out.append("\t */")
        out.append(f"\tpublic static final URI {ident};")
        out.append("")

    out.append("\tstatic {")
    out.append("\t\tValueFactory factory = ValueFactoryImpl.getInstance();")
    out.append("")
    for ident, entry in named:
        out.append(
            f"\t\t{ident} = factory.createURI({class_name}.NAMESPACE, "
            f"{_java_string(entry.local_name)});"
        )
    out.append("\t}")
    out.append("")
    out.append("}")
    return "\n".join(out) + "\n"
