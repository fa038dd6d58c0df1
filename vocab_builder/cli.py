#!/usr/bin/env python
"""Vocabulary builder CLI.

Usage:
    vocab-builder generate [FILE] [options]
    vocab-builder inspect [FILE] [options]

Examples:
    # Generate ldp.py next to the current directory
    vocab-builder generate ldp.ttl

    # Explicit prefix and a Java class
    vocab-builder generate foaf.rdf --prefix http://xmlns.com/foaf/0.1/ \\
        --package org.example.vocab --output gen/FOAF.java

    # Ask for prefix, name, package and output folder
    vocab-builder generate ldp.ttl --interactive

    # Settings from a YAML file (flags still win)
    vocab-builder generate --config vocab.yaml

    # Show the terms that would be generated
    vocab-builder inspect ldp.ttl
"""

import argparse
import sys
import uuid
from pathlib import Path
from typing import Callable, Optional

from vocab_builder.builder import VocabBuilder
from vocab_builder.config import GeneratorConfig, load_config
from vocab_builder.emit import java_identifier, python_identifier
from vocab_builder.errors import VocabularyError
from vocab_builder.logging import GenerationLog
from vocab_builder.ontology.terms import COLLISION_POLICIES, wrap_description

DEFAULT_MIME_TYPE = "application/rdf+xml"

TARGET_SUFFIXES = {"python": ".py", "java": ".java"}


def guess_mime_type(path: str) -> str:
    """Guess a MIME type from the file extension, defaulting to RDF/XML."""
    suffix = Path(path).suffix.lower()
    if suffix == ".ttl":
        return "text/turtle"
    if suffix == ".n3":
        return "text/n3"
    return DEFAULT_MIME_TYPE


def prompt(label: str, default: Optional[str], input_fn: Callable[[str], str]) -> Optional[str]:
    """Ask for a value showing the current default; empty input keeps the default."""
    answer = input_fn(f"insert {label} [{default or ''}] : ").strip()
    return answer or default


def config_from_args(args) -> GeneratorConfig:
    """Settings given on the command line."""
    return GeneratorConfig(
        source=Path(args.file) if args.file else None,
        format_hint=args.format,
        prefix=args.prefix,
        name=args.name,
        package_name=getattr(args, 'package', None),
        output=Path(args.output) if getattr(args, 'output', None) else None,
        output_dir=Path(args.output_dir) if getattr(args, 'output_dir', None) else None,
        on_collision=args.on_collision,
        language=args.language,
        log_path=Path(args.log) if getattr(args, 'log', None) else None,
    )


def resolve_config(args) -> GeneratorConfig:
    """Merge the config file (if any) with command line flags, flags winning."""
    config = GeneratorConfig()
    if args.config:
        config = load_config(args.config)
    return config.merged(config_from_args(args))


def open_builder(config: GeneratorConfig, log: Optional[GenerationLog] = None) -> VocabBuilder:
    """Load the vocabulary named by ``config`` and apply its overrides."""
    if config.source is None:
        raise VocabularyError("no vocabulary file given (pass FILE or set 'source' in the config)")

    format_hint = config.format_hint or guess_mime_type(str(config.source))
    builder = VocabBuilder(
        config.source,
        format_hint,
        on_collision=config.on_collision or "overwrite",
        language=config.language,
        log=log,
    )
    builder.spec = builder.spec.with_overrides(
        prefix=config.prefix,
        name=config.name,
        package_name=config.package_name,
    )
    return builder


def default_output(builder: VocabBuilder, output_dir: Optional[Path], target: str) -> Path:
    name = builder.spec.name or builder.source.stem
    # the file stem doubles as the module or class name
    if target == "python":
        name = python_identifier(name.lower())
    else:
        name = java_identifier(name)
    return (output_dir or Path(".")) / f"{name}{TARGET_SUFFIXES[target]}"


def generate_command(args, input_fn: Callable[[str], str] = input) -> int:
    """Generate a vocabulary file."""
    log = None
    try:
        config = resolve_config(args)
        if config.log_path:
            log = GenerationLog(config.log_path, run_id=f"vocab-{uuid.uuid4().hex[:8]}")

        builder = open_builder(config, log)
        output_dir = config.output_dir

        if args.interactive:
            spec = builder.spec
            builder.spec = spec.with_overrides(
                prefix=prompt("url-prefix", spec.prefix, input_fn),
                name=prompt("class name", spec.name, input_fn),
                package_name=prompt("package name", spec.package_name, input_fn),
            )
            folder = prompt("output folder", str(output_dir or "."), input_fn)
            output_dir = Path(folder)

        output = config.output
        if output is None or args.interactive:
            output = default_output(builder, output_dir, args.target)

        written = builder.run(output)
        print(f"*** file created: '{written}' ***")
        return 0

    except (VocabularyError, OSError) as e:
        print(f"Error: {e}")
        return 1
    finally:
        if log is not None:
            log.close()


def inspect_command(args) -> int:
    """Print the inferred settings and the term table without writing anything."""
    try:
        config = resolve_config(args)
        builder = open_builder(config)
        terms = builder.terms()
    except (VocabularyError, OSError) as e:
        print(f"Error: {e}")
        return 1

    spec = builder.spec
    print(f"Source: {builder.source}")
    print(f"Prefix: {spec.prefix}")
    print(f"Name: {spec.name}")
    if spec.package_name:
        print(f"Package: {spec.package_name}")
    print(f"Terms: {len(terms)}")
    print("-" * 50)

    for entry in terms:
        print(f"  {entry.key}  <{entry.uri}>")
        if entry.description:
            wrapped = wrap_description(entry.description)
            if wrapped:
                print(f"      {wrapped[0]}")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('file', nargs='?', default=None,
                        help='Vocabulary file (TTL, N3, RDF/XML, ...)')
    parser.add_argument('--format', '-f', default=None,
                        help='MIME type or rdflib format name (default: guessed from extension)')
    parser.add_argument('--prefix', '-p', default=None,
                        help='Namespace URI (default: owl:Ontology subject)')
    parser.add_argument('--name', '-n', default=None,
                        help='Vocabulary name (default: capitalized file name)')
    parser.add_argument('--config', '-c', default=None,
                        help='YAML config file; command line flags take precedence')
    parser.add_argument('--on-collision', choices=COLLISION_POLICIES, default=None,
                        help='What to do when two URIs map to one constant (default: overwrite)')
    parser.add_argument('--language', '-l', default=None,
                        help='Preferred language tag for descriptions (e.g. en)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vocab-builder',
        description='RDF Namespace Constants Constructor',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    generate_parser = subparsers.add_parser('generate', help='Generate a vocabulary file')
    _add_common_arguments(generate_parser)
    generate_parser.add_argument('--package', default=None,
                                 help='Package name recorded in the generated file')
    generate_parser.add_argument('--output', '-o', default=None,
                                 help='Output file (.java for a Java class, else Python)')
    generate_parser.add_argument('--output-dir', '-d', default=None,
                                 help='Output folder when --output is not given (default: .)')
    generate_parser.add_argument('--target', choices=sorted(TARGET_SUFFIXES), default='python',
                                 help='Language for the default output file name (default: python)')
    generate_parser.add_argument('--interactive', '-i', action='store_true',
                                 help='Prompt for prefix, name, package and output folder')
    generate_parser.add_argument('--log', default=None,
                                 help='Append JSONL run events to this file')

    inspect_parser = subparsers.add_parser('inspect', help='List the terms that would be generated')
    _add_common_arguments(inspect_parser)
    inspect_parser.add_argument('--package', default=None,
                                help='Package name')

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'generate':
        return generate_command(args)
    elif args.command == 'inspect':
        return inspect_command(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
