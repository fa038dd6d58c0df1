"""Generator configuration loaded from YAML.

A config file pins down the choices otherwise made interactively or on the
command line, so a vocabulary can be regenerated the same way every time:

    source: vocab/ldp.ttl
    format: text/turtle
    prefix: http://www.w3.org/ns/ldp#
    name: LDP
    package: org.example.vocab
    output: generated/ldp.py
    on_collision: overwrite
    language: en
    log: generation.jsonl

Relative paths are resolved against the config file's directory.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from vocab_builder.errors import ConfigError
from vocab_builder.ontology.terms import COLLISION_POLICIES

# YAML key -> GeneratorConfig field
_KEYS = {
    'source': 'source',
    'format': 'format_hint',
    'prefix': 'prefix',
    'name': 'name',
    'package': 'package_name',
    'output': 'output',
    'output_dir': 'output_dir',
    'on_collision': 'on_collision',
    'language': 'language',
    'log': 'log_path',
}

_PATH_KEYS = ('source', 'output', 'output_dir', 'log_path')


@dataclass
class GeneratorConfig:
    """Settings for one generation run. None means 'not set here'."""

    source: Optional[Path] = None
    format_hint: Optional[str] = None
    prefix: Optional[str] = None
    name: Optional[str] = None
    package_name: Optional[str] = None
    output: Optional[Path] = None
    output_dir: Optional[Path] = None
    on_collision: Optional[str] = None
    language: Optional[str] = None
    log_path: Optional[Path] = None

    def merged(self, other: 'GeneratorConfig') -> 'GeneratorConfig':
        """Return a copy where values set in ``other`` take precedence."""
        changes = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) not in (None, "")
        }
        return replace(self, **changes)


def config_from_dict(data: dict[str, Any], base_dir: Optional[Path] = None) -> GeneratorConfig:
    """Build a GeneratorConfig from parsed YAML.

    Raises:
        ConfigError: On unknown keys, non-string values or an invalid collision policy
    """
    unknown = sorted(set(data) - set(_KEYS))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

    values = {}
    for key, value in data.items():
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigError(f"config key '{key}' must be a string, got {type(value).__name__}")
        attr = _KEYS[key]
        if attr in _PATH_KEYS:
            path = Path(value).expanduser()
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            values[attr] = path
        else:
            values[attr] = value

    policy = values.get('on_collision')
    if policy is not None and policy not in COLLISION_POLICIES:
        raise ConfigError(
            f"on_collision must be one of {', '.join(COLLISION_POLICIES)}, got '{policy}'"
        )
    return GeneratorConfig(**values)


def load_config(path: Union[str, Path]) -> GeneratorConfig:
    """Load a YAML generator config.

    Args:
        path: Path to the YAML file

    Returns:
        GeneratorConfig with paths resolved relative to the file

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the YAML is invalid or has unexpected content
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e

    if raw is None:
        return GeneratorConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return config_from_dict(raw, base_dir=path.parent)
