"""
Manifest loading for the codefrag CLI.

Loads YAML/JSON manifests and returns typed config objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigurationError
from .types import AttributeSpec, Language


@dataclass(frozen=True)
class FragmentConfig:
    """Loaded manifest: which attributes to emit, in which language, and where."""

    language: Language
    attributes: List[AttributeSpec]
    output_file: Optional[str] = None
    output_directory: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> FragmentConfig:
        if "language" not in d:
            raise ConfigurationError.invalid_manifest("manifest: missing required key 'language'", path="language")
        language = Language.parse(str(d["language"]))

        raw_attrs = d.get("attributes") or []
        if not isinstance(raw_attrs, list):
            raise ConfigurationError.invalid_manifest("manifest: 'attributes' must be a list", path="attributes")

        attributes: List[AttributeSpec] = []
        for i, a in enumerate(raw_attrs):
            where = f"attributes[{i}]"
            if not isinstance(a, dict):
                raise ConfigurationError.invalid_manifest(f"{where}: must be an object", path=where)
            name = a.get("name")
            if not name or not isinstance(name, str):
                raise ConfigurationError.invalid_manifest(f"{where}: 'name' must be a non-empty string", path=where)
            params = a.get("parameters") or {}
            if not isinstance(params, dict):
                raise ConfigurationError.invalid_manifest(
                    f"{where}: 'parameters' must be an object", path=f"{where}.parameters"
                )
            attributes.append(AttributeSpec(name=name, parameters={str(k): v for k, v in params.items()}))

        out = d.get("output_file")
        out_dir = d.get("output_directory")
        return cls(
            language=language,
            attributes=attributes,
            output_file=str(out) if out else None,
            output_directory=str(out_dir) if out_dir else None,
        )


def load_fragment_config(path: str) -> FragmentConfig:
    """
    Load a manifest from a YAML or JSON file.

    The file must contain a mapping with 'language' and an 'attributes' list;
    'output_file' and 'output_directory' are optional and may be overridden
    on the command line.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigurationError.invalid_manifest(f"Manifest not found: {path}", path=str(path))
    try:
        obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError.invalid_manifest(f"Failed to parse manifest: {path}", path=str(path), error=repr(e))
    if not isinstance(obj, dict):
        raise ConfigurationError.invalid_manifest(
            f"Manifest must be a YAML/JSON object, got {type(obj).__name__}", path=str(path)
        )
    return FragmentConfig.from_dict(obj)
