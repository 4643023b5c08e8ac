# src/codefrag/classifier.py
"""
Split an attribute's metadata into positional and named arguments.

Rules (applied in order):
- "_Parameter<N>" keys are positional; N must parse as an integer >= 1.
- every other key is a named-argument candidate.
- "<Name>_IsLiteral" keys are markers: when the value is "true"/"True" the
  named argument <Name> is emitted raw. Markers themselves are never emitted.
- named arguments are sorted by name (ordinal), independent of input order.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from .dialects.base import CodeDialect
from .errors import MalformedIndexError
from .escaping import escape_value
from .types import (
    LITERAL_SUFFIX,
    POSITIONAL_PREFIX,
    ClassifiedParameters,
    EscapedValue,
    NamedParameter,
    PositionalParameter,
)

_INDEX_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_LITERAL_TRUE = ("true", "True")

# well inside Int32; bounds the gap-filled slot list built by the assembler
MAX_POSITIONAL_INDEX = 2**16


def parse_index(key: str, *, attribute: Optional[str] = None) -> int:
    index_text = key[len(POSITIONAL_PREFIX):]
    if not _INDEX_RE.match(index_text):
        raise MalformedIndexError.for_key(key, index_text, attribute)
    index = int(index_text)
    if index < 1 or index > MAX_POSITIONAL_INDEX:
        raise MalformedIndexError.for_key(key, index_text, attribute)
    return index


def _literal_names(named: List[Tuple[str, EscapedValue]]) -> Set[str]:
    return {
        key[: -len(LITERAL_SUFFIX)]
        for key, value in named
        if key.endswith(LITERAL_SUFFIX) and value.raw in _LITERAL_TRUE
    }


def classify(
    parameters: Mapping[str, Any],
    dialect: CodeDialect,
    *,
    attribute: Optional[str] = None,
) -> ClassifiedParameters:
    positional: List[Tuple[int, str, EscapedValue]] = []
    named: List[Tuple[str, EscapedValue]] = []

    for key, raw in parameters.items():
        key = str(key)
        value = escape_value(raw, dialect, key=key, attribute=attribute)
        if key.startswith(POSITIONAL_PREFIX):
            positional.append((parse_index(key, attribute=attribute), key, value))
        else:
            named.append((key, value))

    literal = _literal_names(named)

    # duplicate indices (e.g. _Parameter1 and _Parameter01): last key wins
    by_index: Dict[int, EscapedValue] = {}
    for index, _, value in sorted(positional, key=lambda p: (p[0], p[1])):
        by_index[index] = value
    ordered = [PositionalParameter(index=i, value=v) for i, v in sorted(by_index.items())]

    named_params = sorted(
        (
            NamedParameter(name=key, value=value, is_literal=key in literal)
            for key, value in named
            if not key.endswith(LITERAL_SUFFIX)
        ),
        key=lambda p: p.name,
    )
    return ClassifiedParameters(ordered=ordered, named=named_params)
