from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping

from .errors import ConfigurationError


POSITIONAL_PREFIX = "_Parameter"
LITERAL_SUFFIX = "_IsLiteral"


class Language(str, Enum):
    FSHARP = "F#"
    CSHARP = "C#"
    VB = "VB"

    @classmethod
    def parse(cls, token: "str | Language") -> "Language":
        if isinstance(token, cls):
            return token
        k = str(token or "").strip().upper()
        for lang in cls:
            if lang.value == k:
                return lang
        raise ConfigurationError.unknown_language(token)


@dataclass(frozen=True)
class EscapedValue:
    escaped: str  # safe to embed in source as a string literal
    raw: str      # original textual form, used for literal overrides


@dataclass(frozen=True)
class PositionalParameter:
    index: int  # 1-based
    value: EscapedValue


@dataclass(frozen=True)
class NamedParameter:
    name: str
    value: EscapedValue
    is_literal: bool = False

    @property
    def rendered(self) -> str:
        return self.value.raw if self.is_literal else self.value.escaped


@dataclass(frozen=True)
class ClassifiedParameters:
    ordered: List[PositionalParameter] = field(default_factory=list)
    named: List[NamedParameter] = field(default_factory=list)


@dataclass(frozen=True)
class AttributeSpec:
    """
    One assembly-level attribute application.

    parameters maps metadata keys to raw values:
      - "_Parameter<N>" keys are positional arguments (1-based)
      - "<Name>_IsLiteral" keys mark <Name> as a raw literal
      - every other key is a named argument
    """
    name: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
