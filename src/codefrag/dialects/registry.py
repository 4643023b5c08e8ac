from __future__ import annotations

from typing import Dict

from ..errors import ConfigurationError
from ..types import Language
from .base import CodeDialect

_REGISTRY: Dict[Language, CodeDialect] = {}


def register(dialect: CodeDialect) -> None:
    lang = getattr(dialect, "language", None)
    if not isinstance(lang, Language):
        raise ValueError("Dialect must define a .language from the Language enum")
    _REGISTRY[lang] = dialect


def get(language: "str | Language") -> CodeDialect:
    lang = Language.parse(language)
    if lang not in _REGISTRY:
        raise ConfigurationError.unknown_language(language)
    return _REGISTRY[lang]


def available() -> Dict[Language, CodeDialect]:
    return dict(_REGISTRY)
