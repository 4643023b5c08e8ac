"""Per-language attribute templates, registered on import."""

from . import csharp, fsharp, vb  # noqa: F401
from .base import CodeDialect
from .registry import available, get, register

__all__ = ["CodeDialect", "available", "get", "register"]
