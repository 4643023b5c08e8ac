from __future__ import annotations

from typing import Optional

from ..types import Language
from .base import AUTO_GENERATED_NOTICE, C_STYLE_ESCAPES
from .registry import register

_RULE = "'" + "-" * 78


class VisualBasicDialect:
    name = "vb"
    language = Language.VB
    null_literal = "Nothing"
    escape_table = C_STYLE_ESCAPES

    def render_attribute(self, attribute_name: str, args: str) -> str:
        return f"<Assembly: {attribute_name}({args})>"

    def preamble(self) -> str:
        return (
            f"{_RULE}\n"
            "' <auto-generated>\n"
            f"'     {AUTO_GENERATED_NOTICE}\n"
            "' </auto-generated>\n"
            f"{_RULE}\n"
            "\n"
            "Option Strict Off\n"
            "Option Explicit On\n"
            "\n"
            "Imports System\n"
            "Imports System.Reflection"
        )

    def trailer(self) -> Optional[str]:
        return None


register(VisualBasicDialect())
