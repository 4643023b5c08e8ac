from __future__ import annotations

from typing import Optional

from ..types import Language
from .base import AUTO_GENERATED_NOTICE, C_STYLE_ESCAPES
from .registry import register


class FSharpDialect:
    name = "fsharp"
    language = Language.FSHARP
    null_literal = "null"
    escape_table = C_STYLE_ESCAPES

    def render_attribute(self, attribute_name: str, args: str) -> str:
        return f"[<assembly: {attribute_name}({args})>]"

    def preamble(self) -> str:
        return (
            "// <auto-generated>\n"
            f"//     {AUTO_GENERATED_NOTICE}\n"
            "// </auto-generated>\n"
            "namespace FSharp\n"
            "\n"
            "open System\n"
            "open System.Reflection\n"
        )

    def trailer(self) -> Optional[str]:
        # an F# namespace fragment holding only attributes needs a body
        return "do()"


register(FSharpDialect())
