from __future__ import annotations

from typing import Mapping, Optional, Protocol

from ..types import Language


# One escape table for every language, matching the MSBuild WriteCodeFragment
# task. VB has no backslash escapes but shares it.
C_STYLE_ESCAPES: Mapping[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "'": "\\'",
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
}

AUTO_GENERATED_NOTICE = "Generated by the codefrag WriteCodeFragment task."


class CodeDialect(Protocol):
    name: str
    language: Language
    null_literal: str
    escape_table: Mapping[str, str]

    def render_attribute(self, attribute_name: str, args: str) -> str: ...
    def preamble(self) -> str: ...
    def trailer(self) -> Optional[str]: ...
