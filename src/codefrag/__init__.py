"""Assembly-level attribute source generation for F#, C# and VB."""

from .assembler import assemble
from .classifier import classify
from .emitter import FragmentResult, render_attribute, resolve_output_path, synthesize, write_code_fragment
from .errors import (
    ConfigurationError,
    ExitCode,
    FragmentException,
    FragmentProblem,
    MalformedIndexError,
    OutputLocationError,
    UnsupportedValueError,
)
from .escaping import escape_string, escape_value
from .types import AttributeSpec, EscapedValue, Language, NamedParameter, PositionalParameter

__all__ = [
    "AttributeSpec",
    "ConfigurationError",
    "EscapedValue",
    "ExitCode",
    "FragmentException",
    "FragmentProblem",
    "FragmentResult",
    "Language",
    "MalformedIndexError",
    "NamedParameter",
    "OutputLocationError",
    "PositionalParameter",
    "UnsupportedValueError",
    "assemble",
    "classify",
    "escape_string",
    "escape_value",
    "render_attribute",
    "resolve_output_path",
    "synthesize",
    "write_code_fragment",
]
