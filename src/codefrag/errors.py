from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


class ExitCode(int, Enum):
    OK = 0
    CONFIG_INVALID = 10
    INPUT_INVALID = 20
    OUTPUT_ERROR = 30
    INTERNAL_ERROR = 50


@dataclass(frozen=True)
class FragmentProblem:
    code: str                 # stable machine code, e.g. "CODEFRAG_UNKNOWN_LANGUAGE"
    category: str             # "config" | "input" | "output" | "internal"
    message: str              # short human message
    details: Dict[str, Any]   # offending key/index/attribute for diagnosis
    remediation: Optional[str] = None  # actionable next step


class FragmentException(Exception):
    default_exit_code = ExitCode.INTERNAL_ERROR

    def __init__(
        self,
        problem: FragmentProblem,
        exit_code: Optional[ExitCode] = None,
        *,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(problem.message)
        self.problem = problem
        self.exit_code = exit_code if exit_code is not None else self.default_exit_code
        self.cause = cause


class ConfigurationError(FragmentException):
    """Unrecognized language selector or an invalid manifest."""

    default_exit_code = ExitCode.CONFIG_INVALID

    @classmethod
    def unknown_language(cls, token: Any) -> "ConfigurationError":
        return cls(
            FragmentProblem(
                code="CODEFRAG_UNKNOWN_LANGUAGE",
                category="config",
                message="Language name must be one of F#, C# or VB",
                details={"language": token},
                remediation="Pass one of: F#, C#, VB (case-insensitive).",
            )
        )

    @classmethod
    def invalid_manifest(cls, message: str, **details: Any) -> "ConfigurationError":
        return cls(
            FragmentProblem(
                code="CODEFRAG_MANIFEST_INVALID",
                category="config",
                message=message,
                details=details,
                remediation="Fix the manifest so it matches the documented schema.",
            )
        )


class MalformedIndexError(FragmentException):
    default_exit_code = ExitCode.INPUT_INVALID

    @classmethod
    def for_key(cls, key: str, index_text: str, attribute: Optional[str]) -> "MalformedIndexError":
        return cls(
            FragmentProblem(
                code="CODEFRAG_MALFORMED_INDEX",
                category="input",
                message=f"Unable to parse '{index_text}' as an index",
                details={"key": key, "index": index_text, "attribute": attribute},
                remediation="Positional keys must look like _Parameter1, _Parameter2, ...",
            )
        )


class UnsupportedValueError(FragmentException):
    default_exit_code = ExitCode.INPUT_INVALID

    @classmethod
    def for_value(cls, key: Optional[str], value: Any, attribute: Optional[str]) -> "UnsupportedValueError":
        return cls(
            FragmentProblem(
                code="CODEFRAG_UNSUPPORTED_VALUE",
                category="input",
                message=f"Cannot render a value of type {type(value).__name__} as an attribute argument",
                details={"key": key, "type": type(value).__name__, "attribute": attribute},
                remediation="Use a string, number, boolean or null value.",
            )
        )


class OutputLocationError(FragmentException):
    default_exit_code = ExitCode.OUTPUT_ERROR

    @classmethod
    def missing(cls) -> "OutputLocationError":
        return cls(
            FragmentProblem(
                code="CODEFRAG_OUTPUT_MISSING",
                category="output",
                message="Output location must be specified",
                details={},
                remediation="Set output_file in the manifest or pass --out.",
            )
        )


def problem_to_dict(p: FragmentProblem) -> Dict[str, Any]:
    d = asdict(p)
    if d.get("remediation") is None:
        d.pop("remediation", None)
    return d
