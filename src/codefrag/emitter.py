# src/codefrag/emitter.py
"""
Assembly-attribute source emitter.

Turns an ordered list of AttributeSpec into one generated source unit:
  preamble, blank line, one attribute application per line, optional trailer.

Design goals:
- Deterministic: named arguments sorted, positional gaps filled with the null literal.
- Fail-fast: any malformed attribute aborts the whole unit; no partial text is returned.
- All-or-nothing output: the file is written through a temp file and renamed into place.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .assembler import assemble
from .classifier import classify
from .dialects import get as get_dialect
from .dialects.base import CodeDialect
from .errors import ExitCode, FragmentProblem, OutputLocationError
from .types import AttributeSpec, Language

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FragmentResult:
    output_file: Path
    language: Language
    attribute_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "out": str(self.output_file),
            "language": self.language.value,
            "attributes": self.attribute_count,
        }


def render_attribute(spec: AttributeSpec, dialect: CodeDialect) -> str:
    classified = classify(spec.parameters, dialect, attribute=spec.name)
    return dialect.render_attribute(spec.name, assemble(classified, dialect))


def synthesize(specs: Iterable[AttributeSpec], language: "str | Language") -> str:
    dialect = get_dialect(language)
    lines: List[str] = [dialect.preamble(), ""]
    for spec in specs:
        line = render_attribute(spec, dialect)
        logger.debug("rendered %s attribute %s", dialect.language.value, spec.name)
        lines.append(line)
    trailer = dialect.trailer()
    if trailer is not None:
        lines.append(trailer)
    return "\n".join(lines) + "\n"


def resolve_output_path(output_file: "str | Path", output_directory: "str | Path | None" = None) -> Path:
    """Rooted output files are used as given; relative ones land under output_directory."""
    p = Path(output_file)
    if output_directory is None or p.is_absolute():
        return p
    return Path(output_directory) / p


def _atomic_write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def write_code_fragment(
    specs: Iterable[AttributeSpec],
    language: "str | Language",
    output_file: "str | Path | None",
    output_directory: "str | Path | None" = None,
) -> FragmentResult:
    if not output_file:
        raise OutputLocationError.missing()

    spec_list = list(specs)
    lang = Language.parse(language)
    text = synthesize(spec_list, lang)
    target = resolve_output_path(output_file, output_directory)

    try:
        _atomic_write_text(target, text)
    except OSError as e:
        raise OutputLocationError(
            FragmentProblem(
                code="CODEFRAG_OUTPUT_WRITE_FAILED",
                category="output",
                message=f"Failed to write generated source: {target}",
                details={"path": str(target), "error": repr(e)},
                remediation="Check that the output directory is writable.",
            ),
            ExitCode.OUTPUT_ERROR,
            cause=e,
        )

    logger.info("wrote %d %s attribute(s) to %s", len(spec_list), lang.value, target)
    return FragmentResult(output_file=target, language=lang, attribute_count=len(spec_list))


__all__ = [
    "FragmentResult",
    "render_attribute",
    "resolve_output_path",
    "synthesize",
    "write_code_fragment",
]
