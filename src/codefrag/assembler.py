from __future__ import annotations

from typing import List, Sequence

from .dialects.base import CodeDialect
from .types import ClassifiedParameters, NamedParameter, PositionalParameter


def assemble_positional(ordered: Sequence[PositionalParameter], dialect: CodeDialect) -> str:
    if not ordered:
        return ""
    slots: List[str] = [dialect.null_literal] * max(p.index for p in ordered)
    for p in sorted(ordered, key=lambda p: p.index):
        slots[p.index - 1] = p.value.escaped
    return ", ".join(slots)


def assemble_named(named: Sequence[NamedParameter]) -> str:
    return ", ".join(f"{p.name} = {p.rendered}" for p in sorted(named, key=lambda p: p.name))


def assemble(classified: ClassifiedParameters, dialect: CodeDialect) -> str:
    """Positional arguments first, then named; the target languages require that order."""
    positional = assemble_positional(classified.ordered, dialect)
    named = assemble_named(classified.named)
    if positional and named:
        return f"{positional}, {named}"
    return positional or named
