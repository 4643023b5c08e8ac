from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from .dialects.base import CodeDialect
from .errors import UnsupportedValueError
from .types import EscapedValue


def escape_string(raw: str, dialect: CodeDialect) -> EscapedValue:
    table = str.maketrans(dict(dialect.escape_table))
    return EscapedValue(escaped='"' + raw.translate(table) + '"', raw=raw)


def _scalar_text(value: Any) -> Optional[str]:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return None


def escape_value(
    value: Any,
    dialect: CodeDialect,
    *,
    key: Optional[str] = None,
    attribute: Optional[str] = None,
) -> EscapedValue:
    """
    Render a raw metadata value for embedding in an attribute argument list.

    - None -> the dialect's null literal
    - str -> quoted, escaped string literal
    - bool/number -> canonical text, emitted as-is (escaped == raw)

    Non-string values are not re-validated: their text is assumed not to
    contain characters that would break the literal.
    """
    if value is None:
        return EscapedValue(escaped=dialect.null_literal, raw=dialect.null_literal)
    if isinstance(value, str):
        return escape_string(value, dialect)
    text = _scalar_text(value)
    if text is None:
        raise UnsupportedValueError.for_value(key, value, attribute)
    return EscapedValue(escaped=text, raw=text)
