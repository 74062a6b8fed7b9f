"""Entry points used by the surrounding query layer."""

from __future__ import annotations

from collections.abc import Sequence

from .config import DOCQUERY_CONFIG
from .errors import UnquoteError
from .extract import extract_json
from .path import PathExpression
from .runtime.logging import get_logger
from .unquote import unquote_string
from .value import ArrayValue, StringValue, Value, to_text


def extract(value: Value, expressions: Sequence[PathExpression]) -> Value | None:
    """Match ``expressions`` against ``value`` and aggregate the results.

    Returns ``None`` when nothing matched. A single expression with a single
    match returns that value as-is; every other outcome is wrapped in an
    ``ArrayValue`` holding all matches in expression order.
    """

    matches: list[Value] = []
    for expression in expressions:
        found = extract_json(value, expression)
        if DOCQUERY_CONFIG.trace_extract:
            get_logger().debug("path %s matched %d value(s)", expression, len(found))
        matches.extend(found)

    if not matches:
        return None
    if len(expressions) == 1 and len(matches) == 1:
        return matches[0]
    return ArrayValue(items=matches)


def unquote(value: Value) -> str:
    """Decode a string value's escapes, or render any other value as text."""

    if not isinstance(value, StringValue):
        return to_text(value)
    try:
        return unquote_string(value.value)
    except UnquoteError as exc:
        get_logger().debug("unquote failed at offset %s: %s", exc.position, exc)
        raise


__all__ = ["extract", "unquote"]
