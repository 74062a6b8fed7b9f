from __future__ import annotations

from .config import DOCQUERY_CONFIG
from .path import PathExpression


def validate_expression(
    expression: PathExpression,
    *,
    max_legs: int | None = None,
) -> None:
    limit = DOCQUERY_CONFIG.max_path_legs if max_legs is None else max_legs
    if limit < 1:
        raise ValueError(f"max_legs must be >= 1, got {limit}")
    if len(expression.legs) > limit:
        raise ValueError(
            f"path expression {expression} exceeds max leg count ({limit})"
        )


__all__ = ["validate_expression"]
