"""Depth-first matching of path expressions against value trees."""

from __future__ import annotations

from typing import assert_never

from .path import DoubleWildcardLeg, IndexLeg, KeyLeg, PathExpression
from .value import ArrayValue, ObjectValue, Value, copy_value, get_sorted_keys


def extract_json(value: Value, expression: PathExpression) -> list[Value]:
    """Return copies of every sub-value of ``value`` matched by ``expression``.

    Matches come back in traversal order: array elements by position, object
    members by ascending key. Duplicates reached along different routes are
    kept. A structural mismatch is never an error, it just contributes no
    matches.
    """

    if not expression.legs:
        return [copy_value(value)]

    leg, remainder = expression.pop_one_leg()
    matches: list[Value] = []

    match leg:
        case IndexLeg(index=index):
            # non-arrays are indexable as a one-element array
            if isinstance(value, ArrayValue):
                items = value.items
            else:
                items = wrap_to_array(value)
            if index is None:
                for item in items:
                    matches.extend(extract_json(item, remainder))
            elif index < len(items):
                matches.extend(extract_json(items[index], remainder))
        case KeyLeg(key=key):
            if not isinstance(value, ObjectValue):
                return matches
            if key is None:
                for member_key in get_sorted_keys(value):
                    matches.extend(extract_json(value.members[member_key], remainder))
            elif key in value.members:
                matches.extend(extract_json(value.members[key], remainder))
        case DoubleWildcardLeg():
            matches.extend(extract_json(value, remainder))
            for child in _children(value):
                matches.extend(extract_json(child, expression))
        case _:
            assert_never(leg)

    return matches


def wrap_to_array(value: Value) -> list[Value]:
    return [value]


def _children(value: Value) -> list[Value]:
    if isinstance(value, ArrayValue):
        return list(value.items)
    if isinstance(value, ObjectValue):
        return [value.members[key] for key in get_sorted_keys(value)]
    return []


__all__ = ["extract_json", "wrap_to_array"]
