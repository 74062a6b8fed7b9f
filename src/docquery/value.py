"""JSON-like value tree used as the subject of path queries.

Each variant is a frozen pydantic model tagged by ``kind`` so the whole tree
validates and dumps through ``TypeAdapter(Value)``. Object members are stored
in ascending key order, which is the order every traversal relies on.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Literal, TypeAlias, assert_never

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)


class _ValueNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class NullValue(_ValueNode):
    kind: Literal["null"] = "null"


class BooleanValue(_ValueNode):
    kind: Literal["boolean"] = "boolean"
    value: StrictBool


class IntegerValue(_ValueNode):
    kind: Literal["integer"] = "integer"
    value: StrictInt


class DoubleValue(_ValueNode):
    kind: Literal["double"] = "double"
    value: Annotated[float, Strict(), Field(allow_inf_nan=False)]

    @field_validator("value", mode="after")
    @classmethod
    def _as_float(cls, value: float) -> float:
        return float(value)


class StringValue(_ValueNode):
    kind: Literal["string"] = "string"
    value: StrictStr


class ArrayValue(_ValueNode):
    kind: Literal["array"] = "array"
    items: list[Value] = Field(default_factory=list)


class ObjectValue(_ValueNode):
    kind: Literal["object"] = "object"
    members: dict[str, Value] = Field(default_factory=dict)

    @field_validator("members", mode="after")
    @classmethod
    def _sort_members(cls, members: dict[str, Value]) -> dict[str, Value]:
        return dict(sorted(members.items()))


Value: TypeAlias = Annotated[
    NullValue
    | BooleanValue
    | IntegerValue
    | DoubleValue
    | StringValue
    | ArrayValue
    | ObjectValue,
    Field(discriminator="kind"),
]

ArrayValue.model_rebuild()
ObjectValue.model_rebuild()

NULL = NullValue()


def get_sorted_keys(obj: ObjectValue) -> list[str]:
    """Return the keys of ``obj`` in ascending lexicographic order."""

    return list(obj.members)


def copy_value(value: Value) -> Value:
    """Deep-copy ``value`` using an explicit stack, so tree depth is unbounded."""

    built: list[Value] = []
    pending: list[tuple[Value, bool]] = [(value, False)]
    while pending:
        node, children_built = pending.pop()
        if isinstance(node, ArrayValue | ObjectValue) and not children_built:
            pending.append((node, True))
            children = (
                node.items if isinstance(node, ArrayValue) else node.members.values()
            )
            pending.extend((child, False) for child in reversed(list(children)))
            continue

        if isinstance(node, ArrayValue):
            split = len(built) - len(node.items)
            items = built[split:]
            del built[split:]
            built.append(ArrayValue(items=items))
        elif isinstance(node, ObjectValue):
            split = len(built) - len(node.members)
            members = dict(zip(node.members, built[split:], strict=True))
            del built[split:]
            built.append(ObjectValue(members=members))
        else:
            built.append(node.model_copy())
    return built[0]


def to_text(value: Value) -> str:
    """Render ``value`` in its canonical text form.

    Top-level strings are returned as stored, without quotes or escaping.
    Strings nested in arrays and objects are wrapped in double quotes, still
    unescaped.
    """

    match value:
        case StringValue(value=text):
            return text
        case _:
            return _render(value)


def _render(value: Value) -> str:
    match value:
        case NullValue():
            return "null"
        case BooleanValue(value=flag):
            return "true" if flag else "false"
        case IntegerValue(value=number):
            return str(number)
        case DoubleValue(value=number):
            return repr(number)
        case StringValue(value=text):
            return f'"{text}"'
        case ArrayValue(items=items):
            return "[" + ",".join(_render(item) for item in items) + "]"
        case ObjectValue(members=members):
            pairs = (f'"{key}":{_render(member)}' for key, member in members.items())
            return "{" + ",".join(pairs) + "}"
        case _:
            assert_never(value)


PythonJSON: TypeAlias = (
    str
    | int
    | float
    | bool
    | None
    | Sequence["PythonJSON"]
    | Mapping[str, "PythonJSON"]
)


def from_python(data: object) -> Value:
    """Build a value tree from plain Python JSON data.

    Raises ``TypeError`` for anything that has no JSON counterpart and
    pydantic ``ValidationError`` for non-finite floats.
    """

    # bool subclasses int, so it has to be checked first
    if isinstance(data, bool):
        return BooleanValue(value=data)
    if data is None:
        return NULL
    if isinstance(data, int):
        return IntegerValue(value=data)
    if isinstance(data, float):
        return DoubleValue(value=data)
    if isinstance(data, str):
        return StringValue(value=data)
    if isinstance(data, (list, tuple)):
        return ArrayValue(items=[from_python(item) for item in data])
    if isinstance(data, Mapping):
        members: dict[str, Value] = {}
        for key, member in data.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, got {type(key).__name__}")
            members[key] = from_python(member)
        return ObjectValue(members=members)
    raise TypeError(f"unsupported JSON value type: {type(data).__name__}")


def to_python(value: Value) -> PythonJSON:
    match value:
        case NullValue():
            return None
        case BooleanValue(value=flag):
            return flag
        case IntegerValue(value=number) | DoubleValue(value=number):
            return number
        case StringValue(value=text):
            return text
        case ArrayValue(items=items):
            return [to_python(item) for item in items]
        case ObjectValue(members=members):
            return {key: to_python(member) for key, member in members.items()}
        case _:
            assert_never(value)


__all__ = [
    "NULL",
    "ArrayValue",
    "BooleanValue",
    "DoubleValue",
    "IntegerValue",
    "NullValue",
    "ObjectValue",
    "PythonJSON",
    "StringValue",
    "Value",
    "copy_value",
    "from_python",
    "get_sorted_keys",
    "to_python",
    "to_text",
]
