"""Path expression model: immutable leg lists consumed by the extractor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntFlag
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class _PathLegNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class KeyLeg(_PathLegNode):
    """Object member access; ``key=None`` matches every member."""

    leg: Literal["key"] = "key"
    key: StrictStr | None

    @property
    def is_wildcard(self) -> bool:
        return self.key is None


class IndexLeg(_PathLegNode):
    """Array element access; ``index=None`` matches every element."""

    leg: Literal["index"] = "index"
    index: Annotated[StrictInt, Field(ge=0)] | None

    @property
    def is_wildcard(self) -> bool:
        return self.index is None


class DoubleWildcardLeg(_PathLegNode):
    """Recursive descent: matches the current node and every descendant."""

    leg: Literal["double_wildcard"] = "double_wildcard"

    @property
    def is_wildcard(self) -> bool:
        return True


PathLeg: TypeAlias = Annotated[
    KeyLeg | IndexLeg | DoubleWildcardLeg,
    Field(discriminator="leg"),
]

ANY_KEY = KeyLeg(key=None)
ANY_INDEX = IndexLeg(index=None)
DOUBLE_WILDCARD = DoubleWildcardLeg()


class PathFlag(IntFlag):
    NONE = 0
    CONTAINS_ASTERISK = 0x01
    CONTAINS_DOUBLE_ASTERISK = 0x02


def flags_for_legs(legs: Iterable[PathLeg]) -> PathFlag:
    flags = PathFlag.NONE
    for leg in legs:
        if isinstance(leg, DoubleWildcardLeg):
            flags |= PathFlag.CONTAINS_DOUBLE_ASTERISK
        elif leg.is_wildcard:
            flags |= PathFlag.CONTAINS_ASTERISK
    return flags


@dataclass(frozen=True)
class PathExpression:
    """An ordered, immutable list of legs.

    ``flags`` is an informational summary supplied by whoever built the
    expression. It is carried through ``pop_one_leg`` unchanged and never
    consulted when matching.
    """

    legs: tuple[PathLeg, ...] = ()
    flags: PathFlag = PathFlag.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.legs, tuple):
            object.__setattr__(self, "legs", tuple(self.legs))
        object.__setattr__(self, "flags", PathFlag(self.flags))

    @classmethod
    def from_legs(cls, legs: Iterable[PathLeg]) -> PathExpression:
        legs = tuple(legs)
        return cls(legs=legs, flags=flags_for_legs(legs))

    def pop_one_leg(self) -> tuple[PathLeg, PathExpression]:
        """Split off the first leg, returning it with the shortened expression."""

        if not self.legs:
            raise IndexError("cannot pop a leg from an empty path expression")
        return self.legs[0], PathExpression(legs=self.legs[1:], flags=self.flags)

    def contains_any_asterisk(self) -> bool:
        return bool(
            self.flags
            & (PathFlag.CONTAINS_ASTERISK | PathFlag.CONTAINS_DOUBLE_ASTERISK)
        )

    def __len__(self) -> int:
        return len(self.legs)

    def __str__(self) -> str:
        return "$" + "".join(_render_leg(leg) for leg in self.legs)


def _render_leg(leg: PathLeg) -> str:
    if isinstance(leg, DoubleWildcardLeg):
        return "**"
    if isinstance(leg, IndexLeg):
        return "[*]" if leg.index is None else f"[{leg.index}]"
    if leg.key is None:
        return ".*"
    if leg.key.isidentifier():
        return f".{leg.key}"
    escaped = leg.key.replace("\\", "\\\\").replace('"', '\\"')
    return f'."{escaped}"'


__all__ = [
    "ANY_INDEX",
    "ANY_KEY",
    "DOUBLE_WILDCARD",
    "DoubleWildcardLeg",
    "IndexLeg",
    "KeyLeg",
    "PathExpression",
    "PathFlag",
    "PathLeg",
    "flags_for_legs",
]
