from __future__ import annotations

from dataclasses import dataclass

from .path import (
    ANY_INDEX,
    ANY_KEY,
    DOUBLE_WILDCARD,
    IndexLeg,
    KeyLeg,
    PathExpression,
    PathLeg,
)


@dataclass(frozen=True)
class PathRef:
    """Fluent builder for path expressions.

    ``ROOT.config.deps[0]`` and ``ROOT.key("config").key("deps").index(0)``
    build the same expression. Method names take precedence over attribute
    access, so use ``key()`` or ``[...]`` for keys like ``"index"``.
    """

    legs: tuple[PathLeg, ...] = ()

    def _append(self, leg: PathLeg) -> PathRef:
        return PathRef(legs=(*self.legs, leg))

    def __getattr__(self, segment: str) -> PathRef:
        if segment.startswith("_"):
            raise AttributeError(segment)
        return self.key(segment)

    def __getitem__(self, key: int | str) -> PathRef:
        if isinstance(key, bool):
            raise TypeError("path indices must be int or str, not bool")
        if isinstance(key, int):
            return self.index(key)
        return self.key(key)

    def key(self, name: str) -> PathRef:
        if not isinstance(name, str):
            raise TypeError(f"path keys must be str, got {type(name).__name__}")
        if not name:
            raise ValueError("path keys cannot be empty")
        return self._append(KeyLeg(key=name))

    def index(self, position: int) -> PathRef:
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f"path indices must be int, got {type(position).__name__}")
        if position < 0:
            raise ValueError("negative indices are not supported in paths")
        return self._append(IndexLeg(index=position))

    def any_key(self) -> PathRef:
        return self._append(ANY_KEY)

    def any_index(self) -> PathRef:
        return self._append(ANY_INDEX)

    def descendants(self) -> PathRef:
        return self._append(DOUBLE_WILDCARD)

    def to_expression(self) -> PathExpression:
        return PathExpression.from_legs(self.legs)

    def __str__(self) -> str:
        return str(self.to_expression())


ROOT = PathRef()


__all__ = ["ROOT", "PathRef"]
