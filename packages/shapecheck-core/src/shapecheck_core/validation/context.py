from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class FieldSegment:
    name: str

    def render(self, first: bool) -> str:
        return self.name if first else f".{self.name}"


@dataclass(frozen=True)
class IndexSegment:
    index: int

    def render(self, first: bool) -> str:
        return f"[{self.index}]"


PathSegment = FieldSegment | IndexSegment

ROOT_PATH = "(root)"


def render_path(path: tuple[PathSegment, ...]) -> str:
    """Render segments as ``location.residents[2].name``."""
    if not path:
        return ROOT_PATH
    return "".join(segment.render(i == 0) for i, segment in enumerate(path))


@dataclass(frozen=True)
class ValidationContext:
    """Per-branch traversal state. Every descent derives a new context."""

    path: tuple[PathSegment, ...] = ()
    visited: frozenset[int] = frozenset()
    strict: bool = True
    deep: bool = False

    @classmethod
    def root(cls, strict: bool = True, deep: bool = False) -> ValidationContext:
        return cls(strict=strict, deep=deep)

    @property
    def rendered_path(self) -> str:
        return render_path(self.path)

    @property
    def field_depth(self) -> int:
        return sum(1 for segment in self.path if isinstance(segment, FieldSegment))

    def with_field(self, name: str) -> ValidationContext:
        return replace(self, path=self.path + (FieldSegment(name),))

    def with_index(self, index: int) -> ValidationContext:
        return replace(self, path=self.path + (IndexSegment(index),))

    def has_visited(self, value: Any) -> bool:
        return id(value) in self.visited

    def with_visited(self, value: Any) -> ValidationContext:
        return replace(self, visited=self.visited | {id(value)})
