"""
Tree data model for parsed JSON documents.

Six immutable variants sharing the ``JsonNode`` base. Containers own their
children exclusively; string payloads are copies of the source slice.
"""

from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any

type PythonValue = (
    str | float | bool | None | dict[str, "PythonValue"] | list["PythonValue"]
)


class JsonNode:
    """Base class of the six tree variants."""

    __slots__ = ()

    def to_python(self) -> PythonValue:
        """Converts the subtree into plain Python values."""
        raise NotImplementedError


def _freeze_entries(entries: Mapping[str, JsonNode]) -> Mapping[str, JsonNode]:
    if isinstance(entries, MappingProxyType):
        return entries
    return MappingProxyType(dict(entries))


@dataclass(frozen=True)
class Object(JsonNode):
    """
    Ordered mapping from string keys to nodes.

    Keys keep the position of their first occurrence; a repeated key only
    replaces the value. The mapping is exposed read-only.
    """

    entries: Mapping[str, JsonNode] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", _freeze_entries(self.entries))

    def __getitem__(self, key: str) -> JsonNode:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def keys(self) -> list[str]:
        return list(self.entries)

    def items(self) -> list[tuple[str, JsonNode]]:
        return list(self.entries.items())

    def to_python(self) -> dict[str, PythonValue]:
        return {key: value.to_python() for key, value in self.entries.items()}


@dataclass(frozen=True)
class Array(JsonNode):
    """Ordered sequence of nodes in source order."""

    items: tuple[JsonNode, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __getitem__(self, index: int) -> JsonNode:
        return self.items[index]

    def __iter__(self) -> Iterator[JsonNode]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[PythonValue]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class String(JsonNode):
    """Verbatim text between two quotes; escapes are not decoded."""

    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number(JsonNode):
    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class Boolean(JsonNode):
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Null(JsonNode):
    def to_python(self) -> None:
        return None


def node_from_python(value: Any) -> JsonNode:
    """
    Builds a tree from plain Python values.

    Integers become ``Number`` floats. Used mainly to write expected trees
    in tests and at call sites that compare against literals.
    """
    if value is None:
        return Null()
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int | float):
        return Number(float(value))
    if isinstance(value, str):
        return String(value)
    if isinstance(value, list | tuple):
        return Array(tuple(node_from_python(item) for item in value))
    if isinstance(value, dict):
        return Object({key: node_from_python(v) for key, v in value.items()})
    msg = f"Object of type {type(value).__name__} has no tree representation"
    raise TypeError(msg)
