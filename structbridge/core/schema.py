"""
Core field model shared by all notations.

Parsers turn source text into a Declaration; emitters turn a
Declaration back into text in the target notation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class DeclarationKind(Enum):
    """Supported declaration notations."""

    GO_STRUCT = "go"
    TS_INTERFACE = "typescript"


@dataclass(frozen=True)
class Primitive:
    """A type name present in the mapping table of its notation."""

    name: str


@dataclass(frozen=True)
class Named:
    """A custom or nested type, passed through verbatim."""

    name: str


@dataclass(frozen=True)
class MapLiteral:
    """A Go ``map[K]V`` type, passed through verbatim."""

    raw: str


@dataclass(frozen=True)
class Array:
    inner: "TypeDescriptor"


@dataclass(frozen=True)
class Nullable:
    """Optional type: pointer in Go, ``T | null`` in TypeScript."""

    inner: "TypeDescriptor"


TypeDescriptor = Union[Primitive, Named, MapLiteral, Array, Nullable]


def is_nullable(descriptor: TypeDescriptor) -> bool:
    """Check whether an Optional wrapper appears anywhere in the descriptor."""
    if isinstance(descriptor, Nullable):
        return True
    if isinstance(descriptor, Array):
        return is_nullable(descriptor.inner)
    return False


@dataclass
class Field:
    """Represents a single member of a struct or interface."""

    name: str
    type: TypeDescriptor
    json_name: str = ""
    omittable: bool = False
    exported: bool = True
    comment: Optional[str] = None

    def __post_init__(self):
        if not self.json_name:
            self.json_name = self.name

    @property
    def nullable(self) -> bool:
        return is_nullable(self.type)


@dataclass
class Declaration:
    """An ordered set of fields under a struct or interface name."""

    name: str
    kind: DeclarationKind
    fields: List[Field] = field(default_factory=list)

    # False when the input ended before the closing brace
    complete: bool = True

    def add_field(self, new_field: Field):
        self.fields.append(new_field)

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]
