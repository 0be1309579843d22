"""
Type mapping between Go and TypeScript.

The mapper holds two lookup tables handed to it at construction time, so
the vocabulary can be extended through configuration or swapped out in
tests. Anything missing from a table passes through unchanged.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .schema import Array, MapLiteral, Named, Nullable, Primitive, TypeDescriptor

# Go type name -> TypeScript type name
DEFAULT_GO_TO_TS: Mapping[str, str] = MappingProxyType(
    {
        "string": "string",
        "int": "number",
        "int8": "number",
        "int16": "number",
        "int32": "number",
        "int64": "number",
        "uint": "number",
        "uint8": "number",
        "uint16": "number",
        "uint32": "number",
        "uint64": "number",
        "float32": "number",
        "float64": "number",
        "bool": "boolean",
        "time.Time": "string",
        "interface{}": "any",
        "any": "any",
    }
)

# TypeScript type name -> Go type name. Numbers always narrow to int.
DEFAULT_TS_TO_GO: Mapping[str, str] = MappingProxyType(
    {
        "string": "string",
        "number": "int",
        "boolean": "bool",
        "any": "any",
        "unknown": "any",
    }
)

# TS members that only express nullability
TS_NULL_TYPES = frozenset({"null", "undefined"})


class TypeMapper:
    """
    Translates type descriptors between the two notations.

    Parsing is notation-specific (``parse_go_type`` / ``parse_ts_type``),
    rendering goes through the table of the opposite direction.
    """

    def __init__(
        self,
        go_to_ts: Optional[Mapping[str, str]] = None,
        ts_to_go: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize with mapping tables.

        Args:
            go_to_ts: Go type name -> TypeScript type name
            ts_to_go: TypeScript type name -> Go type name
        """
        self.go_to_ts: Dict[str, str] = dict(
            DEFAULT_GO_TO_TS if go_to_ts is None else go_to_ts
        )
        self.ts_to_go: Dict[str, str] = dict(
            DEFAULT_TS_TO_GO if ts_to_go is None else ts_to_go
        )

    def parse_go_type(self, raw: str) -> TypeDescriptor:
        """
        Tokenize Go type text into a descriptor.

        ``*T`` becomes Nullable, ``[]T`` becomes Array, ``map[K]V`` is kept
        as a literal, and known names become Primitive.
        """
        raw = raw.strip()
        if raw.startswith("*"):
            return Nullable(self.parse_go_type(raw[1:]))
        if raw.startswith("[]"):
            return Array(self.parse_go_type(raw[2:]))
        if raw.startswith("map["):
            return MapLiteral(raw)
        if raw in self.go_to_ts:
            return Primitive(raw)
        return Named(raw)

    def parse_ts_type(self, raw: str) -> TypeDescriptor:
        """Tokenize a single (non-union) TypeScript type."""
        raw = raw.strip()
        if raw.endswith("[]"):
            return Array(self.parse_ts_type(raw[:-2]))
        if raw in self.ts_to_go:
            return Primitive(raw)
        return Named(raw)

    def to_typescript(self, descriptor: TypeDescriptor) -> str:
        """
        Render a descriptor parsed from Go as TypeScript.

        Nullability is left to the caller, which appends ``| null`` after
        any array suffix.
        """
        if isinstance(descriptor, Nullable):
            return self.to_typescript(descriptor.inner)
        if isinstance(descriptor, Array):
            return f"{self.to_typescript(descriptor.inner)}[]"
        if isinstance(descriptor, Primitive):
            return self.go_to_ts.get(descriptor.name, descriptor.name)
        if isinstance(descriptor, MapLiteral):
            return descriptor.raw
        return descriptor.name

    def to_go(self, descriptor: TypeDescriptor) -> str:
        """Render a descriptor parsed from TypeScript as Go."""
        if isinstance(descriptor, Nullable):
            return f"*{self.to_go(descriptor.inner)}"
        if isinstance(descriptor, Array):
            return f"[]{self.to_go(descriptor.inner)}"
        if isinstance(descriptor, Primitive):
            return self.ts_to_go.get(descriptor.name, descriptor.name)
        if isinstance(descriptor, MapLiteral):
            return descriptor.raw
        return descriptor.name

    def with_overrides(
        self,
        go_overrides: Optional[Mapping[str, str]] = None,
        ts_overrides: Optional[Mapping[str, str]] = None,
    ) -> "TypeMapper":
        """Return a new mapper whose tables are extended by the overrides."""
        go_table = dict(self.go_to_ts)
        go_table.update(go_overrides or {})
        ts_table = dict(self.ts_to_go)
        ts_table.update(ts_overrides or {})
        return TypeMapper(go_table, ts_table)


def create_type_mapper(config=None) -> TypeMapper:
    """Create a mapper from the default tables plus any configured overrides."""
    mapper = TypeMapper()
    if config is None:
        return mapper
    return mapper.with_overrides(config.go_type_overrides, config.ts_type_overrides)
