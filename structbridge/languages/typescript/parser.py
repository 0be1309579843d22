"""
TypeScript interface parser.

Reads a single ``interface X { ... }`` block into a Declaration.
"""

import re
from typing import Optional, Pattern

from ...core.classifier import TS_INTERFACE_HEADER
from ...core.parser import DeclarationParser
from ...core.schema import DeclarationKind, Field, Nullable, TypeDescriptor
from ...core.types import TS_NULL_TYPES
from ...logging_config import get_logger

logger = get_logger(__name__)

# name?: type; // comment  (members may also end in a comma)
PROPERTY = re.compile(
    r"^\s*(?:readonly\s+)?(\w+)(\?)?\s*:\s*([^;/]+?)\s*[;,]?\s*(//.*)?$"
)


class TsInterfaceParser(DeclarationParser):
    """Parses TypeScript interface properties line by line."""

    @property
    def kind(self) -> DeclarationKind:
        return DeclarationKind.TS_INTERFACE

    @property
    def header_pattern(self) -> Pattern:
        return TS_INTERFACE_HEADER

    def parse_field_line(self, line: str) -> Optional[Field]:
        match = PROPERTY.match(line)
        if not match:
            return None

        name, question_mark, type_text, comment = match.groups()
        optional = question_mark is not None

        return Field(
            name=name,
            type=self.parse_type(type_text, optional),
            json_name=name,
            omittable=optional,
            comment=comment.strip() if comment else None,
        )

    def parse_type(self, type_text: str, optional: bool = False) -> TypeDescriptor:
        """
        Parse a property type, folding ``| null`` into nullability.

        On a ``?`` property the null member only repeats the optionality,
        so it does not add a pointer on the Go side.
        """
        members = [m.strip() for m in type_text.split("|") if m.strip()]
        has_null = any(m in TS_NULL_TYPES for m in members)
        members = [m for m in members if m not in TS_NULL_TYPES]

        if len(members) == 1:
            descriptor = self.type_mapper.parse_ts_type(members[0])
        else:
            if members:
                logger.debug("Union %r has no Go equivalent, using unknown", type_text)
            descriptor = self.type_mapper.parse_ts_type("unknown")

        if has_null and not optional:
            descriptor = Nullable(descriptor)
        return descriptor
