"""
Go struct parser.

Reads a single ``type X struct { ... }`` block into a Declaration.
"""

import re
from typing import Optional, Pattern, Tuple

from ...core.classifier import GO_STRUCT_HEADER
from ...core.naming import is_exported, to_camel_case
from ...core.parser import DeclarationParser
from ...core.schema import DeclarationKind, Field

GO_TYPE = r"[\w\[\]\*\.\{\}]+"

# Name Type `tag` // comment; anything else after the tag is ignored
TAGGED_FIELD = re.compile(
    rf"^\s*(\w+)\s+({GO_TYPE})\s+`([^`]*)`\s*(//.*|/\*.*)?.*$"
)

# Name Type // comment
UNTAGGED_FIELD = re.compile(rf"^(\s*)(\w+)\s+({GO_TYPE})(\s*//.*?)?\s*$")

JSON_TAG = re.compile(r'\bjson:"([^"]*)"')

OMIT_OPTIONS = frozenset({"omitempty", "omitzero"})


def parse_json_tag(tag: str) -> Optional[Tuple[str, bool]]:
    """
    Extract the JSON key and omission flag from a struct tag.

    Args:
        tag: Tag text between the backticks

    Returns:
        ``(json_name, omittable)``, or None when the tag has no json key
    """
    match = JSON_TAG.search(tag)
    if not match:
        return None

    segments = match.group(1).split(",")
    omittable = any(option.strip() in OMIT_OPTIONS for option in segments[1:])
    return segments[0].strip(), omittable


class GoStructParser(DeclarationParser):
    """Parses Go struct fields line by line."""

    @property
    def kind(self) -> DeclarationKind:
        return DeclarationKind.GO_STRUCT

    @property
    def header_pattern(self) -> Pattern:
        return GO_STRUCT_HEADER

    def parse_field_line(self, line: str) -> Optional[Field]:
        match = TAGGED_FIELD.match(line)
        if match:
            name, go_type, tag, comment = match.groups()
            parsed_tag = parse_json_tag(tag)
            if parsed_tag is not None:
                json_name, omittable = parsed_tag
                return self._build_field(name, go_type, json_name or name, omittable, comment)
            # Non-JSON tags only: same as an untagged field
            return self._build_field(name, go_type, to_camel_case(name), False, comment)

        match = UNTAGGED_FIELD.match(line)
        if match:
            _, name, go_type, comment = match.groups()
            return self._build_field(name, go_type, to_camel_case(name), False, comment)

        return None

    def _build_field(
        self,
        name: str,
        go_type: str,
        json_name: str,
        omittable: bool,
        comment: Optional[str],
    ) -> Optional[Field]:
        # Unexported fields and `json:"-"` never reach the serialized form
        if not is_exported(name) or json_name == "-":
            return None

        return Field(
            name=name,
            type=self.type_mapper.parse_go_type(go_type),
            json_name=json_name,
            omittable=omittable,
            exported=True,
            comment=comment.strip() if comment else None,
        )
