"""
Go struct emitter.

Renders a Declaration as a Go struct with JSON tags.
"""

from typing import Any, Dict

from ...core.emitter import Emitter
from ...core.naming import to_pascal_case
from ...core.schema import Declaration, Field


class GoStructEmitter(Emitter):
    """Emitter for Go structs with JSON tags."""

    @property
    def notation_name(self) -> str:
        return "go"

    @property
    def file_extension(self) -> str:
        return ".go"

    @property
    def template_name(self) -> str:
        return "struct.go.j2"

    def build_context(self, declaration: Declaration) -> Dict[str, Any]:
        return {
            "struct_name": declaration.name,
            "fields": [self._field_data(f) for f in declaration.fields],
        }

    def _field_data(self, field: Field) -> Dict[str, str]:
        """Template data for one struct field."""
        return {
            "name": to_pascal_case(field.json_name),
            "type": self.type_mapper.to_go(field.type),
            "tag": self.json_tag(field),
            "comment": self.comment_suffix(field.comment),
        }

    @staticmethod
    def json_tag(field: Field) -> str:
        """Render the struct tag, e.g. ``json:"name,omitempty"`` in backticks."""
        options = [field.json_name]
        if field.omittable:
            options.append("omitempty")
        return f'`json:"{",".join(options)}"`'
