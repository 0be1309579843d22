"""
TypeScript interface emitter.

Renders a Declaration parsed from a Go struct as a TypeScript interface.
"""

from typing import Any, Dict

from ...core.emitter import Emitter
from ...core.schema import Declaration, Field


class TsInterfaceEmitter(Emitter):
    """Emitter for TypeScript interfaces."""

    @property
    def notation_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    @property
    def template_name(self) -> str:
        return "interface.ts.j2"

    def build_context(self, declaration: Declaration) -> Dict[str, Any]:
        return {
            "prefix": "export " if self.config.ts_export else "",
            "interface_name": declaration.name,
            "fields": [self._field_data(f) for f in declaration.fields],
        }

    def _field_data(self, field: Field) -> Dict[str, str]:
        ts_type = self.type_mapper.to_typescript(field.type)
        # Array suffix first, then the null union
        if field.omittable or field.nullable:
            ts_type = f"{ts_type} | null"

        return {
            "name": field.json_name,
            "marker": "?" if field.omittable else "",
            "type": ts_type,
            "comment": self.comment_suffix(field.comment),
        }
