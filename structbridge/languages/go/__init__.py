"""
Go struct support.

Parses Go structs, synthesizes missing JSON tags and emits structs from
TypeScript interfaces.
"""

from .emitter import GoStructEmitter
from .parser import GoStructParser, parse_json_tag
from .tags import TagSynthesizer, add_missing_json_tags

__all__ = [
    "GoStructEmitter",
    "GoStructParser",
    "TagSynthesizer",
    "add_missing_json_tags",
    "parse_json_tag",
]
