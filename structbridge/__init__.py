"""
structbridge - Go struct <-> TypeScript interface conversion.

Converts a single Go struct into a TypeScript interface and back, and
adds missing JSON tags to Go structs.
"""

from .converter import ConversionResult, Converter, convert
from .core.classifier import ConversionError, EmptyInputError, UnrecognizedInputError
from .core.config import ConfigError, ConverterConfig, load_config
from .core.naming import to_camel_case, to_pascal_case, to_snake_case
from .core.types import TypeMapper
from .languages.go.tags import add_missing_json_tags
from .registry import get_emitter, get_parser, list_supported_notations

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "Converter",
    "convert",
    "ConversionError",
    "EmptyInputError",
    "UnrecognizedInputError",
    "ConfigError",
    "ConverterConfig",
    "load_config",
    "TypeMapper",
    "add_missing_json_tags",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "get_emitter",
    "get_parser",
    "list_supported_notations",
]
