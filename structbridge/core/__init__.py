"""
Core conversion components.

Provides the field model, naming, type mapping and base classes used by
the Go and TypeScript parsers and emitters.
"""

from .classifier import (
    ConversionError,
    EmptyInputError,
    UnrecognizedInputError,
    classify,
)
from .config import ConfigError, ConfigManager, ConverterConfig, load_config
from .emitter import Emitter
from .naming import to_camel_case, to_pascal_case, to_snake_case
from .parser import BlockScanner, DeclarationParser, LineRole, ScanState
from .schema import (
    Array,
    Declaration,
    DeclarationKind,
    Field,
    MapLiteral,
    Named,
    Nullable,
    Primitive,
    TypeDescriptor,
)
from .templates import TemplateEngine, TemplateError, create_template_engine
from .types import DEFAULT_GO_TO_TS, DEFAULT_TS_TO_GO, TypeMapper, create_type_mapper

__all__ = [
    # Classification and errors
    "ConversionError",
    "EmptyInputError",
    "UnrecognizedInputError",
    "classify",
    # Field model
    "Array",
    "Declaration",
    "DeclarationKind",
    "Field",
    "MapLiteral",
    "Named",
    "Nullable",
    "Primitive",
    "TypeDescriptor",
    # Naming
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    # Type mapping
    "DEFAULT_GO_TO_TS",
    "DEFAULT_TS_TO_GO",
    "TypeMapper",
    "create_type_mapper",
    # Parsing and emission
    "BlockScanner",
    "DeclarationParser",
    "LineRole",
    "ScanState",
    "Emitter",
    # Configuration
    "ConfigError",
    "ConfigManager",
    "ConverterConfig",
    "load_config",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
