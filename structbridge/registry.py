"""
Notation registry for parsers and emitters.

Maps notation names and aliases to the classes that read and write them.
"""

from typing import Dict, List, NamedTuple, Optional, Type

from .core.config import ConverterConfig
from .core.emitter import Emitter
from .core.parser import DeclarationParser
from .core.types import TypeMapper, create_type_mapper


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class NotationEntry(NamedTuple):
    parser_class: Type[DeclarationParser]
    emitter_class: Type[Emitter]


class NotationRegistry:
    """Registry for managing supported notations."""

    def __init__(self):
        """Initialize empty registry."""
        self._notations: Dict[str, NotationEntry] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        notation: str,
        parser_class: Type[DeclarationParser],
        emitter_class: Type[Emitter],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register the parser and emitter for a notation.

        Args:
            notation: Primary notation name (e.g., 'go', 'typescript')
            parser_class: Class implementing DeclarationParser
            emitter_class: Class implementing Emitter
            aliases: Alternative names for this notation
            replace: If True, replace an existing registration

        Raises:
            RegistryError: If a class is invalid or an alias conflicts
        """
        if not issubclass(parser_class, DeclarationParser):
            raise RegistryError("Parser class must inherit from DeclarationParser")
        if not issubclass(emitter_class, Emitter):
            raise RegistryError("Emitter class must inherit from Emitter")

        key = notation.lower()
        if key in self._notations and not replace:
            return

        self._notations[key] = NotationEntry(parser_class, emitter_class)

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == key:
                continue
            if not replace:
                if alias_key in self._notations:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary notation"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )
            self._aliases[alias_key] = key

    def resolve(self, notation: str) -> str:
        """
        Resolve a notation name or alias to its primary name.

        Raises:
            RegistryError: If notation not found
        """
        key = notation.lower()
        if key in self._notations:
            return key
        if key in self._aliases:
            return self._aliases[key]

        raise RegistryError(
            f"No notation registered for: {notation}. "
            f"Available: {', '.join(self.list_notations())}"
        )

    def create_parser(
        self, notation: str, type_mapper: Optional[TypeMapper] = None
    ) -> DeclarationParser:
        entry = self._notations[self.resolve(notation)]
        return entry.parser_class(type_mapper)

    def create_emitter(
        self,
        notation: str,
        config: Optional[ConverterConfig] = None,
        type_mapper: Optional[TypeMapper] = None,
    ) -> Emitter:
        entry = self._notations[self.resolve(notation)]
        return entry.emitter_class(config, type_mapper)

    def list_notations(self) -> List[str]:
        """Get list of registered primary notation names."""
        return sorted(self._notations.keys())

    def get_aliases(self, notation: str) -> List[str]:
        key = self.resolve(notation)
        return sorted(alias for alias, target in self._aliases.items() if target == key)

    def is_supported(self, notation: str) -> bool:
        key = notation.lower()
        return key in self._notations or key in self._aliases

    def get_notation_info(self, notation: str) -> Dict[str, object]:
        """
        Get information about a registered notation.

        Returns:
            Dict with name, file extension, classes and aliases
        """
        key = self.resolve(notation)
        entry = self._notations[key]
        emitter = entry.emitter_class()

        return {
            "name": emitter.notation_name,
            "file_extension": emitter.file_extension,
            "parser": entry.parser_class.__name__,
            "emitter": entry.emitter_class.__name__,
            "aliases": self.get_aliases(key),
        }


# Global registry instance - created once
_global_registry: Optional[NotationRegistry] = None


def get_registry() -> NotationRegistry:
    """Get the global notation registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = NotationRegistry()
        _register_builtin_notations(_global_registry)
    return _global_registry


def _register_builtin_notations(registry: NotationRegistry):
    from .languages.go import GoStructEmitter, GoStructParser
    from .languages.typescript import TsInterfaceEmitter, TsInterfaceParser

    registry.register("go", GoStructParser, GoStructEmitter, aliases=["golang"])
    registry.register(
        "typescript", TsInterfaceParser, TsInterfaceEmitter, aliases=["ts"]
    )


def get_parser(notation: str, config: Optional[ConverterConfig] = None) -> DeclarationParser:
    """Create a parser from the global registry."""
    return get_registry().create_parser(notation, create_type_mapper(config))


def get_emitter(notation: str, config: Optional[ConverterConfig] = None) -> Emitter:
    """Create an emitter from the global registry."""
    return get_registry().create_emitter(notation, config, create_type_mapper(config))


def list_supported_notations() -> List[str]:
    """List all supported notations from the global registry."""
    return get_registry().list_notations()


def get_notation_info(notation: str) -> Dict[str, object]:
    return get_registry().get_notation_info(notation)
