"""
Base emitter interface for all output notations.

Defines the contract that every notation emitter must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from .config import ConverterConfig
from .schema import Declaration
from .templates import TemplateEngine, create_template_engine
from .types import TypeMapper, create_type_mapper


class Emitter(ABC):
    """Abstract base class for declaration emitters."""

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        type_mapper: Optional[TypeMapper] = None,
    ):
        """Initialize emitter with optional configuration and type mapper."""
        self.config = config or ConverterConfig()
        self.type_mapper = type_mapper or create_type_mapper(self.config)
        self._template_engine = None

    @property
    @abstractmethod
    def notation_name(self) -> str:
        """Return the name of the target notation (e.g., 'go', 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for emitted code (e.g., '.go', '.ts')."""
        pass

    @property
    @abstractmethod
    def template_name(self) -> str:
        """Name of the template that renders a whole declaration."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this emitter."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.config.template_dir)
        return self._template_engine

    @abstractmethod
    def build_context(self, declaration: Declaration) -> Dict[str, Any]:
        """
        Build the template context for a declaration.

        Args:
            declaration: Parsed source declaration

        Returns:
            Variables for the declaration template
        """
        pass

    def emit(self, declaration: Declaration) -> str:
        """
        Render a declaration in this emitter's notation.

        Args:
            declaration: Parsed source declaration

        Returns:
            Formatted output text
        """
        context = self.build_context(declaration)
        code = self.template_engine.render_template(self.template_name, context)
        return self.format_code(code)

    def validate_declaration(self, declaration: Declaration) -> List[str]:
        """
        Check a declaration for structural issues worth reporting.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not declaration.fields:
            warnings.append(f"Declaration '{declaration.name}' has no fields")

        if not declaration.complete:
            warnings.append(
                f"Declaration '{declaration.name}' is missing its closing brace"
            )

        return warnings

    def format_code(self, code: str) -> str:
        """Remove trailing whitespace from every line."""
        return "\n".join(line.rstrip() for line in code.split("\n"))

    @staticmethod
    def comment_suffix(comment: Optional[str]) -> str:
        """Render a trailing comment as a suffix for a field line."""
        if not comment:
            return ""
        return f" {comment.strip()}"
