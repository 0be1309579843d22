"""
Conversion pipeline.

Classifies the input, then either repairs missing Go JSON tags or
converts between a Go struct and a TypeScript interface.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .core.classifier import ConversionError, classify
from .core.config import ConverterConfig
from .core.schema import DeclarationKind
from .languages.go.tags import TagSynthesizer
from .logging_config import get_logger
from .registry import get_emitter, get_parser

logger = get_logger(__name__)

TARGET_NOTATION = {
    DeclarationKind.GO_STRUCT: DeclarationKind.TS_INTERFACE,
    DeclarationKind.TS_INTERFACE: DeclarationKind.GO_STRUCT,
}

ACTION_CONVERT = "convert"
ACTION_ADD_TAGS = "add_tags"


@dataclass
class ConversionResult:
    """Container for conversion output and metadata."""

    result: str = ""
    error: Optional[str] = None
    error_kind: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.error is None

    def as_tuple(self) -> Tuple[str, Optional[str]]:
        """Return the ``(result, error)`` pair."""
        return self.result, self.error

    @classmethod
    def failure(cls, exc: ConversionError) -> "ConversionResult":
        """Create a failed result from a conversion error."""
        return cls(result="", error=str(exc), error_kind=exc.kind)


class Converter:
    """Converts Go structs and TypeScript interfaces into each other."""

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()
        self.tag_synthesizer = TagSynthesizer()

    def convert(
        self, text: str, enable_tag_check: Optional[bool] = None
    ) -> ConversionResult:
        """
        Convert one declaration.

        Args:
            text: A Go struct or TypeScript interface
            enable_tag_check: Return the struct with synthesized JSON tags
                when an exported field has none, instead of converting.
                Defaults to the configured value.

        Returns:
            ConversionResult with either ``result`` or ``error`` set
        """
        if enable_tag_check is None:
            enable_tag_check = self.config.enable_json_tag_check

        try:
            kind = classify(text)
        except ConversionError as e:
            logger.info("Input rejected: %s", e.kind)
            return ConversionResult.failure(e)

        source = text.strip()

        if kind == DeclarationKind.GO_STRUCT and enable_tag_check:
            missing = self.tag_synthesizer.missing_tags(source)
            if missing:
                return ConversionResult(
                    result=self.tag_synthesizer.add_missing_tags(source),
                    metadata={
                        "action": ACTION_ADD_TAGS,
                        "source": kind.value,
                        "target": kind.value,
                        "tagged_fields": missing,
                    },
                )

        return self._convert_declaration(source, kind)

    def _convert_declaration(self, source: str, kind: DeclarationKind) -> ConversionResult:
        target = TARGET_NOTATION[kind]

        parser = get_parser(kind.value, self.config)
        emitter = get_emitter(target.value, self.config)

        try:
            declaration = parser.parse(source)
        except ConversionError as e:
            return ConversionResult.failure(e)

        warnings = emitter.validate_declaration(declaration)
        output = emitter.emit(declaration)

        logger.info(
            "Converted %s %s to %s (%d field(s))",
            kind.value,
            declaration.name,
            target.value,
            len(declaration.fields),
        )

        return ConversionResult(
            result=output,
            warnings=warnings,
            metadata={
                "action": ACTION_CONVERT,
                "source": kind.value,
                "target": target.value,
                "name": declaration.name,
                "field_count": len(declaration.fields),
                "complete": declaration.complete,
                "file_extension": emitter.file_extension,
            },
        )


def convert(
    text: str,
    enable_tag_check: Optional[bool] = None,
    config: Optional[ConverterConfig] = None,
) -> ConversionResult:
    """
    Convert a Go struct to a TypeScript interface or the reverse.

    Args:
        text: Source declaration
        enable_tag_check: See :meth:`Converter.convert`; defaults to True
            unless the config says otherwise
        config: Converter configuration

    Returns:
        ConversionResult with either ``result`` or ``error`` set
    """
    return Converter(config).convert(text, enable_tag_check)
