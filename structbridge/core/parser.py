"""
Line-oriented scanning shared by the declaration parsers.

A declaration block is walked as a small state machine: SCANNING until
the header line, IN_BODY until a line holding only the closing brace,
then DONE. Input that ends while still IN_BODY is an incomplete block.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, Optional, Pattern, Tuple

from ..logging_config import get_logger
from .classifier import UnrecognizedInputError
from .schema import Declaration, DeclarationKind, Field
from .types import TypeMapper

logger = get_logger(__name__)


class ScanState(Enum):
    SCANNING = "scanning"
    IN_BODY = "in_body"
    DONE = "done"


class LineRole(Enum):
    """Where a line sits relative to the declaration block."""

    OUTSIDE = "outside"
    HEADER = "header"
    BODY = "body"
    CLOSE = "close"


TRAILING_COMMENT = re.compile(r"//.*$")


def is_closing_brace(line: str) -> bool:
    """True for ``}`` or ``};``, optionally followed by a ``//`` comment."""
    return TRAILING_COMMENT.sub("", line).strip() in ("}", "};")


class BlockScanner:
    """Walks the lines of a single top-level declaration block."""

    def __init__(self, header_pattern: Pattern):
        self.header_pattern = header_pattern
        self.state = ScanState.SCANNING
        self.header_match: Optional[re.Match] = None

    def scan(self, text: str) -> Iterator[Tuple[LineRole, str]]:
        """
        Yield every line of ``text`` tagged with its role.

        Lines after the closing brace are reported as OUTSIDE; a second
        declaration in the same text is not entered.
        """
        for line in text.split("\n"):
            if self.state == ScanState.SCANNING:
                match = self.header_pattern.match(line)
                if match:
                    self.header_match = match
                    self.state = ScanState.IN_BODY
                    # `type X struct {}` closes on the header line
                    if re.search(r"\{\s*\}\s*;?\s*$", line):
                        self.state = ScanState.DONE
                    yield LineRole.HEADER, line
                    continue
                yield LineRole.OUTSIDE, line
            elif self.state == ScanState.IN_BODY:
                if is_closing_brace(line):
                    self.state = ScanState.DONE
                    yield LineRole.CLOSE, line
                    continue
                yield LineRole.BODY, line
            else:
                yield LineRole.OUTSIDE, line

    @property
    def complete(self) -> bool:
        return self.state == ScanState.DONE


class DeclarationParser(ABC):
    """Base class for notation-specific declaration parsers."""

    def __init__(self, type_mapper: Optional[TypeMapper] = None):
        self.type_mapper = type_mapper or TypeMapper()

    @property
    @abstractmethod
    def kind(self) -> DeclarationKind:
        """The notation this parser reads."""
        pass

    @property
    @abstractmethod
    def header_pattern(self) -> Pattern:
        """Regex matching the declaration header; group 1 is the name."""
        pass

    @abstractmethod
    def parse_field_line(self, line: str) -> Optional[Field]:
        """
        Parse one body line.

        Returns:
            The field, or None when the line is not a retained field
        """
        pass

    def parse(self, text: str) -> Declaration:
        """
        Parse the first declaration block in ``text``.

        Args:
            text: Source text starting with a declaration header

        Returns:
            Declaration with fields in source order

        Raises:
            UnrecognizedInputError: If no header line is present
        """
        scanner = BlockScanner(self.header_pattern)
        declaration = None

        for role, line in scanner.scan(text):
            if role == LineRole.HEADER:
                declaration = Declaration(
                    name=scanner.header_match.group(1), kind=self.kind
                )
            elif role == LineRole.BODY:
                stripped = line.strip()
                if not stripped or stripped.startswith("//"):
                    continue
                field = self.parse_field_line(line)
                if field is None:
                    logger.debug("Skipping line: %r", line)
                    continue
                declaration.add_field(field)

        if declaration is None:
            raise UnrecognizedInputError()

        declaration.complete = scanner.complete
        if not declaration.complete:
            logger.warning(
                "Declaration %s has no closing brace; parsed %d field(s)",
                declaration.name,
                len(declaration.fields),
            )
        return declaration
