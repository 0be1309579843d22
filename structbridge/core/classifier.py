"""
Input classification.

Decides from the first line of the input whether the text is a Go struct
or a TypeScript interface.
"""

import re
from typing import Optional

from .schema import DeclarationKind

GO_STRUCT_HEADER = re.compile(r"^\s*type\s+(\w+)\s+struct\b")
TS_INTERFACE_HEADER = re.compile(r"^\s*(?:export\s+)?interface\s+(\w+)\b")


class ConversionError(Exception):
    """Base exception for inputs that cannot be converted."""

    kind = "ConversionError"
    message = "Conversion failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class EmptyInputError(ConversionError):
    """Raised when the input is empty or whitespace only."""

    kind = "EmptyInput"
    message = "Select a Go struct or TS interface."


class UnrecognizedInputError(ConversionError):
    """Raised when the first line is neither a struct nor an interface header."""

    kind = "UnrecognizedInput"
    message = "Not a Go struct or TS interface."


def classify(text: str) -> DeclarationKind:
    """
    Identify the notation of the input text.

    Only the first non-blank line is inspected; the body is not
    checked against the header keyword.

    Args:
        text: Raw input text

    Returns:
        The declaration kind of the input

    Raises:
        EmptyInputError: If the input is blank
        UnrecognizedInputError: If no declaration header is found
    """
    trimmed = text.strip()
    if not trimmed:
        raise EmptyInputError()

    first_line = trimmed.split("\n", 1)[0]
    if GO_STRUCT_HEADER.match(first_line):
        return DeclarationKind.GO_STRUCT
    if TS_INTERFACE_HEADER.match(first_line):
        return DeclarationKind.TS_INTERFACE

    raise UnrecognizedInputError()
